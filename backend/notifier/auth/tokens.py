# backend/notifier/auth/tokens.py

"""
セッショントークン（HS256 JWT）の発行と検証。

ペイロードは {"session": true, "iat": ..., "exp": ...} のみ。
サーバ側での失効リストは持たず、有効期限切れだけが終了条件。
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

ALGORITHM = "HS256"


class TokenError(Exception):
    """トークンが不正・改ざん・期限切れの場合の例外。"""


def issue_token(
    secret_key: str,
    *,
    ttl: timedelta = timedelta(hours=24),
    now: Optional[datetime] = None,
) -> str:
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "session": True,
        "iat": issued_at,
        "exp": issued_at + ttl,
    }
    return jwt.encode(payload, secret_key, algorithm=ALGORITHM)


def verify_token(token: str, secret_key: str) -> Dict[str, Any]:
    """
    トークンを検証し、デコード済みペイロードを返す。

    :raises TokenError: 署名不一致・期限切れ・形式不正の場合。
    """
    if not token:
        raise TokenError("Token is empty.")

    try:
        return jwt.decode(
            token,
            secret_key,
            algorithms=[ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise TokenError("Token has expired.") from exc
    except jwt.PyJWTError as exc:
        raise TokenError(f"Invalid token: {exc}") from exc
