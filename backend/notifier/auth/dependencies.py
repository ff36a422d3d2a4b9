# backend/notifier/auth/dependencies.py

import logging
from typing import Any, Dict, Optional

from fastapi import Header

from notifier.errors import AuthenticationError, AuthorizationError
from notifier.utils.config import EnvVarMissingError

from .config import get_auth_settings
from .tokens import TokenError, verify_token

logger = logging.getLogger(__name__)


def _extract_token(authorization: str) -> str:
    """「Bearer <token>」の 2番目の要素を取り出す。無ければ空文字。"""
    parts = authorization.split(" ")
    return parts[1] if len(parts) > 1 else ""


def require_token(authorization: Optional[str] = Header(None)) -> Dict[str, Any]:
    """
    Authorization ヘッダのトークンを検証する Depends。

    - ヘッダ無し → 401
    - 不正・期限切れ（SECRET_KEY 未設定を含む） → 403
    """
    if not authorization:
        logger.warning("Rejected request without token")
        raise AuthenticationError("❌ Missing token")

    try:
        secret_key = get_auth_settings().secret_key
        return verify_token(_extract_token(authorization), secret_key)
    except EnvVarMissingError as exc:
        logger.error(f"Token verification unavailable: {exc}")
        raise AuthorizationError("❌ Invalid or expired token") from exc
    except TokenError as exc:
        logger.warning(f"Rejected token: {exc}")
        raise AuthorizationError("❌ Invalid or expired token") from exc
