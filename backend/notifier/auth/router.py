# backend/notifier/auth/router.py

import hmac
import logging
from datetime import timedelta
from typing import Any, Optional

from fastapi import APIRouter, Body, Request

from notifier.errors import AuthorizationError, GatewayError, UnexpectedError, ValidationError

from .config import AuthSettings, get_auth_settings
from .ratelimit import LOGIN_RATE_LIMIT, limiter
from .schemas import LoginRequest, TokenResponse
from .tokens import issue_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _matches(given: Any, expected: Optional[str]) -> bool:
    if expected is None or not isinstance(given, str):
        return False
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def credentials_valid(settings: AuthSettings, username: Any, password: Any) -> bool:
    """
    ユーザー名とパスワードの両方を必ず比較する（どちらが違ったかを漏らさない）。
    """
    user_ok = _matches(username, settings.auth_user)
    pass_ok = _matches(password, settings.auth_pass)
    return user_ok and pass_ok


# NOTE: slowapi のデコレータは request 引数を必要とする。
# また関数を包むため、このモジュールでは from __future__ import annotations を使わない。
@router.post(
    "/login",
    response_model=TokenResponse,
    summary="認証してセッショントークンを取得",
    description="AUTH_USER / AUTH_PASS と一致した場合に 24時間有効なトークンを返す。",
)
@limiter.limit(LOGIN_RATE_LIMIT)
def login(request: Request, body: Any = Body(None)) -> TokenResponse:
    """
    ボディはスキーマ検証をかけずに受け取るので、型が違うリクエストもレート制限の対象になる。

    - 項目欠落 → 400
    - 認証情報の不一致 → 403
    - レート超過 → 429（slowapi が送出し、例外ハンドラで変換）
    - 想定外の例外（SECRET_KEY 未設定など） → 500
    """
    try:
        credentials = LoginRequest.from_body(body)
        if not credentials.username or not credentials.password:
            logger.warning("Login rejected: username or password missing")
            raise ValidationError("❌ username and password required")

        settings = get_auth_settings()

        if not credentials_valid(settings, credentials.username, credentials.password):
            logger.warning(f"Failed login for user: {credentials.username}")
            raise AuthorizationError("❌ Invalid credentials")

        token = issue_token(
            settings.secret_key,
            ttl=timedelta(hours=settings.token_ttl_hours),
        )
    except GatewayError:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.error(f"/login error: {exc}")
        raise UnexpectedError("❌ Server error") from exc

    logger.info(f"Issued session token for user: {credentials.username}")
    return TokenResponse(token=token)
