# backend/notifier/errors.py

"""
ゲートウェイ全体で使う例外と、HTTP レスポンスへの変換。

レスポンスボディは常に {"msg": "..."} の形にそろえる。
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """ゲートウェイの基底例外。status_code と利用者向けメッセージを持つ。"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


class ValidationError(GatewayError):
    """リクエストの必須項目欠落・形式不正。"""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(GatewayError):
    """トークンが提示されていない。"""

    status_code = status.HTTP_401_UNAUTHORIZED


class AuthorizationError(GatewayError):
    """トークン不正・期限切れ、認証情報の不一致、ローカル以外からのアクセス。"""

    status_code = status.HTTP_403_FORBIDDEN


class RateLimitError(GatewayError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS


class DependencyError(GatewayError):
    """メール送信など外部サービス呼び出しの失敗。"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UnexpectedError(GatewayError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


LOGIN_RATE_LIMIT_MESSAGE = "❌ Too many login attempts. Try again later."
INVALID_BODY_MESSAGE = "❌ Invalid request body"


def error_response(exc: GatewayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.msg})


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    return error_response(exc)


async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """slowapi の RateLimitExceeded を固定メッセージの 429 に変換する。"""
    logger.warning(f"Rate limit exceeded on {request.url.path}: {exc.detail}")
    return error_response(RateLimitError(LOGIN_RATE_LIMIT_MESSAGE))


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    FastAPI 標準の 422 を 400 に寄せる。

    JSON が壊れている・型が違うなどのケースもすべて「クライアントエラー」として扱う。
    """
    logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
    return error_response(ValidationError(INVALID_BODY_MESSAGE))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
