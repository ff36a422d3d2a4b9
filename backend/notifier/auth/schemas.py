# backend/notifier/auth/schemas.py

from typing import Any, Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """
    /login のリクエストボディ。

    型チェックで弾くとレートリミッタに到達する前に 422 になってしまうため、
    ボディは生の JSON として受け取り、ルーター内でこのモデルに詰め替える。
    値の型は問わず、文字列以外は認証情報の不一致として扱う。
    """

    username: Optional[Any] = Field(None, description="AUTH_USER と照合するユーザー名")
    password: Optional[Any] = Field(None, description="AUTH_PASS と照合するパスワード")

    @classmethod
    def from_body(cls, body: Any) -> "LoginRequest":
        """JSON オブジェクト以外（配列・文字列など）は空のリクエストとみなす。"""
        if not isinstance(body, dict):
            return cls()
        return cls.model_validate(body)


class TokenResponse(BaseModel):
    token: str = Field(..., description="24時間有効なセッショントークン（JWT）")
