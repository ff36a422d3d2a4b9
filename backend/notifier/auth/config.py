# backend/notifier/auth/config.py

from dataclasses import dataclass
from typing import Optional

from notifier.utils.config import get_env, get_env_int

DEFAULT_TOKEN_TTL_HOURS = 24


@dataclass(frozen=True)
class AuthSettings:
    """
    /login と トークン検証に使う設定値。

    auth_user / auth_pass が未設定（None）の場合、どの認証情報とも一致しない。
    """

    secret_key: str
    auth_user: Optional[str]
    auth_pass: Optional[str]
    token_ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS


def get_auth_settings() -> AuthSettings:
    """
    認証設定を環境変数から読み出す。リクエストのたびに呼ばれる。

    必須:
      - SECRET_KEY（未設定なら EnvVarMissingError）

    任意:
      - AUTH_USER / AUTH_PASS
      - TOKEN_TTL_HOURS（デフォルト 24）
    """
    return AuthSettings(
        secret_key=get_env("SECRET_KEY"),
        auth_user=get_env("AUTH_USER", required=False),
        auth_pass=get_env("AUTH_PASS", required=False),
        token_ttl_hours=get_env_int("TOKEN_TTL_HOURS", default=DEFAULT_TOKEN_TTL_HOURS),
    )
