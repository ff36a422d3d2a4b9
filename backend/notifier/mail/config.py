# backend/notifier/mail/config.py

from dataclasses import dataclass

from notifier.utils.config import get_env, get_env_int

DEFAULT_SMTP_HOST = "smtp.office365.com"
DEFAULT_SMTP_PORT = 587


@dataclass(frozen=True)
class SmtpSettings:
    """
    SMTP リレー接続用の設定値。

    user は認証ユーザーであると同時に From アドレスとしても使う。
    """

    host: str
    port: int
    user: str
    password: str
    starttls: bool = True


def get_smtp_settings() -> SmtpSettings:
    """
    SMTP 設定値を環境変数から読み出す。

    必須:
      - EMAIL_USER
      - EMAIL_PASS

    任意:
      - SMTP_HOST（デフォルト smtp.office365.com）
      - SMTP_PORT（デフォルト 587, STARTTLS）
    """
    user = get_env("EMAIL_USER")
    password = get_env("EMAIL_PASS")

    host = get_env("SMTP_HOST", default=DEFAULT_SMTP_HOST, required=False)
    port = get_env_int("SMTP_PORT", default=DEFAULT_SMTP_PORT)

    return SmtpSettings(host=host, port=port, user=user, password=password)
