# backend/notifier/mail/client.py

import smtplib
import ssl
from email.mime.text import MIMEText
from typing import Optional, Sequence

from .config import SmtpSettings, get_smtp_settings


class MailTransportError(RuntimeError):
    """SMTP 接続・認証・送信のいずれかに失敗した場合の例外。"""


class SmtpMailClient:
    """
    SMTP リレー経由で HTML メールを送るクライアント。

    NOTE:
      - 宛先が複数でも 1通のメールとして送る（To ヘッダにカンマ区切りで並べる）。
      - タイムアウトは設けない。リレーが応答するかエラーを返すまで待つ。
    """

    def __init__(self, settings: Optional[SmtpSettings] = None) -> None:
        self._settings = settings

    @property
    def settings(self) -> SmtpSettings:
        # 送信のたびに読み直す。EMAIL_USER 未設定などは送信失敗として扱われる。
        return self._settings or get_smtp_settings()

    def build_message(
        self, sender: str, targets: Sequence[str], subject: str, html_body: str
    ) -> MIMEText:
        msg = MIMEText(html_body, "html", "utf-8")
        msg["From"] = sender
        msg["To"] = ", ".join(targets)
        msg["Subject"] = subject
        return msg

    def send(self, targets: Sequence[str], subject: str, html_body: str) -> None:
        """
        1通のメールを targets 全員に送信する。

        :raises MailTransportError: 接続・STARTTLS・認証・送信のいずれかに失敗した場合。
        """
        settings = self.settings
        msg = self.build_message(settings.user, targets, subject, html_body)

        try:
            with smtplib.SMTP(settings.host, settings.port) as server:
                if settings.starttls:
                    server.starttls(context=ssl.create_default_context())
                server.login(settings.user, settings.password)
                server.send_message(msg, from_addr=settings.user, to_addrs=list(targets))
        except (smtplib.SMTPException, OSError) as exc:
            raise MailTransportError(
                f"SMTP send via {settings.host}:{settings.port} failed: {exc}"
            ) from exc
