# backend/notifier/mail/service.py

"""
メール送信の窓口となる MailDispatcher。

1回の send_email() で行うこと:
1. Asana へのタスク登録（ベストエフォート。失敗はログに残して捨てる）
2. SMTP による 1通のメール送信（失敗はログに残して呼び出し元へ再送出）

どちらも 1回ずつしか試行しない。リトライは行わない。
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Protocol, Sequence

from notifier.asana.client import AsanaClient

from .client import SmtpMailClient

logger = logging.getLogger(__name__)


class MailClient(Protocol):
    def send(self, targets: Sequence[str], subject: str, html_body: str) -> None:  # pragma: no cover - Protocol
        ...


class TaskTracker(Protocol):
    def create_task(self, name: str, notes: str) -> Any:  # pragma: no cover - Protocol
        ...


class MailDispatcher:
    """
    Asana 通知とメール送信を順番に実行するサービス。

    - task_tracker を渡さない場合は呼び出しのたびに AsanaClient を生成する。
      Asana の設定が無い環境でも「試行して失敗をログに残す」挙動になる。
    - logger_ を渡すとそのロガーに出力する（テストや別ハンドラ用）。
    """

    def __init__(
        self,
        mail_client: Optional[MailClient] = None,
        task_tracker: Optional[TaskTracker] = None,
        logger_: logging.Logger | None = None,
    ) -> None:
        self._mail_client: MailClient = mail_client or SmtpMailClient()
        self._task_tracker = task_tracker
        self._logger = logger_ or logger

    def notify_task_tracker(self, subject: str, html_body: str) -> Optional[Exception]:
        """
        Asana にタスクを登録する。

        例外は外に出さず、ログに記録したうえで戻り値として返す。
        成功時は None。
        """
        try:
            tracker = self._task_tracker or AsanaClient()
            tracker.create_task(subject, html_body)
        except Exception as exc:  # noqa: BLE001 - Asana 失敗でメール送信は止めない
            self._logger.error(f"Asana notification failed: {exc}")
            return exc
        return None

    def send_email(self, targets: Sequence[str], subject: str, html_body: str) -> None:
        """
        targets 全員宛てに HTML メールを 1通送る。

        :raises Exception: メール送信に失敗した場合（ログ出力後にそのまま再送出）。
        """
        recipients: List[str] = list(targets)

        # 戻り値（Asana 側のエラー）は意図的に捨てる
        self.notify_task_tracker(subject, html_body)

        try:
            self._mail_client.send(recipients, subject, html_body)
        except Exception as exc:
            self._logger.error(f"sendEmail error: {exc}")
            raise

        self._logger.info(f"Email sent to: {', '.join(recipients)}")
