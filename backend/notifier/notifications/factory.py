# backend/notifier/notifications/factory.py

"""
MailDispatcher の簡易ファクトリ。

- SmtpMailClient と（呼び出し時に生成される）AsanaClient を使う構成を返す。
- テストでは FastAPI の dependency_overrides で差し替える。
"""

from typing import Optional

from notifier.mail.client import SmtpMailClient
from notifier.mail.service import MailDispatcher

_mail_dispatcher: Optional[MailDispatcher] = None


def get_mail_dispatcher() -> MailDispatcher:
    """
    アプリ全体で共有する MailDispatcher を返す。

    初回呼び出し時にのみ生成し、それ以降は同じインスタンスを返す。
    """
    global _mail_dispatcher
    if _mail_dispatcher is None:
        _mail_dispatcher = MailDispatcher(mail_client=SmtpMailClient())
    return _mail_dispatcher


def reset_mail_dispatcher() -> None:
    """
    テスト用に共有インスタンスを破棄する。
    """
    global _mail_dispatcher
    _mail_dispatcher = None
