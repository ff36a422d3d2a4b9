# backend/notifier/notifications/router.py

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError as SchemaError

from notifier.auth.dependencies import require_token
from notifier.errors import (
    INVALID_BODY_MESSAGE,
    DependencyError,
    GatewayError,
    UnexpectedError,
    ValidationError,
)
from notifier.mail.service import MailDispatcher

from .factory import get_mail_dispatcher
from .schemas import NotificationAccepted, NotificationRequest, is_empty_body
from .validation import find_invalid_emails, resolve_targets

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notifications"])

ACCEPTED_MESSAGE = "✅ Message accepted"


@router.post(
    "/notifier",
    response_model=NotificationAccepted,
    summary="HTML メッセージを 1人以上の宛先に送信",
    description=(
        "receiver（単一）または receivers（複数）の宛先に、title を件名、"
        "message を HTML 本文としたメールを 1通送信する。"
    ),
)
def send_notification(
    body: Any = Body(None),
    _token: Dict[str, Any] = Depends(require_token),
    dispatcher: MailDispatcher = Depends(get_mail_dispatcher),
) -> NotificationAccepted:
    """
    - ボディ空・必須項目欠落・宛先なし・アドレス不正 → 400
    - メール送信失敗 → 500（バリデーションエラーとは別メッセージ）
    - それ以外の想定外エラー → 500

    アドレス不正が 1件でもあれば、1通も送信しない。
    ボディはスキーマ検証をかけずに受け取り、判定はすべてここで行う。
    """
    try:
        if is_empty_body(body):
            logger.warning("Notification rejected: empty request body")
            raise ValidationError("❌ Empty request body")

        try:
            request = NotificationRequest.from_body(body)
        except SchemaError as exc:
            logger.warning(f"Notification rejected: invalid body {exc.errors()}")
            raise ValidationError(INVALID_BODY_MESSAGE) from exc

        if not request.title or not request.message:
            logger.warning("Notification rejected: title or message missing")
            raise ValidationError("❌ 'title' and 'message' are required")

        targets = resolve_targets(request.receiver, request.receivers)
        if not targets:
            logger.warning("Notification rejected: no receiver")
            raise ValidationError("❌ Provide 'receiver' or 'receivers' field")

        invalids = find_invalid_emails(targets)
        if invalids:
            invalid_text = ", ".join(str(target) for target in invalids)
            logger.warning(f"Notification rejected: invalid email(s) {invalid_text}")
            raise ValidationError(f"❌ Invalid email(s): {invalid_text}")

        logger.info(f"Notification to {', '.join(targets)} - {request.title}")
        try:
            dispatcher.send_email(targets, request.title, request.message)
        except Exception as exc:  # noqa: BLE001
            logger.error(f"sendEmail failed: {exc}")
            raise DependencyError("❌ Failed to send email") from exc
    except GatewayError:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.error(f"/notifier error: {exc}")
        raise UnexpectedError("❌ Internal error") from exc

    return NotificationAccepted(
        msg=ACCEPTED_MESSAGE,
        to=targets,
        title=request.title,
        html=request.message,
    )
