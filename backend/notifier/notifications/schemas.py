# backend/notifier/notifications/schemas.py

"""
/notifier のリクエスト・レスポンススキーマ定義。

必須チェックはすべてルーター側で行い、項目ごとに決まったメッセージの 400 を返す。
そのためリクエスト側のフィールドはすべて任意にしている。
宛先は型を問わず受け取り、形式チェック（validation.py）で判定する。
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class NotificationRequest(BaseModel):
    """
    通知 1件分のリクエスト。

    receiver と receivers の両方がある場合は receiver を優先する。
    """

    receiver: Optional[Any] = Field(None, description="単一の宛先アドレス")
    receivers: Optional[Any] = Field(
        None,
        description="複数の宛先アドレス（順序を保持）",
    )
    title: Optional[str] = Field(None, description="メールの件名")
    message: Optional[str] = Field(None, description="HTML 本文")

    @classmethod
    def from_body(cls, body: Any) -> "NotificationRequest":
        """JSON オブジェクト以外（配列など）は項目なしのリクエストとみなす。"""
        if not isinstance(body, dict):
            return cls()
        return cls.model_validate(body)


def is_empty_body(body: Any) -> bool:
    """ボディ無し、またはキー（要素）を 1つも持たないボディかどうか。"""
    if body is None:
        return True
    if isinstance(body, (dict, list, str)):
        return len(body) == 0
    return False


class NotificationAccepted(BaseModel):
    """送信成功時のレスポンス。正規化後の宛先一覧をそのまま返す。"""

    msg: str = Field(..., description="結果メッセージ")
    to: List[str] = Field(..., description="実際に送信した宛先一覧")
    title: str = Field(..., description="件名")
    html: str = Field(..., description="送信した HTML 本文")
