# backend/notifier/notifications/validation.py

import re
from typing import Any, List, Sequence

# local@domain.tld（空白と余分な @ を含まない）だけを見る簡易チェック
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(value: object) -> bool:
    if not isinstance(value, str):
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None


def resolve_targets(receiver: Any, receivers: Any) -> List[Any]:
    """
    送信先リストを決める。

    - receiver が空でなければ [receiver] のみ（receivers は無視）
    - それ以外で receivers がリストならその内容
    - どちらも無ければ空リスト
    """
    if receiver:
        return [receiver]
    if isinstance(receivers, (list, tuple)):
        return list(receivers)
    return []


def find_invalid_emails(targets: Sequence[Any]) -> List[Any]:
    """形式チェックに通らなかったアドレスを、元の順序のまま返す。"""
    return [target for target in targets if not is_valid_email(target)]
