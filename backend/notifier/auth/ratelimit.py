# backend/notifier/auth/ratelimit.py

"""
/login 用のレートリミッタ。

アルゴリズム自体（固定ウィンドウ・カウンタ）は slowapi / limits に任せる。
クライアントの識別は接続元アドレスで行う。
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

# 1クライアントあたり 60 秒間に 20 リクエストまで
LOGIN_RATE_LIMIT = "20/minute"

limiter = Limiter(key_func=get_remote_address)


def reset_limiter() -> None:
    """
    テスト用にカウンタをすべてリセットする。
    """
    limiter.reset()
