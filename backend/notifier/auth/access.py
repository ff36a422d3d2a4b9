# backend/notifier/auth/access.py

"""
localhost 以外からのリクエストを拒否する HTTP ミドルウェア。

ルーティング・ボディ解析・レート制限・トークン検証よりも前に実行される。
"""

import ipaddress
import logging
from typing import Awaitable, Callable, Optional

from fastapi import Request, Response

from notifier.errors import AuthorizationError, error_response

logger = logging.getLogger(__name__)

LOCALHOST_ONLY_MESSAGE = "❌ Only localhost allowed"


def get_client_ip(request: Request) -> Optional[str]:
    """接続元アドレス。ASGI サーバから渡されない場合は None。"""
    if request.client is None:
        return None
    return request.client.host


def is_loopback(host: Optional[str]) -> bool:
    """
    host がループバックアドレスかどうか。

    - 127.0.0.0/8, ::1
    - ::ffff:127.0.0.1 のような IPv4 射影アドレス
    パースできない値（ホスト名など）はリモート扱い。
    """
    if not host:
        return False

    try:
        address = ipaddress.ip_address(host)
    except ValueError:
        return False

    mapped = getattr(address, "ipv4_mapped", None)
    if mapped is not None:
        return mapped.is_loopback
    return address.is_loopback


async def localhost_only(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    ip = get_client_ip(request)
    if not is_loopback(ip):
        logger.warning(f"Blocked remote IP: {ip}")
        return error_response(AuthorizationError(LOCALHOST_ONLY_MESSAGE))
    return await call_next(request)
