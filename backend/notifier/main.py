# backend/notifier/main.py

"""
バックエンドアプリケーションのエントリーポイント。

主な責務:
- /login, /notifier エンドポイントを公開する
- localhost 以外からのアクセスを遮断する
- 日付ごとのログファイル出力を初期化する
"""

import logging

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from notifier.auth.access import localhost_only
from notifier.auth.ratelimit import limiter
from notifier.auth.router import router as auth_router
from notifier.errors import register_exception_handlers
from notifier.notifications.router import router as notifications_router
from notifier.utils.config import get_env, get_env_int
from notifier.utils.daily_log import configure_logging

logger = logging.getLogger(__name__)

load_dotenv()


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    - 認証エンドポイント (/login)
    - 通知エンドポイント (/notifier)
    - ヘルスチェックエンドポイント (/health)
    """
    configure_logging()

    app = FastAPI(title="Notifier Gateway")

    # slowapi の例外ハンドラ等は app.state.limiter を参照する
    app.state.limiter = limiter
    register_exception_handlers(app)

    # すべてのリクエストに対して最初に実行される
    app.middleware("http")(localhost_only)

    # ルーター登録
    app.include_router(auth_router)
    app.include_router(notifications_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        モニタリングや動作確認用。
        """
        return {"status": "ok"}

    return app


def run() -> None:
    """
    uvicorn でサーバを起動する（notifier-gateway コマンド）。

    PORT（デフォルト 3000）と HOST（デフォルト 127.0.0.1）を環境変数から読む。
    """
    port = get_env_int("PORT", default=3000)
    host = get_env("HOST", default="127.0.0.1", required=False)

    logger.info(f"🚀 Notifier app running on http://localhost:{port}")
    uvicorn.run(app, host=host, port=port)


# uvicorn 実行時のエントリーポイント
app = create_app()


if __name__ == "__main__":
    run()
