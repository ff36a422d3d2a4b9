# backend/notifier/asana/client.py

"""
Asana API との通信を担当するクライアントモジュール。
"""

from typing import Any, Dict, Optional

import httpx

from .config import AsanaConfig, get_asana_config


class AsanaClientError(RuntimeError):
    """Asana クライアント全般の例外。"""


class AsanaAuthError(AsanaClientError):
    """認証・権限関連のエラー。"""


class AsanaAPIError(AsanaClientError):
    """その他 Asana API 呼び出し時のエラー。"""


class AsanaClient:
    """
    Asana API の薄いラッパークライアント。

    - 通知 1件につきタスクを 1件作成する

    設定は create_task() の呼び出し時に読み込む。未設定の場合は
    EnvVarMissingError がそのまま呼び出し元へ伝わる。
    """

    def __init__(self, config: Optional[AsanaConfig] = None, timeout: float = 10.0) -> None:
        self._config = config
        self._timeout = timeout

    @property
    def config(self) -> AsanaConfig:
        if self._config is None:
            self._config = get_asana_config()
        return self._config

    def _build_headers(self) -> Dict[str, str]:
        """
        Asana API 呼び出しに必要なヘッダーを構築。
        """
        return {
            "Authorization": f"Bearer {self.config.access_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _raise_for_status(self, response: httpx.Response) -> None:
        """
        HTTP レスポンスコードに応じて適切な例外を投げる。
        """
        if response.status_code == 401:
            raise AsanaAuthError("Unauthorized. Check ASANA_ACCESS_TOKEN.")
        if response.status_code == 403:
            raise AsanaAuthError("Forbidden. Check Asana project permissions.")
        if response.status_code >= 400:
            raise AsanaAPIError(
                f"Asana API error: {response.status_code} {response.text}"
            )

    def create_task(self, name: str, notes: str) -> Dict[str, Any]:
        """
        設定されたプロジェクトにタスクを 1件作成する。

        :param name: タスク名（メールの件名）
        :param notes: タスク本文（メールの HTML 本文をそのまま入れる）
        :return: Asana が返した task オブジェクト（data 部分）
        """
        url = f"{self.config.api_base_url}/tasks"

        data: Dict[str, Any] = {
            "name": name,
            "notes": notes,
            "projects": [self.config.project_id],
        }
        if self.config.workspace_id:
            data["workspace"] = self.config.workspace_id

        try:
            response = httpx.post(
                url,
                headers=self._build_headers(),
                json={"data": data},
                timeout=self._timeout,
            )
        except httpx.RequestError as exc:
            raise AsanaClientError(f"Failed to call Asana API: {exc}") from exc

        self._raise_for_status(response)

        try:
            body = response.json()
        except ValueError as exc:
            raise AsanaAPIError("Unexpected Asana API response: body is not JSON.") from exc

        task = body.get("data") if isinstance(body, dict) else None
        if not isinstance(task, dict):
            raise AsanaAPIError("Unexpected Asana API response format: 'data' is not an object.")

        return task
