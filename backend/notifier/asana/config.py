# backend/notifier/asana/config.py

"""
Asana 連携に必要な設定値をまとめるモジュール。
"""

from dataclasses import dataclass
from typing import Optional

from notifier.utils.config import get_env


@dataclass(frozen=True)
class AsanaConfig:
    """Asana API 用の設定値コンテナ。"""

    access_token: str
    project_id: str
    workspace_id: Optional[str]
    api_base_url: str


def get_asana_config() -> AsanaConfig:
    """
    環境変数から Asana 設定を読み込む。

    必須:
      - ASANA_ACCESS_TOKEN
      - ASANA_PROJECT_ID

    任意:
      - ASANA_WORKSPACE_ID
      - ASANA_API_BASE_URL (デフォルト: https://app.asana.com/api/1.0)

    未設定の場合は EnvVarMissingError を投げる。
    呼び出しのたびに読み直す（起動後に .env を差し替えても反映される）。
    """
    access_token = get_env("ASANA_ACCESS_TOKEN")
    project_id = get_env("ASANA_PROJECT_ID")

    workspace_id = get_env("ASANA_WORKSPACE_ID", required=False)
    api_base_url = get_env(
        "ASANA_API_BASE_URL",
        default="https://app.asana.com/api/1.0",
        required=False,
    )

    return AsanaConfig(
        access_token=access_token,
        project_id=project_id,
        workspace_id=workspace_id,
        api_base_url=api_base_url,
    )
