# backend/notifier/utils/daily_log.py

"""
日付ごとのログファイルに書き出す logging ハンドラ。

- 1日 1ファイル（ファイル名: dd.MM.yyyy.log）
- 1行 1エントリ: "[HH:MM:SS] [LEVEL] message"
- 時刻は常に Europe/Zurich（ホストのタイムゾーンに依存しない）
- 書き込みのたびに古いファイルを削除し、最大 170 ファイルに保つ

ログ出力の失敗は呼び出し側に伝播させない。
失敗内容は logging 標準の handleError 経由で stderr に出す。
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union
from zoneinfo import ZoneInfo

from notifier.utils.config import get_env

LOG_TIMEZONE = ZoneInfo("Europe/Zurich")
MAX_LOG_FILES = 170
LOG_FILE_SUFFIX = ".log"
DEFAULT_LOG_DIR = "log"

LOGGER_NAME = "notifier"


class ZurichFormatter(logging.Formatter):
    """asctime を Europe/Zurich のローカル時刻で出力する Formatter。"""

    def __init__(self) -> None:
        super().__init__(fmt="[%(asctime)s] [%(levelname)s] %(message)s", datefmt="%H:%M:%S")

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        created = datetime.fromtimestamp(record.created, tz=LOG_TIMEZONE)
        return created.strftime(datefmt or self.datefmt or "%H:%M:%S")


class DailyFileHandler(logging.Handler):
    """
    LogRecord を日付名のファイルに追記するハンドラ。

    ログディレクトリを作成できなかった場合は、そのプロセスの間ずっと
    何もしないハンドラとして振る舞う。
    """

    def __init__(
        self,
        log_dir: Union[str, Path],
        *,
        max_files: int = MAX_LOG_FILES,
        level: int = logging.INFO,
    ) -> None:
        super().__init__(level=level)
        self.log_dir = Path(log_dir)
        self.max_files = max_files
        self.disabled = False
        self.setFormatter(ZurichFormatter())

        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            print(f"[Logger Init Error] Failed to create log dir: {exc}", file=sys.stderr)
            self.disabled = True

    def file_for(self, record: logging.LogRecord) -> Path:
        """record の作成日（Zurich 時刻）に対応するログファイルのパス。"""
        day = datetime.fromtimestamp(record.created, tz=LOG_TIMEZONE)
        return self.log_dir / f"{day.strftime('%d.%m.%Y')}{LOG_FILE_SUFFIX}"

    def emit(self, record: logging.LogRecord) -> None:
        if self.disabled:
            return

        try:
            line = self.format(record)
            with open(self.file_for(record), "a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except Exception:  # noqa: BLE001 - ログ失敗は呼び出し元に伝播させない
            self.handleError(record)
            return

        try:
            self.enforce_retention()
        except Exception:  # noqa: BLE001
            self.handleError(record)

    def enforce_retention(self) -> List[Path]:
        """
        最終更新時刻の古い順に並べ、max_files を超えた分を削除する。

        :return: 削除したファイルのパス一覧
        """
        files = [
            path
            for path in self.log_dir.iterdir()
            if path.is_file() and path.name.endswith(LOG_FILE_SUFFIX)
        ]
        files.sort(key=lambda path: (path.stat().st_mtime, path.name))

        removed: List[Path] = []
        while len(files) > self.max_files:
            oldest = files.pop(0)
            oldest.unlink()
            removed.append(oldest)
        return removed


def configure_logging(log_dir: Optional[Union[str, Path]] = None) -> DailyFileHandler:
    """
    notifier ロガーに DailyFileHandler を取り付けて返す。

    アプリ起動時に 1回呼ぶ想定。複数回呼ばれた場合は既存の
    DailyFileHandler を差し替える（テストで create_app を何度も呼ぶため）。
    """
    target_dir = log_dir or get_env("LOG_DIR", default=DEFAULT_LOG_DIR, required=False)

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if isinstance(existing, DailyFileHandler):
            logger.removeHandler(existing)
            existing.close()

    handler = DailyFileHandler(os.fspath(target_dir))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return handler
