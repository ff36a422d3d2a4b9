# backend/tests/conftest.py
"""
Pytest configuration for notifier gateway tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import notifier.*` works correctly in tests.
- Ensures required environment variables for tests are set
  with safe dummy values (SECRET_KEY, AUTH_USER, EMAIL_USER, ...).
- Points LOG_DIR at a throwaway directory so tests never write to ./log.
"""

import os
import sys
import tempfile
from pathlib import Path


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


def _ensure_test_env_vars() -> None:
    """
    Set dummy environment variables required for tests.

    These values are only for local testing and do NOT contain real secrets.
    Asana variables are intentionally left unset.
    """
    os.environ.setdefault("SECRET_KEY", "dummy-secret-key-for-tests")
    os.environ.setdefault("AUTH_USER", "test-user")
    os.environ.setdefault("AUTH_PASS", "test-pass")
    os.environ.setdefault("EMAIL_USER", "sender@example.com")
    os.environ.setdefault("EMAIL_PASS", "dummy-email-pass")
    os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="notifier-test-logs-"))


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()
