# backend/tests/conftest.py
"""
Pytest configuration for Mail2Chat backend tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import mail2chat.*` works correctly in tests.
- Ensures Slack environment variables from the developer's shell
  do not leak into tests (the logging transport is used by default).
"""

import sys
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)


_ensure_project_root_in_sys_path()


@pytest.fixture(autouse=True)
def _clear_slack_env(monkeypatch):
    """
    Remove real Slack settings for every test.

    Tests that need them set dummy values explicitly via monkeypatch.setenv.
    """
    for name in ("SLACK_WEBHOOK_URL", "SLACK_CHANNEL", "SLACK_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    from mail2chat.notifications.factory import reset_notification_handler

    reset_notification_handler()
    yield
    reset_notification_handler()
