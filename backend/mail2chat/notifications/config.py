# backend/mail2chat/notifications/config.py

"""
Slack Incoming Webhook 連携に必要な設定値をまとめるモジュール。
"""

from dataclasses import dataclass
from typing import Optional

from mail2chat.utils.config import get_env


@dataclass(frozen=True)
class SlackSettings:
    """Slack Webhook 用の設定値コンテナ。"""

    webhook_url: str
    channel: Optional[str] = None
    timeout_seconds: float = 10.0


def _get_env_float(name: str, default: float) -> float:
    """
    数値（秒数など）の環境変数を取得するヘルパー。

    未設定ならデフォルト、不正な値・0 以下の値は RuntimeError にする。
    """
    raw = get_env(name, required=False)
    if raw is None:
        return default

    try:
        value = float(raw)
    except ValueError as exc:  # noqa: TRY003
        raise RuntimeError(
            f"Invalid numeric value for env var {name}: {raw!r}"
        ) from exc

    if value <= 0:
        raise RuntimeError(f"Env var {name} must be positive: {raw!r}")
    return value


def is_slack_configured() -> bool:
    """SLACK_WEBHOOK_URL が設定されているかどうか。"""
    return get_env("SLACK_WEBHOOK_URL", required=False) is not None


def get_slack_settings() -> SlackSettings:
    """
    環境変数から Slack 設定を読み込む。

    必須:
      - SLACK_WEBHOOK_URL

    任意:
      - SLACK_CHANNEL          (Webhook 既定チャンネルの上書き)
      - SLACK_TIMEOUT_SECONDS  (デフォルト: 10.0)
    """
    webhook_url = get_env("SLACK_WEBHOOK_URL")
    channel = get_env("SLACK_CHANNEL", required=False)
    timeout_seconds = _get_env_float("SLACK_TIMEOUT_SECONDS", default=10.0)

    return SlackSettings(
        webhook_url=webhook_url,
        channel=channel,
        timeout_seconds=timeout_seconds,
    )
