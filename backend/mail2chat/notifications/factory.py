# backend/mail2chat/notifications/factory.py

"""
通知ハンドラの簡易ファクトリ。

- SLACK_WEBHOOK_URL が設定されていれば SlackWebhookTransport を使う。
- 未設定なら LoggingChatTransport（ログ出力のみ）にフォールバックする。
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import get_slack_settings, is_slack_configured
from .handler import EmailToChatNotificationHandler
from .transport import ChatTransport, Chatter, LoggingChatTransport, SlackWebhookTransport

logger = logging.getLogger(__name__)

_notification_handler: Optional[EmailToChatNotificationHandler] = None


def build_transport() -> ChatTransport:
    """環境変数に応じてトランスポートを選ぶ。"""
    if is_slack_configured():
        return SlackWebhookTransport(get_slack_settings())

    logger.info("SLACK_WEBHOOK_URL is not set. Chat messages will only be logged.")
    return LoggingChatTransport()


def get_notification_handler() -> EmailToChatNotificationHandler:
    """
    アプリ全体で共有する EmailToChatNotificationHandler を返す。

    初回呼び出し時にのみ生成し、それ以降は同じインスタンスを返す。
    """
    global _notification_handler
    if _notification_handler is None:
        _notification_handler = EmailToChatNotificationHandler(Chatter(build_transport()))
    return _notification_handler


def reset_notification_handler() -> None:
    """共有インスタンスを破棄する（設定変更後やテスト用）。"""
    global _notification_handler
    _notification_handler = None
