# backend/mail2chat/notifications/__init__.py

"""
チャット通知レイヤ用モジュール群。

構成イメージ:
- schemas: チャット通知メッセージ（ChatMessage）
- transport: 送信インターフェースと Slack / ログ出力の実装
- config: Slack Webhook の設定値
- handler: メール系メッセージ → ChatMessage の変換と送信
- factory: アプリ全体で共有するハンドラの生成
"""

from .factory import get_notification_handler, reset_notification_handler
from .handler import (
    EmailToChatNotificationHandler,
    EmptyContentError,
    InvalidInputError,
    NotificationHandlerError,
    UnsupportedTypeError,
)
from .schemas import ChatMessage
from .transport import (
    Chatter,
    LoggingChatTransport,
    SlackTransportError,
    SlackWebhookTransport,
    TransportError,
)

__all__ = [
    "ChatMessage",
    "Chatter",
    "EmailToChatNotificationHandler",
    "EmptyContentError",
    "InvalidInputError",
    "LoggingChatTransport",
    "NotificationHandlerError",
    "SlackTransportError",
    "SlackWebhookTransport",
    "TransportError",
    "UnsupportedTypeError",
    "get_notification_handler",
    "reset_notification_handler",
]
