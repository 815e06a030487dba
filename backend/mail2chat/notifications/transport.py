# backend/mail2chat/notifications/transport.py

"""
チャット通知の送信インターフェースと実装。

- ChatTransport: ChatMessage を受け取る send() インターフェース
- SlackWebhookTransport: Slack Incoming Webhook へ POST する実装
- LoggingChatTransport: ログ出力のみ行う実装（Webhook 未設定時のデフォルト）
- Chatter: ハンドラから見た通知送信口。1つのトランスポートへ委譲する

送信失敗は TransportError（およびそのサブクラス）で表す。
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Protocol

import httpx

from .config import SlackSettings, get_slack_settings
from .schemas import ChatMessage

logger = logging.getLogger(__name__)


class TransportError(RuntimeError):
    """チャット通知の送信に失敗した場合の基底例外（回復可能）。"""


class SlackTransportError(TransportError):
    """Slack Webhook が 2xx 以外を返した場合の例外。"""

    def __init__(self, status_code: int, body: Any | None = None) -> None:
        super().__init__(f"Slack webhook error: status_code={status_code}")
        self.status_code = status_code
        self.body = body


class ChatTransport(Protocol):
    """
    チャット通知送信の最小インターフェース。

    実装例:
    - SlackWebhookTransport: Slack Webhook 経由で送信
    - LoggingChatTransport: ログ出力のみ
    """

    def send(self, message: ChatMessage) -> None:  # pragma: no cover - Protocol
        ...


class SlackWebhookTransport:
    """
    Slack Incoming Webhook への HTTP トランスポート。

    本文は mrkdwn として解釈されるため、*件名* は太字で表示される。
    """

    def __init__(
        self,
        settings: SlackSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or get_slack_settings()
        self._client = client

    @property
    def webhook_url(self) -> str:
        return self._settings.webhook_url

    @property
    def timeout(self) -> float:
        return self._settings.timeout_seconds

    def _build_payload(self, message: ChatMessage) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"text": message.subject}
        if self._settings.channel:
            payload["channel"] = self._settings.channel
        return payload

    def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return self._client.post(self.webhook_url, json=payload, timeout=self.timeout)

        with httpx.Client(timeout=self.timeout) as client:
            return client.post(self.webhook_url, json=payload)

    def send(self, message: ChatMessage) -> None:
        """
        ChatMessage 1件を Slack に投稿する。

        :raises SlackTransportError: Slack が 4xx/5xx を返した場合。
        :raises TransportError: 接続エラーやタイムアウト時。
        """
        try:
            response = self._post(self._build_payload(message))
        except httpx.RequestError as exc:  # 接続エラー・タイムアウトなど
            raise TransportError(f"Failed to call Slack webhook: {exc}") from exc

        if response.status_code // 100 != 2:
            raise SlackTransportError(status_code=response.status_code, body=response.text)

        logger.debug("Chat message delivered to Slack webhook.")


class LoggingChatTransport:
    """
    ChatMessage を Python の logger に記録するだけのトランスポート。

    - SLACK_WEBHOOK_URL 未設定時のデフォルト
    - 外部サービスへの送信は行わない
    """

    def __init__(self, logger_: logging.Logger | None = None) -> None:
        self._logger = logger_ or logger

    def send(self, message: ChatMessage) -> None:
        self._logger.info("[chat] %s", message.subject)


class Chatter:
    """
    チャット通知の送信口。

    呼び出し元（通知ハンドラ）はトランスポートの種類を意識せず、
    このクラスの send() だけを使えばよい。
    """

    def __init__(self, transport: ChatTransport) -> None:
        self._transport = transport

    @property
    def transport(self) -> ChatTransport:
        return self._transport

    def send(self, message: ChatMessage) -> None:
        """
        受け取った ChatMessage をトランスポートへ渡す。

        TransportError はそのまま呼び出し元へ伝播させる。
        """
        self._transport.send(message)
