# backend/mail2chat/notifications/handler.py

"""
メール系メッセージをチャット通知に変換し、Chatter 経由で送信するハンドラ。

処理の流れ（1 呼び出しで完結、状態は持たない）:
1. 入力がサポート対象の型か判定する（send のみ）
2. 型ごとに件名・本文を取り出す
3. 件名・本文が両方 None なら例外
4. "*件名*" と本文を改行で連結して ChatMessage を作る
5. Chatter に渡す。TransportError はログに残すだけで呼び出し元には伝播させない
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Tuple

from mail2chat.mail.schemas import Email, EmailMessage, RawMessage

from .schemas import ChatMessage
from .transport import TransportError

logger = logging.getLogger(__name__)

DEFAULT_RAW_SUBJECT = "New Message"


class NotificationHandlerError(Exception):
    """通知ハンドラの入力検証エラーの基底例外。"""


class UnsupportedTypeError(NotificationHandlerError, TypeError):
    """サポート対象外の型のメッセージが渡された場合の例外。"""


class InvalidInputError(NotificationHandlerError, ValueError):
    """変換処理でどの型にも該当しなかった場合の例外。"""


class EmptyContentError(NotificationHandlerError, ValueError):
    """件名・本文のどちらも持たないメッセージが渡された場合の例外。"""


class Notifier(Protocol):
    """ハンドラが依存する通知送信口（Chatter など）。"""

    def send(self, message: ChatMessage) -> None:  # pragma: no cover - Protocol
        ...


class EmailToChatNotificationHandler:
    """
    Email / EmailMessage / RawMessage をチャット通知に変換して送るハンドラ。

    - notifier: ChatMessage を送信するオブジェクト（Chatter 想定）
    - logger_: 送信失敗の記録先（省略時はモジュールの logger）
    """

    # Email は RawMessage のサブクラスなので、判定順は Email を先にする。
    SUPPORTED_TYPES: Tuple[type, ...] = (Email, EmailMessage, RawMessage)

    def __init__(self, notifier: Notifier, logger_: logging.Logger | None = None) -> None:
        self._notifier = notifier
        self._logger = logger_ or logger

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    def supports(self, message: object) -> bool:
        return isinstance(message, self.SUPPORTED_TYPES)

    def send(self, message: object) -> bool:
        """
        メッセージをチャット通知に変換して送信する。

        :raises UnsupportedTypeError: サポート対象外の型の場合（変換前に判定）。
        :raises EmptyContentError: 件名・本文が両方とも無い場合。
        :return: 常に True。送信失敗（TransportError）はログに記録するだけで、
                 呼び出し元には成功として返す（送りっぱなし）。
        """
        if not self.supports(message):
            raise UnsupportedTypeError("Email message type is not supported.")

        notification = self.from_email(message)

        try:
            self._notifier.send(notification)
        except TransportError as exc:
            self._logger.error(str(exc))

        return True

    @staticmethod
    def from_email(message: object) -> ChatMessage:
        """
        メッセージから件名・本文を取り出し、ChatMessage を組み立てる。

        副作用なし。send() の型判定を経ずに直接呼ばれることもあるため、
        どの型にも当たらない場合の分岐（InvalidInputError）を残している。

        :raises InvalidInputError: Email / EmailMessage / RawMessage のいずれでもない場合。
        :raises EmptyContentError: 件名・本文が両方とも None の場合。
        """
        subject: Optional[str]
        content: Optional[str]

        if isinstance(message, Email):
            subject = message.subject
            content = message.text
        elif isinstance(message, EmailMessage):
            subject = message.subject
            content = message.message.to_string()
        elif isinstance(message, RawMessage):
            subject = DEFAULT_RAW_SUBJECT
            content = message.to_string()
        else:
            raise InvalidInputError("Improper email message object type.")

        if subject is None and content is None:
            raise EmptyContentError("Message object does not contain any information.")

        parts: List[str] = []
        if subject is not None:
            parts.append(f"*{subject}*")
        if content is not None:
            parts.append(content)

        text = "\n".join(parts)
        if not text:
            # 本文が空文字のみ、かつ件名なし
            raise EmptyContentError("Message object does not contain any information.")

        return ChatMessage(subject=text)
