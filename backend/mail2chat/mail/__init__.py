# backend/mail2chat/mail/__init__.py

"""
通知ハンドラが受け付けるメール系メッセージの定義。

- RawMessage: 構造を持たない生メッセージ
- Email: 件名・本文を持つ構造化メール（RawMessage のサブクラス）
- EmailMessage: 生メッセージを包み、件名を公開する合成メッセージ
"""

from .schemas import Email, EmailLike, EmailMessage, RawMessage

__all__ = [
    "Email",
    "EmailLike",
    "EmailMessage",
    "RawMessage",
]
