# backend/mail2chat/notifications/schemas.py

"""
チャット通知メッセージのスキーマ定義。

ChatMessage は 1 回の変換ごとに新しく生成され、呼び出し元に所有権が移る。
空文字だけの通知は生成できない（min_length=1）。
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """
    チャットチャンネル向けの通知 1件分。

    subject には整形済みのテキスト全体が入る（Slack mrkdwn 想定）。
    """

    model_config = ConfigDict(frozen=True)

    subject: str = Field(
        ...,
        min_length=1,
        description="チャットに投稿する整形済みテキスト。",
    )
