# backend/mail2chat/mail/schemas.py

"""
メール系メッセージのスキーマ定義。

いずれも不変（frozen）モデルで、通知ハンドラ側からは読み取り専用として扱う。

NOTE:
- Email は RawMessage を継承している（「メールは生メッセージの一種」）。
  そのため型で分岐する側は Email を先に判定すること。
"""

from __future__ import annotations

from email.message import EmailMessage as MIMEEmailMessage
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RawMessage(BaseModel):
    """
    構造を持たない生メッセージ。

    文字列化できる本文だけを持ち、件名は持たない。
    """

    model_config = ConfigDict(frozen=True)

    content: str = Field(
        default="",
        description="メッセージ全体のテキスト表現。",
    )

    def to_string(self) -> str:
        return self.content

    def __str__(self) -> str:
        return self.to_string()


class Email(RawMessage):
    """
    件名とテキスト本文を持つ構造化メール。

    subject / text はどちらも未設定（None）でありうる。

    NOTE:
    - RawMessage から継承した content は使わないため、指定するとエラーにする。
    - ヘッダになる項目（sender / to / cc / subject）に改行は入れられない。
    """

    sender: Optional[str] = Field(default=None, description="From アドレス。")
    to: List[str] = Field(default_factory=list, description="To アドレス一覧。")
    cc: List[str] = Field(default_factory=list, description="Cc アドレス一覧。")
    subject: Optional[str] = Field(default=None, description="件名。")
    text: Optional[str] = Field(default=None, description="プレーンテキスト本文。")
    html: Optional[str] = Field(default=None, description="HTML 本文。")

    @model_validator(mode="before")
    @classmethod
    def _reject_raw_content(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("content"):
            raise ValueError("Email does not use raw content; set text or html instead.")
        return data

    @field_validator("sender", "subject", "to", "cc")
    @classmethod
    def _reject_line_breaks(cls, value: Any) -> Any:
        values = value if isinstance(value, list) else [value]
        for item in values:
            if item is not None and ("\r" in item or "\n" in item):
                raise ValueError("Header values may not contain line breaks.")
        return value

    def to_mime(self) -> MIMEEmailMessage:
        """
        標準ライブラリの EmailMessage に変換する。

        text と html が両方ある場合は multipart/alternative になる。
        """
        mime = MIMEEmailMessage()
        if self.sender:
            mime["From"] = self.sender
        if self.to:
            mime["To"] = ", ".join(self.to)
        if self.cc:
            mime["Cc"] = ", ".join(self.cc)
        if self.subject is not None:
            mime["Subject"] = self.subject

        if self.text is not None:
            mime.set_content(self.text)
            if self.html is not None:
                mime.add_alternative(self.html, subtype="html")
        elif self.html is not None:
            mime.set_content(self.html, subtype="html")

        return mime

    def to_string(self) -> str:
        """
        RFC 5322 形式（ヘッダ + 空行 + 本文）の文字列を返す。

        非 ASCII の本文は base64 でエンコードされるため、
        EmailMessage で包んで通知すると本文はエンコード済みの文字列になる。
        """
        return self.to_mime().as_string()


class EmailMessage(BaseModel):
    """
    生メッセージ（または Email）を包み、件名を公開する合成メッセージ。

    subject を明示しなかった場合:
    - 包んでいるのが Email なら、その件名を引き継ぐ
    - それ以外は None のまま
    """

    model_config = ConfigDict(frozen=True)

    message: RawMessage = Field(..., description="包まれている元メッセージ。")
    subject: Optional[str] = Field(default=None, description="通知用の件名。")

    @model_validator(mode="before")
    @classmethod
    def _inherit_subject(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("subject") is not None:
            return data

        inner = data.get("message")
        if isinstance(inner, Email) and inner.subject is not None:
            return {**data, "subject": inner.subject}
        return data


# 通知ハンドラが扱える入力の型
EmailLike = Union[Email, EmailMessage, RawMessage]
