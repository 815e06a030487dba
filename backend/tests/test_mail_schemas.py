# backend/tests/test_mail_schemas.py

import pytest
from pydantic import ValidationError

from mail2chat.mail.schemas import Email, EmailMessage, RawMessage
from mail2chat.notifications.schemas import ChatMessage


def test_raw_message_to_string_returns_content() -> None:
    msg = RawMessage(content="test raw message")

    assert msg.to_string() == "test raw message"
    assert str(msg) == "test raw message"


def test_email_is_raw_message() -> None:
    assert isinstance(Email(subject="s"), RawMessage)


def test_email_to_string_renders_headers_and_text() -> None:
    email = Email(
        sender="hello@example.com",
        to=["you@example.com", "them@example.com"],
        subject="Time for Symfony Mailer!",
        text="This is Symfony Mailer body text",
    )

    rendered = email.to_string()
    headers, body = rendered.split("\n\n", 1)

    assert "From: hello@example.com" in headers
    assert "To: you@example.com, them@example.com" in headers
    assert "Subject: Time for Symfony Mailer!" in headers
    assert "This is Symfony Mailer body text" in body


def test_email_to_mime_with_html_alternative() -> None:
    email = Email(subject="s", text="plain", html="<p>rich</p>")

    mime = email.to_mime()

    assert mime.get_content_type() == "multipart/alternative"
    assert [part.get_content_type() for part in mime.iter_parts()] == [
        "text/plain",
        "text/html",
    ]


def test_email_message_inherits_subject_from_email() -> None:
    email = Email(subject="Inner subject", text="body")

    assert EmailMessage(message=email).subject == "Inner subject"
    assert EmailMessage(message=email, subject="Explicit").subject == "Explicit"


def test_email_message_wrapping_raw_message_has_no_subject() -> None:
    wrapped = EmailMessage(message=RawMessage(content="raw"))

    assert wrapped.subject is None
    assert isinstance(wrapped.message, RawMessage)


def test_messages_are_read_only() -> None:
    email = Email(subject="s")

    with pytest.raises(ValidationError):
        email.subject = "changed"


def test_chat_message_rejects_empty_text() -> None:
    with pytest.raises(ValidationError):
        ChatMessage(subject="")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"subject": "Line one\nLine two"},
        {"subject": "Line one\r\nBcc: evil@example.com"},
        {"sender": "hello@example.com\r"},
        {"to": ["you@example.com", "them@example.com\nBcc: x@example.com"]},
        {"cc": ["\ncc@example.com"]},
    ],
)
def test_email_rejects_line_breaks_in_header_fields(kwargs) -> None:
    """
    ヘッダになる項目に改行を含む Email は作れないことを確認。
    """
    with pytest.raises(ValidationError, match="line breaks"):
        Email(text="body", **kwargs)


def test_email_allows_line_breaks_in_text_body() -> None:
    email = Email(subject="s", text="line one\nline two")

    assert email.text == "line one\nline two"


def test_email_rejects_raw_content() -> None:
    with pytest.raises(ValidationError, match="raw content"):
        Email(content="hello there")


def test_email_to_string_encodes_non_ascii_text() -> None:
    """
    非 ASCII の本文はエンコードされ、元の文字列はそのまま現れない。
    """
    rendered = Email(subject="s", text="日本語の本文").to_string()

    assert "日本語の本文" not in rendered
    assert "Content-Transfer-Encoding" in rendered
