import pytest

from cardgen.modules.providers.errors import (
    ErrorKind,
    classify_error,
    error_message_text,
    failure_message,
)


@pytest.mark.parametrize(
    "message, kind",
    [
        ("Client error '401 Unauthorized' for url", ErrorKind.AUTH),
        ("Unauthorized", ErrorKind.AUTH),
        ("Client error '429 Too Many Requests'", ErrorKind.RATE_LIMIT),
        ("you hit the rate limit", ErrorKind.RATE_LIMIT),
        ("monthly quota exceeded", ErrorKind.QUOTA),
        ("DeepSeek request timeout: timed out", ErrorKind.TIMEOUT),
        ("connection refused", ErrorKind.GENERIC),
        ("", ErrorKind.UNKNOWN),
        (None, ErrorKind.UNKNOWN),
    ],
)
def test_classify_error(message, kind):
    assert classify_error(message) == kind


def test_classification_precedence():
    assert classify_error("401 after timeout") == ErrorKind.AUTH
    assert classify_error("429: quota") == ErrorKind.RATE_LIMIT
    assert classify_error("quota check timeout") == ErrorKind.QUOTA


def test_classification_is_case_sensitive():
    assert classify_error("Rate Limit reached") == ErrorKind.GENERIC
    assert classify_error("Timeout") == ErrorKind.GENERIC


def test_error_message_text():
    assert error_message_text(RuntimeError("boom")) == "boom"
    assert error_message_text(RuntimeError()) is None


def test_failure_messages():
    assert (
        failure_message(ErrorKind.GENERIC, provider="DeepSeek", detail="boom")
        == "DeepSeek API error: boom"
    )
    assert failure_message(ErrorKind.UNKNOWN, provider="DeepSeek") == "DeepSeek API call failed"
    assert failure_message(ErrorKind.QUOTA, provider="DeepSeek", locale="zh") == "DeepSeek API配额不足"
    assert (
        failure_message(ErrorKind.TIMEOUT, provider="OpenAI", locale="de")
        == "OpenAI API request timed out"
    )
