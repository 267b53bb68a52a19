"""Failure taxonomy and user-facing messages for provider calls.

Classification looks only at the text of the error message. Checks run in a
fixed order and are case-sensitive, so an error mentioning both "401" and
"timeout" is reported as an authentication failure.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    QUOTA = "quota"
    TIMEOUT = "timeout"
    GENERIC = "generic"
    UNKNOWN = "unknown"


class ProviderRequestError(Exception):
    """Transport-level failure re-raised with a classifiable message."""


class UnknownProviderError(KeyError):
    pass


_RULES: list[tuple[ErrorKind, tuple[str, ...]]] = [
    (ErrorKind.AUTH, ("401", "Unauthorized")),
    (ErrorKind.RATE_LIMIT, ("429", "rate limit")),
    (ErrorKind.QUOTA, ("quota",)),
    (ErrorKind.TIMEOUT, ("timeout",)),
]


def classify_error(message: Optional[str]) -> ErrorKind:
    if not message:
        return ErrorKind.UNKNOWN
    for kind, needles in _RULES:
        if any(n in message for n in needles):
            return kind
    return ErrorKind.GENERIC


def error_message_text(error: BaseException) -> Optional[str]:
    """Message text of an exception, or None when it carries none."""
    text = str(error)
    return text or None


MESSAGES: dict[str, dict[ErrorKind, str]] = {
    "en": {
        ErrorKind.AUTH: "{name} API key is invalid, please check your configuration",
        ErrorKind.RATE_LIMIT: "{name} API rate limit exceeded, please retry later",
        ErrorKind.QUOTA: "{name} API quota exhausted",
        ErrorKind.TIMEOUT: "{name} API request timed out",
        ErrorKind.GENERIC: "{name} API error: {detail}",
        ErrorKind.UNKNOWN: "{name} API call failed",
    },
    "zh": {
        ErrorKind.AUTH: "{name} API密钥无效，请检查配置",
        ErrorKind.RATE_LIMIT: "{name} API请求频率超限，请稍后重试",
        ErrorKind.QUOTA: "{name} API配额不足",
        ErrorKind.TIMEOUT: "{name} API请求超时",
        ErrorKind.GENERIC: "{name} API错误: {detail}",
        ErrorKind.UNKNOWN: "{name} API调用失败",
    },
}


def failure_message(
    kind: ErrorKind, *, provider: str, detail: str = "", locale: str = "en"
) -> str:
    catalog = MESSAGES.get(locale, MESSAGES["en"])
    return catalog[kind].format(name=provider, detail=detail)
