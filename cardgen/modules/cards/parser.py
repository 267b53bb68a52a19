"""Turn a model's free-text reply into loosely-typed card drafts."""

from __future__ import annotations

import json
import re
import uuid
from typing import Any

_FENCE = re.compile(r"```(?:json|JSON)?\s*(.*?)```", re.DOTALL)
_LIST_KEYS = ("cards", "flashcards")


class ResponseParseError(ValueError):
    """Raised when no JSON card payload can be recovered from the reply."""


def _candidates(text: str) -> list[str]:
    out: list[str] = []
    fenced = _FENCE.search(text)
    if fenced:
        out.append(fenced.group(1).strip())
    out.append(text.strip())

    # Outermost array first, then outermost object
    for open_ch, close_ch in (("[", "]"), ("{", "}")):
        start, end = text.find(open_ch), text.rfind(close_ch)
        if start != -1 and end > start:
            out.append(text[start : end + 1])
    return out


def _as_drafts(payload: Any) -> list[dict] | None:
    if isinstance(payload, list):
        return [item for item in payload if isinstance(item, dict)]
    if isinstance(payload, dict):
        for key in _LIST_KEYS:
            if isinstance(payload.get(key), list):
                return [item for item in payload[key] if isinstance(item, dict)]
        if "front" in payload or "back" in payload:
            return [payload]
    return None


def parse_response(raw_text: str) -> list[dict]:
    """Extract card drafts from the reply text.

    Accepts a JSON array, an object wrapping the array under ``cards`` or
    ``flashcards``, or a single card object, optionally inside a Markdown
    code fence or surrounded by prose. Non-object items are dropped.
    """
    text = raw_text or ""
    for candidate in _candidates(text):
        try:
            payload = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        drafts = _as_drafts(payload)
        if drafts is not None:
            return drafts

    head = " ".join(text.split())[:80]
    raise ResponseParseError(f"Could not parse cards from model reply: {head!r}")


def ensure_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return "\n".join(ensure_string(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def generate_card_id() -> str:
    return f"card-{uuid.uuid4().hex}"
