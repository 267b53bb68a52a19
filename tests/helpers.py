"""Canned chat-completion replies shared by the unit tests."""

import json


def chat_reply(content: str, *, usage: dict | None = None) -> dict:
    body = {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }
    if usage is not None:
        body["usage"] = usage
    return body


DEFAULT_USAGE = {"prompt_tokens": 120, "completion_tokens": 80, "total_tokens": 200}

ONE_CARD = json.dumps(
    [
        {
            "type": "qa",
            "front": "What does photosynthesis convert?",
            "back": "Light energy into chemical energy.",
            "tags": ["biology"],
        }
    ]
)
