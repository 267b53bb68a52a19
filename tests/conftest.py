import httpx
import pytest

from cardgen.modules.providers import DEEPSEEK, ChatCompletionsAdapter


@pytest.fixture
def make_adapter():
    """Build a DeepSeek adapter whose HTTP calls go to ``handler``."""

    def _make(handler, **kwargs) -> ChatCompletionsAdapter:
        kwargs.setdefault("api_key", "sk-test")
        kwargs.setdefault("progress_interval", 0.01)
        return ChatCompletionsAdapter(
            DEEPSEEK, transport=httpx.MockTransport(handler), **kwargs
        )

    return _make
