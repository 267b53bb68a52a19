import httpx

from cardgen.modules.providers import DEEPSEEK, OPENAI, ChatCompletionsAdapter


def _adapter(profile=DEEPSEEK, **kwargs):
    return ChatCompletionsAdapter(
        profile,
        api_key="sk-test",
        transport=httpx.MockTransport(lambda request: httpx.Response(200)),
        **kwargs,
    )


def test_handle_error_messages():
    adapter = _adapter()

    cases = {
        "HTTP 401": "DeepSeek API key is invalid, please check your configuration",
        "429 Too Many Requests": "DeepSeek API rate limit exceeded, please retry later",
        "quota exhausted": "DeepSeek API quota exhausted",
        "socket timeout": "DeepSeek API request timed out",
        "something odd": "DeepSeek API error: something odd",
    }
    for text, expected in cases.items():
        result = adapter.handle_error(RuntimeError(text))
        assert result.success is False
        assert result.cards == []
        assert result.error == expected


def test_handle_error_without_message():
    result = _adapter().handle_error(RuntimeError())

    assert result.success is False
    assert result.error == "DeepSeek API call failed"


def test_sibling_provider_uses_own_name_and_prices():
    adapter = _adapter(OPENAI)

    assert adapter.provider == "openai"
    assert adapter.base_url == "https://api.openai.com/v1"
    assert adapter.model == "gpt-4o-mini"
    assert adapter.estimate_cost(1_000_000, 1_000_000) == OPENAI.pricing.prompt_price + OPENAI.pricing.completion_price
    assert adapter.handle_error(RuntimeError("401")).error.startswith("OpenAI API key")
