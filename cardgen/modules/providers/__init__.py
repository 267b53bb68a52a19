"""Provider adapters and settings-driven construction."""

from __future__ import annotations

from typing import Optional

from cardgen.core.config import settings
from cardgen.modules.providers.base import (
    CostEstimator,
    PromptBuilder,
    ProviderAdapter,
    ProviderProfile,
    ResponseParser,
    TokenPricing,
)
from cardgen.modules.providers.chat_completions import ChatCompletionsAdapter
from cardgen.modules.providers.deepseek import DEEPSEEK
from cardgen.modules.providers.errors import UnknownProviderError
from cardgen.modules.providers.openai import OPENAI

PROFILES: dict[str, ProviderProfile] = {p.name: p for p in (DEEPSEEK, OPENAI)}


def get_profile(name: str) -> ProviderProfile:
    try:
        return PROFILES[name.lower()]
    except KeyError:
        raise UnknownProviderError(name) from None


def build_adapter(name: Optional[str] = None) -> ChatCompletionsAdapter:
    """Build an adapter from settings; defaults to MODEL_PROVIDER."""
    profile = get_profile(name or settings.model_provider or DEEPSEEK.name)
    provider_settings = getattr(settings, profile.name)
    gen = settings.generation
    return ChatCompletionsAdapter(
        profile,
        api_key=provider_settings.api_key,
        model=provider_settings.model,
        base_url=provider_settings.base_url,
        timeout=gen.request_timeout,
        progress_interval=gen.progress_interval,
        locale=gen.locale,
    )


__all__ = [
    "ChatCompletionsAdapter",
    "CostEstimator",
    "DEEPSEEK",
    "OPENAI",
    "PROFILES",
    "PromptBuilder",
    "ProviderAdapter",
    "ProviderProfile",
    "ResponseParser",
    "TokenPricing",
    "UnknownProviderError",
    "build_adapter",
    "get_profile",
]
