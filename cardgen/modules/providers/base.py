"""Capability interfaces shared by provider adapters.

Adapters are composed from a prompt builder, a response parser and a cost
estimator rather than inheriting helpers from a common base class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from cardgen.modules.cards.models import (
    AIServiceResponse,
    GenerationConfig,
    GenerationProgress,
)
from cardgen.modules.cards.prompts import PromptPair

ProgressCallback = Callable[[GenerationProgress], None]


class PromptBuilder(Protocol):
    def __call__(self, content: str, config: GenerationConfig) -> PromptPair: ...


class ResponseParser(Protocol):
    def __call__(self, raw_text: str) -> list[dict]: ...


class CostEstimator(Protocol):
    def estimate_cost(self, prompt_tokens: int, completion_tokens: int) -> float: ...


class ProviderAdapter(Protocol):
    """Contract every vendor adapter implements."""

    async def generate_cards(
        self,
        content: str,
        config: GenerationConfig,
        on_progress: Optional[ProgressCallback] = None,
    ) -> AIServiceResponse: ...

    def estimate_cost(self, prompt_tokens: int, completion_tokens: int) -> float: ...

    async def test_connection(self) -> bool: ...


@dataclass(frozen=True)
class TokenPricing:
    """Per-million-token prices."""

    prompt_price: float
    completion_price: float
    currency: str = "USD"

    def estimate_cost(self, prompt_tokens: int, completion_tokens: int) -> float:
        # Negative or non-finite counts propagate arithmetically
        prompt_cost = (prompt_tokens / 1_000_000) * self.prompt_price
        completion_cost = (completion_tokens / 1_000_000) * self.completion_price
        return prompt_cost + completion_cost


@dataclass(frozen=True)
class ProviderProfile:
    name: str
    display_name: str
    base_url: str
    default_model: str
    pricing: TokenPricing
