"""Card generation service class and module entrypoint.

Provides a small, API-friendly wrapper around a provider adapter so HTTP
handlers and the CLI share one code path. The module also remains executable
as a convenience entrypoint that delegates to the CLI.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from cardgen.core.config import settings
from cardgen.modules.cards.models import AIServiceResponse, GenerationConfig
from cardgen.modules.providers import ProviderAdapter, build_adapter, get_profile
from cardgen.modules.providers.base import ProgressCallback


class CardsGenerator:
    """High-level service for generating flashcards with one provider.

    Example (async):
        svc = CardsGenerator("deepseek")
        result = await svc.generate("Photosynthesis ...", GenerationConfig(card_count=3))

    Example (sync):
        svc = CardsGenerator()
        result = svc.generate_sync("Photosynthesis ...")
    """

    def __init__(
        self,
        provider: Optional[str] = None,
        *,
        adapter: Optional[ProviderAdapter] = None,
    ) -> None:
        self.adapter = adapter or build_adapter(provider)
        self.provider = provider or getattr(self.adapter, "provider", None)

    async def generate(
        self,
        content: str,
        config: Optional[GenerationConfig] = None,
        *,
        on_progress: Optional[ProgressCallback] = None,
    ) -> AIServiceResponse:
        return await self.adapter.generate_cards(
            content, config or GenerationConfig(), on_progress
        )

    def generate_sync(
        self,
        content: str,
        config: Optional[GenerationConfig] = None,
        *,
        on_progress: Optional[ProgressCallback] = None,
    ) -> AIServiceResponse:
        """Synchronous wrapper for environments without an event loop."""
        return asyncio.run(self.generate(content, config, on_progress=on_progress))

    async def test_connection(self) -> bool:
        return await self.adapter.test_connection()

    def estimate_cost(self, prompt_tokens: int, completion_tokens: int) -> float:
        return self.adapter.estimate_cost(prompt_tokens, completion_tokens)

    @property
    def currency(self) -> str:
        # Injected adapters may not carry a profile or a provider name
        profile = getattr(self.adapter, "profile", None) or get_profile(
            self.provider or settings.model_provider
        )
        return profile.pricing.currency

    @staticmethod
    def to_jsonable(result: AIServiceResponse) -> dict:
        """Convert an AIServiceResponse into a JSON-serializable dict."""
        return result.model_dump(mode="json")


def main(argv: list[str] | None = None) -> int:
    from cardgen.modules.cards.cli import main as _cli_main

    return _cli_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
