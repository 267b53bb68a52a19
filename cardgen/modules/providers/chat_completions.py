"""Adapter for OpenAI-compatible chat-completion APIs.

One call to ``generate_cards`` makes exactly one HTTP request: build prompts,
POST to ``{base_url}/chat/completions``, parse the first choice's message
into drafts and map every draft into a ``GeneratedCard``. Failures of any
kind come back as an ``AIServiceResponse`` with ``success=False``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

import httpx
from pydantic import BaseModel, Field

from cardgen.core.logging import get_logger
from cardgen.modules.cards.models import (
    AIServiceResponse,
    CardMetadata,
    CardType,
    GeneratedCard,
    GenerationConfig,
    ProgressStatus,
    TokenUsage,
)
from cardgen.modules.cards.parser import ensure_string, generate_card_id, parse_response
from cardgen.modules.cards.prompts import build_prompts
from cardgen.modules.providers.base import (
    ProgressCallback,
    PromptBuilder,
    ProviderProfile,
    ResponseParser,
)
from cardgen.modules.providers.errors import (
    ProviderRequestError,
    classify_error,
    error_message_text,
    failure_message,
)
from cardgen.modules.providers.progress import notify, progress_ticker, stage_message

logger = get_logger(__name__)


class _ChatMessage(BaseModel):
    content: str


class _ChatChoice(BaseModel):
    message: _ChatMessage


class _ChatUsage(BaseModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatCompletion(BaseModel):
    """The subset of a chat-completion reply the adapter reads."""

    choices: list[_ChatChoice] = Field(min_length=1)
    usage: Optional[_ChatUsage] = None


def _string_list(value: object) -> list[str]:
    # A bare string is one item, not a sequence of characters
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [ensure_string(v) for v in value]
    return []


class ChatCompletionsAdapter:
    """Provider adapter over the ``/chat/completions`` wire format.

    Example:
        adapter = ChatCompletionsAdapter(DEEPSEEK, api_key="sk-...")
        result = await adapter.generate_cards(text, GenerationConfig(card_count=3))
    """

    def __init__(
        self,
        profile: ProviderProfile,
        *,
        api_key: Optional[str],
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        prompt_builder: PromptBuilder = build_prompts,
        response_parser: ResponseParser = parse_response,
        id_factory: Callable[[], str] = generate_card_id,
        timeout: float = 60.0,
        progress_interval: float = 0.5,
        locale: str = "en",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.profile = profile
        self.api_key = api_key or ""
        self.model = model or profile.default_model
        self.base_url = (base_url or profile.base_url).rstrip("/")
        self.prompt_builder = prompt_builder
        self.response_parser = response_parser
        self.id_factory = id_factory
        self.timeout = timeout
        self.progress_interval = progress_interval
        self.locale = locale
        self._transport = transport

    @property
    def provider(self) -> str:
        return self.profile.name

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    async def _post_chat(self, system_prompt: str, user_prompt: str, config: GenerationConfig) -> dict:
        headers = {"Content-Type": "application/json", **self._auth_headers()}
        body = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
        }
        try:
            async with self._client() as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions", headers=headers, json=body
                )
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as e:
            raise ProviderRequestError(
                f"{self.profile.display_name} request timeout: {e}"
            ) from e

    def _to_card(self, draft: dict, config: GenerationConfig) -> GeneratedCard:
        cloze_text = draft.get("cloze_text", draft.get("clozeText"))
        explanation = draft.get("explanation")
        return GeneratedCard(
            id=self.id_factory(),
            type=ensure_string(draft.get("type")) or CardType.QA.value,
            front=ensure_string(draft.get("front")),
            back=ensure_string(draft.get("back")),
            choices=draft.get("choices"),
            correct_answer=draft.get("correct_answer", draft.get("correctAnswer")),
            cloze_text=None if cloze_text is None else ensure_string(cloze_text),
            tags=_string_list(draft.get("tags")),
            images=_string_list(draft.get("images")),
            explanation=None if explanation is None else ensure_string(explanation),
            metadata=CardMetadata(
                generated_at=datetime.now(timezone.utc).isoformat(),
                provider=self.profile.name,
                model=self.model,
                temperature=config.temperature,
            ),
        )

    async def generate_cards(
        self,
        content: str,
        config: GenerationConfig,
        on_progress: Optional[ProgressCallback] = None,
    ) -> AIServiceResponse:
        """Generate cards from ``content``; never raises."""
        loc = self.locale
        try:
            notify(on_progress, ProgressStatus.PREPARING, 15, stage_message("preparing", loc))
            prompts = self.prompt_builder(content, config)

            notify(on_progress, ProgressStatus.GENERATING, 25, stage_message("generating", loc))
            logger.info(
                "Requesting %d cards from %s (model=%s)",
                config.card_count,
                self.profile.name,
                self.model,
            )
            async with progress_ticker(
                on_progress,
                stage_message("thinking", loc, count=config.card_count),
                interval=self.progress_interval,
            ):
                data = await self._post_chat(
                    prompts.system_prompt, prompts.user_prompt, config
                )

            notify(on_progress, ProgressStatus.PARSING, 90, stage_message("parsing", loc))
            completion = ChatCompletion.model_validate(data)
            drafts = self.response_parser(completion.choices[0].message.content)
            cards = [self._to_card(d, config) for d in drafts]

            notify(
                on_progress,
                ProgressStatus.COMPLETED,
                100,
                stage_message("completed", loc, count=len(cards)),
            )

            usage = None
            if completion.usage is not None:
                usage = TokenUsage(
                    prompt_tokens=completion.usage.prompt_tokens,
                    completion_tokens=completion.usage.completion_tokens,
                    total_tokens=completion.usage.total_tokens,
                    estimated_cost=self.estimate_cost(
                        completion.usage.prompt_tokens,
                        completion.usage.completion_tokens,
                    ),
                )
                logger.info(
                    "%s usage: %d prompt + %d completion tokens (~%.6f %s)",
                    self.profile.name,
                    usage.prompt_tokens,
                    usage.completion_tokens,
                    usage.estimated_cost,
                    self.profile.pricing.currency,
                )
            return AIServiceResponse(success=True, cards=cards, usage=usage)
        except Exception as e:  # noqa: BLE001
            notify(on_progress, ProgressStatus.FAILED, 0, stage_message("failed", loc))
            return self.handle_error(e)

    def estimate_cost(self, prompt_tokens: int, completion_tokens: int) -> float:
        return self.profile.pricing.estimate_cost(prompt_tokens, completion_tokens)

    async def test_connection(self) -> bool:
        """Return True iff ``GET {base_url}/models`` answers with status 200."""
        try:
            async with self._client() as client:
                response = await client.get(
                    f"{self.base_url}/models", headers=self._auth_headers()
                )
            return response.status_code == 200
        except Exception as e:  # noqa: BLE001
            logger.warning("%s connection test failed: %s", self.profile.display_name, e)
            return False

    def handle_error(self, error: BaseException) -> AIServiceResponse:
        logger.error("%s API error: %r", self.profile.display_name, error)
        text = error_message_text(error)
        message = failure_message(
            classify_error(text),
            provider=self.profile.display_name,
            detail=text or "",
            locale=self.locale,
        )
        return AIServiceResponse(success=False, cards=[], error=message)
