from __future__ import annotations

import asyncio
import contextlib
import json
from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse

from cardgen.core.config import settings
from cardgen.modules.cards.main import CardsGenerator
from cardgen.modules.cards.models import AIServiceResponse, GenerationProgress
from cardgen.modules.providers import UnknownProviderError
from .schemas import (
    ConnectionStatus,
    EstimateCostRequest,
    EstimateCostResponse,
    GenerateCardsRequest,
)


router = APIRouter()

GeneratorFactory = Callable[[Optional[str]], CardsGenerator]


def get_generator_factory() -> GeneratorFactory:
    """Dependency returning how handlers build a generator for a provider."""
    return CardsGenerator


def _resolve(factory: GeneratorFactory, provider: Optional[str]) -> CardsGenerator:
    try:
        return factory(provider)
    except UnknownProviderError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown provider: {provider}",
        )


def _sse(event: str | None, data: dict) -> bytes:
    payload = json.dumps(data, ensure_ascii=False)
    parts = []
    if event:
        parts.append(f"event: {event}")
    parts.append(f"data: {payload}")
    parts.append("")
    return ("\n".join(parts) + "\n").encode("utf-8")


@router.post(
    f"/{settings.app.version}/cards/generate",
    response_model=AIServiceResponse,
    status_code=status.HTTP_200_OK,
    tags=["cards"],
)
async def generate_cards(
    req: GenerateCardsRequest,
    factory: GeneratorFactory = Depends(get_generator_factory),
) -> AIServiceResponse:
    svc = _resolve(factory, req.provider)
    return await svc.generate(req.content, req.config)


@router.post(
    f"/{settings.app.version}/cards/generate/events",
    tags=["cards"],
)
async def generate_cards_events(
    req: GenerateCardsRequest,
    factory: GeneratorFactory = Depends(get_generator_factory),
) -> StreamingResponse:
    """Stream progress snapshots as SSE, then the final result."""
    svc = _resolve(factory, req.provider)

    async def gen():
        queue: asyncio.Queue[GenerationProgress | AIServiceResponse] = asyncio.Queue()

        async def _run() -> None:
            result = await svc.generate(
                req.content, req.config, on_progress=queue.put_nowait
            )
            queue.put_nowait(result)

        task = asyncio.create_task(_run())
        try:
            while True:
                item = await queue.get()
                if isinstance(item, AIServiceResponse):
                    yield _sse("result", CardsGenerator.to_jsonable(item))
                    yield _sse("end", {"success": item.success})
                    break
                yield _sse("progress", item.model_dump(mode="json"))
        finally:
            # Client disconnected before the result arrived
            if not task.done():
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task

    return StreamingResponse(
        gen(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
        },
    )


@router.get(
    f"/{settings.app.version}/providers/{{provider}}/health",
    response_model=ConnectionStatus,
    tags=["providers"],
)
async def provider_health(
    provider: str,
    factory: GeneratorFactory = Depends(get_generator_factory),
) -> ConnectionStatus:
    svc = _resolve(factory, provider)
    ok = await svc.test_connection()
    return ConnectionStatus(provider=provider, ok=ok)


@router.post(
    f"/{settings.app.version}/providers/{{provider}}/estimate",
    response_model=EstimateCostResponse,
    tags=["providers"],
)
async def provider_estimate(
    provider: str,
    req: EstimateCostRequest,
    factory: GeneratorFactory = Depends(get_generator_factory),
) -> EstimateCostResponse:
    svc = _resolve(factory, provider)
    return EstimateCostResponse(
        provider=provider,
        estimated_cost=svc.estimate_cost(req.prompt_tokens, req.completion_tokens),
        currency=svc.currency,
    )
