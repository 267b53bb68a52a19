"""Synthetic progress reporting while a single HTTP call is pending."""

from __future__ import annotations

import asyncio
import contextlib
import random
from typing import AsyncIterator, Optional

from cardgen.core.logging import get_logger
from cardgen.modules.cards.models import GenerationProgress, ProgressStatus
from cardgen.modules.providers.base import ProgressCallback

logger = get_logger(__name__)

TICK_FLOOR = 25.0
TICK_SPREAD = 5.0
TICK_CEILING = 85.0

STAGE_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "preparing": "Preparing to generate cards...",
        "generating": "Calling the AI service...",
        "thinking": "AI is thinking... ({count} cards)",
        "parsing": "Parsing the generated result...",
        "completed": "Generated {count} cards",
        "failed": "Generation failed",
    },
    "zh": {
        "preparing": "准备生成卡片...",
        "generating": "正在调用AI服务...",
        "thinking": "AI正在思考...（{count}张卡片）",
        "parsing": "解析生成结果...",
        "completed": "成功生成{count}张卡片",
        "failed": "生成失败",
    },
}


def stage_message(key: str, locale: str = "en", **fields: object) -> str:
    catalog = STAGE_MESSAGES.get(locale, STAGE_MESSAGES["en"])
    return catalog[key].format(**fields)


def tick_percentage() -> float:
    return min(TICK_CEILING, TICK_FLOOR + random.random() * TICK_SPREAD)


def notify(
    on_progress: Optional[ProgressCallback],
    status: ProgressStatus,
    progress: float,
    message: str,
) -> None:
    """Deliver one snapshot; a failing callback never aborts generation."""
    if on_progress is None:
        return
    try:
        on_progress(
            GenerationProgress(status=status, progress=progress, message=message)
        )
    except Exception:  # noqa: BLE001
        logger.warning("Progress callback failed for stage %s", status.value, exc_info=True)


async def _tick(on_progress: ProgressCallback, message: str, interval: float) -> None:
    # Reported percentage never moves backwards within one run
    last = TICK_FLOOR
    while True:
        await asyncio.sleep(interval)
        last = max(last, tick_percentage())
        try:
            on_progress(
                GenerationProgress(
                    status=ProgressStatus.GENERATING,
                    progress=last,
                    message=message,
                )
            )
        except Exception:  # noqa: BLE001
            logger.warning("Progress callback failed; stopping ticker", exc_info=True)
            return


@contextlib.asynccontextmanager
async def progress_ticker(
    on_progress: Optional[ProgressCallback],
    message: str,
    *,
    interval: float = 0.5,
) -> AsyncIterator[None]:
    """Emit ``generating`` snapshots every ``interval`` seconds inside the block.

    The ticker task is cancelled and awaited when the block exits, whether it
    exits normally or by exception.
    """
    if on_progress is None:
        yield
        return

    task = asyncio.create_task(_tick(on_progress, message, interval))
    try:
        yield
    finally:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
