import asyncio
from unittest.mock import MagicMock

import pytest

from cardgen.modules.cards.models import ProgressStatus
from cardgen.modules.providers.progress import (
    notify,
    progress_ticker,
    stage_message,
    tick_percentage,
)


def test_tick_percentage_range():
    values = [tick_percentage() for _ in range(500)]

    assert all(25 <= v < 30 for v in values)


def test_ticker_emits_and_stops_on_exit():
    # Setup
    events = []

    async def run():
        async with progress_ticker(events.append, "thinking", interval=0.01):
            await asyncio.sleep(0.06)
        count_at_exit = len(events)
        await asyncio.sleep(0.05)
        pending = [t for t in asyncio.all_tasks() if t is not asyncio.current_task()]
        return count_at_exit, pending

    # Execute
    count_at_exit, pending = asyncio.run(run())

    # Assertions
    assert count_at_exit > 0
    assert len(events) == count_at_exit
    assert pending == []
    assert all(e.status == ProgressStatus.GENERATING for e in events)
    assert all(e.message == "thinking" for e in events)
    progress = [e.progress for e in events]
    assert progress == sorted(progress)


def test_ticker_stops_when_block_raises():
    events = []

    async def run():
        with pytest.raises(ValueError):
            async with progress_ticker(events.append, "thinking", interval=0.01):
                await asyncio.sleep(0.03)
                raise ValueError("boom")
        count_at_exit = len(events)
        await asyncio.sleep(0.05)
        pending = [t for t in asyncio.all_tasks() if t is not asyncio.current_task()]
        return count_at_exit, pending

    count_at_exit, pending = asyncio.run(run())

    assert len(events) == count_at_exit
    assert pending == []


def test_ticker_without_callback_starts_no_task():
    async def run():
        async with progress_ticker(None, "thinking", interval=0.01):
            return [t for t in asyncio.all_tasks() if t is not asyncio.current_task()]

    assert asyncio.run(run()) == []


def test_ticker_survives_failing_callback():
    callback = MagicMock(side_effect=RuntimeError("closed"))

    async def run():
        async with progress_ticker(callback, "thinking", interval=0.01):
            await asyncio.sleep(0.05)

    asyncio.run(run())

    # Ticker gives up after the first failure
    assert callback.call_count == 1


def test_notify_swallows_callback_errors():
    callback = MagicMock(side_effect=RuntimeError("closed"))

    notify(callback, ProgressStatus.PREPARING, 15, "preparing")
    notify(None, ProgressStatus.PREPARING, 15, "preparing")

    callback.assert_called_once()
    snapshot = callback.call_args.args[0]
    assert snapshot.status == ProgressStatus.PREPARING
    assert snapshot.progress == 15


def test_stage_messages():
    assert stage_message("completed", count=3) == "Generated 3 cards"
    assert stage_message("thinking", "zh", count=5) == "AI正在思考...（5张卡片）"
    # Unknown locales fall back to English
    assert stage_message("failed", "fr") == "Generation failed"
