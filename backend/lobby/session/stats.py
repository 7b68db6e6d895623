"""Periodic logging of session counts."""

from __future__ import annotations

import asyncio
import contextlib
from typing import TYPE_CHECKING

import structlog
from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = structlog.get_logger()


class SessionStats(BaseModel):
    players: int
    rooms: int
    games: int
    running_games: int


class StatsReporter:
    """Background task logging player/room/game counts every interval_seconds."""

    def __init__(self, collect: Callable[[], Awaitable[SessionStats]], interval_seconds: float = 5) -> None:
        self._collect = collect
        self._interval_seconds = interval_seconds
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def report(self) -> SessionStats:
        stats = await self._collect()
        logger.info("session stats", **stats.model_dump())
        return stats

    def start(self) -> None:
        if self.running or self._interval_seconds <= 0:
            return
        self._task = asyncio.create_task(self._report_loop())

    async def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

    async def _report_loop(self) -> None:
        while True:
            await asyncio.sleep(self._interval_seconds)
            try:
                await self.report()
            except Exception:
                logger.exception("failed to report session stats")
