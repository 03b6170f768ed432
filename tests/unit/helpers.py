"""Helpers shared by unit tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable
from typing import Any

from cadence.testing import Outcome, Resource, RunSummary


class Ref:
    """Counter shared by the tests that receive it."""

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self._lock = asyncio.Lock()

    async def get_and_increment(self) -> int:
        async with self._lock:
            previous = self.value
            self.value += 1
            return previous


class Tracker:
    """Counts acquisitions and releases of the resources it builds."""

    def __init__(self) -> None:
        self.acquired = 0
        self.released = 0
        self.values: list[Any] = []

    def resource(self, factory: Callable[[], Any] = Ref) -> Resource[Any]:
        def acquire() -> Any:
            self.acquired += 1
            value = factory()
            self.values.append(value)
            return value

        def release(value: Any) -> None:
            self.released += 1

        return Resource.make(acquire, release, name="tracked")


class CollectingReporter:
    """Reporter that keeps everything it is told."""

    def __init__(self) -> None:
        self.started: list[str] = []
        self.outcomes: list[Outcome] = []
        self.summaries: list[RunSummary] = []

    async def on_suite_start(self, suite_name: str) -> None:
        self.started.append(suite_name)

    async def on_outcome(self, outcome: Outcome) -> None:
        self.outcomes.append(outcome)

    async def on_suite_complete(self, summary: RunSummary) -> None:
        self.summaries.append(summary)

    @property
    def names(self) -> list[str]:
        return [outcome.name for outcome in self.outcomes]


async def drain(stream: AsyncIterator[Outcome]) -> list[Outcome]:
    return [outcome async for outcome in stream]
