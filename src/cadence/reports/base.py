"""Base reporter protocol for cadence test output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from cadence.testing.runner import call_hook

if TYPE_CHECKING:
    from cadence.testing.outcome import Outcome
    from cadence.testing.runner import RunSummary


class Reporter(Protocol):
    """Protocol defining the interface for test reporters.

    All methods are async to support I/O-bound reporters. Sync reporters can
    implement these as regular methods that don't await anything. A plain
    callable taking an :class:`Outcome` is accepted wherever a reporter is.
    """

    async def on_suite_start(self, suite_name: str) -> None:
        """Called before the first outcome of a suite."""
        ...

    async def on_outcome(self, outcome: Outcome) -> None:
        """Called once per test outcome, in emission order."""
        ...

    async def on_suite_complete(self, summary: RunSummary) -> None:
        """Called after a suite's outcome stream was drained."""
        ...


class CompositeReporter:
    """Forwards every hook to several reporters in order."""

    def __init__(self, reporters: list[object]) -> None:
        self.reporters = list(reporters)

    async def on_suite_start(self, suite_name: str) -> None:
        for target in self.reporters:
            await call_hook(getattr(target, "on_suite_start", None), suite_name)

    async def on_outcome(self, outcome: Outcome) -> None:
        for target in self.reporters:
            await call_hook(getattr(target, "on_outcome", target), outcome)

    async def on_suite_complete(self, summary: RunSummary) -> None:
        for target in self.reporters:
            await call_hook(getattr(target, "on_suite_complete", None), summary)
