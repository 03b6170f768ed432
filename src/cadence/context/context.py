from __future__ import annotations

from concurrent.futures import Executor
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ExecutionContext:
    """Execution substrate for a run.

    Attributes
    ----------
    executor
        Executor used to run synchronous test bodies off the event loop.
        ``None`` runs them inline when tests run one at a time and in worker
        threads when they run concurrently.
    """

    executor: Executor | None = None


EXECUTION_CONTEXT: ContextVar[ExecutionContext] = ContextVar(
    "execution_context", default=ExecutionContext()
)


@contextmanager
def execution_scope(ctx: ExecutionContext) -> Iterator[None]:
    token = EXECUTION_CONTEXT.set(ctx)
    try:
        yield
    finally:
        EXECUTION_CONTEXT.reset(token)

