"""Test execution engine.

Provides suite registration, resource scoping, bounded-parallel scheduling
and outcome reporting.
"""

from .filters import KeywordMatcher, filter_tests
from .invocation import TestInvocation
from .log import LogEntry, TestLog
from .outcome import Cancelled, Failure, Ignored, Outcome, Status, Success
from .registry import TestRegistry
from .resources import PerTestStrategy, Resource, SharedStrategy
from .runner import RunSummary, Runner
from .scheduler import AsyncioScheduler, Scheduler, SequentialScheduler
from .suite import (
    DEFAULT_MAX_PARALLELISM,
    MutableSuite,
    PerTestResourceSuite,
    SharedResourceSuite,
    SimpleSuite,
    cancel,
    ignore,
)


__all__ = [
    "AsyncioScheduler",
    "Cancelled",
    "DEFAULT_MAX_PARALLELISM",
    "Failure",
    "Ignored",
    "KeywordMatcher",
    "LogEntry",
    "MutableSuite",
    "Outcome",
    "PerTestResourceSuite",
    "PerTestStrategy",
    "Resource",
    "RunSummary",
    "Runner",
    "Scheduler",
    "SequentialScheduler",
    "SharedResourceSuite",
    "SharedStrategy",
    "SimpleSuite",
    "Status",
    "Success",
    "TestInvocation",
    "TestLog",
    "TestRegistry",
    "cancel",
    "filter_tests",
    "ignore",
]
