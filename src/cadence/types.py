"""Shared types for the cadence test engine."""

from enum import Enum


class ResourceScope(Enum):
    """Resource lifecycle scope."""

    SHARED = "shared"  # One instance for every test in a suite run
    PER_TEST = "per_test"  # Fresh instance per test


class StatusKind(Enum):
    """Kind of a test outcome status."""

    SUCCESS = "success"
    FAILURE = "failure"
    CANCELLED = "cancelled"
    IGNORED = "ignored"
