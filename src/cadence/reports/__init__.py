"""Reporting module for cadence test output."""

from cadence.reports.base import CompositeReporter, Reporter
from cadence.reports.console import ConsoleReporter
from cadence.reports.registry import (
    clear_reporter_registry,
    get_reporter_registry,
    register_builtin,
    reporter,
    resolve_reporter,
    resolve_reporters,
)


register_builtin(ConsoleReporter)

__all__ = [
    "CompositeReporter",
    "ConsoleReporter",
    "Reporter",
    "clear_reporter_registry",
    "get_reporter_registry",
    "register_builtin",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
