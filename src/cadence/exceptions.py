"""Error taxonomy for the cadence test engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cadence.expectations import Expectations
    from cadence.location import SourceLocation


class CadenceError(Exception):
    """Base exception for engine errors."""


class RegistrationError(CadenceError):
    """Raised when a test is registered after its suite started executing.

    This is a structural mistake in the suite author's code and is never
    turned into a test outcome.
    """

    def __init__(self, suite_name: str, test_name: str) -> None:
        self.suite_name = suite_name
        self.test_name = test_name
        super().__init__(
            f"Cannot define new test '{test_name}' after suite '{suite_name}' was initialized"
        )


class ResourceError(CadenceError):
    """Base exception for resource lifecycle failures."""

    action = "use"

    def __init__(self, resource_name: str, cause: BaseException | None = None) -> None:
        self.resource_name = resource_name
        self.cause = cause
        message = f"Failed to {self.action} resource '{resource_name}'"
        if cause is not None:
            message += f": {type(cause).__name__}: {cause}"
        super().__init__(message)


class ResourceAcquisitionError(ResourceError):
    """Raised when a resource could not be acquired."""

    action = "acquire"


class ResourceReleaseError(ResourceError):
    """Raised when a resource could not be released."""

    action = "release"


class ConfigError(CadenceError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{message} (source: {source})"
        super().__init__(message)


class SuiteLoadError(CadenceError):
    """Raised when a suite cannot be loaded from an import string."""

    def __init__(self, import_path: str, reason: str) -> None:
        self.import_path = import_path
        self.reason = reason
        super().__init__(f"Cannot load suite '{import_path}': {reason}")


class TestSignal(Exception):
    """Control-flow signal raised by a test body to tag its outcome."""

    __test__ = False
    label = "signalled"

    def __init__(self, reason: str | None = None, location: SourceLocation | None = None) -> None:
        self.reason = reason
        self.location = location
        message = f"Test {self.label}"
        if reason:
            message += f": {reason}"
        if location is not None:
            message += f" ({location})"
        super().__init__(message)


class TestCancelled(TestSignal):
    """Raised to tag the running test as cancelled."""

    label = "cancelled"


class TestIgnored(TestSignal):
    """Raised to tag the running test as ignored."""

    label = "ignored"


class ExpectationFailed(AssertionError):
    """AssertionError carrying the failed expectations of a test."""

    def __init__(self, expectations: Expectations) -> None:
        self.expectations = expectations
        messages = [e.describe() for e in expectations.failures]
        super().__init__("; ".join(messages) or "expectation failed")


__all__ = [
    "CadenceError",
    "ConfigError",
    "ExpectationFailed",
    "RegistrationError",
    "ResourceAcquisitionError",
    "ResourceError",
    "ResourceReleaseError",
    "SuiteLoadError",
    "TestCancelled",
    "TestIgnored",
    "TestSignal",
]
