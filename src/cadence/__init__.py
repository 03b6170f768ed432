"""Cadence - resource-scoped test execution engine."""

from .exceptions import (
    CadenceError,
    RegistrationError,
    ResourceAcquisitionError,
    ResourceError,
    ResourceReleaseError,
    TestCancelled,
    TestIgnored,
)
from .expectations import Expectations, expect, failure, success
from .testing import (
    Cancelled,
    Failure,
    Ignored,
    Outcome,
    PerTestResourceSuite,
    Resource,
    Runner,
    RunSummary,
    SharedResourceSuite,
    SimpleSuite,
    Success,
    TestLog,
    cancel,
    ignore,
)
from .types import ResourceScope, StatusKind
from .version import __version__


__all__ = [
    # Suites
    "SharedResourceSuite",
    "PerTestResourceSuite",
    "SimpleSuite",
    "Resource",
    "ResourceScope",
    "TestLog",
    # Running
    "Runner",
    "RunSummary",
    # Outcomes
    "Outcome",
    "StatusKind",
    "Success",
    "Failure",
    "Cancelled",
    "Ignored",
    # Checks and signals
    "Expectations",
    "expect",
    "success",
    "failure",
    "cancel",
    "ignore",
    # Errors
    "CadenceError",
    "RegistrationError",
    "ResourceError",
    "ResourceAcquisitionError",
    "ResourceReleaseError",
    "TestCancelled",
    "TestIgnored",
    "__version__",
]
