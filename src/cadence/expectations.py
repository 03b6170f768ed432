"""Minimal check values returned by test bodies.

Test bodies may return an :class:`Expectations` value instead of raising.
A passing value classifies the test as a success, a failing one as a failure
carrying :class:`~cadence.exceptions.ExpectationFailed`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from cadence.exceptions import ExpectationFailed
from cadence.location import SourceLocation, caller_location


class Expectation(BaseModel):
    """Result of a single check.

    Attributes:
    ----------
    passed: bool
        Whether the check held
    message: str | None
        Optional message explaining a failure
    location: SourceLocation | None
        Where the check was made
    """

    model_config = ConfigDict(frozen=True)

    passed: bool
    message: str | None = None
    location: SourceLocation | None = None

    def describe(self) -> str:
        text = self.message or ("expectation held" if self.passed else "expectation failed")
        if self.location is not None:
            return f"{text} ({self.location})"
        return text


class Expectations(BaseModel):
    """A conjunction of checks. Empty means success."""

    model_config = ConfigDict(frozen=True)

    results: tuple[Expectation, ...] = ()

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def failures(self) -> list[Expectation]:
        return [result for result in self.results if not result.passed]

    def __bool__(self) -> bool:
        return self.passed

    def __and__(self, other: Expectations) -> Expectations:
        return Expectations(results=self.results + other.results)

    def __or__(self, other: Expectations) -> Expectations:
        if self.passed:
            return self
        if other.passed:
            return other
        return self & other

    def fail_fast(self) -> Expectations:
        """Raise immediately if any check failed, otherwise return self."""
        if not self.passed:
            raise ExpectationFailed(self)
        return self

    @classmethod
    def success(cls) -> Expectations:
        return cls()

    @classmethod
    def failure(cls, message: str, location: SourceLocation | None = None) -> Expectations:
        return cls(results=(Expectation(passed=False, message=message, location=location),))


def expect(condition: object, message: str | None = None) -> Expectations:
    """Check that ``condition`` is truthy, recording the caller's location."""
    return Expectations(
        results=(
            Expectation(passed=bool(condition), message=message, location=caller_location()),
        )
    )


def success() -> Expectations:
    return Expectations.success()


def failure(message: str) -> Expectations:
    return Expectations.failure(message, caller_location())


__all__ = ["Expectation", "Expectations", "expect", "failure", "success"]
