"""Source locations for failure reporting."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_INTERNAL_PREFIX = "cadence"


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """A position in user code.

    Attributes
    ----------
    file_path
        Path of the source file.
    line
        1-based line number.
    function
        Name of the enclosing function, when known.
    """

    file_path: str
    line: int
    function: str | None = None

    @property
    def file_name(self) -> str:
        return Path(self.file_path).name

    def __str__(self) -> str:
        return f"{self.file_name}:{self.line}"


def caller_location() -> SourceLocation | None:
    """Return the location of the first frame outside the cadence package."""
    frame = inspect.currentframe()

    if frame is None:
        logger.warning("No frame found for source location")
        return None

    frame = frame.f_back

    try:
        while frame:
            module_name = frame.f_globals.get("__name__", "")
            if module_name == _INTERNAL_PREFIX or module_name.startswith(f"{_INTERNAL_PREFIX}."):
                frame = frame.f_back
                continue
            return SourceLocation(
                file_path=frame.f_code.co_filename,
                line=frame.f_lineno,
                function=frame.f_code.co_name,
            )
        return None
    finally:
        del frame


def location_of(fn: object) -> SourceLocation | None:
    """Return the definition site of a callable, if it has one."""
    code = getattr(inspect.unwrap(fn), "__code__", None)  # type: ignore[arg-type]
    if code is None:
        return None
    return SourceLocation(
        file_path=code.co_filename,
        line=code.co_firstlineno,
        function=code.co_name,
    )
