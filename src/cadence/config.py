"""Configuration loaded from ``[tool.cadence]`` in pyproject.toml.

Example::

    [tool.cadence]
    suites = ["tests.suites:database"]
    max_parallelism = 4
    only = ["database.*insert*"]
    reporters = ["ConsoleReporter"]

Environment variables override the file: ``CADENCE_MAX_PARALLELISM``,
``CADENCE_VERBOSITY`` and ``CADENCE_REPORTERS`` (comma separated).
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cadence.exceptions import ConfigError

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"
ENV_PREFIX = "CADENCE_"


class CadenceConfig(BaseModel):
    """Runner settings.

    Attributes:
    ----------
    suites: list[str]
        Import strings of suites run when none are given on the command line
    max_parallelism: int | None
        Overrides every suite's ``max_parallelism`` when set
    only: list[str]
        ``--only`` glob patterns
    keyword: str | None
        ``-k`` keyword expression
    verbosity: int
        Reporter verbosity
    reporters: list[str]
        Reporter names or import strings
    """

    model_config = ConfigDict(extra="forbid")

    suites: list[str] = Field(default_factory=list)
    max_parallelism: int | None = None
    only: list[str] = Field(default_factory=list)
    keyword: str | None = None
    verbosity: int = 0
    reporters: list[str] = Field(default_factory=lambda: ["ConsoleReporter"])

    def as_args(self) -> list[str]:
        """Render the name filters as raw runner arguments."""
        args: list[str] = []
        for pattern in self.only:
            args.extend(["--only", pattern])
        if self.keyword:
            args.extend(["-k", self.keyword])
        return args


DEFAULT_CONFIG = CadenceConfig()


def find_project_root(start: Path | None = None) -> Path:
    """Nearest directory at or above ``start`` holding a pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / PYPROJECT).is_file():
            return directory
    return current


def _read_pyproject(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", source=str(path)) from e
    section = data.get("tool", {}).get("cadence", {})
    if not isinstance(section, dict):
        raise ConfigError("[tool.cadence] must be a table", source=str(path))
    return dict(section)


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for key in ("max_parallelism", "verbosity"):
        value = environ.get(f"{ENV_PREFIX}{key.upper()}")
        if value is not None and value != "":
            overrides[key] = value
    reporters = environ.get(f"{ENV_PREFIX}REPORTERS")
    if reporters:
        overrides["reporters"] = [name.strip() for name in reporters.split(",") if name.strip()]
    return overrides


def load_config(
    start: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> CadenceConfig:
    """Load configuration from the project's pyproject.toml and environment.

    Raises:
        ConfigError: If the file or the environment holds invalid values.
    """
    root = find_project_root(start)
    pyproject = root / PYPROJECT
    data: dict[str, Any] = {}
    source = "defaults"
    if pyproject.is_file():
        data = _read_pyproject(pyproject)
        source = str(pyproject)
        logger.debug("Loaded [tool.cadence] from %s", pyproject)

    overrides = _env_overrides(os.environ if environ is None else environ)
    if overrides:
        data.update(overrides)
        source = f"{source} + environment"

    try:
        return CadenceConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid cadence configuration: {e}", source=source) from e


__all__ = ["CadenceConfig", "DEFAULT_CONFIG", "find_project_root", "load_config"]
