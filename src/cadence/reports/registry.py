"""Reporter registry so reporters can be chosen by name from config or CLI."""

from __future__ import annotations

import importlib
from typing import Any, TypeVar

T = TypeVar("T", bound=type)

_reporter_registry: dict[str, type] = {}
_builtin_registry: dict[str, type] = {}


def reporter(cls: T | None = None, *, name: str | None = None) -> Any:
    """Register a reporter class under ``name`` (defaults to the class name).

    Usable bare (``@reporter``) or with arguments (``@reporter(name="json")``).
    """

    def decorator(cls: T) -> T:
        _reporter_registry[name or cls.__name__] = cls
        return cls

    if cls is not None:
        return decorator(cls)
    return decorator


def register_builtin(cls: T) -> T:
    """Register a reporter that survives :func:`clear_reporter_registry`."""
    _builtin_registry[cls.__name__] = cls
    _reporter_registry[cls.__name__] = cls
    return cls


def get_reporter_registry() -> dict[str, type]:
    return _reporter_registry


def clear_reporter_registry() -> None:
    """Drop user-registered reporters, keeping built-ins."""
    _reporter_registry.clear()
    _reporter_registry.update(_builtin_registry)


def _import_reporter_class(import_path: str) -> type:
    """Import a reporter class from ``module:Class`` or ``module.Class``."""
    separator = ":" if ":" in import_path else "."
    module_path, _, class_name = import_path.rpartition(separator)
    if not module_path:
        msg = f"Invalid import path: {import_path}"
        raise ValueError(msg)

    module = importlib.import_module(module_path)
    try:
        cls = getattr(module, class_name)
    except AttributeError as e:
        msg = f"Cannot import reporter {import_path}: module {module_path} has no attribute {class_name}"
        raise ImportError(msg) from e
    if not isinstance(cls, type) or not callable(getattr(cls, "on_outcome", None)):
        msg = f"{import_path} is not a reporter class (missing on_outcome)"
        raise TypeError(msg)
    return cls


def resolve_reporter(name: str, **kwargs: Any) -> Any:
    """Instantiate a reporter by registry name or import string.

    Raises:
        ValueError: If ``name`` is neither registered nor an import string.
    """
    if name in _reporter_registry:
        return _reporter_registry[name](**kwargs)

    if ":" in name or "." in name:
        return _import_reporter_class(name)(**kwargs)

    available = ", ".join(sorted(_reporter_registry))
    msg = f"Unknown reporter: {name}. Available: {available}"
    raise ValueError(msg)


def resolve_reporters(names: list[str], **kwargs: Any) -> list[Any]:
    """Instantiate several reporters with the same constructor arguments."""
    return [resolve_reporter(name, **kwargs) for name in names]


__all__ = [
    "clear_reporter_registry",
    "get_reporter_registry",
    "register_builtin",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
