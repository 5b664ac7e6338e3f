"""Shared service-layer helper functions."""

from __future__ import annotations

import dataclasses
from typing import Any


def _record_fields(value: Any) -> dict[str, Any] | None:
    """Field name to value mapping for record-like objects, else None."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    as_dict = getattr(value, "_asdict", None)
    if callable(as_dict):
        return dict(as_dict())
    return None


def to_plain(value: Any) -> Any:
    """Convert a decoded value into JSON-compatible builtins.

    Opaque objects from plugin factories fall back to their ``str()``.

    Examples:
        >>> to_plain([1, [2, 3]])
        [1, [2, 3]]
    """
    if isinstance(value, list | tuple) and not hasattr(value, "_asdict"):
        return [to_plain(item) for item in value]
    fields = _record_fields(value)
    if fields is not None:
        return {name: to_plain(v) for name, v in fields.items()}
    if value is None or isinstance(value, str | int | float | dict):
        return value
    return str(value)


def render_value(value: Any) -> str:
    """Display form of a decoded value.

    Records render as ``(field=value, ...)`` in declaration order and
    sequences as ``[a, b]``.

    Examples:
        >>> render_value(["apple", "banana"])
        '[apple, banana]'
        >>> render_value(33)
        '33'
    """
    if isinstance(value, list | tuple) and not hasattr(value, "_asdict"):
        return "[" + ", ".join(render_value(item) for item in value) + "]"
    fields = _record_fields(value)
    if fields is not None:
        inner = ", ".join(f"{name}={render_value(v)}" for name, v in fields.items())
        return f"({inner})"
    return str(value)
