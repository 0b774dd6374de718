"""Plain-text rendering of values and sequences."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["format_value", "format_sequence", "print_sequence"]


def format_value(value: Any) -> str:
    """Render a single value; floats use the shortest general notation."""
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def format_sequence(items: Iterable[Any], prefix: str = "") -> str:
    """Render ``items`` as ``prefix[a, b, c]``."""
    body = ", ".join(format_value(item) for item in items)
    return f"{prefix}[{body}]"


def print_sequence(items: Iterable[Any], prefix: str = "") -> None:
    """Print ``items`` on one line, preceded by ``prefix``."""
    print(format_sequence(items, prefix))