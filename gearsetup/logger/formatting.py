"""Text formatting utilities for logging."""

from enum import Enum
from typing import Any, Iterable


def _label(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    return str(value)


def format_set(s: Iterable[Any]) -> str:
    """Format set for consistent display."""
    items = [_label(x) for x in s]
    if not items:
        return "∅"
    return "{" + ", ".join(sorted(items)) + "}"


def format_weight(weight: float) -> str:
    """Format a weight with trailing zeros stripped."""
    return f"{weight:.4f}".rstrip("0").rstrip(".")


def format_vertex(vertex: Any) -> str:
    """Format a vertex using its ``name`` when it carries one."""
    name = getattr(vertex, "name", None)
    if isinstance(name, str) and not isinstance(vertex, Enum):
        return name
    if isinstance(vertex, (set, frozenset)):
        return format_set(vertex)
    return _label(vertex)


def format_selection(vertices: Iterable[Any]) -> str:
    """Format a selected vertex set as a brace-enclosed list."""
    return format_set(format_vertex(v) for v in vertices)
