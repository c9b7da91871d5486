"""
Custom exceptions for the gear setup selection engine.
"""

from __future__ import annotations
from typing import Any, Callable, NoReturn


class GearSetupError(Exception):
    """Base exception for selection engine errors."""

    pass


class GraphError(GearSetupError):
    """Raised when a lookup against a built graph fails."""

    pass


class UnknownVertexError(GraphError, LookupError):
    """Raised when a vertex is not part of the graph it is looked up in."""

    @staticmethod
    def raise_for(vertex: Any) -> NoReturn:
        from gearsetup.logger import gs_logger

        message = f"{vertex!r} could not be found in the graph."
        if not gs_logger.disabled:
            gs_logger.error(message)
        raise UnknownVertexError(message)


class InvalidIndexError(GraphError, IndexError):
    """Raised when an index falls outside the ``[0, n)`` range of a graph."""

    @staticmethod
    def raise_for(index: int, size: int) -> NoReturn:
        """
        Raises an InvalidIndexError describing the offending index.

        Args:
            index: The index that was requested
            size: The number of vertices in the graph

        Raises:
            InvalidIndexError: Always raised
        """
        from gearsetup.logger import gs_logger

        message = (
            f"{index} is not a valid index for a graph with {size} vertices."
        )
        if not gs_logger.disabled:
            gs_logger.error(message)
        raise InvalidIndexError(message)


class InvalidArgumentError(GearSetupError, ValueError):
    """Raised when a required collection or callable is missing at entry."""

    pass


def require_callable(value: Any, name: str) -> Callable[..., Any]:
    """Return ``value`` if it is callable, otherwise raise InvalidArgumentError."""
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None.")
    if not callable(value):
        raise InvalidArgumentError(
            f"{name} must be callable, got {type(value).__name__}."
        )
    return value


def require_collection(value: Any, name: str) -> Any:
    """Return ``value`` unless it is None or a bare string."""
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None.")
    if isinstance(value, (str, bytes)):
        raise InvalidArgumentError(
            f"{name} must be a collection of vertices, got {type(value).__name__}."
        )
    return value
