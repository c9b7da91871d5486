"""
Intersection graphs: two vertices are adjacent when their associated
collections share at least one element.
"""

from __future__ import annotations

from typing import Any, Callable, Collection, Iterable, Optional, TypeVar

from gearsetup.exceptions import require_callable
from gearsetup.graph.graph import Graph

T = TypeVar("T")


def intersects(left: Iterable[Any], right: Iterable[Any]) -> bool:
    """Return True if the two collections are not disjoint."""
    if isinstance(left, (set, frozenset)):
        return not left.isdisjoint(right)
    if isinstance(right, (set, frozenset)):
        return not right.isdisjoint(left)
    return not set(left).isdisjoint(right)


class IntersectionGraph(Graph[T]):
    """
    A :class:`Graph` whose adjacency is "the associated collections intersect".

    Used for slot occupancy conflicts, where every vertex occupies a set of
    slots and two vertices conflict when they need a common slot.
    """

    __slots__ = ()

    @classmethod
    def of(
        cls,
        values: Iterable[T],
        transform: Optional[Callable[[T], Collection[Any]]] = None,
    ) -> "IntersectionGraph[T]":
        """
        Build an intersection graph.

        Args:
            values: The vertices. Without ``transform`` they must be
                collections themselves.
            transform: Maps a vertex to the collection used for the
                intersection test.
        """
        if transform is None:
            return cls(values, intersects)
        require_callable(transform, "transform")
        return cls(values, lambda left, right: intersects(transform(left), transform(right)))

    @classmethod
    def with_predicate(
        cls, values: Iterable[T], predicate: Callable[[T, T], bool]
    ) -> "IntersectionGraph[T]":
        """Build the graph from an explicit intersection predicate."""
        return cls(values, predicate)
