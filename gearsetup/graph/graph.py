"""Immutable indexed graph over a vertex set and an adjacency predicate."""

from __future__ import annotations

import operator
from typing import (
    Callable,
    Dict,
    FrozenSet,
    Generic,
    Iterable,
    Iterator,
    List,
    Tuple,
    TypeVar,
)

import numpy as np
from numpy.typing import NDArray

from gearsetup.exceptions import (
    InvalidIndexError,
    UnknownVertexError,
    require_callable,
    require_collection,
)
from gearsetup.graph import adjacency_matrix

T = TypeVar("T")


class Graph(Generic[T]):
    """
    A graph whose edges are defined by a predicate over pairs of vertices.

    Each vertex receives a stable index in the iteration order of the input
    collection; duplicate vertices collapse to their first occurrence. The
    adjacency matrix and neighbor counts are computed once at construction
    and never change afterwards. A vertex is never its own neighbor,
    whatever the predicate returns for it.

    Attributes:
        vertices: Vertices in index order
        predicate: The adjacency predicate the graph was built from
    """

    __slots__ = ("_vertices", "_predicate", "_indices", "_adjacency", "_neighbor_count")

    def __init__(self, vertices: Iterable[T], predicate: Callable[[T, T], bool]):
        require_collection(vertices, "vertices")
        require_callable(predicate, "predicate")

        ordered: Tuple[T, ...] = tuple(dict.fromkeys(vertices))
        adjacency, neighbor_count = adjacency_matrix.new_buffers(len(ordered))
        adjacency_matrix.fill_with_counts(ordered, predicate, adjacency, neighbor_count)
        adjacency.setflags(write=False)
        neighbor_count.setflags(write=False)

        self._vertices = ordered
        self._predicate = predicate
        self._indices: Dict[T, int] = {v: i for i, v in enumerate(ordered)}
        self._adjacency: NDArray[np.bool_] = adjacency
        self._neighbor_count: NDArray[np.int64] = neighbor_count

    @classmethod
    def build(
        cls, vertices: Iterable[T], predicate: Callable[[T, T], bool]
    ) -> "Graph[T]":
        """Build a graph over ``vertices`` with edges where ``predicate`` holds."""
        return cls(vertices, predicate)

    of = build

    @property
    def vertices(self) -> Tuple[T, ...]:
        return self._vertices

    @property
    def predicate(self) -> Callable[[T, T], bool]:
        return self._predicate

    @property
    def adjacency(self) -> NDArray[np.bool_]:
        """Read-only view of the dense adjacency matrix."""
        return self._adjacency

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[T]:
        return iter(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        try:
            return vertex in self._indices
        except TypeError:
            # unhashable values can never be vertices
            return False

    def __repr__(self) -> str:
        edges = int(self._neighbor_count.sum())
        return f"{type(self).__name__}(vertices={len(self)}, adjacent_pairs={edges})"

    def size(self) -> int:
        return len(self._vertices)

    def contains(self, vertex: T) -> bool:
        return vertex in self

    def index_of(self, vertex: T) -> int:
        """
        Return the index of ``vertex``.

        Raises:
            UnknownVertexError: If the vertex is not part of the graph
        """
        if vertex not in self:
            UnknownVertexError.raise_for(vertex)
        return self._indices[vertex]

    def at(self, index: int) -> T:
        """
        Return the vertex at ``index``.

        Raises:
            InvalidIndexError: If ``index`` is not an integer in ``[0, n)``
        """
        size = len(self._vertices)
        if isinstance(index, bool):
            InvalidIndexError.raise_for(index, size)
        try:
            position = operator.index(index)
        except TypeError:
            InvalidIndexError.raise_for(index, size)
        if not 0 <= position < size:
            InvalidIndexError.raise_for(index, size)
        return self._vertices[position]

    def neighbor_count(self, vertex: T) -> int:
        return int(self._neighbor_count[self.index_of(vertex)])

    def is_neighbor(self, one: T, two: T) -> bool:
        """Return True if ``one`` and ``two`` are adjacent. Never True for ``one == two``."""
        one_index = self.index_of(one)
        two_index = self.index_of(two)
        if one_index == two_index:
            return False
        return bool(self._adjacency[one_index, two_index])

    def neighbors(self, vertex: T) -> Iterator[T]:
        """Yield the neighbors of ``vertex`` in ascending index order."""
        row = self._adjacency[self.index_of(vertex)]
        for index in np.flatnonzero(row):
            yield self._vertices[index]

    def component_indices(self) -> Iterator[List[int]]:
        """
        Yield the connected components as ascending lists of vertex indices.

        Each component is discovered by an iterative depth-first search
        started at the lowest-indexed vertex not yet visited, so components
        come out ordered by their smallest index. Every call starts a fresh
        traversal.
        """
        size = len(self._vertices)
        visited = np.zeros(size, dtype=bool)
        start = 0
        while start < size:
            if visited[start]:
                start += 1
                continue
            component: List[int] = []
            stack = [start]
            while stack:
                current = stack.pop()
                if visited[current]:
                    continue
                visited[current] = True
                component.append(current)
                stack.extend(int(i) for i in np.flatnonzero(self._adjacency[current]))
            component.sort()
            yield component

    def components(self) -> Iterator[FrozenSet[T]]:
        """Yield each connected component as a frozenset of vertices."""
        for indices in self.component_indices():
            yield frozenset(self._vertices[i] for i in indices)
