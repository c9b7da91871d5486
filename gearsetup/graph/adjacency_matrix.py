"""
Dense adjacency matrices built from a pairwise predicate.

Cell ``(i, j)`` is set when the values at ``i`` and ``j`` are not the same
position and the predicate holds for ``(values[i], values[j])``. No
symmetrization is performed, so an asymmetric predicate produces an
asymmetric matrix.
"""

from typing import Callable, Sequence, Tuple, TypeVar

import numpy as np
from numpy.typing import NDArray

T = TypeVar("T")

Predicate = Callable[[T, T], bool]


def new_buffers(size: int) -> Tuple[NDArray[np.bool_], NDArray[np.int64]]:
    """Allocate a zeroed ``size x size`` adjacency buffer and a count buffer."""
    return np.zeros((size, size), dtype=bool), np.zeros(size, dtype=np.int64)


def fill(
    values: Sequence[T],
    predicate: Predicate,
    buffer: NDArray[np.bool_],
) -> None:
    """
    Fill ``buffer`` with the adjacency matrix of ``values``.

    Args:
        values: The values to compute adjacency for, in index order
        predicate: Whether two values are adjacent
        buffer: An ``n x n`` (or larger) boolean buffer, a numpy array or
            nested lists

    Raises:
        IndexError: If the buffer is smaller than ``len(values)``
    """
    size = len(values)
    for i in range(size):
        left = values[i]
        for j in range(size):
            buffer[i][j] = i != j and bool(predicate(left, values[j]))


def fill_with_counts(
    values: Sequence[T],
    predicate: Predicate,
    buffer: NDArray[np.bool_],
    counts: NDArray[np.int64],
) -> None:
    """
    Fill ``buffer`` like :func:`fill` and store the number of neighbors of
    each row in ``counts``.

    Raises:
        IndexError: If either buffer is smaller than ``len(values)``
    """
    size = len(values)
    for i in range(size):
        left = values[i]
        count = 0
        for j in range(size):
            adjacent = i != j and bool(predicate(left, values[j]))
            buffer[i][j] = adjacent
            if adjacent:
                count += 1
        counts[i] = count
