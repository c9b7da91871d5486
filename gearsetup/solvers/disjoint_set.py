"""
A weighted variant of the maximum disjoint set over a family of sets.

This is a single-row heuristic, kept separate from the exact solver in
:mod:`gearsetup.solvers.mwis`. It only considers, for every candidate, the
candidate itself together with all candidates disjoint from it. The result is
optimal when the best disjoint family is such a neighborhood, which is not the
case in general once three or more sets interact. The partners of the chosen
row are not checked against each other.
"""

from typing import Any, Callable, Collection, Iterable, List, Set, TypeVar

import numpy as np

from gearsetup.exceptions import require_callable, require_collection
from gearsetup.graph import adjacency_matrix, intersects
from gearsetup.logger import gs_logger, format_set, format_weight

T = TypeVar("T", bound=Collection[Any])


def find(candidates: Iterable[T], weight: Callable[[T], float]) -> Set[T]:
    """
    Find the heaviest row of the disjointness matrix of ``candidates``.

    Step 1: compute which candidates intersect each other.

    Step 2: for every row, sum the weight of the row owner and of every
    other candidate that does not intersect it.

    Step 3: return the owner of the heaviest row (the first one on ties)
    together with its disjoint candidates.

    For example, with ``w = len`` over ``{1, 2}``, ``{1, 3}``, ``{0, 3}`` the
    rows weigh 4, 2 and 4, so ``{{1, 2}, {0, 3}}`` is returned.

    Time and space are O(n^2) in the number of candidates.

    Args:
        candidates: Hashable collections, e.g. frozensets.
        weight: The weight of a candidate. ``len`` reproduces the classic
            unweighted problem.

    Returns:
        Set[T]: The chosen candidate and its disjoint partners. Fewer than two
        candidates are returned unchanged.
    """
    require_collection(candidates, "candidates")
    require_callable(weight, "weight")

    elements: List[T] = list(dict.fromkeys(candidates))
    size = len(elements)
    if size < 2:
        return set(elements)

    weights = np.array([float(weight(e)) for e in elements])
    intersections, _ = adjacency_matrix.new_buffers(size)
    adjacency_matrix.fill(elements, intersects, intersections)

    disjoint = ~intersections
    np.fill_diagonal(disjoint, False)
    row_weights = weights + disjoint.astype(float) @ weights

    best_row = int(np.argmax(row_weights))

    gs_logger.section("Maximum weighted disjoint set")
    if not gs_logger.disabled:
        gs_logger.table(
            [
                [format_set(e), format_weight(w), format_weight(r)]
                for e, w, r in zip(elements, weights, row_weights)
            ],
            headers=["candidate", "weight", "row weight"],
        )

    result = {elements[best_row]}
    result.update(elements[i] for i in np.flatnonzero(disjoint[best_row]))
    gs_logger.result("Selected row", format_set(elements[best_row]))
    gs_logger.end_section()
    return result
