from typing import Callable, Iterable, List, Set, TypeVar

from gearsetup.exceptions import require_callable, require_collection
from gearsetup.graph import adjacency_matrix
from gearsetup.logger import gs_logger, format_selection, format_weight

T = TypeVar("T")


def find(
    vertices: Iterable[T],
    predicate: Callable[[T, T], bool],
    weight: Callable[[T], float],
) -> Set[T]:
    """
    Compute a maximum-weight independent set of ``vertices`` by exhaustive search.

    Walks the binary include/exclude tree over the vertices in iteration
    order. A vertex is only included when it conflicts with none of the
    vertices selected so far; the exclude branch is always explored after the
    include branch. At each leaf the selection replaces the best one found
    if its total weight is strictly greater, so the first maximum found wins
    ties. The search starts from the empty selection with weight 0.

    Worst case is O(2^n), so callers are expected to pass a single, small
    connected component.

    Args:
        vertices: The vertices to choose from.
        predicate: Whether two vertices conflict; assumed symmetric.
        weight: The weight of a vertex; may be negative.

    Returns:
        Set[T]: The selected vertices.
    """
    require_collection(vertices, "vertices")
    require_callable(predicate, "predicate")
    require_callable(weight, "weight")

    values: List[T] = list(dict.fromkeys(vertices))
    if len(values) < 2:
        return set(values)

    size = len(values)
    weights = [float(weight(v)) for v in values]
    conflicts, _ = adjacency_matrix.new_buffers(size)
    adjacency_matrix.fill(values, predicate, conflicts)
    rows = conflicts.tolist()

    best_weight = 0.0
    best_selection: List[int] = []

    def search(depth: int, selected: List[int], selected_weight: float) -> None:
        nonlocal best_weight, best_selection

        # Leaf: every vertex has been decided
        if depth == size:
            if selected_weight > best_weight:
                best_weight = selected_weight
                best_selection = list(selected)
                gs_logger.log_best_selection(best_weight, len(best_selection))
            return

        row = rows[depth]
        if not any(row[i] for i in selected):
            selected.append(depth)
            search(depth + 1, selected, selected_weight + weights[depth])
            selected.pop()

        search(depth + 1, selected, selected_weight)

    search(0, [], 0.0)

    result = {values[i] for i in best_selection}
    if not gs_logger.disabled:
        gs_logger.result(
            f"Best of {size} vertices (weight {format_weight(best_weight)})",
            format_selection(result),
        )
    return result
