"""
Maximum-weight independent set by connected component decomposition.

No edge crosses two components, so the optimum of the whole graph is the
union of the optima of its components. Components are solved one at a time,
which keeps the exponential cost of the exact search bounded by the largest
component instead of the whole vertex set.
"""

from typing import Callable, Iterable, Optional, Set, TypeVar

from gearsetup.config import DEFAULT_CONFIG, SolverConfig
from gearsetup.exceptions import require_callable, require_collection
from gearsetup.graph import Graph
from gearsetup.logger import gs_logger, format_selection
from gearsetup.solvers import recursive_mwis

T = TypeVar("T")


def find(
    vertices: Iterable[T],
    predicate: Callable[[T, T], bool],
    weight: Callable[[T], float],
    config: Optional[SolverConfig] = None,
) -> Set[T]:
    """
    Find the maximum-weight independent set of ``vertices``.

    For fewer than two vertices the input is returned unchanged, as it is
    trivially independent and optimal. Otherwise the vertices are placed in
    a :class:`Graph` and each connected component is solved on its own:

    - a single vertex is always selected
    - of two vertices the lower-indexed one is selected if its weight is
      greater than or equal to the other's, otherwise the other one
    - larger components go through :func:`recursive_mwis.find`

    Args:
        vertices: The vertices to choose from.
        predicate: Whether two vertices conflict; assumed symmetric and
            irreflexive.
        weight: A pure weight function; may be negative.
        config: Solver settings, defaults to :data:`DEFAULT_CONFIG`.

    Returns:
        Set[T]: The union of the per-component optima.
    """
    require_collection(vertices, "vertices")
    require_callable(predicate, "predicate")
    require_callable(weight, "weight")

    values = list(dict.fromkeys(vertices))
    if len(values) < 2:
        return set(values)

    return find_in_graph(Graph.build(values, predicate), weight, config)


def find_in_graph(
    graph: Graph[T],
    weight: Callable[[T], float],
    config: Optional[SolverConfig] = None,
) -> Set[T]:
    """Find the maximum-weight independent set of an already built graph."""
    require_collection(graph, "graph")
    require_callable(weight, "weight")
    config = config or DEFAULT_CONFIG

    if len(graph) < 2:
        return set(graph.vertices)

    gs_logger.section(f"Maximum weight independent set over {len(graph)} vertices")
    if not gs_logger.disabled:
        gs_logger.adjacency(graph.adjacency, graph.vertices, title="Conflicts")

    selection: Set[T] = set()
    for number, indices in enumerate(graph.component_indices()):
        component = [graph.at(i) for i in indices]

        if len(component) == 1:
            gs_logger.log_component(number, 1, "ISOLATED")
            selection.add(component[0])
            continue

        if len(component) == 2:
            gs_logger.log_component(number, 2, "PAIR")
            first, second = component
            selection.add(first if weight(first) >= weight(second) else second)
            continue

        if len(component) > config.max_component_size:
            gs_logger.logger.warning(
                f"Component {number} has {len(component)} vertices, above the "
                f"configured maximum of {config.max_component_size}; the "
                f"exhaustive search may take a long time"
            )
        gs_logger.log_component(number, len(component), "RECURSIVE")
        selection.update(recursive_mwis.find(component, graph.predicate, weight))

    gs_logger.result("Selection", format_selection(selection))
    gs_logger.end_section()
    return selection
