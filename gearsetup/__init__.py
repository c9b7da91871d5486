"""Exact and heuristic conflict-free selection of weighted items."""

__all__ = [
    "Graph",
    "IntersectionGraph",
    "SolverConfig",
    "Equipment",
    "EquipmentSlot",
    "find_optimal_gear_setup",
    "find_maximum_weight_independent_set",
    "find_maximum_weighted_disjoint_set",
]


def __getattr__(name):
    if name in {"Graph", "IntersectionGraph"}:
        from .graph import Graph, IntersectionGraph

        return locals()[name]
    if name == "SolverConfig":
        from .config import SolverConfig

        return SolverConfig
    if name in {"Equipment", "EquipmentSlot"}:
        from .gear import Equipment, EquipmentSlot

        return locals()[name]
    if name == "find_optimal_gear_setup":
        from .gear.optimal_gear_setup import find

        return find
    if name == "find_maximum_weight_independent_set":
        from .solvers.mwis import find

        return find
    if name == "find_maximum_weighted_disjoint_set":
        from .solvers.disjoint_set import find

        return find
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
