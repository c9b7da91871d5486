"""Selection strategies over conflict graphs and set families.

``mwis`` (with its exhaustive per-component search in ``recursive_mwis``) is
exact. ``disjoint_set`` is a heuristic. Callers choose one explicitly; neither
falls back to the other.
"""

from . import recursive_mwis
from . import mwis
from . import disjoint_set

__all__ = ["recursive_mwis", "mwis", "disjoint_set"]
