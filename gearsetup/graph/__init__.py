from . import adjacency_matrix
from .graph import Graph
from .intersection_graph import IntersectionGraph, intersects

__all__ = ["adjacency_matrix", "Graph", "IntersectionGraph", "intersects"]
