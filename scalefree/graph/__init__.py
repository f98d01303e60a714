"""Graph subpackage containing the mutable store and its helpers."""

from .context import Context
from .ids import IdFactory, new_id, random_ids, sequential_ids
from .matrix import graph_to_matrix, matrix_to_graph
from .store import EdgeRecord, GraphStore
from .view import GraphView

__all__ = [
    "Context",
    "EdgeRecord",
    "GraphStore",
    "GraphView",
    "IdFactory",
    "graph_to_matrix",
    "matrix_to_graph",
    "new_id",
    "random_ids",
    "sequential_ids",
]
