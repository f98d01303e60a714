"""Conversion between graph stores and dense adjacency matrices."""
from __future__ import annotations

from typing import Callable, Dict, Hashable, MutableMapping, Optional, Union

import numpy as np

from .context import Context
from .ids import IdFactory, sequential_ids
from .store import GraphStore
from .view import GraphView

GraphLike = Union[GraphStore, GraphView]
WeightFn = Callable[[Context[GraphLike, Hashable]], float]


def graph_to_matrix(graph: GraphLike, weight: Optional[WeightFn] = None) -> np.ndarray:
    """Return the square adjacency matrix of ``graph``.

    Rows and columns follow ``graph.vertices()`` order.  Each edge contributes
    ``1`` (or ``weight(Context(graph, edge))``) to cell ``(source, target)``;
    undirected edges contribute to both cells.  Parallel edges accumulate.
    """

    index: Dict[Hashable, int] = {vertex: i for i, vertex in enumerate(graph.vertices())}
    matrix = np.zeros((len(index), len(index)), dtype=np.float64)
    for edge in graph.edges():
        source, target = graph.endpoints(edge)
        value = 1.0 if weight is None else float(weight(Context(graph, edge)))
        row, col = index[source], index[target]
        matrix[row, col] += value
        if row != col and not graph.is_directed(edge):
            matrix[col, row] += value
    return matrix


def matrix_to_graph(
    matrix: np.ndarray,
    *,
    vertex_factory: Optional[IdFactory] = None,
    edge_factory: Optional[IdFactory] = None,
    weights: Optional[MutableMapping[Hashable, float]] = None,
) -> GraphStore:
    """Build a :class:`GraphStore` from a square adjacency ``matrix``.

    Zero cells mean "no edge".  A symmetric matrix produces undirected edges
    read from its upper triangle; any other matrix produces directed edges.
    When ``weights`` is given it receives the cell value of every created edge.
    """

    array = np.asarray(matrix, dtype=np.float64)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError(f"Matrix must be square, got shape {array.shape}")

    vertex_factory = vertex_factory or sequential_ids("v")
    edge_factory = edge_factory or sequential_ids("e")
    directed = not np.array_equal(array, array.T)

    store = GraphStore()
    vertices = [vertex_factory() for _ in range(array.shape[0])]
    for vertex in vertices:
        store.add_vertex(vertex)

    rows, cols = np.nonzero(array)
    for row, col in zip(rows.tolist(), cols.tolist()):
        if not directed and col < row:
            continue
        edge = edge_factory()
        store.add_edge(edge, vertices[row], vertices[col], directed=directed)
        if weights is not None:
            weights[edge] = float(array[row, col])
    return store
