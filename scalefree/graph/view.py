"""Read-only access to a :class:`~scalefree.graph.store.GraphStore`."""
from __future__ import annotations

from typing import Hashable, Iterable, List, Optional, Tuple

import networkx as nx

from .store import GraphStore


class GraphView:
    """Expose only the query surface of a graph store.

    Generators hand out views so callers can inspect the graph they are
    building without being able to mutate it behind the generator's back.  The
    view is live: it reflects later steps of the generator.  Use :meth:`copy`
    to obtain an independent, mutable store.
    """

    __slots__ = ("_store",)

    def __init__(self, store: GraphStore) -> None:
        self._store = store

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return (
            f"{self.__class__.__name__}(vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._store

    def vertices(self) -> Iterable[Hashable]:
        return self._store.vertices()

    def edges(self) -> Iterable[Hashable]:
        return self._store.edges()

    def vertex_count(self) -> int:
        return self._store.vertex_count()

    def edge_count(self) -> int:
        return self._store.edge_count()

    def contains_vertex(self, vertex: Hashable) -> bool:
        return self._store.contains_vertex(vertex)

    def contains_edge(self, edge: Hashable) -> bool:
        return self._store.contains_edge(edge)

    def endpoints(self, edge: Hashable) -> Tuple[Hashable, Hashable]:
        return self._store.endpoints(edge)

    def is_directed(self, edge: Hashable) -> bool:
        return self._store.is_directed(edge)

    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        return self._store.neighbors(vertex)

    def incident_edges(self, vertex: Hashable) -> List[Hashable]:
        return self._store.incident_edges(vertex)

    def degree(self, vertex: Hashable) -> int:
        return self._store.degree(vertex)

    def in_degree(self, vertex: Hashable) -> int:
        return self._store.in_degree(vertex)

    def out_degree(self, vertex: Hashable) -> int:
        return self._store.out_degree(vertex)

    def find_edge(self, source: Hashable, target: Hashable) -> Optional[Hashable]:
        return self._store.find_edge(source, target)

    def is_successor(self, source: Hashable, target: Hashable) -> bool:
        return self._store.is_successor(source, target)

    def are_neighbors(self, first: Hashable, second: Hashable) -> bool:
        return self._store.are_neighbors(first, second)

    def are_incident(self, vertex: Hashable, edge: Hashable) -> bool:
        return self._store.are_incident(vertex, edge)

    def num_neighbors(self, vertex: Hashable) -> int:
        return self._store.num_neighbors(vertex)

    def copy(self) -> GraphStore:
        """Return an independent, mutable copy of the underlying store."""

        return self._store.copy()

    def to_networkx(self) -> nx.MultiDiGraph:
        return self._store.to_networkx()
