"""In-memory NetworkX based storage for mutable graphs."""
from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Hashable, Iterable, List, Optional, Tuple

import networkx as nx

from ..errors import DuplicateEdge, DuplicateVertex, UnknownEdge, UnknownVertex

if TYPE_CHECKING:  # pragma: no cover - import for type checking only
    from .view import GraphView


@dataclass(frozen=True)
class EdgeRecord:
    """Endpoints bound to an edge identity when it joins a graph."""

    source: Hashable
    target: Hashable
    directed: bool = True

    def pair(self) -> Tuple[Hashable, Hashable]:
        return self.source, self.target


@dataclass(eq=False)
class GraphStore:
    """Lightweight wrapper around :class:`networkx.MultiDiGraph`.

    Edge identities are used as the multigraph keys, so parallel edges are
    representable.  Undirected edges are stored once, in the orientation they
    were added with, and flagged ``directed=False``; every query treats them as
    pointing both ways.  Vertices and edges iterate in insertion order.

    Adding an element that is already present raises :class:`DuplicateVertex`
    or :class:`DuplicateEdge`; referencing an absent element raises
    :class:`UnknownVertex` or :class:`UnknownEdge`.
    """

    graph: nx.MultiDiGraph = field(default_factory=nx.MultiDiGraph)
    _edges: Dict[Hashable, EdgeRecord] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        for source, target, key, data in self.graph.edges(keys=True, data=True):
            if key in self._edges:
                raise DuplicateEdge(f"Edge key {key!r} is used by more than one endpoint pair")
            self._edges[key] = EdgeRecord(source, target, bool(data.get("directed", True)))

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #
    def add_vertex(self, vertex: Hashable) -> None:
        """Add ``vertex`` to the graph."""

        if vertex in self.graph:
            raise DuplicateVertex(f"Vertex {vertex!r} is already in the graph")
        self.graph.add_node(vertex)

    def remove_vertex(self, vertex: Hashable) -> None:
        """Remove ``vertex`` together with every edge incident to it."""

        for edge in self.incident_edges(vertex):
            del self._edges[edge]
        self.graph.remove_node(vertex)

    def add_edge(
        self, edge: Hashable, source: Hashable, target: Hashable, directed: bool = True
    ) -> None:
        """Add ``edge`` between ``source`` and ``target``."""

        if edge in self._edges:
            raise DuplicateEdge(f"Edge {edge!r} is already in the graph")
        self._require_vertex(source)
        self._require_vertex(target)
        self.graph.add_edge(source, target, key=edge, directed=directed)
        self._edges[edge] = EdgeRecord(source, target, directed)

    def remove_edge(self, edge: Hashable) -> None:
        """Remove ``edge`` from the graph."""

        record = self._require_edge(edge)
        self.graph.remove_edge(record.source, record.target, key=edge)
        del self._edges[edge]

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def vertices(self) -> Iterable[Hashable]:
        """Return a live view over the vertex identities."""

        return self.graph.nodes

    def edges(self) -> Iterable[Hashable]:
        """Return a live view over the edge identities."""

        return self._edges.keys()

    def vertex_count(self) -> int:
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        return len(self._edges)

    def contains_vertex(self, vertex: Hashable) -> bool:
        return vertex in self.graph

    def contains_edge(self, edge: Hashable) -> bool:
        return edge in self._edges

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.graph

    def endpoints(self, edge: Hashable) -> Tuple[Hashable, Hashable]:
        """Return ``(source, target)``; for undirected edges the order is the insertion order."""

        return self._require_edge(edge).pair()

    def is_directed(self, edge: Hashable) -> bool:
        return self._require_edge(edge).directed

    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        """Return the vertices joined to ``vertex`` by any edge, in either direction."""

        self._require_vertex(vertex)
        succ = self.graph.succ[vertex]
        pred = self.graph.pred[vertex]
        return list(dict.fromkeys(itertools.chain(succ, pred)))

    def incident_edges(self, vertex: Hashable) -> List[Hashable]:
        """Return the edges touching ``vertex``; a self-loop is listed once."""

        self._require_vertex(vertex)
        outgoing = self._keys(self.graph.succ[vertex])
        incoming = self._keys(self.graph.pred[vertex])
        return list(dict.fromkeys(itertools.chain(outgoing, incoming)))

    def degree(self, vertex: Hashable) -> int:
        return len(self.incident_edges(vertex))

    def in_degree(self, vertex: Hashable) -> int:
        """Count directed edges pointing at ``vertex`` plus its undirected edges."""

        self._require_vertex(vertex)
        incoming = self._keys(self.graph.pred[vertex])
        reversed_undirected = (
            key for key in self._keys(self.graph.succ[vertex]) if not self._edges[key].directed
        )
        return len(dict.fromkeys(itertools.chain(incoming, reversed_undirected)))

    def out_degree(self, vertex: Hashable) -> int:
        """Count directed edges leaving ``vertex`` plus its undirected edges."""

        self._require_vertex(vertex)
        outgoing = self._keys(self.graph.succ[vertex])
        reversed_undirected = (
            key for key in self._keys(self.graph.pred[vertex]) if not self._edges[key].directed
        )
        return len(dict.fromkeys(itertools.chain(outgoing, reversed_undirected)))

    def find_edge(self, source: Hashable, target: Hashable) -> Optional[Hashable]:
        """Return an edge leading from ``source`` to ``target``, or ``None``."""

        self._require_vertex(source)
        self._require_vertex(target)
        for key in self.graph.succ[source].get(target, {}):
            return key
        for key in self.graph.succ[target].get(source, {}):
            if not self._edges[key].directed:
                return key
        return None

    def is_successor(self, source: Hashable, target: Hashable) -> bool:
        """Return whether ``target`` can be reached from ``source`` over one edge."""

        return self.find_edge(source, target) is not None

    # Convenience predicates derived from the primitives above.
    def are_neighbors(self, first: Hashable, second: Hashable) -> bool:
        return self.is_successor(first, second) or self.is_successor(second, first)

    def are_incident(self, vertex: Hashable, edge: Hashable) -> bool:
        self._require_vertex(vertex)
        return vertex in self.endpoints(edge)

    def num_neighbors(self, vertex: Hashable) -> int:
        return len(self.neighbors(vertex))

    # ------------------------------------------------------------------ #
    # Copies and views
    # ------------------------------------------------------------------ #
    def copy(self) -> "GraphStore":
        """Return an independent store with the same elements in the same order."""

        clone = GraphStore()
        for vertex in self.graph.nodes:
            clone.add_vertex(vertex)
        for edge, record in self._edges.items():
            clone.add_edge(edge, record.source, record.target, record.directed)
        return clone

    def view(self) -> "GraphView":
        """Return a read-only view over this store."""

        from .view import GraphView

        return GraphView(self)

    def to_networkx(self) -> nx.MultiDiGraph:
        """Return a copy of the backing graph; edge keys are the edge identities."""

        return self.graph.copy()

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    @staticmethod
    def _keys(adjacency) -> Iterable[Hashable]:
        for keydict in adjacency.values():
            yield from keydict

    def _require_vertex(self, vertex: Hashable) -> None:
        if vertex not in self.graph:
            raise UnknownVertex(f"Unknown vertex: {vertex!r}")

    def _require_edge(self, edge: Hashable) -> EdgeRecord:
        try:
            return self._edges[edge]
        except KeyError:
            raise UnknownEdge(f"Unknown edge: {edge!r}") from None
