"""Power-law degree distributions by iterative edge rewiring."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Hashable, List, Optional

from ..config import DEFAULT_MAX_ATTEMPTS, default_max_attempts, default_seed
from ..errors import DegenerateProbability, InvalidConfiguration
from ..graph.ids import IdFactory, sequential_ids
from ..graph.store import GraphStore
from ..graph.view import GraphView
from ..obs.events import EventBus
from ..rng import RandomSource
from .base import rejection_sample

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PowerLawConfig:
    """Options recognised by :class:`PowerLawGenerator`."""

    num_vertices: int
    num_edges: int
    num_iterations: int
    directed: bool = False
    seed: Optional[int] = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    @classmethod
    def from_env(cls, **overrides) -> "PowerLawConfig":
        """Build a config whose seed and attempt bound default to the environment."""

        params = {"seed": default_seed(), "max_attempts": default_max_attempts()}
        params.update(overrides)
        return cls(**params)

    def max_edges(self) -> int:
        """Number of distinct successor relations, self-loops included."""

        n = self.num_vertices
        return n * n if self.directed else n * (n + 1) // 2

    def validate(self) -> None:
        if self.num_vertices <= 0:
            raise InvalidConfiguration(f"num_vertices must be positive, got {self.num_vertices}")
        # A graph without edges leaves rewiring with nothing to move.
        if self.num_edges <= 0:
            raise InvalidConfiguration(f"num_edges must be positive, got {self.num_edges}")
        if self.num_edges > self.max_edges():
            raise InvalidConfiguration(
                f"num_edges ({self.num_edges}) exceeds the {self.max_edges()} distinct "
                f"edges possible between {self.num_vertices} vertices"
            )
        if self.num_iterations < 0:
            raise InvalidConfiguration(
                f"num_iterations must be non-negative, got {self.num_iterations}"
            )
        if self.max_attempts <= 0:
            raise InvalidConfiguration(f"max_attempts must be positive, got {self.max_attempts}")


class PowerLawGenerator:
    """Skew a random graph's degree distribution toward a power law.

    The graph starts as ``num_edges`` uniformly random edges between
    ``num_vertices`` vertices.  Each of the ``num_iterations`` rewiring rounds
    then picks a random edge touching a random non-isolated vertex, and moves
    it to ``(x, y)`` where ``x`` is uniform and ``y`` is accepted with
    probability ``(deg(y) + 1) / max_degree``, ``max_degree`` being the peak
    degree right after initialisation.  Rounds that would create a self-loop
    or a duplicate edge leave the graph untouched, so ``|V|`` and ``|E|`` never
    change while rewiring.

    Every :meth:`generate_graph` call builds a new graph from the current
    state of the random stream.
    """

    def __init__(
        self,
        config: PowerLawConfig,
        *,
        random: Optional[RandomSource] = None,
        vertex_factory: Optional[IdFactory] = None,
        edge_factory: Optional[IdFactory] = None,
        events: Optional[EventBus] = None,
    ) -> None:
        config.validate()
        self.config = config
        self._random = random if random is not None else RandomSource(config.seed)
        self._user_vertex_factory = vertex_factory
        self._user_edge_factory = edge_factory
        self.events = events
        self._max_degree: Optional[int] = None

    def set_seed(self, seed: Optional[int]) -> None:
        """Restart the random stream from ``seed``."""

        self._random.set_seed(seed)

    def initial_max_degree(self) -> Optional[int]:
        """Return the peak degree measured before rewiring in the last call."""

        return self._max_degree

    def generate_graph(self) -> GraphView:
        vertex_factory = self._user_vertex_factory or sequential_ids("v")
        edge_factory = self._user_edge_factory or sequential_ids("e")

        graph, vertices = self._initialize_graph(vertex_factory, edge_factory)
        rewired = 0
        for _ in range(self.config.num_iterations):
            if self._rewire(graph, vertices, edge_factory):
                rewired += 1

        LOGGER.info(
            "Rewired %d of %d iterations; graph has %d vertices and %d edges",
            rewired,
            self.config.num_iterations,
            graph.vertex_count(),
            graph.edge_count(),
        )
        return graph.view()

    def _initialize_graph(self, vertex_factory: IdFactory, edge_factory: IdFactory):
        config = self.config
        graph = GraphStore()
        vertices: List[Hashable] = []
        for _ in range(config.num_vertices):
            vertex = vertex_factory()
            graph.add_vertex(vertex)
            vertices.append(vertex)

        def draw_pair():
            return self._random.choice(vertices), self._random.choice(vertices)

        def is_new(pair) -> bool:
            return not graph.is_successor(*pair)

        while graph.edge_count() < config.num_edges:
            source, target = rejection_sample(
                draw_pair, is_new, max_attempts=config.max_attempts, what="initial edge"
            )
            graph.add_edge(edge_factory(), source, target, directed=config.directed)

        self._max_degree = max(graph.degree(vertex) for vertex in vertices)
        if self._max_degree <= 0:
            raise DegenerateProbability("Initial graph has no vertex of positive degree")

        LOGGER.info(
            "Initialised random graph with %d vertices, %d edges, max degree %d",
            graph.vertex_count(),
            graph.edge_count(),
            self._max_degree,
        )
        self._emit("initialized", "Random graph initialised", [], {"max_degree": self._max_degree})
        return graph, vertices

    def _rewire(self, graph: GraphStore, vertices: List[Hashable], edge_factory: IdFactory) -> bool:
        max_attempts = self.config.max_attempts
        max_degree = self._max_degree

        def draw_vertex() -> Hashable:
            return self._random.choice(vertices)

        vertex = rejection_sample(
            draw_vertex,
            lambda candidate: graph.degree(candidate) > 0,
            max_attempts=max_attempts,
            what="vertex with positive degree",
        )
        incident = graph.incident_edges(vertex)
        doomed = incident[self._random.randint(len(incident))]

        source = draw_vertex()
        target = rejection_sample(
            draw_vertex,
            lambda candidate: self._random.uniform() <= (graph.degree(candidate) + 1) / max_degree,
            max_attempts=max_attempts,
            what="rewiring target",
        )

        if source == target or graph.is_successor(source, target):
            LOGGER.debug("Skipped rewiring %r to (%r, %r)", doomed, source, target)
            return False

        graph.remove_edge(doomed)
        edge = edge_factory()
        graph.add_edge(edge, source, target, directed=self.config.directed)
        LOGGER.debug("Rewired %r to %r = (%r, %r)", doomed, edge, source, target)
        self._emit("edge_rewired", "Edge rewired", [doomed, edge], {"pair": (source, target)})
        return True

    def _emit(self, action: str, msg: str, target_ids, extras: Optional[dict] = None) -> None:
        if self.events is None:
            return
        self.events.emit(
            level="debug",
            msg=msg,
            action=action,
            actor=type(self).__name__,
            target_ids=target_ids,
            extras=extras,
        )
