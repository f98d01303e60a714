"""Scale-free graph growth by preferential attachment."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, List, Optional, Set, Tuple

from ..config import DEFAULT_MAX_ATTEMPTS, default_max_attempts, default_seed
from ..errors import DegenerateProbability, InvalidConfiguration, UnknownVertex
from ..graph.ids import IdFactory, sequential_ids
from ..graph.store import GraphStore
from ..graph.view import GraphView
from ..obs.events import EventBus
from ..rng import RandomSource
from .base import rejection_sample

LOGGER = logging.getLogger(__name__)

Pair = Tuple[Hashable, Hashable]


@dataclass(frozen=True)
class BarabasiAlbertConfig:
    """Options recognised by :class:`BarabasiAlbertGenerator`.

    Parameters
    ----------
    init_vertices:
        Number of unconnected seed vertices created at initialisation.
    edges_per_step:
        Number of edges attaching each new vertex to the existing graph.
    directed:
        Whether the new edges are directed (new vertex -> attach point).  The
        attachment weight is then the in-degree rather than the degree.
    parallel:
        Whether one step may attach the new vertex to the same target twice.
    seed:
        Seed of the random stream; ``None`` draws fresh entropy.
    max_attempts:
        Bound on the draws a single target selection may take.
    """

    init_vertices: int
    edges_per_step: int
    directed: bool = False
    parallel: bool = False
    seed: Optional[int] = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    @classmethod
    def from_env(cls, **overrides) -> "BarabasiAlbertConfig":
        """Build a config whose seed and attempt bound default to the environment."""

        params = {"seed": default_seed(), "max_attempts": default_max_attempts()}
        params.update(overrides)
        return cls(**params)

    def validate(self) -> None:
        if self.init_vertices <= 0:
            raise InvalidConfiguration(
                "Number of initial unconnected 'seed' vertices must be positive, "
                f"got {self.init_vertices}"
            )
        if self.edges_per_step <= 0:
            raise InvalidConfiguration(
                "Number of edges to attach at each time step must be positive, "
                f"got {self.edges_per_step}"
            )
        if not self.parallel and self.init_vertices < self.edges_per_step:
            raise InvalidConfiguration(
                "If parallel edges are disallowed, the initial number of vertices "
                "must be >= the number of edges to attach at each time step"
            )
        if self.max_attempts <= 0:
            raise InvalidConfiguration(f"max_attempts must be positive, got {self.max_attempts}")


class BarabasiAlbertGenerator:
    """Grow a graph one vertex at a time, favouring well connected targets.

    Each time step adds one vertex ``u`` and ``edges_per_step`` edges joining
    ``u`` to vertices that existed before the step.  A candidate ``v``, drawn
    uniformly, is accepted with probability ``(deg(v) + 1) / (|E| + |V| - 1)``
    where the counts are taken before the step's edges are added and ``u``
    itself is excluded from ``|V|``.  All edges of a step are committed
    together so that they do not bias each other's degree lookups.

    Identity factories default to sequential ``v_<n>``/``e_<n>`` counters that
    restart on :meth:`reset`; caller supplied factories are never rewound.
    """

    def __init__(
        self,
        config: BarabasiAlbertConfig,
        *,
        random: Optional[RandomSource] = None,
        vertex_factory: Optional[IdFactory] = None,
        edge_factory: Optional[IdFactory] = None,
        graph_factory: Callable[[], GraphStore] = GraphStore,
        events: Optional[EventBus] = None,
    ) -> None:
        config.validate()
        self.config = config
        self._random = random if random is not None else RandomSource(config.seed)
        self._seed = self._random.seed if random is not None else config.seed
        self._user_vertex_factory = vertex_factory
        self._user_edge_factory = edge_factory
        self._graph_factory = graph_factory
        self.events = events

        self._graph: GraphStore
        self._vertex_factory: IdFactory
        self._edge_factory: IdFactory
        self._vertex_index: List[Hashable] = []
        self._index_vertex: Dict[Hashable, int] = {}
        self._seed_vertices: Tuple[Hashable, ...] = ()
        self._elapsed_time_steps = 0
        self._initialize()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #
    def evolve_graph(self, steps: int) -> None:
        """Advance the graph by ``steps`` time steps."""

        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        for _ in range(steps):
            self._evolve_one_step()
            self._elapsed_time_steps += 1

    def num_elapsed_time_steps(self) -> int:
        return self._elapsed_time_steps

    def generate_graph(self) -> GraphView:
        """Return a read-only view of the graph grown so far.

        The view keeps following this generator until :meth:`reset`, which
        starts a new graph and leaves existing views on the old one.
        """

        return self._graph.view()

    def reset(self) -> None:
        """Discard the graph and start over from fresh seed vertices.

        The random stream is restarted from the seed it was built with (the
        injected source's seed when one was passed), so a reset generator
        evolves exactly like a newly constructed one.
        """

        if self._seed is not None:
            self._random.set_seed(self._seed)
        self._emit("reset", "Generator reset", [])
        self._initialize()

    def set_seed(self, seed: Optional[int]) -> None:
        """Restart the random stream from ``seed``; later resets reuse it."""

        self._seed = seed
        self._random.set_seed(seed)

    def seed_vertices(self) -> Tuple[Hashable, ...]:
        """Return the vertices present before the first time step."""

        return self._seed_vertices

    def index_of(self, vertex: Hashable) -> int:
        """Return the position of ``vertex`` in the sampling index."""

        try:
            return self._index_vertex[vertex]
        except KeyError:
            raise UnknownVertex(f"Vertex {vertex!r} is not in the sampling index") from None

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    def _initialize(self) -> None:
        self._graph = self._graph_factory()
        self._vertex_factory = self._user_vertex_factory or sequential_ids("v")
        self._edge_factory = self._user_edge_factory or sequential_ids("e")

        # Vertices already in a caller supplied graph take part in sampling.
        self._vertex_index = list(self._graph.vertices())
        for _ in range(self.config.init_vertices):
            vertex = self._vertex_factory()
            self._graph.add_vertex(vertex)
            self._vertex_index.append(vertex)
        self._index_vertex = {vertex: i for i, vertex in enumerate(self._vertex_index)}
        self._seed_vertices = tuple(self._vertex_index)
        self._elapsed_time_steps = 0

        LOGGER.info(
            "Initialised preferential attachment graph with %d seed vertices and %d edges",
            len(self._seed_vertices),
            self._graph.edge_count(),
        )
        self._emit("seed_vertices", "Seed vertices created", self._seed_vertices)

    def _evolve_one_step(self) -> None:
        new_vertex = self._vertex_factory()
        self._graph.add_vertex(new_vertex)

        # Every edge of the step touches new_vertex, so removing it undoes the step.
        try:
            pairs = self._choose_attachments(new_vertex)
            edges = []
            for source, target in pairs:
                edge = self._edge_factory()
                self._graph.add_edge(edge, source, target, directed=self.config.directed)
                edges.append(edge)
        except Exception:
            self._graph.remove_vertex(new_vertex)
            raise

        self._index_vertex[new_vertex] = len(self._vertex_index)
        self._vertex_index.append(new_vertex)

        LOGGER.debug(
            "Step %d attached %r to %s",
            self._elapsed_time_steps + 1,
            new_vertex,
            [target for _, target in pairs],
        )
        self._emit("vertex_added", "Vertex added", [new_vertex])
        self._emit("edges_added", "Edges attached", edges, extras={"pairs": pairs})

    def _choose_attachments(self, new_vertex: Hashable) -> List[Pair]:
        graph = self._graph
        # ``new_vertex`` is already counted by vertex_count() but must not weigh in.
        denominator = graph.edge_count() + graph.vertex_count() - 1
        if denominator <= 0:
            raise DegenerateProbability(
                f"Attachment probability denominator is {denominator}; the graph has no weight"
            )
        weight = graph.in_degree if self.config.directed else graph.degree

        chosen: List[Pair] = []
        chosen_set: Set[Pair] = set()

        def draw() -> Hashable:
            return self._random.choice(self._vertex_index)

        def accept(candidate: Hashable) -> bool:
            if not self.config.parallel and (new_vertex, candidate) in chosen_set:
                return False
            probability = (weight(candidate) + 1) / denominator
            return probability >= self._random.uniform()

        for _ in range(self.config.edges_per_step):
            target = rejection_sample(
                draw,
                accept,
                max_attempts=self.config.max_attempts,
                what="attachment target",
            )
            pair = (new_vertex, target)
            chosen.append(pair)
            chosen_set.add(pair)
        return chosen

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
