"""Generator protocols and the shared rejection-sampling loop."""
from __future__ import annotations

import logging
from typing import Callable, Protocol, TypeVar

from ..errors import DegenerateProbability
from ..graph.view import GraphView

T = TypeVar("T")

LOGGER = logging.getLogger(__name__)


class GraphGenerator(Protocol):
    """Protocol for generators producing a finished graph per call."""

    def generate_graph(self) -> GraphView:
        """Return the generated graph."""


class EvolvingGraphGenerator(GraphGenerator, Protocol):
    """Protocol for generators that grow a graph in discrete time steps."""

    def evolve_graph(self, steps: int) -> None:
        """Advance the graph by ``steps`` time steps."""

    def num_elapsed_time_steps(self) -> int:
        """Return how many steps have been taken since construction or reset."""

    def reset(self) -> None:
        """Return the generator to its post-construction state."""


def rejection_sample(
    draw: Callable[[], T],
    accept: Callable[[T], bool],
    *,
    max_attempts: int,
    what: str,
) -> T:
    """Call ``draw`` until ``accept`` approves a candidate and return it.

    Raises :class:`DegenerateProbability` once ``max_attempts`` candidates have
    been rejected.
    """

    for _ in range(max_attempts):
        candidate = draw()
        if accept(candidate):
            return candidate
    LOGGER.error("Rejection sampling for %s gave up after %d attempts", what, max_attempts)
    raise DegenerateProbability(
        f"No {what} accepted after {max_attempts} attempts; the acceptance "
        "probability is zero or vanishingly small for this graph"
    )
