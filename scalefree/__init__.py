"""scalefree package initialization.

This module exposes the mutable graph store and the generators that grow or
rewire it into scale-free shapes.
"""

from .generators import (
    BarabasiAlbertConfig,
    BarabasiAlbertGenerator,
    PowerLawConfig,
    PowerLawGenerator,
)
from .graph import GraphStore, GraphView
from .rng import RandomSource

__all__ = [
    "BarabasiAlbertConfig",
    "BarabasiAlbertGenerator",
    "GraphStore",
    "GraphView",
    "PowerLawConfig",
    "PowerLawGenerator",
    "RandomSource",
]
