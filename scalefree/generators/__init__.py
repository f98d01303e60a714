"""Stochastic graph generators."""

from .barabasi_albert import BarabasiAlbertConfig, BarabasiAlbertGenerator
from .base import EvolvingGraphGenerator, GraphGenerator, rejection_sample
from .power_law import PowerLawConfig, PowerLawGenerator

__all__ = [
    "BarabasiAlbertConfig",
    "BarabasiAlbertGenerator",
    "EvolvingGraphGenerator",
    "GraphGenerator",
    "PowerLawConfig",
    "PowerLawGenerator",
    "rejection_sample",
]
