"""Pairing of a graph with one of its elements."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, TypeVar

G = TypeVar("G")
E = TypeVar("E", bound=Hashable)


@dataclass(frozen=True)
class Context(Generic[G, E]):
    """Immutable ``(graph, element)`` pair handed to per-element callbacks.

    A new instance is built for every call; callbacks may keep a reference
    without it changing underneath them.
    """

    graph: G
    element: E
