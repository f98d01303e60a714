"""Exception hierarchy shared by the graph store and the generators."""
from __future__ import annotations


class ScalefreeError(Exception):
    """Base class for every error raised by :mod:`scalefree`."""


class InvalidConfiguration(ScalefreeError, ValueError):
    """A generator was configured with options that cannot be honoured."""


class UnknownVertex(ScalefreeError, KeyError):
    """An operation referenced a vertex that is not in the graph."""


class UnknownEdge(ScalefreeError, KeyError):
    """An operation referenced an edge that is not in the graph."""


class DuplicateVertex(ScalefreeError, ValueError):
    """A vertex identity was added to a graph that already contains it."""


class DuplicateEdge(ScalefreeError, ValueError):
    """An edge identity was added to a graph that already contains it."""


class DegenerateProbability(ScalefreeError, RuntimeError):
    """A rejection-sampling loop can not (or did not) accept a candidate."""


__all__ = [
    "DegenerateProbability",
    "DuplicateEdge",
    "DuplicateVertex",
    "InvalidConfiguration",
    "ScalefreeError",
    "UnknownEdge",
    "UnknownVertex",
]
