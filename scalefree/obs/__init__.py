"""Observation helpers for generator runs."""

from .events import Event, EventBus

__all__ = ["Event", "EventBus"]
