"""Event bus recording what the generators did to a graph."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable, List

from scalefree.graph.ids import utc_now


@dataclass
class Event:
    """Simple event structure stored in the event bus."""

    ts: str
    level: str
    msg: str
    action: str | None = None
    actor: str | None = None
    target_ids: List[Hashable] = field(default_factory=list)
    extras: dict | None = None


@dataclass
class EventBus:
    """Append-only in-memory event bus."""

    events: List[Event] = field(default_factory=list)

    def emit(
        self,
        *,
        level: str,
        msg: str,
        action: str | None = None,
        actor: str | None = None,
        target_ids: Iterable[Hashable] | None = None,
        extras: dict | None = None,
    ) -> Event:
        """Create and store a new :class:`Event`."""

        event = Event(
            ts=utc_now(),
            level=level,
            msg=msg,
            action=action,
            actor=actor,
            target_ids=list(target_ids or []),
            extras=extras,
        )
        self.events.append(event)
        return event

    def history(self) -> Iterable[Event]:
        """Return the chronological event history."""

        return tuple(self.events)

    def actions(self, action: str | None = None) -> List[tuple]:
        """Return ``(action, target_ids)`` pairs, optionally filtered by ``action``.

        Timestamps are left out so that histories of two runs can be compared.
        """

        return [
            (event.action, tuple(event.target_ids))
            for event in self.events
            if action is None or event.action == action
        ]

    def clear(self) -> None:
        self.events.clear()
