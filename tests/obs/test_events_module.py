"""Tests for :mod:`scalefree.obs.events`."""

from __future__ import annotations

from scalefree.obs.events import EventBus


def test_event_bus_emit_and_history():
    bus = EventBus()
    event = bus.emit(level="debug", msg="Vertex added", action="vertex_added", target_ids=["v_0"], extras={"step": 1})

    assert event.msg == "Vertex added"
    history = list(bus.history())
    assert history == [event]


def test_actions_drop_timestamps_and_filter():
    bus = EventBus()
    bus.emit(level="debug", msg="a", action="vertex_added", target_ids=["v_0"])
    bus.emit(level="debug", msg="b", action="edges_added", target_ids=["e_0", "e_1"])

    assert bus.actions() == [("vertex_added", ("v_0",)), ("edges_added", ("e_0", "e_1"))]
    assert bus.actions("edges_added") == [("edges_added", ("e_0", "e_1"))]
    bus.clear()
    assert bus.actions() == []
