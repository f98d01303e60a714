"""Tests for :mod:`scalefree.graph.context`."""

from __future__ import annotations

import dataclasses

import pytest

from scalefree.graph.context import Context
from scalefree.graph.store import GraphStore


def test_contexts_are_distinct_immutable_values():
    store = GraphStore()
    first = Context(store, "e_0")
    second = Context(store, "e_1")

    assert first is not second
    assert first.element == "e_0"
    assert first == Context(store, "e_0")
    assert hash(first) == hash(Context(store, "e_0"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.element = "e_2"
