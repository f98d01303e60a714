"""Tests for :mod:`scalefree.graph.ids`."""

from __future__ import annotations

from scalefree.graph import ids


def test_new_id_prefix_and_uniqueness():
    identifier = ids.new_id("v")
    assert identifier.startswith("v_")
    assert identifier != ids.new_id("v")


def test_sequential_ids_are_reproducible():
    first = ids.sequential_ids("e")
    second = ids.sequential_ids("e")
    assert [first() for _ in range(3)] == ["e_0", "e_1", "e_2"]
    assert second() == "e_0"


def test_random_ids_mint_fresh_tokens():
    mint = ids.random_ids("v")
    assert mint() != mint()


def test_utc_now_returns_iso_format():
    timestamp = ids.utc_now()
    assert "T" in timestamp and timestamp.endswith("+00:00")
