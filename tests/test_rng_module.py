"""Tests for :mod:`scalefree.rng`."""

from __future__ import annotations

import pytest

from scalefree.rng import RandomSource


def test_same_seed_gives_same_stream():
    first, second = RandomSource(123), RandomSource(123)
    assert [first.uniform() for _ in range(5)] == [second.uniform() for _ in range(5)]
    assert [first.randint(10) for _ in range(5)] == [second.randint(10) for _ in range(5)]


def test_set_seed_restarts_stream():
    source = RandomSource(5)
    expected = [source.uniform() for _ in range(3)]
    source.set_seed(5)
    assert [source.uniform() for _ in range(3)] == expected
    assert source.seed == 5


def test_draws_stay_in_range():
    source = RandomSource(0)
    for _ in range(200):
        assert 0.0 <= source.uniform() < 1.0
        assert 0 <= source.randint(3) < 3
    assert source.choice(["only"]) == "only"


def test_randint_requires_positive_bound():
    with pytest.raises(ValueError):
        RandomSource(0).randint(0)
