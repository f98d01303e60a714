"""Tests for :mod:`scalefree.config`."""

from __future__ import annotations

import pytest

from scalefree import config


@pytest.fixture(autouse=True)
def fresh_environment():
    config._load_environment.cache_clear()
    yield
    config._load_environment.cache_clear()


def test_get_env_prefers_process_environment(monkeypatch):
    monkeypatch.setenv("SCALEFREE_SEED", "99")
    assert config.get_env("SCALEFREE_SEED") == "99"


def test_get_env_returns_default_when_missing(monkeypatch):
    monkeypatch.delenv("SCALEFREE_DOES_NOT_EXIST", raising=False)
    assert config.get_env("SCALEFREE_DOES_NOT_EXIST", default="fallback") == "fallback"


def test_int_helpers_parse_and_default(monkeypatch):
    monkeypatch.setenv("SCALEFREE_SEED", " 17 ")
    monkeypatch.delenv("SCALEFREE_MAX_ATTEMPTS", raising=False)

    assert config.default_seed() == 17
    assert config.default_max_attempts() == config.DEFAULT_MAX_ATTEMPTS


def test_int_helpers_reject_garbage(monkeypatch):
    monkeypatch.setenv("SCALEFREE_MAX_ATTEMPTS", "lots")
    with pytest.raises(ValueError):
        config.default_max_attempts()


def test_blank_seed_means_unseeded(monkeypatch):
    monkeypatch.setenv("SCALEFREE_SEED", "")
    assert config.default_seed() is None


def test_environment_is_loaded_once(monkeypatch):
    calls = []
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: calls.append(args) or True)

    config.get_env("SCALEFREE_SEED")
    config.get_env("SCALEFREE_MAX_ATTEMPTS")

    assert len(calls) == 1
