"""Configuration helpers for loading environment variables.

This module ensures that variables defined in a project-level ``.env`` file
are loaded before attempting to access them.  Generator configurations built
through ``from_env`` rely on the helpers below so that the environment is read
in a single, well-defined place.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

SEED_ENV = "SCALEFREE_SEED"
MAX_ATTEMPTS_ENV = "SCALEFREE_MAX_ATTEMPTS"

DEFAULT_MAX_ATTEMPTS = 1_000_000


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load environment variables from the project's ``.env`` file.

    The loader first attempts to read ``.env`` from the repository root.  If the
    file does not exist we still call :func:`load_dotenv` to allow the default
    discovery mechanism to run (e.g., for users who store the file elsewhere).
    Subsequent calls are cached so the file is only read once per process.
    """

    project_root = Path(__file__).resolve().parents[1]
    env_path = project_root / ".env"

    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value for ``key`` from the environment.

    Parameters
    ----------
    key:
        The name of the environment variable to look up.
    default:
        The value to return when ``key`` is not present.
    """

    _load_environment()
    return os.environ.get(key, default)


def get_int_env(key: str, default: Optional[int] = None) -> Optional[int]:
    """Return ``key`` parsed as an integer, or ``default`` when unset or blank."""

    raw = get_env(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc


def default_seed() -> Optional[int]:
    """Seed used by generator configs built from the environment."""

    return get_int_env(SEED_ENV)


def default_max_attempts() -> int:
    """Upper bound on the draws a single rejection-sampling loop may take."""

    value = get_int_env(MAX_ATTEMPTS_ENV)
    return DEFAULT_MAX_ATTEMPTS if value is None else value


__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "MAX_ATTEMPTS_ENV",
    "SEED_ENV",
    "default_max_attempts",
    "default_seed",
    "get_env",
    "get_int_env",
]
