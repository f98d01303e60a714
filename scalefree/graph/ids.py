"""Identity factories for vertices and edges, plus timestamp helpers."""
from __future__ import annotations

import datetime as _dt
import itertools
import uuid
from typing import Callable, Hashable

IdFactory = Callable[[], Hashable]


def new_id(prefix: str) -> str:
    """Return a globally unique identifier with the provided ``prefix``."""

    return f"{prefix}_{uuid.uuid4().hex}"


def sequential_ids(prefix: str, start: int = 0) -> IdFactory:
    """Return a factory minting ``"<prefix>_<n>"`` for ``n = start, start + 1, ...``.

    Sequential identities are reproducible, which is what seeded generators
    need when two runs are compared element by element.
    """

    counter = itertools.count(start)

    def mint() -> str:
        return f"{prefix}_{next(counter)}"

    return mint


def random_ids(prefix: str) -> IdFactory:
    """Return a factory minting uuid based identities via :func:`new_id`."""

    return lambda: new_id(prefix)


def utc_now() -> str:
    """Return the current UTC time formatted as an ISO 8601 string."""

    return _dt.datetime.now(_dt.timezone.utc).isoformat()
