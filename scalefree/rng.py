"""Seeded pseudorandom stream shared by the generators."""
from __future__ import annotations

from typing import Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class RandomSource:
    """Sequentially consumed random stream backed by :class:`numpy.random.Generator`.

    Two sources built with the same integer seed yield identical sequences of
    draws.  ``seed=None`` pulls fresh entropy from the operating system.
    Instances are not safe for concurrent use.
    """

    __slots__ = ("seed", "_generator")

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._generator = np.random.default_rng(seed)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{self.__class__.__name__}(seed={self.seed!r})"

    def set_seed(self, seed: Optional[int]) -> None:
        """Restart the stream from ``seed``."""

        self.seed = seed
        self._generator = np.random.default_rng(seed)

    def uniform(self) -> float:
        """Return a float drawn uniformly from ``[0, 1)``."""

        return float(self._generator.random())

    def randint(self, upper: int) -> int:
        """Return an integer drawn uniformly from ``[0, upper)``."""

        if upper <= 0:
            raise ValueError(f"upper must be positive, got {upper}")
        return int(self._generator.integers(upper))

    def choice(self, items: Sequence[T]) -> T:
        """Return an element of ``items`` drawn uniformly."""

        return items[self.randint(len(items))]
