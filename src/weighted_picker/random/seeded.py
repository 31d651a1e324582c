"""Seeded pseudo-random source backed by numpy's ``Generator``.

Two sources built with the same seed produce the same value sequence, which
makes a pick reproducible from the command line (``--seed``).
"""

from __future__ import annotations

import numpy as np

from weighted_picker.random.base import RandomSource
from weighted_picker.random.registry import register_random_source


@register_random_source("seeded")
class SeededRandomSource(RandomSource):
    """PCG64 generator from ``np.random.default_rng``.

    Args:
        seed: Optional RNG seed. ``None`` seeds from OS entropy, in which
            case output is not reproducible.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def name(self) -> str:
        """Return ``'seeded'``."""
        return "seeded"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    @property
    def seed(self) -> int | None:
        """The seed the generator was built with."""
        return self._seed

    def random(self) -> float:
        """Return the next generator value in ``[0, 1)``."""
        return float(self._rng.random())

    def close(self) -> None:
        """No-op — no resources to release."""
