"""System random source using ``os.urandom()``.

This is the default source. It is cryptographically secure and always
available, and it holds no state, so draws cannot be replayed.
"""

from __future__ import annotations

import os

import numpy as np

from weighted_picker.random.base import RandomSource
from weighted_picker.random.registry import register_random_source

# 53 mantissa bits -> every float in [0, 1) on a 2**-53 grid is equally likely.
_FLOAT_BITS = 53
_SCALE = 1.0 / (1 << _FLOAT_BITS)


@register_random_source("system")
class SystemRandomSource(RandomSource):
    """``os.urandom()`` wrapper — always available, not reproducible."""

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def random(self) -> float:
        """Return a uniform float in ``[0, 1)`` built from 8 OS random bytes."""
        word = int(np.frombuffer(os.urandom(8), dtype="<u8")[0])
        return (word >> (64 - _FLOAT_BITS)) * _SCALE

    def close(self) -> None:
        """No-op — no resources to release."""
