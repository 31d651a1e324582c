"""Replay source returning a caller-supplied sequence of values.

Used to make selector behaviour exactly reproducible in tests: each
``random()`` call returns the next value, and the source reports itself
unavailable once the sequence runs out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weighted_picker.exceptions import RandomSourceUnavailableError
from weighted_picker.random.base import RandomSource

if TYPE_CHECKING:
    from collections.abc import Iterable


class FixedSequenceSource(RandomSource):
    """Deterministic source for testing.

    Args:
        values: Values to return, in order. Each must lie in ``[0, 1)``.

    Raises:
        ValueError: If any value is outside ``[0, 1)``.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._values = [float(v) for v in values]
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Fixed random values must lie in [0, 1), got {value}")
        self._position = 0

    @property
    def name(self) -> str:
        """Return ``'fixed'``."""
        return "fixed"

    @property
    def is_available(self) -> bool:
        """``True`` while unconsumed values remain."""
        return self._position < len(self._values)

    @property
    def consumed(self) -> int:
        """Number of values handed out so far."""
        return self._position

    def random(self) -> float:
        """Return the next stored value.

        Raises:
            RandomSourceUnavailableError: If every value has been consumed.
        """
        if not self.is_available:
            raise RandomSourceUnavailableError(
                f"Fixed sequence exhausted after {len(self._values)} value(s)"
            )
        value = self._values[self._position]
        self._position += 1
        return value

    def close(self) -> None:
        """No-op — no resources to release."""
