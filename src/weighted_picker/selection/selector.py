"""Cumulative-weight entry selector.

Partitions ``[0, total)`` into consecutive half-open intervals, one per
entry in input order, each as wide as the entry's quality. A single value
drawn from the injected random source picks the interval it lands in.

Zero-quality entries own an empty interval and are never chosen.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from weighted_picker.exceptions import NoEntriesError, WeightOverflowError, ZeroTotalWeightError
from weighted_picker.selection.types import SelectionResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weighted_picker.parsing.types import Entry
    from weighted_picker.random.base import RandomSource

logger = logging.getLogger("weighted_picker")


class WeightedSelector:
    """Weighted random selector over an ordered entry sequence.

    Holds no state besides the injected source, so the same selector can
    serve any number of draws.

    Args:
        source: Provider of uniform values in ``[0, 1)``.
    """

    def __init__(self, source: RandomSource) -> None:
        self._source = source

    @property
    def source(self) -> RandomSource:
        """The random source consumed by :meth:`select`."""
        return self._source

    def select(self, entries: Sequence[Entry]) -> SelectionResult:
        """Draw one entry with probability proportional to its quality.

        Consumes exactly one value from the random source.

        Args:
            entries: Candidates in command-line order.

        Returns:
            SelectionResult describing the chosen entry and the draw.

        Raises:
            NoEntriesError: If *entries* is empty.
            ZeroTotalWeightError: If the qualities sum to zero.
            WeightOverflowError: If the qualities sum to infinity.
        """
        if not entries:
            raise NoEntriesError("No entries to select!")

        qualities = np.fromiter((e.quality for e in entries), dtype=np.float64, count=len(entries))
        with np.errstate(over="ignore"):
            cumulative = np.cumsum(qualities)
        total = float(cumulative[-1])
        if not total > 0:
            raise ZeroTotalWeightError("Sum of all qualities must be greater than 0")
        if not math.isfinite(total):
            raise WeightOverflowError(
                "Sum of all qualities is too large to draw from "
                f"(largest is {float(qualities.max())})"
            )

        value = self._source.random() * total
        index, fallback = self._locate(cumulative, qualities, value)
        if fallback:
            logger.warning(
                "Value %r did not match any entry, total was %r; using entry %d",
                value,
                total,
                index,
            )

        entry = entries[index]
        return SelectionResult(
            name=entry.name,
            index=index,
            quality=entry.quality,
            value=value,
            total=total,
            fallback=fallback,
        )

    @staticmethod
    def _locate(
        cumulative: np.ndarray, qualities: np.ndarray, value: float
    ) -> tuple[int, bool]:
        """Find the first entry whose running sum exceeds *value*.

        Args:
            cumulative: Running sum of qualities, in entry order.
            qualities: The individual qualities.
            value: Drawn value in ``[0, total)``.

        Returns:
            Tuple of (entry index, whether the last-entry guard was used).
        """
        # side="right" -> first i with value < cumulative[i].
        index = int(np.searchsorted(cumulative, value, side="right"))
        if index < len(cumulative):
            return index, False

        # Rounding left value >= total; take the last entry that has weight.
        positive = np.flatnonzero(qualities > 0)
        return int(positive[-1]), True


def pick(entries: Sequence[Entry], source: RandomSource) -> str:
    """Return the name of one entry drawn by weight from *source*."""
    return WeightedSelector(source).select(entries).name
