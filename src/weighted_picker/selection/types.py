"""Data types for the selection subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Result of one weighted draw.

    Attributes:
        name: Name of the chosen entry.
        index: Position of the chosen entry in the input sequence.
        quality: Quality of the chosen entry.
        value: The drawn value, in ``[0, total)``.
        total: Sum of all entry qualities.
        fallback: True if no interval contained ``value`` because of
            floating-point shortfall and the last positive entry was taken.
    """

    name: str
    index: int
    quality: float
    value: float
    total: float
    fallback: bool = False
