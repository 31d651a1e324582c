"""Data types for the draw logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DrawRecord:
    """Immutable record of one weighted draw.

    Attributes:
        timestamp_ns: Wall-clock time of the draw (nanoseconds since epoch).
        source: Name of the random source that provided the value.
        num_entries: Number of candidate entries.
        total_quality: Sum of all entry qualities.
        value: The drawn value, in ``[0, total_quality)``.
        chosen_name: Name of the selected entry.
        chosen_index: Position of the selected entry.
        chosen_quality: Quality of the selected entry.
        fallback: True if the last-entry guard chose the entry.
    """

    timestamp_ns: int
    source: str
    num_entries: int
    total_quality: float
    value: float
    chosen_name: str
    chosen_index: int
    chosen_quality: float
    fallback: bool
