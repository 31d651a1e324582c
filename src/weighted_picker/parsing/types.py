"""Data types produced while parsing command-line words."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

DEFAULT_QUALITY: float = 1.0
"""Weight given to a name that has no preceding ``-q``."""


@dataclass(frozen=True, slots=True)
class Name:
    """A bare word naming a candidate, kept verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class Quality:
    """An explicit weight for the name that follows it."""

    value: float


Token = Union[Name, Quality]


@dataclass(frozen=True, slots=True)
class Entry:
    """One candidate in the weighted draw.

    Attributes:
        name: The candidate as the user typed it.
        quality: Nonnegative relative weight. Zero is legal and means the
            entry can never be chosen.
    """

    name: str
    quality: float = DEFAULT_QUALITY

    def __post_init__(self) -> None:
        if not math.isfinite(self.quality) or self.quality < 0:
            raise ValueError(f"Entry quality must be finite and >= 0, got {self.quality!r}")
