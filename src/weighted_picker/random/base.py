"""Abstract base class for all random sources.

Every source of draw values (OS randomness, a seeded generator, or a
replayed test sequence) implements this interface.
Subclasses must implement the four abstract members: ``name``,
``is_available``, ``random()``, and ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RandomSource(ABC):
    """Abstract base for all random sources.

    A source hands out one uniform float in ``[0, 1)`` per ``random()``
    call. The selector consumes exactly one value per draw.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'system'``, ``'seeded'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide values."""

    @abstractmethod
    def random(self) -> float:
        """Return one uniform float in ``[0, 1)``.

        Raises:
            RandomSourceUnavailableError: If the source cannot provide a value.
        """

    @abstractmethod
    def close(self) -> None:
        """Release resources (file handles, connections)."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_available}
