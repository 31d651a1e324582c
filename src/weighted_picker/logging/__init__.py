"""Draw logging subsystem for weighted-picker.

Provides an immutable per-draw record and a logger with none/summary/full
verbosity.
"""

from weighted_picker.logging.logger import DrawLogger
from weighted_picker.logging.types import DrawRecord

__all__ = [
    "DrawLogger",
    "DrawRecord",
]
