"""Selection subsystem for weighted-picker.

Draws one entry with probability proportional to its quality, using a
uniform value from an injected random source.
"""

from weighted_picker.selection.selector import WeightedSelector, pick
from weighted_picker.selection.types import SelectionResult

__all__ = [
    "SelectionResult",
    "WeightedSelector",
    "pick",
]
