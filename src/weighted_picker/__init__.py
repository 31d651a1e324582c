"""weighted-picker: pick one name at random from a weighted list.

Parses command-line words such as ``-q3 Alice Bob`` into weighted entries
and draws one with probability proportional to its weight, using a
pluggable random source.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("weighted-picker")
except PackageNotFoundError:
    __version__ = "0.0.0"

from weighted_picker.config import PickerConfig, resolve_config
from weighted_picker.exceptions import (
    ConfigValidationError,
    DuplicateQualityError,
    EntryBuildError,
    InvalidQualityFormatError,
    InvalidQualityRangeError,
    MissingQualityValueError,
    NoEntriesError,
    OrphanedQualityError,
    PickerError,
    RandomSourceUnavailableError,
    SelectionError,
    TokenizeError,
    UnexpectedOptionError,
    WeightOverflowError,
    ZeroTotalWeightError,
)
from weighted_picker.parsing import Entry, build_entries, parse_entries, tokenize
from weighted_picker.selection import SelectionResult, WeightedSelector, pick

__all__ = [
    "ConfigValidationError",
    "DuplicateQualityError",
    "Entry",
    "EntryBuildError",
    "InvalidQualityFormatError",
    "InvalidQualityRangeError",
    "MissingQualityValueError",
    "NoEntriesError",
    "OrphanedQualityError",
    "PickerConfig",
    "PickerError",
    "RandomSourceUnavailableError",
    "SelectionError",
    "SelectionResult",
    "TokenizeError",
    "UnexpectedOptionError",
    "WeightOverflowError",
    "WeightedSelector",
    "ZeroTotalWeightError",
    "__version__",
    "build_entries",
    "parse_entries",
    "pick",
    "resolve_config",
    "tokenize",
]
