"""Exception hierarchy for weighted-picker.

All exceptions derive from PickerError, enabling a single catch at the
command-line boundary while allowing fine-grained handling internally.
Every user-facing message includes the offending text or value.
"""


class PickerError(Exception):
    """Base exception for all weighted-picker errors."""


# --- Tokenizer ---


class TokenizeError(PickerError):
    """The raw argument words could not be converted into tokens."""


class UnexpectedOptionError(TokenizeError):
    """A word starting with ``-`` is neither ``-q`` nor ``-q<number>``."""


class MissingQualityValueError(TokenizeError):
    """A standalone ``-q`` was the last word, so no number followed it."""


class InvalidQualityFormatError(TokenizeError):
    """The text given as a quality does not parse as a number."""


class InvalidQualityRangeError(TokenizeError):
    """The quality parsed as a number but is NaN, infinite, or negative."""


# --- Entry builder ---


class EntryBuildError(PickerError):
    """The token sequence could not be folded into entries."""


class DuplicateQualityError(EntryBuildError):
    """Two qualities were given with no name between them."""


class OrphanedQualityError(EntryBuildError):
    """A quality was given but no name followed to consume it."""


# --- Selector ---


class SelectionError(PickerError):
    """A weighted draw is impossible over the given entries."""


class NoEntriesError(SelectionError):
    """There are no entries to select from."""


class ZeroTotalWeightError(SelectionError):
    """The qualities of all entries sum to zero."""


class WeightOverflowError(SelectionError):
    """The qualities are each finite but their sum overflows to infinity."""


# --- Infrastructure ---


class ConfigValidationError(PickerError):
    """Configuration override validation failed.

    Raised when command-line overrides name an unknown field or fail
    type validation.
    """


class RandomSourceUnavailableError(PickerError):
    """A random source cannot provide another value.

    Raised by sources with a finite supply, such as a replayed fixed
    sequence, once exhausted.
    """
