"""Fold a token sequence into weighted entries.

A quality always precedes the name it applies to. Names without one get
:data:`~weighted_picker.parsing.types.DEFAULT_QUALITY`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weighted_picker.exceptions import DuplicateQualityError, OrphanedQualityError
from weighted_picker.parsing.tokenizer import tokenize
from weighted_picker.parsing.types import DEFAULT_QUALITY, Entry, Name, Quality

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from weighted_picker.parsing.types import Token


def build_entries(tokens: Iterable[Token]) -> list[Entry]:
    """Pair each name with the quality pending before it.

    Args:
        tokens: Tokens in command-line order.

    Returns:
        Entries in the order their names appeared.

    Raises:
        DuplicateQualityError: If a second quality arrives before a name
            consumed the first.
        OrphanedQualityError: If the sequence ends with an unconsumed quality.
    """
    entries: list[Entry] = []
    pending: float | None = None

    for token in tokens:
        if isinstance(token, Name):
            entries.append(Entry(token.text, DEFAULT_QUALITY if pending is None else pending))
            pending = None
        elif isinstance(token, Quality):
            if pending is not None:
                raise DuplicateQualityError(
                    f"Quality is already specified ({pending}), cannot override with {token.value}"
                )
            pending = token.value
        else:
            raise TypeError(f"Unknown token type: {type(token).__name__}")

    if pending is not None:
        raise OrphanedQualityError(f"No name after quality ({pending})")

    return entries


def parse_entries(words: Sequence[str]) -> list[Entry]:
    """Tokenize *words* and build entries in one step."""
    return build_entries(tokenize(words))
