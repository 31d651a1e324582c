"""Tokenizer for the raw command-line words.

Converts the ordered words into :class:`Name` and :class:`Quality` tokens.
Two spellings set a weight for the following name:

    -q 2.5 Alice     standalone flag, number in the next word
    -q2.5 Alice      number appended to the flag

Any other word beginning with ``-`` is rejected.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from weighted_picker.exceptions import (
    InvalidQualityFormatError,
    InvalidQualityRangeError,
    MissingQualityValueError,
    UnexpectedOptionError,
)
from weighted_picker.parsing.types import Name, Quality, Token

if TYPE_CHECKING:
    from collections.abc import Sequence

QUALITY_FLAG = "-q"

_HEX_PREFIXES = ("0x", "0X")


def _to_float(text: str) -> float:
    unsigned = text[1:] if text[:1] in ("+", "-") else text
    if unsigned.startswith(_HEX_PREFIXES):
        return float.fromhex(text)
    return float(text)


def parse_quality(text: str) -> float:
    """Parse the text of a quality value.

    Accepts ASCII decimal literals (``2.5``, ``1e3``) and hexadecimal
    floats (``0x10``, ``0x1p4``). Non-ASCII digits, surrounding whitespace
    and digit-group underscores, which ``float()`` would otherwise
    tolerate, are rejected.

    Args:
        text: The candidate number, e.g. ``"2.5"``.

    Returns:
        The parsed, finite, nonnegative value.

    Raises:
        InvalidQualityFormatError: If *text* is not a number.
        InvalidQualityRangeError: If the number is NaN, infinite, or negative.
    """
    if not text.isascii() or text != text.strip() or "_" in text:
        raise InvalidQualityFormatError(f'Expected a number after -q, got "{text}"')
    try:
        value = _to_float(text)
    except ValueError:
        raise InvalidQualityFormatError(f'Expected a number after -q, got "{text}"') from None
    except OverflowError:
        # Hex literals past the float range overflow instead of becoming inf.
        value = math.inf

    if not math.isfinite(value) or value < 0:
        raise InvalidQualityRangeError(
            f'Quality must be a valid nonnegative number, got "{text}"'
        )
    return value


def tokenize(words: Sequence[str]) -> list[Token]:
    """Convert command-line words into tokens, left to right.

    Args:
        words: The positional words, in the order they were given.

    Returns:
        Tokens in input order. A standalone ``-q`` produces no token of its
        own; its number does.

    Raises:
        UnexpectedOptionError: For a ``-`` word other than ``-q``/``-q<number>``.
        MissingQualityValueError: If the last word is a standalone ``-q``.
        InvalidQualityFormatError: If a quality is not a number.
        InvalidQualityRangeError: If a quality is not finite or is negative.
    """
    tokens: list[Token] = []
    expecting_number = False

    for word in words:
        if expecting_number:
            tokens.append(Quality(parse_quality(word)))
            expecting_number = False
            continue

        if word.startswith("-"):
            if not word.startswith(QUALITY_FLAG):
                raise UnexpectedOptionError(f"Unexpected option: {word}")
            if word == QUALITY_FLAG:
                expecting_number = True
                continue
            tokens.append(Quality(parse_quality(word[len(QUALITY_FLAG) :])))
        else:
            tokens.append(Name(word))

    if expecting_number:
        raise MissingQualityValueError("Expected a number after -q")

    return tokens
