#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
MOD-97-10 transformation steps for the PyIBAN package

Each step of the checksum pipeline is a small pure function so that the
validator can chain them and tests can exercise them one at a time::

    rearrange → to_digits → split_segments → mod97

Fixed-Precision Fold
--------------------
The digit string of a 27-character IBAN is up to ~50 digits long.  Rather
than parsing it as a single big integer, the fold reduces it segment by
segment.  The first segment holds at most 9 digits and every later
segment at most 7; the running remainder is always < 97 (≤ 2 digits), so
each intermediate value ``r * 10**k + segment`` stays below 10^9.

Invalid Characters
------------------
Characters that are neither ASCII digits nor ASCII letters are silently
dropped by :func:`to_digits` unless ``strict=True``, in which case the
first such character raises
:class:`~pyiban.exceptions.InvalidCharacterError`.  Dropping reproduces
the historical behaviour of the checker; strict mode is the safer choice
for new callers.
"""

from __future__ import annotations

import logging
from typing import Iterable

from pyiban.exceptions import InvalidCharacterError, SegmentationError
from pyiban.utils.constants import (
    FIRST_SEGMENT_DIGITS,
    HEADER_LENGTH,
    LETTER_OFFSET,
    MODULUS,
    SEGMENT_DIGITS,
)

logger = logging.getLogger(__name__)

_ASCII_DIGITS = frozenset("0123456789")
_ASCII_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


# ---------------------------------------------------------------------------
# Pipeline steps
# ---------------------------------------------------------------------------

def rearrange(iban: str) -> str:
    """Move the country code and check digits to the end

    Examples
    --------
    >>> rearrange("DE22790200760027913168")
    '790200760027913168DE22'
    """
    return iban[HEADER_LENGTH:] + iban[:HEADER_LENGTH]


def to_digits(text: str, *, strict: bool = False) -> str:
    """Convert an alphanumeric string to its MOD-97 digit sequence

    ASCII digits pass through unchanged and each ASCII letter, in either
    case, becomes a two-digit number (A=10 … Z=35).

    Parameters
    ----------
    text : str
        Rearranged IBAN text.
    strict : bool, optional
        If ``True``, raise on the first character outside ``[A-Za-z0-9]``
        instead of dropping it.

    Returns
    -------
    str
        A string of ASCII decimal digits only.

    Raises
    ------
    InvalidCharacterError
        If *strict* is ``True`` and an unsupported character is found.

    Examples
    --------
    >>> to_digits("AB12")
    '101112'
    >>> to_digits("a-1")
    '101'
    """
    out: list[str] = []
    for position, ch in enumerate(text):
        if ch in _ASCII_DIGITS:
            out.append(ch)
        elif ch.isascii() and ch.upper() in _ASCII_UPPER:
            out.append(str(ord(ch.upper()) - LETTER_OFFSET))
        elif strict:
            raise InvalidCharacterError(
                f"Character {ch!r} at position {position} is not an ASCII "
                f"letter or digit."
            )
        else:
            logger.debug("Dropping character %r at position %d.", ch, position)
    return "".join(out)


def split_segments(digits: str) -> list[str]:
    """Chunk a digit string into fold segments

    The first segment takes up to 9 digits; the rest is cut into 7-digit
    chunks with a final 1–6 digit remainder when the count does not
    divide evenly.

    Examples
    --------
    >>> split_segments("1234567890123456789")
    ['123456789', '0123456', '789']
    >>> split_segments("12345")
    ['12345']
    """
    if not digits:
        return []
    segments = [digits[:FIRST_SEGMENT_DIGITS]]
    for start in range(FIRST_SEGMENT_DIGITS, len(digits), SEGMENT_DIGITS):
        segments.append(digits[start:start + SEGMENT_DIGITS])
    return segments


def mod97(segments: Iterable[str]) -> int:
    """Fold digit segments into their remainder modulo 97

    Parameters
    ----------
    segments : iterable of str
        Segments as produced by :func:`split_segments`.

    Returns
    -------
    int
        Remainder in ``[0, 96]``; ``0`` for no segments.

    Raises
    ------
    SegmentationError
        If a segment is empty, non-numeric, or longer than its position
        allows (9 digits first, 7 after).
    """
    remainder = 0
    for index, segment in enumerate(segments):
        limit = FIRST_SEGMENT_DIGITS if index == 0 else SEGMENT_DIGITS
        if not segment or len(segment) > limit or not set(segment) <= _ASCII_DIGITS:
            raise SegmentationError(
                f"Segment {index} ({segment!r}) must be 1-{limit} ASCII digits."
            )
        remainder = (remainder * 10 ** len(segment) + int(segment)) % MODULUS
    return remainder


def checksum_remainder(iban: str, *, strict: bool = False) -> int:
    """Run rearrangement, conversion, segmentation and fold in one call"""
    digits = to_digits(rearrange(iban), strict=strict)
    segments = split_segments(digits)
    remainder = mod97(segments)
    logger.debug(
        "Folded %d digits in %d segments to remainder %d.",
        len(digits), len(segments), remainder,
    )
    return remainder
