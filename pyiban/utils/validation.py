#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Structural checks applied before the MOD-97 fold

Every validation function raises a subclass of
:class:`~pyiban.exceptions.PyIBANError` when a constraint is violated.
The validator calls them in order and stops at the first failure.

Checked Constraints
-------------------
* The input holds at least a two-character country prefix.
* The country prefix has an entry in the country-length table.
* The total character count equals the table entry.
* The checksum remainder equals 1.

Design Note
-----------
These functions take plain strings and integers, **not** a
:class:`~pyiban.countries.CountryLengthTable`, so that ``utils`` does not
depend on the table module.  This keeps the import graph acyclic::

    utils ← models ← countries ← validator ← cli
"""

from __future__ import annotations

import logging

from pyiban.exceptions import (
    ChecksumError,
    LengthMismatchError,
    UnknownCountryError,
)
from pyiban.utils.constants import COUNTRY_CODE_LENGTH, EXPECTED_REMAINDER

logger = logging.getLogger(__name__)


def extract_country_code(iban: str) -> str:
    """Return the uppercased two-character country prefix of *iban*

    Raises
    ------
    UnknownCountryError
        If *iban* is shorter than two characters.

    Examples
    --------
    >>> extract_country_code("de89370400440532013000")
    'DE'
    """
    if len(iban) < COUNTRY_CODE_LENGTH:
        raise UnknownCountryError(
            f"Input of length {len(iban)} is too short to hold a country code."
        )
    return iban[:COUNTRY_CODE_LENGTH].upper()


def validate_country(country_code: str, expected_length: int | None) -> int:
    """Verify that a table lookup for *country_code* succeeded

    Parameters
    ----------
    country_code : str
        The prefix that was looked up, for the error message.
    expected_length : int or None
        Result of the table lookup.

    Returns
    -------
    int
        *expected_length*, narrowed to ``int``.

    Raises
    ------
    UnknownCountryError
        If *expected_length* is ``None``.
    """
    if expected_length is None:
        raise UnknownCountryError(
            f"Country code {country_code!r} is not in the country-length table."
        )
    return expected_length


def validate_length(iban: str, expected_length: int, country_code: str = "") -> None:
    """Verify that *iban* has exactly *expected_length* characters

    Length is counted in characters (code points), the same unit the
    rearrangement step slices by.

    Raises
    ------
    LengthMismatchError
        If the counts differ.
    """
    if len(iban) != expected_length:
        raise LengthMismatchError(
            f"IBAN for {country_code or 'country'} must be {expected_length} "
            f"characters, got {len(iban)}."
        )
    logger.debug("Length %d matches entry for %s.", expected_length, country_code)


def validate_remainder(remainder: int) -> None:
    """Verify that the MOD-97 remainder is 1

    Raises
    ------
    ChecksumError
        If *remainder* differs from 1.
    """
    if remainder != EXPECTED_REMAINDER:
        raise ChecksumError(
            f"MOD-97 remainder is {remainder}, expected {EXPECTED_REMAINDER}."
        )
