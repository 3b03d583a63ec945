#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
IBAN validation against ISO 7064 MOD-97-10 and the country-length table

The pipeline is strictly linear and stops at the first failing step:

1. **Prefix** — read the two-character country code (uppercased).
2. **Length** — compare the character count with the table entry.
3. **Rearrange** — move the first four characters to the end.
4. **Convert** — map letters to 10–35, keep digits, drop (or, in strict
   mode, reject) anything else.
5. **Fold** — reduce the digit string modulo 97 segment by segment.
6. **Check** — the IBAN is valid iff the remainder is 1.

Entry Points
------------
:func:`validate`
    Boolean contract.  Never raises, whatever the input.
:func:`check`
    Same pipeline, returning a :class:`~pyiban.models.ValidationResult`
    that names the failing step.
:func:`ensure_valid`
    Raises the matching :class:`~pyiban.exceptions.PyIBANError` subclass.
:func:`validate_many`
    Batch form returning a NumPy boolean array.

Examples
--------
>>> validate("DE22790200760027913168")
True
>>> check("XX22790200760027913168").status
<ValidationStatus.UNKNOWN_COUNTRY: 'unknown_country'>
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

import numpy as np

from pyiban.countries import COUNTRY_TABLE, CountryLengthTable
from pyiban.exceptions import (
    ChecksumError,
    InvalidCharacterError,
    LengthMismatchError,
    PyIBANError,
    UnknownCountryError,
)
from pyiban.models.result import ValidationResult, ValidationStatus
from pyiban.utils.constants import COUNTRY_CODE_LENGTH
from pyiban.utils.conversion import checksum_remainder
from pyiban.utils.validation import (
    extract_country_code,
    validate_country,
    validate_length,
    validate_remainder,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def ensure_valid(
    iban: str,
    *,
    strict: bool = False,
    table: CountryLengthTable = COUNTRY_TABLE,
) -> str:
    """Validate *iban* and raise on the first failing step

    Parameters
    ----------
    iban : str
        Candidate IBAN, without spaces.
    strict : bool, optional
        Reject characters outside ``[A-Za-z0-9]`` instead of dropping
        them during numeric conversion.
    table : CountryLengthTable, optional
        Country-length table to check against.

    Returns
    -------
    str
        *iban*, unchanged.

    Raises
    ------
    UnknownCountryError
        If the prefix is missing or not configured.
    LengthMismatchError
        If the length differs from the table entry.
    InvalidCharacterError
        If *strict* is ``True`` and an unsupported character is found.
    ChecksumError
        If the MOD-97 remainder is not 1.
    TypeError
        If *iban* is not a string.
    """
    if not isinstance(iban, str):
        raise TypeError(f"IBAN must be a str, got {type(iban).__name__}.")
    country_code = extract_country_code(iban)
    expected = validate_country(country_code, table.expected_length(country_code))
    validate_length(iban, expected, country_code)
    validate_remainder(checksum_remainder(iban, strict=strict))
    return iban


def check(
    iban: str,
    *,
    strict: bool = False,
    table: CountryLengthTable = COUNTRY_TABLE,
) -> ValidationResult:
    """Validate *iban* and report which step decided the outcome

    Takes the same arguments as :func:`ensure_valid`.  Never raises;
    non-string input is reported as ``TOO_SHORT`` with an empty
    ``iban`` field.
    """
    if not isinstance(iban, str):
        logger.debug("Rejecting non-string input of type %s.", type(iban).__name__)
        return ValidationResult(iban="", status=ValidationStatus.TOO_SHORT)

    actual = len(iban)
    if actual < COUNTRY_CODE_LENGTH:
        return ValidationResult(iban=iban, status=ValidationStatus.TOO_SHORT, actual_length=actual)

    country_code = iban[:COUNTRY_CODE_LENGTH].upper()
    expected = table.expected_length(country_code)
    result = ValidationResult(
        iban=iban,
        status=ValidationStatus.VALID,
        country_code=country_code,
        expected_length=expected,
        actual_length=actual,
    )
    try:
        validate_country(country_code, expected)
        validate_length(iban, expected, country_code)
        remainder = checksum_remainder(iban, strict=strict)
    except UnknownCountryError as exc:
        logger.debug("%s", exc)
        return replace(result, status=ValidationStatus.UNKNOWN_COUNTRY)
    except LengthMismatchError as exc:
        logger.debug("%s", exc)
        return replace(result, status=ValidationStatus.WRONG_LENGTH)
    except InvalidCharacterError as exc:
        logger.debug("%s", exc)
        return replace(result, status=ValidationStatus.INVALID_CHARACTER)

    try:
        validate_remainder(remainder)
    except ChecksumError as exc:
        logger.debug("%s", exc)
        return replace(result, status=ValidationStatus.CHECKSUM_MISMATCH, remainder=remainder)
    return replace(result, remainder=remainder)


def validate(
    iban: str,
    *,
    strict: bool = False,
    table: CountryLengthTable = COUNTRY_TABLE,
) -> bool:
    """Return ``True`` iff *iban* passes the length and MOD-97 checks

    Every failure, including empty, too-short, or non-string input,
    yields ``False``; nothing is raised.

    Examples
    --------
    >>> validate("DE21790200760027913173")
    False
    >>> validate("")
    False
    """
    try:
        ensure_valid(iban, strict=strict, table=table)
    except (PyIBANError, TypeError) as exc:
        logger.debug("IBAN %r rejected: %s", iban, exc)
        return False
    return True


def validate_many(
    ibans: Iterable[str],
    *,
    strict: bool = False,
    table: CountryLengthTable = COUNTRY_TABLE,
) -> np.ndarray:
    """Validate a batch of IBANs

    Parameters
    ----------
    ibans : iterable of str
        Candidate IBANs.
    strict, table
        As for :func:`validate`.

    Returns
    -------
    numpy.ndarray
        Boolean array, one entry per input, in input order.

    Examples
    --------
    >>> validate_many(["DE22790200760027913168", "D"]).tolist()
    [True, False]
    """
    flags = np.fromiter(
        (validate(iban, strict=strict, table=table) for iban in ibans),
        dtype=bool,
    )
    logger.debug("Validated %d IBANs, %d valid.", flags.size, int(np.count_nonzero(flags)))
    return flags

