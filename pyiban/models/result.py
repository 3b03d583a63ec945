#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed result models for IBAN validation

:class:`ValidationResult` is the detailed counterpart of the boolean
returned by :func:`pyiban.validate`.  It records which step stopped the
pipeline and the values that step saw.

Statuses
--------
::

    VALID              — length and checksum both passed
    TOO_SHORT          — fewer than two characters, no prefix to read
    UNKNOWN_COUNTRY    — prefix not in the country-length table
    WRONG_LENGTH       — length differs from the table entry
    INVALID_CHARACTER  — strict mode met a character outside [A-Za-z0-9]
    CHECKSUM_MISMATCH  — MOD-97 remainder is not 1
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValidationStatus(str, Enum):
    """Outcome of a single IBAN check"""

    VALID = "valid"
    TOO_SHORT = "too_short"
    UNKNOWN_COUNTRY = "unknown_country"
    WRONG_LENGTH = "wrong_length"
    INVALID_CHARACTER = "invalid_character"
    CHECKSUM_MISMATCH = "checksum_mismatch"


@dataclass(frozen=True)
class ValidationResult:
    """Detailed outcome of validating one IBAN

    Parameters
    ----------
    iban : str
        The input exactly as given.
    status : ValidationStatus
        The step that decided the outcome.
    country_code : str | None
        Uppercased prefix, or ``None`` when the input was too short.
    expected_length : int | None
        Table entry for *country_code*, or ``None`` if unknown.
    actual_length : int
        Character count of *iban*.
    remainder : int | None
        MOD-97 remainder, or ``None`` if the fold did not run.
    """

    iban: str
    status: ValidationStatus
    country_code: str | None = None
    expected_length: int | None = None
    actual_length: int = 0
    remainder: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.status is ValidationStatus.VALID

    def __bool__(self) -> bool:
        return self.is_valid
