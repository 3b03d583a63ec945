#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Static data tables and MOD-97-10 constants used across PyIBAN

The country-length table is compiled-in data.  It is exposed as a
read-only mapping so that no caller can add, remove, or change an
entry after import.

References
----------
.. [1] ISO 13616-1:2020, "Financial services — International bank
   account number (IBAN) — Part 1: Structure of the IBAN".
.. [2] ISO/IEC 7064:2003, "Check character systems", MOD 97-10.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# ---------------------------------------------------------------------------
# Country-code → expected total IBAN length
# ---------------------------------------------------------------------------

COUNTRY_LENGTHS: Mapping[str, int] = MappingProxyType({
    "AT": 20,
    "BE": 16,
    "CZ": 24,
    "DE": 22,
    "DK": 18,
    "FR": 27,
})
"""Expected total IBAN length (country code + check digits + BBAN)."""

COUNTRY_NAMES: Mapping[str, str] = MappingProxyType({
    "AT": "Austria",
    "BE": "Belgium",
    "CZ": "Czech Republic",
    "DE": "Germany",
    "DK": "Denmark",
    "FR": "France",
})
"""Display names for the configured countries (CLI listing only)."""


# ---------------------------------------------------------------------------
# IBAN structure
# ---------------------------------------------------------------------------

COUNTRY_CODE_LENGTH: int = 2
"""Number of leading characters holding the ISO 3166-1 country code."""

HEADER_LENGTH: int = 4
"""Country code plus the two check digits; moved to the end before folding."""

MIN_IBAN_LENGTH: int = HEADER_LENGTH + 1
"""Smallest total length a table entry may declare."""


# ---------------------------------------------------------------------------
# MOD-97-10 arithmetic
# ---------------------------------------------------------------------------

MODULUS: int = 97
"""ISO 7064 MOD 97-10 modulus."""

EXPECTED_REMAINDER: int = 1
"""Remainder a valid IBAN leaves after the fold."""

LETTER_OFFSET: int = 55
"""``ord("A") - 10``: subtracting it maps A→10 … Z→35."""

FIRST_SEGMENT_DIGITS: int = 9
"""Maximum digit count of the first fold segment."""

SEGMENT_DIGITS: int = 7
"""Digit count of every following full segment (remainder prefix ≤ 2 digits)."""
