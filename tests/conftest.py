#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for PyIBAN tests

Provides known-good and known-bad IBANs for every configured country so
that validator, conversion and CLI tests share one set of reference data.
"""

from __future__ import annotations

import pytest

from pyiban.countries import CountryLengthTable

VALID_IBANS: dict[str, str] = {
    "AT": "AT611904300234573201",
    "BE": "BE68539007547034",
    "CZ": "CZ6508000000192000145399",
    "DE": "DE89370400440532013000",
    "DK": "DK5000400440116243",
    "FR": "FR1420041010050500013M02606",
}
"""One checksum-valid IBAN per configured country."""

REFERENCE_VALID = "DE22790200760027913168"
REFERENCE_BAD_CHECKSUM = "DE21790200760027913173"
REFERENCE_WRONG_LENGTH = "DE227902007600279131"
REFERENCE_UNKNOWN_COUNTRY = "XX22790200760027913168"

SPACED_BUT_CHECKSUM_VALID = "BE08539007547 03"
"""16 characters; valid only when the space is dropped during conversion."""


@pytest.fixture
def valid_ibans() -> dict[str, str]:
    """Country code → known-valid IBAN"""
    return dict(VALID_IBANS)


@pytest.fixture
def small_table() -> CountryLengthTable:
    """Single-entry table for Germany only"""
    return CountryLengthTable({"DE": 22})


@pytest.fixture
def iban_file(tmp_path):
    """Text file with two valid IBANs, one invalid IBAN and blank lines"""
    path = tmp_path / "ibans.txt"
    path.write_text(
        f"{REFERENCE_VALID}\n"
        "\n"
        f"  {VALID_IBANS['AT']}  \n"
        f"{REFERENCE_BAD_CHECKSUM}\n",
        encoding="utf-8",
    )
    return path
