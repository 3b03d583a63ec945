#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the country-length table

Covers the shipped entries, case-insensitive lookup, immutability and
rejection of malformed table entries.
"""

from __future__ import annotations

import pytest

from pyiban.countries import COUNTRY_TABLE, CountryLengthTable, expected_length
from pyiban.exceptions import ConfigurationError
from pyiban.utils.constants import COUNTRY_LENGTHS


class TestShippedTable:
    """Tests for the process-wide COUNTRY_TABLE"""

    @pytest.mark.parametrize(
        "code, length",
        [("AT", 20), ("BE", 16), ("CZ", 24), ("DE", 22), ("DK", 18), ("FR", 27)],
    )
    def test_entries(self, code: str, length: int) -> None:
        assert COUNTRY_TABLE.expected_length(code) == length

    def test_entry_count(self) -> None:
        assert len(COUNTRY_TABLE) == 6

    def test_iteration_sorted(self) -> None:
        assert list(COUNTRY_TABLE) == ["AT", "BE", "CZ", "DE", "DK", "FR"]

    def test_lowercase_lookup(self) -> None:
        assert COUNTRY_TABLE.expected_length("de") == 22
        assert COUNTRY_TABLE.expected_length("Fr") == 27

    @pytest.mark.parametrize("code", ["XX", "GB", "", "D", "DEU", "ǅE", None, 42])
    def test_unknown(self, code) -> None:
        assert COUNTRY_TABLE.expected_length(code) is None

    def test_contains(self) -> None:
        assert "DE" in COUNTRY_TABLE
        assert "dk" in COUNTRY_TABLE
        assert "XX" not in COUNTRY_TABLE
        assert 22 not in COUNTRY_TABLE

    def test_module_level_lookup(self) -> None:
        assert expected_length("AT") == 20

    def test_mapping_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            COUNTRY_TABLE.as_mapping()["GB"] = 22
        with pytest.raises(TypeError):
            COUNTRY_LENGTHS["GB"] = 22


class TestCustomTable:
    """Tests for building tables from other mappings"""

    def test_copy_is_independent(self) -> None:
        source = {"DE": 22}
        table = CountryLengthTable(source)
        source["GB"] = 22
        assert "GB" not in table

    @pytest.mark.parametrize("code", ["de", "DEU", "D1", "", 12])
    def test_bad_code(self, code) -> None:
        with pytest.raises(ConfigurationError):
            CountryLengthTable({code: 22})

    @pytest.mark.parametrize("length", [0, 4, -22, 22.0, "22", True])
    def test_bad_length(self, length) -> None:
        with pytest.raises(ConfigurationError):
            CountryLengthTable({"DE": length})

    def test_repr(self, small_table: CountryLengthTable) -> None:
        assert repr(small_table) == "CountryLengthTable({'DE': 22})"
