#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the MOD-97 transformation steps

Covers rearrangement, letter-to-digit conversion (lenient and strict),
segment boundaries and the fixed-precision fold.
"""

from __future__ import annotations

import pytest

from pyiban.exceptions import InvalidCharacterError, SegmentationError
from pyiban.utils.conversion import (
    checksum_remainder,
    mod97,
    rearrange,
    split_segments,
    to_digits,
)

from conftest import REFERENCE_VALID, VALID_IBANS


class TestRearrange:

    def test_moves_header_to_end(self) -> None:
        assert rearrange(REFERENCE_VALID) == "790200760027913168DE22"

    def test_preserves_length(self, valid_ibans) -> None:
        for iban in valid_ibans.values():
            assert len(rearrange(iban)) == len(iban)


class TestToDigits:

    def test_letters(self) -> None:
        assert to_digits("AZ") == "1035"

    def test_digits_pass_through(self) -> None:
        assert to_digits("0123456789") == "0123456789"

    def test_lowercase_is_uppercased(self) -> None:
        assert to_digits("de22") == to_digits("DE22") == "131422"

    def test_drops_other_characters_by_default(self) -> None:
        assert to_digits("A B-1/é") == "10111"

    def test_non_ascii_digit_dropped(self) -> None:
        assert to_digits("1٣") == "1"

    def test_non_ascii_letter_dropped(self) -> None:
        assert to_digits("ı1ß") == "1"

    @pytest.mark.parametrize("text", ["A B", "12-3", "é1", "1٣", "ı1", "ß"])
    def test_strict_rejects(self, text: str) -> None:
        with pytest.raises(InvalidCharacterError):
            to_digits(text, strict=True)

    def test_strict_accepts_alphanumerics(self) -> None:
        assert to_digits("13M02606FR14", strict=True) == "132202606152714"


class TestSplitSegments:

    def test_empty(self) -> None:
        assert split_segments("") == []

    @pytest.mark.parametrize("digits", ["1", "12345678", "123456789"])
    def test_short_input_single_segment(self, digits: str) -> None:
        assert split_segments(digits) == [digits]

    def test_first_nine_then_sevens(self) -> None:
        digits = "1234567890123456789"
        assert split_segments(digits) == ["123456789", "0123456", "789"]

    def test_exact_seven_multiple_has_no_remainder(self) -> None:
        segments = split_segments("9" * 23)
        assert [len(s) for s in segments] == [9, 7, 7]

    def test_reference_iban_layout(self) -> None:
        digits = to_digits(rearrange(REFERENCE_VALID))
        assert len(digits) == 24
        assert [len(s) for s in split_segments(digits)] == [9, 7, 7, 1]

    def test_concatenation_restores_input(self) -> None:
        digits = "31415926535897932384626433832795"
        assert "".join(split_segments(digits)) == digits


class TestMod97:

    def test_no_segments(self) -> None:
        assert mod97([]) == 0

    def test_single_segment(self) -> None:
        assert mod97(["98"]) == 1

    @pytest.mark.parametrize("iban", sorted(VALID_IBANS.values()))
    def test_matches_big_integer_remainder(self, iban: str) -> None:
        digits = to_digits(rearrange(iban))
        assert mod97(split_segments(digits)) == int(digits) % 97 == 1

    def test_remainder_prefix_not_padded(self) -> None:
        assert mod97(["5", "0000001"]) == 50000001 % 97

    @pytest.mark.parametrize(
        "segments",
        [["1234567890"], ["123456789", "12345678"], ["12", ""], ["12a"]],
    )
    def test_rejects_out_of_bound_segments(self, segments) -> None:
        with pytest.raises(SegmentationError):
            mod97(segments)


class TestChecksumRemainder:

    def test_valid_iban(self) -> None:
        assert checksum_remainder(REFERENCE_VALID) == 1

    def test_altered_iban(self) -> None:
        assert checksum_remainder("DE21790200760027913173") != 1
