#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Country-code to expected-IBAN-length lookup

:data:`COUNTRY_TABLE` is built once at import time from
:data:`~pyiban.utils.constants.COUNTRY_LENGTHS` and is read-only for the
life of the process, so concurrent lookups need no locking.

Country codes are case-insensitive: :meth:`CountryLengthTable.expected_length`
uppercases its argument before the lookup, matching the uppercasing done
before numeric conversion.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Iterator, Mapping

from pyiban.exceptions import ConfigurationError
from pyiban.utils.constants import (
    COUNTRY_CODE_LENGTH,
    COUNTRY_LENGTHS,
    MIN_IBAN_LENGTH,
)

logger = logging.getLogger(__name__)

_COUNTRY_CODE_RE = re.compile(r"[A-Z]{2}")


class CountryLengthTable:
    """Immutable mapping of country code to expected total IBAN length

    Parameters
    ----------
    lengths : Mapping[str, int]
        Uppercase two-letter codes mapped to total IBAN lengths.

    Raises
    ------
    ConfigurationError
        If a code is not two uppercase ASCII letters or a length is not
        an integer of at least 5.

    Examples
    --------
    >>> table = CountryLengthTable({"DE": 22})
    >>> table.expected_length("de")
    22
    >>> table.expected_length("XX") is None
    True
    """

    def __init__(self, lengths: Mapping[str, int]) -> None:
        checked: dict[str, int] = {}
        for code, length in lengths.items():
            if not isinstance(code, str) or not _COUNTRY_CODE_RE.fullmatch(code):
                raise ConfigurationError(
                    f"Country code {code!r} must be two uppercase ASCII letters."
                )
            if isinstance(length, bool) or not isinstance(length, int) or length < MIN_IBAN_LENGTH:
                raise ConfigurationError(
                    f"Length {length!r} for {code} must be an integer "
                    f">= {MIN_IBAN_LENGTH}."
                )
            checked[code] = length
        self._lengths: Mapping[str, int] = MappingProxyType(checked)
        logger.debug("Country-length table loaded with %d entries.", len(checked))

    def expected_length(self, country_code: str) -> int | None:
        """Return the configured length for *country_code*, or ``None``"""
        if not isinstance(country_code, str) or len(country_code) != COUNTRY_CODE_LENGTH:
            return None
        if not country_code.isascii():
            return None
        return self._lengths.get(country_code.upper())

    def countries(self) -> list[str]:
        """Configured country codes in alphabetical order"""
        return sorted(self._lengths)

    def as_mapping(self) -> Mapping[str, int]:
        return self._lengths

    def __contains__(self, country_code: object) -> bool:
        return isinstance(country_code, str) and self.expected_length(country_code) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.countries())

    def __len__(self) -> int:
        return len(self._lengths)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._lengths)!r})"


COUNTRY_TABLE: CountryLengthTable = CountryLengthTable(COUNTRY_LENGTHS)
"""Process-wide table shipped with the package."""


def expected_length(country_code: str) -> int | None:
    """Look up *country_code* in :data:`COUNTRY_TABLE`"""
    return COUNTRY_TABLE.expected_length(country_code)
