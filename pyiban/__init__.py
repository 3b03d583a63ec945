#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyIBAN - Python library for validating International Bank Account Numbers

Checks an IBAN's total length against a per-country table and verifies
its check digits with the ISO 7064 MOD-97-10 algorithm, using a
fixed-precision segmented fold instead of big-integer arithmetic.

Command line
------------
``python -m pyiban.cli check DE22790200760027913168``

Modules
-------
validator
    ``validate``, ``check``, ``ensure_valid`` and ``validate_many``.
countries
    Immutable country-code to expected-length table.
models
    Typed result returned by ``check``.
utils
    MOD-97 conversion steps, structural checks and static data.

Examples
--------
>>> from pyiban import validate, check
>>> validate("DE22790200760027913168")
True
>>> check("DE227902007600279131").status.value
'wrong_length'
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pyiban.countries import COUNTRY_TABLE, CountryLengthTable, expected_length
from pyiban.models.result import ValidationResult, ValidationStatus
from pyiban.validator import check, ensure_valid, validate, validate_many
from pyiban.exceptions import (
    PyIBANError,
    ConfigurationError,
    UnknownCountryError,
    LengthMismatchError,
    InvalidCharacterError,
    ChecksumError,
    SegmentationError,
)

__all__ = [
    # Version
    "__version__",
    # Validation
    "validate",
    "check",
    "ensure_valid",
    "validate_many",
    # Country table
    "COUNTRY_TABLE",
    "CountryLengthTable",
    "expected_length",
    # Results
    "ValidationResult",
    "ValidationStatus",
    # Exceptions
    "PyIBANError",
    "ConfigurationError",
    "UnknownCountryError",
    "LengthMismatchError",
    "InvalidCharacterError",
    "ChecksumError",
    "SegmentationError",
]
