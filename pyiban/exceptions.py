#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the PyIBAN package

All exceptions raised by PyIBAN inherit from :class:`PyIBANError`, making it
possible to catch every library-specific error with a single ``except`` clause
while still allowing fine-grained handling when needed.

The boolean entry point :func:`pyiban.validate` never lets any of these
escape; they surface only through :func:`pyiban.ensure_valid` and the
individual pipeline step functions.

Exception Hierarchy
-------------------
::

    PyIBANError
    ├── ConfigurationError     # Bad country-length table entry
    ├── UnknownCountryError    # Missing or unsupported country prefix
    ├── LengthMismatchError    # Length differs from the table entry
    ├── InvalidCharacterError  # Character outside [A-Za-z0-9] (strict mode)
    ├── ChecksumError          # MOD-97 remainder is not 1
    └── SegmentationError      # Fold segment exceeds the precision bound
"""

from __future__ import annotations


class PyIBANError(Exception):
    """Base exception for all PyIBAN errors

    Every exception raised by PyIBAN is a subclass of this type.
    Catching ``PyIBANError`` therefore catches any library-specific failure
    while still allowing standard Python exceptions (``KeyError``,
    ``TypeError``, etc.) to propagate normally.
    """


class ConfigurationError(PyIBANError):
    """Raised when a country-length table entry is malformed

    Country codes must be two uppercase ASCII letters and expected
    lengths must be integers large enough to hold the country code and
    check digits plus at least one BBAN character.

    Parameters
    ----------
    message : str
        Description of the offending entry.
    """


class UnknownCountryError(PyIBANError):
    """Raised when the country prefix cannot be read or is not configured

    This covers inputs shorter than two characters as well as two-letter
    prefixes absent from the country-length table.

    Parameters
    ----------
    message : str
        Description including the prefix that was looked up.
    """


class LengthMismatchError(PyIBANError):
    """Raised when an IBAN's length differs from its country's entry

    Parameters
    ----------
    message : str
        Description including the expected and actual character counts.
    """


class InvalidCharacterError(PyIBANError):
    """Raised in strict mode for characters outside ``[A-Za-z0-9]``"""


class ChecksumError(PyIBANError):
    """Raised when the MOD-97-10 remainder of an IBAN is not 1

    Parameters
    ----------
    message : str
        Description including the computed remainder.
    """


class SegmentationError(PyIBANError):
    """Raised when a digit segment is too long for the fixed-precision fold

    The first segment may carry at most 9 digits and every later one at
    most 7, so that the running value never reaches 10^9.
    """
