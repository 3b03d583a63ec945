#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed models for IBAN validation results

Plain ``dataclasses`` and enums returned by :func:`pyiban.check`.
"""

from __future__ import annotations

from pyiban.models.result import ValidationResult, ValidationStatus

__all__ = [
    "ValidationResult",
    "ValidationStatus",
]
