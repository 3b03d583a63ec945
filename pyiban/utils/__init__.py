#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for conversion and validation

This sub-package centralises the MOD-97 transformation steps, the
structural checks, and the static data tables so that the validator
only orchestrates them.
"""

from __future__ import annotations
