#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyIBAN command-line interface

Provides small commands around the validator:

1. **demo**      — Validate the built-in sample IBAN
2. **check**     — Validate IBANs given on the command line
3. **batch**     — Validate one IBAN per line from a file or stdin
4. **countries** — List the configured country-length table

Usage
-----
::

    # Validate two IBANs
    python -m pyiban.cli check DE22790200760027913168 AT611904300234573201

    # Reject spaces and symbols instead of ignoring them
    python -m pyiban.cli --strict check "DE22 7902 0076 0027 9131 68"

    # Validate a file, one IBAN per line
    python -m pyiban.cli batch ibans.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from pyiban.countries import COUNTRY_TABLE
from pyiban.utils.constants import COUNTRY_NAMES
from pyiban.validator import check, validate, validate_many

logger = logging.getLogger("pyiban.cli")

SAMPLE_IBAN = "DE227902007600279131"
"""Sample shown by ``demo``; two characters short, so it is reported invalid."""


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_demo(args):
    """Print the sample IBAN and its validation result."""
    print("Welcome to the IBAN Checker!")
    result = validate(SAMPLE_IBAN, strict=args.strict)
    print(f"IBAN {SAMPLE_IBAN} is {str(result).lower()}")
    return 0


def cmd_check(args):
    """Validate IBANs given as arguments."""
    failures = 0
    for iban in args.ibans:
        result = check(iban, strict=args.strict)
        if result.is_valid:
            print(f"{iban}: valid")
        else:
            print(f"{iban}: invalid ({result.status.value})")
            failures += 1
    return 0 if failures == 0 else 1


def cmd_batch(args):
    """Validate one IBAN per line from a file or stdin."""
    if args.file == "-":
        lines = sys.stdin.read().splitlines()
    else:
        try:
            with open(args.file, encoding="utf-8") as fh:
                lines = fh.read().splitlines()
        except OSError as exc:
            print(f"ERROR: {exc}")
            return 2

    ibans = [line.strip() for line in lines if line.strip()]
    flags = validate_many(ibans, strict=args.strict)

    if args.show_invalid:
        for iban in np.asarray(ibans, dtype=object)[~flags]:
            print(f"  invalid: {iban}")

    n_valid = int(np.count_nonzero(flags))
    print(f"{flags.size} checked, {n_valid} valid, {flags.size - n_valid} invalid")
    return 0 if n_valid == flags.size else 1


def cmd_countries(args):
    """List configured countries and expected lengths."""
    for code in COUNTRY_TABLE:
        name = COUNTRY_NAMES.get(code, "")
        print(f"  {code}  {COUNTRY_TABLE.expected_length(code):3d}  {name}")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pyiban",
        description="IBAN length and MOD-97 checksum validator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    python -m pyiban.cli demo                                  # sample IBAN
    python -m pyiban.cli check DE22790200760027913168          # one IBAN
    python -m pyiban.cli --strict check "DE22 7902 0076"       # reject spaces
    python -m pyiban.cli batch ibans.txt --show-invalid        # file input
    python -m pyiban.cli countries                             # table
""",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject characters outside A-Z, a-z, 0-9 instead of ignoring them",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", help="Command to run")

    sub.add_parser("demo", help="Validate the built-in sample IBAN")

    p_check = sub.add_parser("check", help="Validate IBANs given as arguments")
    p_check.add_argument("ibans", nargs="+", metavar="IBAN", help="IBAN(s) to validate")

    p_batch = sub.add_parser("batch", help="Validate one IBAN per line")
    p_batch.add_argument("file", help="Input file, or '-' for stdin")
    p_batch.add_argument(
        "--show-invalid",
        action="store_true",
        help="Print each invalid IBAN before the summary",
    )

    sub.add_parser("countries", help="List supported countries")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "demo": cmd_demo,
        "check": cmd_check,
        "batch": cmd_batch,
        "countries": cmd_countries,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
