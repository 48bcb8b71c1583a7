#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/subcommands/unit.py

import argparse
from typing import List

from csscalc.shared.logger import CsscalcArgumentParser
from csscalc.logic.unit.engine import run
from ._positional import as_positional


def get_unit_parser() -> argparse.ArgumentParser:
    """Create argument parser for unit command."""
    parser = CsscalcArgumentParser(
        prog="csscalc unit",
        description="csscalc unit: convert a length between px, rem and em (1rem = 16px)",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "value",
        help=(
            "the length to convert, optionally with its unit attached\n"
            "examples: 16, 1.5rem, -4px"
        ),
    )
    parser.add_argument(
        "unit",
        nargs="?",
        default=None,
        help="unit of the value: px, rem or em (overrides an attached unit)",
    )
    return parser


def main(argv: List[str]) -> None:
    """Main entry point for unit command."""
    parser = get_unit_parser()
    args = parser.parse_args(as_positional(argv))
    run(args)
