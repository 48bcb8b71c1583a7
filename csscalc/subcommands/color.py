#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/subcommands/color.py

import argparse
from typing import List

from csscalc.shared.logger import CsscalcArgumentParser
from csscalc.logic.color.engine import run
from ._positional import as_positional


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for color command."""
    parser = CsscalcArgumentParser(
        prog="csscalc color",
        description="csscalc color: convert hex to HSL and HSL to hex",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "values",
        nargs="+",
        metavar="value",
        help=(
            "a hex color, or hue saturation lightness\n"
            "examples:\n"
            "  '#ff0000'\n"
            "  120 50%% 50%%"
        ),
    )
    return parser


def main(argv: List[str]) -> None:
    """Main entry point for color command."""
    parser = get_color_parser()
    args = parser.parse_args(as_positional(argv))
    run(args)
