#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/main.py

import argparse
import sys
from typing import List, Optional

from csscalc import __version__
from csscalc.core import config as c
from csscalc.core.errors import CsscalcError, UsageError
from csscalc.subcommands.command_registry import SUBCOMMANDS
from csscalc.shared.logger import log, CsscalcArgumentParser

TOP_LEVEL_FLAGS = ("-h", "--help", "-v", "--version")


def get_main_parser() -> argparse.ArgumentParser:
    """Create argument parser for the top-level csscalc command."""
    parser = CsscalcArgumentParser(
        prog="csscalc",
        usage=c.USAGE_LINES[0],
        description="csscalc: convert CSS lengths and colors\n\n" + "\n".join(c.USAGE_LINES[1:]),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"csscalc {__version__}",
        help="show program version and exit",
    )
    return parser


def dispatch(argv: List[str]) -> None:
    """Route the argument list to the matching sub-command."""
    if argv and argv[0] in TOP_LEVEL_FLAGS:
        get_main_parser().parse_args(argv[:1])
        return

    if len(argv) < 2:
        raise UsageError(f"usage: {c.USAGE_LINES[0]}", show_usage=True)

    cmd = argv[0].lower()
    if cmd not in SUBCOMMANDS:
        raise UsageError(f"unknown command: '{argv[0]}' (use 'unit' (u) or 'color' (c))")
    SUBCOMMANDS[cmd].main(argv[1:])


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for csscalc CLI"""
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        dispatch(argv)
    except CsscalcError as e:
        log("error", str(e))
        if getattr(e, "show_usage", False):
            print("\n".join(c.USAGE_LINES[1:]), file=sys.stderr)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
