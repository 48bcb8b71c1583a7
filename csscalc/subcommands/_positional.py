#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/subcommands/_positional.py

from typing import List

HELP_FLAGS = ("-h", "--help")


def as_positional(argv: List[str]) -> List[str]:
    """
    Marks every token as positional so values like '-4px' or '-1e3' reach
    the sub-command instead of being read as options. Help flags pass through.
    """
    if any(a in HELP_FLAGS for a in argv):
        return list(argv)
    return ["--", *argv]
