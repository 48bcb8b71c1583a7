#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/shared/formatting.py

import re

from csscalc.core import config as c

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def strip_ansi(s: str) -> str:
    return _ANSI_ESCAPE.sub('', s)


def format_number(value: float) -> str:
    """Plain rendering of an input number: 16.0 -> '16', 1.5 -> '1.5'."""
    text = f"{value:.10f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_length(value: float, unit: str) -> str:
    return f"{value:.{c.LENGTH_PRECISION}f}{unit}"


def format_hsl(h: float, s: float, L: float) -> str:
    """Percent-scale HSL as 'H S% L%'."""
    return f"{format_number(h)} {format_number(s)}% {format_number(L)}%"


def key_value_line(key: str, value: str) -> str:
    return f"{c.KEY_COLOR}{key}:{c.VALUE_COLOR} {value}{c.RESET}"


def title_line(text: str) -> str:
    return f"{c.TITLE_COLOR}{text}{c.RESET}"
