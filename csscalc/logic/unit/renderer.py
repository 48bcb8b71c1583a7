#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/logic/unit/renderer.py

from typing import Dict

from csscalc.core import config as c
from csscalc.shared.formatting import format_length, format_number, title_line


def render_unit_conversions(value: float, unit: str, conversions: Dict[str, float]) -> None:
    """Print one row per unit, padded to a common label width."""
    print(title_line(f"Conversions for {format_number(value)}{unit}:"))
    for name, converted in conversions.items():
        label = name.ljust(c.UNIT_LABEL_WIDTH)
        print(f"{c.KEY_COLOR}{label}:{c.VALUE_COLOR} {format_length(converted, name)}{c.RESET}")
