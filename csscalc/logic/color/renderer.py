#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/logic/color/renderer.py

from typing import Tuple

from csscalc.shared.formatting import format_hsl, key_value_line, title_line


def render_hex_to_hsl(hex_code: str, hsl: Tuple[int, int, int]) -> None:
    print(title_line("HEX to HSL conversion:"))
    print(key_value_line("HEX", hex_code))
    print(key_value_line("HSL", format_hsl(*hsl)))


def render_hsl_to_hex(hsl: Tuple[float, float, float], hex_code: str) -> None:
    print(title_line("HSL to HEX conversion:"))
    print(key_value_line("HSL", format_hsl(*hsl)))
    print(key_value_line("HEX", hex_code))
