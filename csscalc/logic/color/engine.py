#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/logic/color/engine.py

import argparse

from csscalc.core import config as c
from csscalc.core import conversions as conv
from .resolver import HEX_TO_HSL, detect_direction, resolve_hex_input, resolve_hsl_input
from .renderer import render_hex_to_hsl, render_hsl_to_hex


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the color command"""
    tokens = args.values
    if detect_direction(tokens) == HEX_TO_HSL:
        r, g, b = conv.hex_to_rgb(resolve_hex_input(tokens))
        render_hex_to_hsl(conv.rgb_to_hex(r, g, b), conv.rgb_to_hsl(r, g, b))
    else:
        h, s, L = resolve_hsl_input(tokens)
        r, g, b = conv.hsl_to_rgb(h, s / c.PERCENT_MAX, L / c.PERCENT_MAX)
        render_hsl_to_hex((h, s, L), conv.rgb_to_hex(r, g, b))
