#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/logic/unit/engine.py

import argparse

from csscalc.core import units
from csscalc.shared.sanitizer import parse_length
from .renderer import render_unit_conversions


def run(args: argparse.Namespace) -> None:
    """Main execution engine for length conversion"""
    value, attached = parse_length(args.value)
    # an explicit unit token wins over one glued to the value
    unit = args.unit if args.unit else attached

    conversions = units.convert_length(value, unit)
    render_unit_conversions(value, unit.lower(), conversions)
