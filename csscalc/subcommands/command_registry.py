#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/subcommands/command_registry.py

from . import (
    unit,
    color
)

SUBCOMMANDS = {
    'unit': unit,
    'u': unit,
    'color': color,
    'c': color
}
