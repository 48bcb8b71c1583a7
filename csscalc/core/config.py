#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/core/config.py

from types import MappingProxyType

# ==========================================
# Length Units
# ==========================================

# How many of each unit make up one rem (1rem = 16px, browser default)
UNIT_RATIOS = MappingProxyType({
    "px": 16.0,
    "rem": 1.0,
    "em": 1.0,
})

UNIT_LABEL_WIDTH = 4               # Padding for unit labels in conversion rows
LENGTH_PRECISION = 2               # Decimal places shown for converted lengths

# ==========================================
# Color Math Constants
# ==========================================

RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Sector offset added when green < blue on a red max
PERCENT_MAX = 100.0                # Percent scale for saturation and lightness
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
HEX_DIGITS = 6                     # Digits in a #RRGGBB color

# Hue-to-channel breakpoints for HSL -> RGB
ONE_SIXTH = 1.0 / 6.0
ONE_THIRD = 1.0 / 3.0
ONE_HALF = 1.0 / 2.0
TWO_THIRDS = 2.0 / 3.0

# ==========================================
# CLI UI
# ==========================================

USAGE_LINES = (
    "csscalc <command> <value> [unit]",
    "commands:",
    "  unit (u)   - convert between px, rem and em",
    "  color (c)  - convert hex to HSL and HSL to hex",
)

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

TITLE_COLOR = "\033[36m"
KEY_COLOR = "\033[33m"
VALUE_COLOR = "\033[32m"
RESET = "\033[0m"
