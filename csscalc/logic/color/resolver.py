#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/logic/color/resolver.py

from typing import List, Tuple

from csscalc.core import config as c
from csscalc.core.errors import InvalidHslValues, UsageError
from csscalc.shared.sanitizer import parse_component, _sanitize_for_log

HEX_TO_HSL = "hex"
HSL_TO_HEX = "hsl"


def detect_direction(tokens: List[str]) -> str:
    """A leading '#' means HEX -> HSL; anything else is read as HSL."""
    if tokens[0].strip().startswith("#"):
        return HEX_TO_HSL
    return HSL_TO_HEX


def resolve_hex_input(tokens: List[str]) -> str:
    if len(tokens) > 1:
        extra = _sanitize_for_log(" ".join(tokens[1:]))
        raise UsageError(f"unexpected arguments after hex color: '{extra}'")
    return tokens[0]


def resolve_hsl_input(tokens: List[str]) -> Tuple[float, float, float]:
    """
    Parse 'H S% L%' tokens into hue degrees and percent-scale saturation
    and lightness, validating each range.
    """
    if len(tokens) < 3:
        raise InvalidHslValues("HSL format must be 'H S% L%'")
    if len(tokens) > 3:
        extra = _sanitize_for_log(" ".join(tokens[3:]))
        raise UsageError(f"unexpected arguments after HSL values: '{extra}'")

    h = parse_component(tokens[0], ("deg", "°"))
    s = parse_component(tokens[1], ("%",))
    L = parse_component(tokens[2], ("%",))

    if h is None or s is None or L is None:
        raise InvalidHslValues(f"invalid HSL values: '{_sanitize_for_log(' '.join(tokens))}'")
    if not 0 <= h <= c.HUE_MAX:
        raise InvalidHslValues(f"hue must be between 0 and {int(c.HUE_MAX)}: '{_sanitize_for_log(tokens[0])}'")
    if not 0 <= s <= c.PERCENT_MAX:
        raise InvalidHslValues(f"saturation must be between 0% and 100%: '{_sanitize_for_log(tokens[1])}'")
    if not 0 <= L <= c.PERCENT_MAX:
        raise InvalidHslValues(f"lightness must be between 0% and 100%: '{_sanitize_for_log(tokens[2])}'")
    return h, s, L
