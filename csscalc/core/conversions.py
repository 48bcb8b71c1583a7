#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/core/conversions.py

import math
from typing import Tuple

from . import config as c
from csscalc.shared.sanitizer import normalize_hex


def _round(v: float) -> int:
    """Round half up, so 76.5 becomes 77 rather than the even 76."""
    return int(math.floor(v + 0.5))


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert hex string to RGB tuple."""
    h = normalize_hex(hex_code)
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a lowercase '#rrggbb' string."""
    r_clamped = max(0, min(int(c.RGB_MAX), _round(r)))
    g_clamped = max(0, min(int(c.RGB_MAX), _round(g)))
    b_clamped = max(0, min(int(c.RGB_MAX), _round(b)))
    return f"#{r_clamped:02x}{g_clamped:02x}{b_clamped:02x}"


def rgb_to_hsl_exact(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to HSL as (hue degrees, saturation 0-1, lightness 0-1)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    L = (cmax + cmin) / c.DIV_2
    if cmax == cmin:
        return (0.0, 0.0, L)

    delta = cmax - cmin
    if L > 0.5:
        s = delta / (c.DIV_2 - cmax - cmin)
    else:
        s = delta / (cmax + cmin)

    if cmax == r_f:
        h = (g_f - b_f) / delta + (c.HSL_HUE_MOD if g_f < b_f else 0.0)
    elif cmax == g_f:
        h = (b_f - r_f) / delta + c.DIV_2
    else:
        h = (r_f - g_f) / delta + 4.0
    h = (h * c.HUE_SECTOR) % c.HUE_MAX
    return (h, s, L)


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """Convert RGB to HSL rounded to whole degrees and percents."""
    h, s, L = rgb_to_hsl_exact(r, g, b)
    # rounding can push 359.6 up to a full turn
    hue = _round(h) % int(c.HUE_MAX)
    return (hue, _round(s * c.PERCENT_MAX), _round(L * c.PERCENT_MAX))


def hue_to_rgb(p: float, q: float, t: float) -> float:
    """Evaluate one RGB channel from the HSL intermediates at hue fraction t."""
    if t < 0:
        t += c.UNIT
    if t > 1:
        t -= c.UNIT
    if t < c.ONE_SIXTH:
        return p + (q - p) * 6 * t
    if t < c.ONE_HALF:
        return q
    if t < c.TWO_THIRDS:
        return p + (q - p) * (c.TWO_THIRDS - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[int, int, int]:
    """Convert HSL (hue degrees, saturation 0-1, lightness 0-1) to RGB."""
    q = L * (c.UNIT + s) if L < 0.5 else L + s - L * s
    p = c.DIV_2 * L - q
    t = h / c.HUE_MAX
    return (
        _round(hue_to_rgb(p, q, t + c.ONE_THIRD) * c.RGB_MAX),
        _round(hue_to_rgb(p, q, t) * c.RGB_MAX),
        _round(hue_to_rgb(p, q, t - c.ONE_THIRD) * c.RGB_MAX),
    )
