#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/shared/sanitizer.py

import math
import re
from typing import Optional, Tuple

from csscalc.core import config as c
from csscalc.core.errors import InvalidHexFormat, InvalidNumber

# Regex breakdown:
# [-+]?                -> Optional sign
# (?:\d+\.?\d*|\.\d+)  -> Integer ("12"), decimal ("12.5", "12.") or bare fraction (".5")
# (?:[eE][-+]?\d+)?    -> Optional scientific notation suffix ("e-4")
_NUMBER_PREFIX = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

_HEX_BODY = re.compile(r"^[0-9A-Fa-f]{6}$")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def split_number(value: str) -> Tuple[Optional[float], str]:
    """
    Splits a token into its leading number and whatever trails it,
    e.g. '1.5rem' -> (1.5, 'rem'). Returns (None, token) when the token
    does not start with a finite number.
    """
    s = str(value).strip()
    m = _NUMBER_PREFIX.match(s)
    if not m:
        return None, s
    num = float(m.group())
    if not math.isfinite(num):
        return None, s
    return num, s[m.end():].strip()


def parse_length(value: str) -> Tuple[float, str]:
    """Parse a length token into (number, attached unit suffix)."""
    num, suffix = split_number(value)
    if num is None:
        raise InvalidNumber(f"the value must be a number: '{_sanitize_for_log(value)}'")
    return num, suffix.lower()


def parse_component(value: str, suffixes: Tuple[str, ...] = ()) -> Optional[float]:
    """
    Parses an HSL component, dropping one optional trailing suffix such as
    '%' or 'deg'. Returns None when the rest is not exactly one finite number.
    """
    s = str(value).strip()
    for suffix in suffixes:
        if s.lower().endswith(suffix):
            s = s[: -len(suffix)].strip()
            break
    num, rest = split_number(s)
    if num is None or rest:
        return None
    return num


def normalize_hex(value: str) -> str:
    """
    Strips an optional leading '#' and validates the remaining six hex
    digits, returning them lowercase.
    """
    s = str(value).strip() if value is not None else ""
    if s.startswith("#"):
        s = s[1:]
    if not _HEX_BODY.match(s):
        raise InvalidHexFormat(
            f"invalid hex color: '{_sanitize_for_log(value)}' (use #RRGGBB with {c.HEX_DIGITS} hex digits)"
        )
    return s.lower()
