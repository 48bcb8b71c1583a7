#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/core/units.py

from typing import Dict, Optional

from . import config as c
from .errors import UnsupportedUnit


def _resolve_unit(unit: Optional[str]) -> str:
    key = str(unit).strip().lower() if unit is not None else ""
    if key not in c.UNIT_RATIOS:
        shown = unit if unit else "none"
        raise UnsupportedUnit(f"unsupported unit: '{shown}' (use px, rem or em)")
    return key


def to_rem(value: float, unit: Optional[str]) -> float:
    """Normalize a length to rem."""
    return value / c.UNIT_RATIOS[_resolve_unit(unit)]


def from_rem(rem_value: float) -> Dict[str, float]:
    """Expand a rem length into every known unit, in table order."""
    return {name: rem_value * ratio for name, ratio in c.UNIT_RATIOS.items()}


def convert_length(value: float, unit: Optional[str]) -> Dict[str, float]:
    """Convert a length in any known unit to px, rem and em."""
    return from_rem(to_rem(value, unit))
