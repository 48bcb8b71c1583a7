#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/core/errors.py


class CsscalcError(Exception):
    """Base class for every failure that ends a csscalc run."""

    exit_code = 1


class UsageError(CsscalcError):
    """Wrong argument count or unknown command."""

    def __init__(self, message: str, show_usage: bool = False):
        super().__init__(message)
        self.show_usage = show_usage


class UnsupportedUnit(CsscalcError):
    """Unit token is not one of px, rem or em."""


class InvalidNumber(CsscalcError):
    """A required numeric token failed to parse."""


class InvalidHexFormat(CsscalcError):
    """Hex string is not exactly six hex digits."""


class InvalidHslValues(CsscalcError):
    """Hue, saturation or lightness missing, non-numeric or out of range."""
