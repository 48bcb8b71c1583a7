#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/shared/logger.py

import sys
import argparse

from csscalc.core import config as c
from csscalc.core.errors import UsageError


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class CsscalcArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Overrides the default error method so argparse failures surface as
        UsageError and share the single exit path in csscalc.main.
        """
        raise UsageError(message)
