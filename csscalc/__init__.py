#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/__init__.py

__version__ = "1.0.0"
