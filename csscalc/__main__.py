#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: csscalc/__main__.py

from csscalc.main import main

if __name__ == "__main__":
    main()
