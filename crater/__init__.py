#!/usr/bin/env python3
# crater/__init__.py
from __future__ import annotations
"""
Crater: a small interactive command interpreter.

Keep this module free of eager imports so that `python -m crater` and the
test suite can import subpackages without wiring the interactive front end.
"""

__version__ = "0.3.0"
