#!/usr/bin/env python3
# crater/ui/utils/__init__.py
from __future__ import annotations
from .ansi import (
    ANSI,
    strip_ansi,
    supports_color,
    colorize,
)
from .console import print_line, flush_std_streams

__all__ = [
    "ANSI",
    "strip_ansi",
    "supports_color",
    "colorize",
    "print_line",
    "flush_std_streams",
]
