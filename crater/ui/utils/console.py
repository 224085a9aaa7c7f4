#!/usr/bin/env python3
# crater/ui/utils/console.py
from __future__ import annotations

import sys
from typing import IO, Optional

from .ansi import strip_ansi, supports_color


def print_line(text: str = "", *, file: Optional[IO[str]] = None, flush: bool = False) -> None:
    """Write one line, dropping ANSI sequences when the stream is not a terminal."""
    stream = file if file is not None else sys.stdout
    if not supports_color(stream):
        text = strip_ansi(text)
    stream.write(f"{text}\n")
    if flush:
        stream.flush()


def flush_std_streams() -> None:
    """Flush Python-level buffers so forked children do not inherit them."""
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (AttributeError, ValueError):
            # detached or closed stream
            continue
