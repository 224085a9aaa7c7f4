#!/usr/bin/env python3
# crater/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: config, logging and builtin-table setup with optional [  OK  ] lines.
- BootState: Dataclass containing config, logger and builtin count.
"""


from .boot import BootState, boot_sequence

__all__ = ["boot_sequence", "BootState"]
