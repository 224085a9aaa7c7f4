#!/usr/bin/env python3
# crater/commands/__init__.py
from __future__ import annotations

"""
Package for builtin management and registration.

Provides:
- Data structures and protocols (`Status`, `Builtin`, `BuiltinAction`).
- The process-wide registry and decorator (`REGISTRY`, `builtin`).
- The cd/help/exit builtins, registered on import.
"""


from .command_types import PIPE_SEPARATOR, Builtin, BuiltinAction, Status
from .commands import REGISTRY, BuiltinRegistry, builtin
from . import builtins as _builtins  # noqa: F401  (registers cd/help/exit)


__all__ = [
    "Builtin",
    "BuiltinAction",
    "Status",
    "REGISTRY",
    "BuiltinRegistry",
    "builtin",
    "PIPE_SEPARATOR",
]
