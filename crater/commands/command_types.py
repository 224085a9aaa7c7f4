#!/usr/bin/env python3
# crater/commands/command_types.py
from __future__ import annotations

"""
Builtin data structures and protocols.

This module defines:
- Status: the control result every executed line produces.
- BuiltinAction: the callable protocol for any builtin implementation.
- Builtin: a registered builtin with its name, help text and action.
"""

import enum
from dataclasses import dataclass
from typing import Protocol, Sequence

# Standalone token that splits a line into a two-stage pipeline.
PIPE_SEPARATOR = "|"


class Status(enum.Enum):
    """Outcome of executing one line."""

    CONTINUE = "continue"   # normal completion, keep reading
    EXIT = "exit"           # termination requested
    FAILED = "failed"       # command-level failure, loop keeps going

    @property
    def ends_loop(self) -> bool:
        return self is Status.EXIT


class BuiltinAction(Protocol):
    """Protocol for any builtin function: full token list in, Status out."""

    def __call__(self, tokens: Sequence[str]) -> Status:  # pragma: no cover - signature only
        ...


@dataclass(frozen=True, slots=True)
class Builtin:
    """
    A builtin command executed inside the shell process.

    Attributes:
        name: Exact, case-sensitive name matched against the first token.
        description: One-line text shown by `help`.
        usage: Short usage string, e.g. 'cd <dir>'.
        action: Function implementing the builtin.
    """

    name: str
    description: str
    usage: str
    action: BuiltinAction

    def invoke(self, tokens: Sequence[str]) -> Status:
        """Run the builtin with the full token list (tokens[0] is its name)."""
        return self.action(tokens)
