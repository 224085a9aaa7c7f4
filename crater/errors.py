#!/usr/bin/env python3
# crater/errors.py
from __future__ import annotations

"""
Shell exception hierarchy.

    ShellError (base)
    ├── FatalShellError          -> ends the interpreter (exit status 1)
    │   ├── ParseError           malformed quoting
    │   └── MissingArgumentError builtin invoked without a required argument
    ├── PipeSyntaxError          misplaced '|' (recoverable)
    ├── SpawnError               fork() failed (recoverable)
    └── ConfigError              invalid configuration value

Recoverable errors are reported and the loop continues with the next prompt.
Fatal errors abort the loop unless STRICT_ERRORS is disabled in the config.
"""


class ShellError(Exception):
    """Base class for all interpreter errors."""

    fatal = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FatalShellError(ShellError):
    """Error that terminates the interpreter in strict mode."""

    fatal = True


class ParseError(FatalShellError):
    """The input line could not be split into words."""

    def __init__(self, message: str, *, line: str = "", position: int = -1) -> None:
        super().__init__(message)
        self.line = line
        self.position = position


class MissingArgumentError(FatalShellError):
    def __init__(self, command_name: str) -> None:
        super().__init__(f"Argument expected for '{command_name}' command")
        self.command_name = command_name


class PipeSyntaxError(ShellError):
    """A pipe separator was used in an invalid position."""


class SpawnError(ShellError):
    """A child process could not be created."""

    def __init__(self, message: str, *, argv: list[str] | None = None) -> None:
        super().__init__(message)
        self.argv = list(argv or [])


class ConfigError(ShellError, ValueError):
    """A configuration value failed validation."""
