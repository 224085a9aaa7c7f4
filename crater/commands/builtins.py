#!/usr/bin/env python3
# crater/commands/builtins.py
from __future__ import annotations

"""
Builtins executed inside the shell process: cd, help, exit.

Importing this module registers them in the global REGISTRY, in the order
they are listed by `help`.
"""

import logging
import os
from typing import Sequence

from crater.commands.command_types import PIPE_SEPARATOR, Status
from crater.commands.commands import REGISTRY, builtin
from crater.errors import MissingArgumentError
from crater.ui import colorize, print_line

log = logging.getLogger(__name__)


@builtin(name="cd", usage="cd <dir>")
def builtin_cd(tokens: Sequence[str]) -> Status:
    """Change the current working directory."""
    if len(tokens) < 2:
        # Fatal unless STRICT_ERRORS is off.
        raise MissingArgumentError("cd")
    try:
        os.chdir(tokens[1])
    except OSError as exc:
        log.error("cd: %s: %s", tokens[1], exc.strerror or exc)
    else:
        log.debug("cwd is now %s", os.getcwd())
    return Status.CONTINUE


@builtin(name="help", usage="help")
def builtin_help(tokens: Sequence[str]) -> Status:
    """Show usage and the list of builtins."""
    print_line()
    print_line(colorize("Crater", "bold"))
    print_line()
    print_line(f"--Simple piping can be done through '{PIPE_SEPARATOR}' character.")
    print_line('Usage: "cmd1 arg0 arg1 ... | cmd2 arg0 arg1 ..." '
               "(Support only for piping between 2 programs).")
    print_line()
    print_line("--Double quotes can be used for arguments containing delimiters.")
    print_line()
    print_line("The following commands are built in:")
    for builtin_obj in REGISTRY.all():
        print_line(f"> {builtin_obj.usage:<10} {colorize(builtin_obj.description, 'dim')}")
    print_line(flush=True)
    return Status.CONTINUE


@builtin(name="exit", usage="exit")
def builtin_exit(tokens: Sequence[str]) -> Status:
    """Leave the shell."""
    return Status.EXIT
