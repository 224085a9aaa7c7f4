#!/usr/bin/env python3
# crater/interface/session.py
from __future__ import annotations

"""
Read-eval loop.

Each iteration: show the prompt banner, read one line, tokenize and
execute it. The loop ends when a builtin returns EXIT, at end of input, or
on a fatal error while STRICT_ERRORS is on.
"""

import logging

from crater.config import AppConfig
from crater.errors import FatalShellError
from crater.interface.cli import BaseCLI
from crater.interface.handler import handle_line
from crater.interface.prompt import render_prompt
from crater.ui import print_line

log = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def run_loop(cli: BaseCLI, config: AppConfig) -> int:
    """Run until termination and return the process exit status."""
    while True:
        try:
            line = cli.get_line(render_prompt(config.prompt, show_banner=config.show_banner))
        except EOFError:
            print_line()
            return EXIT_SUCCESS

        try:
            status = handle_line(line)
        except FatalShellError as exc:
            if config.strict_errors:
                log.critical("Error occurred: %s", exc.message)
                return EXIT_FAILURE
            log.error("Error occurred: %s", exc.message)
            continue

        if status.ends_loop:
            return EXIT_SUCCESS
