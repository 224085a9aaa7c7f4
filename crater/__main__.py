#!/usr/bin/env python3
# crater/__main__.py
from __future__ import annotations

import sys

from crater.boot import boot_sequence
from crater.errors import ConfigError
from crater.interface import EXIT_FAILURE, make_cli, run_loop
from crater.ui import print_line

EXIT_INTERRUPTED = 130


def main() -> int:
    try:
        state = boot_sequence()
    except ConfigError as exc:
        print_line(f"crater: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    with make_cli(enable_completion=state.config.enable_completion) as cli:
        try:
            return run_loop(cli, state.config)
        except KeyboardInterrupt:
            print_line()
            return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
