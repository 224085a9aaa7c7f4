#!/usr/bin/env python3
# crater/boot/boot.py
from __future__ import annotations
"""
Boot sequence for the shell.

Steps:
- Load and validate configuration (before any step line, since SHOW_BOOT
  decides whether step lines are printed).
- Initialize logging (console + optional rotating file).
- Freeze the builtin registry so the table stays fixed for the session.
"""

import logging
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from crater.commands import REGISTRY
from crater.config import AppConfig, load_config
from crater.ui import colorize, init_logger, print_line


@dataclass(slots=True)
class BootState:
    config: AppConfig
    logger: logging.Logger
    builtin_count: int


def _step(label: str, fn: Callable[[], Any], *, verbose: bool) -> Any:
    """Run a boot step, optionally printing a status line."""
    try:
        out = fn()
    except Exception as exc:
        if verbose:
            print_line(
                colorize(f"[FAILED] {label} ({type(exc).__name__}: {exc})", "red")
            )
        raise
    if verbose:
        print_line(colorize(f"[  OK  ] {label}", "green"))
    return out


def boot_sequence(
    base: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> BootState:
    """
    Prepare everything the read loop needs.

    Raises:
        ConfigError: invalid configuration (reported before anything else runs).
    """
    config = load_config(base, environ)
    verbose = config.show_boot

    _step(
        f"Detect environment: {platform.system()} {platform.release()} / Python {platform.python_version()}",
        lambda: None,
        verbose=verbose,
    )
    logger = _step(
        "Initialize logger",
        lambda: init_logger("crater", level=config.log_level,
                            logfile=config.log_file_path),
        verbose=verbose,
    )
    _step("Freeze builtin table", REGISTRY.freeze, verbose=verbose)
    builtin_count = _step(
        f"Load builtins ({', '.join(REGISTRY.names())})",
        lambda: len(REGISTRY),
        verbose=verbose,
    )
    _step("Boot complete", lambda: None, verbose=verbose)

    logger.debug("booted with %d builtins, strict_errors=%s",
                 builtin_count, config.strict_errors)
    return BootState(config=config, logger=logger, builtin_count=builtin_count)
