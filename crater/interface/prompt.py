#!/usr/bin/env python3
# crater/interface/prompt.py
from __future__ import annotations

"""Prompt banner: `~user@host:cwd >> `."""

import getpass
import logging
import os
import platform

log = logging.getLogger(__name__)

DEFAULT_PROMPT = ">> "


def current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        # no passwd entry and no LOGNAME/USER in the environment
        return "?"


def host_name() -> str:
    return platform.node() or "localhost"


def working_directory() -> str:
    try:
        return os.getcwd()
    except OSError as exc:
        log.error("getcwd() error: %s", exc.strerror or exc)
        return "?"


def render_prompt(prompt: str = DEFAULT_PROMPT, *, show_banner: bool = True) -> str:
    """Return the text shown before reading the next line."""
    if not show_banner:
        return prompt
    return f"\n~{current_user()}@{host_name()}:{working_directory()} {prompt}"
