#!/usr/bin/env python3
# crater/interface/handler.py
from __future__ import annotations

"""
Command dispatch.

Order of resolution for one token list:
  1) empty               -> CONTINUE
  2) contains a '|'      -> two-stage pipeline (or FAILED on a syntax error)
  3) first word builtin  -> builtin action
  4) anything else       -> external program
"""

import logging
from typing import Sequence

from crater.commands import REGISTRY, Status
from crater.errors import PipeSyntaxError
from crater.interface.parser import tokenize
from crater.process import exec_pipeline, run_command, split_pipeline

log = logging.getLogger(__name__)


def execute(tokens: Sequence[str]) -> Status:
    """
    Execute an already tokenized line. `tokens` is never modified.

    Raises:
        FatalShellError: a builtin hit a fatal condition (e.g. `cd` without a target).
    """
    if not tokens:
        return Status.CONTINUE

    try:
        split = split_pipeline(tokens)
    except PipeSyntaxError as exc:
        log.error("%s", exc.message)
        return Status.FAILED

    if split is not None:
        log.debug("pipeline: %r | %r", split.left, split.right)
        return exec_pipeline(split.left, split.right)

    builtin_obj = REGISTRY.get(tokens[0])
    if builtin_obj is not None:
        return builtin_obj.invoke(tokens)

    return run_command(tokens)


def handle_line(input_line: str) -> Status:
    """
    Tokenize and execute one input line.

    Raises:
        FatalShellError: malformed quoting or a fatal builtin error.
    """
    return execute(tokenize(input_line))
