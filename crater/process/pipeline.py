#!/usr/bin/env python3
# crater/process/pipeline.py
"""
Two-stage pipelines: `left | right`.

Splitting rules:
- A token starting with '|' is a separator candidate. It must be exactly
  '|', must not be the first token and must be followed by another token.
- Tokens with '|' elsewhere ('a|b') are ordinary words.
- With several separators the LAST one is the split point; earlier ones stay
  in the left argument vector.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Sequence

from crater.commands import PIPE_SEPARATOR, Status
from crater.errors import PipeSyntaxError, SpawnError
from crater.process.launcher import ChildExit, spawn, wait_for

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PipelineSplit:
    """Left and right argument vectors around the split separator."""
    left: tuple[str, ...]
    right: tuple[str, ...]

    def tokens(self) -> list[str]:
        """Rebuild the original token list."""
        return [*self.left, PIPE_SEPARATOR, *self.right]


@dataclass(frozen=True, slots=True)
class PipelineResult:
    left: ChildExit
    right: ChildExit


def find_separators(tokens: Sequence[str]) -> list[int]:
    """
    Return the indexes of all standalone separators, validating each one.

    Raises:
        PipeSyntaxError: a separator is malformed, first, or last.
    """
    positions: list[int] = []
    last_index = len(tokens) - 1
    for index, token in enumerate(tokens):
        if not token.startswith(PIPE_SEPARATOR):
            continue
        if token != PIPE_SEPARATOR or index == 0:
            raise PipeSyntaxError(f"Syntax error for '{PIPE_SEPARATOR}'.")
        if index == last_index:
            raise PipeSyntaxError("Right command expected for piping.")
        positions.append(index)
    return positions


def split_pipeline(tokens: Sequence[str]) -> Optional[PipelineSplit]:
    """Split at the last separator, or return None when there is none."""
    positions = find_separators(tokens)
    if not positions:
        return None
    boundary = positions[-1]
    return PipelineSplit(left=tuple(tokens[:boundary]), right=tuple(tokens[boundary + 1:]))


def run_pipeline(left: Sequence[str], right: Sequence[str]) -> PipelineResult:
    """
    Connect `left`'s stdout to `right`'s stdin and wait for both.

    Both children are started before either is awaited. The parent keeps no
    pipe descriptor open while waiting, and the right child is reaped even
    when waiting for the left one fails.

    Raises:
        SpawnError: the pipe could not be created (nothing was spawned), or a
            fork failed (any child already started has been reaped).
        ChildProcessError: a started child could no longer be waited for.
    """
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        raise SpawnError(
            f"Pipe could not be initialized: {exc.strerror or exc}",
            argv=[*left, PIPE_SEPARATOR, *right],
        ) from exc
    pipe_fds = (read_fd, write_fd)

    pids: list[int] = []
    try:
        pids.append(spawn(left, stdout_fd=write_fd, close_fds=pipe_fds))
        pids.append(spawn(right, stdin_fd=read_fd, close_fds=pipe_fds))
    except SpawnError:
        os.close(read_fd)
        os.close(write_fd)
        for pid in pids:
            wait_for(pid)
        raise

    os.close(read_fd)
    os.close(write_fd)
    left_pid, right_pid = pids
    try:
        left_exit = wait_for(left_pid)
    finally:
        right_exit = wait_for(right_pid)
    return PipelineResult(left=left_exit, right=right_exit)


def exec_pipeline(left: Sequence[str], right: Sequence[str]) -> Status:
    """Run `left | right`; FAILED only when the pipeline could not be built."""
    try:
        result = run_pipeline(left, right)
    except SpawnError as exc:
        log.error("%s", exc.message)
        return Status.FAILED
    except ChildProcessError as exc:
        # Both children were started; only their exit status is unknown.
        log.error("Lost track of a pipeline child: %s", exc.strerror or exc)
        return Status.CONTINUE

    log.debug("pipeline finished: %s; %s", result.left.describe(), result.right.describe())
    return Status.CONTINUE
