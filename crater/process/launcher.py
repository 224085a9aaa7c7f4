#!/usr/bin/env python3
# crater/process/launcher.py
"""
Child process creation and supervision.

This module provides a small, typed facade over fork/exec/wait:
- spawn(): fork a child, optionally rewire stdin/stdout, exec the program.
- wait_for(): block until a child exits or is killed by a signal.
- launch() / run_command(): spawn + wait for a single external program.

POSIX only. Children inherit the shell's standard streams unless a
descriptor is passed explicitly.
"""

from __future__ import annotations

import logging
import os
import signal
from dataclasses import dataclass
from typing import Iterable, NoReturn, Optional, Sequence

from crater.commands import Status
from crater.errors import SpawnError
from crater.ui import flush_std_streams

log = logging.getLogger(__name__)

STDIN_FILENO = 0
STDOUT_FILENO = 1
STDERR_FILENO = 2

# Exit status of a child whose exec() failed.
EXEC_FAILURE_STATUS = 1

# The interpreter ignores these at startup; children get the default back.
RESTORED_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGPIPE", "SIGXFSZ") if hasattr(signal, name)
)


# ---- Public result type -----------------------------------------------------


@dataclass(frozen=True, slots=True)
class ChildExit:
    """Termination record for one reaped child."""
    pid: int
    wait_status: int

    @property
    def exited(self) -> bool:
        return os.WIFEXITED(self.wait_status)

    @property
    def signaled(self) -> bool:
        return os.WIFSIGNALED(self.wait_status)

    @property
    def returncode(self) -> int:
        """Exit code, or the negated signal number when killed by a signal."""
        return os.waitstatus_to_exitcode(self.wait_status)

    @property
    def ok(self) -> bool:
        return self.exited and self.returncode == 0

    def describe(self) -> str:
        if self.signaled:
            return f"pid {self.pid} killed by signal {os.WTERMSIG(self.wait_status)}"
        return f"pid {self.pid} exited with status {self.returncode}"


# ---- Child side -------------------------------------------------------------


def _report_from_child(message: str) -> None:
    """Write a diagnostic straight to fd 2; the child never returns to Python."""
    try:
        os.write(STDERR_FILENO, f"crater: {message}\n".encode("utf-8", "replace"))
    except OSError:
        pass


def _exec_in_child(
    argv: Sequence[str],
    *,
    stdin_fd: Optional[int],
    stdout_fd: Optional[int],
    close_fds: Iterable[int],
) -> NoReturn:
    """Rewire descriptors and replace the process image. Never returns."""
    try:
        for signum in RESTORED_SIGNALS:
            signal.signal(signum, signal.SIG_DFL)
        if stdout_fd is not None:
            os.dup2(stdout_fd, STDOUT_FILENO)
        if stdin_fd is not None:
            os.dup2(stdin_fd, STDIN_FILENO)
        for fd in close_fds:
            if fd > STDERR_FILENO:
                os.close(fd)
        os.execvp(argv[0], list(argv))
    except OSError as exc:
        _report_from_child(f"{argv[0]}: {exc.strerror or exc}")
    except ValueError as exc:
        # Embedded NUL bytes, or text the filesystem encoding cannot carry.
        _report_from_child(f"{argv[0]!r}: {exc}")
    finally:
        os._exit(EXEC_FAILURE_STATUS)


# ---- Parent side ------------------------------------------------------------


def spawn(
    argv: Sequence[str],
    *,
    stdin_fd: Optional[int] = None,
    stdout_fd: Optional[int] = None,
    close_fds: Iterable[int] = (),
) -> int:
    """
    Fork a child running `argv[0]` with `argv` as its argument vector.

    Args:
        argv: Program name followed by its arguments (argv[0] is looked up on PATH).
        stdin_fd: Descriptor to install as the child's standard input.
        stdout_fd: Descriptor to install as the child's standard output.
        close_fds: Descriptors the child closes after rewiring.

    Returns:
        The child's pid.

    Raises:
        SpawnError: fork() failed; no child exists.
    """
    if not argv:
        raise ValueError("argv must contain at least the program name")

    close_fds = tuple(close_fds)
    flush_std_streams()
    try:
        pid = os.fork()
    except OSError as exc:
        raise SpawnError(f"Fork failed: {exc.strerror or exc}", argv=list(argv)) from exc

    if pid == 0:
        _exec_in_child(argv, stdin_fd=stdin_fd, stdout_fd=stdout_fd, close_fds=close_fds)

    log.debug("spawned %r as pid %d", argv[0], pid)
    return pid


def wait_for(pid: int) -> ChildExit:
    """Block until `pid` exits or is killed; stop notifications are skipped."""
    while True:
        _, wait_status = os.waitpid(pid, os.WUNTRACED)
        if os.WIFEXITED(wait_status) or os.WIFSIGNALED(wait_status):
            break
        log.debug("pid %d stopped, still waiting", pid)

    child = ChildExit(pid=pid, wait_status=wait_status)
    log.debug("%s", child.describe())
    return child


def launch(argv: Sequence[str]) -> ChildExit:
    """Run one external program in the foreground and return how it ended."""
    return wait_for(spawn(argv))


def run_command(argv: Sequence[str]) -> Status:
    """
    Run an external program and wait for it.

    The program's own exit status never changes the loop's control flow:
    the result is CONTINUE whether it succeeded, failed or could not start.
    """
    try:
        launch(argv)
    except SpawnError as exc:
        log.error("%s", exc.message)
    return Status.CONTINUE
