#!/usr/bin/env python3
# crater/interface/completion.py
from __future__ import annotations

"""
Command line completion utilities.

This module offers token-aware suggestions for:
- First token: builtins + executables found on PATH.
- Subsequent tokens: file and directory names relative to the current directory.
"""

import functools
import os

from crater.commands import REGISTRY
from crater.errors import ParseError
from crater.interface.parser import is_delimiter, tokenize


def _split_current_token(raw_input: str) -> tuple[list[str], str]:
    """
    Return (parts, current_prefix).

    Behavior:
      - Use the shell tokenizer so quoted words count as one part.
      - If trailing whitespace exists, append an empty token to signal a new one.
      - On malformed quotes, fall back to whitespace splitting.
    """
    if not raw_input:
        return [], ""

    try:
        parts = tokenize(raw_input)
    except ParseError:
        parts = raw_input.split()
    if is_delimiter(raw_input[-1]):
        parts.append("")
    current_prefix = parts[-1] if parts else ""
    return parts, current_prefix


@functools.lru_cache(maxsize=8)
def _executables_on_path(path_value: str) -> tuple[str, ...]:
    """Names of executable files in the PATH directories (cached per PATH)."""
    found: set[str] = set()
    for directory in path_value.split(os.pathsep):
        if not directory:
            continue
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    try:
                        if entry.is_file() and os.access(entry.path, os.X_OK):
                            found.add(entry.name)
                    except OSError:
                        continue
        except OSError:
            # missing or unreadable PATH entry
            continue
    return tuple(sorted(found))


def command_names() -> list[str]:
    """Builtins first, then executables on PATH (deduplicated)."""
    names = list(REGISTRY.names())
    seen = set(names)
    for name in _executables_on_path(os.environ.get("PATH", "")):
        if name not in seen:
            seen.add(name)
            names.append(name)
    return names


def _path_candidates(prefix: str) -> list[str]:
    """Complete a (possibly partial) path; directories get a trailing '/'."""
    directory, _, partial = prefix.rpartition("/")
    if prefix.startswith("/") and not directory:
        directory = "/"
    search_dir = os.path.expanduser(directory) if directory else "."

    try:
        entries = sorted(os.listdir(search_dir))
    except OSError:
        return []

    matches: list[str] = []
    for name in entries:
        if not name.startswith(partial):
            continue
        if name.startswith(".") and not partial.startswith("."):
            continue
        if directory == "/":
            candidate = f"/{name}"
        else:
            candidate = f"{directory}/{name}" if directory else name
        if os.path.isdir(os.path.join(search_dir, name)):
            candidate += "/"
        matches.append(candidate)
    return matches


def suggest(text_before_cursor: str) -> list[str]:
    """
    Produce suggestions based on the current buffer content.

    Strategy:
      1) While entering the first token, suggest builtins and programs on PATH.
      2) Otherwise suggest paths for the token under the cursor.
    """
    raw_buffer = text_before_cursor.lstrip()
    parts, current_prefix = _split_current_token(raw_buffer)

    if len(parts) <= 1:
        return [name for name in command_names() if name.startswith(current_prefix)]

    # The word after a pipe is a command name again.
    if len(parts) >= 2 and parts[-2] == "|":
        return [name for name in command_names() if name.startswith(current_prefix)]

    return _path_candidates(current_prefix)
