#!/usr/bin/env python3
# crater/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends.

Selection order:
    1) prompt_toolkit (completion + in-session history)
    2) readline (basic completion)
    3) plain input (last resort, also used when stdin is not a terminal)

History is kept in memory only; nothing is written to disk.
"""

import sys
from typing import Optional

from crater.interface.completion import _split_current_token, suggest


class BaseCLI:
    """
    Plain `input()` frontend and base interface for the richer ones.

    Subclasses may override:
        - setup()
        - get_line(prompt)
        - teardown()

    get_line() raises EOFError at end of input.
    """

    def setup(self) -> None:
        ...

    def get_line(self, prompt: str) -> str:
        return input(prompt)

    def teardown(self) -> None:
        ...

    # Context manager helpers
    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


# ===== Preferred: prompt_toolkit =====
class PromptToolkitCLI(BaseCLI):
    """Line editor with live completion and in-memory history."""

    def __init__(self, *, enable_completion: bool = True) -> None:
        from prompt_toolkit import prompt
        from prompt_toolkit.completion import Completer, Completion
        from prompt_toolkit.history import InMemoryHistory

        self._prompt = prompt
        self._history = InMemoryHistory()

        class _Completer(Completer):
            def get_completions(self, document, complete_event):
                text_before_cursor = document.text_before_cursor
                _, current_prefix = _split_current_token(text_before_cursor.lstrip())
                replace_len = len(current_prefix)
                for word in suggest(text_before_cursor):
                    # replace exactly the current token
                    yield Completion(word, start_position=-replace_len)

        self._completer = _Completer() if enable_completion else None

    def get_line(self, prompt: str) -> str:
        return self._prompt(
            prompt,
            history=self._history,
            completer=self._completer,
            complete_while_typing=False,
        )


# ===== Fallback: readline =====
class ReadlineCLI(BaseCLI):
    """Fallback editor with tab completion."""

    def __init__(self, *, enable_completion: bool = True) -> None:
        import readline

        self.readline = readline
        self.enable_completion = enable_completion
        self._previous_completer = None

    def setup(self) -> None:
        if not self.enable_completion:
            return
        self._previous_completer = self.readline.get_completer()
        # Only whitespace splits words; '/', '-' and '=' stay inside them.
        self.readline.set_completer_delims(" \t\n")

        def _complete(text_fragment: str, state_index: int) -> Optional[str]:
            buffer_text = self.readline.get_line_buffer()
            end = self.readline.get_endidx()
            candidates = suggest(buffer_text[:end])
            matches = [word for word in candidates if word.startswith(text_fragment)]
            return matches[state_index] if state_index < len(matches) else None

        self.readline.set_completer(_complete)
        self.readline.parse_and_bind("tab: complete")

    def teardown(self) -> None:
        if self.enable_completion:
            self.readline.set_completer(self._previous_completer)


def make_cli(*, enable_completion: bool = True, interactive: Optional[bool] = None) -> BaseCLI:
    """
    Factory to select the best available CLI frontend at runtime.

    Non-interactive stdin (scripts piped into the shell) always gets the
    plain frontend.
    """
    if interactive is None:
        interactive = sys.stdin.isatty()
    if not interactive:
        return BaseCLI()

    try:
        return PromptToolkitCLI(enable_completion=enable_completion)
    except ImportError:
        pass
    try:
        return ReadlineCLI(enable_completion=enable_completion)
    except ImportError:
        return BaseCLI()
