#!/usr/bin/env python3
# crater/interface/__init__.py
from __future__ import annotations

"""
Package for the interactive console interface and command dispatch.

Provides:
- The quote-aware tokenizer.
- The dispatcher that routes a token list to a pipeline, builtin or program.
- CLI frontends (prompt_toolkit / readline / plain) with completion.
- The prompt banner and the read-eval loop.
"""


from .parser import tokenize, is_delimiter
from .handler import execute, handle_line
from .completion import suggest
from .prompt import render_prompt, DEFAULT_PROMPT
from .cli import BaseCLI, PromptToolkitCLI, ReadlineCLI, make_cli
from .session import run_loop, EXIT_SUCCESS, EXIT_FAILURE

__all__ = [
    # parser
    "tokenize",
    "is_delimiter",
    # handler
    "execute",
    "handle_line",
    # completion
    "suggest",
    # prompt
    "render_prompt",
    "DEFAULT_PROMPT",
    # cli
    "BaseCLI",
    "PromptToolkitCLI",
    "ReadlineCLI",
    "make_cli",
    # loop
    "run_loop",
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
]
