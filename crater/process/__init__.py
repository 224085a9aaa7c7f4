#!/usr/bin/env python3
# crater/process/__init__.py
from __future__ import annotations

"""
Package for external program execution.

Provides:
- Single foreground launches (`launch`, `run_command`).
- Two-stage pipelines (`split_pipeline`, `run_pipeline`, `exec_pipeline`).
"""

from .launcher import ChildExit, EXEC_FAILURE_STATUS, launch, run_command, spawn, wait_for
from .pipeline import (
    PipelineResult,
    PipelineSplit,
    exec_pipeline,
    find_separators,
    run_pipeline,
    split_pipeline,
)

__all__ = [
    "ChildExit",
    "EXEC_FAILURE_STATUS",
    "launch",
    "run_command",
    "spawn",
    "wait_for",
    "PipelineResult",
    "PipelineSplit",
    "exec_pipeline",
    "find_separators",
    "run_pipeline",
    "split_pipeline",
]
