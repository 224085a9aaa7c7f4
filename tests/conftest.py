from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

import pytest

from crater.commands import REGISTRY


@pytest.fixture(autouse=True)
def _reset_shell_state():
    """Undo logger and registry changes made by boot/init_logger."""
    yield
    logger = logging.getLogger("crater")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    REGISTRY._frozen = False


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("CRATER_"):
            monkeypatch.delenv(key)
    return tmp_path


@pytest.fixture
def make_executable(tmp_path: Path):
    """Create an executable shell script in a private bin directory."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()

    def _make(name: str, body: str = "exit 0") -> Path:
        script = bin_dir / name
        script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    _make.bin_dir = bin_dir
    return _make
