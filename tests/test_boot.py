from __future__ import annotations

import io
import logging

import pytest

from crater.boot import BootState, boot_sequence
from crater.commands import REGISTRY
from crater.errors import ConfigError
from crater.ui import (
    ColorizingStreamHandler,
    PlainFormatter,
    colorize,
    init_logger,
    print_line,
    strip_ansi,
)


def test_boot_freezes_registry_and_sets_up_logging(tmp_path, capsys):
    state = boot_sequence(tmp_path, environ={})
    assert isinstance(state, BootState)
    assert state.builtin_count == 3
    assert REGISTRY.frozen
    assert state.logger.name == "crater"
    assert any(isinstance(h, ColorizingStreamHandler) for h in state.logger.handlers)
    # quiet by default
    assert capsys.readouterr().out == ""


def test_verbose_boot_prints_steps(tmp_path, capsys):
    boot_sequence(tmp_path, environ={"CRATER_SHOW_BOOT": "true"})
    out = capsys.readouterr().out
    assert "[  OK  ] Freeze builtin table" in out
    assert "Load configuration" not in out
    assert "[  OK  ] Load builtins (cd, help, exit)" in out
    assert out.rstrip().endswith("[  OK  ] Boot complete")


def test_boot_stops_on_invalid_config(tmp_path):
    with pytest.raises(ConfigError):
        boot_sequence(tmp_path, environ={"CRATER_SHOW_BANNER": "sometimes"})
    assert not REGISTRY.frozen


def test_log_file_receives_debug_records_without_ansi(tmp_path):
    logfile = tmp_path / "crater.log"
    logger = init_logger("crater", level="ERROR", logfile=logfile)
    init_logger("crater", level="ERROR", logfile=logfile)
    assert len(logger.handlers) == 2

    logging.getLogger("crater.process.launcher").debug(colorize("spawned", "green"))
    for handler in logger.handlers:
        handler.flush()
    text = logfile.read_text(encoding="utf-8")
    assert "crater.process.launcher: spawned" in text
    assert "\x1b[" not in text


def test_console_handler_writes_plain_text_to_non_tty():
    stream = io.StringIO()
    handler = ColorizingStreamHandler(stream=stream)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    record = logging.LogRecord("crater", logging.ERROR, __file__, 1,
                               colorize("boom", "red"), None, None)
    handler.emit(record)
    assert stream.getvalue() == "[ERROR] boom\n"


def test_plain_formatter_and_helpers():
    record = logging.LogRecord("crater", logging.INFO, __file__, 1,
                               colorize("hi", "bold"), None, None)
    assert PlainFormatter("%(message)s").format(record) == "hi"
    assert strip_ansi(colorize("x", "red", "bold")) == "x"
    assert colorize("x", "no-such-style") == "x"

    stream = io.StringIO()
    print_line(colorize("line", "green"), file=stream)
    assert stream.getvalue() == "line\n"
