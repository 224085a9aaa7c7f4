from __future__ import annotations

import io
import logging
import os
from pathlib import Path

import pytest

from crater.__main__ import main
from crater.config import load_config
from crater.interface import BaseCLI, make_cli, run_loop
from crater.interface.prompt import render_prompt


class ScriptedCLI(BaseCLI):
    """Feeds prepared lines, then signals end of input."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def get_line(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def config(tmp_path):
    return load_config(tmp_path, environ={})


def test_exit_builtin_ends_loop_successfully(config):
    cli = ScriptedCLI(["", "   ", "exit", "never-read"])
    assert run_loop(cli, config) == 0
    assert cli.lines == ["never-read"]
    assert len(cli.prompts) == 3


def test_end_of_input_ends_loop_successfully(config):
    assert run_loop(ScriptedCLI([]), config) == 0


def test_prompt_banner_is_shown_each_iteration(config):
    cli = ScriptedCLI(["exit"])
    run_loop(cli, config)
    assert cli.prompts[0].startswith("\n~")
    assert "@" in cli.prompts[0]
    assert cli.prompts[0].endswith(":" + os.getcwd() + " >> ")


def test_banner_can_be_disabled(tmp_path):
    config = load_config(tmp_path, environ={"CRATER_SHOW_BANNER": "off", "CRATER_PROMPT": "$ "})
    cli = ScriptedCLI(["exit"])
    run_loop(cli, config)
    assert cli.prompts == ["$ "]
    assert render_prompt("$ ", show_banner=False) == "$ "


@pytest.mark.parametrize("line", ['echo "unterminated', 'echo "a"b', "cd"])
def test_fatal_errors_abort_in_strict_mode(config, caplog, line):
    cli = ScriptedCLI([line, "exit"])
    with caplog.at_level(logging.CRITICAL, logger="crater"):
        assert run_loop(cli, config) == 1
    assert cli.lines == ["exit"]
    assert "Error occurred" in caplog.text


def test_fatal_errors_are_downgraded_when_not_strict(tmp_path, caplog):
    config = load_config(tmp_path, environ={"CRATER_STRICT_ERRORS": "false"})
    cli = ScriptedCLI(['echo "unterminated', "cd", "exit"])
    with caplog.at_level(logging.ERROR, logger="crater"):
        assert run_loop(cli, config) == 0
    assert cli.lines == []
    assert caplog.text.count("Error occurred") == 2


def test_recoverable_errors_keep_the_loop_running(config, capfd):
    cli = ScriptedCLI(["| foo", "crater-test-no-such-program", "exit"])
    assert run_loop(cli, config) == 0
    assert cli.lines == []
    capfd.readouterr()


def test_non_interactive_stdin_uses_plain_frontend():
    cli = make_cli(interactive=False)
    assert type(cli) is BaseCLI


def test_main_runs_piped_script(in_tmp, monkeypatch, capfd):
    (in_tmp / "sub").mkdir()
    monkeypatch.setattr("sys.stdin", io.StringIO("cd sub\necho from-script\nexit\n"))
    assert main() == 0
    assert "from-script" in capfd.readouterr().out
    assert Path.cwd() == (in_tmp / "sub").resolve()


def test_main_rejects_bad_configuration(in_tmp, monkeypatch, capsys):
    monkeypatch.setenv("CRATER_LOG_LEVEL", "LOUD")
    assert main() == 1
    assert "invalid configuration" in capsys.readouterr().err
