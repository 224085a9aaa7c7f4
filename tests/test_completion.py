from __future__ import annotations

import pytest

from crater.interface import completion
from crater.interface.completion import _split_current_token, suggest


@pytest.fixture
def private_path(make_executable, monkeypatch):
    make_executable("crater-alpha")
    make_executable("crater-beta")
    (make_executable.bin_dir / "crater-data").write_text("not executable")
    monkeypatch.setenv("PATH", str(make_executable.bin_dir))
    completion._executables_on_path.cache_clear()
    yield
    completion._executables_on_path.cache_clear()


def test_split_current_token():
    assert _split_current_token("") == ([], "")
    assert _split_current_token("ls -l") == (["ls", "-l"], "-l")
    assert _split_current_token("ls ") == (["ls", ""], "")
    # unterminated quote falls back to whitespace splitting
    assert _split_current_token('echo "ab') == (["echo", '"ab'], '"ab')


def test_first_word_completes_builtins_and_programs(private_path):
    assert suggest("") == ["cd", "help", "exit", "crater-alpha", "crater-beta"]
    assert suggest("he") == ["help"]
    assert suggest("crater-") == ["crater-alpha", "crater-beta"]


def test_word_after_pipe_is_a_command(private_path):
    assert suggest("ls | crater-a") == ["crater-alpha"]


def test_later_words_complete_paths(in_tmp):
    (in_tmp / "notes.txt").write_text("x")
    (in_tmp / "nested").mkdir()
    (in_tmp / "nested" / "inner.txt").write_text("x")
    (in_tmp / ".hidden").write_text("x")

    assert suggest("cat n") == ["nested/", "notes.txt"]
    assert suggest("cat nested/i") == ["nested/inner.txt"]
    assert suggest("cat ") == ["nested/", "notes.txt"]
    assert suggest("cat .h") == [".hidden"]
    assert suggest("cat missing/x") == []
