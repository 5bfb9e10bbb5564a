import os
import stat

import pytest

from hnt_tput import config
from hnt_tput.config import find_tput, tput_command


def _make_tput(directory):
    directory.mkdir()
    path = directory / "tput"
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def test_env_override(monkeypatch):
    monkeypatch.setenv("HINATA_TPUT_CMD", "/opt/ncurses/bin/tput -x")
    assert tput_command() == ["/opt/ncurses/bin/tput", "-x"]


def test_env_override_quoted(monkeypatch):
    monkeypatch.setenv("HINATA_TPUT_CMD", "'/path with space/tput'")
    assert tput_command() == ["/path with space/tput"]


@pytest.mark.parametrize("value", ["   ", '"unterminated'])
def test_bad_env_falls_back(value, monkeypatch, capsys):
    monkeypatch.setenv("HINATA_TPUT_CMD", value)
    monkeypatch.setattr(config, "find_tput", lambda: "/usr/bin/tput")
    assert tput_command() == ["/usr/bin/tput"]
    assert "Warning:" in capsys.readouterr().err


def test_not_found_keeps_bare_name(monkeypatch):
    monkeypatch.setattr(config, "find_tput", lambda: None)
    assert tput_command() == ["tput"]


@pytest.mark.skipif(os.name != "posix", reason="executable bit")
def test_find_tput_skips_self(tmp_path):
    first = _make_tput(tmp_path / "a")
    second = _make_tput(tmp_path / "b")
    path = os.pathsep.join([str(first.parent), str(second.parent)])

    assert find_tput(path=path, self_path=str(tmp_path / "elsewhere")) == str(first)
    assert find_tput(path=path, self_path=str(first)) == str(second)
    assert find_tput(path=str(first.parent), self_path=str(first)) is None


def test_find_tput_empty_path(tmp_path):
    assert find_tput(path=str(tmp_path), self_path=None) is None
