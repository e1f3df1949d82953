# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later
import pathlib

import pytest

from c64keyboard import scripts
from c64keyboard.commontypes import MappingMode
from c64keyboard.settings import Settings


def test_print_matrix(capsys: pytest.CaptureFixture[str]):
    scripts.print_matrix()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 9
    assert lines[1].split() == ["0", "DELETE", "RETURN", "CURSOR_LEFT_RIGHT", "F7_F8", "F1_F2", "F3_F4", "F5_F6", "CURSOR_UP_DOWN"]
    assert lines[8].split()[0:3] == ["7", "DIGIT1", "LEFT_ARROW"]


def test_translate_cli(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    monkeypatch.setattr("sys.argv", ["c64keyboard-translate", "A"])
    scripts.translate_cli()
    out = capsys.readouterr().out
    assert "'key': 'A'" in out
    assert "'key': 'SHIFT'" in out


def test_write_settings_cli(monkeypatch: pytest.MonkeyPatch, tmp_path: pathlib.Path):
    path = tmp_path / "settings.json"
    monkeypatch.setattr("sys.argv", ["c64keyboard-write-settings", str(path), "--mode", "positional"])
    scripts.write_settings_cli()
    settings = Settings.load(path)
    assert settings.mapping_mode is MappingMode.POSITIONAL
