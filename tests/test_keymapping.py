# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later
import dataclasses

import pytest

from c64keyboard.commontypes import MappingMode
from c64keyboard.device import c64key as k
from c64keyboard.device import mackey
from c64keyboard.device.hwtypes import C64KeyEvent, HostKeyEvent, KeyPress
from c64keyboard.keymapping import KeyboardMapper
from c64keyboard.settings import Settings


@pytest.fixture
def symbolic():
    return KeyboardMapper(dataclasses.replace(Settings.for_test(), mapping_mode=MappingMode.SYMBOLIC))


@pytest.fixture
def positional():
    return KeyboardMapper(Settings.for_test())


def test_symbolic_shifted_character(symbolic: KeyboardMapper):
    assert symbolic.map_event(HostKeyEvent.pressed(mackey.Ansi.A, "A")) == [
        C64KeyEvent.pressed(k.A),
        C64KeyEvent.pressed(k.SHIFT),
    ]
    # the host may report a different character on release
    assert symbolic.map_event(HostKeyEvent.released(mackey.Ansi.A, "a")) == [
        C64KeyEvent.released(k.SHIFT),
        C64KeyEvent.released(k.A),
    ]
    assert symbolic.held == {}


def test_symbolic_uses_host_character_not_position(symbolic: KeyboardMapper):
    # German layout: the key at the ANSI semicolon position types ö
    assert symbolic.map_event(HostKeyEvent.pressed(mackey.Ansi.SEMICOLON, "ö")) == [C64KeyEvent.pressed(k.AT)]


def test_unmapped_character(symbolic: KeyboardMapper):
    assert symbolic.map_event(HostKeyEvent.pressed(mackey.Ansi.E, "€")) == []
    assert symbolic.map_event(HostKeyEvent.pressed(mackey.Ansi.E)) == []
    assert symbolic.map_event(HostKeyEvent.released(mackey.Ansi.E, "€")) == []


def test_repeat_is_ignored(symbolic: KeyboardMapper):
    assert symbolic.map_event(HostKeyEvent.pressed(mackey.Ansi.Q, "q")) == [C64KeyEvent.pressed(k.Q)]
    assert symbolic.map_event(HostKeyEvent(key=mackey.Ansi.Q, press=KeyPress.REPEATED, character="q")) == []
    assert symbolic.map_event(HostKeyEvent.pressed(mackey.Ansi.Q, "q")) == []
    assert symbolic.map_event(HostKeyEvent.released(mackey.Ansi.Q, "q")) == [C64KeyEvent.released(k.Q)]


def test_shared_shift_stays_down(symbolic: KeyboardMapper):
    assert symbolic.map_event(HostKeyEvent.pressed(mackey.Ansi.A, "A")) == [
        C64KeyEvent.pressed(k.A),
        C64KeyEvent.pressed(k.SHIFT),
    ]
    assert symbolic.map_event(HostKeyEvent.pressed(mackey.Ansi.S, "S")) == [C64KeyEvent.pressed(k.S)]
    assert symbolic.map_event(HostKeyEvent.released(mackey.Ansi.A, "A")) == [C64KeyEvent.released(k.A)]
    assert symbolic.map_event(HostKeyEvent.released(mackey.Ansi.S, "S")) == [
        C64KeyEvent.released(k.SHIFT),
        C64KeyEvent.released(k.S),
    ]


def test_positional(positional: KeyboardMapper):
    assert positional.map_event(HostKeyEvent.pressed(mackey.Ansi.MINUS, "-")) == [C64KeyEvent.pressed(k.PLUS)]
    assert positional.map_event(HostKeyEvent.pressed(mackey.LEFT_SHIFT)) == [C64KeyEvent.pressed(k.SHIFT)]
    assert positional.map_event(HostKeyEvent.released(mackey.LEFT_SHIFT)) == [C64KeyEvent.released(k.SHIFT)]
    assert positional.map_event(HostKeyEvent.released(mackey.Ansi.MINUS, "-")) == [C64KeyEvent.released(k.PLUS)]


def test_positional_unmapped_key(positional: KeyboardMapper):
    assert positional.map_event(HostKeyEvent.pressed(mackey.MacKey(mackey.MacKeyCode.COMMAND))) == []


def test_positional_follows_keymap_changes(positional: KeyboardMapper):
    positional.settings.map_key(mackey.Ansi.A, k.Z)
    assert positional.map_event(HostKeyEvent.pressed(mackey.Ansi.A, "a")) == [C64KeyEvent.pressed(k.Z)]


def test_release_all(symbolic: KeyboardMapper):
    symbolic.map_event(HostKeyEvent.pressed(mackey.Ansi.A, "A"))
    symbolic.map_event(HostKeyEvent.pressed(mackey.Ansi.DIGIT1, "1"))
    assert symbolic.release_all() == [
        C64KeyEvent.released(k.DIGIT1),
        C64KeyEvent.released(k.SHIFT),
        C64KeyEvent.released(k.A),
    ]
    assert symbolic.held == {}
    assert symbolic.release_all() == []
