# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import enum
import typing

import msgspec

if typing.TYPE_CHECKING:
    from .c64key import C64Key
    from .mackey import MacKey


class KeyPress(enum.IntEnum):
    RELEASED = 0
    PRESSED = 1
    REPEATED = 2


class HostKeyEvent(msgspec.Struct, frozen=True):
    key: MacKey
    press: KeyPress
    # decoded by the host with the live modifier state applied
    character: typing.Optional[str] = None

    @classmethod
    def pressed(cls, key: MacKey, character: typing.Optional[str] = None):
        return cls(key=key, press=KeyPress.PRESSED, character=character)

    @classmethod
    def released(cls, key: MacKey, character: typing.Optional[str] = None):
        return cls(key=key, press=KeyPress.RELEASED, character=character)


class C64KeyEvent(msgspec.Struct, frozen=True):
    key: C64Key
    press: KeyPress

    @classmethod
    def pressed(cls, key: C64Key):
        return cls(key=key, press=KeyPress.PRESSED)

    @classmethod
    def released(cls, key: C64Key):
        return cls(key=key, press=KeyPress.RELEASED)
