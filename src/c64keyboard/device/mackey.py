# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import enum
import typing

import attr

from ..commontypes import InvalidKeyError


# Virtual key codes as reported by the Carbon event manager (kVK_* in HIToolbox/Events.h).
# The layout independent codes are the same on every Mac keyboard. The ANSI codes name
# a physical position on a US keyboard, whatever character the active layout puts there.
class MacKeyCode(enum.IntEnum):
    ANSI_A = 0x00
    ANSI_S = 0x01
    ANSI_D = 0x02
    ANSI_F = 0x03
    ANSI_H = 0x04
    ANSI_G = 0x05
    ANSI_Z = 0x06
    ANSI_X = 0x07
    ANSI_C = 0x08
    ANSI_V = 0x09
    ISO_SECTION = 0x0A
    ANSI_B = 0x0B
    ANSI_Q = 0x0C
    ANSI_W = 0x0D
    ANSI_E = 0x0E
    ANSI_R = 0x0F
    ANSI_Y = 0x10
    ANSI_T = 0x11
    ANSI_1 = 0x12
    ANSI_2 = 0x13
    ANSI_3 = 0x14
    ANSI_4 = 0x15
    ANSI_6 = 0x16
    ANSI_5 = 0x17
    ANSI_EQUAL = 0x18
    ANSI_9 = 0x19
    ANSI_7 = 0x1A
    ANSI_MINUS = 0x1B
    ANSI_8 = 0x1C
    ANSI_0 = 0x1D
    ANSI_RIGHT_BRACKET = 0x1E
    ANSI_O = 0x1F
    ANSI_U = 0x20
    ANSI_LEFT_BRACKET = 0x21
    ANSI_I = 0x22
    ANSI_P = 0x23
    RETURN = 0x24
    ANSI_L = 0x25
    ANSI_J = 0x26
    ANSI_QUOTE = 0x27
    ANSI_K = 0x28
    ANSI_SEMICOLON = 0x29
    ANSI_BACKSLASH = 0x2A
    ANSI_COMMA = 0x2B
    ANSI_SLASH = 0x2C
    ANSI_N = 0x2D
    ANSI_M = 0x2E
    ANSI_PERIOD = 0x2F
    TAB = 0x30
    SPACE = 0x31
    ANSI_GRAVE = 0x32
    DELETE = 0x33
    ESCAPE = 0x35
    COMMAND = 0x37
    SHIFT = 0x38
    CAPS_LOCK = 0x39
    OPTION = 0x3A
    CONTROL = 0x3B
    RIGHT_SHIFT = 0x3C
    RIGHT_OPTION = 0x3D
    RIGHT_CONTROL = 0x3E
    ANSI_KEYPAD_CLEAR = 0x47
    ANSI_KEYPAD_EQUALS = 0x51
    F5 = 0x60
    F6 = 0x61
    F7 = 0x62
    F3 = 0x63
    F8 = 0x64
    HOME = 0x73
    F4 = 0x76
    F2 = 0x78
    F1 = 0x7A
    LEFT_ARROW = 0x7B
    RIGHT_ARROW = 0x7C
    DOWN_ARROW = 0x7D
    UP_ARROW = 0x7E


@attr.frozen
class MacKey:
    """A physical key on the Mac keyboard.

    Two MacKeys are the same key when their key codes match; the description is
    only a label for display.
    """

    key_code: int = attr.field(converter=int)
    description: typing.Optional[str] = attr.field(default=None, eq=False)

    @key_code.validator
    def _check_key_code(self, attribute, value):
        if not 0 <= value <= 0xFFFF:
            raise InvalidKeyError(f"Mac key code {value} does not fit in 16 bits")

    @property
    def key_code_str(self) -> str:
        return f"{self.key_code:02X}"

    def to_record(self) -> dict[str, typing.Any]:
        return attr.asdict(self)

    @classmethod
    def from_record(cls, record: typing.Mapping[str, typing.Any]) -> MacKey:
        return cls(key_code=record["key_code"], description=record.get("description"))


# Layout independent keys
RET = MacKey(MacKeyCode.RETURN, "↩")
TAB = MacKey(MacKeyCode.TAB, "⇥")
SPACE = MacKey(MacKeyCode.SPACE, "⎵")
DELETE = MacKey(MacKeyCode.DELETE, "⌫")
ESCAPE = MacKey(MacKeyCode.ESCAPE, "⎋")
LEFT_SHIFT = MacKey(MacKeyCode.SHIFT, "⇧")
RIGHT_SHIFT = MacKey(MacKeyCode.RIGHT_SHIFT, "⇧")
OPTION = MacKey(MacKeyCode.OPTION, "⌥")
CONTROL = MacKey(MacKeyCode.CONTROL, "⌃")
HOME = MacKey(MacKeyCode.HOME, "⇱")
CLEAR = MacKey(MacKeyCode.ANSI_KEYPAD_CLEAR, "⌧")

F1 = MacKey(MacKeyCode.F1, "F1")
F2 = MacKey(MacKeyCode.F2, "F2")
F3 = MacKey(MacKeyCode.F3, "F3")
F4 = MacKey(MacKeyCode.F4, "F4")
F5 = MacKey(MacKeyCode.F5, "F5")
F6 = MacKey(MacKeyCode.F6, "F6")
F7 = MacKey(MacKeyCode.F7, "F7")
F8 = MacKey(MacKeyCode.F8, "F8")

CUR_LEFT = MacKey(MacKeyCode.LEFT_ARROW, "←")
CUR_RIGHT = MacKey(MacKeyCode.RIGHT_ARROW, "→")
CUR_DOWN = MacKey(MacKeyCode.DOWN_ARROW, "↓")
CUR_UP = MacKey(MacKeyCode.UP_ARROW, "↑")


class Ansi:
    "Layout dependent keys, positioned as on a standard ANSI US keyboard."

    GRAVE = MacKey(MacKeyCode.ANSI_GRAVE, "")
    DIGIT0 = MacKey(MacKeyCode.ANSI_0, "0")
    DIGIT1 = MacKey(MacKeyCode.ANSI_1, "1")
    DIGIT2 = MacKey(MacKeyCode.ANSI_2, "2")
    DIGIT3 = MacKey(MacKeyCode.ANSI_3, "3")
    DIGIT4 = MacKey(MacKeyCode.ANSI_4, "4")
    DIGIT5 = MacKey(MacKeyCode.ANSI_5, "5")
    DIGIT6 = MacKey(MacKeyCode.ANSI_6, "6")
    DIGIT7 = MacKey(MacKeyCode.ANSI_7, "7")
    DIGIT8 = MacKey(MacKeyCode.ANSI_8, "8")
    DIGIT9 = MacKey(MacKeyCode.ANSI_9, "9")
    MINUS = MacKey(MacKeyCode.ANSI_MINUS, "")
    EQUAL = MacKey(MacKeyCode.ANSI_EQUAL, "")

    A = MacKey(MacKeyCode.ANSI_A, "A")
    a = MacKey(MacKeyCode.ANSI_A, "a")
    B = MacKey(MacKeyCode.ANSI_B, "B")
    C = MacKey(MacKeyCode.ANSI_C, "C")
    c = MacKey(MacKeyCode.ANSI_C, "c")
    D = MacKey(MacKeyCode.ANSI_D, "D")
    d = MacKey(MacKeyCode.ANSI_D, "d")
    E = MacKey(MacKeyCode.ANSI_E, "E")
    e = MacKey(MacKeyCode.ANSI_E, "e")
    F = MacKey(MacKeyCode.ANSI_F, "F")
    G = MacKey(MacKeyCode.ANSI_G, "G")
    H = MacKey(MacKeyCode.ANSI_H, "H")
    I = MacKey(MacKeyCode.ANSI_I, "I")  # noqa: E741
    J = MacKey(MacKeyCode.ANSI_J, "J")
    K = MacKey(MacKeyCode.ANSI_K, "K")
    L = MacKey(MacKeyCode.ANSI_L, "L")
    M = MacKey(MacKeyCode.ANSI_M, "M")
    N = MacKey(MacKeyCode.ANSI_N, "N")
    O = MacKey(MacKeyCode.ANSI_O, "O")  # noqa: E741
    P = MacKey(MacKeyCode.ANSI_P, "P")
    Q = MacKey(MacKeyCode.ANSI_Q, "Q")
    R = MacKey(MacKeyCode.ANSI_R, "R")
    S = MacKey(MacKeyCode.ANSI_S, "S")
    s = MacKey(MacKeyCode.ANSI_S, "s")
    T = MacKey(MacKeyCode.ANSI_T, "T")
    U = MacKey(MacKeyCode.ANSI_U, "U")
    V = MacKey(MacKeyCode.ANSI_V, "V")
    W = MacKey(MacKeyCode.ANSI_W, "W")
    w = MacKey(MacKeyCode.ANSI_W, "w")
    X = MacKey(MacKeyCode.ANSI_X, "X")
    x = MacKey(MacKeyCode.ANSI_X, "x")
    Y = MacKey(MacKeyCode.ANSI_Y, "Y")
    y = MacKey(MacKeyCode.ANSI_Y, "y")
    Z = MacKey(MacKeyCode.ANSI_Z, "Z")

    LEFT_BRACKET = MacKey(MacKeyCode.ANSI_LEFT_BRACKET, "[")
    RIGHT_BRACKET = MacKey(MacKeyCode.ANSI_RIGHT_BRACKET, "]")

    COMMA = MacKey(MacKeyCode.ANSI_COMMA, ",")
    PERIOD = MacKey(MacKeyCode.ANSI_PERIOD, ".")
    SLASH = MacKey(MacKeyCode.ANSI_SLASH, "/")
    BACKSLASH = MacKey(MacKeyCode.ANSI_BACKSLASH, "\\")
    SEMICOLON = MacKey(MacKeyCode.ANSI_SEMICOLON, ";")
    QUOTE = MacKey(MacKeyCode.ANSI_QUOTE, "'")


class Iso:
    "Keys that only exist on ISO keyboards."

    HAT = MacKey(MacKeyCode.ISO_SECTION, "")
