# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Physical keys of the C64 keyboard.

Each of the 66 keys has a number from 0 to 65, counted left to right along the
physical key rows. Pressing a key connects one row line and one column line of
the 8x8 keyboard matrix, which CIA 1 scans. Two keys are not part of the matrix:
RESTORE is wired straight to the NMI line, and SHIFT LOCK is a latching switch
that holds down the left SHIFT key. Both report the position (9, 9).
"""
from __future__ import annotations

import enum
import types
import typing

import attr

from ..commontypes import InvalidKeyError

MATRIX_SIZE = 8
UNWIRED = 9

# (name, row, col), in key number order
_KEYBOARD = (
    # First physical key row
    ("LEFT_ARROW", 7, 1),
    ("DIGIT1", 7, 0),
    ("DIGIT2", 7, 3),
    ("DIGIT3", 1, 0),
    ("DIGIT4", 1, 3),
    ("DIGIT5", 2, 0),
    ("DIGIT6", 2, 3),
    ("DIGIT7", 3, 0),
    ("DIGIT8", 3, 3),
    ("DIGIT9", 4, 0),
    ("DIGIT0", 4, 3),
    ("PLUS", 5, 0),
    ("MINUS", 5, 3),
    ("POUND", 6, 0),
    ("HOME", 6, 3),
    ("DELETE", 0, 0),
    ("F1_F2", 0, 4),
    # Second physical key row
    ("CONTROL", 7, 2),
    ("Q", 7, 6),
    ("W", 1, 1),
    ("E", 1, 6),
    ("R", 2, 1),
    ("T", 2, 6),
    ("Y", 3, 1),
    ("U", 3, 6),
    ("I", 4, 1),
    ("O", 4, 6),
    ("P", 5, 1),
    ("AT", 5, 6),
    ("ASTERISK", 6, 1),
    ("UP_ARROW", 6, 6),
    ("RESTORE", UNWIRED, UNWIRED),
    ("F3_F4", 0, 5),
    # Third physical key row
    ("RUN_STOP", 7, 7),
    ("SHIFT_LOCK", UNWIRED, UNWIRED),
    ("A", 1, 2),
    ("S", 1, 5),
    ("D", 2, 2),
    ("F", 2, 5),
    ("G", 3, 2),
    ("H", 3, 5),
    ("J", 4, 2),
    ("K", 4, 5),
    ("L", 5, 2),
    ("COLON", 5, 5),
    ("SEMICOLON", 6, 2),
    ("EQUAL", 6, 5),
    ("RETURN", 0, 1),
    ("F5_F6", 0, 6),
    # Fourth physical key row
    ("COMMODORE", 7, 5),
    ("SHIFT", 1, 7),
    ("Z", 1, 4),
    ("X", 2, 7),
    ("C", 2, 4),
    ("V", 3, 7),
    ("B", 3, 4),
    ("N", 4, 7),
    ("M", 4, 4),
    ("COMMA", 5, 7),
    ("PERIOD", 5, 4),
    ("SLASH", 6, 7),
    ("RIGHT_SHIFT", 6, 4),
    ("CURSOR_UP_DOWN", 0, 7),
    ("CURSOR_LEFT_RIGHT", 0, 2),
    ("F7_F8", 0, 3),
    # Fifth physical key row
    ("SPACE", 7, 4),
)

RESTORE_NR = 31
SHIFT_LOCK_NR = 34
SHIFT_NR = 50
UNWIRED_NRS = frozenset({RESTORE_NR, SHIFT_LOCK_NR})

KEY_NAMES: tuple[str, ...] = tuple(name for name, _, _ in _KEYBOARD)
MAX_NR = len(_KEYBOARD) - 1


def _build_coordinate_table() -> typing.Mapping[tuple[int, int], int]:
    """Invert the key table into matrix position -> key number.

    Every one of the 64 matrix cells must be claimed by exactly one key; only the
    unwired keys may sit outside the matrix.
    """
    table: dict[tuple[int, int], int] = {}
    for nr, (name, row, col) in enumerate(_KEYBOARD):
        if nr in UNWIRED_NRS:
            if (row, col) != (UNWIRED, UNWIRED):
                raise InvalidKeyError(f"{name} must not have a matrix position")
            continue
        if not (0 <= row < MATRIX_SIZE and 0 <= col < MATRIX_SIZE):
            raise InvalidKeyError(f"{name} has no valid matrix position: {(row, col)}")
        if (row, col) in table:
            raise InvalidKeyError(f"{name} collides with key {table[(row, col)]} at {(row, col)}")
        table[(row, col)] = nr
    if len(table) != MATRIX_SIZE * MATRIX_SIZE:
        raise InvalidKeyError(f"Key table covers {len(table)} matrix cells, expected {MATRIX_SIZE * MATRIX_SIZE}")
    return types.MappingProxyType(table)


_NR_BY_COORDINATE = _build_coordinate_table()


class KeyModifier(enum.IntFlag):
    DEFAULT = 0
    SHIFT = 1
    COMMODORE = 2
    CONTROL = 4


@enum.unique
class KeyWiring(enum.Enum):
    MATRIX = "matrix"
    # RESTORE pulls the NMI line of the CPU directly
    NMI = "nmi"
    # SHIFT LOCK mechanically holds down the left SHIFT key
    LATCH = "latch"


@attr.frozen
class C64Key:
    nr: int = attr.field()
    row: int = attr.field(eq=False)
    col: int = attr.field(eq=False)

    @nr.validator
    def _check_nr(self, attribute, value):
        if not 0 <= value <= MAX_NR:
            raise InvalidKeyError(f"Key number {value} out of range 0..{MAX_NR}")

    def __attrs_post_init__(self):
        _, row, col = _KEYBOARD[self.nr]
        if (self.row, self.col) != (row, col):
            raise InvalidKeyError(f"Key {self.nr} is at ({row}, {col}), not ({self.row}, {self.col})")

    @classmethod
    def from_index(cls, nr: int) -> C64Key:
        if not 0 <= nr <= MAX_NR:
            raise InvalidKeyError(f"Key number {nr} out of range 0..{MAX_NR}")
        _, row, col = _KEYBOARD[nr]
        return cls(nr=nr, row=row, col=col)

    @classmethod
    def from_coordinate(cls, row: int, col: int) -> C64Key:
        if not 0 <= row < MATRIX_SIZE:
            raise InvalidKeyError(f"Matrix row {row} out of range 0..{MATRIX_SIZE - 1}")
        if not 0 <= col < MATRIX_SIZE:
            raise InvalidKeyError(f"Matrix column {col} out of range 0..{MATRIX_SIZE - 1}")
        return cls(nr=_NR_BY_COORDINATE[(row, col)], row=row, col=col)

    @property
    def name(self) -> str:
        return KEY_NAMES[self.nr]

    @property
    def in_matrix(self) -> bool:
        return self.nr not in UNWIRED_NRS

    @property
    def wiring(self) -> KeyWiring:
        if self.nr == RESTORE_NR:
            return KeyWiring.NMI
        elif self.nr == SHIFT_LOCK_NR:
            return KeyWiring.LATCH
        return KeyWiring.MATRIX

    @property
    def latched_key(self) -> typing.Optional[C64Key]:
        if self.nr == SHIFT_LOCK_NR:
            return C64Key.from_index(SHIFT_NR)
        return None

    def matrix_keys(self) -> tuple[C64Key, ...]:
        "The keys whose matrix cells are closed while this key is down."
        if self.in_matrix:
            return (self,)
        if self.latched_key is not None:
            return (self.latched_key,)
        return ()

    @property
    def modifier(self) -> KeyModifier:
        return _MODIFIERS.get(self.nr, KeyModifier.DEFAULT)

    @property
    def is_modifier(self) -> bool:
        return self.modifier is not KeyModifier.DEFAULT

    def to_record(self) -> dict[str, int]:
        return attr.asdict(self)

    @classmethod
    def from_record(cls, record: typing.Mapping[str, int]) -> C64Key:
        key = cls.from_index(record["nr"])
        position = (record.get("row", key.row), record.get("col", key.col))
        if position != (key.row, key.col):
            raise InvalidKeyError(f"Record {dict(record)!r} does not match the position of {key.name} {(key.row, key.col)}")
        return key


_MODIFIERS = {
    SHIFT_NR: KeyModifier.SHIFT,
    61: KeyModifier.SHIFT,
    SHIFT_LOCK_NR: KeyModifier.SHIFT,
    49: KeyModifier.COMMODORE,
    17: KeyModifier.CONTROL,
}

# First row of the matrix
DELETE = C64Key.from_index(15)
RETURN = C64Key.from_index(47)
CURSOR_LEFT_RIGHT = C64Key.from_index(63)
F7_F8 = C64Key.from_index(64)
F1_F2 = C64Key.from_index(16)
F3_F4 = C64Key.from_index(32)
F5_F6 = C64Key.from_index(48)
CURSOR_UP_DOWN = C64Key.from_index(62)

# Second row
DIGIT3 = C64Key.from_index(3)
W = C64Key.from_index(19)
A = C64Key.from_index(35)
DIGIT4 = C64Key.from_index(4)
Z = C64Key.from_index(51)
S = C64Key.from_index(36)
E = C64Key.from_index(20)
SHIFT = C64Key.from_index(50)

# Third row
DIGIT5 = C64Key.from_index(5)
R = C64Key.from_index(21)
D = C64Key.from_index(37)
DIGIT6 = C64Key.from_index(6)
C = C64Key.from_index(53)
F = C64Key.from_index(38)
T = C64Key.from_index(22)
X = C64Key.from_index(52)

# Fourth row
DIGIT7 = C64Key.from_index(7)
Y = C64Key.from_index(23)
G = C64Key.from_index(39)
DIGIT8 = C64Key.from_index(8)
B = C64Key.from_index(55)
H = C64Key.from_index(40)
U = C64Key.from_index(24)
V = C64Key.from_index(54)

# Fifth row
DIGIT9 = C64Key.from_index(9)
I = C64Key.from_index(25)  # noqa: E741
J = C64Key.from_index(41)
DIGIT0 = C64Key.from_index(10)
M = C64Key.from_index(57)
K = C64Key.from_index(42)
O = C64Key.from_index(26)  # noqa: E741
N = C64Key.from_index(56)

# Sixth row
PLUS = C64Key.from_index(11)
P = C64Key.from_index(27)
L = C64Key.from_index(43)
MINUS = C64Key.from_index(12)
PERIOD = C64Key.from_index(59)
COLON = C64Key.from_index(44)
AT = C64Key.from_index(28)
COMMA = C64Key.from_index(58)

# Seventh row
POUND = C64Key.from_index(13)
ASTERISK = C64Key.from_index(29)
SEMICOLON = C64Key.from_index(45)
HOME = C64Key.from_index(14)
RIGHT_SHIFT = C64Key.from_index(61)
EQUAL = C64Key.from_index(46)
UP_ARROW = C64Key.from_index(30)
SLASH = C64Key.from_index(60)

# Eighth row
DIGIT1 = C64Key.from_index(1)
LEFT_ARROW = C64Key.from_index(0)
CONTROL = C64Key.from_index(17)
DIGIT2 = C64Key.from_index(2)
SPACE = C64Key.from_index(65)
COMMODORE = C64Key.from_index(49)
Q = C64Key.from_index(18)
RUN_STOP = C64Key.from_index(33)

# Outside the matrix
RESTORE = C64Key.from_index(RESTORE_NR)
SHIFT_LOCK = C64Key.from_index(SHIFT_LOCK_NR)

ALL_KEYS: tuple[C64Key, ...] = tuple(C64Key.from_index(nr) for nr in range(MAX_NR + 1))
