# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later
import pytest

from c64keyboard.commontypes import InvalidKeyError
from c64keyboard.device import mackey
from c64keyboard.device.mackey import Ansi, Iso, MacKey, MacKeyCode


def test_identity_is_the_key_code():
    assert Ansi.A == Ansi.a
    assert hash(Ansi.A) == hash(Ansi.a)
    assert Ansi.A.description != Ansi.a.description
    assert MacKey(0x24) == mackey.RET
    assert mackey.LEFT_SHIFT != mackey.RIGHT_SHIFT
    assert {Ansi.W: 1}[Ansi.w] == 1
    with pytest.raises(TypeError):
        Ansi.A < Ansi.B


@pytest.mark.parametrize(
    "key,code",
    (
        (mackey.RET, 0x24),
        (mackey.TAB, 0x30),
        (mackey.SPACE, 0x31),
        (mackey.DELETE, 0x33),
        (mackey.ESCAPE, 0x35),
        (mackey.F1, 0x7A),
        (mackey.CUR_UP, 0x7E),
        (Ansi.A, 0x00),
        (Ansi.GRAVE, 0x32),
        (Iso.HAT, 0x0A),
    ),
)
def test_key_codes(key: MacKey, code: int):
    assert key.key_code == code


def test_key_code_str():
    assert mackey.RET.key_code_str == "24"
    assert Ansi.A.key_code_str == "00"
    assert MacKey(MacKeyCode.UP_ARROW).key_code_str == "7E"


def test_key_code_must_fit():
    with pytest.raises(InvalidKeyError):
        MacKey(0x10000)
    with pytest.raises(InvalidKeyError):
        MacKey(-1)


def test_record():
    assert mackey.RET.to_record() == {"key_code": 0x24, "description": "↩"}
    restored = MacKey.from_record({"key_code": 0x24})
    assert restored == mackey.RET
    assert restored.description is None
