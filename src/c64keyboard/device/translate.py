# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import types
import typing
import unicodedata

from . import c64key as k
from .c64key import C64Key

logger = logging.getLogger(__name__)


def _letters() -> dict[str, tuple[C64Key, ...]]:
    letters = {}
    for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        key = getattr(k, letter)
        letters[letter.lower()] = (key,)
        letters[letter] = (key, k.SHIFT)
    return letters


# Shifted characters list the base key first, then SHIFT.
# The umlauts and § sit where a German Mac keyboard has them.
CHARACTER_KEYS: typing.Mapping[str, tuple[C64Key, ...]] = types.MappingProxyType(
    {
        # First row of the C64 keyboard
        "ü": (k.LEFT_ARROW,),
        "1": (k.DIGIT1,),
        "!": (k.DIGIT1, k.SHIFT),
        "2": (k.DIGIT2,),
        '"': (k.DIGIT2, k.SHIFT),
        "3": (k.DIGIT3,),
        "#": (k.DIGIT3, k.SHIFT),
        "4": (k.DIGIT4,),
        "$": (k.DIGIT4, k.SHIFT),
        "5": (k.DIGIT5,),
        "%": (k.DIGIT5, k.SHIFT),
        "6": (k.DIGIT6,),
        "&": (k.DIGIT6, k.SHIFT),
        "7": (k.DIGIT7,),
        "'": (k.DIGIT7, k.SHIFT),
        "8": (k.DIGIT8,),
        "(": (k.DIGIT8, k.SHIFT),
        "9": (k.DIGIT9,),
        ")": (k.DIGIT9, k.SHIFT),
        "0": (k.DIGIT0,),
        "+": (k.PLUS,),
        "-": (k.MINUS,),
        "§": (k.POUND,),
        # Second row
        "@": (k.AT,),
        "ö": (k.AT,),
        "*": (k.ASTERISK,),
        "ä": (k.UP_ARROW,),
        # Third row
        ":": (k.COLON,),
        "[": (k.COLON, k.SHIFT),
        ";": (k.SEMICOLON,),
        "]": (k.SEMICOLON, k.SHIFT),
        "=": (k.EQUAL,),
        "\n": (k.RETURN,),
        # Fourth row
        ",": (k.COMMA,),
        "<": (k.COMMA, k.SHIFT),
        ".": (k.PERIOD,),
        ">": (k.PERIOD, k.SHIFT),
        "/": (k.SLASH,),
        "?": (k.SLASH, k.SHIFT),
        # Fifth row
        " ": (k.SPACE,),
        **_letters(),
    }
)


def translate(char: typing.Optional[str]) -> tuple[C64Key, ...]:
    """Return the C64 keys to press together to type char.

    An empty tuple means the C64 keyboard cannot produce the character; callers
    should drop it.
    """
    if char is None:
        return ()
    keys = CHARACTER_KEYS.get(unicodedata.normalize("NFC", char))
    if keys is None:
        logger.debug("No C64 key combination for %r", char)
        return ()
    return keys


def translate_text(text: str) -> collections.abc.Iterator[tuple[C64Key, ...]]:
    for char in unicodedata.normalize("NFC", text):
        keys = translate(char)
        if keys:
            yield keys
