# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later
import dataclasses
import json
import logging
import pathlib
import typing

import cattrs
import cattrs.errors
import cattrs.gen

from .commontypes import InvalidKeyError, MappingMode, SettingsError
from .device import c64key as c64
from .device import mackey as mac
from .device.c64key import C64Key
from .device.mackey import MacKey

logger = logging.getLogger(__name__)

Keymap = dict[MacKey, C64Key]

# Where each key of a Mac ANSI keyboard lands on the C64 keyboard when mapping by position.
DEFAULT_KEYMAP: Keymap = {
    # First row
    mac.Ansi.GRAVE: c64.LEFT_ARROW,
    mac.Ansi.DIGIT1: c64.DIGIT1,
    mac.Ansi.DIGIT2: c64.DIGIT2,
    mac.Ansi.DIGIT3: c64.DIGIT3,
    mac.Ansi.DIGIT4: c64.DIGIT4,
    mac.Ansi.DIGIT5: c64.DIGIT5,
    mac.Ansi.DIGIT6: c64.DIGIT6,
    mac.Ansi.DIGIT7: c64.DIGIT7,
    mac.Ansi.DIGIT8: c64.DIGIT8,
    mac.Ansi.DIGIT9: c64.DIGIT9,
    mac.Ansi.DIGIT0: c64.DIGIT0,
    mac.Ansi.MINUS: c64.PLUS,
    mac.Ansi.EQUAL: c64.MINUS,
    mac.HOME: c64.HOME,
    mac.Iso.HAT: c64.POUND,
    mac.DELETE: c64.DELETE,
    # Second row
    mac.TAB: c64.CONTROL,
    mac.Ansi.Q: c64.Q,
    mac.Ansi.W: c64.W,
    mac.Ansi.E: c64.E,
    mac.Ansi.R: c64.R,
    mac.Ansi.T: c64.T,
    mac.Ansi.Y: c64.Y,
    mac.Ansi.U: c64.U,
    mac.Ansi.I: c64.I,
    mac.Ansi.O: c64.O,
    mac.Ansi.P: c64.P,
    mac.Ansi.LEFT_BRACKET: c64.AT,
    mac.Ansi.RIGHT_BRACKET: c64.ASTERISK,
    mac.Ansi.BACKSLASH: c64.UP_ARROW,
    mac.CLEAR: c64.RESTORE,
    # Third row
    mac.ESCAPE: c64.RUN_STOP,
    mac.MacKey(mac.MacKeyCode.CAPS_LOCK, "⇪"): c64.SHIFT_LOCK,
    mac.Ansi.A: c64.A,
    mac.Ansi.S: c64.S,
    mac.Ansi.D: c64.D,
    mac.Ansi.F: c64.F,
    mac.Ansi.G: c64.G,
    mac.Ansi.H: c64.H,
    mac.Ansi.J: c64.J,
    mac.Ansi.K: c64.K,
    mac.Ansi.L: c64.L,
    mac.Ansi.SEMICOLON: c64.COLON,
    mac.Ansi.QUOTE: c64.SEMICOLON,
    mac.MacKey(mac.MacKeyCode.ANSI_KEYPAD_EQUALS, "="): c64.EQUAL,
    mac.RET: c64.RETURN,
    # Fourth row
    mac.OPTION: c64.COMMODORE,
    mac.LEFT_SHIFT: c64.SHIFT,
    mac.Ansi.Z: c64.Z,
    mac.Ansi.X: c64.X,
    mac.Ansi.C: c64.C,
    mac.Ansi.V: c64.V,
    mac.Ansi.B: c64.B,
    mac.Ansi.N: c64.N,
    mac.Ansi.M: c64.M,
    mac.Ansi.COMMA: c64.COMMA,
    mac.Ansi.PERIOD: c64.PERIOD,
    mac.Ansi.SLASH: c64.SLASH,
    mac.RIGHT_SHIFT: c64.RIGHT_SHIFT,
    mac.CUR_UP: c64.CURSOR_UP_DOWN,
    mac.CUR_DOWN: c64.CURSOR_UP_DOWN,
    mac.CUR_LEFT: c64.CURSOR_LEFT_RIGHT,
    mac.CUR_RIGHT: c64.CURSOR_LEFT_RIGHT,
    # Fifth row
    mac.SPACE: c64.SPACE,
    # Function keys
    mac.F1: c64.F1_F2,
    mac.F2: c64.F1_F2,
    mac.F3: c64.F3_F4,
    mac.F4: c64.F3_F4,
    mac.F5: c64.F5_F6,
    mac.F6: c64.F5_F6,
    mac.F7: c64.F7_F8,
    mac.F8: c64.F7_F8,
}


def unstructure_mac_key(key: MacKey):
    return key.key_code_str


def structure_mac_key(v: str | int, typ: type[MacKey]):
    if isinstance(v, int):
        return MacKey(v)
    return MacKey(int(v, 16))


def unstructure_keymap(keymap: Keymap):
    return {unstructure_mac_key(k): v.nr for k, v in sorted(keymap.items(), key=lambda item: item[0].key_code)}


def structure_keymap(d: dict, typ: type):
    keymap = {}
    for raw_key, raw_nr in d.items():
        try:
            keymap[structure_mac_key(raw_key, MacKey)] = C64Key.from_index(raw_nr)
        except (InvalidKeyError, ValueError, TypeError):
            logger.warning("Ignoring keymap entry %r: %r", raw_key, raw_nr)
    return keymap


settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(pathlib.Path, str)
settings_converter.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))
settings_converter.register_unstructure_hook(C64Key, lambda key: key.nr)
settings_converter.register_structure_hook(C64Key, lambda v, _: C64Key.from_index(v))
settings_converter.register_unstructure_hook(MacKey, unstructure_mac_key)
settings_converter.register_structure_hook(MacKey, structure_mac_key)
settings_converter.register_unstructure_hook_func(lambda t: t == Keymap, unstructure_keymap)
settings_converter.register_structure_hook_func(lambda t: t == Keymap, structure_keymap)


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: pathlib.Path
    mapping_mode: MappingMode
    keymap: Keymap

    def map_key(self, key: MacKey, c64_key: typing.Optional[C64Key]):
        if c64_key is None:
            self.keymap.pop(key, None)
        else:
            self.keymap[key] = c64_key

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        with dest.open("w") as outfile:
            json.dump(raw, outfile, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        try:
            with src.open() as infile:
                raw = json.load(infile)
            raw["_path"] = src
            return settings_converter.structure(raw, cls)
        except (ValueError, KeyError, TypeError, cattrs.errors.BaseValidationError) as exc:
            raise SettingsError(f"Unable to load settings from {src}") from exc

    @classmethod
    def default(cls, path: pathlib.Path):
        return cls(_path=path, mapping_mode=MappingMode.SYMBOLIC, keymap=dict(DEFAULT_KEYMAP))

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "_path": "test.settings.json",
                "mapping_mode": "positional",
                "keymap": unstructure_keymap(DEFAULT_KEYMAP),
            },
            cls,
        )


settings_converter.register_structure_hook(Settings, cattrs.gen.make_dict_structure_fn(Settings, settings_converter))
