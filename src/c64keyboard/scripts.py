# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later
import argparse
import logging
import pathlib
import pprint

from .commontypes import MappingMode
from .device.c64key import MATRIX_SIZE, C64Key
from .device.translate import translate
from .settings import Settings


def describe(key: C64Key):
    return {"key": key.name, "nr": key.nr, "row": key.row, "col": key.col}


translate_parser = argparse.ArgumentParser(description="Show the C64 keys needed to type some text.")
translate_parser.add_argument("text", nargs="+")
translate_parser.add_argument("--debug", action="store_true")


def translate_cli():
    args = translate_parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    text = " ".join(args.text)
    pprint.pprint([(char, [describe(key) for key in translate(char)]) for char in text], sort_dicts=False)


def print_matrix():
    width = max(len(C64Key.from_coordinate(row, col).name) for row in range(MATRIX_SIZE) for col in range(MATRIX_SIZE))
    print("    " + " ".join(f"{col:<{width}}" for col in range(MATRIX_SIZE)))
    for row in range(MATRIX_SIZE):
        names = (C64Key.from_coordinate(row, col).name for col in range(MATRIX_SIZE))
        print(f"{row:<4}" + " ".join(f"{name:<{width}}" for name in names))


write_settings_parser = argparse.ArgumentParser(description="Write a settings file with the default keymap.")
write_settings_parser.add_argument("settings", type=pathlib.Path)
write_settings_parser.add_argument("--mode", choices=[m.value for m in MappingMode], default=MappingMode.SYMBOLIC.value)


def write_settings_cli():
    args = write_settings_parser.parse_args()
    logging.basicConfig(level=logging.INFO)
    settings = Settings.default(args.settings)
    settings.mapping_mode = MappingMode(args.mode)
    settings.save()
    logging.getLogger(__name__).info("Wrote %s", args.settings)
