# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later
import enum


class C64KeyboardError(Exception):
    pass


class InvalidKeyError(C64KeyboardError, ValueError):
    pass


class SettingsError(C64KeyboardError):
    pass


@enum.unique
class MappingMode(enum.Enum):
    # host characters go through the translation table
    SYMBOLIC = "symbolic"
    # host key positions go through the user keymap
    POSITIONAL = "positional"
