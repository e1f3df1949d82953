# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .commontypes import MappingMode
from .device.hwtypes import C64KeyEvent, HostKeyEvent, KeyPress
from .device.mackey import MacKey
from .device.translate import translate

if TYPE_CHECKING:
    from .device.c64key import C64Key
    from .settings import Settings

logger = logging.getLogger(__name__)


class KeyboardMapper:
    """Turns host key events into C64 key events.

    The combination pressed for a host key is remembered until that host key
    is released, so releasing SHIFT on the host before the letter key still
    releases exactly what was pressed.
    """

    held: dict[int, tuple[C64Key, ...]]

    def __init__(self, settings: Settings):
        self.settings = settings
        self.held = {}

    def resolve(self, event: HostKeyEvent) -> tuple[C64Key, ...]:
        match self.settings.mapping_mode:
            case MappingMode.SYMBOLIC:
                return translate(event.character)
            case MappingMode.POSITIONAL:
                c64_key = self.settings.keymap.get(event.key)
                return () if c64_key is None else (c64_key,)

    def _down(self) -> set[C64Key]:
        return {key for keys in self.held.values() for key in keys}

    def map_event(self, event: HostKeyEvent) -> list[C64KeyEvent]:
        code = event.key.key_code
        if event.press is KeyPress.RELEASED:
            keys = self.held.pop(code, ())
            # another host key may still hold the same C64 key (usually SHIFT)
            still_down = self._down()
            return [C64KeyEvent.released(key) for key in reversed(keys) if key not in still_down]
        if code in self.held:
            # autorepeat, or a press we already saw
            return []
        keys = self.resolve(event)
        if not keys:
            logger.debug("No C64 keys for %r", event)
            return []
        already_down = self._down()
        self.held[code] = keys
        return [C64KeyEvent.pressed(key) for key in keys if key not in already_down]

    def release_all(self) -> list[C64KeyEvent]:
        released = []
        while self.held:
            code = next(reversed(self.held))
            released.extend(self.map_event(HostKeyEvent.released(MacKey(code))))
        return released
