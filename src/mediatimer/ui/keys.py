#!/usr/bin/env python3
"""
Logical key events for MediaTimer
Translates raw curses input into the small set of keys the editor understands
"""

import curses
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Key(Enum):
    """Logical keys, independent of the terminal's key codes"""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    ENTER = "enter"
    BACKSPACE = "backspace"
    ESCAPE = "escape"
    CHAR = "char"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str = ""
    # Terminals that report key releases set this; the editor only acts on presses
    release: bool = False

    @classmethod
    def of_char(cls, char: str) -> "KeyEvent":
        return cls(Key.CHAR, char)

    def is_char(self, *chars: str) -> bool:
        return self.key is Key.CHAR and self.char in chars


_SPECIAL_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
}

_CONTROL_CHARS = {
    "\n": Key.ENTER,
    "\r": Key.ENTER,
    "\x1b": Key.ESCAPE,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
}


def translate_key(raw: Union[int, str]) -> Optional[KeyEvent]:
    """Map a value returned by curses get_wch() to a KeyEvent, None when unknown"""
    if isinstance(raw, int):
        key = _SPECIAL_KEYS.get(raw)
        return KeyEvent(key) if key else None

    if raw in _CONTROL_CHARS:
        return KeyEvent(_CONTROL_CHARS[raw])
    if len(raw) == 1 and raw.isprintable():
        return KeyEvent.of_char(raw)
    return None
