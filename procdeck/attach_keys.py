"""Translate UI key events into key presses for an embedded terminal emulator."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from procdeck.keys import KeyMsg, KeyType

_EXTENDED = 0x110000


class KeyMod(enum.IntFlag):
    """Modifier bits carried by a key press."""

    NONE = 0
    SHIFT = 1
    ALT = 2
    CTRL = 4


class KeyCode(enum.IntEnum):
    """Codes for keys that are not plain printable characters."""

    TAB = 0x09
    ENTER = 0x0D
    ESCAPE = 0x1B
    SPACE = 0x20
    BACKSPACE = 0x7F

    UP = _EXTENDED + 1
    DOWN = _EXTENDED + 2
    RIGHT = _EXTENDED + 3
    LEFT = _EXTENDED + 4
    INSERT = _EXTENDED + 5
    DELETE = _EXTENDED + 6
    PGUP = _EXTENDED + 7
    PGDOWN = _EXTENDED + 8
    HOME = _EXTENDED + 9
    END = _EXTENDED + 10

    F1 = _EXTENDED + 21
    F2 = _EXTENDED + 22
    F3 = _EXTENDED + 23
    F4 = _EXTENDED + 24
    F5 = _EXTENDED + 25
    F6 = _EXTENDED + 26
    F7 = _EXTENDED + 27
    F8 = _EXTENDED + 28
    F9 = _EXTENDED + 29
    F10 = _EXTENDED + 30
    F11 = _EXTENDED + 31
    F12 = _EXTENDED + 32


@dataclass(frozen=True)
class KeyPressEvent:
    """A key press as the emulator understands it: code, text and modifiers."""

    code: int
    text: str = ""
    mod: KeyMod = KeyMod.NONE


def _build_table() -> dict[KeyType, tuple[int, KeyMod]]:
    table: dict[KeyType, tuple[int, KeyMod]] = {
        KeyType.ENTER: (KeyCode.ENTER, KeyMod.NONE),
        KeyType.TAB: (KeyCode.TAB, KeyMod.NONE),
        KeyType.SHIFT_TAB: (KeyCode.TAB, KeyMod.SHIFT),
        KeyType.BACKSPACE: (KeyCode.BACKSPACE, KeyMod.NONE),
        KeyType.DELETE: (KeyCode.DELETE, KeyMod.NONE),
        KeyType.ESC: (KeyCode.ESCAPE, KeyMod.NONE),
        KeyType.INSERT: (KeyCode.INSERT, KeyMod.NONE),
        KeyType.PGUP: (KeyCode.PGUP, KeyMod.NONE),
        KeyType.PGDOWN: (KeyCode.PGDOWN, KeyMod.NONE),
        KeyType.CTRL_PGUP: (KeyCode.PGUP, KeyMod.CTRL),
        KeyType.CTRL_PGDOWN: (KeyCode.PGDOWN, KeyMod.CTRL),
    }

    for name in ("UP", "DOWN", "LEFT", "RIGHT", "HOME", "END"):
        code = KeyCode[name]
        table[KeyType[name]] = (code, KeyMod.NONE)
        table[KeyType[f"SHIFT_{name}"]] = (code, KeyMod.SHIFT)
        table[KeyType[f"CTRL_{name}"]] = (code, KeyMod.CTRL)
        table[KeyType[f"CTRL_SHIFT_{name}"]] = (code, KeyMod.CTRL | KeyMod.SHIFT)

    for n in range(1, 13):
        table[KeyType[f"F{n}"]] = (KeyCode[f"F{n}"], KeyMod.NONE)

    # Ctrl+I, Ctrl+M, Ctrl+[ and Ctrl+? collapse onto Tab, Enter, Esc and
    # Backspace and are sent as those named keys without a forced Ctrl.
    for letter in "abcdefghjklnopqrstuvwxyz":
        table[KeyType[f"CTRL_{letter.upper()}"]] = (ord(letter), KeyMod.CTRL)

    specials = {
        KeyType.CTRL_AT: "@",
        KeyType.CTRL_BACKSLASH: "\\",
        KeyType.CTRL_CLOSE_BRACKET: "]",
        KeyType.CTRL_CARET: "^",
        KeyType.CTRL_UNDERSCORE: "_",
    }
    for key_type, char in specials.items():
        table[key_type] = (ord(char), KeyMod.CTRL)
    return table


_TABLE = _build_table()


def msg_to_key(msg: KeyMsg) -> Optional[KeyPressEvent]:
    """Translate a UI key event; return None when it has no equivalent."""
    mod = KeyMod.ALT if msg.alt else KeyMod.NONE

    if msg.type is KeyType.RUNES:
        if not msg.runes:
            return None
        return KeyPressEvent(code=ord(msg.runes[0]), text=msg.runes, mod=mod)
    if msg.type is KeyType.SPACE:
        return KeyPressEvent(code=KeyCode.SPACE, text=" ", mod=mod)

    entry = _TABLE.get(msg.type)
    if entry is None:
        return None
    code, extra = entry
    return KeyPressEvent(code=code, mod=mod | extra)