import curses
from enum import Enum


KEY_UP = curses.KEY_UP
KEY_DOWN = curses.KEY_DOWN
KEY_LEFT = curses.KEY_LEFT
KEY_RIGHT = curses.KEY_RIGHT
KEY_PAGE_UP = curses.KEY_PPAGE
KEY_PAGE_DOWN = curses.KEY_NPAGE
KEY_HOME = curses.KEY_HOME
KEY_END = curses.KEY_END
KEY_FORWARD_DEL = curses.KEY_DC

# terminals disagree on what backspace sends
DELETE_KEYS = frozenset({curses.KEY_DC, curses.KEY_BACKSPACE, 127, 8})

DIRECTION_KEYS = frozenset({KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT})

NAVIGATION_KEYS = DIRECTION_KEYS | {KEY_PAGE_UP, KEY_PAGE_DOWN, KEY_HOME, KEY_END}

VI_KEYS = {
    ord("h"): KEY_LEFT,
    ord("j"): KEY_DOWN,
    ord("k"): KEY_UP,
    ord("l"): KEY_RIGHT,
}

_KEY_NAMES = {
    KEY_UP: "UP",
    KEY_DOWN: "DOWN",
    KEY_LEFT: "LEFT",
    KEY_RIGHT: "RIGHT",
    KEY_PAGE_UP: "PAGE_UP",
    KEY_PAGE_DOWN: "PAGE_DOWN",
    KEY_HOME: "HOME",
    KEY_END: "END",
    KEY_FORWARD_DEL: "FORWARD_DEL",
    curses.KEY_BACKSPACE: "BACKSPACE",
    127: "BACKSPACE",
    8: "BACKSPACE",
}


class SoundCue(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


_SOUND_CUES = {
    KEY_LEFT: SoundCue.LEFT,
    KEY_RIGHT: SoundCue.RIGHT,
    KEY_DOWN: SoundCue.DOWN,
    KEY_PAGE_DOWN: SoundCue.DOWN,
    KEY_END: SoundCue.DOWN,
    KEY_UP: SoundCue.UP,
    KEY_PAGE_UP: SoundCue.UP,
    KEY_HOME: SoundCue.UP,
}


def should_consume(key: int) -> bool:
    return key in NAVIGATION_KEYS or key in DELETE_KEYS


def is_delete_key(key: int) -> bool:
    return key in DELETE_KEYS


def sound_cue_for(key: int) -> SoundCue | None:
    return _SOUND_CUES.get(key)


def key_name(key: int) -> str:
    name = _KEY_NAMES.get(key)
    if name:
        return name
    if 32 <= key < 127:
        return repr(chr(key))
    return str(key)


def translate_vi_key(key: int) -> int:
    return VI_KEYS.get(key, key)
