"""Terminal display back end drawn with curses."""

from __future__ import annotations

import curses
from contextlib import suppress

from .core import ArcadeError, Entity, Graphics, KeyBind

COLOR_BRIGHT_MAGENTA = 9
COLOR_ORANGE = 16
DEFAULT_PAIR = 7
CLEAR_SCREEN = "CLEAR_SCREEN"

_CursesError = curses.error

_COLOR_NAMES = {
    "RED": 1,
    "GREEN": 2,
    "YELLOW": 3,
    "BLUE": 4,
    "MAGENTA": 5,
    "CYAN": 6,
}

_PAIRS = (
    (1, curses.COLOR_RED, curses.COLOR_BLACK),
    (2, curses.COLOR_GREEN, curses.COLOR_BLACK),
    (3, curses.COLOR_YELLOW, curses.COLOR_BLACK),
    (4, curses.COLOR_BLUE, curses.COLOR_BLACK),
    (5, curses.COLOR_MAGENTA, curses.COLOR_BLACK),
    (6, curses.COLOR_CYAN, curses.COLOR_BLACK),
    (7, curses.COLOR_WHITE, curses.COLOR_BLACK),
    (9, COLOR_BRIGHT_MAGENTA, curses.COLOR_BLACK),
    (10, curses.COLOR_BLACK, curses.COLOR_YELLOW),
    (8, curses.COLOR_YELLOW, curses.COLOR_WHITE),
    (11, curses.COLOR_BLACK, curses.COLOR_BLUE),
    (12, curses.COLOR_BLACK, curses.COLOR_RED),
    (13, curses.COLOR_WHITE, curses.COLOR_GREEN),
    (14, curses.COLOR_BLACK, curses.COLOR_MAGENTA),
    (15, curses.COLOR_BLACK, curses.COLOR_CYAN),
    (16, curses.COLOR_BLACK, COLOR_ORANGE),
)

_KEYS = {
    curses.KEY_UP: KeyBind.UP_KEY,
    curses.KEY_DOWN: KeyBind.DOWN_KEY,
    curses.KEY_LEFT: KeyBind.LEFT_KEY,
    curses.KEY_RIGHT: KeyBind.RIGHT_KEY,
    ord(" "): KeyBind.SPACE,
    27: KeyBind.ESC,
    10: KeyBind.ENTER,
    ord("a"): KeyBind.A_KEY,
    ord("z"): KeyBind.Z_KEY,
    ord("q"): KeyBind.Q_KEY,
    ord("s"): KeyBind.S_KEY,
}


def parse_color_entity(name: str) -> tuple[int | None, str]:
    """Split a "COLOR:<name>:<text>" entity into its colour pair and text.

    Plain entities come back with no colour pair. Unknown colours fall back
    to the white pair; without a second colon the whole name is the text.
    """
    if not name.startswith("COLOR:"):
        return None, name
    color, sep, text = name[len("COLOR:"):].partition(":")
    if not sep:
        text = name
    return _COLOR_NAMES.get(color, DEFAULT_PAIR), text


def key_from_code(code: int) -> KeyBind:
    """Map a curses key code to a KeyBind."""
    return _KEYS.get(code, KeyBind.NONE)


class CursesDisplay(Graphics):
    """Draws entities as text on the terminal."""

    def __init__(self) -> None:
        self._window = None

    def _require_window(self):
        if self._window is None:
            raise ArcadeError("Terminal display is not initialised")
        return self._window

    def init(self) -> None:
        if self._window is None:
            try:
                self._window = curses.initscr()
            except _CursesError as exc:
                raise ArcadeError(f"Cannot open terminal: {exc}") from exc
        window = self._window
        curses.noecho()
        curses.cbreak()
        with suppress(_CursesError):
            curses.curs_set(0)
        window.keypad(True)
        window.nodelay(True)
        with suppress(_CursesError):
            curses.start_color()
        with suppress(_CursesError):
            if curses.can_change_color():
                curses.init_color(COLOR_ORANGE, 1000, 500, 0)
        for pair, foreground, background in _PAIRS:
            with suppress(_CursesError):
                curses.init_pair(pair, foreground, background)

    def get_key(self) -> KeyBind:
        return key_from_code(self._require_window().getch())

    @staticmethod
    def _write(window, row: int, col: int, text: str) -> None:
        with suppress(_CursesError):
            window.addstr(row, col, text)

    def display(self, entities: list[Entity]) -> None:
        window = self._require_window()
        if any(entity.text == CLEAR_SCREEN for entity in entities):
            window.clear()
        for entity in entities:
            row, col = entity.position
            if entity.text == CLEAR_SCREEN or row < 0 or col < 0:
                continue
            pair, text = parse_color_entity(entity.text)
            if pair is None:
                self._write(window, row, col, text)
                continue
            attr = curses.color_pair(pair)
            window.attron(attr)
            self._write(window, row, col, text)
            window.attroff(attr)
        window.refresh()

    def play_sound(self, sound: str) -> None:
        """The terminal has no sound."""

    def clear(self) -> None:
        self._require_window().clear()

    def nuke(self) -> None:
        if self._window is not None:
            curses.endwin()
            self._window = None