import curses
from unittest.mock import MagicMock, call, patch

import pytest

from arcadebox.core import ArcadeError, Entity, KeyBind
from arcadebox.curses_display import (
    COLOR_ORANGE,
    CursesDisplay,
    key_from_code,
    parse_color_entity,
)


@pytest.fixture
def fake_curses():
    with patch("arcadebox.curses_display.curses") as mocked:
        mocked.initscr.return_value = MagicMock()
        yield mocked


@pytest.fixture
def screen(fake_curses):
    display = CursesDisplay()
    display.init()
    return display, fake_curses.initscr.return_value, fake_curses


def test_parse_color_entity_known_colors():
    assert parse_color_entity("COLOR:RED:^") == (1, "^")
    assert parse_color_entity("COLOR:BLUE:#") == (4, "#")
    assert parse_color_entity("COLOR:GREEN:o") == (2, "o")


def test_parse_color_entity_unknown_color_uses_white_pair():
    assert parse_color_entity("COLOR:ORANGE:x") == (7, "x")


def test_parse_color_entity_plain_text():
    assert parse_color_entity("Score: 10") == (None, "Score: 10")


def test_parse_color_entity_without_second_colon_keeps_whole_name():
    assert parse_color_entity("COLOR:RED") == (1, "COLOR:RED")


def test_parse_color_entity_keeps_colons_in_text():
    assert parse_color_entity("COLOR:YELLOW:a:b") == (3, "a:b")


@pytest.mark.parametrize(
    "code, key",
    [
        (curses.KEY_UP, KeyBind.UP_KEY),
        (curses.KEY_DOWN, KeyBind.DOWN_KEY),
        (curses.KEY_LEFT, KeyBind.LEFT_KEY),
        (curses.KEY_RIGHT, KeyBind.RIGHT_KEY),
        (ord(" "), KeyBind.SPACE),
        (27, KeyBind.ESC),
        (10, KeyBind.ENTER),
        (ord("a"), KeyBind.A_KEY),
        (ord("z"), KeyBind.Z_KEY),
        (ord("q"), KeyBind.Q_KEY),
        (ord("s"), KeyBind.S_KEY),
        (ord("A"), KeyBind.NONE),
        (-1, KeyBind.NONE),
    ],
)
def test_key_from_code(code, key):
    assert key_from_code(code) is key


def test_init_configures_window_and_pairs(screen):
    _, window, fake = screen
    window.keypad.assert_called_once_with(True)
    window.nodelay.assert_called_once_with(True)
    fake.noecho.assert_called_once_with()
    assert call(1, curses.COLOR_RED, curses.COLOR_BLACK) in fake.init_pair.call_args_list
    assert call(16, curses.COLOR_BLACK, COLOR_ORANGE) in fake.init_pair.call_args_list
    fake.init_color.assert_called_once_with(COLOR_ORANGE, 1000, 500, 0)


def test_init_skips_orange_when_colors_are_fixed(fake_curses):
    fake_curses.can_change_color.return_value = False
    display = CursesDisplay()
    display.init()
    assert fake_curses.init_color.call_count == 0
    fake_curses.initscr.return_value.getch.return_value = ord("a")
    assert display.get_key() is KeyBind.A_KEY


def test_init_failure_raises(fake_curses):
    fake_curses.initscr.side_effect = curses.error("no terminal")
    with pytest.raises(ArcadeError):
        CursesDisplay().init()


def test_display_draws_visible_entities(screen):
    display, window, fake = screen
    display.display(
        [
            Entity("CLEAR_SCREEN", (0, 0)),
            Entity("COLOR:GREEN:o", (3, 4)),
            Entity("Score: 0", (5, 0)),
            Entity("hidden", (-1, 2)),
        ]
    )
    assert window.clear.call_count == 1
    assert window.addstr.call_args_list == [call(3, 4, "o"), call(5, 0, "Score: 0")]
    assert fake.color_pair.call_args_list == [call(2)]
    window.attron.assert_called_once_with(fake.color_pair.return_value)
    window.attroff.assert_called_once_with(fake.color_pair.return_value)
    assert window.refresh.call_count == 1


def test_display_without_clear_marker_keeps_screen(screen):
    display, window, _ = screen
    display.display([Entity("MENU", (1, 1))])
    assert window.clear.call_count == 0


def test_display_ignores_write_errors(screen):
    display, window, _ = screen
    window.addstr.side_effect = curses.error("off screen")
    display.display([Entity("x", (100, 100))])
    assert window.refresh.call_count == 1


def test_get_key_reads_window(screen):
    display, window, _ = screen
    window.getch.return_value = ord("z")
    assert display.get_key() is KeyBind.Z_KEY


def test_use_before_init_raises():
    display = CursesDisplay()
    with pytest.raises(ArcadeError):
        display.display([Entity("x", (0, 0))])
    with pytest.raises(ArcadeError):
        display.get_key()


def test_nuke_ends_once(screen):
    display, _, fake = screen
    display.nuke()
    display.nuke()
    assert fake.endwin.call_count == 1
    with pytest.raises(ArcadeError):
        display.clear()