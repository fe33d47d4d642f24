from collections import deque

import pytest

from arcadebox.app import GAME_OVER_PAUSE, LIVES, main, run, switch_library
from arcadebox.core import Entity, Game, Graphics, KeyBind, TGraphics
from arcadebox.game_manager import GameManager
from arcadebox.library_manager import LibraryManager
from arcadebox.menu import Menu


class Script:
    def __init__(self, keys=()):
        self.keys = deque(keys)
        self.sounds = []


class FakeGraphics(Graphics):
    def __init__(self, name, script):
        self.name = name
        self.script = script
        self.inits = 0
        self.clears = 0
        self.nuked = False
        self.frames = []

    def init(self) -> None:
        self.inits += 1

    def get_key(self) -> KeyBind:
        return self.script.keys.popleft() if self.script.keys else KeyBind.ESC

    def display(self, entities: list[Entity]) -> None:
        self.frames.append(entities)

    def play_sound(self, sound: str) -> None:
        self.script.sounds.append(sound)

    def clear(self) -> None:
        self.clears += 1

    def nuke(self) -> None:
        self.nuked = True


class FakeGame(Game):
    def __init__(self, label, over=False):
        self.label = label
        self.over = over
        self.resets = 0
        self.keys = []

    def set_key(self, key: KeyBind) -> None:
        self.keys.append(key)

    def get_display(self, lib: TGraphics) -> list[Entity]:
        return [Entity(self.label, (0, 0))]

    def get_sound(self, lib: TGraphics) -> str:
        return ""

    def reset_game(self) -> None:
        self.resets += 1

    def get_act_game(self) -> str:
        return "GAME OVER" if self.over else self.label

    def get_score(self) -> int:
        return 0


def make_libraries(script, first):
    names = ("arcade_ncurses.so", "arcade_sdl2.so")
    libraries = LibraryManager(
        {name: (lambda name=name: FakeGraphics(name, script)) for name in names}
    )
    libraries.load_library(f"lib/{first}")
    return libraries


def make_games(tmp_path, over=False):
    (tmp_path / "arcade_snake.so").write_bytes(b"")
    (tmp_path / "arcade_nibbler.so").write_bytes(b"")
    games = GameManager(
        {
            "arcade_snake.so": lambda: FakeGame("SNAKE", over),
            "arcade_nibbler.so": lambda: FakeGame("NIBBLER", over),
        }
    )
    games.load_games(tmp_path)
    return games


def test_escape_quits(tmp_path):
    script = Script()
    libraries = make_libraries(script, "arcade_sdl2.so")
    graphics = libraries.current_library
    games = make_games(tmp_path)
    game = games.current_game
    assert switch_library(KeyBind.ESC, libraries, graphics, games, game) is None
    assert graphics.nuked


def test_next_library_key(tmp_path):
    script = Script()
    libraries = make_libraries(script, "arcade_sdl2.so")
    old = libraries.current_library
    games = make_games(tmp_path)
    graphics, game = switch_library(KeyBind.Z_KEY, libraries, old, games, games.current_game)
    assert old.nuked
    assert graphics.name == "arcade_ncurses.so"
    assert graphics.inits == 1
    assert libraries.current_type() is TGraphics.NCURSES
    assert game is games.current_game


def test_previous_library_key(tmp_path):
    script = Script()
    libraries = make_libraries(script, "arcade_sdl2.so")
    old = libraries.current_library
    games = make_games(tmp_path)
    graphics, _ = switch_library(KeyBind.A_KEY, libraries, old, games, games.current_game)
    assert old.nuked
    assert graphics.name == "arcade_ncurses.so"


def test_previous_game_key_clears_terminal(tmp_path):
    script = Script()
    libraries = make_libraries(script, "arcade_ncurses.so")
    graphics = libraries.current_library
    games = make_games(tmp_path)
    result_graphics, game = switch_library(
        KeyBind.Q_KEY, libraries, graphics, games, games.current_game
    )
    assert result_graphics is graphics
    assert game.label == "NIBBLER"
    assert game is games.current_game
    assert graphics.clears == 1


def test_next_game_key_in_window_does_not_clear(tmp_path):
    script = Script()
    libraries = make_libraries(script, "arcade_sdl2.so")
    graphics = libraries.current_library
    games = make_games(tmp_path)
    _, game = switch_library(KeyBind.S_KEY, libraries, graphics, games, games.current_game)
    assert game.label == "NIBBLER"
    assert graphics.clears == 0


def test_other_keys_change_nothing(tmp_path):
    script = Script()
    libraries = make_libraries(script, "arcade_sdl2.so")
    graphics = libraries.current_library
    games = make_games(tmp_path)
    game = games.current_game
    assert switch_library(KeyBind.UP_KEY, libraries, graphics, games, game) == (graphics, game)


def test_run_selects_game_from_menu(tmp_path):
    script = Script([KeyBind.DOWN_KEY, KeyBind.ENTER, KeyBind.NONE, KeyBind.ESC])
    libraries = make_libraries(script, "arcade_ncurses.so")
    graphics = libraries.current_library
    games = make_games(tmp_path)
    menu = Menu(games.display_names())
    run(libraries, graphics, games, menu, menu, sleep=lambda seconds: None)
    assert games.current_game.label == "NIBBLER"
    assert games.current_game.keys == [KeyBind.ESC]
    assert graphics.nuked
    assert graphics.frames[-1] == [Entity("NIBBLER", (0, 0))]


def test_run_game_over_returns_to_menu(tmp_path):
    script = Script([KeyBind.ENTER, KeyBind.NONE, KeyBind.NONE, KeyBind.ESC])
    libraries = make_libraries(script, "arcade_sdl2.so")
    graphics = libraries.current_library
    games = make_games(tmp_path, over=True)
    menu = Menu(games.display_names())
    sleeps = []
    run(libraries, graphics, games, menu, menu, sleep=sleeps.append)
    assert sleeps.count(GAME_OVER_PAUSE) == LIVES
    assert games.current_game.resets == LIVES - 1
    assert not menu.game_selected
    assert script.sounds == ["assets/sounds/main.wav"]
    assert graphics.nuked


def test_main_requires_one_argument(capsys):
    assert main([]) == 84
    assert "Usage" in capsys.readouterr().err


def test_main_reports_unknown_library(capsys):
    assert main(["./lib/arcade_nothing.so"]) == 84
    assert "Arcade error: Cannot open library" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["a", "b"], ["x", "y", "z"]])
def test_main_rejects_extra_arguments(argv, capsys):
    assert main(argv) == 84
    assert "Usage" in capsys.readouterr().err