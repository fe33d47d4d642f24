"""The arcade's main loop and command entry point."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable

from .core import ArcadeError, Game, Graphics, KeyBind, TGraphics
from .game_manager import GameManager
from .library_manager import LibraryManager
from .menu import Menu

FRAME_TIME = 0.016
GAME_OVER_PAUSE = 3
LIVES = 3
GAME_DIR = "lib/"


def switch_library(
    key: KeyBind,
    libraries: LibraryManager,
    graphics: Graphics,
    games: GameManager,
    game: Game,
) -> tuple[Graphics, Game] | None:
    """Apply a control key; return the back end and game to use, or None to quit."""
    if key is KeyBind.ESC:
        graphics.nuke()
        return None
    if key is KeyBind.A_KEY:
        graphics.nuke()
        graphics = libraries.previous_library()
        graphics.init()
    elif key is KeyBind.Z_KEY:
        graphics.nuke()
        graphics = libraries.next_library()
        graphics.init()
    elif key in (KeyBind.Q_KEY, KeyBind.S_KEY):
        if key is KeyBind.Q_KEY:
            games.previous_game()
        else:
            games.next_game()
        if libraries.current_type() is TGraphics.NCURSES:
            graphics.clear()
        game = games.current_game
    return graphics, game


def run(
    libraries: LibraryManager,
    graphics: Graphics,
    games: GameManager,
    game: Game,
    menu: Menu,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Drive frames until the player quits."""
    last_frame = time.monotonic()
    lives = LIVES

    while True:
        entities = game.get_display(libraries.current_type())
        graphics.display(entities)
        if libraries.current_type() is not TGraphics.NCURSES:
            graphics.clear()
        key = graphics.get_key()
        input_processed = False
        if key is not KeyBind.NONE:
            game.set_key(key)
            switched = switch_library(key, libraries, graphics, games, game)
            if switched is None:
                return
            graphics, game = switched
            input_processed = True

        if isinstance(game, Menu) and game.game_selected:
            games.set_current_game(game.get_act_game())
            chosen = games.current_game
            game.reset_game()
            game = chosen
            lives = LIVES

        if game.get_act_game() == "GAME OVER":
            sleep(GAME_OVER_PAUSE)
            lives -= 1
            if lives > 0:
                game = games.current_game
                game.reset_game()
                graphics.clear()
                continue
            game = menu
            menu.reset_game_selected()
            lives = LIVES
            graphics.clear()

        sound = game.get_sound(libraries.current_type())
        if sound:
            graphics.play_sound(sound)
        elapsed = time.monotonic() - last_frame
        if not input_processed and elapsed < FRAME_TIME:
            sleep(FRAME_TIME - elapsed)
        last_frame = time.monotonic()


def main(argv: list[str] | None = None) -> int:
    """Start the arcade with the display back end named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: arcade <library_path>", file=sys.stderr)
        return 84
    try:
        libraries = LibraryManager()
        libraries.load_library(args[0])
        graphics = libraries.current_library
        graphics.init()
        games = GameManager()
        games.load_games(GAME_DIR)
        menu = Menu(games.display_names())
        run(libraries, graphics, games, menu, menu)
    except ArcadeError as exc:
        print(f"Arcade error: {exc}", file=sys.stderr)
        return 84
    except Exception as exc:
        print(f"Standard exception: {exc}", file=sys.stderr)
        return 84
    return 0


if __name__ == "__main__":
    sys.exit(main())