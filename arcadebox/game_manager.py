"""Discovery and switching of the games the arcade can run."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path

from .core import ArcadeError, Game, TGames
from .menu import Menu
from .nibbler import Nibbler
from .snake import Snake

GameFactory = Callable[[], Game]

MENU_FILE = "arcade_menu.so"

GAME_FILES: dict[TGames, str] = {
    TGames.MENU: MENU_FILE,
    TGames.SNAKE: "arcade_snake.so",
    TGames.MINESWEEPER: "arcade_minesweeper.so",
    TGames.NIBBLER: "arcade_nibbler.so",
    TGames.PACMAN: "arcade_pacman.so",
    TGames.QIX: "arcade_qix.so",
    TGames.CENTIPEDE: "arcade_centipede.so",
    TGames.SOLARFOX: "arcade_solarfox.so",
    TGames.SOKOBAN: "arcade_sokoban.so",
    TGames.SPACE: "arcade_space.so",
    TGames.TETRIS: "arcade_tetris.so",
    TGames.THE_SHOW: "arcade_the_show.so",
}

DISPLAY_NAMES: dict[str, str] = {
    "arcade_menu.so": "Menu",
    "arcade_snake.so": "Snake",
    "arcade_minesweeper.so": "Minesweeper",
    "arcade_nibbler.so": "Nibbler",
    "arcade_pacman.so": "Pacman",
    "arcade_qix.so": "Qix",
    "arcade_centipede.so": "Centipede",
    "arcade_solarfox.so": "SolarFox",
    "arcade_sokoban.so": "Sokoban",
    "arcade_space.so": "Space",
    "arcade_tetris.so": "Tetris",
    "arcade_the_show.so": "The Show",
}

DEFAULT_FACTORIES: dict[str, GameFactory] = {
    MENU_FILE: Menu,
    "arcade_snake.so": Snake,
    "arcade_nibbler.so": Nibbler,
}


class GameManager:
    """Finds game files in a directory and keeps one game running at a time."""

    def __init__(self, factories: Mapping[str, GameFactory] | None = None) -> None:
        self._factories = dict(factories if factories is not None else DEFAULT_FACTORIES)
        self._paths: dict[str, str] = {}
        self._names: list[str] = []
        self._index = 0
        self._current: Game | None = None

    @property
    def current_game(self) -> Game | None:
        """The running game, if any."""
        return self._current

    def _find_games(self, game_dir: str | os.PathLike) -> list[str]:
        root = Path(game_dir)
        if not root.is_dir():
            raise ArcadeError(f"Cannot read game directory: {game_dir}")
        found = []
        for name in GAME_FILES.values():
            if name == MENU_FILE:
                continue
            match = next((path for path in sorted(root.rglob(name)) if path.is_file()), None)
            if match is not None:
                self._paths[name] = str(match)
                found.append(name)
        return found

    def _load(self, path: str) -> Game:
        self._current = None
        factory = self._factories.get(Path(path).name)
        if factory is None:
            raise ArcadeError(f"Cannot open game: {path}")
        return factory()

    def load_games(self, game_dir: str | os.PathLike) -> None:
        """Find the games under game_dir and start the first one."""
        names = self._find_games(game_dir)
        if not names:
            raise ArcadeError(f"No games found in directory: {game_dir}")
        self._names = names
        self._current = self._load(self._paths[names[0]])

    def next_game(self) -> Game | None:
        """Start the next game, wrapping around; None if none were found."""
        if not self._names:
            return None
        self._index = (self._index + 1) % len(self._names)
        self._current = self._load(self._paths[self._names[self._index]])
        return self._current

    def previous_game(self) -> Game | None:
        """Start the previous game, wrapping around; None if none were found."""
        if not self._names:
            return None
        self._index = (self._index - 1) % len(self._names)
        self._current = self._load(self._paths[self._names[self._index]])
        return self._current

    def set_current_game(self, game_name: str) -> None:
        """Start the game shown under the given display name."""
        actual = next(
            (file for file, shown in DISPLAY_NAMES.items() if shown == game_name), None
        )
        if actual is None:
            raise ArcadeError(f"Game display name not found: {game_name}")
        path = self._paths.get(actual)
        if path is None:
            raise ArcadeError(f"Game not found: {actual}")
        if actual not in self._names:
            raise ArcadeError(f"Game name not found among loaded games: {actual}")
        self._index = self._names.index(actual)
        self._current = self._load(path)

    def display_names(self) -> list[str]:
        """Display names of the found games, in discovery order."""
        return [DISPLAY_NAMES[name] for name in self._names if name in DISPLAY_NAMES]