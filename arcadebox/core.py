"""Shared types for games and display back ends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto


class ArcadeError(Exception):
    """Raised when the arcade cannot carry on."""


class KeyBind(Enum):
    """Keys that display back ends report to the arcade."""

    ESC = auto()
    A_KEY = auto()
    Z_KEY = auto()
    Q_KEY = auto()
    S_KEY = auto()
    UP_KEY = auto()
    DOWN_KEY = auto()
    LEFT_KEY = auto()
    RIGHT_KEY = auto()
    SPACE = auto()
    ENTER = auto()
    NONE = auto()


class TGraphics(Enum):
    """Known display back ends."""

    NCURSES = auto()
    SDL = auto()
    NDK = auto()
    AA = auto()
    CACA = auto()
    ALLEGRO = auto()
    X = auto()
    GTK = auto()
    SFML = auto()
    IRRLICHT = auto()
    OPENGL = auto()
    VULKAN = auto()
    QT = auto()


class TGames(Enum):
    """Known games."""

    MENU = auto()
    SNAKE = auto()
    MINESWEEPER = auto()
    NIBBLER = auto()
    PACMAN = auto()
    QIX = auto()
    CENTIPEDE = auto()
    SOLARFOX = auto()
    SOKOBAN = auto()
    SPACE = auto()
    TETRIS = auto()
    THE_SHOW = auto()


@dataclass(frozen=True)
class Entity:
    """Something to draw: a sprite path or text, where, and how large.

    A size of (0, 0) means the natural size. Terminal back ends read the
    position as (row, column); windowed ones as (x, y).
    """

    text: str
    position: tuple[int, int]
    size: tuple[int, int] = (0, 0)


class Game(ABC):
    """A game the arcade can run."""

    @abstractmethod
    def set_key(self, key: KeyBind) -> None:
        """Feed one key press to the game."""

    @abstractmethod
    def get_display(self, lib: TGraphics) -> list[Entity]:
        """Advance the game if needed and return what to draw."""

    @abstractmethod
    def get_sound(self, lib: TGraphics) -> str:
        """Return the sound to play, or an empty string."""

    @abstractmethod
    def reset_game(self) -> None:
        """Start the game over."""

    @abstractmethod
    def get_act_game(self) -> str:
        """Return the game's current state label."""

    @abstractmethod
    def get_score(self) -> int:
        """Return the current score."""


class Graphics(ABC):
    """A display back end."""

    @abstractmethod
    def init(self) -> None:
        """Open the display."""

    @abstractmethod
    def get_key(self) -> KeyBind:
        """Return the next pressed key, or KeyBind.NONE."""

    @abstractmethod
    def display(self, entities: list[Entity]) -> None:
        """Draw the entities and show the frame."""

    @abstractmethod
    def play_sound(self, sound: str) -> None:
        """Play the given sound file."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the display."""

    @abstractmethod
    def nuke(self) -> None:
        """Close the display and release its resources."""