"""The game-selection menu."""

from __future__ import annotations

from collections.abc import Iterable

from .core import Entity, Game, KeyBind, TGraphics

_HELP = "Use UP/DOWN arrows to select, ENTER to confirm"
_BOX_WIDTH = 20


class Menu(Game):
    """Lists the available games and lets the player pick one."""

    def __init__(self, game_names: Iterable[str] | None = None) -> None:
        self._names = list(game_names) if game_names is not None else ["MENU"]
        self._selected = 0
        self._game_selected = False

    @property
    def game_selected(self) -> bool:
        """Whether ENTER has confirmed a choice."""
        return self._game_selected

    @property
    def selected_index(self) -> int:
        """Index of the highlighted entry."""
        return self._selected

    def reset_game_selected(self) -> None:
        """Forget a confirmed choice."""
        self._game_selected = False

    def set_key(self, key: KeyBind) -> None:
        if key is KeyBind.UP_KEY:
            if self._selected > 0:
                self._selected -= 1
        elif key is KeyBind.DOWN_KEY:
            if self._selected < len(self._names) - 1:
                self._selected += 1
        elif key is KeyBind.ENTER:
            self._game_selected = True

    def _prefix(self, index: int) -> str:
        return ">> " if index == self._selected else "   "

    def get_display(self, lib: TGraphics) -> list[Entity]:
        if lib is not TGraphics.NCURSES:
            entities = [
                Entity("assets/sprites/menu.jpg", (160, 100), (474, 360)),
                Entity("assets/sprites/arcade.png", (150, 0), (500, 100)),
                Entity("MENU", (360, 150)),
            ]
            entities.extend(
                Entity(self._prefix(i) + name, (220, 200 + i * 40))
                for i, name in enumerate(self._names)
            )
            entities.append(Entity(_HELP, (100, 500)))
            return entities

        top, left = 2, 1
        border = "+" + "-" * _BOX_WIDTH + "+"
        blank = "|" + " " * _BOX_WIDTH + "|"
        count = len(self._names)
        entities = [
            Entity(border, (top, left)),
            Entity(blank, (top + 1, left)),
            Entity("|        MENU" + " " * 8 + "|", (top + 2, left)),
            Entity(blank, (top + 3, left)),
        ]
        entities.extend(
            Entity("|" + (self._prefix(i) + name).ljust(_BOX_WIDTH) + "|", (top + 4 + i, left))
            for i, name in enumerate(self._names)
        )
        entities.append(Entity(blank, (top + 4 + count, left)))
        entities.append(Entity(border, (top + 5 + count, left)))
        entities.append(Entity(_HELP, (top + 7 + count, left)))
        return entities

    def get_sound(self, lib: TGraphics) -> str:
        if lib is not TGraphics.NCURSES:
            return "assets/sounds/main.wav"
        return ""

    def reset_game(self) -> None:
        """The menu keeps its state across resets."""

    def get_act_game(self) -> str:
        if self._selected < len(self._names):
            return self._names[self._selected]
        return "MENU"

    def get_score(self) -> int:
        return 0