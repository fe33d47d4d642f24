"""The classic snake game on an open field."""

from __future__ import annotations

import os
import random
import time
from collections.abc import Callable
from enum import Enum

from .core import Entity, Game, KeyBind, TGraphics
from .highscore import find_highscore_path, load_highscore, save_highscore

WIDTH = 70
HEIGHT = 50
CELL_SIZE = 10
SPEED_MS = 150
HIGHSCORE_PATHS = (
    "snake_highscore.txt",
    "lib/Games/snake/snake_highscore.txt",
    "assets/snake_highscore.txt",
)


class _Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


_OPPOSITE = {
    _Direction.UP: _Direction.DOWN,
    _Direction.DOWN: _Direction.UP,
    _Direction.LEFT: _Direction.RIGHT,
    _Direction.RIGHT: _Direction.LEFT,
}

_KEY_DIRECTIONS = {
    KeyBind.UP_KEY: _Direction.UP,
    KeyBind.DOWN_KEY: _Direction.DOWN,
    KeyBind.LEFT_KEY: _Direction.LEFT,
    KeyBind.RIGHT_KEY: _Direction.RIGHT,
}

_HEAD_SPRITES = {
    _Direction.UP: "assets/sprites/snake_head_up.png",
    _Direction.DOWN: "assets/sprites/snake_head_down.png",
    _Direction.LEFT: "assets/sprites/snake_head_left.png",
    _Direction.RIGHT: "assets/sprites/snake_head_right.png",
}

_HEAD_GLYPHS = {
    _Direction.UP: "COLOR:RED:^",
    _Direction.DOWN: "COLOR:RED:v",
    _Direction.LEFT: "COLOR:RED:<",
    _Direction.RIGHT: "COLOR:RED:>",
}


class Snake(Game):
    """Snake: eat food to grow, avoid the edges and your own tail."""

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
        highscore_path: str | os.PathLike | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else time.monotonic
        self._highscore_path = highscore_path
        self._direction = _Direction.RIGHT
        self._game_over = False
        self._score = 0
        self._speed = SPEED_MS
        self._last_update = self._clock()
        self._high_score = load_highscore(self._path())
        self._body = self._start_body()
        self._food = (0, 0)
        self._spawn_food()

    @property
    def body(self) -> list[tuple[int, int]]:
        """Segments from head to tail as (x, y)."""
        return list(self._body)

    @property
    def food(self) -> tuple[int, int]:
        return self._food

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def high_score(self) -> int:
        return self._high_score

    def _path(self):
        if self._highscore_path is not None:
            return self._highscore_path
        return find_highscore_path(HIGHSCORE_PATHS)

    @staticmethod
    def _start_body() -> list[tuple[int, int]]:
        x, y = WIDTH // 2, HEIGHT // 2
        return [(x, y), (x - 1, y), (x - 2, y)]

    def _record_highscore(self) -> None:
        if self._score > self._high_score:
            self._high_score = self._score
            save_highscore(self._path(), self._high_score)

    def set_key(self, key: KeyBind) -> None:
        if key is KeyBind.SPACE:
            self._reset()
            return
        direction = _KEY_DIRECTIONS.get(key)
        if direction is not None and self._direction is not _OPPOSITE[direction]:
            self._direction = direction

    def update(self) -> None:
        """Move the snake once its step interval has passed."""
        if self._game_over:
            self._record_highscore()
            return
        now = self._clock()
        elapsed_ms = int((now - self._last_update) * 1000)
        if elapsed_ms > self._speed:
            self._move()
            self._check_collisions()
            self._last_update = now

    def _move(self) -> None:
        dx, dy = self._direction.value
        hx, hy = self._body[0]
        head = (hx + dx, hy + dy)
        self._body.insert(0, head)
        if head == self._food:
            self._score += 10
            self._spawn_food()
        else:
            self._body.pop()

    def _check_collisions(self) -> None:
        head = self._body[0]
        x, y = head
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT) or head in self._body[1:]:
            self._game_over = True

    def _spawn_food(self) -> None:
        while True:
            food = (self._rng.randrange(WIDTH), self._rng.randrange(HEIGHT))
            if food not in self._body:
                self._food = food
                return

    def _reset(self) -> None:
        if self._game_over:
            self._record_highscore()
        self._body = self._start_body()
        self._direction = _Direction.RIGHT
        self._game_over = False
        self._score = 0
        self._spawn_food()

    def get_display(self, lib: TGraphics) -> list[Entity]:
        self.update()
        high_score = f"High Score: {self._high_score}"
        score = f"Score: {self._score}"

        if lib is not TGraphics.NCURSES:
            entities = [
                Entity("assets/sprites/menu.jpg", (160, 100)),
                Entity("assets/sprites/border.png", (50, 50), (WIDTH * CELL_SIZE, HEIGHT * CELL_SIZE)),
                Entity(score, (20, 20)),
                Entity(high_score, (20, 40)),
            ]
            if self._game_over:
                entities.append(Entity("GAME OVER - Continue? Press SPACE", (180, 280)))
            cell = (CELL_SIZE, CELL_SIZE)
            fx, fy = self._food
            entities.append(
                Entity("assets/sprites/pomme.png", (50 + fx * CELL_SIZE, 50 + fy * CELL_SIZE), cell)
            )
            for i, (x, y) in enumerate(self._body):
                sprite = _HEAD_SPRITES[self._direction] if i == 0 else "assets/sprites/snake_body.png"
                entities.append(Entity(sprite, (50 + x * CELL_SIZE, 50 + y * CELL_SIZE), cell))
            return entities

        entities = [Entity("CLEAR_SCREEN", (0, 0))]
        for x in range(WIDTH + 2):
            entities.append(Entity("COLOR:BLUE:-", (0, x)))
            entities.append(Entity("COLOR:BLUE:-", (HEIGHT + 1, x)))
        for y in range(HEIGHT + 2):
            entities.append(Entity("COLOR:BLUE:|", (y, 0)))
            entities.append(Entity("COLOR:BLUE:|", (y, WIDTH + 1)))
        entities.append(Entity(score, (HEIGHT + 3, 1)))
        entities.append(Entity(high_score, (HEIGHT + 3, 40)))
        if self._game_over:
            entities.append(Entity("GAME OVER - Press SPACE to restart", (HEIGHT + 4, 1)))
        fx, fy = self._food
        entities.append(Entity("COLOR:YELLOW:@", (fy + 1, fx + 1)))
        for i, (x, y) in enumerate(self._body):
            glyph = _HEAD_GLYPHS[self._direction] if i == 0 else "COLOR:GREEN:o"
            entities.append(Entity(glyph, (y + 1, x + 1)))
        return entities

    def get_sound(self, lib: TGraphics) -> str:
        return ""

    def reset_game(self) -> None:
        self._reset()

    def get_act_game(self) -> str:
        return "GAME OVER" if self._game_over else "SNAKE"

    def get_score(self) -> int:
        return self._score