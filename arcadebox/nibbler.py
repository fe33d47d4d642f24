"""Nibbler: a snake in a walled maze that must eat every piece of food in time."""

from __future__ import annotations

import logging
import os
import random
import time
from collections.abc import Callable, Iterable, Sequence
from enum import Enum

from .core import ArcadeError, Entity, Game, KeyBind, TGraphics
from .highscore import find_highscore_path, load_highscore, save_highscore

logger = logging.getLogger(__name__)

CELL_SIZE = 20
SPEED_MS = 200
MIN_SPEED_MS = 50
SPEED_STEP_MS = 5
FOOD_COUNT = 20
START_TIME = 30.0
RESET_TIME = 20.0
FOOD_BONUS_TIME = 1.0
WIN_PAUSE_SECONDS = 2
BODY_LENGTH = 6

HIGHSCORE_PATHS = (
    "nibbler_highscore.txt",
    "lib/Games/nibbler/nibbler_highscore.txt",
    "assets/nibbler_highscore.txt",
)
MAP_PATHS = (
    "map.txt",
    "maps/map.txt",
    "lib/Games/nibbler/map.txt",
    "maps/nibbler_map.txt",
)
ALTERNATE_MAP_PATHS = (
    "map2.txt",
    "maps/map2.txt",
    "lib/Games/nibbler/map2.txt",
    "maps/nibbler_map2.txt",
)

DEFAULT_MAP = (
    "##########",
    "#        #",
    "# ##  ## #",
    "#        #",
    "#        #",
    "# #    # #",
    "# ###### #",
    "#        #",
    "#        #",
    "##########",
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


def parse_map(lines: Iterable[str]) -> list[str]:
    """Turn map lines into grid rows; '#' marks a wall."""
    rows = [line.rstrip("\n") for line in lines]
    if not rows:
        raise ArcadeError("Map is empty")
    return rows


def load_map(paths: Iterable[str | os.PathLike]) -> list[str]:
    """Load the first map file that opens, or the built-in map."""
    for path in paths:
        try:
            with open(path) as handle:
                logger.info("Loading map from: %s", path)
                return parse_map(handle)
        except OSError:
            continue
    logger.info("No map file found, using default map")
    return list(DEFAULT_MAP)


class Nibbler(Game):
    """Eat every piece of food in the maze before the time runs out."""

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
        highscore_path: str | os.PathLike | None = None,
        map_paths: Sequence[str | os.PathLike] | None = None,
        alternate_map_paths: Sequence[str | os.PathLike] | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else time.monotonic
        self._highscore_path = highscore_path
        self._map_paths = tuple(map_paths) if map_paths is not None else MAP_PATHS
        self._alternate_map_paths = (
            tuple(alternate_map_paths) if alternate_map_paths is not None else ALTERNATE_MAP_PATHS
        )
        self._direction = _Direction.RIGHT
        self._pending = _Direction.RIGHT
        self._game_over = False
        self._game_won = False
        self._score = 0
        self._speed = SPEED_MS
        self._last_update = self._clock()
        self._use_alternate = False
        self._time_remaining = START_TIME
        self._last_time_update = self._clock()
        self._win_time: float | None = None
        self._load_map()
        self._high_score = load_highscore(self._path())
        self._body = self._start_body()
        self._foods: list[tuple[int, int]] = []
        self._spawn_food()

    @property
    def grid(self) -> list[str]:
        return list(self._grid)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def body(self) -> list[tuple[int, int]]:
        """Segments from head to tail as (x, y)."""
        return list(self._body)

    @property
    def foods(self) -> list[tuple[int, int]]:
        return list(self._foods)

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def game_won(self) -> bool:
        return self._game_won

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def time_remaining(self) -> float:
        return self._time_remaining

    def _path(self):
        if self._highscore_path is not None:
            return self._highscore_path
        return find_highscore_path(HIGHSCORE_PATHS)

    def _load_map(self) -> None:
        paths = self._alternate_map_paths if self._use_alternate else self._map_paths
        self._grid = load_map(paths)
        self._width = len(self._grid[0])
        self._height = len(self._grid)

    def is_wall(self, x: int, y: int) -> bool:
        """Whether (x, y) is a wall or lies outside the map."""
        if y < 0 or y >= len(self._grid) or x < 0 or x >= len(self._grid[y]):
            return True
        return self._grid[y][x] == "#"

    def _start_body(self) -> list[tuple[int, int]]:
        x, y = self._width // 2, self._height // 2
        if self.is_wall(x, y):
            region = [
                (cx, cy)
                for cy in range(2, self._height - 2)
                for cx in range(2, self._width - 2)
                if not self.is_wall(cx, cy)
            ]
            if not region:
                raise ArcadeError("Map has no room to place the nibbler")
            while self.is_wall(x, y):
                x = self._rng.randrange(self._width - 4) + 2
                y = self._rng.randrange(self._height - 4) + 2
        return [(x - i, y) for i in range(BODY_LENGTH)]

    def _record_highscore(self) -> None:
        if self._score > self._high_score:
            self._high_score = self._score
            save_highscore(self._path(), self._high_score)

    def set_key(self, key: KeyBind) -> None:
        if key is KeyBind.SPACE:
            self.reset_game()
            return
        direction = _KEY_DIRECTIONS.get(key)
        if direction is not None and self._direction is not _OPPOSITE[direction]:
            self._pending = direction

    def update(self) -> None:
        """Advance the timer and move the nibbler once its step interval has passed."""
        if self._game_over:
            self._record_highscore()
            return

        if self._game_won:
            self._record_highscore()
            now = self._clock()
            if self._win_time is None:
                self._win_time = now
            if int(now - self._win_time) > WIN_PAUSE_SECONDS:
                self._win_time = None
                self.reset_game()
            return

        now = self._clock()
        self._time_remaining -= int((now - self._last_time_update) * 1000) / 1000.0
        self._last_time_update = now
        if self._time_remaining <= 0:
            self._time_remaining = 0.0
            self._game_over = True
            return

        if self._pending is not self._direction:
            dx, dy = self._pending.value
            hx, hy = self._body[0]
            if not self.is_wall(hx + dx, hy + dy):
                self._direction = self._pending

        if int((now - self._last_update) * 1000) > self._speed:
            self._move()
            self._check_collisions()
            self._last_update = now

    def _move(self) -> None:
        dx, dy = self._direction.value
        hx, hy = self._body[0]
        head = (hx + dx, hy + dy)
        if self.is_wall(*head):
            return
        self._body.insert(0, head)
        self._eat(head)
        if not self._foods:
            self._game_won = True

    def _eat(self, head: tuple[int, int]) -> None:
        if head in self._foods:
            self._score += 10
            self._time_remaining += FOOD_BONUS_TIME
            if self._speed > MIN_SPEED_MS:
                self._speed -= SPEED_STEP_MS
            self._foods.remove(head)
        else:
            self._body.pop()

    def _check_collisions(self) -> None:
        if self._body[0] in self._body[1:]:
            self._game_over = True

    def _spawn_food(self) -> None:
        self._foods = []
        free = sum(
            1
            for y in range(1, self._height - 1)
            for x in range(1, self._width - 1)
            if not self.is_wall(x, y) and (x, y) not in self._body
        )
        if free < FOOD_COUNT:
            raise ArcadeError("Map has no room for all the food")
        while len(self._foods) < FOOD_COUNT:
            food = (
                self._rng.randrange(self._width - 2) + 1,
                self._rng.randrange(self._height - 2) + 1,
            )
            if self.is_wall(*food) or food in self._body or food in self._foods:
                continue
            self._foods.append(food)

    def reset_game(self) -> None:
        previous_score = 0
        if self._game_over or self._game_won:
            self._record_highscore()
        if self._game_won:
            previous_score = self._score
            self._use_alternate = not self._use_alternate
            self._load_map()
        self._body = self._start_body()
        self._direction = _Direction.RIGHT
        self._pending = _Direction.RIGHT
        self._game_over = False
        self._game_won = False
        self._speed = SPEED_MS
        self._time_remaining = RESET_TIME
        self._last_time_update = self._clock()
        self._score = previous_score if previous_score > 0 else 0
        self._spawn_food()

    def get_act_game(self) -> str:
        if self._game_over:
            return "GAME OVER"
        if self._game_won:
            return "YOU WIN!"
        return "NIBBLER"

    def _walls(self) -> Iterable[tuple[int, int]]:
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                if cell == "#":
                    yield x, y

    def get_display(self, lib: TGraphics) -> list[Entity]:
        self.update()
        time_text = f"Time: {self._time_remaining:.1f}"
        high_score = f"High Score: {self._high_score}"
        score = f"Score: {self._score}"

        if lib is not TGraphics.NCURSES:
            cell = (CELL_SIZE, CELL_SIZE)

            def at(x: int, y: int) -> tuple[int, int]:
                return (50 + x * CELL_SIZE, 50 + y * CELL_SIZE)

            entities = [
                Entity(
                    "assets/sprites/border.png",
                    (50, 50),
                    (self._width * CELL_SIZE, self._height * CELL_SIZE),
                )
            ]
            entities.extend(Entity("assets/sprites/border_til.png", at(x, y), cell) for x, y in self._walls())
            entities.extend(Entity("assets/sprites/pomme.png", at(x, y), cell) for x, y in self._foods)
            for i, (x, y) in enumerate(self._body):
                sprite = _HEAD_SPRITES[self._direction] if i == 0 else "assets/sprites/snake_body.png"
                entities.append(Entity(sprite, at(x, y), cell))
            entities.append(Entity(score, (20, 20)))
            entities.append(Entity(high_score, (20, 40)))
            entities.append(Entity(time_text, (20, 60)))
            if self._game_over:
                entities.append(Entity("GAME OVER - Continue? Press SPACE", (180, 280)))
            if self._game_won:
                entities.append(Entity("YOU WIN!", (180, 280)))
            return entities

        entities = [Entity("CLEAR_SCREEN", (0, 0))]
        entities.extend(Entity("COLOR:BLUE:#", (y, x)) for x, y in self._walls())
        entities.extend(Entity("COLOR:YELLOW:@", (y, x)) for x, y in self._foods)
        for i, (x, y) in enumerate(self._body):
            glyph = _HEAD_GLYPHS[self._direction] if i == 0 else "COLOR:GREEN:o"
            entities.append(Entity(glyph, (y, x)))
        entities.append(Entity(score, (self._height + 1, 0)))
        entities.append(Entity(high_score, (self._height + 1, 40)))
        entities.append(Entity(time_text, (self._height + 1, 20)))
        if self._game_over:
            entities.append(Entity("GAME OVER - Press SPACE to restart", (self._height + 2, 0)))
        if self._game_won:
            entities.append(Entity("YOU WIN! - Press SPACE to restart", (self._height + 2, 0)))
        return entities

    def get_sound(self, lib: TGraphics) -> str:
        return ""

    def get_score(self) -> int:
        return self._score