# arcadebox

A small arcade cabinet. It starts with a menu of the games it finds. It
then plays them through a display back end you choose, and you can
switch back ends while it runs.

Games:

- **Snake**: a 70×50 field. Eat the food to grow and score 10 points,
  and stay clear of the edges and your own tail.
- **Nibbler**: a walled maze with 20 pieces of food. You have 30 seconds
  to clear them all, and each piece adds one second to the timer. Clearing
  a maze switches to the other map and keeps your score. A restart after a
  loss gives 20 seconds.

Display back ends:

- `arcade_ncurses.so`: a terminal back end built on curses
  (`arcadebox.curses_display.CursesDisplay`)
- `arcade_sdl2.so`: a pygame window (`arcadebox.pygame_display.SdlDisplay`).
  It logs images that cannot be loaded to stderr and carries on.
- `arcade_sfml.so`: a pygame window (`arcadebox.pygame_display.SfmlDisplay`).
  It raises on images that cannot be loaded, loops a single sound, and caps
  the frame rate at 60.

## Installing

```
pip install .
```

## Playing

```
arcadebox <library_path>
```

Only the file name at the end of `<library_path>` matters. It picks the
back end to start with, so `lib/arcade_ncurses.so` starts the terminal
back end.

Games are found by file name: the arcade searches `lib/` in the current
directory, including its subdirectories, for files named
`arcade_snake.so` and `arcade_nibbler.so`. These files are markers, and
an empty file is enough. The arcade stops with an error if `lib/` is
missing or holds no game files. Any error makes the command print a
message and exit with status 84.

The windowed back ends need the font `assets/fonts/upheavtt.ttf`. They
draw sprites from `assets/sprites/` and play the menu music from
`assets/sounds/main.wav`.

### Keys

| Key         | Action                                   |
|-------------|------------------------------------------|
| Arrows      | move; in the menu, choose a game         |
| Enter       | start the chosen game                    |
| Space       | restart the current game                 |
| `a` / `z`   | previous / next display back end         |
| `q` / `s`   | previous / next game                     |
| Esc         | quit (closing the window also quits)     |

You have three lives. When a game ends, the arcade pauses for three
seconds and takes a life. While you still have lives, the game restarts.
When they are all gone, you go back to the menu.

High scores are kept in `snake_highscore.txt` and `nibbler_highscore.txt`
in the current directory. If one of them is missing, the arcade looks in
`lib/Games/<game>/` and then in `assets/`.

Nibbler reads its first map from the first of these files that exists:
`map.txt`, `maps/map.txt`, `lib/Games/nibbler/map.txt` or
`maps/nibbler_map.txt`. The second map comes from the same places under
the names `map2.txt` and `nibbler_map2.txt`. In a map, `#` marks a wall.
If no map file is found, Nibbler uses a built-in 10×10 maze.

## What it does not do

- Snake and Nibbler are the only games you can play. Files named after
  other games are still listed when found, such as `arcade_pacman.so`,
  `arcade_tetris.so` or `arcade_qix.so`, but choosing one fails with
  "Cannot open game".
- Only the three back ends above exist. The other known names, such as
  `arcade_allegro5.so`, `arcade_opengl.so` or `arcade_qt5.so`, are skipped
  when you switch back ends, and naming one on the command line is an error.
- No shared libraries are ever loaded. The `.so` names only select games
  and back ends that are built into the package.

## Using it as a library

- `arcadebox.core` defines the `Game` and `Graphics` interfaces, the
  `KeyBind`, `TGraphics` and `TGames` enums, the `Entity` record (text or
  sprite path, position, size), and `ArcadeError`.
- `arcadebox.menu.Menu`, `arcadebox.snake.Snake` and
  `arcadebox.nibbler.Nibbler` implement `Game`. `get_display(lib)` returns
  the list of entities to draw for a back end. `Snake` and `Nibbler` accept
  a `random.Random`, a clock function and a high-score path, so they can be
  driven deterministically. `Nibbler` also accepts its map paths.
  `arcadebox.nibbler.parse_map` and `load_map` read maps.
- `arcadebox.game_manager.GameManager` and
  `arcadebox.library_manager.LibraryManager` take a mapping from file name
  to factory. This lets you plug in your own games or back ends.
- `arcadebox.app.run` drives the frame loop, and `arcadebox.app.main`
  is the command.

## Tests

```
pip install .[test]
pytest
```