# solong

A small tile-based puzzle game. You walk a player around a walled map and
pick up every coin. Once all the coins are gone, you step onto the exit to
win. Each step is counted.

## Installing

```
pip install .
```

The game window uses pygame.

## Playing

```
solong path/to/level.ber
solong --bonus path/to/level.ber
solong --images path/to/images path/to/level.ber
```

- Move with the arrow keys or with `W` `A` `S` `D`.
- `Esc` or closing the window ends the game.
- The exit only lets you through once every coin has been collected.

### Plain mode

- The player moves when a key is released.
- Every step prints the counter to standard output, as in `move:1` and `move:2`.
- Reaching the exit prints `->->->->->->you win<-<-<-<-<-`.
- Closing the window prints `->->->->->->you lose<-<-<-<-<-`. Pressing `Esc` writes the same line to standard error.

### Bonus mode (`--bonus`)

- The player moves when a key is pressed.
- Coins are animated.
- The player is animated and faces left after walking left. It keeps that facing while walking up or down.
- The exit box plays an opening animation once the coins are gone.
- The move counter is drawn in the top-left corner of the window.

### Exit status

The command exits with status 0 after a game ends. It exits with status 1, after printing a message to standard error, when:

- it is not given exactly one map;
- the map is rejected;
- a required image cannot be loaded.

### Images

The game ships no image files. It loads them from a directory you supply:

- By default this is `image` in plain mode and `image_bonus` in bonus mode, relative to the current directory.
- `--images DIR` gives another directory.

Each map cell is drawn 100 pixels square in plain mode and 50 pixels square in bonus mode.

Plain mode uses these files:

- `manda_wall.xpm`
- `manda_floor.xpm`
- `manda_coin.xpm`
- `manda_player.xpm`
- `manda_door.xpm`

Bonus mode uses these files:

- walls and floor: `wall2.xpm`, `floor4.xpm`
- coin frames: `c11.xpm` … `c66.xpm`
- exit box: `box.xpm`
- box opening frames: `bom1.xpm` … `bom10.xpm`
- prize: `prize2.xpm`
- player frames: `char1.xpm` … `char5.xpm`
- left-facing player frames: `char11.xpm` … `char55.xpm`

If a required image fails to load, the game stops with `missing image`. The door image is optional in plain mode, and the wall image is optional in bonus mode.

## Map files

A map is a plain text file whose name ends in `.ber`. Each line is one row
of tiles:

| Character | Tile         |
|-----------|--------------|
| `1`       | wall         |
| `0`       | floor        |
| `C`       | coin         |
| `P`       | player start |
| `E`       | exit         |

A map is accepted only when:

- it is not empty, has no empty lines, and does not start or end with a newline;
- every row has the same length;
- it uses only the characters above;
- it has exactly one `P`, exactly one `E` and at least one `C`;
- it is enclosed by walls on all four sides;
- every coin can be reached from the player's start, and the exit is next to a reachable cell. The walk never passes through the exit.

Example:

```
1111111111
1P0C00C0E1
1111111111
```

## Using it from Python

### `solong.mapfile`

- `read_map(path)` reads and checks a map file, and returns its rows as a list of strings.
- `parse_map(text)` does the same for map text.
- Both raise `MapError` for a bad map.
- The single checks are also available:
  - `check_extension`
  - `check_layout`
  - `check_rectangular`
  - `check_characters`
  - `check_counts`
  - `check_walls`
  - `check_reachable`
- `flood_fill(rows)` returns the grid with every reachable cell marked `X`.

### `solong.game`

`Game(rows, bonus=False)` holds a running game.

- `Game.step(direction)` takes a `Direction` (`UP`, `DOWN`, `LEFT`, `RIGHT`). It returns a `MoveResult`: `BLOCKED`, `MOVED` or `WON`.
- Once the game is won, further steps raise `RuntimeError`.
- The game also offers:
  - `moves`
  - `move_label()`
  - `coins_left()`
  - `find_player()`
  - `cell(x, y)`
  - `cells()`
  - `width`
  - `height`

### `solong.animation`

`Animator.tick(game)` advances the bonus-mode animation counters by one frame. It returns the `FrameEvent`s to draw. When the box animation finishes, it turns the exit into an opened exit.

### `solong.render`

- `Renderer(surface, images, bonus=False)` draws onto a pygame surface with `draw_map`, `draw_event` and `draw_move_counter`.
- `image_paths` returns the path of each image file.
- `load_images` loads them, raising `MissingImageError` when a required one fails.

### `solong.cli`

- `run(path, bonus=False, image_dir=None)` plays one map. It returns `True` when the player won.
- `main(argv=None)` is the command line entry point.

## Running the tests

```
pip install ".[test]"
pytest
```