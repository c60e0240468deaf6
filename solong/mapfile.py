"""Loading and validating `.ber` map files."""

from __future__ import annotations

import os
from collections import deque
from enum import Enum
from typing import Iterable, Sequence

__all__ = [
    "MapError",
    "Tile",
    "check_extension",
    "check_layout",
    "check_rectangular",
    "check_characters",
    "check_counts",
    "check_walls",
    "flood_fill",
    "check_reachable",
    "parse_map",
    "read_map",
]

MAP_EXTENSION = ".ber"
REACHED = "X"


class MapError(ValueError):
    """Raised when a map file cannot be read or is not a valid map."""


class Tile(str, Enum):
    """The characters a map grid is made of."""

    FLOOR = "0"
    WALL = "1"
    COIN = "C"
    PLAYER = "P"
    EXIT = "E"
    # Cells that only appear while a game is running.
    PLAYER_LEFT = "2"
    OPEN_EXIT = "e"


_FILE_CHARACTERS = frozenset(
    {Tile.FLOOR.value, Tile.WALL.value, Tile.COIN.value, Tile.PLAYER.value, Tile.EXIT.value, "\n"}
)


def check_extension(path: str | os.PathLike[str]) -> None:
    """Require the map's file name to end with `.ber`."""
    name = os.fspath(path)
    if not name.endswith(MAP_EXTENSION):
        raise MapError("your map should contain .ber in the end")


def check_layout(text: str) -> None:
    """Reject empty maps, leading or trailing newlines and blank lines."""
    if not text:
        raise MapError("something wrong with the map")
    if text.startswith("\n") or text.endswith("\n") or "\n\n" in text:
        raise MapError("invalid map")


def check_rectangular(rows: Sequence[str]) -> None:
    """Require every row to be as long as the first."""
    if not rows:
        raise MapError("invalid map")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError("your map is not rectangular")


def check_characters(text: str) -> None:
    """Reject any character that has no meaning in a map file."""
    for char in text:
        if char not in _FILE_CHARACTERS:
            raise MapError(f"character {char} in the map")


def check_counts(text: str) -> None:
    """Require exactly one player, exactly one exit and at least one coin."""
    players = text.count(Tile.PLAYER.value)
    coins = text.count(Tile.COIN.value)
    exits = text.count(Tile.EXIT.value)
    if players != 1 or coins < 1 or exits != 1:
        raise MapError("invalid map")


def _all_walls(row: str) -> bool:
    return all(char == Tile.WALL.value for char in row)


def check_walls(rows: Sequence[str]) -> None:
    """Require the map to be closed by walls on all four sides."""
    if not rows or not rows[0]:
        raise MapError("invalid map")
    if not _all_walls(rows[0]) or not _all_walls(rows[-1]):
        raise MapError("invalid map")
    for row in rows:
        if row[0] != Tile.WALL.value or row[-1] != Tile.WALL.value:
            raise MapError("invalid map")


def _find(rows: Sequence[str], tile: str) -> tuple[int, int] | None:
    for y, row in enumerate(rows):
        x = row.find(tile)
        if x != -1:
            return x, y
    return None


def _neighbours(x: int, y: int) -> Iterable[tuple[int, int]]:
    yield x + 1, y
    yield x - 1, y
    yield x, y + 1
    yield x, y - 1


def flood_fill(rows: Sequence[str]) -> list[str]:
    """Return a copy of the grid with every cell the player can walk to marked `X`.

    Walls stop the walk, and so does the exit: it is never marked and
    nothing behind it is reached through it.
    """
    grid = [list(row) for row in rows]
    start = _find(rows, Tile.PLAYER.value)
    if start is None:
        return ["".join(row) for row in grid]
    blocked = {Tile.WALL.value, Tile.EXIT.value, REACHED}
    sx, sy = start
    grid[sy][sx] = REACHED
    pending = deque([start])
    while pending:
        x, y = pending.popleft()
        for nx, ny in _neighbours(x, y):
            if not (0 <= ny < len(grid) and 0 <= nx < len(grid[ny])):
                continue
            if grid[ny][nx] in blocked:
                continue
            grid[ny][nx] = REACHED
            pending.append((nx, ny))
    return ["".join(row) for row in grid]


def check_reachable(rows: Sequence[str]) -> None:
    """Require the exit and every coin to be reachable from the player."""
    filled = flood_fill(rows)
    exit_at = _find(filled, Tile.EXIT.value)
    if exit_at is None:
        raise MapError("invalid map")
    ex, ey = exit_at
    touched = any(
        0 <= ny < len(filled) and 0 <= nx < len(filled[ny]) and filled[ny][nx] == REACHED
        for nx, ny in _neighbours(ex, ey)
    )
    if not touched:
        raise MapError("invalid map")
    if any(Tile.PLAYER.value in row or Tile.COIN.value in row for row in filled):
        raise MapError("invalid map")


def parse_map(text: str) -> list[str]:
    """Validate the text of a map and return its rows."""
    check_layout(text)
    rows = text.split("\n")
    check_rectangular(rows)
    check_characters(text)
    check_counts(text)
    check_walls(rows)
    check_reachable(rows)
    return rows


def read_map(path: str | os.PathLike[str]) -> list[str]:
    """Read a `.ber` file, validate it and return its rows."""
    check_extension(path)
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("map doesn't open") from exc
    return parse_map(text)