"""Game state: the grid, the player's moves and the move counter."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Sequence

from solong.mapfile import Tile

__all__ = ["Direction", "MoveResult", "Game", "WIN_MESSAGE", "LOSE_MESSAGE"]

WIN_MESSAGE = "->->->->->->you win<-<-<-<-<-"
LOSE_MESSAGE = "->->->->->->you lose<-<-<-<-<-"
MOVE_PREFIX = "move:"


class Direction(Enum):
    """A step on the grid as a column and row offset."""

    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class MoveResult(Enum):
    """What a step did."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"


_WALKABLE = frozenset({Tile.FLOOR.value, Tile.COIN.value})


class Game:
    """A running game on a map grid.

    In bonus mode the player faces left (cell `2`) after walking left and
    keeps that facing while walking up or down; an opened exit (cell `e`)
    counts as an exit.
    """

    def __init__(self, rows: Sequence[str], bonus: bool = False) -> None:
        if not rows:
            raise ValueError("a game needs at least one row")
        self.grid: list[list[str]] = [list(row) for row in rows]
        self.bonus = bonus
        self.moves = 0
        self.won = False

    @property
    def width(self) -> int:
        """Number of columns, taken from the first row."""
        return len(self.grid[0])

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.grid)

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.grid)

    @property
    def _player_tiles(self) -> frozenset[str]:
        if self.bonus:
            return frozenset({Tile.PLAYER.value, Tile.PLAYER_LEFT.value})
        return frozenset({Tile.PLAYER.value})

    @property
    def _exit_tiles(self) -> frozenset[str]:
        if self.bonus:
            return frozenset({Tile.EXIT.value, Tile.OPEN_EXIT.value})
        return frozenset({Tile.EXIT.value})

    def cell(self, x: int, y: int) -> str:
        """Return the character at column `x`, row `y`."""
        if not (0 <= y < self.height and 0 <= x < len(self.grid[y])):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def cells(self) -> Iterable[tuple[int, int, str]]:
        """Yield every cell as `(x, y, character)`, row by row."""
        for y, row in enumerate(self.grid):
            for x, char in enumerate(row):
                yield x, y, char

    def find_player(self) -> tuple[int, int]:
        """Return the `(x, y)` position of the player."""
        tiles = self._player_tiles
        for x, y, char in self.cells():
            if char in tiles:
                return x, y
        raise LookupError("there is no player on the map")

    def coins_left(self) -> int:
        """Return how many coins are still on the map."""
        return sum(row.count(Tile.COIN.value) for row in self.grid)

    def _player_char(self, direction: Direction, current: str) -> str:
        if not self.bonus:
            return Tile.PLAYER.value
        if direction is Direction.LEFT:
            return Tile.PLAYER_LEFT.value
        if direction is Direction.RIGHT:
            return Tile.PLAYER.value
        return current

    def step(self, direction: Direction) -> MoveResult:
        """Move the player one cell, picking up a coin or leaving by the exit."""
        if self.won:
            raise RuntimeError("the game is over")
        x, y = self.find_player()
        tx, ty = x + direction.dx, y + direction.dy
        try:
            target = self.cell(tx, ty)
        except IndexError:
            return MoveResult.BLOCKED
        current = self.grid[y][x]
        if target in _WALKABLE:
            self.grid[ty][tx] = self._player_char(direction, current)
            self.grid[y][x] = Tile.FLOOR.value
            self.moves += 1
            return MoveResult.MOVED
        if target in self._exit_tiles and not self.coins_left():
            # Reaching the exit always shows the player facing its usual way,
            # except when arriving from the right.
            arrived = Tile.PLAYER_LEFT.value if (
                self.bonus and direction is Direction.LEFT
            ) else Tile.PLAYER.value
            self.grid[ty][tx] = arrived
            self.grid[y][x] = Tile.FLOOR.value
            self.moves += 1
            self.won = True
            return MoveResult.WON
        return MoveResult.BLOCKED

    def move_label(self) -> str:
        """Return the move counter as shown to the player."""
        return f"{MOVE_PREFIX}{self.moves}"