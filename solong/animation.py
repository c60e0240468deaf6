"""Frame counters that drive the idle animations of the bonus game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from solong.game import Game
from solong.mapfile import Tile

__all__ = ["Sprite", "FrameEvent", "Animator"]

COIN_STEP = 10
COIN_FRAMES = 6
PLAYER_STEP = 10
PLAYER_FRAMES = 5
BOX_STEP = 30
BOX_FRAMES = 10


class Sprite(Enum):
    """The animated things on the map."""

    COIN = "coin"
    PLAYER = "player"
    PLAYER_LEFT = "player_left"
    BOX = "box"


@dataclass(frozen=True)
class FrameEvent:
    """A request to draw frame `frame` (counted from 1) of `sprite` at cell `(x, y)`."""

    sprite: Sprite
    frame: int
    x: int
    y: int


@dataclass
class _Counter:
    """A counter that shows a new frame every `step` ticks.

    A wrapping counter goes back to zero once it passes its last frame;
    the box counter never wraps.
    """

    step: int
    frames: int
    wraps: bool = True
    value: int = 0

    def advance(self) -> int | None:
        self.value += 1
        frame = None
        if self.value % self.step == 0 and 1 <= self.value // self.step <= self.frames:
            frame = self.value // self.step
        if self.wraps and self.value > self.step * self.frames:
            self.value = 0
        return frame

    @property
    def finished(self) -> bool:
        return self.value == self.step * self.frames


@dataclass
class Animator:
    """Advances the animation counters once per rendered frame.

    The counters are shared by every cell of the same kind, so with several
    coins on the map the coin counter moves once for each coin per tick.
    """

    _coin: _Counter = field(default_factory=lambda: _Counter(COIN_STEP, COIN_FRAMES))
    _player: _Counter = field(default_factory=lambda: _Counter(PLAYER_STEP, PLAYER_FRAMES))
    _player_left: _Counter = field(
        default_factory=lambda: _Counter(PLAYER_STEP, PLAYER_FRAMES)
    )
    _box: _Counter = field(
        default_factory=lambda: _Counter(BOX_STEP, BOX_FRAMES, wraps=False)
    )

    def __init__(self) -> None:
        self._coin = _Counter(COIN_STEP, COIN_FRAMES)
        self._player = _Counter(PLAYER_STEP, PLAYER_FRAMES)
        self._player_left = _Counter(PLAYER_STEP, PLAYER_FRAMES)
        self._box = _Counter(BOX_STEP, BOX_FRAMES, wraps=False)

    def tick(self, game: Game) -> list[FrameEvent]:
        """Advance one frame over the whole map and return what to redraw.

        Once every coin is collected the exit box plays its opening
        animation; when it ends the exit cell becomes an opened exit.
        """
        events: list[FrameEvent] = []
        no_coins = game.coins_left() == 0
        for x, y, char in list(game.cells()):
            if char == Tile.EXIT.value and no_coins:
                frame = self._box.advance()
                if frame is not None:
                    events.append(FrameEvent(Sprite.BOX, frame, x, y))
                if self._box.finished:
                    game.grid[y][x] = Tile.OPEN_EXIT.value
            if char == Tile.COIN.value:
                counter, sprite = self._coin, Sprite.COIN
            elif char == Tile.PLAYER.value:
                counter, sprite = self._player, Sprite.PLAYER
            elif char == Tile.PLAYER_LEFT.value:
                counter, sprite = self._player_left, Sprite.PLAYER_LEFT
            else:
                continue
            frame = counter.advance()
            if frame is not None:
                events.append(FrameEvent(sprite, frame, x, y))
        return events