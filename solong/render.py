"""Drawing the map, its animations and the move counter with pygame."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

import pygame

from solong.animation import FrameEvent, Sprite
from solong.game import Game
from solong.mapfile import Tile

__all__ = [
    "MissingImageError",
    "Renderer",
    "image_paths",
    "load_images",
    "tile_size",
    "window_size",
    "TILE_SIZE",
    "BONUS_TILE_SIZE",
    "COUNTER_COLOR",
]

TILE_SIZE = 100
BONUS_TILE_SIZE = 50
BONUS_COIN_OFFSET = 12
COUNTER_COLOR = (0, 255, 0)
COUNTER_POSITION = (0, 10)
COUNTER_FONT_SIZE = 16

DEFAULT_IMAGE_DIR = "image"
BONUS_IMAGE_DIR = "image_bonus"

_MANDATORY_FILES = {
    "wall": "manda_wall.xpm",
    "floor": "manda_floor.xpm",
    "coin1": "manda_coin.xpm",
    "player1": "manda_player.xpm",
    "door": "manda_door.xpm",
}

_BONUS_FILES = {
    "wall": "wall2.xpm",
    "floor": "floor4.xpm",
    **{f"coin{n}": f"c{n}{n}.xpm" for n in range(1, 7)},
    "door": "box.xpm",
    **{f"bomb{n}": f"bom{n}.xpm" for n in range(1, 11)},
    **{f"player{n}": f"char{n}.xpm" for n in range(1, 6)},
    **{f"rplayer{n}": f"char{n}{n}.xpm" for n in range(1, 6)},
    "prize": "prize2.xpm",
}

# The plain game can run without a door image and the bonus game without
# a wall image; every other image has to load.
_MANDATORY_REQUIRED = ("floor", "coin1", "player1", "wall")
_BONUS_REQUIRED = tuple(name for name in _BONUS_FILES if name != "wall")

_FRAME_COUNTS = {
    Sprite.COIN: 6,
    Sprite.PLAYER: 5,
    Sprite.PLAYER_LEFT: 5,
    Sprite.BOX: 10,
}

Images = Mapping[str, Optional[pygame.Surface]]


class MissingImageError(RuntimeError):
    """Raised when an image the game needs cannot be loaded."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__("missing image")
        self.missing = missing


def tile_size(bonus: bool = False) -> int:
    """Return the side of one map cell in pixels."""
    return BONUS_TILE_SIZE if bonus else TILE_SIZE


def window_size(game: Game, bonus: bool = False) -> tuple[int, int]:
    """Return the window size in pixels needed to show the whole map."""
    side = tile_size(bonus)
    return game.width * side, game.height * side


def image_paths(
    image_dir: str | os.PathLike[str] | None = None, bonus: bool = False
) -> dict[str, Path]:
    """Return the file of every image the game uses, by image name."""
    if image_dir is None:
        image_dir = BONUS_IMAGE_DIR if bonus else DEFAULT_IMAGE_DIR
    base = Path(image_dir)
    files = _BONUS_FILES if bonus else _MANDATORY_FILES
    return {name: base / filename for name, filename in files.items()}


def _load(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        return None


def load_images(
    image_dir: str | os.PathLike[str] | None = None, bonus: bool = False
) -> dict[str, pygame.Surface | None]:
    """Load every image; raise `MissingImageError` if a required one fails."""
    images = {name: _load(path) for name, path in image_paths(image_dir, bonus).items()}
    required = _BONUS_REQUIRED if bonus else _MANDATORY_REQUIRED
    missing = [name for name in required if images.get(name) is None]
    if missing:
        raise MissingImageError(missing)
    return images


class Renderer:
    """Draws a game onto a pygame surface, one image per map cell."""

    def __init__(
        self, surface: pygame.Surface, images: Images, bonus: bool = False
    ) -> None:
        self.surface = surface
        self.images = dict(images)
        self.bonus = bonus
        self.tile_size = tile_size(bonus)
        self._coin_offset = BONUS_COIN_OFFSET if bonus else 0
        self._font: pygame.font.Font | None = None

    def _put(self, name: str, x: int, y: int, offset: int = 0) -> None:
        image = self.images.get(name)
        if image is None:
            return
        self.surface.blit(
            image, (x * self.tile_size + offset, y * self.tile_size + offset)
        )

    def draw_map(self, game: Game) -> None:
        """Draw every cell of the map."""
        for x, y, char in game.cells():
            if char == Tile.WALL.value:
                self._put("wall", x, y)
            elif char == Tile.FLOOR.value:
                self._put("floor", x, y)
            elif char == Tile.COIN.value:
                self._put("floor", x, y)
                self._put("coin1", x, y, self._coin_offset)
            elif char == Tile.PLAYER.value:
                self._put("floor", x, y)
                self._put("player1", x, y)
            elif self.bonus and char == Tile.PLAYER_LEFT.value:
                self._put("floor", x, y)
                self._put("rplayer2", x, y)
            elif char == Tile.EXIT.value:
                self._put("floor", x, y)
                self._put("door", x, y)

    def _layers(self, event: FrameEvent) -> list[tuple[str, int]]:
        frame = event.frame
        if event.sprite is Sprite.COIN:
            return [("floor", 0), (f"coin{frame}", self._coin_offset)]
        if event.sprite is Sprite.PLAYER:
            return [("floor", 0), (f"player{frame}", 0)]
        if event.sprite is Sprite.PLAYER_LEFT:
            # The first left-facing frame reuses the second image.
            return [("floor", 0), (f"rplayer{max(frame, 2)}", 0)]
        if frame <= 6:
            return [("floor", 0), ("door", 0), (f"bomb{frame}", 0)]
        if frame == 7:
            return [("floor", 0), ("bomb7", 0)]
        if frame <= 9:
            return [("floor", 0), ("prize", 0), (f"bomb{frame}", 0)]
        return [("floor", 0), ("bomb10", 0), ("floor", 0), ("prize", 0)]

    def draw_event(self, event: FrameEvent) -> None:
        """Draw one animation frame at the event's cell."""
        count = _FRAME_COUNTS[event.sprite]
        if not 1 <= event.frame <= count:
            raise ValueError(
                f"{event.sprite.value} has no frame {event.frame}"
            )
        for name, offset in self._layers(event):
            self._put(name, event.x, event.y, offset)

    def draw_move_counter(self, game: Game) -> str | None:
        """Show the move counter in the top-left corner of the bonus game.

        Returns the label drawn, or None when the game is not in bonus
        mode, where moves are reported on standard output instead.
        """
        if not self.bonus:
            return None
        self._put("wall", 0, 0)
        self._put("wall", 1, 0)
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, COUNTER_FONT_SIZE)
        label = game.move_label()
        text = self._font.render(label, False, COUNTER_COLOR)
        self.surface.blit(text, COUNTER_POSITION)
        return label