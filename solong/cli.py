"""Command line entry point: load a map, open a window and play."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

import pygame

from solong.animation import Animator
from solong.game import LOSE_MESSAGE, WIN_MESSAGE, Direction, Game, MoveResult
from solong.mapfile import MapError, read_map
from solong.render import MissingImageError, Renderer, load_images, window_size

__all__ = ["direction_for_key", "run", "main", "WINDOW_TITLE", "FRAMES_PER_SECOND"]

WINDOW_TITLE = "so_long"
FRAMES_PER_SECOND = 60
USAGE_MESSAGE = "please put map's name"

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
}


def direction_for_key(key: int) -> Optional[Direction]:
    """Return the direction a key moves the player, or None for other keys."""
    return _KEY_DIRECTIONS.get(key)


def run(
    path: str | os.PathLike[str],
    bonus: bool = False,
    image_dir: str | os.PathLike[str] | None = None,
) -> bool:
    """Play the map at `path` until the player wins or quits.

    Returns True when the player reached the exit. Raises `MapError` for
    a bad map and `MissingImageError` when an image cannot be loaded.
    """
    game = Game(read_map(path), bonus=bonus)
    pygame.init()
    try:
        images = load_images(image_dir, bonus)
        screen = pygame.display.set_mode(window_size(game, bonus))
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(screen, images, bonus)
        renderer.draw_map(game)
        renderer.draw_move_counter(game)
        animator = Animator() if bonus else None
        # The plain game reacts when a key is released, the bonus game when pressed.
        key_event = pygame.KEYDOWN if bonus else pygame.KEYUP
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    if not bonus:
                        print(LOSE_MESSAGE)
                    return False
                if event.type != key_event:
                    continue
                if event.key == pygame.K_ESCAPE:
                    if not bonus:
                        print(LOSE_MESSAGE, file=sys.stderr)
                    return False
                direction = direction_for_key(event.key)
                if direction is None:
                    continue
                result = game.step(direction)
                if result is not MoveResult.BLOCKED and not bonus:
                    print(game.move_label())
                if result is MoveResult.WON:
                    if not bonus:
                        print(WIN_MESSAGE)
                    return True
                renderer.draw_map(game)
                renderer.draw_move_counter(game)
            if animator is not None:
                for frame_event in animator.tick(game):
                    renderer.draw_event(frame_event)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="solong", description="Collect every coin, then leave.")
    parser.add_argument("maps", nargs="*", metavar="MAP", help="a .ber map file")
    parser.add_argument("--bonus", action="store_true", help="play with animations")
    parser.add_argument("--images", metavar="DIR", default=None, help="directory of images")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game from the command line and return the exit status."""
    args = _parser().parse_args(argv)
    if len(args.maps) != 1:
        print(USAGE_MESSAGE, file=sys.stderr)
        return 1
    try:
        run(args.maps[0], bonus=args.bonus, image_dir=args.images)
    except MapError as exc:
        print(exc, file=sys.stderr)
        return 1
    except MissingImageError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())