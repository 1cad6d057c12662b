"""The windowed chess game."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from .game import Game
from .pieces import BOARD_SIZE
from .render import draw_grid, draw_pieces, load_sprites

TITLE = "Overly Extensible Chess"
DEFAULT_TILE_SIZE = 90
FRAME_RATE = 60


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Read the command-line options."""
    parser = argparse.ArgumentParser(prog="oxchess", description=TITLE)
    parser.add_argument(
        "--assets", type=Path, default=Path("assets"), help="directory holding the piece images"
    )
    parser.add_argument(
        "--tile-size", type=_positive_int, default=DEFAULT_TILE_SIZE, help="square size in pixels"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the window and play until it is closed."""
    args = parse_args(argv)
    tile_size = args.tile_size
    pygame.init()
    try:
        side = tile_size * BOARD_SIZE
        screen = pygame.display.set_mode((side, side))
        pygame.display.set_caption(TITLE)
        sprites = load_sprites(args.assets)
        game = Game()
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    game.press(*event.pos, tile_size)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    game.release(*event.pos, tile_size)
            draw_grid(screen, tile_size)
            draw_pieces(screen, game.board, tile_size, sprites, game, pygame.mouse.get_pos())
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())