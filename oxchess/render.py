"""Drawing the board and pieces with pygame."""

from __future__ import annotations

from pathlib import Path

import pygame

from .board import Board
from .game import Game
from .pieces import BOARD_SIZE, PieceColor, PieceType

LIGHT_BLUE = pygame.Color(102, 191, 255)
RAY_WHITE = pygame.Color(245, 245, 245)
DRAG_OFFSET = 45

SpriteMap = dict[tuple[PieceColor, PieceType], pygame.Surface]


def sprite_path(asset_dir: str | Path, color: PieceColor, piece_type: PieceType) -> Path:
    """The image file for one piece, e.g. ``white-pawn.png``."""
    return Path(asset_dir) / f"{color.value}-{piece_type.value}.png"


def load_sprites(asset_dir: str | Path) -> SpriteMap:
    """Load an image for every colour and type of piece."""
    sprites: SpriteMap = {}
    for color in PieceColor:
        for piece_type in PieceType:
            path = sprite_path(asset_dir, color, piece_type)
            if not path.is_file():
                raise FileNotFoundError(f"missing sprite: {path}")
            sprites[(color, piece_type)] = pygame.image.load(str(path))
    return sprites


def draw_grid(surface: pygame.Surface, tile_size: int) -> None:
    """Paint the checkered squares."""
    for rank in range(BOARD_SIZE):
        for file in range(BOARD_SIZE):
            color = LIGHT_BLUE if rank % 2 == file % 2 else RAY_WHITE
            surface.fill(color, pygame.Rect(file * tile_size, rank * tile_size, tile_size, tile_size))


def draw_pieces(
    surface: pygame.Surface,
    board: Board,
    tile_size: int,
    sprites: SpriteMap,
    game: Game,
    mouse_pos: tuple[float, float],
) -> None:
    """Draw the resting pieces, then the dragged one under the cursor."""
    for node in board.nodes:
        piece = node.piece
        if piece is None or game.dragging == node.vector:
            continue
        sprite = sprites.get((piece.color, piece.piece_type))
        if sprite is not None:
            x, y = node.vector
            surface.blit(sprite, (x * tile_size, y * tile_size))

    dragged = game.dragged_piece
    if dragged is not None:
        sprite = sprites.get((dragged.color, dragged.piece_type))
        if sprite is not None:
            mouse_x, mouse_y = mouse_pos
            surface.blit(sprite, (int(mouse_x - DRAG_OFFSET), int(mouse_y - DRAG_OFFSET)))