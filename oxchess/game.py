"""Game state and the drag-and-drop handling of moves."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .board import Board
from .pieces import Piece, PieceColor, Position


def tile_at(mouse_x: float, mouse_y: float, tile_size: int) -> Position:
    """The board square under a point on the screen; negative coordinates map to 0."""
    return (
        max(0, math.floor(mouse_x / tile_size)),
        max(0, math.floor(mouse_y / tile_size)),
    )


@dataclass
class Game:
    """A game in progress: the board, whose turn it is and the piece being dragged."""

    board: Board = field(default_factory=Board.new_standard)
    turn: PieceColor = PieceColor.WHITE
    move_count: int = 0
    dragging: Position | None = None
    dragged_piece: Piece | None = None
    hovered: Position | None = None

    def press(self, mouse_x: float, mouse_y: float, tile_size: int) -> None:
        """Pick up the piece under the cursor if it belongs to the side to move."""
        clicked = tile_at(mouse_x, mouse_y, tile_size)
        node = self.board.get_node(clicked)
        if node is not None and node.piece is not None and node.piece.color is self.turn:
            self.dragging = clicked
            self.dragged_piece = node.piece

    def release(self, mouse_x: float, mouse_y: float, tile_size: int) -> bool:
        """Drop the dragged piece; True when that made a legal move."""
        origin = self.dragging
        if origin is None:
            return False
        target = tile_at(mouse_x, mouse_y, tile_size)
        moved = False
        if origin != target:
            node = self.board.get_node(origin)
            if node is not None and node.piece is not None:
                legal = node.piece.generate_legal_moves(origin, self.board)
                if target in legal and self.board.move_piece(origin, target):
                    self.move_count += 1
                    self.turn = self.turn.opponent
                    moved = True
        self.dragging = None
        self.dragged_piece = None
        return moved