"""Chess pieces and the moves each kind of piece may make."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .board import Board

Position = tuple[int, int]
Direction = tuple[int, int]

BOARD_SIZE = 8


class PieceType(enum.Enum):
    """The kinds of chess piece."""

    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class PieceColor(enum.Enum):
    """The two sides."""

    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> PieceColor:
        return PieceColor.BLACK if self is PieceColor.WHITE else PieceColor.WHITE


KING_DIRS: tuple[Direction, ...] = (
    (1, 0), (0, 1), (-1, 0), (0, -1), (1, 1), (1, -1), (-1, 1), (-1, -1),
)
KNIGHT_DIRS: tuple[Direction, ...] = (
    (2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1),
)
ROOK_DIRS: tuple[Direction, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[Direction, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
QUEEN_DIRS: tuple[Direction, ...] = ROOK_DIRS + BISHOP_DIRS


def _on_board(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def _step_moves(
    origin: Position, board: Board, directions: Sequence[Direction], color: PieceColor
) -> list[Position]:
    moves = []
    for dx, dy in directions:
        dest = (origin[0] + dx, origin[1] + dy)
        if not _on_board(*dest):
            continue
        node = board.get_node(dest)
        if node is None:
            continue
        if node.piece is None or node.piece.color != color:
            moves.append(dest)
    return moves


def _sliding_moves(
    origin: Position, board: Board, directions: Sequence[Direction], color: PieceColor
) -> list[Position]:
    moves = []
    for dx, dy in directions:
        x, y = origin[0] + dx, origin[1] + dy
        while _on_board(x, y):
            node = board.get_node((x, y))
            if node is not None:
                if node.piece is not None:
                    if node.piece.color != color:
                        moves.append((x, y))
                    break
                moves.append((x, y))
            x += dx
            y += dy
    return moves


def _pawn_moves(color: PieceColor, origin: Position, board: Board) -> list[Position]:
    moves: list[Position] = []
    x, y = origin
    step = -1 if color is PieceColor.WHITE else 1
    start_row = 6 if color is PieceColor.WHITE else 1

    new_y = y + step
    if not 0 <= new_y < BOARD_SIZE:
        return moves

    ahead = board.get_node((x, new_y))
    if ahead is not None and ahead.piece is None:
        moves.append((x, new_y))
        if y == start_row:
            double_y = y + 2 * step
            further = board.get_node((x, double_y))
            if further is not None and further.piece is None:
                moves.append((x, double_y))

    for dx in (-1, 1):
        nx = x + dx
        if not 0 <= nx < BOARD_SIZE:
            continue
        node = board.get_node((nx, new_y))
        if node is not None and node.piece is not None and node.piece.color != color:
            moves.append((nx, new_y))
    return moves


@dataclass(frozen=True)
class Piece:
    """A piece of one type belonging to one side."""

    piece_type: PieceType
    color: PieceColor

    def generate_legal_moves(self, origin: Position, board: Board) -> list[Position]:
        """Squares this piece standing on ``origin`` may move to."""
        match self.piece_type:
            case PieceType.PAWN:
                return _pawn_moves(self.color, origin, board)
            case PieceType.KNIGHT:
                return _step_moves(origin, board, KNIGHT_DIRS, self.color)
            case PieceType.BISHOP:
                return _sliding_moves(origin, board, BISHOP_DIRS, self.color)
            case PieceType.ROOK:
                return _sliding_moves(origin, board, ROOK_DIRS, self.color)
            case PieceType.QUEEN:
                return _sliding_moves(origin, board, QUEEN_DIRS, self.color)
            case PieceType.KING:
                return _step_moves(origin, board, KING_DIRS, self.color)
        raise ValueError(f"unknown piece type: {self.piece_type!r}")