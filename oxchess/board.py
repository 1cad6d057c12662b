"""The board: an 8x8 grid of nodes linked to their neighbours."""

from __future__ import annotations

from dataclasses import dataclass, field

from .pieces import BOARD_SIZE, KING_DIRS, Piece, PieceColor, PieceType, Position

BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_ADJACENT_DIRS = sorted(KING_DIRS)


@dataclass(frozen=True)
class Edge:
    """A link from one node to a neighbouring one."""

    node: Position
    dis_vector: tuple[int, int]


@dataclass
class Node:
    """One square of the board."""

    vector: Position
    piece: Piece | None = None
    edges: list[Edge] = field(default_factory=list)


@dataclass
class Board:
    """The squares of the board, stored rank by rank."""

    nodes: list[Node] = field(default_factory=list)

    @classmethod
    def new_empty(cls) -> Board:
        """A board with no pieces on it."""
        nodes = [
            Node(vector=(file, rank), edges=cls._adjacency_edges((file, rank)))
            for rank in range(BOARD_SIZE)
            for file in range(BOARD_SIZE)
        ]
        return cls(nodes)

    @classmethod
    def new_standard(cls) -> Board:
        """A board set up for the start of a game, white at the bottom."""
        board = cls.new_empty()
        for file, piece_type in enumerate(BACK_RANK):
            board.set_piece((file, 7), Piece(piece_type, PieceColor.WHITE))
            board.set_piece((file, 6), Piece(PieceType.PAWN, PieceColor.WHITE))
            board.set_piece((file, 0), Piece(piece_type, PieceColor.BLACK))
            board.set_piece((file, 1), Piece(PieceType.PAWN, PieceColor.BLACK))
        return board

    def get_node(self, pos: Position) -> Node | None:
        """The node at ``pos``, or None when ``pos`` is off the board."""
        file, rank = pos
        if 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE:
            index = rank * BOARD_SIZE + file
            if index < len(self.nodes):
                return self.nodes[index]
        return None

    def set_piece(self, position: Position, piece: Piece) -> None:
        node = self.get_node(position)
        if node is not None:
            node.piece = piece

    def remove_piece(self, target: Position) -> None:
        node = self.get_node(target)
        if node is not None:
            node.piece = None

    def move_piece(self, origin: Position, target: Position) -> bool:
        """Move whatever stands on ``origin`` to ``target``; False if nothing moved."""
        node = self.get_node(origin)
        if node is None or node.piece is None:
            return False
        self.set_piece(target, node.piece)
        self.remove_piece(origin)
        return True

    @staticmethod
    def _adjacency_edges(pos: Position) -> list[Edge]:
        x, y = pos
        return [
            Edge(node=(x + dx, y + dy), dis_vector=(dx, dy))
            for dx, dy in _ADJACENT_DIRS
            if 0 <= x + dx < BOARD_SIZE and 0 <= y + dy < BOARD_SIZE
        ]