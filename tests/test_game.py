from oxchess.game import Game, tile_at
from oxchess.pieces import Piece, PieceColor, PieceType

TILE = 90


def centre(pos):
    return pos[0] * TILE + TILE / 2, pos[1] * TILE + TILE / 2


def test_tile_at():
    assert tile_at(45, 45, TILE) == (0, 0)
    assert tile_at(135, 675, TILE) == (1, 7)


def test_tile_at_clamps_negative_coordinates():
    assert tile_at(-5, -200, TILE) == (0, 0)


def test_tile_at_round_trips_centres():
    for pos in [(3, 4), (7, 0), (2, 6)]:
        assert tile_at(*centre(pos), TILE) == pos


def test_new_game_state():
    game = Game()
    assert game.turn is PieceColor.WHITE
    assert game.move_count == 0
    assert game.dragging is None
    assert game.dragged_piece is None


def test_press_picks_up_own_piece():
    game = Game()
    game.press(*centre((4, 6)), TILE)
    assert game.dragging == (4, 6)
    assert game.dragged_piece == Piece(PieceType.PAWN, PieceColor.WHITE)


def test_press_ignores_opponent_piece_and_empty_square():
    game = Game()
    game.press(*centre((4, 1)), TILE)
    assert game.dragging is None
    game.press(*centre((4, 4)), TILE)
    assert game.dragging is None


def test_legal_move_changes_turn():
    game = Game()
    game.press(*centre((4, 6)), TILE)
    assert game.release(*centre((4, 4)), TILE) is True
    assert game.move_count == 1
    assert game.turn is PieceColor.BLACK
    assert game.board.get_node((4, 4)).piece == Piece(PieceType.PAWN, PieceColor.WHITE)
    assert game.board.get_node((4, 6)).piece is None
    assert game.dragging is None
    assert game.dragged_piece is None


def test_illegal_move_is_rejected():
    game = Game()
    game.press(*centre((4, 6)), TILE)
    assert game.release(*centre((4, 3)), TILE) is False
    assert game.move_count == 0
    assert game.turn is PieceColor.WHITE
    assert game.board.get_node((4, 3)).piece is None
    assert game.dragging is None


def test_release_on_same_square_does_nothing():
    game = Game()
    game.press(*centre((1, 7)), TILE)
    assert game.release(*centre((1, 7)), TILE) is False
    assert game.move_count == 0
    assert game.dragged_piece is None


def test_release_without_press():
    game = Game()
    assert game.release(*centre((4, 4)), TILE) is False
    assert game.move_count == 0


def test_sides_alternate():
    game = Game()
    game.press(*centre((4, 6)), TILE)
    game.release(*centre((4, 4)), TILE)
    game.press(*centre((4, 6 - 2)), TILE)
    assert game.dragging is None
    game.press(*centre((4, 1)), TILE)
    assert game.release(*centre((4, 3)), TILE) is True
    assert game.turn is PieceColor.WHITE
    assert game.move_count == 2