# oxchess

A small two-player chess board for the desktop. Both players share one
window of 8×8 squares. They take turns and move pieces by dragging them
with the mouse. White moves first.

## Installing

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Playing

```
oxchess
```

This opens a window that shows the standard starting position. With the
default tile size of 90 pixels the window is 720×720. To move, press the
left mouse button on one of your own pieces, drag it, and release it over
the target square. The move is made only if that piece may go there. If
it may not, the board stays as it was. After a legal move the turn passes
to the other colour.

Options:

- `--assets DIR`: the directory that holds the piece images. The default
  is `assets` in the current directory.
- `--tile-size N`: the size of one square in pixels. It must be a
  positive whole number. The default is 90.

The asset directory must hold one PNG for every colour and piece, named
`<colour>-<piece>.png`, for example `white-pawn.png` or
`black-knight.png`. The colours are `white` and `black`. The pieces are
`pawn`, `knight`, `bishop`, `rook`, `queen` and `king`. If any of these
files is missing, the command stops with `FileNotFoundError`.

### Movement rules

- Pawns step one square forward. From their starting row they may step
  two squares when both squares are empty. They capture one square
  diagonally forward.
- Knights jump in an L shape. Kings step one square in any direction.
- Bishops, rooks and queens slide until they reach the edge of the board
  or a piece. They capture the first enemy piece in their way.

### What it does not do

The game does not enforce check, checkmate, castling, en passant or
promotion. A king can be captured like any other piece. The game never
declares a winner, and it does not save or load games. It has no clock
and no computer opponent.

## Using the library

The game logic can be used without opening a window:

- `oxchess.board.Board` holds the 64 squares as `Node` objects. Each
  node has a `vector` (its square), a `piece` (or `None`) and `edges`.
  The edges are `Edge` objects that link the node to its neighbouring
  squares.
  - `Board.new_standard()` sets up the starting position.
  - `Board.new_empty()` gives an empty board.
  - Squares are addressed as `(file, rank)`, with `(0, 0)` in the
    top-left corner. Black starts on ranks 0 and 1, and White on ranks 6
    and 7.
  - `get_node`, `set_piece`, `remove_piece` and `move_piece` read and
    change squares. `get_node` returns `None` for a square off the board.
    `move_piece` returns whether a piece was moved.
- `oxchess.pieces.Piece` pairs a `PieceType` with a `PieceColor`.
  `Piece.generate_legal_moves(origin, board)` lists the squares the piece
  can reach from `origin`.
- `oxchess.game.Game` tracks the side to move (`turn`, a `PieceColor`),
  `move_count`, and the piece being dragged.
  - `Game.press(x, y, tile_size)` picks up a piece of the side to move.
  - `Game.release(x, y, tile_size)` drops it and returns `True` when that
    made a legal move.
  - `tile_at(x, y, tile_size)` turns pixel coordinates into a board
    square.
- `oxchess.render` draws with pygame: `draw_grid`, `draw_pieces`,
  `load_sprites` and `sprite_path`.