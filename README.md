# echecs

A two-player chess game: an 8×8 board, the movement rules of each piece,
and a Tk window where the players take turns by clicking squares.

## Installing

```
pip install .
```

The window uses Tk (`tkinter`), which ships with most Python installations.
The package has no other dependencies.

## Playing

```
echecs
```

This opens a window titled "jeu d'echec" showing the board, drawn with
Unicode chess symbols, and a label naming the side to move
("Tour des blancs" or "Tour des noirs"). White moves first.

- Click one of your own pieces to select it. The squares it can reach are
  highlighted: blue for a free square, red for a capture. Clicking an empty
  square or an opponent's piece while nothing is selected does nothing.
- Click a destination square. If the move is allowed the piece moves and the
  turn passes to the other side; otherwise the selection is dropped and you
  pick again.

Rows are numbered 0 to 7 from the top (black's back rank) to the bottom
(white's back rank); columns 0 to 7 from left to right.

## Rules

Each piece moves and captures in its usual pattern:

- a pawn steps one square forward onto an empty square, two squares from
  its starting row if both squares are empty, and captures one square
  diagonally forward;
- rooks, bishops and queens slide along their lines and may not pass over
  any piece;
- knights jump;
- kings step one square in any direction.

A move onto a piece of the same colour is refused.

## What it does not do

The game knows only how single pieces move. There is no check, checkmate or
stalemate, so the game never ends on its own; there is no castling, en
passant or promotion. There is no computer opponent, no move history or
undo, and games cannot be saved or loaded.

## Using the rules from code

The board and pieces can be used without the window.

```python
from echecs.board import Board
from echecs.pieces import Rook, Pawn

board = Board()
rook = Rook(True, "white_rook.png", 7, 0)
board.place(rook, 7, 0)
board.place(Pawn(False, "pawn_black.png", 1, 0), 1, 0)

board.move_valid(7, 0, 1, 0)   # True: the rook can take the pawn
board.move(7, 0, 1, 0)
board.get_piece(1, 0) is rook  # True
board.is_occupied(7, 0)        # False
```

`Board` methods raise `IndexError` for a square off the board.

`Piece.possible_move(current_row, current_column, new_row, new_column, board)`
returns `MoveKind.MOVE`, `MoveKind.CAPTURE`, or `None` when the piece cannot
make the move. The piece classes are `Pawn`, `Rook`, `Bishop`, `Knight`,
`Queen` and `King`, each built as `Piece(is_white, image_path, row, column)`.

`echecs.game.GameManager` sets up the standard starting position and runs the
turn-by-turn selection logic through `on_square_clicked(row, column)`. Its
`start(view)` attaches any object that provides the `GameView` methods
`set_turn_label`, `update_square` and `highlight_moves`, so it can drive a
display other than `echecs.gui.ChessWindow`.
`echecs.game.move_targets(board, row, column)` returns a dict mapping each
square the piece at that position can reach to its `MoveKind`.