"""Game flow: the starting position, turns and square selection."""

from __future__ import annotations

from typing import Optional, Protocol

from .board import SIZE, Board
from .pieces import Bishop, King, Knight, MoveKind, Pawn, Piece, Queen, Rook

WHITE_TURN_LABEL = "Tour des blancs"
BLACK_TURN_LABEL = "Tour des noirs"

_BACK_RANK: tuple[type[Piece], ...] = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)

_IMAGES: dict[tuple[type[Piece], bool], str] = {
    (Pawn, True): "pawn_white.png",
    (Pawn, False): "pawn_black.png",
    (Rook, True): "white_rook.png",
    (Rook, False): "black_rook.png",
    (Bishop, True): "white_bishop.png",
    (Bishop, False): "black_bishop.png",
    (Knight, True): "white_knight.png",
    (Knight, False): "black_knight.png",
    (Queen, True): "white_queen.png",
    (Queen, False): "black_queen.png",
    (King, True): "white_king.png",
    (King, False): "black_king.png",
}


class GameView(Protocol):
    """What the game needs from whatever displays it."""

    def set_turn_label(self, text: str) -> None:
        """Show whose turn it is."""

    def update_square(self, row: int, column: int) -> None:
        """Redraw one square from the board."""

    def highlight_moves(self, row: int, column: int) -> None:
        """Mark the squares the piece on a square can reach."""


def move_targets(board: Board, row: int, column: int) -> dict[tuple[int, int], MoveKind]:
    """Map every square the piece on (row, column) can reach to how it lands there."""
    piece = board.get_piece(row, column)
    if piece is None:
        return {}
    targets = {}
    for new_row in range(SIZE):
        for new_column in range(SIZE):
            kind = piece.possible_move(row, column, new_row, new_column, board)
            if kind is not None:
                targets[(new_row, new_column)] = kind
    return targets


def _new_piece(kind: type[Piece], is_white: bool, row: int, column: int) -> Piece:
    return kind(is_white, _IMAGES[(kind, is_white)], row, column)


class GameManager:
    """Holds the board and turn, and turns square clicks into moves."""

    def __init__(self) -> None:
        self.board = Board()
        self.white_to_move = True
        self.selected: Optional[tuple[int, int]] = None
        self.view: Optional[GameView] = None

        for column, kind in enumerate(_BACK_RANK):
            self.board.place(_new_piece(Pawn, True, 6, column), 6, column)
            self.board.place(_new_piece(Pawn, False, 1, column), 1, column)
            self.board.place(_new_piece(kind, True, 7, column), 7, column)
            self.board.place(_new_piece(kind, False, 0, column), 0, column)

    @property
    def turn_label(self) -> str:
        return WHITE_TURN_LABEL if self.white_to_move else BLACK_TURN_LABEL

    def start(self, view: GameView) -> None:
        """Attach a view and draw the whole board on it."""
        self.view = view
        view.set_turn_label(self.turn_label)
        for row in range(SIZE):
            for column in range(SIZE):
                view.update_square(row, column)

    def on_square_clicked(self, row: int, column: int) -> None:
        """Select a piece of the side to move, or try to move the selected one."""
        if self.selected is None:
            piece = self.board.get_piece(row, column)
            if piece is not None and piece.is_white == self.white_to_move:
                self.selected = (row, column)
                if self.view is not None:
                    self.view.highlight_moves(row, column)
            return

        source_row, source_column = self.selected
        self.selected = None
        if self.board.move_valid(source_row, source_column, row, column):
            self.board.move(source_row, source_column, row, column)
            self.white_to_move = not self.white_to_move
            if self.view is not None:
                self.view.set_turn_label(self.turn_label)
                self.view.update_square(source_row, source_column)
                self.view.update_square(row, column)