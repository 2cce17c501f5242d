"""Chess pieces and the squares each one may reach."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .board import Board


class MoveKind(enum.Enum):
    """How a possible move lands: on an empty square or on an opponent."""

    MOVE = "move"
    CAPTURE = "capture"


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _path_clear(board: Board, row: int, column: int, new_row: int, new_column: int) -> bool:
    """Check the squares strictly between two squares on a line or diagonal."""
    row_step = _sign(new_row - row)
    col_step = _sign(new_column - column)
    row, column = row + row_step, column + col_step
    while (row, column) != (new_row, new_column):
        if board.get_piece(row, column) is not None:
            return False
        row, column = row + row_step, column + col_step
    return True


class Piece(ABC):
    """A piece of one colour, drawn with an image."""

    def __init__(self, is_white: bool, image_path: str = "", row: int = 0, column: int = 0) -> None:
        self.is_white = is_white
        self.image_path = image_path
        self.row = row
        self.column = column

    @abstractmethod
    def possible_move(
        self,
        current_row: int,
        current_column: int,
        new_row: int,
        new_column: int,
        board: Board,
    ) -> Optional[MoveKind]:
        """Return how the move lands, or None if the piece cannot make it."""

    def move_to(self, row: int, column: int) -> None:
        self.row = row
        self.column = column

    def _landing(self, board: Board, row: int, column: int) -> Optional[MoveKind]:
        dest = board.get_piece(row, column)
        if dest is None:
            return MoveKind.MOVE
        if dest.is_white != self.is_white:
            return MoveKind.CAPTURE
        return None

    def __repr__(self) -> str:
        colour = "white" if self.is_white else "black"
        return f"{type(self).__name__}({colour}, row={self.row}, column={self.column})"


class Pawn(Piece):
    def possible_move(self, current_row, current_column, new_row, new_column, board):
        direction = -1 if self.is_white else 1
        start_row = 6 if self.is_white else 1
        target = board.get_piece(new_row, new_column)

        if new_column == current_column and new_row == current_row + direction:
            return MoveKind.MOVE if target is None else None
        if (
            new_column == current_column
            and current_row == start_row
            and new_row == current_row + 2 * direction
        ):
            if target is None and board.get_piece(current_row + direction, current_column) is None:
                return MoveKind.MOVE
            return None
        if abs(new_column - current_column) == 1 and new_row == current_row + direction:
            if target is not None and target.is_white != self.is_white:
                return MoveKind.CAPTURE
        return None


class Rook(Piece):
    def possible_move(self, current_row, current_column, new_row, new_column, board):
        if current_row != new_row and current_column != new_column:
            return None
        if not _path_clear(board, current_row, current_column, new_row, new_column):
            return None
        return self._landing(board, new_row, new_column)


class Bishop(Piece):
    def possible_move(self, current_row, current_column, new_row, new_column, board):
        distance = abs(new_row - current_row)
        if distance == 0 or distance != abs(new_column - current_column):
            return None
        if not _path_clear(board, current_row, current_column, new_row, new_column):
            return None
        return self._landing(board, new_row, new_column)


class Knight(Piece):
    def possible_move(self, current_row, current_column, new_row, new_column, board):
        jump = {abs(new_row - current_row), abs(new_column - current_column)}
        if jump != {1, 2}:
            return None
        return self._landing(board, new_row, new_column)


class Queen(Piece):
    def possible_move(self, current_row, current_column, new_row, new_column, board):
        d_row = abs(new_row - current_row)
        d_col = abs(new_column - current_column)
        if d_row == 0 and d_col == 0:
            return None
        if d_row != d_col and current_row != new_row and current_column != new_column:
            return None
        if not _path_clear(board, current_row, current_column, new_row, new_column):
            return None
        return self._landing(board, new_row, new_column)


class King(Piece):
    def possible_move(self, current_row, current_column, new_row, new_column, board):
        if abs(current_row - new_row) > 1 or abs(current_column - new_column) > 1:
            return None
        return self._landing(board, new_row, new_column)