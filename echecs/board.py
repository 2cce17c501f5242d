"""The 8x8 board that holds the pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .pieces import Piece

SIZE = 8


def _check_square(row: int, column: int) -> None:
    if not (0 <= row < SIZE and 0 <= column < SIZE):
        raise IndexError(f"square ({row}, {column}) is off the board")


class Board:
    """An 8x8 grid of squares, each empty or holding a piece."""

    def __init__(self) -> None:
        self._grid: list[list[Optional[Piece]]] = [[None] * SIZE for _ in range(SIZE)]

    def get_piece(self, row: int, column: int) -> Optional[Piece]:
        """Return the piece on a square, or None if it is empty."""
        _check_square(row, column)
        return self._grid[row][column]

    def place(self, piece: Optional[Piece], row: int, column: int) -> None:
        """Put a piece (or None) on a square, replacing what was there."""
        _check_square(row, column)
        self._grid[row][column] = piece

    def is_occupied(self, row: int, column: int) -> bool:
        return self.get_piece(row, column) is not None

    def move_valid(
        self, current_row: int, current_column: int, new_row: int, new_column: int
    ) -> bool:
        """Tell whether the piece on the first square may go to the second."""
        source = self.get_piece(current_row, current_column)
        target = self.get_piece(new_row, new_column)
        if source is None:
            return False
        if target is not None and target.is_white == source.is_white:
            return False
        return (
            source.possible_move(current_row, current_column, new_row, new_column, self)
            is not None
        )

    def move(
        self, current_row: int, current_column: int, new_row: int, new_column: int
    ) -> None:
        """Move whatever is on the first square to the second, emptying the first."""
        piece = self.get_piece(current_row, current_column)
        _check_square(new_row, new_column)
        self._grid[new_row][new_column] = piece
        self._grid[current_row][current_column] = None
        if piece is not None:
            piece.move_to(new_row, new_column)