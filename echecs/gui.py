"""A Tk window that shows the board and forwards clicks to the game."""

from __future__ import annotations

import tkinter as tk
from typing import Optional, Sequence

from .board import SIZE
from .game import WHITE_TURN_LABEL, GameManager, move_targets
from .pieces import Bishop, King, Knight, MoveKind, Pawn, Piece, Queen, Rook

LIGHT_SQUARE = "#d2b48c"
DARK_SQUARE = "#654321"
SQUARE_SIZE = 90

_MOVE_FILL = "#add8e6"
_MOVE_BORDER = "#87cefa"
_CAPTURE_FILL = "#ff4500"
_CAPTURE_BORDER = "#b22222"
_WINDOW_BACKGROUND = "#303030"
_LABEL_COLOUR = "#fafafa"

_GLYPHS: dict[tuple[type[Piece], bool], str] = {
    (King, True): "\u2654",
    (Queen, True): "\u2655",
    (Rook, True): "\u2656",
    (Bishop, True): "\u2657",
    (Knight, True): "\u2658",
    (Pawn, True): "\u2659",
    (King, False): "\u265a",
    (Queen, False): "\u265b",
    (Rook, False): "\u265c",
    (Bishop, False): "\u265d",
    (Knight, False): "\u265e",
    (Pawn, False): "\u265f",
}


def square_color(row: int, column: int) -> str:
    """Return the plain colour of a square."""
    return LIGHT_SQUARE if (row + column) % 2 == 0 else DARK_SQUARE


def _piece_glyph(piece: Optional[Piece]) -> str:
    if piece is None:
        return ""
    return _GLYPHS.get((type(piece), piece.is_white), "?")


class ChessWindow:
    """An 8x8 grid of buttons under a label naming the side to move."""

    def __init__(self, root: tk.Misc, game: GameManager) -> None:
        self.game = game
        self.frame = tk.Frame(root, bg=_WINDOW_BACKGROUND)
        self.frame.pack()

        self._turn_label = tk.Label(
            self.frame,
            text=WHITE_TURN_LABEL,
            font=("Times New Roman", 30, "bold italic"),
            fg=_LABEL_COLOUR,
            bg=_WINDOW_BACKGROUND,
        )
        self._turn_label.grid(row=0, column=0, columnspan=SIZE)

        self._buttons: list[list[tk.Button]] = []
        for row in range(SIZE):
            button_row = []
            for column in range(SIZE):
                cell = tk.Frame(self.frame, width=SQUARE_SIZE, height=SQUARE_SIZE)
                cell.pack_propagate(False)
                cell.grid(row=row + 1, column=column)
                button = tk.Button(
                    cell,
                    font=("DejaVu Sans", 48),
                    relief=tk.FLAT,
                    borderwidth=0,
                    command=lambda r=row, c=column: self.game.on_square_clicked(r, c),
                )
                button.pack(fill=tk.BOTH, expand=True)
                button_row.append(button)
            self._buttons.append(button_row)
        self._paint_plain()

    def _paint_plain(self) -> None:
        for row, button_row in enumerate(self._buttons):
            for column, button in enumerate(button_row):
                colour = square_color(row, column)
                button.configure(
                    bg=colour,
                    activebackground=colour,
                    highlightthickness=0,
                )

    def set_turn_label(self, text: str) -> None:
        self._turn_label.configure(text=text)

    def update_square(self, row: int, column: int) -> None:
        piece = self.game.board.get_piece(row, column)
        self._buttons[row][column].configure(text=_piece_glyph(piece))

    def highlight_moves(self, row: int, column: int) -> None:
        """Colour the squares the piece on (row, column) can reach."""
        if self.game.board.get_piece(row, column) is None:
            return
        self._paint_plain()
        for (target_row, target_column), kind in move_targets(self.game.board, row, column).items():
            if kind is MoveKind.CAPTURE:
                fill, border = _CAPTURE_FILL, _CAPTURE_BORDER
            else:
                fill, border = _MOVE_FILL, _MOVE_BORDER
            self._buttons[target_row][target_column].configure(
                bg=fill,
                activebackground=fill,
                highlightthickness=3,
                highlightbackground=border,
                highlightcolor=border,
            )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    root = tk.Tk()
    root.title("jeu d'echec")
    root.configure(bg=_WINDOW_BACKGROUND)
    game = GameManager()
    window = ChessWindow(root, game)
    game.start(window)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())