import pytest

from echecs.board import SIZE
from echecs.game import (
    BLACK_TURN_LABEL,
    WHITE_TURN_LABEL,
    GameManager,
    move_targets,
)
from echecs.pieces import Bishop, King, Knight, MoveKind, Pawn, Queen, Rook


class RecordingView:
    def __init__(self):
        self.labels = []
        self.updated = []
        self.highlighted = []

    def set_turn_label(self, text):
        self.labels.append(text)

    def update_square(self, row, column):
        self.updated.append((row, column))

    def highlight_moves(self, row, column):
        self.highlighted.append((row, column))


@pytest.fixture
def started():
    game = GameManager()
    view = RecordingView()
    game.start(view)
    view.labels.clear()
    view.updated.clear()
    return game, view


@pytest.mark.parametrize("column", range(SIZE))
def test_pawns_start_on_second_ranks(column):
    game = GameManager()
    white = game.board.get_piece(6, column)
    black = game.board.get_piece(1, column)
    assert isinstance(white, Pawn) and white.is_white
    assert isinstance(black, Pawn) and not black.is_white


def test_back_ranks():
    game = GameManager()
    expected = [Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook]
    assert [type(game.board.get_piece(7, c)) for c in range(SIZE)] == expected
    assert [type(game.board.get_piece(0, c)) for c in range(SIZE)] == expected
    assert all(game.board.get_piece(7, c).is_white for c in range(SIZE))
    assert not any(game.board.get_piece(0, c).is_white for c in range(SIZE))


def test_middle_is_empty():
    game = GameManager()
    assert not any(game.board.is_occupied(r, c) for r in range(2, 6) for c in range(SIZE))


def test_white_moves_first():
    game = GameManager()
    assert game.white_to_move is True
    assert game.turn_label == WHITE_TURN_LABEL


def test_start_draws_every_square():
    game = GameManager()
    view = RecordingView()
    game.start(view)
    assert view.labels == [WHITE_TURN_LABEL]
    assert sorted(view.updated) == [(r, c) for r in range(SIZE) for c in range(SIZE)]


def test_clicking_opponent_piece_selects_nothing(started):
    game, view = started
    game.on_square_clicked(1, 0)
    assert game.selected is None
    assert view.highlighted == []


def test_clicking_empty_square_selects_nothing(started):
    game, view = started
    game.on_square_clicked(4, 4)
    assert game.selected is None
    assert view.highlighted == []


def test_select_and_move(started):
    game, view = started
    game.on_square_clicked(6, 4)
    assert game.selected == (6, 4)
    assert view.highlighted == [(6, 4)]

    pawn = game.board.get_piece(6, 4)
    game.on_square_clicked(4, 4)
    assert game.board.get_piece(4, 4) is pawn
    assert game.board.get_piece(6, 4) is None
    assert (pawn.row, pawn.column) == (4, 4)
    assert game.white_to_move is False
    assert view.labels == [BLACK_TURN_LABEL]
    assert view.updated == [(6, 4), (4, 4)]
    assert game.selected is None


def test_invalid_move_clears_selection(started):
    game, view = started
    game.on_square_clicked(6, 4)
    game.on_square_clicked(3, 4)
    assert game.selected is None
    assert game.white_to_move is True
    assert isinstance(game.board.get_piece(6, 4), Pawn)
    assert view.labels == []
    assert view.updated == []


def test_turns_alternate_and_capture(started):
    game, view = started
    for square in [(6, 4), (4, 4), (1, 3), (3, 3)]:
        game.on_square_clicked(*square)
    assert game.white_to_move is True
    black_pawn = game.board.get_piece(3, 3)
    assert move_targets(game.board, 4, 4)[(3, 3)] is MoveKind.CAPTURE

    game.on_square_clicked(4, 4)
    game.on_square_clicked(3, 3)
    taker = game.board.get_piece(3, 3)
    assert taker is not black_pawn
    assert taker.is_white
    assert view.labels == [BLACK_TURN_LABEL, WHITE_TURN_LABEL, BLACK_TURN_LABEL]


def test_works_without_view():
    game = GameManager()
    game.on_square_clicked(7, 6)
    game.on_square_clicked(5, 5)
    assert isinstance(game.board.get_piece(5, 5), Knight)
    assert game.white_to_move is False


def test_move_targets_empty_square():
    game = GameManager()
    assert move_targets(game.board, 4, 4) == {}


def test_move_targets_knight_at_start():
    game = GameManager()
    assert move_targets(game.board, 7, 1) == {(5, 0): MoveKind.MOVE, (5, 2): MoveKind.MOVE}


def test_move_targets_blocked_pieces():
    game = GameManager()
    for column in (0, 2, 3, 4):
        assert move_targets(game.board, 7, column) == {}


def test_move_targets_agree_with_move_valid():
    game = GameManager()
    for square in [(6, 4), (4, 4), (1, 3), (3, 3)]:
        game.on_square_clicked(*square)
    for row in range(SIZE):
        for column in range(SIZE):
            piece = game.board.get_piece(row, column)
            if piece is None:
                continue
            for (r, c) in move_targets(game.board, row, column):
                assert game.board.move_valid(row, column, r, c)