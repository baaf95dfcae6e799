"""Tests for the Board grid: gravity, bounds and line scanning."""

from connect4.game.board import Board
from connect4.utils import ROWS, COLS, Piece


def test_pieces_fall_to_the_bottom_row():
    board = Board()
    assert board.drop_piece(3, Piece.RED) == ROWS - 1
    assert board.drop_piece(3, Piece.YELLOW) == ROWS - 2
    assert board.get_piece(ROWS - 1, 3) == Piece.RED
    assert board.get_piece(ROWS - 2, 3) == Piece.YELLOW
    assert board.count_pieces() == 2


def test_out_of_range_reads_are_empty_and_do_not_wrap():
    board = Board()
    board.drop_piece(COLS - 1, Piece.RED)
    # (-1, -1) would wrap to the bottom-right cell with plain numpy indexing
    assert board.get_piece(-1, -1) == Piece.EMPTY
    assert board.get_piece(ROWS, 0) == Piece.EMPTY
    assert board.get_piece(0, COLS) == Piece.EMPTY
    assert board.get_piece(100, -100) == Piece.EMPTY


def test_full_and_out_of_range_columns():
    board = Board()
    for i in range(ROWS):
        assert not board.is_column_full(0)
        board.drop_piece(0, Piece.RED if i % 2 == 0 else Piece.YELLOW)
    assert board.is_column_full(0)
    assert board.landing_row(0) is None
    assert board.drop_piece(0, Piece.RED) is None
    assert board.is_column_full(-1)
    assert board.is_column_full(COLS)


def test_scan_line_orders_from_negative_to_positive_end():
    board = Board()
    for col in (0, 1, 2, 4):
        board.drop_piece(col, Piece.RED)
    board.drop_piece(3, Piece.RED)

    assert board.scan_line(ROWS - 1, 3, 0, 1) == [
        (5, 0), (5, 1), (5, 2), (5, 3), (5, 4),
    ]
    assert board.scan_line(ROWS - 1, 3, 1, 0) == [(5, 3)]


def test_scan_line_walks_at_most_three_steps_each_side():
    board = Board()
    for col in range(COLS):
        board.drop_piece(col, Piece.YELLOW)
    # anchor at the left edge sees itself plus three to the right
    assert len(board.scan_line(ROWS - 1, 0, 0, 1)) == 4
    # anchor in the middle sees three either side
    assert len(board.scan_line(ROWS - 1, 3, 0, 1)) == 7


def test_clear_and_state_copy():
    board = Board()
    board.drop_piece(2, Piece.RED)
    state = board.get_state()
    state[ROWS - 1, 2] = 0
    assert board.get_piece(ROWS - 1, 2) == Piece.RED

    board.clear()
    assert board.count_pieces() == 0
