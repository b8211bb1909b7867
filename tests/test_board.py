from __future__ import annotations

import pytest

from blockfall.board import Board, Cell, HEIGHT, WIDTH


LOCKED = Cell(active=False, color=1)


def _fill_row(board: Board, row: int, skip: tuple[int, ...] = ()) -> None:
    for col in range(board.width):
        if col not in skip:
            board.set_cell(row, col, LOCKED)


def test_new_board_is_empty_with_standard_size() -> None:
    board = Board()
    assert (board.width, board.height) == (WIDTH, HEIGHT) == (10, 20)
    assert board.occupied_count() == 0
    assert board.get_cell(0, 0) is None
    assert board.x_midpoint == 5


def test_cell_access_out_of_bounds_raises() -> None:
    board = Board()
    with pytest.raises(IndexError):
        board.get_cell(20, 0)
    with pytest.raises(IndexError):
        board.set_cell(0, -1, LOCKED)
    assert board.is_empty(-1, 0) is False


def test_invalid_dimensions_rejected() -> None:
    with pytest.raises(ValueError):
        Board(0, 20)


def test_move_active_replaces_cells() -> None:
    board = Board()
    board.place_active([(0, 0), (1, 0)], color=3)
    board.move_active([(0, 0), (1, 0)], [(1, 0), (2, 0)], color=3)
    assert board.active_cells() == [(1, 0), (2, 0)]
    assert board.get_cell(0, 2) == Cell(active=True, color=3)
    assert board.get_cell(0, 0) is None


def test_move_active_off_board_leaves_board_untouched() -> None:
    board = Board()
    board.place_active([(0, 0)], color=3)
    with pytest.raises(IndexError):
        board.move_active([(0, 0)], [(0, 20)], color=3)
    assert board.active_cells() == [(0, 0)]


def test_lock_cells_keeps_colour() -> None:
    board = Board()
    board.place_active([(4, 7)], color=5)
    board.lock_cells([(4, 7)])
    assert board.get_cell(7, 4) == Cell(active=False, color=5)
    assert board.active_cells() == []


def test_clear_lines_without_full_row_returns_false() -> None:
    board = Board()
    _fill_row(board, 19, skip=(3,))
    assert board.clear_lines() is False
    assert board.occupied_count() == 9


def test_single_full_row_shifts_rows_above_by_one() -> None:
    board = Board()
    _fill_row(board, 19)
    board.set_cell(18, 0, Cell(active=False, color=2))
    board.set_cell(10, 3, Cell(active=False, color=4))

    assert board.clear_lines() is True

    assert board.get_cell(19, 0) == Cell(active=False, color=2)
    assert board.get_cell(11, 3) == Cell(active=False, color=4)
    assert board.get_cell(10, 3) is None
    assert board.occupied_count() == 2
    assert board.row_is_empty(0)


def test_rows_below_a_cleared_row_are_unaffected() -> None:
    board = Board()
    _fill_row(board, 15)
    board.set_cell(19, 6, LOCKED)
    board.set_cell(14, 1, LOCKED)

    assert board.clear_lines() is True

    assert board.get_cell(19, 6) == LOCKED
    assert board.get_cell(15, 1) == LOCKED
    assert board.occupied_count() == 2


def test_two_full_rows_drop_everything_above_by_two() -> None:
    board = Board()
    _fill_row(board, 18)
    _fill_row(board, 19)
    board.set_cell(17, 2, LOCKED)
    board.set_cell(5, 7, LOCKED)

    assert board.clear_full_rows() == 2

    assert board.get_cell(19, 2) == LOCKED
    assert board.get_cell(7, 7) == LOCKED
    assert board.occupied_count() == 2
    assert board.row_is_empty(0) and board.row_is_empty(1)


def test_separated_full_rows_cascade() -> None:
    board = Board()
    _fill_row(board, 10)
    _fill_row(board, 19)
    board.set_cell(15, 4, LOCKED)
    board.set_cell(5, 4, LOCKED)

    assert board.clear_full_rows() == 2

    assert board.get_cell(16, 4) == LOCKED
    assert board.get_cell(7, 4) == LOCKED
    assert board.occupied_count() == 2
