import random

import pytest

from gridsweeper.board import (
    MINE,
    Board,
    board_from_mines,
    choose_mine_positions,
    default_mine_count,
    generate_board,
)


def test_default_mine_count_for_twenty_square():
    assert default_mine_count(20, 20) == 80


def test_default_mine_count_rejects_empty_board():
    with pytest.raises(ValueError):
        default_mine_count(0, 5)


def test_centre_mine_render():
    board = board_from_mines(3, 3, [(1, 1)])
    assert board.render() == "111\n1B1\n111"


def test_render_blank_for_zero():
    board = board_from_mines(1, 4, [(0, 0)])
    assert board.render() == "B1  "


def test_is_mine_and_value():
    board = board_from_mines(3, 3, [(1, 1)])
    assert board.is_mine(1, 1)
    assert not board.is_mine(0, 0)
    assert board.value(1, 1) == MINE


def test_mines_listed_in_row_major_order():
    board = board_from_mines(4, 5, [(3, 4), (0, 2), (2, 0)])
    assert board.mines() == [(0, 2), (2, 0), (3, 4)]


def test_neighbours_of_corner_and_centre():
    board = board_from_mines(3, 3, [])
    assert board.neighbours(0, 0) == [(0, 1), (1, 0), (1, 1)]
    assert len(board.neighbours(1, 1)) == 8
    assert (1, 1) not in board.neighbours(1, 1)


def test_value_out_of_range_raises():
    board = board_from_mines(2, 2, [])
    with pytest.raises(IndexError):
        board.value(2, 0)
    with pytest.raises(IndexError):
        board.neighbours(-1, 0)


def test_board_from_mines_rejects_outside_and_duplicate():
    with pytest.raises(ValueError):
        board_from_mines(2, 2, [(2, 2)])
    with pytest.raises(ValueError):
        board_from_mines(2, 2, [(0, 0), (0, 0)])


def test_board_rejects_mismatched_cells():
    with pytest.raises(ValueError):
        Board(2, 2, ((0, 0),))


def test_choose_mine_positions_distinct_and_in_range():
    positions = choose_mine_positions(30, 6, 7, random.Random(3))
    assert len(positions) == 30
    assert len(set(positions)) == 30
    assert all(0 <= p < 42 for p in positions)


def test_choose_mine_positions_whole_board():
    positions = choose_mine_positions(12, 3, 4, random.Random(1))
    assert sorted(positions) == list(range(12))


def test_choose_mine_positions_errors():
    with pytest.raises(ValueError):
        choose_mine_positions(13, 3, 4, random.Random(1))
    with pytest.raises(ValueError):
        choose_mine_positions(-1, 3, 4, random.Random(1))


def test_generate_board_is_deterministic_for_seed():
    first = generate_board(15, 30, rng=random.Random(42))
    second = generate_board(15, 30, rng=random.Random(42))
    assert first == second


@pytest.mark.parametrize("rows,columns,seed", [(20, 20, 0), (15, 30, 7), (30, 40, 11)])
def test_generated_board_counts_are_consistent(rows, columns, seed):
    board = generate_board(rows, columns, rng=random.Random(seed))
    assert len(board.mines()) == default_mine_count(rows, columns)
    for (r, c), cell in board:
        if cell != MINE:
            around = sum(board.is_mine(nr, nc) for nr, nc in board.neighbours(r, c))
            assert cell == around


def test_generate_board_explicit_mine_count():
    board = generate_board(5, 5, 3, random.Random(9))
    assert len(board.mines()) == 3
    assert (board.rows, board.columns) == (5, 5)