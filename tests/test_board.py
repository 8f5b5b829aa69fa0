"""
Tests for bitboard encoding and BoardState.

Usage:
    pytest tests/test_board.py
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from blockblast.solver import BoardState, encode, decode
from blockblast.solver.board import FULL_BOARD, cell_bit, col_mask, row_mask, popcount


def empty_board():
    return [[False] * 8 for _ in range(8)]


def test_encode_sets_row_major_bits():
    """Cell (r, c) maps to bit r*8 + c."""
    grid = empty_board()
    grid[0][0] = True
    grid[1][2] = True
    grid[7][7] = True

    assert encode(grid) == (1 << 0) | (1 << 10) | (1 << 63)


def test_encode_empty_and_full():
    assert encode(empty_board()) == 0
    assert encode([[True] * 8 for _ in range(8)]) == FULL_BOARD


def test_round_trip_random_grids():
    """decode(encode(g)) == g for random grids."""
    rng = np.random.default_rng(1234)
    for _ in range(50):
        grid = rng.random((8, 8)) < 0.5
        as_lists = grid.tolist()
        assert decode(encode(as_lists)) == as_lists


def test_decode_returns_plain_bools():
    grid = decode(1 << 9)
    assert grid[1][1] is True
    assert grid[0][0] is False
    assert len(grid) == 8 and all(len(row) == 8 for row in grid)


def test_encode_accepts_numpy_and_ints():
    grid = np.zeros((8, 8), dtype=int)
    grid[2, 3] = 1
    assert encode(grid) == 1 << 19


@pytest.mark.parametrize("shape", [(7, 8), (8, 7), (9, 9), (5, 5)])
def test_encode_rejects_wrong_shape(shape):
    with pytest.raises(ValueError):
        encode(np.zeros(shape, dtype=bool))


def test_encode_rejects_ragged_rows():
    grid = empty_board()
    grid[3] = [False] * 6
    with pytest.raises(ValueError):
        encode(grid)


def test_line_masks():
    assert row_mask(0) == 0xFF
    assert row_mask(7) == 0xFF << 56
    assert col_mask(0) == 0x0101010101010101
    assert col_mask(7) == 0x8080808080808080
    assert popcount(row_mask(3)) == 8
    assert popcount(col_mask(5)) == 8
    assert row_mask(2) & col_mask(4) == cell_bit(2, 4)


def test_board_state_helpers():
    """BoardState wraps bits with grid helpers."""
    grid = empty_board()
    grid[0][1] = True
    grid[4][4] = True
    board = BoardState.from_grid(grid)

    assert board.count_cells() == 2
    assert board.get_cell(0, 1) is True
    assert board.get_cell(0, 0) is False
    assert board.get_cell(9, 9) is False
    assert board.to_grid() == grid
    assert not board.is_empty
    assert BoardState.empty().is_empty


def test_board_state_diff_and_equality():
    board = BoardState.from_bits(cell_bit(0, 0) | cell_bit(3, 3))
    other = BoardState.from_bits(cell_bit(3, 3) | cell_bit(7, 0))

    assert board.diff(other) == [(0, 0), (7, 0)]
    assert board == BoardState.from_bits(board.bits)
    assert hash(board) == hash(BoardState.from_bits(board.bits))
    with pytest.raises(TypeError):
        board.diff(board.bits)


def test_board_state_rejects_out_of_range_bits():
    with pytest.raises(ValueError):
        BoardState.from_bits(1 << 64)
    with pytest.raises(ValueError):
        BoardState.from_bits(-1)


def test_board_state_str():
    board = BoardState.from_bits(row_mask(0) | cell_bit(1, 0))
    lines = str(board).splitlines()

    assert lines[0] == "########"
    assert lines[1] == "#......."
    assert len(lines) == 8
