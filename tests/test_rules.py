"""
Tests for placement legality and the line-clear transition.

Usage:
    pytest tests/test_rules.py
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from blockblast.solver import can_place, full_lines, normalize, place_and_clear
from blockblast.solver.board import FULL_BOARD, cell_bit, col_mask, row_mask


def piece(*cells):
    grid = [[False] * 5 for _ in range(5)]
    for r, c in cells:
        grid[r][c] = True
    return normalize(grid)


BAR_2 = piece((0, 0), (0, 1))
SINGLE = piece((0, 0))
BLOCK_3 = piece(*[(r, c) for r in range(3) for c in range(3)])


def test_can_place_rejects_missing_piece():
    assert can_place(0, None, 0, 0) is False


def test_can_place_bounds():
    """Bounding box must stay on the board."""
    assert can_place(0, BAR_2, 0, 6)
    assert not can_place(0, BAR_2, 0, 7)
    assert can_place(0, BLOCK_3, 5, 5)
    assert not can_place(0, BLOCK_3, 6, 5)
    assert not can_place(0, BLOCK_3, 5, 6)
    assert not can_place(0, SINGLE, -1, 0)


def test_can_place_detects_overlap():
    board = cell_bit(3, 4)
    assert not can_place(board, BAR_2, 3, 3)
    assert not can_place(board, BAR_2, 3, 4)
    assert can_place(board, BAR_2, 3, 5)
    assert can_place(board, BAR_2, 2, 3)


def test_can_place_matches_mask_definition():
    """Legal iff in bounds and the shifted mask misses the board."""
    rng = np.random.default_rng(3)
    diagonal = piece((0, 0), (1, 1))
    for _ in range(20):
        board = int(rng.integers(0, 1 << 62)) | int(rng.integers(0, 4)) << 62
        for row in range(8):
            for col in range(8):
                in_bounds = row + diagonal.height <= 8 and col + diagonal.width <= 8
                expected = in_bounds and (board & diagonal.shifted(row, col)) == 0
                assert can_place(board, diagonal, row, col) == expected


def test_place_without_full_lines_just_adds_cells():
    result = place_and_clear(0, BLOCK_3, 2, 2)
    assert result == BLOCK_3.shifted(2, 2)


def test_place_clears_completed_row():
    board = row_mask(4) & ~(cell_bit(4, 0) | cell_bit(4, 1))
    board |= cell_bit(0, 0)

    result = place_and_clear(board, BAR_2, 4, 0)

    assert result == cell_bit(0, 0)


def test_place_clears_completed_column():
    board = col_mask(6) & ~cell_bit(7, 6)
    assert place_and_clear(board, SINGLE, 7, 6) == 0


def test_row_and_column_clear_together():
    """A cell on a crossing line completes both; both are cleared at once."""
    board = (row_mask(0) | col_mask(0)) & ~cell_bit(0, 0)
    board |= cell_bit(3, 3)

    result = place_and_clear(board, SINGLE, 0, 0)

    assert result == cell_bit(3, 3)


def test_multiple_lines_cleared_by_one_piece():
    board = (row_mask(5) | row_mask(6) | row_mask(7)) & ~BLOCK_3.shifted(5, 0)
    board |= cell_bit(0, 7)

    result = place_and_clear(board, BLOCK_3, 5, 0)

    assert result == cell_bit(0, 7)


def test_filling_the_whole_board_clears_everything():
    board = FULL_BOARD & ~(cell_bit(7, 6) | cell_bit(7, 7))
    assert place_and_clear(board, BAR_2, 7, 6) == 0


def test_illegal_placement_is_rejected():
    with pytest.raises(ValueError):
        place_and_clear(cell_bit(0, 0), SINGLE, 0, 0)
    with pytest.raises(ValueError):
        place_and_clear(0, BAR_2, 0, 7)


def test_result_never_contains_full_lines():
    """Every line that was full after placement is gone."""
    rng = np.random.default_rng(11)
    for _ in range(200):
        board = int(rng.integers(0, 1 << 62)) | int(rng.integers(0, 4)) << 62
        row, col = int(rng.integers(0, 8)), int(rng.integers(0, 8))
        if not can_place(board, SINGLE, row, col):
            continue
        result = place_and_clear(board, SINGLE, row, col)
        assert full_lines(result) == ([], [])
        assert result & ~(board | SINGLE.shifted(row, col)) == 0


def test_clear_pass_is_idempotent_without_new_lines():
    """Placing then removing the same piece leaves a line-free board unchanged."""
    board = cell_bit(1, 1) | cell_bit(6, 2)
    once = place_and_clear(board, BAR_2, 3, 3)
    again = place_and_clear(once & ~BAR_2.shifted(3, 3), BAR_2, 3, 3)

    assert once == again == board | BAR_2.shifted(3, 3)


def test_full_lines_reports_indices():
    board = row_mask(2) | col_mask(5) | cell_bit(7, 0)
    assert full_lines(board) == ([2], [5])
    assert full_lines(FULL_BOARD) == (list(range(8)), list(range(8)))
