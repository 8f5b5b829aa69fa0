"""
Rules Module - Placement legality and the line-clear transition.
"""

from typing import List, Optional, Tuple

from .board import BOARD_SIZE, FULL_BOARD, row_mask, col_mask
from .piece import PieceShape


def can_place(board: int, piece: Optional[PieceShape], row: int, col: int) -> bool:
    """
    Check whether a piece fits at a board position.

    Args:
        board: Current bitboard
        piece: Normalized piece (None for an empty slot)
        row: Target row for the piece's top-left corner
        col: Target column for the piece's top-left corner

    Returns:
        True if the piece stays on the board and overlaps no occupied cell
    """
    if piece is None:
        return False
    if row < 0 or col < 0:
        return False
    if row + piece.height > BOARD_SIZE or col + piece.width > BOARD_SIZE:
        return False
    return (board & piece.shifted(row, col)) == 0


def full_lines(board: int) -> Tuple[List[int], List[int]]:
    """
    Find every completely filled row and column.

    Args:
        board: Bitboard to inspect

    Returns:
        (rows, cols) lists of line indices
    """
    rows = [r for r in range(BOARD_SIZE) if (board & row_mask(r)) == row_mask(r)]
    cols = [c for c in range(BOARD_SIZE) if (board & col_mask(c)) == col_mask(c)]
    return rows, cols


def place_and_clear(board: int, piece: PieceShape, row: int, col: int) -> int:
    """
    Place a piece and clear every line it completes.

    All full rows and columns are found on the post-placement board and
    removed together. A line emptied by another line's clear is not
    re-checked.

    Args:
        board: Current bitboard
        piece: Normalized piece
        row: Target row
        col: Target column

    Returns:
        Bitboard after placement and clears

    Raises:
        ValueError: If the placement is not legal
    """
    if not can_place(board, piece, row, col):
        raise ValueError(f"Illegal placement at ({row},{col})")

    placed = board | piece.shifted(row, col)

    clear_mask = 0
    rows, cols = full_lines(placed)
    for r in rows:
        clear_mask |= row_mask(r)
    for c in cols:
        clear_mask |= col_mask(c)

    return placed & ~clear_mask & FULL_BOARD
