"""
Board Module - Bitboard encoding and immutable board representation.

The board is an 8x8 grid packed into a single integer: bit (row * 8 + col)
is set when that cell is occupied.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np


BOARD_SIZE = 8
PIECE_GRID_SIZE = 5

FULL_BOARD = (1 << (BOARD_SIZE * BOARD_SIZE)) - 1
ROW_BASE_MASK = 0xFF
COL_BASE_MASK = 0x0101010101010101


def as_bool_grid(grid, size: int) -> np.ndarray:
    """
    Convert a nested sequence or array into a size x size boolean array.

    Args:
        grid: 2D list, tuple or numpy array of truthy/falsy cells
        size: Required edge length

    Returns:
        Boolean numpy array of shape (size, size)

    Raises:
        ValueError: If the grid is not exactly size x size
    """
    try:
        cells = np.asarray(grid, dtype=bool)
    except ValueError as e:
        raise ValueError(f"Grid must be {size}x{size}: {e}") from e
    if cells.shape != (size, size):
        raise ValueError(f"Grid must be {size}x{size}, got shape {cells.shape}")
    return cells


def cell_bit(row: int, col: int) -> int:
    """Single-bit mask for a board cell."""
    return 1 << (row * BOARD_SIZE + col)


def row_mask(row: int) -> int:
    """Mask of all 8 cells in a board row."""
    return ROW_BASE_MASK << (row * BOARD_SIZE)


def col_mask(col: int) -> int:
    """Mask of all 8 cells in a board column."""
    return COL_BASE_MASK << col


def popcount(bits: int) -> int:
    """Number of set bits."""
    return bin(bits).count("1")


def encode(grid: Sequence[Sequence[bool]]) -> int:
    """
    Pack an 8x8 boolean grid into a bitboard.

    Args:
        grid: Row-major 8x8 grid, truthy cells are occupied

    Returns:
        Bitboard integer

    Raises:
        ValueError: If the grid is not 8x8
    """
    cells = as_bool_grid(grid, BOARD_SIZE)
    bits = 0
    for index in np.flatnonzero(cells):
        bits |= 1 << int(index)
    return bits


def decode(bits: int) -> List[List[bool]]:
    """
    Unpack a bitboard into an 8x8 boolean grid (inverse of encode).

    Args:
        bits: Bitboard integer

    Returns:
        Row-major 8x8 list of bools
    """
    flat = np.array(
        [(bits >> i) & 1 for i in range(BOARD_SIZE * BOARD_SIZE)], dtype=bool
    )
    return flat.reshape(BOARD_SIZE, BOARD_SIZE).tolist()


@dataclass(frozen=True)
class BoardState:
    """
    Immutable board state wrapping a bitboard.

    Attributes:
        bits: Bitboard integer, only the low 64 bits are meaningful
    """
    bits: int = 0

    def __post_init__(self):
        if self.bits < 0 or self.bits > FULL_BOARD:
            raise ValueError(f"Bitboard out of range: {self.bits:#x}")

    @classmethod
    def empty(cls) -> 'BoardState':
        """Create an empty board."""
        return cls(bits=0)

    @classmethod
    def from_bits(cls, bits: int) -> 'BoardState':
        """Create BoardState from an existing bitboard."""
        return cls(bits=bits)

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[bool]]) -> 'BoardState':
        """
        Create BoardState from an 8x8 grid.

        Args:
            grid: 2D list or array of truthy/falsy cells

        Returns:
            BoardState instance
        """
        return cls(bits=encode(grid))

    def to_grid(self) -> List[List[bool]]:
        """Convert to a mutable 8x8 boolean grid."""
        return decode(self.bits)

    def get_cell(self, row: int, col: int) -> bool:
        """
        Check whether a cell is occupied.

        Args:
            row: Row index
            col: Column index

        Returns:
            True if occupied, False if empty or out of range
        """
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return bool(self.bits & cell_bit(row, col))
        return False

    def count_cells(self) -> int:
        """Number of occupied cells."""
        return popcount(self.bits)

    @property
    def is_empty(self) -> bool:
        return self.bits == 0

    def diff(self, other: 'BoardState') -> List[Tuple[int, int]]:
        """
        Find cells that differ between this board and another.

        Args:
            other: Another BoardState to compare against

        Returns:
            List of (row, col) tuples in row-major order
        """
        if not isinstance(other, BoardState):
            raise TypeError("Can only diff against another BoardState")

        changed = self.bits ^ other.bits
        return [
            (r, c)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
            if changed & cell_bit(r, c)
        ]

    def __str__(self) -> str:
        return "\n".join(
            "".join("#" if cell else "." for cell in row)
            for row in self.to_grid()
        )
