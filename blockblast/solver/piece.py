"""
Piece Module - Normalized piece shapes.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .board import BOARD_SIZE, PIECE_GRID_SIZE, as_bool_grid


@dataclass(frozen=True)
class PieceShape:
    """
    Piece occupancy packed into its minimal bounding box.

    The mask uses the board's row stride (8), not the piece width, so it
    can be shifted straight onto a bitboard by row * 8 + col.

    Attributes:
        mask: Bitmask anchored at bit 0 (top-left of the bounding box)
        width: Bounding box width (1-5)
        height: Bounding box height (1-5)
    """
    mask: int
    width: int
    height: int

    @property
    def cells(self) -> Tuple[Tuple[int, int], ...]:
        """Occupied (row, col) offsets relative to the bounding box."""
        return tuple(
            (r, c)
            for r in range(self.height)
            for c in range(self.width)
            if self.mask & (1 << (r * BOARD_SIZE + c))
        )

    @property
    def cell_count(self) -> int:
        return len(self.cells)

    def shifted(self, row: int, col: int) -> int:
        """Mask moved so its top-left sits on board cell (row, col)."""
        return self.mask << (row * BOARD_SIZE + col)


def normalize(grid: Sequence[Sequence[bool]]) -> Optional[PieceShape]:
    """
    Normalize a 5x5 piece grid to its minimal bounding box.

    Args:
        grid: 5x5 grid of truthy/falsy cells

    Returns:
        PieceShape, or None if no cell is set (empty slot)

    Raises:
        ValueError: If the grid is not 5x5
    """
    cells = as_bool_grid(grid, PIECE_GRID_SIZE)
    rows, cols = np.nonzero(cells)
    if len(rows) == 0:
        return None

    min_r, max_r = int(rows.min()), int(rows.max())
    min_c, max_c = int(cols.min()), int(cols.max())

    mask = 0
    for r, c in zip(rows, cols):
        mask |= 1 << ((int(r) - min_r) * BOARD_SIZE + (int(c) - min_c))

    return PieceShape(
        mask=mask,
        width=max_c - min_c + 1,
        height=max_r - min_r + 1,
    )


def shape_to_grid(shape: PieceShape) -> List[List[bool]]:
    """
    Expand a shape back into a 5x5 grid anchored at the top-left.

    Args:
        shape: Normalized piece

    Returns:
        5x5 list of bools
    """
    grid = [[False] * PIECE_GRID_SIZE for _ in range(PIECE_GRID_SIZE)]
    for r, c in shape.cells:
        grid[r][c] = True
    return grid
