"""
Move Module - A single piece placement within a solution.
"""

from dataclasses import dataclass
from typing import Tuple

from .board import BOARD_SIZE, cell_bit


@dataclass(frozen=True)
class Move:
    """
    Represents one piece placed on the board.

    Attributes:
        piece_id: Index of the piece in the caller's piece list
        row: Board row of the piece's top-left bounding-box corner
        col: Board column of the piece's top-left bounding-box corner
        board_after: Bitboard after this placement's line clears
        placed: Piece mask shifted onto the board at (row, col)
    """
    piece_id: int
    row: int
    col: int
    board_after: int
    placed: int

    @property
    def cells(self) -> Tuple[Tuple[int, int], ...]:
        """Board cells covered by the placed piece, row-major."""
        return tuple(
            (r, c)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
            if self.placed & cell_bit(r, c)
        )

    def cleared_mask(self, board_before: int) -> int:
        """
        Cells removed by line clears during this move.

        Args:
            board_before: Bitboard immediately before the move

        Returns:
            Mask of cells that were occupied after placement but are empty
            in board_after
        """
        return (board_before | self.placed) & ~self.board_after
