"""
Solution Module - Result of a solver run.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .board import BoardState, popcount
from .move import Move


@dataclass(frozen=True)
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        positions_tested: Number of (piece, row, col) legality checks
        placements_made: Number of legal placements expanded
        orders_tried: Number of piece orderings searched
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    positions_tested: int = 0
    placements_made: int = 0
    orders_tried: int = 0
    strategy_name: str = ""


@dataclass(frozen=True)
class Solution:
    """
    A complete, ordered placement of every active piece.

    An empty move list is a valid solution (no piece to place) and is
    distinct from the solver returning None.

    Attributes:
        moves: Ordered moves, one per active piece
        initial_board: Bitboard the search started from
        metrics: Performance statistics
    """
    moves: Tuple[Move, ...] = ()
    initial_board: int = 0
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def has_moves(self) -> bool:
        """Check if solution has any moves."""
        return len(self.moves) > 0

    @property
    def piece_order(self) -> Tuple[int, ...]:
        """Piece ids in placement order."""
        return tuple(move.piece_id for move in self.moves)

    @property
    def final_board(self) -> BoardState:
        """Board after the last move (the initial board if there are none)."""
        if not self.moves:
            return BoardState.from_bits(self.initial_board)
        return BoardState.from_bits(self.moves[-1].board_after)

    @property
    def board_states(self) -> List[BoardState]:
        """Board before the first move followed by the board after each move."""
        states = [BoardState.from_bits(self.initial_board)]
        states.extend(BoardState.from_bits(m.board_after) for m in self.moves)
        return states

    @property
    def total_cells_cleared(self) -> int:
        """Cells removed by line clears across all moves."""
        total = 0
        before = self.initial_board
        for move in self.moves:
            total += popcount(move.cleared_mask(before))
            before = move.board_after
        return total

    def get_move(self, index: int) -> Move:
        """
        Get move at specific index.

        Raises:
            IndexError: If index out of range
        """
        return self.moves[index]

    def get_board_after_move(self, index: int) -> BoardState:
        """
        Get board state after executing move at index.

        Raises:
            IndexError: If index out of range
        """
        return BoardState.from_bits(self.moves[index].board_after)
