"""
Exhaustive Strategy - Depth-first placement search over every piece order.

For each permutation of the active pieces (in generation order) the first
remaining piece is tried at every board cell in row-major order. A legal
placement is applied, lines are cleared, and the search recurses on the
rest. The first complete path found is returned, so results are fully
deterministic for a given input.
"""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..base import ActivePiece, SolverStrategy, active_pieces, generate_orders
from ..board import BOARD_SIZE
from ..context import SolutionContext
from ..move import Move
from ..rules import can_place, place_and_clear
from ..solution import Solution, SolutionMetrics
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@dataclass
class _SearchStats:
    positions_tested: int = 0
    placements_made: int = 0
    orders_tried: int = 0


@register_strategy
class ExhaustiveStrategy(SolverStrategy):
    """
    Brute-force permutation + DFS solver.

    No memoization or pruning beyond the legality check: with at most three
    pieces there are six orders and at most 64 positions per depth.
    """
    name = "exhaustive"
    description = "Exhaustive (deterministic) - Tries every piece order and position"

    def solve(self, context: SolutionContext) -> Optional[Solution]:
        """
        Find the first full placement of every active piece.

        Args:
            context: Solution context with board, pieces and cancellation

        Returns:
            Solution (empty when no piece is active), or None if unsolvable

        Raises:
            SearchCancelled: If the context was cancelled or timed out
        """
        start_time = time.perf_counter()
        board = context.board.bits
        pieces = active_pieces(context.pieces)
        stats = _SearchStats()

        if not pieces:
            logger.debug("No active pieces, returning empty solution")
            return self._build_solution([], board, stats, start_time)

        orders = generate_orders(pieces)
        logger.debug(f"Searching {len(orders)} orders of {len(pieces)} pieces")

        for index, order in enumerate(orders):
            context.check_cancelled()
            stats.orders_tried += 1
            logger.debug(f"Order {index + 1}/{len(orders)}: "
                         f"{[p.piece_id for p in order]}")

            path = self._search(board, order, [], context, stats)
            if path is not None:
                solution = self._build_solution(path, board, stats, start_time)
                logger.info(
                    f"Solved with order {list(solution.piece_order)} "
                    f"({stats.positions_tested} positions, "
                    f"{solution.metrics.computation_time_ms:.1f}ms)"
                )
                return solution

            context.report_progress(
                (index + 1) / len(orders),
                f"{index + 1}/{len(orders)} orders exhausted"
            )

        logger.info(f"No solution after {stats.orders_tried} orders, "
                    f"{stats.positions_tested} positions")
        return None

    def _search(
        self,
        board: int,
        remaining: Sequence[ActivePiece],
        path: List[Move],
        context: SolutionContext,
        stats: _SearchStats
    ) -> Optional[List[Move]]:
        """Place remaining[0] at each legal cell and recurse on the rest."""
        if not remaining:
            return path

        context.check_cancelled()
        current, others = remaining[0], remaining[1:]

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                stats.positions_tested += 1
                if not can_place(board, current.shape, row, col):
                    continue

                stats.placements_made += 1
                board_after = place_and_clear(board, current.shape, row, col)
                move = Move(
                    piece_id=current.piece_id,
                    row=row,
                    col=col,
                    board_after=board_after,
                    placed=current.shape.shifted(row, col),
                )

                result = self._search(board_after, others, path + [move], context, stats)
                if result is not None:
                    return result

        return None

    def _build_solution(
        self,
        moves: List[Move],
        initial_board: int,
        stats: _SearchStats,
        start_time: float
    ) -> Solution:
        """Build Solution object from search results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        return Solution(
            moves=tuple(moves),
            initial_board=initial_board,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                positions_tested=stats.positions_tested,
                placements_made=stats.placements_made,
                orders_tried=stats.orders_tried,
                strategy_name=self.name
            )
        )
