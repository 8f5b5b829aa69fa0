"""
Engine Module - One-call solving API.
"""

import logging
import threading
from typing import Callable, Optional, Sequence, Union

from .board import BoardState, encode
from .context import SolutionContext
from .factory import create_strategy
from .solution import Solution

logger = logging.getLogger(__name__)

BoardInput = Union[int, BoardState, Sequence[Sequence[bool]]]


def to_board_state(board: BoardInput) -> BoardState:
    """
    Coerce a bitboard, BoardState or 8x8 grid into a BoardState.

    Raises:
        ValueError: If the input is not a valid board
    """
    if isinstance(board, BoardState):
        return board
    if isinstance(board, int) and not isinstance(board, bool):
        return BoardState.from_bits(board)
    return BoardState.from_bits(encode(board))


def solve(
    board: BoardInput,
    pieces: Sequence[Sequence[Sequence[bool]]],
    strategy_name: Optional[str] = None,
    timeout_sec: Optional[float] = None,
    cancel_flag: Optional[threading.Event] = None,
    progress_callback: Optional[Callable[[float, str], None]] = None
) -> Optional[Solution]:
    """
    Find a placement order and positions for every non-empty piece.

    Args:
        board: Bitboard, BoardState or 8x8 grid
        pieces: 5x5 piece grids in slot order; empty grids are skipped
        strategy_name: Registered strategy (default "exhaustive")
        timeout_sec: Search budget in seconds (None = unlimited)
        cancel_flag: Event that aborts the search when set
        progress_callback: Called with (fraction, message) between orders

    Returns:
        Solution (empty if no piece is active), or None if unsolvable

    Raises:
        ValueError: On malformed board/piece grids or unknown strategy
        SearchCancelled: If cancelled or the budget runs out
    """
    state = to_board_state(board)
    strategy = create_strategy(strategy_name)

    context = SolutionContext(
        board=state,
        pieces=list(pieces),
        timeout_sec=timeout_sec,
        progress_callback=progress_callback,
    )
    if cancel_flag is not None:
        context.cancel_flag = cancel_flag

    logger.debug(f"Solving with '{strategy.name}': "
                 f"{state.count_cells()} occupied cells, {len(context.pieces)} slots")
    return strategy.solve(context)
