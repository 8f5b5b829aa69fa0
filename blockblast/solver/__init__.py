"""
Solver Package - Bitwise engine and placement search for Block Blast.

Public API:
    - encode() / decode(): Convert between 8x8 grids and bitboards
    - BoardState: Immutable board representation
    - PieceShape / normalize(): Piece bounding-box masks
    - can_place() / place_and_clear(): Placement legality and line clears
    - Move: One piece placement
    - Solution: Result of a solve, with SolutionMetrics
    - SolutionContext / SearchCancelled: Cancellation and time budget
    - SolverStrategy: Abstract base for strategies
    - solve(): One-call solver

Usage:
    from blockblast.solver import solve, decode

    solution = solve(board_grid, [piece_a, piece_b, piece_c])
    if solution is None:
        print("No solution")
    else:
        for move in solution.moves:
            print(f"Piece {move.piece_id} at ({move.row},{move.col})")
"""

# Core data structures
from .board import (
    BOARD_SIZE,
    PIECE_GRID_SIZE,
    BoardState,
    encode,
    decode,
)
from .piece import PieceShape, normalize
from .rules import can_place, place_and_clear, full_lines
from .move import Move
from .solution import Solution, SolutionMetrics
from .context import SolutionContext, SearchCancelled

# Strategy framework
from .base import SolverStrategy, ActivePiece, active_pieces, generate_orders
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .engine import solve

__all__ = [
    # Data structures
    "BOARD_SIZE",
    "PIECE_GRID_SIZE",
    "BoardState",
    "encode",
    "decode",
    "PieceShape",
    "normalize",
    "can_place",
    "place_and_clear",
    "full_lines",
    "Move",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    "SearchCancelled",
    # Strategy framework
    "SolverStrategy",
    "ActivePiece",
    "active_pieces",
    "generate_orders",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "solve",
]
