"""
Base Strategy Module - Abstract base class for solving strategies.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from itertools import permutations
from typing import List, Optional, Sequence, Tuple, TypeVar

from .context import SolutionContext
from .piece import PieceShape, normalize
from .solution import Solution

T = TypeVar("T")


@dataclass(frozen=True)
class ActivePiece:
    """
    A non-empty piece slot.

    Attributes:
        piece_id: Index of the slot in the caller's piece list
        shape: Normalized shape
    """
    piece_id: int
    shape: PieceShape


def active_pieces(piece_grids: Sequence[Sequence[Sequence[bool]]]) -> List[ActivePiece]:
    """
    Normalize piece grids, dropping empty slots.

    Args:
        piece_grids: Raw 5x5 grids in slot order

    Returns:
        Active pieces in slot order, keeping their slot indices
    """
    result = []
    for piece_id, grid in enumerate(piece_grids):
        shape = normalize(grid)
        if shape is not None:
            result.append(ActivePiece(piece_id=piece_id, shape=shape))
    return result


def generate_orders(items: Sequence[T]) -> List[Tuple[T, ...]]:
    """
    All orderings of items.

    At every level the element at index 0 is picked first, then index 1,
    and so on, so the order is reproducible.

    Args:
        items: Distinct items to permute

    Returns:
        n! tuples
    """
    return list(permutations(items))


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for UI
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> Optional[Solution]:
        """
        Search for a placement of every active piece.

        Must periodically call context.check_cancelled().

        Args:
            context: Solution context with board, pieces, cancellation

        Returns:
            Solution, or None if no ordering and placement exists

        Raises:
            SearchCancelled: If the context was cancelled or timed out
        """
        pass
