"""
Solution Context Module - Shared context for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from .board import BoardState


class SearchCancelled(Exception):
    """Raised when a search is cancelled or runs out of its time budget."""


@dataclass
class SolutionContext:
    """
    Shared context passed to strategies containing board state, pieces,
    cancellation, and progress reporting.

    Attributes:
        board: Board state to solve from
        pieces: Raw 5x5 piece grids in slot order (empty grids allowed)
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = unlimited)
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    board: BoardState
    pieces: Sequence[Sequence[Sequence[bool]]] = field(default_factory=list)
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        return False

    def check_cancelled(self) -> None:
        """
        Abort the search if cancellation was requested.

        Raises:
            SearchCancelled: If cancelled or out of time
        """
        if self.is_cancelled():
            raise SearchCancelled(
                f"Search stopped after {self.elapsed_time():.2f}s"
            )

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to UI.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """Seconds elapsed since computation started."""
        return time.time() - self.start_time

    def remaining_time(self) -> Optional[float]:
        """Seconds remaining before timeout, or None when unlimited."""
        if self.timeout_sec is None:
            return None
        return self.timeout_sec - self.elapsed_time()
