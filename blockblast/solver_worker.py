"""
Solver Worker Module for Block Blast Solver

Provides a background QThread worker that runs one solve off the UI thread.
Communicates with the UI via Qt signals for thread-safe status updates.
"""

import logging
import threading
from typing import Optional, Sequence

from PyQt5.QtCore import QThread, pyqtSignal

from blockblast.solver import SearchCancelled, solve
from blockblast.solver.engine import BoardInput


# Configure module logger
logger = logging.getLogger(__name__)


class SolverWorker(QThread):
    """
    Background worker thread for a single solver run.

    The search itself stays single-threaded; the worker only keeps it off
    the caller's render path.

    Signals:
        status_changed(str): Emitted when worker status changes
        progress_changed(float, str): Fraction of piece orders exhausted
        solution_ready(object): Emitted with a Solution, or None if unsolvable
        solve_failed(str): Emitted on cancellation or invalid input

    Example:
        worker = SolverWorker(board, pieces)
        worker.solution_ready.connect(ui.show_solution)
        worker.start()
        # ...
        worker.request_stop()
        worker.wait()
    """

    status_changed = pyqtSignal(str)
    progress_changed = pyqtSignal(float, str)
    solution_ready = pyqtSignal(object)
    solve_failed = pyqtSignal(str)

    def __init__(
        self,
        board: BoardInput,
        pieces: Sequence[Sequence[Sequence[bool]]],
        strategy_name: Optional[str] = None,
        timeout_sec: Optional[float] = None
    ):
        """
        Initialize the solver worker.

        Args:
            board: Bitboard, BoardState or 8x8 grid to solve
            pieces: 5x5 piece grids in slot order
            strategy_name: Registered strategy name (None = default)
            timeout_sec: Search budget in seconds (None = unlimited)
        """
        super().__init__()
        self._board = board
        self._pieces = [p for p in pieces]
        self._strategy_name = strategy_name
        self._timeout_sec = timeout_sec
        self._cancel_flag = threading.Event()

    def run(self):
        """Run the search and emit its outcome."""
        logger.info("Solver worker started")
        self.status_changed.emit("Solving")

        try:
            solution = solve(
                self._board,
                self._pieces,
                strategy_name=self._strategy_name,
                timeout_sec=self._timeout_sec,
                cancel_flag=self._cancel_flag,
                progress_callback=self.progress_changed.emit,
            )
        except SearchCancelled as e:
            logger.info(f"Solve cancelled: {e}")
            self.status_changed.emit("Cancelled")
            self.solve_failed.emit(str(e))
            return
        except ValueError as e:
            logger.error(f"Invalid solver input: {e}")
            self.status_changed.emit("Error")
            self.solve_failed.emit(str(e))
            return

        if solution is None:
            self.status_changed.emit("No solution")
        else:
            self.status_changed.emit(f"Solved ({solution.move_count} moves)")
        self.solution_ready.emit(solution)
        logger.info("Solver worker finished")

    def request_stop(self):
        """
        Request the search to stop.

        The search aborts at its next cancellation check.
        Use wait() after calling this to block until stopped.
        """
        logger.info("Stop requested")
        self._cancel_flag.set()

    def is_cancel_requested(self) -> bool:
        return self._cancel_flag.is_set()
