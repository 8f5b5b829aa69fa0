"""
Block Blast Solver - Entry Point

Loads a puzzle, searches for a placement of every piece and prints the
step-by-step solution.

Example:
    python main.py puzzle.json
    python main.py --sample --render solution.png
    python main.py puzzle.json --timeout 5 --debug
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import Optional

from blockblast.puzzle_io import Puzzle, PuzzleFormatError, load_puzzle, sample_puzzle
from blockblast.render import save_solution_image
from blockblast.settings import load_settings
from blockblast.solver import BoardState, SearchCancelled, Solution, get_strategy_names, solve


logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_UNSOLVABLE = 1
EXIT_BAD_INPUT = 2
EXIT_CANCELLED = 3


def configure_logging(debug: bool, log_file: Optional[str] = None) -> None:
    """Configure logging - output to console and optionally a file."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers
    )


def format_solution(solution: Solution) -> str:
    """
    Describe a solution move by move.

    Args:
        solution: Solution to describe

    Returns:
        Multi-line text with the board after each move
    """
    if not solution.has_moves:
        return "Nothing to place - all piece slots are empty."

    lines = [f"Solution in {solution.move_count} moves "
             f"({solution.metrics.computation_time_ms:.1f}ms, "
             f"{solution.metrics.positions_tested} positions tested):"]
    for i, move in enumerate(solution.moves):
        board = solution.get_board_after_move(i)
        lines.append("")
        lines.append(f"{i + 1}. Piece {move.piece_id + 1} at row {move.row}, col {move.col}")
        lines.append(str(board))
    return "\n".join(lines)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Block Blast Solver - Find a placement order for every piece"
    )
    parser.add_argument(
        "puzzle",
        nargs="?",
        help="Puzzle JSON file (board + up to 3 pieces)"
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Solve the built-in sample puzzle"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help="Solving strategy (default: from config.json)"
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        help="Search budget in seconds (default: unlimited)"
    )
    parser.add_argument(
        "--render", "-r",
        metavar="PNG",
        help="Save the solution steps as an image"
    )
    parser.add_argument(
        "--log-file",
        help="Also write the log to this file"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the solver from the command line."""
    args = parse_args(argv)
    settings = load_settings()

    configure_logging(args.debug or settings.get("debug_enabled", False), args.log_file)

    try:
        if args.sample:
            puzzle: Puzzle = sample_puzzle()
        elif args.puzzle:
            puzzle = load_puzzle(Path(args.puzzle))
        else:
            logger.error("No puzzle given (pass a file or --sample)")
            return EXIT_BAD_INPUT
    except PuzzleFormatError as e:
        logger.error(str(e))
        return EXIT_BAD_INPUT

    strategy_name = args.strategy or settings.get("strategy_name")
    timeout_sec = args.timeout if args.timeout is not None else settings.get("timeout_sec")

    print("Board:")
    print(BoardState.from_grid(puzzle.board))
    print()

    try:
        solution = solve(
            puzzle.board,
            puzzle.pieces,
            strategy_name=strategy_name,
            timeout_sec=timeout_sec,
        )
    except SearchCancelled as e:
        logger.error(f"Search aborted: {e}")
        return EXIT_CANCELLED
    except ValueError as e:
        logger.error(f"Invalid puzzle: {e}")
        return EXIT_BAD_INPUT

    if solution is None:
        print("No solution: every piece order and position was tried.")
        return EXIT_UNSOLVABLE

    print(format_solution(solution))

    if args.render:
        if solution.has_moves:
            save_solution_image(
                solution, args.render,
                cell_size=settings.get("render_cell_size", 32)
            )
        else:
            logger.warning(f"No moves to render, {args.render} was not written")

    return EXIT_SOLVED


if __name__ == "__main__":
    sys.exit(main())
