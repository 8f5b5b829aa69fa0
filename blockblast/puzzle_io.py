"""
Puzzle I/O Module - Load and save puzzles as JSON.

File format:
    {
      "board":  ["..###...", ...],           8 rows of 8 characters
      "pieces": [["##...", ...], ...]        up to 3 grids of 5 rows x 5
    }

'#', 'X', 'x' and '1' mark filled cells; '.', '0', '_' and ' ' mark empty
ones. Rows may also be given as lists of 0/1 or booleans.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Sequence

from .solver.board import BOARD_SIZE, PIECE_GRID_SIZE

logger = logging.getLogger(__name__)

FILLED_CHARS = "#Xx1"
EMPTY_CHARS = ".0_ "
MAX_PIECES = 3

Grid = List[List[bool]]


class PuzzleFormatError(ValueError):
    """Raised when a puzzle file cannot be parsed."""


@dataclass
class Puzzle:
    """
    A board plus its piece slots.

    Attributes:
        board: 8x8 grid
        pieces: 5x5 grids in slot order (may include empty grids)
    """
    board: Grid
    pieces: List[Grid] = field(default_factory=list)


def empty_grid(size: int) -> Grid:
    """Create a size x size grid with no filled cells."""
    return [[False] * size for _ in range(size)]


def parse_grid(rows: Sequence[Any], size: int) -> Grid:
    """
    Parse rows of text or 0/1 values into a boolean grid.

    Args:
        rows: Sequence of strings or sequences of cell values
        size: Required edge length

    Returns:
        size x size grid

    Raises:
        PuzzleFormatError: On wrong dimensions, non-list rows or unknown characters
    """
    if not isinstance(rows, (list, tuple)):
        raise PuzzleFormatError(f"Expected a list of rows, got {type(rows).__name__}")
    if len(rows) != size:
        raise PuzzleFormatError(f"Expected {size} rows, got {len(rows)}")

    grid = []
    for r, row in enumerate(rows):
        if not isinstance(row, (list, tuple, str)):
            raise PuzzleFormatError(
                f"Row {r} must be a string or a list of cells, got {type(row).__name__}"
            )
        if len(row) != size:
            raise PuzzleFormatError(
                f"Row {r} has {len(row)} cells, expected {size}"
            )
        if isinstance(row, str):
            cells = []
            for ch in row:
                if ch in FILLED_CHARS:
                    cells.append(True)
                elif ch in EMPTY_CHARS:
                    cells.append(False)
                else:
                    raise PuzzleFormatError(f"Unknown cell character {ch!r} in row {r}")
            grid.append(cells)
        else:
            if not all(isinstance(cell, (bool, int)) for cell in row):
                raise PuzzleFormatError(f"Row {r} cells must be 0/1 or booleans")
            grid.append([bool(cell) for cell in row])
    return grid


def format_grid(grid: Sequence[Sequence[bool]]) -> List[str]:
    """Render a grid as rows of '#' and '.'."""
    return ["".join("#" if cell else "." for cell in row) for row in grid]


def puzzle_from_dict(data: Any) -> Puzzle:
    """
    Build a Puzzle from decoded JSON.

    Raises:
        PuzzleFormatError: On missing keys or malformed grids
    """
    if not isinstance(data, dict) or "board" not in data:
        raise PuzzleFormatError("Puzzle must be an object with a 'board' key")

    pieces_data = data.get("pieces", [])
    if not isinstance(pieces_data, list):
        raise PuzzleFormatError("'pieces' must be a list of grids")
    if len(pieces_data) > MAX_PIECES:
        raise PuzzleFormatError(
            f"At most {MAX_PIECES} pieces allowed, got {len(pieces_data)}"
        )

    board = parse_grid(data["board"], BOARD_SIZE)
    pieces = [parse_grid(p, PIECE_GRID_SIZE) for p in pieces_data]
    return Puzzle(board=board, pieces=pieces)


def load_puzzle(path: Path) -> Puzzle:
    """
    Load a puzzle JSON file.

    Args:
        path: File to read

    Returns:
        Parsed puzzle

    Raises:
        PuzzleFormatError: If the file is unreadable or malformed
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        raise PuzzleFormatError(f"Cannot read puzzle {path}: {e}") from e

    puzzle = puzzle_from_dict(data)
    logger.debug(f"Loaded puzzle from {path} with {len(puzzle.pieces)} piece slots")
    return puzzle


def save_puzzle(path: Path, puzzle: Puzzle) -> None:
    """
    Write a puzzle JSON file.

    Args:
        path: File to write
        puzzle: Puzzle to save
    """
    data = {
        "board": format_grid(puzzle.board),
        "pieces": [format_grid(p) for p in puzzle.pieces],
    }
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)
    logger.debug(f"Puzzle saved: {path}")


# Built-in "dead end" sample
SAMPLE_BOARD_ROWS = [
    "...#####",
    "#..#.###",
    "#####..#",
    "#####..#",
    "######.#",
    "######..",
    "##.###.#",
    "##......",
]

SAMPLE_PIECE_ROWS = [
    # 1x2 horizontal bar
    ["##...", ".....", ".....", ".....", "....."],
    # 2x2 diagonal pair
    ["#....", ".#...", ".....", ".....", "....."],
    # 3x3 block
    ["###..", "###..", "###..", ".....", "....."],
]


def sample_puzzle() -> Puzzle:
    """Fresh copy of the built-in sample puzzle."""
    return Puzzle(
        board=parse_grid(SAMPLE_BOARD_ROWS, BOARD_SIZE),
        pieces=[parse_grid(p, PIECE_GRID_SIZE) for p in SAMPLE_PIECE_ROWS],
    )
