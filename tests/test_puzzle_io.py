"""
Tests for puzzle file parsing and the built-in sample.

Usage:
    pytest tests/test_puzzle_io.py
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from blockblast.puzzle_io import (
    Puzzle,
    PuzzleFormatError,
    empty_grid,
    format_grid,
    load_puzzle,
    parse_grid,
    puzzle_from_dict,
    sample_puzzle,
    save_puzzle,
)
from blockblast.solver import BoardState, normalize


def test_parse_grid_text_rows():
    grid = parse_grid(["#.", "X0"], 2)
    assert grid == [[True, False], [True, False]]


def test_parse_grid_numeric_rows():
    grid = parse_grid([[1, 0, 0], [0, 1, 0], [0, 0, True]], 3)
    assert grid == [[True, False, False], [False, True, False], [False, False, True]]


@pytest.mark.parametrize("rows", [
    ["##", "##", "##"],
    ["###", "#"],
    ["#?", ".."],
    5,
    None,
    "##",
    [1, 1],
    [["#", "."], ".."],
    [[1, 0], [0, {}]],
])
def test_parse_grid_rejects_bad_rows(rows):
    with pytest.raises(PuzzleFormatError):
        parse_grid(rows, 2)


def test_format_grid():
    assert format_grid([[True, False], [False, False]]) == ["#.", ".."]


def test_puzzle_format_error_is_value_error():
    assert issubclass(PuzzleFormatError, ValueError)


def test_puzzle_from_dict_requires_board():
    with pytest.raises(PuzzleFormatError):
        puzzle_from_dict({"pieces": []})
    with pytest.raises(PuzzleFormatError):
        puzzle_from_dict([])


def test_puzzle_from_dict_limits_piece_count():
    data = {
        "board": ["........"] * 8,
        "pieces": [["....."] * 5] * 4,
    }
    with pytest.raises(PuzzleFormatError):
        puzzle_from_dict(data)


@pytest.mark.parametrize("data", [
    {"board": 5},
    {"board": None},
    {"board": [1] * 8},
    {"board": ["........"] * 8, "pieces": None},
    {"board": ["........"] * 8, "pieces": [5]},
    {"board": ["........"] * 8, "pieces": {"a": ["....."] * 5}},
])
def test_puzzle_from_dict_rejects_wrong_types(data):
    with pytest.raises(PuzzleFormatError):
        puzzle_from_dict(data)


def test_load_rejects_wrong_types(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"board": 5}), encoding="utf-8")

    with pytest.raises(PuzzleFormatError):
        load_puzzle(path)


def test_save_and_load_round_trip(tmp_path):
    puzzle = sample_puzzle()
    path = tmp_path / "sample.json"

    save_puzzle(path, puzzle)
    loaded = load_puzzle(path)

    assert loaded == puzzle
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["board"][0] == "...#####"


def test_load_rejects_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PuzzleFormatError):
        load_puzzle(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(PuzzleFormatError):
        load_puzzle(tmp_path / "missing.json")


def test_sample_puzzle_contents():
    puzzle = sample_puzzle()

    assert BoardState.from_grid(puzzle.board).count_cells() == 43
    shapes = [normalize(p) for p in puzzle.pieces]
    assert [(s.width, s.height, s.cell_count) for s in shapes] == [
        (2, 1, 2),
        (2, 2, 2),
        (3, 3, 9),
    ]


def test_sample_puzzle_returns_fresh_copies():
    first = sample_puzzle()
    first.board[0][0] = True
    assert sample_puzzle().board[0][0] is False


def test_empty_grid():
    assert empty_grid(5) == [[False] * 5] * 5
    assert Puzzle(board=empty_grid(8)).pieces == []
