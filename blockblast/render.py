"""
Render Utilities

Functions for drawing boards and solution steps to PNG images.
"""

import logging
from pathlib import Path
from typing import Union

from PIL import Image, ImageDraw, ImageFont

from .solver.board import BOARD_SIZE, cell_bit
from .solver.solution import Solution

logger = logging.getLogger(__name__)

# Colors
BACKGROUND = "#1e2a4a"
EMPTY_CELL = "#2c3e66"
FILLED_CELL = "#8fa8d8"
PLACED_CELL = "#f5b942"
CLEARED_CELL = "#e05a5a"
GRID_LINE = "#14203a"
LABEL_COLOR = "white"

LABEL_HEIGHT = 20
PANEL_GAP = 12


def _load_font() -> ImageFont.ImageFont:
    """Try to load a TrueType font, fall back to default."""
    try:
        return ImageFont.truetype("arial.ttf", 12)
    except OSError:
        return ImageFont.load_default()


def render_board(
    bits: int,
    cell_size: int = 32,
    placed: int = 0,
    cleared: int = 0
) -> Image.Image:
    """
    Draw a board as an image.

    Args:
        bits: Bitboard to draw
        cell_size: Edge length of one cell in pixels
        placed: Mask of cells to highlight as the piece just placed
        cleared: Mask of cells removed by line clears

    Returns:
        RGB image of size (8 * cell_size, 8 * cell_size)
    """
    size = BOARD_SIZE * cell_size
    image = Image.new("RGB", (size, size), BACKGROUND)
    draw = ImageDraw.Draw(image)

    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            bit = cell_bit(r, c)
            if cleared & bit:
                fill = CLEARED_CELL
            elif placed & bit and bits & bit:
                fill = PLACED_CELL
            elif bits & bit:
                fill = FILLED_CELL
            else:
                fill = EMPTY_CELL

            x0, y0 = c * cell_size, r * cell_size
            draw.rectangle(
                [x0, y0, x0 + cell_size - 1, y0 + cell_size - 1],
                fill=fill, outline=GRID_LINE
            )

    return image


def render_solution(solution: Solution, cell_size: int = 32) -> Image.Image:
    """
    Draw the initial board followed by the board after each move.

    Each step panel highlights the piece just placed and the cells its
    line clears removed.

    Args:
        solution: Solution to draw
        cell_size: Edge length of one cell in pixels

    Returns:
        Horizontal strip image
    """
    board_px = BOARD_SIZE * cell_size
    panels = 1 + solution.move_count
    width = panels * board_px + (panels + 1) * PANEL_GAP
    height = board_px + LABEL_HEIGHT + 2 * PANEL_GAP

    strip = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(strip)
    font = _load_font()

    def paste(index: int, image: Image.Image, label: str) -> None:
        x = PANEL_GAP + index * (board_px + PANEL_GAP)
        draw.text((x, PANEL_GAP // 2), label, fill=LABEL_COLOR, font=font)
        strip.paste(image, (x, PANEL_GAP + LABEL_HEIGHT))

    paste(0, render_board(solution.initial_board, cell_size), "Start")

    before = solution.initial_board
    for i, move in enumerate(solution.moves):
        cleared = move.cleared_mask(before)
        image = render_board(
            move.board_after | cleared, cell_size,
            placed=move.placed, cleared=cleared
        )
        paste(i + 1, image, f"{i + 1}. piece {move.piece_id + 1} @ ({move.row},{move.col})")
        before = move.board_after

    return strip


def save_solution_image(
    solution: Solution,
    path: Union[str, Path],
    cell_size: int = 32
) -> None:
    """
    Render a solution and save it as PNG.

    Args:
        solution: Solution to draw
        path: Output file path
        cell_size: Edge length of one cell in pixels
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    render_solution(solution, cell_size).save(path, "PNG")
    logger.info(f"Solution image saved: {path}")
