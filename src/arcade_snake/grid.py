# src/arcade_snake/grid.py
"""Cell arithmetic for the fixed playfield. Cells are (x, y) in grid units."""
from typing import Tuple

from .config import CELL_SIZE, GRID_W, GRID_H

Cell = Tuple[int, int]
Direction = Tuple[int, int]


def in_bounds(cell: Cell) -> bool:
    """Check if a cell is inside the grid."""
    x, y = cell
    return 0 <= x < GRID_W and 0 <= y < GRID_H


def shift(cell: Cell, direction: Direction) -> Cell:
    return (cell[0] + direction[0], cell[1] + direction[1])


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def pixel_to_cell(px: int, py: int) -> Cell:
    """
    Map a pixel position on the window to the cell containing it.
    Inverse of cell_to_pixel, for presentation code that works in pixels.
    """
    return (px // CELL_SIZE, py // CELL_SIZE)


def cell_to_pixel(cell: Cell) -> Tuple[int, int, int, int]:
    """Return the (left, top, width, height) rectangle covering a cell."""
    return (cell[0] * CELL_SIZE, cell[1] * CELL_SIZE, CELL_SIZE, CELL_SIZE)
