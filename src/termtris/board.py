"""Board representation for the Tetris playfield."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .config import HEIGHT, WIDTH
from .tetromino import Color, Piece


Grid = NDArray[np.uint8]

EMPTY = 0


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Tetris board holding the settled cells.

    The grid is indexed ``[y, x]``.  ``0`` marks an empty cell, any other value
    is the :class:`Color` of the piece that settled there.
    """

    width: int = WIDTH
    height: int = HEIGHT

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(width, height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> int:
        """Safely return the raw value at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(x, y):
            return int(self.grid[y, x])
        raise IndexError("Cell out of bounds")

    def set_cell(self, x: int, y: int, value: int) -> None:
        """Safely set the raw value at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(x, y):
            self.grid[y, x] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def color_at(self, x: int, y: int) -> Optional[Color]:
        """Return the colour settled at ``(x, y)`` or ``None`` when empty."""

        value = self.get_cell(x, y)
        return Color(value) if value != EMPTY else None

    def is_occupied(self, x: int, y: int) -> bool:
        return self.get_cell(x, y) != EMPTY

    def is_row_full(self, y: int) -> bool:
        return bool(np.all(self.grid[y] != EMPTY))

    def lock_piece(self, piece: Piece) -> None:
        """Write the piece's blocks into the grid with its colour.

        All cells are checked before anything is written so a failed lock
        leaves the grid untouched.

        Raises:
            IndexError: If any block lies outside the board.
        """

        self.fill_cells(piece.blocks(), piece.color)

    def fill_cells(self, cells: Iterable[Tuple[int, int]], color: Color) -> None:
        coordinates = np.asarray(list(cells), dtype=np.int16)
        if coordinates.size == 0:
            return

        xs, ys = coordinates.T
        if (
            np.any(ys < 0)
            or np.any(ys >= self.height)
            or np.any(xs < 0)
            or np.any(xs >= self.width)
        ):
            raise IndexError("Block out of bounds")

        self.grid[ys, xs] = np.uint8(color)

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed.

        Rows are scanned from the bottom up.  A full row is removed by shifting
        every row above it down by one and emptying the top row; the same index
        is then examined again since it now holds the row that was above it.
        """

        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.is_row_full(y):
                self.grid[1 : y + 1] = self.grid[:y].copy()
                self.grid[0] = EMPTY
                cleared += 1
            else:
                y -= 1
        return cleared

    def is_empty(self) -> bool:
        """Return ``True`` if no cell is occupied."""

        return not np.any(self.grid)
