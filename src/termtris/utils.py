"""Utility helpers for the Tetris engine."""

from __future__ import annotations

from typing import List, Optional

from .board import Board
from .tetromino import Piece


def is_valid_position(board: Board, piece: Piece) -> bool:
    """Return ``True`` if ``piece`` may occupy its cells on ``board``.

    Every block must lie within the board's columns and above its floor.
    Blocks above the top row (``y < 0``) are allowed so pieces can spawn and
    rotate partly outside the visible area; only blocks inside the grid are
    checked against settled cells.  Movement, rotation and spawn checks all go
    through this function.
    """

    for x, y in piece.blocks():
        if x < 0 or x >= board.width or y >= board.height:
            return False
        if y >= 0 and board.is_occupied(x, y):
            return False
    return True


def can_move(board: Board, piece: Piece, dx: int, dy: int) -> bool:
    """Return ``True`` if ``piece`` translated by ``dx`` and ``dy`` is valid."""

    return is_valid_position(board, piece.moved(dx, dy))


def render_grid(board: Board, piece: Optional[Piece] = None) -> List[List[int]]:
    """Return a copy of the board grid with ``piece`` overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without locking the
    piece). Cells covered by the piece receive its colour value; blocks above
    the visible board are skipped.
    """

    grid = [[int(cell) for cell in row] for row in board.grid]
    if piece is not None:
        for x, y in piece.blocks():
            if board.in_bounds(x, y):
                grid[y][x] = int(piece.color)
    return grid
