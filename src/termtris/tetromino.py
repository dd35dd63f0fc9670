"""Tetromino definitions and piece geometry.

Each shape is stored once as an ordered list of four ``(dx, dy)`` offsets from
a pivot.  Rotations are not tabulated; they are computed on demand by applying
a 90 degree rotation step to every offset.  ``y`` grows downwards, so row ``0``
is the top of the board.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Dict, List, Tuple

Offset = Tuple[int, int]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


class Color(IntEnum):
    """Colour tags stored in the board grid.

    ``0`` is reserved for empty cells so every member is non-zero.
    """

    CYAN = 1
    YELLOW = 2
    MAGENTA = 3
    GREEN = 4
    RED = 5
    BLUE = 6
    ORANGE = 7


# Spawn orientation of every shape.  The order of the offsets is part of the
# definition: ``rotate_offset`` keeps it, so block lists are reproducible.
BASE_SHAPES: Dict[TetrominoType, Tuple[Offset, ...]] = {
    TetrominoType.I: ((-2, 0), (-1, 0), (0, 0), (1, 0)),
    TetrominoType.O: ((0, 0), (1, 0), (0, 1), (1, 1)),
    TetrominoType.T: ((-1, 0), (0, 0), (1, 0), (0, 1)),
    TetrominoType.S: ((0, 0), (1, 0), (-1, 1), (0, 1)),
    TetrominoType.Z: ((-1, 0), (0, 0), (0, 1), (1, 1)),
    TetrominoType.J: ((-1, 0), (-1, 1), (0, 0), (1, 0)),
    TetrominoType.L: ((-1, 0), (0, 0), (1, 0), (1, 1)),
}

SHAPE_COLORS: Dict[TetrominoType, Color] = {
    TetrominoType.I: Color.CYAN,
    TetrominoType.O: Color.YELLOW,
    TetrominoType.T: Color.MAGENTA,
    TetrominoType.S: Color.GREEN,
    TetrominoType.Z: Color.RED,
    TetrominoType.J: Color.BLUE,
    TetrominoType.L: Color.ORANGE,
}

ROTATIONS = 4


def rotate_offset(offset: Offset, rotation: int) -> Offset:
    """Return ``offset`` rotated by ``rotation`` clockwise quarter turns."""

    bx, by = offset
    r = rotation % ROTATIONS
    if r == 0:
        return bx, by
    if r == 1:
        return -by, bx
    if r == 2:
        return -bx, -by
    return by, -bx


def shape_blocks(shape: TetrominoType, rotation: int) -> List[Offset]:
    """Return the block offsets for ``shape`` at ``rotation``.

    Parameters
    ----------
    shape:
        The :class:`TetrominoType` to query.
    rotation:
        Rotation state.  Values are wrapped so any integer is accepted.
    """

    return [rotate_offset(offset, rotation) for offset in BASE_SHAPES[shape]]


@dataclass(frozen=True)
class Piece:
    """A tetromino placed on the board.

    Pieces are values: moving or rotating one returns a new candidate which the
    game state only commits once it has been validated.
    """

    kind: TetrominoType
    rotation: int = 0
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(cls, kind: TetrominoType, x: int) -> "Piece":
        """Return ``kind`` in its spawn orientation with its pivot at ``(x, 0)``."""

        return cls(kind, rotation=0, x=x, y=0)

    @property
    def color(self) -> Color:
        return SHAPE_COLORS[self.kind]

    def moved(self, dx: int, dy: int) -> "Piece":
        """Return a copy translated by ``dx`` columns and ``dy`` rows."""

        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self, delta: int = 1) -> "Piece":
        """Return a copy with the rotation state advanced by ``delta``."""

        return replace(self, rotation=(self.rotation + delta) % ROTATIONS)

    def blocks(self) -> List[Offset]:
        """Return the absolute ``(x, y)`` board cells covered by this piece."""

        return piece_blocks(self)


def piece_blocks(piece: Piece) -> List[Offset]:
    """Return the four ``(x, y)`` cells of ``piece`` in base-shape order."""

    return [(piece.x + dx, piece.y + dy) for dx, dy in shape_blocks(piece.kind, piece.rotation)]
