from __future__ import annotations

import pytest

from termtris.tetromino import (
    BASE_SHAPES,
    Color,
    Piece,
    TetrominoType,
    piece_blocks,
    rotate_offset,
    shape_blocks,
)


@pytest.mark.parametrize("kind", list(TetrominoType))
@pytest.mark.parametrize("rotation", range(4))
def test_every_orientation_has_four_distinct_blocks(kind: TetrominoType, rotation: int) -> None:
    piece = Piece(kind, rotation=rotation, x=5, y=5)
    blocks = piece_blocks(piece)
    assert len(blocks) == 4
    assert len(set(blocks)) == 4
    assert blocks == piece_blocks(Piece(kind, rotation=rotation, x=5, y=5))


def test_rotation_steps_follow_quarter_turns() -> None:
    assert rotate_offset((2, 1), 0) == (2, 1)
    assert rotate_offset((2, 1), 1) == (-1, 2)
    assert rotate_offset((2, 1), 2) == (-2, -1)
    assert rotate_offset((2, 1), 3) == (1, -2)
    assert rotate_offset((2, 1), 5) == (-1, 2)


def test_blocks_keep_base_shape_order() -> None:
    piece = Piece(TetrominoType.T, rotation=1, x=5, y=5)
    assert piece.blocks() == [(5, 4), (5, 5), (5, 6), (4, 5)]
    assert shape_blocks(TetrominoType.I, 0) == list(BASE_SHAPES[TetrominoType.I])


def test_spawn_uses_rotation_zero_at_top() -> None:
    piece = Piece.spawn(TetrominoType.O, 5)
    assert (piece.rotation, piece.x, piece.y) == (0, 5, 0)
    assert piece.blocks() == [(5, 0), (6, 0), (5, 1), (6, 1)]
    assert piece.color is Color.YELLOW


def test_moved_and_rotated_return_new_pieces() -> None:
    piece = Piece.spawn(TetrominoType.L, 5)
    moved = piece.moved(-1, 2)
    rotated = piece.rotated(1)
    assert (moved.x, moved.y) == (4, 2)
    assert rotated.rotation == 1
    assert piece == Piece.spawn(TetrominoType.L, 5)
    assert piece.rotated(4) == piece


def test_each_kind_has_its_own_colour() -> None:
    colours = {Piece(kind).color for kind in TetrominoType}
    assert len(colours) == len(TetrominoType)
    assert Piece(TetrominoType.I).color is Color.CYAN
    assert Piece(TetrominoType.T).color is Color.MAGENTA
