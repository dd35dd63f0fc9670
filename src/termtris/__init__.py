"""Board and piece simulation engine for a falling-block puzzle game."""

from .board import Board
from .commands import Command
from .config import ConfigError, EngineConfig
from .tetromino import Color, Piece, TetrominoType, piece_blocks, shape_blocks
from .game_state import GameState, line_clear_score
from .utils import can_move, is_valid_position, render_grid

__all__ = [
    "Board",
    "Color",
    "Command",
    "ConfigError",
    "EngineConfig",
    "GameState",
    "Piece",
    "TetrominoType",
    "can_move",
    "is_valid_position",
    "line_clear_score",
    "piece_blocks",
    "render_grid",
    "shape_blocks",
]
