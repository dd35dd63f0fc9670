"""High level game state container and simulation loop."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import Dict, Optional, Union
import logging
import random

from .board import Board
from .commands import Command
from .config import EngineConfig
from .tetromino import Piece, TetrominoType
from .utils import can_move, is_valid_position


LOGGER = logging.getLogger(__name__)

# Points awarded per lock by number of rows cleared at once.  Four or more rows
# score as a Tetris.
LINE_SCORES: Dict[int, int] = {1: 100, 2: 300, 3: 500, 4: 800}


def line_clear_score(cleared: int) -> int:
    """Return the points for clearing ``cleared`` rows in one lock."""

    if cleared <= 0:
        return 0
    return LINE_SCORES[min(cleared, 4)]


@dataclass
class GameState:
    """Mutable state for a Tetris game session.

    The session owns its board, the falling piece, the single lookahead piece
    and the random stream used to draw new pieces.  A driver calls
    :meth:`tick` once per frame; everything else happens synchronously inside
    that call.
    """

    config: Optional[EngineConfig] = None
    seed: InitVar[Optional[int]] = None
    rng: Optional[random.Random] = field(default=None, repr=False)
    board: Board = field(init=False)
    current: Piece = field(init=False)
    upcoming: Piece = field(init=False)
    speed: int = field(init=False)
    frame: int = field(init=False)
    score: int = field(init=False)
    lines: int = field(init=False)
    game_over: bool = field(init=False)
    quit_requested: bool = field(default=False, init=False)

    def __post_init__(self, seed: Optional[int]) -> None:
        if self.config is None:
            self.config = EngineConfig()
        if self.rng is None:
            self.rng = random.Random(seed)
        self._reset()

    @classmethod
    def seeded(cls, seed: int, config: Optional[EngineConfig] = None) -> "GameState":
        """Return a session whose piece sequence is determined by ``seed``."""

        return cls(config=config, seed=seed)

    # Piece supply -----------------------------------------------------
    def _random_type(self) -> TetrominoType:
        """Return a random tetromino type."""

        return self.rng.choice(list(TetrominoType))

    def spawn_piece(self, kind: TetrominoType) -> Piece:
        """Return ``kind`` at the spawn position for this board."""

        return Piece.spawn(kind, self.config.spawn_x)

    def _draw_piece(self) -> Piece:
        return self.spawn_piece(self._random_type())

    def promote_upcoming(self) -> Piece:
        """Make the lookahead piece current and draw a fresh lookahead piece."""

        self.current = self.upcoming
        self.upcoming = self._draw_piece()
        return self.current

    # Validation and movement -----------------------------------------
    def is_valid_position(self, piece: Piece) -> bool:
        return is_valid_position(self.board, piece)

    def try_move(self, dx: int, dy: int) -> bool:
        """Move the current piece by ``(dx, dy)`` if the target is free."""

        if not can_move(self.board, self.current, dx, dy):
            return False
        self.current = self.current.moved(dx, dy)
        return True

    def try_rotate(self, delta: int = 1) -> bool:
        """Rotate the current piece by ``delta`` quarter turns if possible.

        There are no wall kicks: a rotation that collides is simply rejected.
        """

        candidate = self.current.rotated(delta)
        if not self.is_valid_position(candidate):
            return False
        self.current = candidate
        return True

    def hard_drop(self) -> int:
        """Drop the current piece as far as it goes and lock it.

        Returns the number of rows the piece fell.
        """

        rows = 0
        while self.try_move(0, 1):
            rows += 1
        self.lock_piece()
        return rows

    # Locking and line clears -------------------------------------------
    def lock_piece(self) -> None:
        """Settle the current piece into the board and bring in the next one.

        A piece resting partly above the visible board ends the game without
        touching the grid.  Otherwise full rows are cleared, the lookahead
        piece becomes current and the game ends if it has no room to spawn.
        """

        if any(y < 0 for _, y in self.current.blocks()):
            self._end_game("piece locked above the board")
            return

        self.board.lock_piece(self.current)
        self.clear_lines()
        self.promote_upcoming()
        if not self.is_valid_position(self.current):
            self._end_game(f"no room to spawn {self.current.kind.value}")

    def clear_lines(self) -> int:
        """Remove full rows, award points and speed up gravity.

        Returns the number of rows cleared.
        """

        cleared = self.board.clear_full_rows()
        if cleared:
            self.score += line_clear_score(cleared)
            self.lines += cleared
            if self.speed > self.config.min_speed:
                self.speed -= 1
            LOGGER.debug(
                "Cleared %d row(s). Score: %d, speed: %d", cleared, self.score, self.speed
            )
        return cleared

    def _end_game(self, reason: str) -> None:
        self.game_over = True
        LOGGER.info("Game over (%s). Score: %d, lines: %d", reason, self.score, self.lines)

    # Session control -------------------------------------------------
    def _reset(self) -> None:
        self.board = Board(self.config.width, self.config.height)
        self.current = self._draw_piece()
        self.upcoming = self._draw_piece()
        self.speed = self.config.initial_speed
        self.frame = 0
        self.score = 0
        self.lines = 0
        self.game_over = False

    def restart(self) -> None:
        """Reset the entire session for a new game.

        The random stream is kept so seeded sessions stay reproducible.
        """

        self._reset()
        LOGGER.info("Game restarted")

    def apply_command(self, command: Union[Command, str, None]) -> None:
        """Apply a single input command.

        Movement commands only act while the game is running and ``restart``
        only once it is over.  ``quit`` merely records the request for the
        driver.

        Raises:
            ValueError: If ``command`` is not a known command.
        """

        if command is None:
            return
        command = Command.parse(command)

        if command is Command.QUIT:
            self.quit_requested = True
        elif command is Command.RESTART:
            if self.game_over:
                self.restart()
        elif self.game_over:
            return
        elif command is Command.MOVE_LEFT:
            self.try_move(-1, 0)
        elif command is Command.MOVE_RIGHT:
            self.try_move(1, 0)
        elif command is Command.SOFT_DROP:
            self.try_move(0, 1)
        elif command is Command.ROTATE:
            self.try_rotate(1)
        elif command is Command.HARD_DROP:
            self.hard_drop()

    def tick(self, command: Union[Command, str, None] = None) -> bool:
        """Advance the simulation by one frame.

        The command is applied first; then, while the game is running, the
        frame counter advances and every ``speed`` frames gravity pulls the
        piece down one row, locking it when it cannot fall.

        Returns ``False`` once the driver has been asked to quit.
        """

        self.apply_command(command)

        if not self.game_over:
            self.frame += 1
            if self.frame % self.speed == 0:
                if not self.try_move(0, 1):
                    self.lock_piece()

        return not self.quit_requested
