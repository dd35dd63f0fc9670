"""Simple pygame front-end for the Tetris engine.

This module provides a playable window on top of :class:`GameState`.  It only
translates key presses into :class:`Command` values and draws whatever state
the engine exposes; all game rules live in the engine.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import pygame

from .board import Board
from .commands import Command
from .game_state import GameState
from .tetromino import Color, Piece

LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to run the game loop at.  Gravity is counted in frames.
FPS = 60
# Margin around the board and width of the side panel
MARGIN = 20
PANEL_WIDTH = 220

BACKGROUND = (0, 0, 0)
GRID_LINE = (50, 50, 50)
BORDER = (255, 255, 255)
TEXT = (255, 255, 255)
GAME_OVER_TEXT = (255, 0, 0)

# Colours for each tag stored in the board grid
CELL_COLORS = {
    Color.CYAN: (0, 255, 255),
    Color.YELLOW: (255, 255, 0),
    Color.MAGENTA: (255, 0, 255),
    Color.GREEN: (0, 255, 0),
    Color.RED: (255, 0, 0),
    Color.BLUE: (0, 0, 255),
    Color.ORANGE: (255, 165, 0),
}

KEY_COMMANDS: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_r: Command.RESTART,
    pygame.K_ESCAPE: Command.QUIT,
}

HELP_LINES = (
    "Left/Right: move",
    "Up: rotate",
    "Down: soft drop",
    "Space: hard drop",
    "Esc: quit",
)


def command_for_event(event: pygame.event.Event) -> Optional[Command]:
    """Translate a pygame event into an engine command, if it maps to one."""

    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_COMMANDS.get(event.key)
    return None


def _cell_rect(x: int, y: int, origin: tuple[int, int] = (MARGIN, MARGIN)) -> pygame.Rect:
    ox, oy = origin
    return pygame.Rect(ox + x * CELL_SIZE, oy + y * CELL_SIZE, CELL_SIZE, CELL_SIZE)


def draw_board(screen: pygame.Surface, board: Board) -> None:
    """Render the border and the settled cells."""

    outline = pygame.Rect(
        MARGIN - 1, MARGIN - 1, board.width * CELL_SIZE + 2, board.height * CELL_SIZE + 2
    )
    pygame.draw.rect(screen, BORDER, outline, 1)
    for y in range(board.height):
        for x in range(board.width):
            rect = _cell_rect(x, y)
            color = board.color_at(x, y)
            if color is not None:
                pygame.draw.rect(screen, CELL_COLORS[color], rect)
            pygame.draw.rect(screen, GRID_LINE, rect, 1)


def draw_piece(
    screen: pygame.Surface,
    piece: Piece,
    origin: tuple[int, int] = (MARGIN, MARGIN),
) -> None:
    """Render ``piece``; blocks above the board are not drawn."""

    color = CELL_COLORS[piece.color]
    for x, y in piece.blocks():
        if y < 0:
            continue
        rect = _cell_rect(x, y, origin)
        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, GRID_LINE, rect, 1)


def draw_panel(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    """Render the next-piece preview, score and controls."""

    left = MARGIN * 2 + state.board.width * CELL_SIZE
    top = MARGIN
    screen.blit(font.render("Next:", True, TEXT), (left, top))
    # Preview pivot sits two cells in so pieces extending left stay visible.
    preview = Piece(state.upcoming.kind, x=2, y=1)
    draw_piece(screen, preview, origin=(left, top + 24))

    text_y = top + 24 + 4 * CELL_SIZE
    screen.blit(font.render(f"Score: {state.score}", True, TEXT), (left, text_y))
    text_y += 28
    screen.blit(font.render(f"Lines: {state.lines}", True, TEXT), (left, text_y))
    text_y += 40
    for line in HELP_LINES:
        screen.blit(font.render(line, True, TEXT), (left, text_y))
        text_y += 22


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, board: Board) -> None:
    message = font.render("GAME OVER - press R to restart", True, GAME_OVER_TEXT)
    x = MARGIN + 4
    y = MARGIN + (board.height * CELL_SIZE) // 2
    screen.blit(message, (x, y))


def draw(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    screen.fill(BACKGROUND)
    draw_board(screen, state.board)
    if not state.game_over:
        draw_piece(screen, state.current)
    draw_panel(screen, font, state)
    if state.game_over:
        draw_game_over(screen, font, state.board)


class GameRunner:
    """Own a :class:`GameState` and drive it from the pygame event loop."""

    def __init__(self, state: Optional[GameState] = None) -> None:
        self.state = state or GameState()
        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._font: Optional[pygame.font.Font] = None

    def _next_command(self) -> Optional[Command]:
        """Return the first mapped command of this frame's events.

        The engine consumes at most one command per tick, matching a single
        key read per frame.
        """

        command: Optional[Command] = None
        for event in pygame.event.get():
            mapped = command_for_event(event)
            if mapped is Command.QUIT:
                return mapped
            if command is None:
                command = mapped
        return command

    def run(self) -> None:
        pygame.init()
        width = self.state.board.width * CELL_SIZE + MARGIN * 3 + PANEL_WIDTH
        height = self.state.board.height * CELL_SIZE + MARGIN * 2
        self._screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Tetris")
        self._clock = pygame.time.Clock()
        self._font = pygame.font.SysFont(None, 24)
        LOGGER.info("Game started")

        try:
            running = True
            while running:
                self._clock.tick(FPS)
                running = self.state.tick(self._next_command())
                draw(self._screen, self._font, self.state)
                pygame.display.set_caption(f"Tetris - Score: {self.state.score}")
                pygame.display.flip()
        finally:
            pygame.quit()
            LOGGER.info("Game stopped")


def main(state: Optional[GameState] = None) -> None:
    """Open the window and play until the player quits."""

    GameRunner(state).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    main()
