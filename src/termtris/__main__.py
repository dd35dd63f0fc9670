"""Command line entry point for the Tetris engine.

Run with: `python -m termtris`

By default a headless session is simulated for a number of frames, dropping a
piece every few frames, and the final frame is printed as ASCII.  This is a
minimal smoke test that the engine spawns, drops, locks and clears pieces.
Pass ``--pygame`` to play in a window instead.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .commands import Command
from .config import EngineConfig
from .game_state import GameState
from .utils import render_grid


LOGGER = logging.getLogger(__name__)


def format_grid(grid: list[list[int]]) -> str:
    return "\n".join("".join("#" if cell else "." for cell in row) for row in grid)


def simulate(state: GameState, frames: int, drop_every: int) -> GameState:
    """Tick ``state`` for ``frames`` frames, hard dropping every ``drop_every``."""

    for frame in range(1, frames + 1):
        command = None
        if drop_every > 0 and frame % drop_every == 0:
            command = Command.HARD_DROP
        state.tick(command)
        if state.game_over:
            LOGGER.info("Session ended after %d frames", frame)
            break
    return state


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="termtris", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece sequence.")
    parser.add_argument("--frames", type=int, default=600, help="Frames to simulate headlessly.")
    parser.add_argument(
        "--drop-every",
        type=int,
        default=30,
        help="Hard drop every N frames (0 lets gravity do all the work).",
    )
    parser.add_argument("--width", type=int, default=EngineConfig.width, help="Board width.")
    parser.add_argument("--height", type=int, default=EngineConfig.height, help="Board height.")
    parser.add_argument(
        "--pygame",
        action="store_true",
        help="Open a pygame window and play instead of simulating.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    config = EngineConfig(width=args.width, height=args.height)
    state = GameState(config, seed=args.seed)

    if args.pygame:
        from .run_pygame import main as run_window

        run_window(state)
        return

    simulate(state, args.frames, args.drop_every)
    print(format_grid(render_grid(state.board, None if state.game_over else state.current)))
    print(f"Score: {state.score}  Lines: {state.lines}  Next: {state.upcoming.kind.value}")


if __name__ == "__main__":
    main()
