import random

from termtris.commands import Command
from termtris.game_state import GameState
from termtris.tetromino import Color, Piece, TetrominoType


def _end_game(state: GameState) -> None:
    state.current = Piece(TetrominoType.I, rotation=1, x=0, y=0)
    state.lock_piece()
    assert state.game_over


def test_restart_from_game_over_resets_session():
    state = GameState(rng=random.Random(3))
    reference = random.Random(3)
    kinds = list(TetrominoType)
    reference.choice(kinds)
    reference.choice(kinds)

    state.board.set_cell(0, 19, Color.RED)
    state.score = 1200
    state.lines = 9
    state.speed = 9
    state.frame = 321
    _end_game(state)

    state.apply_command(Command.RESTART)

    assert not state.game_over
    assert state.board.is_empty()
    assert (state.score, state.lines, state.speed, state.frame) == (0, 0, 15, 0)
    assert state.current == state.spawn_piece(reference.choice(kinds))
    assert state.upcoming == state.spawn_piece(reference.choice(kinds))


def test_restart_through_tick_resumes_gravity():
    state = GameState.seeded(3)
    _end_game(state)
    assert state.tick(Command.RESTART)
    assert not state.game_over
    assert state.frame == 1


def test_restart_is_ignored_while_active():
    state = GameState.seeded(3)
    state.board.set_cell(0, 19, Color.RED)
    state.score = 300
    current, upcoming = state.current, state.upcoming

    state.apply_command("restart")

    assert state.score == 300
    assert state.board.color_at(0, 19) is Color.RED
    assert state.current is current
    assert state.upcoming is upcoming
