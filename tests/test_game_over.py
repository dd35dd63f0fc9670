from termtris.commands import Command
from termtris.game_state import GameState
from termtris.tetromino import Color, Piece, TetrominoType


def test_lock_above_board_ends_game_without_writing():
    state = GameState.seeded(4)
    state.current = Piece(TetrominoType.I, rotation=1, x=0, y=0)
    upcoming = state.upcoming

    state.lock_piece()

    assert state.game_over
    assert state.board.is_empty()
    assert state.upcoming is upcoming


def test_spawn_collision_triggers_game_over():
    state = GameState.seeded(4)
    state.board.set_cell(5, 0, Color.RED)
    state.upcoming = state.spawn_piece(TetrominoType.O)
    state.current = Piece(TetrominoType.I, x=2, y=19)

    state.lock_piece()

    assert state.game_over
    assert state.current.kind is TetrominoType.O
    assert [state.board.color_at(x, 19) for x in range(4)] == [Color.CYAN] * 4


def test_clearing_top_rows_is_not_game_over():
    state = GameState.seeded(4)
    board = state.board
    for y in range(4):
        for x in range(1, board.width):
            board.set_cell(x, y, Color.GREEN)
    state.upcoming = Piece(TetrominoType.I, rotation=1, x=0, y=-2)
    state.current = Piece(TetrominoType.I, rotation=1, x=0, y=2)

    state.lock_piece()

    assert not state.game_over
    assert board.is_empty()
    assert state.score == 800


def test_game_over_freezes_simulation():
    state = GameState.seeded(4)
    state.current = Piece(TetrominoType.I, rotation=1, x=0, y=0)
    state.lock_piece()
    current = state.current
    frame = state.frame

    for command in (Command.MOVE_LEFT, Command.ROTATE, Command.HARD_DROP, None):
        assert state.tick(command)

    assert state.current == current
    assert state.frame == frame
    assert state.board.is_empty()
