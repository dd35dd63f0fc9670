import logging

import pytest

from termtris.__main__ import format_grid, main, simulate
from termtris.config import ConfigError
from termtris.game_state import GameState


def test_format_grid_uses_hash_and_dot():
    assert format_grid([[0, 3], [1, 0]]) == ".#\n#."


def test_simulate_drops_pieces_until_game_over(caplog):
    state = GameState.seeded(1)
    with caplog.at_level(logging.INFO):
        simulate(state, frames=10000, drop_every=1)
    assert state.game_over
    assert "Game over" in "".join(caplog.messages)


def test_main_prints_final_frame(capsys):
    main(["--seed", "1", "--frames", "45", "--drop-every", "30"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 21
    assert all(len(line) == 10 and set(line) <= {"#", "."} for line in lines[:20])
    assert lines[20].startswith("Score: ")
    assert lines[19].count("#") >= 1


def test_main_rejects_board_too_small_for_pieces():
    with pytest.raises(ConfigError):
        main(["--height", "1"])
