"""Tests for the random playout harness."""

import pytest
from mancala_engine.core import is_terminal
from mancala_engine.simulation import PlayoutStats, RandomPlayoutRunner


def test_play_game_reaches_terminal_state():
    runner = RandomPlayoutRunner(num_games=1, seed=7, show_progress=False)

    state, extra_turns = runner.play_game()

    assert is_terminal(state)
    assert state.total_seeds == 48
    assert state.num_moves == len(state.history)
    assert 0 <= extra_turns <= state.num_moves


def test_run_aggregates_every_game():
    stats = RandomPlayoutRunner(num_games=25, seed=3, show_progress=False).run()

    assert stats.games == 25
    assert stats.wins[0] + stats.wins[1] + stats.draws == 25
    assert 0 < stats.min_length <= stats.mean_length <= stats.max_length


def test_same_seed_same_results():
    first = RandomPlayoutRunner(num_games=10, seed=42, show_progress=False).run()
    second = RandomPlayoutRunner(num_games=10, seed=42, show_progress=False).run()

    assert first == second


def test_empty_stats():
    stats = PlayoutStats()

    assert stats.mean_length == 0.0
    assert stats.win_rate(0) == 0.0


def test_rejects_non_positive_game_count():
    with pytest.raises(ValueError):
        RandomPlayoutRunner(num_games=0)


def test_progress_bar_reports_games(capsys):
    stats = RandomPlayoutRunner(num_games=3, seed=5, show_progress=True).run()

    assert stats.games == 3
    err = capsys.readouterr().err
    assert "Playouts" in err
    assert "3/3" in err
