"""Tests for the game descriptor."""

import dataclasses

import pytest
from mancala_engine.core import GAME_TYPE, MancalaGame, create_starting_state, observation_tensor


def test_game_type_facts():
    assert GAME_TYPE.short_name == "mancala"
    assert GAME_TYPE.long_name == "Mancala"
    assert GAME_TYPE.information == "perfect"
    assert GAME_TYPE.utility == "zero_sum"
    assert GAME_TYPE.min_num_players == GAME_TYPE.max_num_players == 2
    assert GAME_TYPE.provides_observation_tensor is True
    assert GAME_TYPE.provides_information_state_tensor is False

    with pytest.raises(dataclasses.FrozenInstanceError):
        GAME_TYPE.short_name = "kalah"


def test_game_descriptor():
    game = MancalaGame()

    assert game.num_players() == 2
    assert game.num_distinct_actions() == 14
    assert game.min_utility() == -1.0
    assert game.max_utility() == 1.0
    assert game.utility_sum() == 0.0
    assert game.observation_tensor_shape() == (49, 14)
    assert game.observation_tensor_size() == 49 * 14


def test_new_initial_state_is_fresh():
    game = MancalaGame()
    first = game.new_initial_state()
    second = game.new_initial_state()

    assert first == create_starting_state()
    first.board[1] = 0
    assert second.board[1] == 4


def test_tensor_size_matches_observation():
    game = MancalaGame()
    values = [0.0] * game.observation_tensor_size()

    observation_tensor(game.new_initial_state(), 0, values)

    assert sum(values) == 14.0
