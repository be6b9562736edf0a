"""Tests for game state representation."""

import pytest
from mancala_engine.core import (
    TOTAL_SEEDS,
    MancalaState,
    apply_move,
    create_starting_state,
    get_home_pit,
    get_player_pits,
)


def test_create_game_state():
    """Test basic game state creation."""
    board = [0] + [4] * 6 + [0] + [4] * 6
    state = MancalaState(board=board)

    assert len(state.board) == 14
    assert state.current_player == 0
    assert state.num_moves == 0
    assert state.history == []
    assert state.total_seeds == TOTAL_SEEDS == 48


def test_seeds_in_pits_excludes_stores():
    board = [5, 1, 1, 1, 1, 1, 1, 7, 2, 2, 2, 2, 2, 2]
    state = MancalaState(board=board)

    assert state.total_seeds == 30
    assert state.seeds_in_pits == 18


def test_player_pits():
    """Test getting player pit indices in legal-move order."""
    assert get_player_pits(0) == [1, 2, 3, 4, 5, 6]
    assert get_player_pits(1) == [13, 12, 11, 10, 9, 8]


def test_player_stores():
    """Player 0's store sits in the middle, player 1's at index 0."""
    assert get_home_pit(0) == 7
    assert get_home_pit(1) == 0


def test_clone_is_deep():
    state = create_starting_state()
    state.history.append(3)
    clone = state.clone()

    assert clone == state

    clone.board[1] = 0
    clone.history.append(1)
    clone.current_player = 1
    clone.num_moves = 5

    assert state.board[1] == 4
    assert state.history == [3]
    assert state.current_player == 0
    assert state.num_moves == 0


def test_initial_board_string():
    state = create_starting_state()

    assert str(state) == "-4-4-4-4-4-4-\n0-----------0\n-4-4-4-4-4-4-"


def test_board_string_orientation():
    """Top row runs from index 13 down to 8, bottom row from 1 to 6."""
    board = [10, 1, 2, 3, 4, 5, 6, 20, 8, 9, 0, 11, 12, 13]
    state = MancalaState(board=board)

    lines = str(state).split("\n")
    assert lines == [
        "-13-12-11-0-9-8-",
        "10-----------20",
        "-1-2-3-4-5-6-",
    ]
    assert lines[1].count("-") == 11


def test_state_validation():
    """Test state validation catches errors."""
    # Wrong board size
    with pytest.raises(ValueError):
        MancalaState(board=[0] * 12)

    # Invalid player
    with pytest.raises(ValueError):
        MancalaState(board=[0] * 14, current_player=2)

    # Negative seeds
    with pytest.raises(ValueError):
        MancalaState(board=[0, -1] + [0] * 12)


def test_states_own_their_board():
    """Two states built from one list never share it."""
    board = [0] + [4] * 6 + [0] + [4] * 6
    first = MancalaState(board=board)
    second = MancalaState(board=board)

    apply_move(first, 3)

    assert board == [0, 4, 4, 4, 4, 4, 4, 0, 4, 4, 4, 4, 4, 4]
    assert second.board == [0, 4, 4, 4, 4, 4, 4, 0, 4, 4, 4, 4, 4, 4]
    assert second.history == []


def test_tuple_board_is_normalized():
    state = MancalaState(board=tuple([0] + [4] * 6 + [0] + [4] * 6), history=(3,))

    assert isinstance(state.board, list)
    assert state.history == [3]

    apply_move(state, 1)
    assert state.board[1] == 0
