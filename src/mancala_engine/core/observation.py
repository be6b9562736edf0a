"""
Per-player views of a game state.

The game is perfect information, so both players get the same view:
- Information state: the full action history
- Observation string: the board string
- Observation tensor: one-hot seed counts, shape (NUM_CELL_STATES, NUM_CELLS)
"""

from typing import MutableSequence, Tuple

from .errors import InvalidPlayerError
from .game_state import NUM_CELL_STATES, NUM_CELLS, NUM_PLAYERS, MancalaState
from .rules import history_string


def check_player(player: int) -> None:
    """Raise InvalidPlayerError unless 0 <= player < NUM_PLAYERS."""
    if not 0 <= player < NUM_PLAYERS:
        raise InvalidPlayerError(
            f"Invalid player {player}, must be in [0, {NUM_PLAYERS})"
        )


def observation_tensor_shape() -> Tuple[int, int]:
    """(seed-count categories, cells)."""
    return NUM_CELL_STATES, NUM_CELLS


def information_state_string(state: MancalaState, player: int) -> str:
    check_player(player)
    return history_string(state)


def observation_string(state: MancalaState, player: int) -> str:
    check_player(player)
    return str(state)


def observation_tensor(
    state: MancalaState, player: int, values: MutableSequence[float]
) -> None:
    """
    Write a one-hot encoding of the board into a caller-provided buffer.

    ``values`` is a flat buffer of NUM_CELL_STATES * NUM_CELLS floats viewed
    row-major as (NUM_CELL_STATES, NUM_CELLS): entry (count, cell) is 1.0
    when ``cell`` holds ``count`` seeds, everything else is 0.0.

    Seed counts are used directly as the row index, so a cell may hold at
    most NUM_CELL_STATES - 1 (= all 48 seeds). Hand-built boards above that
    are rejected.

    Args:
        state: Game state to encode
        player: Observing player
        values: Buffer to fill (list, array.array, flat numpy array, ...)

    Raises:
        InvalidPlayerError: If player is out of range
        ValueError: If the buffer has the wrong size or a count overflows
    """
    check_player(player)

    expected_size = NUM_CELL_STATES * NUM_CELLS
    if len(values) != expected_size:
        raise ValueError(
            f"Observation buffer size {len(values)} doesn't match expected {expected_size}"
        )

    for cell, seeds in enumerate(state.board):
        if seeds >= NUM_CELL_STATES:
            raise ValueError(
                f"Cannot encode {seeds} seeds in cell {cell} "
                f"(max {NUM_CELL_STATES - 1})"
            )

    for i in range(expected_size):
        values[i] = 0.0
    for cell, seeds in enumerate(state.board):
        values[seeds * NUM_CELLS + cell] = 1.0
