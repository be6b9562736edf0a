"""
Static description of the game, as a game registry would publish it.
"""

from dataclasses import dataclass
from typing import Tuple

from .game_state import NUM_CELL_STATES, NUM_CELLS, NUM_PLAYERS, TOTAL_PITS, MancalaState
from .observation import observation_tensor_shape
from .rules import create_starting_state


@dataclass(frozen=True)
class GameType:
    """Facts about the game."""

    short_name: str
    long_name: str
    dynamics: str
    chance_mode: str
    information: str
    utility: str
    reward_model: str
    max_num_players: int
    min_num_players: int
    provides_information_state_string: bool
    provides_information_state_tensor: bool
    provides_observation_string: bool
    provides_observation_tensor: bool


GAME_TYPE = GameType(
    short_name="mancala",
    long_name="Mancala",
    dynamics="sequential",
    chance_mode="deterministic",
    information="perfect",
    utility="zero_sum",
    reward_model="terminal",
    max_num_players=NUM_PLAYERS,
    min_num_players=NUM_PLAYERS,
    provides_information_state_string=True,
    provides_information_state_tensor=False,
    provides_observation_string=True,
    provides_observation_tensor=True,
)


class MancalaGame:
    """
    Game descriptor and initial-state factory.

    The game takes no parameters; every instance is equivalent.
    """

    game_type = GAME_TYPE

    def num_players(self) -> int:
        return NUM_PLAYERS

    def num_distinct_actions(self) -> int:
        # Actions are pit indices, stores included
        return TOTAL_PITS

    def min_utility(self) -> float:
        return -1.0

    def max_utility(self) -> float:
        return 1.0

    def utility_sum(self) -> float:
        return 0.0

    def observation_tensor_shape(self) -> Tuple[int, int]:
        return observation_tensor_shape()

    def observation_tensor_size(self) -> int:
        return NUM_CELL_STATES * NUM_CELLS

    def new_initial_state(self) -> MancalaState:
        return create_starting_state()

    def __repr__(self) -> str:
        return f"MancalaGame(short_name={self.game_type.short_name!r})"
