"""Core game state representation and rules."""

from .errors import IllegalMoveError, InvalidPlayerError, MancalaError, UndoError
from .game import GAME_TYPE, GameType, MancalaGame
from .game_state import (
    INITIAL_SEEDS,
    NUM_CELL_STATES,
    NUM_CELLS,
    NUM_PITS,
    NUM_PLAYERS,
    TOTAL_PITS,
    TOTAL_SEEDS,
    MancalaState,
    get_home_pit,
    get_player_pits,
)
from .observation import (
    check_player,
    information_state_string,
    observation_string,
    observation_tensor,
    observation_tensor_shape,
)
from .rules import (
    action_to_string,
    apply_move,
    create_starting_state,
    generate_legal_moves,
    get_game_result,
    history_string,
    init_board,
    is_terminal,
    player_totals,
    returns,
    string_to_action,
    undo_move,
)

__all__ = [
    "MancalaError",
    "IllegalMoveError",
    "InvalidPlayerError",
    "UndoError",
    "GAME_TYPE",
    "GameType",
    "MancalaGame",
    "INITIAL_SEEDS",
    "NUM_CELL_STATES",
    "NUM_CELLS",
    "NUM_PITS",
    "NUM_PLAYERS",
    "TOTAL_PITS",
    "TOTAL_SEEDS",
    "MancalaState",
    "get_home_pit",
    "get_player_pits",
    "check_player",
    "information_state_string",
    "observation_string",
    "observation_tensor",
    "observation_tensor_shape",
    "action_to_string",
    "apply_move",
    "create_starting_state",
    "generate_legal_moves",
    "get_game_result",
    "history_string",
    "init_board",
    "is_terminal",
    "player_totals",
    "returns",
    "string_to_action",
    "undo_move",
]
