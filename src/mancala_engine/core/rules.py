"""
Mancala rules implementation.

Implements a simplified Kalah variant:
- Sowing walks all 14 positions, stores of both players included
- Extra turn when the last seed lands in the mover's own store
- No capture rule and no skipping of the opponent's store
- Game ends when one side has no seeds in its sowing pits
- No end-of-game sweep: scores are taken from the board as it stands
"""

import logging
from typing import List, Optional, Tuple

from .errors import IllegalMoveError, UndoError
from .game_state import (
    INITIAL_SEEDS,
    TOTAL_PITS,
    MancalaState,
    get_home_pit,
    get_player_pits,
)

logger = logging.getLogger(__name__)


def init_board(state: MancalaState) -> None:
    """Fill every position with INITIAL_SEEDS, then empty both stores."""
    state.board[:] = [INITIAL_SEEDS] * TOTAL_PITS
    state.board[get_home_pit(1)] = 0
    state.board[get_home_pit(0)] = 0


def create_starting_state() -> MancalaState:
    """
    Create the initial game state.

    Returns:
        MancalaState with 4 seeds in every sowing pit, empty stores,
        player 0 to move and no history.
    """
    state = MancalaState(board=[0] * TOTAL_PITS)
    init_board(state)
    return state


def generate_legal_moves(state: MancalaState) -> List[int]:
    """
    Generate all legal moves for the current player.

    A move is legal if the chosen pit:
    - Belongs to the current player
    - Contains at least one seed

    Order matters for reproducibility: ascending (1..6) for player 0,
    descending (13..8) for player 1.

    Args:
        state: Current game state

    Returns:
        List of legal pit indices, empty if the game is over
    """
    if is_terminal(state):
        return []

    return [pit for pit in get_player_pits(state.current_player) if state.board[pit] > 0]


def apply_move(state: MancalaState, move: int) -> None:
    """
    Apply a move to the state in place.

    1. Pick up all seeds from the chosen pit
    2. Sow one seed per position, wrapping around the whole board
    3. If the last seed lands in the mover's store: extra turn
    4. Otherwise the turn passes to the opponent

    Args:
        state: Game state to mutate
        move: Pit index to move from

    Raises:
        IllegalMoveError: If move is not in generate_legal_moves(state).
            The state is left untouched.
    """
    legal_moves = generate_legal_moves(state)
    if move not in legal_moves:
        raise IllegalMoveError(
            f"Illegal move {move} for player {state.current_player} "
            f"(legal: {legal_moves})"
        )

    board = state.board
    seeds_in_hand = board[move]
    board[move] = 0
    for i in range(seeds_in_hand):
        board[(move + i + 1) % TOTAL_PITS] += 1

    landing = (move + seeds_in_hand) % TOTAL_PITS
    if landing != get_home_pit(state.current_player):
        state.current_player = 1 - state.current_player
    else:
        logger.debug(f"Move {move} landed in store, player {state.current_player} moves again")

    state.num_moves += 1
    state.history.append(move)


def undo_move(state: MancalaState, player: int, move: int) -> None:
    """
    History-only undo.

    Pops the most recent history entry and decrements the move counter.
    The board and the current player are NOT restored; callers needing a
    full inverse must clone() the state before applying the move.

    Stricter than a bare history pop: the move must match the last
    history entry, so a mismatched undo fails instead of silently
    dropping the wrong action.

    Args:
        state: Game state to mutate
        player: Player who made the move (unused)
        move: The move being undone, must be the last one in the history

    Raises:
        UndoError: If the history is empty or does not end with move
    """
    if not state.history:
        raise UndoError("Cannot undo: no moves in history")
    if state.history[-1] != move:
        raise UndoError(
            f"Cannot undo move {move}: last move was {state.history[-1]}"
        )

    state.history.pop()
    state.num_moves -= 1
    logger.debug(f"Undid move {move} by player {player} (history only)")


def _side_has_seeds(state: MancalaState, player: int) -> bool:
    return any(state.board[pit] > 0 for pit in get_player_pits(player))


def is_terminal(state: MancalaState) -> bool:
    """
    Check if the game has ended.

    Game ends when either player's sowing pits are all empty.
    """
    return not _side_has_seeds(state, 0) or not _side_has_seeds(state, 1)


def player_totals(state: MancalaState) -> Tuple[int, int]:
    """
    Raw seed totals per player, without any end-of-game sweep.

    Player 0 owns indices 1..7 (pits and store). Player 1 owns
    indices 8..13 plus its store at index 0.
    """
    half = TOTAL_PITS // 2
    p0_total = sum(state.board[1 : half + 1])
    p1_total = sum(state.board[half + 1 :]) + state.board[0]
    return p0_total, p1_total


def returns(state: MancalaState) -> Tuple[float, float]:
    """
    Normalized game outcome from both players' perspectives.

    Only meaningful on terminal states, but computed from the current
    board regardless.

    Returns:
        (1.0, -1.0) if player 0 has more seeds, (-1.0, 1.0) if fewer,
        (0.0, 0.0) on a tie
    """
    p0_total, p1_total = player_totals(state)

    if p0_total > p1_total:
        return 1.0, -1.0
    elif p0_total < p1_total:
        return -1.0, 1.0
    else:
        return 0.0, 0.0


def get_game_result(state: MancalaState) -> Optional[str]:
    """
    Get human-readable game result.

    Args:
        state: Game state

    Returns:
        Result string or None if not terminal
    """
    if not is_terminal(state):
        return None

    p0_total, p1_total = player_totals(state)

    if p0_total > p1_total:
        return f"Player 0 wins {p0_total}-{p1_total}"
    elif p0_total < p1_total:
        return f"Player 1 wins {p1_total}-{p0_total}"
    else:
        return f"Tie game {p0_total}-{p1_total}"


def action_to_string(player: int, action: int) -> str:
    """Actions are labelled by their decimal pit index."""
    return str(action)


def string_to_action(text: str) -> int:
    """Parse a decimal pit label back to an action."""
    try:
        return int(text.strip())
    except ValueError:
        raise IllegalMoveError(f"Not a pit index: {text!r}") from None


def history_string(state: MancalaState) -> str:
    """Applied actions joined by ', '."""
    return ", ".join(str(move) for move in state.history)
