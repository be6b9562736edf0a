"""
Game state representation for the Mancala (Kalah variant) rules engine.

A game state consists of:
- Board positions (12 sowing pits + 2 stores)
- Current player turn
- Move counter and action history

The board is a plain mutable list so that sowing can walk it circularly
with ``% TOTAL_PITS``. Rules in ``rules.py`` mutate the state in place;
callers exploring alternative branches should ``clone()`` first.
"""

from dataclasses import dataclass, field
from typing import List

NUM_PLAYERS = 2
NUM_PITS = 6  # Sowing pits per player
TOTAL_PITS = (NUM_PITS + 1) * 2
NUM_CELLS = TOTAL_PITS
INITIAL_SEEDS = 4
TOTAL_SEEDS = INITIAL_SEEDS * NUM_PITS * 2
# One category per possible seed count in a cell (0..TOTAL_SEEDS)
NUM_CELL_STATES = TOTAL_SEEDS + 1

SEPARATOR = "-"


@dataclass
class MancalaState:
    """
    Mutable game state.

    Board layout:
            P1 Pits (13-8)
        [13][12][11][10][9][8]
    [0]                       [7]  <- Stores
        [1] [2] [3] [4] [5] [6]
            P0 Pits (1-6)

    Indices:
    - P0 pits: 1 to NUM_PITS
    - P0 store: TOTAL_PITS // 2
    - P1 pits: TOTAL_PITS // 2 + 1 to TOTAL_PITS - 1
    - P1 store: 0
    """

    board: List[int]  # Seeds in each position
    current_player: int = 0  # 0 = P0, 1 = P1
    num_moves: int = 0
    history: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate state invariants and take ownership of the lists."""
        self.board = list(self.board)
        self.history = list(self.history)
        if len(self.board) != TOTAL_PITS:
            raise ValueError(
                f"Board size {len(self.board)} doesn't match expected {TOTAL_PITS}"
            )
        if self.current_player not in (0, 1):
            raise ValueError(
                f"Invalid player {self.current_player}, must be 0 or 1"
            )
        if any(seeds < 0 for seeds in self.board):
            raise ValueError("Negative seed count not allowed")

    @property
    def total_seeds(self) -> int:
        """Total seeds on the board."""
        return sum(self.board)

    @property
    def seeds_in_pits(self) -> int:
        """Seeds remaining in sowing pits (not in stores)."""
        return (
            self.total_seeds
            - self.board[get_home_pit(0)]
            - self.board[get_home_pit(1)]
        )

    def clone(self) -> "MancalaState":
        """Deep value copy; no list is shared with the original."""
        return MancalaState(
            board=list(self.board),
            current_player=self.current_player,
            num_moves=self.num_moves,
            history=list(self.history),
        )

    def __str__(self) -> str:
        """
        Three-line board string.

        Top row is P1's pits from index 13 down to 8, middle row holds
        the stores (index 0 left, index 7 right) and bottom row is P0's
        pits 1 to 6. Every row is built from SEPARATOR, e.g. at start:

            -4-4-4-4-4-4-
            0-----------0
            -4-4-4-4-4-4-
        """
        top = SEPARATOR + "".join(
            f"{self.board[TOTAL_PITS - 1 - i]}{SEPARATOR}" for i in range(NUM_PITS)
        )
        middle = (
            f"{self.board[0]}"
            + SEPARATOR * (NUM_PITS * 2 - 1)
            + f"{self.board[TOTAL_PITS // 2]}"
        )
        bottom = SEPARATOR + "".join(
            f"{self.board[i + 1]}{SEPARATOR}" for i in range(NUM_PITS)
        )
        return "\n".join([top, middle, bottom])


def get_home_pit(player: int) -> int:
    """Get store index for a player (P0 owns the middle store, P1 index 0)."""
    if player == 0:
        return TOTAL_PITS // 2
    return 0


def get_player_pits(player: int) -> List[int]:
    """
    Get sowing pit indices for a player, in legal-move order.

    P0's pits ascend from 1; P1's pits are walked from the far end of
    the board backwards (13 down to 8).
    """
    if player == 0:
        return [i + 1 for i in range(NUM_PITS)]
    return [TOTAL_PITS - 1 - i for i in range(NUM_PITS)]
