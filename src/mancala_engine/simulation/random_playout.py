"""
Uniformly random playouts for exercising the rules engine.

Plays complete games from the starting position, picking each move
uniformly from the legal move list, and checks seed conservation after
every move. Used by the ``simulate`` CLI command as a smoke test of the
rules and to gather rough game statistics.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tqdm import tqdm

from ..core import (
    TOTAL_SEEDS,
    MancalaState,
    apply_move,
    create_starting_state,
    generate_legal_moves,
    is_terminal,
    returns,
)

logger = logging.getLogger(__name__)


@dataclass
class PlayoutStats:
    """Aggregated results of a batch of playouts."""

    games: int = 0
    wins: List[int] = field(default_factory=lambda: [0, 0])
    draws: int = 0
    total_moves: int = 0
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    extra_turns: int = 0

    def record(self, state: MancalaState, extra_turns: int) -> None:
        """Add one finished game."""
        self.games += 1
        self.total_moves += state.num_moves
        self.extra_turns += extra_turns

        if self.min_length is None or state.num_moves < self.min_length:
            self.min_length = state.num_moves
        if self.max_length is None or state.num_moves > self.max_length:
            self.max_length = state.num_moves

        p0_return, _ = returns(state)
        if p0_return > 0:
            self.wins[0] += 1
        elif p0_return < 0:
            self.wins[1] += 1
        else:
            self.draws += 1

    @property
    def mean_length(self) -> float:
        return self.total_moves / self.games if self.games else 0.0

    def win_rate(self, player: int) -> float:
        return self.wins[player] / self.games if self.games else 0.0


class RandomPlayoutRunner:
    """
    Plays batches of random games.

    Each runner owns its own random.Random so results are reproducible
    for a given seed.
    """

    def __init__(self, num_games: int, seed: Optional[int] = None, show_progress: bool = True):
        """
        Initialize playout runner.

        Args:
            num_games: Number of games to play
            seed: Random seed for reproducibility (None = nondeterministic)
            show_progress: Show a tqdm progress bar
        """
        if num_games < 1:
            raise ValueError(f"num_games must be positive, got {num_games}")

        self.num_games = num_games
        self.seed = seed
        self.show_progress = show_progress
        self.rng = random.Random(seed)

    def play_game(self) -> Tuple[MancalaState, int]:
        """
        Play one game to the end.

        Returns:
            (terminal state, number of extra turns taken)

        Raises:
            RuntimeError: If a move changes the total number of seeds
        """
        state = create_starting_state()
        extra_turns = 0

        while not is_terminal(state):
            mover = state.current_player
            move = self.rng.choice(generate_legal_moves(state))
            apply_move(state, move)

            if state.total_seeds != TOTAL_SEEDS:
                raise RuntimeError(
                    f"Seed conservation violated after move {move}: "
                    f"{state.total_seeds} != {TOTAL_SEEDS}\n{state}"
                )
            if state.current_player == mover:
                extra_turns += 1

        return state, extra_turns

    def run(self) -> PlayoutStats:
        """Play all games and return aggregated statistics."""
        logger.info(f"Playing {self.num_games:,} random games (seed={self.seed})")
        stats = PlayoutStats()

        with tqdm(
            total=self.num_games,
            desc="Playouts",
            unit=" game",
            disable=not self.show_progress,
        ) as pbar:
            for _ in range(self.num_games):
                state, extra_turns = self.play_game()
                stats.record(state, extra_turns)
                pbar.update(1)

        logger.info(
            f"Finished {stats.games:,} games: P0 {stats.wins[0]:,}, "
            f"P1 {stats.wins[1]:,}, draws {stats.draws:,}"
        )
        return stats
