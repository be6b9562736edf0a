"""Random playout harness."""

from .random_playout import PlayoutStats, RandomPlayoutRunner

__all__ = [
    "PlayoutStats",
    "RandomPlayoutRunner",
]
