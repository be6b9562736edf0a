"""Utility modules for the Mancala engine."""

from .rich_display import MancalaDisplay, setup_rich_logging

__all__ = [
    "MancalaDisplay",
    "setup_rich_logging",
]
