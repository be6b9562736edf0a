"""Rules engine for Mancala (Kalah variant)."""

__version__ = "0.1.0"
