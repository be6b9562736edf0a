"""Exceptions raised by the rules engine."""


class MancalaError(Exception):
    """Base class for rules engine errors."""
    pass


class IllegalMoveError(MancalaError, ValueError):
    """Raised when a move is not in the current legal move list."""
    pass


class InvalidPlayerError(MancalaError, ValueError):
    """Raised when a player index is outside [0, NUM_PLAYERS)."""
    pass


class UndoError(MancalaError, RuntimeError):
    """Raised when the history cannot be unwound."""
    pass
