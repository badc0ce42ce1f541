"""
Exception taxonomy for the decision engine.

Only InvalidBoardError (and IllegalMoveError), NoLegalMoveError and
ReplayIndexOutOfRange reach callers. InvalidExternalSuggestion is raised and
caught inside the dispatcher.
"""


class TicTacToeError(Exception):
    """Base class for all engine errors."""


class InvalidBoardError(TicTacToeError):
    """Board shape, cell values or turn parity are inconsistent."""


class IllegalMoveError(InvalidBoardError):
    """A move targets an occupied or out-of-range cell."""


class NoLegalMoveError(TicTacToeError):
    """A move was requested on a full or finished board."""


class InvalidExternalSuggestion(TicTacToeError):
    """An oracle suggestion is malformed or targets an occupied cell."""


class ReplayIndexOutOfRange(TicTacToeError, IndexError):
    """Replay prefix length outside [0, len(history)]."""
