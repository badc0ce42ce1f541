"""
Move policy dispatch.

Maps a difficulty tier to a selection strategy:
  - EASY:   uniformly random empty cell
  - NORMAL: tactical heuristic
  - HARD:   validated oracle suggestion, else exhaustive minimax
"""

import logging
import numbers
import random
from typing import Optional, Sequence

from .config import Difficulty
from .errors import InvalidBoardError, InvalidExternalSuggestion, NoLegalMoveError
from .game import EMPTY, O, X, evaluate, legal_moves, side_to_move, validate_board
from .heuristic import heuristic_move, random_move
from .minimax import best_move
from .oracle import Oracle, fetch_suggestion

logger = logging.getLogger(__name__)


def check_suggestion(board: Sequence[int], suggestion) -> int:
    """Return the suggestion if it names an empty cell, else raise."""
    if isinstance(suggestion, bool) or not isinstance(suggestion, numbers.Integral):
        raise InvalidExternalSuggestion(f"not a cell index: {suggestion!r}")
    suggestion = int(suggestion)
    if not 0 <= suggestion <= 8:
        raise InvalidExternalSuggestion(f"cell {suggestion} out of range")
    if board[suggestion] != EMPTY:
        raise InvalidExternalSuggestion(f"cell {suggestion} is occupied")
    return suggestion


def select_move(
    board: Sequence[int],
    mark: int,
    difficulty: Difficulty,
    suggestion: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Choose a move for `mark` under the given difficulty.

    Args:
        board: Current board, must be ongoing
        mark: Mark to move
        difficulty: Strategy tier
        suggestion: Optional untrusted hint, only considered on HARD
        rng: Random source for EASY and the heuristic fallback

    Returns:
        Cell index 0-8
    """
    if mark not in (X, O):
        raise InvalidBoardError(f"unknown mark {mark!r}")
    if not legal_moves(board):
        raise NoLegalMoveError("board is full")
    if evaluate(board).is_terminal:
        raise NoLegalMoveError("game is already over")

    difficulty = Difficulty.parse(difficulty)
    if difficulty is Difficulty.EASY:
        return random_move(board, rng)
    if difficulty is Difficulty.NORMAL:
        return heuristic_move(board, mark, rng)

    if suggestion is not None:
        try:
            return check_suggestion(board, suggestion)
        except InvalidExternalSuggestion as e:
            logger.debug(f"rejected suggestion, falling back to search: {e}")
    return best_move(board, mark)


def decide(
    board: Sequence[int],
    mark: int,
    difficulty: Difficulty,
    oracle: Optional[Oracle] = None,
    timeout: float = 2.0,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Validate the board, consult the oracle on HARD, then dispatch.

    Raises:
        InvalidBoardError: board is malformed or unreachable, or `mark`
            is not the side to move
        NoLegalMoveError: board is full or already decided
    """
    validate_board(board)
    if mark not in (X, O):
        raise InvalidBoardError(f"unknown mark {mark!r}")
    if mark != side_to_move(board):
        raise InvalidBoardError(f"mark {mark} is not the side to move")
    if evaluate(board).is_terminal:
        raise NoLegalMoveError("game is already over")

    difficulty = Difficulty.parse(difficulty)
    suggestion = None
    if difficulty is Difficulty.HARD:
        suggestion = fetch_suggestion(oracle, board, mark, timeout)
    return select_move(board, mark, difficulty, suggestion, rng)
