"""
Single-ply tactical move selection.

Priority: win now, block the opponent's immediate win, take the center,
otherwise a uniformly random empty cell.
"""

import random
from typing import Optional, Sequence

from .errors import NoLegalMoveError
from .game import CENTER, EMPTY, WIN_LINES, evaluate, legal_moves, opponent


def completing_cell(board: Sequence[int], mark: int) -> Optional[int]:
    """Lowest-index empty cell that would complete a line for `mark`."""
    for i in legal_moves(board):
        for line in WIN_LINES:
            if i not in line:
                continue
            if all(board[j] == mark for j in line if j != i):
                return i
    return None


def random_move(board: Sequence[int], rng: Optional[random.Random] = None) -> int:
    moves = legal_moves(board)
    if not moves:
        raise NoLegalMoveError("board is full")
    rng = rng or random
    return rng.choice(moves)


def heuristic_move(
    board: Sequence[int],
    mark: int,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Pick a move by tactical rules.

    Args:
        board: Current board, must be ongoing
        mark: Mark to move (+1 or -1)
        rng: Random source for the final fallback

    Returns:
        Cell index 0-8
    """
    if evaluate(board).is_terminal:
        raise NoLegalMoveError("game is already over")

    win = completing_cell(board, mark)
    if win is not None:
        return win

    block = completing_cell(board, opponent(mark))
    if block is not None:
        return block

    if board[CENTER] == EMPTY:
        return CENTER

    return random_move(board, rng)
