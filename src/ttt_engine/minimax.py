"""
Exact minimax search for TicTacToe with caching.

Scores are depth-aware and taken from the searching mark's perspective:
  - win:  10 - depth
  - loss: depth - 10
  - draw: 0
so quicker wins and slower losses are preferred.
"""

from typing import Dict, Iterator, List, Sequence, Tuple

from .errors import NoLegalMoveError
from .game import (
    EMPTY, O, X, Status,
    apply_move, count_marks, evaluate, legal_moves, opponent, winners_set,
)

WIN_SCORE = 10

# Cache: (board_tuple, searcher, to_move, depth) -> score
_MINIMAX_CACHE: Dict[Tuple[Tuple[int, ...], int, int, int], int] = {}


def _score(board: List[int], searcher: int, to_move: int, depth: int) -> int:
    key = (tuple(board), searcher, to_move, depth)
    if key in _MINIMAX_CACHE:
        return _MINIMAX_CACHE[key]

    outcome = evaluate(board)
    if outcome.status is Status.WON:
        v = WIN_SCORE - depth if outcome.winner == searcher else depth - WIN_SCORE
    elif outcome.status is Status.DRAW:
        v = 0
    else:
        child_scores = [
            _score(apply_move(board, to_move, action), searcher, opponent(to_move), depth + 1)
            for action in legal_moves(board)
        ]
        v = max(child_scores) if to_move == searcher else min(child_scores)

    _MINIMAX_CACHE[key] = v
    return v


def minimax_scores(board: Sequence[int], mark: int) -> Dict[int, int]:
    """
    Score every legal root move for `mark`.

    Returns:
        {action: score} in ascending action order
    """
    if evaluate(board).is_terminal:
        raise NoLegalMoveError("game is already over")
    board = list(board)
    return {
        action: _score(apply_move(board, mark, action), mark, opponent(mark), 1)
        for action in legal_moves(board)
    }


def best_move(board: Sequence[int], mark: int) -> int:
    """
    Return the optimal move for `mark`.

    Ties are broken by the lowest cell index reaching the maximum score.
    """
    best_action = -1
    best_v = None
    for action, v in minimax_scores(board, mark).items():
        if best_v is None or v > best_v:
            best_v = v
            best_action = action
    return best_action


def clear_cache():
    """Clear minimax cache (useful for memory management)."""
    _MINIMAX_CACHE.clear()


def cache_size() -> int:
    """Return current cache size."""
    return len(_MINIMAX_CACHE)


def iter_all_legal_nonterminal_states() -> Iterator[Tuple[List[int], int]]:
    """
    Iterate over all legal non-terminal board states.

    Yields:
        (board, player) tuples for exhaustive evaluation.
    """
    for n in range(3**9):
        # Decode base-3 representation
        x = n
        board = [EMPTY] * 9
        for i in range(9):
            d = x % 3
            x //= 3
            if d == 1:
                board[i] = X
            elif d == 2:
                board[i] = O

        x_cnt, o_cnt = count_marks(board)

        # Legal turn order: X starts
        if not (x_cnt == o_cnt or x_cnt == o_cnt + 1):
            continue

        # Skip illegal and terminal states
        if winners_set(board) or all(v != EMPTY for v in board):
            continue

        # Side to move
        player = X if x_cnt == o_cnt else O
        yield board, player
