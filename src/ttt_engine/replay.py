"""
Move history and replay.

The live history is append-only while a game runs and is cleared when the
next game starts; the finished game is kept as the last completed match.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from .errors import IllegalMoveError, ReplayIndexOutOfRange
from .game import EMPTY, O, X, apply_move, new_board


@dataclass(frozen=True)
class Move:
    index: int  # Cell 0-8
    mark: int   # +1 or -1


def reconstruct(history: Sequence[Move], k: int) -> List[int]:
    """
    Rebuild the board after the first `k` moves of `history`.

    Pure: starts from an empty board every call and never touches the
    history or any live board.
    """
    if not isinstance(k, int) or not 0 <= k <= len(history):
        raise ReplayIndexOutOfRange(f"k={k!r} outside [0, {len(history)}]")
    board = new_board()
    for move in history[:k]:
        board[move.index] = move.mark
    return board


class MoveHistory:
    """
    Append-only log of the current game's moves.

    Invariant outside replay: len(history) equals the number of marked cells
    on the live board.
    """

    def __init__(self):
        self.moves: List[Move] = []
        self.last_completed: Tuple[Move, ...] = ()

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def record_move(self, board: Sequence[int], move: Move) -> List[int]:
        """
        Append `move` and return the board with it applied.

        Raises IllegalMoveError and leaves the history unchanged if the cell
        is out of range or occupied, or if `board` is out of sync with the log.
        """
        if move.mark not in (X, O):
            raise IllegalMoveError(f"unknown mark {move.mark!r}")
        if not 0 <= move.index <= 8:
            raise IllegalMoveError(f"cell {move.index} out of range")
        if board[move.index] != EMPTY:
            raise IllegalMoveError(f"cell {move.index} is occupied")
        marked = sum(1 for v in board if v != EMPTY)
        if marked != len(self.moves):
            raise IllegalMoveError(
                f"board has {marked} marks but history has {len(self.moves)} moves"
            )

        self.moves.append(move)
        return apply_move(board, move.mark, move.index)

    def reconstruct(self, k: int) -> List[int]:
        return reconstruct(self.moves, k)

    def snapshots(self) -> Iterator[List[int]]:
        """Boards after 0, 1, ..., len(self) moves."""
        for k in range(len(self.moves) + 1):
            yield reconstruct(self.moves, k)

    def start_new_game(self):
        """Keep the current moves as the last completed match and clear."""
        self.last_completed = tuple(self.moves)
        self.moves = []

    def discard(self):
        """Clear an unfinished game, keeping the previous completed match."""
        self.moves = []
