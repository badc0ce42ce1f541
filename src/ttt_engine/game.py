"""
TicTacToe game rules and board evaluation.

Board representation: list[int] of length 9, row-major
  - 0: empty
  - +1: X (moves first)
  - -1: O

Mark: +1 (X) or -1 (O)
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Set, Tuple

from .errors import InvalidBoardError

EMPTY = 0
X = +1
O = -1

CENTER = 4

# Winning lines (rows, columns, diagonals)
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)

SYMBOLS = {EMPTY: " ", X: "X", O: "O"}


class Status(Enum):
    ONGOING = "ongoing"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    `winner` is the winning mark for Status.WON and 0 otherwise; `line` is the
    first winning line in WIN_LINES order, kept for highlighting.
    """
    status: Status
    winner: int = EMPTY
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_terminal(self) -> bool:
        return self.status is not Status.ONGOING


ONGOING = Outcome(Status.ONGOING)
DRAW = Outcome(Status.DRAW)


def opponent(mark: int) -> int:
    return -mark


def new_board() -> List[int]:
    return [EMPTY] * 9


def winners_set(board: Sequence[int]) -> Set[int]:
    """Return set of winners (+1, -1, or both if illegal)."""
    wins = set()
    for a, b, c in WIN_LINES:
        s = board[a] + board[b] + board[c]
        if s == 3:
            wins.add(X)
        elif s == -3:
            wins.add(O)
    return wins


def evaluate(board: Sequence[int]) -> Outcome:
    """
    Classify a board as ongoing, won or drawn.

    The first line (in WIN_LINES order) holding three equal marks decides the
    winner. A full board without such a line is a draw.
    """
    for line in WIN_LINES:
        a, b, c = line
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return Outcome(Status.WON, board[a], line)
    if all(v != EMPTY for v in board):
        return DRAW
    return ONGOING


def legal_moves(board: Sequence[int]) -> List[int]:
    """Return list of legal move indices (empty squares)."""
    return [i for i, v in enumerate(board) if v == EMPTY]


def apply_move(board: Sequence[int], mark: int, action: int) -> List[int]:
    """Apply move and return new board."""
    new = list(board)
    new[action] = mark
    return new


def count_marks(board: Sequence[int]) -> Tuple[int, int]:
    x_cnt = sum(1 for v in board if v == X)
    o_cnt = sum(1 for v in board if v == O)
    return x_cnt, o_cnt


def side_to_move(board: Sequence[int]) -> int:
    """Infer side to move from board state (X plays first)."""
    x_cnt, o_cnt = count_marks(board)
    return X if x_cnt == o_cnt else O


def validate_board(board: Sequence[int]) -> None:
    """Raise InvalidBoardError unless the board is reachable under the rules."""
    if len(board) != 9:
        raise InvalidBoardError(f"board must have 9 cells, got {len(board)}")
    for i, v in enumerate(board):
        if v not in (EMPTY, X, O):
            raise InvalidBoardError(f"cell {i} holds unknown value {v!r}")

    # X goes first, so x_cnt == o_cnt or x_cnt == o_cnt + 1
    x_cnt, o_cnt = count_marks(board)
    if not (x_cnt == o_cnt or x_cnt == o_cnt + 1):
        raise InvalidBoardError(f"turn parity violated: {x_cnt} X vs {o_cnt} O")

    if len(winners_set(board)) >= 2:
        raise InvalidBoardError("both marks hold a winning line")


def is_legal_board(board: Sequence[int]) -> bool:
    """Check if board respects game rules."""
    try:
        validate_board(board)
    except InvalidBoardError:
        return False
    return True


def render(board: Sequence[int]) -> str:
    """Text grid of the board, one row per line."""
    rows = []
    for i in range(3):
        rows.append("|".join(SYMBOLS[board[i * 3 + j]] for j in range(3)))
    return "\n-+-+-\n".join(rows)
