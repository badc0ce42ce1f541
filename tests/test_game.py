import pytest

from ttt_engine import InvalidBoardError
from ttt_engine.game import (
    EMPTY, O, X, WIN_LINES, Status,
    apply_move, evaluate, is_legal_board, legal_moves, side_to_move,
    validate_board, winners_set, render,
)

_ = EMPTY


def _reachable_boards():
    """Every board reachable from the empty board by legal play."""
    seen = set()
    stack = [[_] * 9]
    while stack:
        board = stack.pop()
        key = tuple(board)
        if key in seen:
            continue
        seen.add(key)
        if evaluate(board).is_terminal:
            continue
        mark = side_to_move(board)
        for i in legal_moves(board):
            stack.append(apply_move(board, mark, i))
    return seen


@pytest.mark.parametrize("line", WIN_LINES)
def test_every_line_wins(line):
    board = [_] * 9
    for i in line:
        board[i] = O
    outcome = evaluate(board)
    assert outcome.status is Status.WON
    assert outcome.winner == O
    assert outcome.line == line


def test_ongoing_and_draw():
    assert evaluate([_] * 9).status is Status.ONGOING
    assert not evaluate([X, _, _, _, O, _, _, _, _]).is_terminal

    draw = [X, O, X,
            X, O, O,
            O, X, X]
    outcome = evaluate(draw)
    assert outcome.status is Status.DRAW
    assert outcome.winner == EMPTY
    assert outcome.line is None


def test_win_on_full_board_is_not_draw():
    board = [X, X, X,
             O, O, X,
             X, O, O]
    assert evaluate(board).status is Status.WON


def test_first_line_reported():
    # Two X lines through cell 0: row 0 comes before column 0
    board = [X, X, X,
             X, O, O,
             X, O, O]
    assert evaluate(board).line == (0, 1, 2)


def test_reachable_boards_have_at_most_one_winner():
    boards = _reachable_boards()
    assert len(boards) == 5478
    for board in boards:
        assert len(winners_set(board)) <= 1
        assert is_legal_board(board)


def test_apply_move_copies():
    board = [_] * 9
    new = apply_move(board, X, 4)
    assert board == [_] * 9
    assert new[4] == X


def test_side_to_move():
    assert side_to_move([_] * 9) == X
    assert side_to_move([X, _, _, _, _, _, _, _, _]) == O
    assert side_to_move([X, O, _, _, _, _, _, _, _]) == X


@pytest.mark.parametrize("board", [
    [X, X, _, _, _, _, _, _, _],       # X two ahead
    [O, _, _, _, _, _, _, _, _],       # O moved first
    [X, X, X, O, O, O, _, _, _],       # both win
    [X, _, _, _, _, _, _, _],          # 8 cells
    [2, _, _, _, _, _, _, _, _],       # unknown mark
])
def test_validate_board_rejects(board):
    with pytest.raises(InvalidBoardError):
        validate_board(board)
    assert not is_legal_board(board)


def test_render():
    assert render([X, O, _, _, _, _, _, _, _]) == "X|O| \n-+-+-\n | | \n-+-+-\n | | "
