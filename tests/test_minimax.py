import pytest

from ttt_engine import NoLegalMoveError
from ttt_engine.game import EMPTY, O, X, Status, apply_move, evaluate, legal_moves, opponent
from ttt_engine.minimax import (
    best_move, cache_size, clear_cache, iter_all_legal_nonterminal_states, minimax_scores,
)

_ = EMPTY


def test_prefers_immediate_win():
    board = [X, X, _,
             O, O, _,
             _, _, _]
    assert best_move(board, X) == 2
    scores = minimax_scores(board, X)
    assert scores[2] == 9
    assert max(v for a, v in scores.items() if a != 2) < 9


def test_blocks_when_no_win():
    board = [X, X, _,
             _, O, _,
             _, _, _]
    assert best_move(board, O) == 2


def test_first_index_breaks_ties():
    # All openings draw under perfect play
    assert set(minimax_scores([_] * 9, X).values()) == {0}
    assert best_move([_] * 9, X) == 0


def test_lost_position():
    # Two open X threats: every O reply loses two plies later
    board = [X, _, X,
             _, O, _,
             X, _, O]
    assert minimax_scores(board, O) == {1: -8, 3: -8, 5: -8, 7: -8}
    assert best_move(board, O) == 1


def test_loss_scores_carry_depth():
    # Anything but the block at 2 loses on the next ply
    board = [X, X, _,
             _, O, _,
             _, _, _]
    scores = minimax_scores(board, O)
    assert scores[2] > -8
    assert all(v == -8 for a, v in scores.items() if a != 2)


def test_does_not_mutate_board():
    board = [X, _, _, _, O, _, _, _, _]
    snapshot = list(board)
    best_move(board, X)
    assert board == snapshot


def test_terminal_board_rejected():
    with pytest.raises(NoLegalMoveError):
        best_move([X, X, X, O, O, _, _, _, _], O)
    with pytest.raises(NoLegalMoveError):
        best_move([X, O, X, X, O, O, O, X, X], O)


def test_cache_matches_fresh_search():
    board = [X, _, _, _, _, _, _, _, O]
    cached = minimax_scores(board, X)
    assert cache_size() > 0
    clear_cache()
    assert cache_size() == 0
    assert minimax_scores(board, X) == cached


def _assert_never_loses(board, searcher):
    outcome = evaluate(board)
    if outcome.is_terminal:
        assert not (outcome.status is Status.WON and outcome.winner != searcher)
        return
    to_move = X if board.count(X) == board.count(O) else O
    if to_move == searcher:
        _assert_never_loses(apply_move(board, searcher, best_move(board, searcher)), searcher)
    else:
        for i in legal_moves(board):
            _assert_never_loses(apply_move(board, opponent(searcher), i), searcher)


@pytest.mark.parametrize("searcher", [X, O])
def test_unbeatable_against_every_reply(searcher):
    _assert_never_loses([_] * 9, searcher)


def test_hard_self_play_draws():
    board = [_] * 9
    mark = X
    while not evaluate(board).is_terminal:
        board = apply_move(board, mark, best_move(board, mark))
        mark = opponent(mark)
    assert evaluate(board).status is Status.DRAW


def test_iter_all_legal_nonterminal_states():
    states = list(iter_all_legal_nonterminal_states())
    assert len(states) == 4520
    for board, player in states[:200]:
        assert not evaluate(board).is_terminal
        assert player == (X if board.count(X) == board.count(O) else O)
