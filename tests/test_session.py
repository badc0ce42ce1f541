import pytest

from ttt_engine import (
    Difficulty,
    EngineConfig,
    GameMode,
    GameSession,
    IllegalMoveError,
    NoLegalMoveError,
    Scores,
)
from ttt_engine.game import DRAW, EMPTY, O, X, Outcome, Status, legal_moves

_ = EMPTY


def _pvp_x_wins(session):
    for index in (0, 3, 1, 4, 2):
        outcome = session.play(index)
    return outcome


def test_pvp_game_and_scores():
    session = GameSession(GameMode.PVP)
    outcome = _pvp_x_wins(session)
    assert outcome.status is Status.WON
    assert outcome.winner == X
    assert outcome.line == (0, 1, 2)
    assert session.scores == Scores(x=1, o=0, draws=0)
    assert not session.is_ai_turn


def test_no_moves_after_game_over():
    session = GameSession(GameMode.PVP)
    _pvp_x_wins(session)
    with pytest.raises(IllegalMoveError):
        session.play(8)
    with pytest.raises(NoLegalMoveError):
        session.ai_move()
    assert session.scores.total == 1


def test_history_tracks_board():
    session = GameSession(GameMode.PVP)
    session.play(4)
    session.play(0)
    assert len(session.history) == 2
    assert session.current_player == X
    with pytest.raises(IllegalMoveError):
        session.play(4)
    assert len(session.history) == 2


def test_reset_and_replay():
    session = GameSession(GameMode.PVP)
    _pvp_x_wins(session)
    final = list(session.board)
    session.reset()

    assert session.board == [_] * 9
    assert len(session.history) == 0
    assert session.replay(5) == final
    assert session.replay(0) == [_] * 9


def test_reset_mid_game_discards():
    session = GameSession(GameMode.PVP)
    _pvp_x_wins(session)
    session.reset()
    session.play(4)
    session.reset()
    assert session.history.last_completed[0].index == 0
    assert session.scores.total == 1


def test_pve_hard_engine_never_loses():
    config = EngineConfig(seed=3, ai_mark=O)
    session = GameSession(GameMode.PVE, Difficulty.HARD, config=config)
    for _game in range(5):
        while not session.outcome.is_terminal:
            if session.is_ai_turn:
                session.ai_move()
            else:
                session.play(session.rng.choice(legal_moves(session.board)))
        assert session.outcome.winner != X
        session.reset()
    assert session.scores.x == 0
    assert session.scores.total == 5


def test_engine_moves_first_as_x():
    session = GameSession(GameMode.PVE, "hard", config=EngineConfig(ai_mark=X))
    assert session.is_ai_turn
    assert session.ai_move() == 0
    assert not session.is_ai_turn


def test_oracle_used_through_session():
    session = GameSession(GameMode.PVE, Difficulty.HARD, oracle=lambda b, m: 8,
                          config=EngineConfig(ai_mark=X))
    assert session.ai_move() == 8


def test_scores_record_outcomes():
    scores = Scores()
    scores.record(Outcome(Status.WON, O, (0, 4, 8)))
    scores.record(DRAW)
    scores.record(Outcome(Status.ONGOING))
    assert scores == Scores(x=0, o=1, draws=1)
