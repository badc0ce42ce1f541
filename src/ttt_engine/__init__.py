"""
TicTacToe decision engine.

Selects moves for an automated player under Easy/Normal/Hard difficulty
(random, tactical heuristic, exact minimax with an optional validated oracle
hint) and replays recorded games move by move.
"""

from .errors import (
    TicTacToeError,
    InvalidBoardError,
    IllegalMoveError,
    NoLegalMoveError,
    InvalidExternalSuggestion,
    ReplayIndexOutOfRange,
)
from .game import (
    EMPTY, X, O, WIN_LINES,
    Outcome, Status,
    evaluate, legal_moves, apply_move, side_to_move, opponent,
    validate_board, is_legal_board, new_board, render,
)
from .config import Difficulty, EngineConfig, ArenaConfig
from .heuristic import heuristic_move, random_move
from .minimax import best_move, minimax_scores, iter_all_legal_nonterminal_states
from .oracle import fetch_suggestion, PolicyNetOracle
from .policy import select_move, decide, check_suggestion
from .replay import Move, MoveHistory, reconstruct
from .session import GameSession, GameMode, Scores
from .arena import play_game, run_matchup, difficulty_policy

__version__ = "0.1.0"
__all__ = [
    "TicTacToeError",
    "InvalidBoardError",
    "IllegalMoveError",
    "NoLegalMoveError",
    "InvalidExternalSuggestion",
    "ReplayIndexOutOfRange",
    "EMPTY",
    "X",
    "O",
    "WIN_LINES",
    "Outcome",
    "Status",
    "evaluate",
    "legal_moves",
    "apply_move",
    "side_to_move",
    "opponent",
    "validate_board",
    "is_legal_board",
    "new_board",
    "render",
    "Difficulty",
    "EngineConfig",
    "ArenaConfig",
    "heuristic_move",
    "random_move",
    "best_move",
    "minimax_scores",
    "iter_all_legal_nonterminal_states",
    "fetch_suggestion",
    "PolicyNetOracle",
    "select_move",
    "decide",
    "check_suggestion",
    "Move",
    "MoveHistory",
    "reconstruct",
    "GameSession",
    "GameMode",
    "Scores",
    "play_game",
    "run_matchup",
    "difficulty_policy",
]
