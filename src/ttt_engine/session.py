"""
Live match state: board, move history, scores and the engine's turn.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .config import Difficulty, EngineConfig
from .errors import IllegalMoveError, NoLegalMoveError
from .game import X, Outcome, Status, evaluate, new_board, side_to_move
from .oracle import Oracle
from .policy import decide
from .replay import Move, MoveHistory, reconstruct

logger = logging.getLogger(__name__)


class GameMode(Enum):
    PVP = "pvp"  # Both marks human
    PVE = "pve"  # One mark played by the engine


@dataclass
class Scores:
    """Running totals across games."""
    x: int = 0
    o: int = 0
    draws: int = 0

    def record(self, outcome: Outcome):
        """Count a terminal outcome; ongoing outcomes are ignored."""
        if outcome.status is Status.WON:
            if outcome.winner == X:
                self.x += 1
            else:
                self.o += 1
        elif outcome.status is Status.DRAW:
            self.draws += 1

    @property
    def total(self) -> int:
        return self.x + self.o + self.draws


class GameSession:
    """
    A sequence of games sharing a score record.

    Decisions are synchronous; the caller must not request a move while a
    previous one for the same game is still in flight.
    """

    def __init__(
        self,
        mode: GameMode = GameMode.PVE,
        difficulty: Optional[Difficulty] = None,
        oracle: Optional[Oracle] = None,
        config: Optional[EngineConfig] = None,
    ):
        self.config = config or EngineConfig()
        self.mode = mode
        self.difficulty = Difficulty.parse(difficulty or self.config.default_difficulty)
        self.ai_mark = self.config.ai_mark
        self.oracle = oracle
        self.rng = self.config.make_rng()

        self.board: List[int] = new_board()
        self.history = MoveHistory()
        self.scores = Scores()

    @property
    def outcome(self) -> Outcome:
        return evaluate(self.board)

    @property
    def current_player(self) -> int:
        return side_to_move(self.board)

    @property
    def is_ai_turn(self) -> bool:
        return (
            self.mode is GameMode.PVE
            and not self.outcome.is_terminal
            and self.current_player == self.ai_mark
        )

    def play(self, index: int) -> Outcome:
        """Place the current player's mark on `index`."""
        if self.outcome.is_terminal:
            raise IllegalMoveError("game is already over")
        move = Move(index, self.current_player)
        self.board = self.history.record_move(self.board, move)

        outcome = self.outcome
        if outcome.is_terminal:
            self.scores.record(outcome)
            logger.info(f"game over: {outcome.status.value} winner={outcome.winner}")
        return outcome

    def ai_move(self) -> int:
        """Let the engine choose and play a move for the side to move."""
        if self.outcome.is_terminal:
            raise NoLegalMoveError("game is already over")
        index = decide(
            self.board,
            self.current_player,
            self.difficulty,
            oracle=self.oracle,
            timeout=self.config.oracle_timeout,
            rng=self.rng,
        )
        self.play(index)
        return index

    def reset(self):
        """Start a new game; a finished game becomes the last completed match."""
        if self.outcome.is_terminal:
            self.history.start_new_game()
        else:
            self.history.discard()
        self.board = new_board()

    def replay(self, k: int) -> List[int]:
        """Board after `k` moves of the last completed match."""
        return reconstruct(self.history.last_completed, k)
