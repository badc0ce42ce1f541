"""
Self-play evaluation.

Plays difficulty tiers against each other and tallies results.
"""

import random
from typing import Callable, List, Optional, Tuple

from tqdm.auto import trange

from .config import ArenaConfig, Difficulty
from .game import EMPTY, X, Status, evaluate, new_board, side_to_move
from .oracle import Oracle
from .policy import decide
from .replay import Move, MoveHistory
from .session import Scores

Policy = Callable[[List[int], int], int]


def difficulty_policy(
    difficulty: Difficulty,
    rng: random.Random,
    oracle: Optional[Oracle] = None,
    timeout: float = 2.0,
) -> Policy:
    """Wrap a difficulty tier as a (board, mark) -> index policy."""
    difficulty = Difficulty.parse(difficulty)

    def policy(board: List[int], mark: int) -> int:
        return decide(board, mark, difficulty, oracle=oracle, timeout=timeout, rng=rng)

    return policy


def play_game(policy_x: Policy, policy_o: Policy) -> Tuple[int, MoveHistory]:
    """
    Play one game from the empty board, X first.

    Returns:
        (winner, history) where winner is +1/-1/0
    """
    board = new_board()
    history = MoveHistory()

    for _ in range(9):
        outcome = evaluate(board)
        if outcome.is_terminal:
            break
        mark = side_to_move(board)
        policy = policy_x if mark == X else policy_o
        board = history.record_move(board, Move(policy(board, mark), mark))

    outcome = evaluate(board)
    winner = outcome.winner if outcome.status is Status.WON else EMPTY
    return winner, history


def run_matchup(
    x_difficulty: Difficulty,
    o_difficulty: Difficulty,
    config: Optional[ArenaConfig] = None,
    oracle: Optional[Oracle] = None,
) -> Scores:
    """Play `config.games` games of X tier vs O tier."""
    config = config or ArenaConfig()
    x_difficulty = Difficulty.parse(x_difficulty)
    o_difficulty = Difficulty.parse(o_difficulty)
    rng = random.Random(config.seed)
    policy_x = difficulty_policy(x_difficulty, rng, oracle, config.oracle_timeout)
    policy_o = difficulty_policy(o_difficulty, rng, oracle, config.oracle_timeout)

    scores = Scores()
    for _ in trange(config.games, desc=f"{x_difficulty.value} vs {o_difficulty.value}",
                    disable=not config.progress, leave=False):
        _, history = play_game(policy_x, policy_o)
        scores.record(evaluate(history.reconstruct(len(history))))

    return scores


def rates(scores: Scores) -> Tuple[float, float, float]:
    """(x_rate, draw_rate, o_rate)"""
    total = max(1, scores.total)
    return scores.x / total, scores.draws / total, scores.o / total
