"""
External move suggestions.

An oracle is any callable (board, mark) -> int | None. Its answer is only a
hint: it is fetched under a deadline here and validated by the dispatcher.
"""

import logging
import threading
from concurrent.futures import Future, TimeoutError as FutureTimeout
from typing import Callable, List, Optional, Sequence

import torch
import torch.nn as nn

from .game import EMPTY

logger = logging.getLogger(__name__)

Oracle = Callable[[List[int], int], Optional[int]]


def _run_oracle(future: Future, oracle: Oracle, board: List[int], mark: int):
    try:
        future.set_result(oracle(board, mark))
    except Exception as e:
        future.set_exception(e)


def fetch_suggestion(
    oracle: Optional[Oracle],
    board: Sequence[int],
    mark: int,
    timeout: float,
) -> Optional[int]:
    """
    Ask the oracle for a move, waiting at most `timeout` seconds.

    Returns the raw suggestion, or None when the oracle is absent, fails,
    answers None or misses the deadline.

    Each call runs on its own daemon thread. A running supplier cannot be
    interrupted: after a timeout it is left to finish and its answer is
    dropped, but it never holds up later calls or interpreter exit.
    """
    if oracle is None:
        return None

    future: Future = Future()
    worker = threading.Thread(
        target=_run_oracle,
        args=(future, oracle, list(board), mark),
        name="ttt-oracle",
        daemon=True,
    )
    worker.start()
    try:
        return future.result(timeout=timeout)
    except FutureTimeout:
        logger.debug(f"oracle missed {timeout:.2f}s deadline")
    except Exception as e:
        logger.warning(f"oracle failed: {e!r}")
    return None


def board_to_tokens_perspective(board: Sequence[int], player: int) -> torch.Tensor:
    """
    Encode a board from the mover's point of view.

    Tokens: 0 empty, 1 own mark, 2 opponent mark. Returns a [9] long tensor.
    """
    tokens = [0 if v == EMPTY else (1 if v == player else 2) for v in board]
    return torch.tensor(tokens, dtype=torch.long)


class PolicyNetOracle:
    """
    Oracle backed by a policy network.

    The model takes tokens [B, 9] and returns logits [B, 9], or a
    (logits, value) tuple as policy-value networks do. The argmax cell is
    suggested without masking; the dispatcher rejects occupied cells.
    """

    def __init__(self, model: nn.Module, device: Optional[torch.device] = None):
        self.device = device or torch.device("cpu")
        self.model = model.to(self.device)
        self.model.eval()

    @torch.inference_mode()
    def __call__(self, board: List[int], mark: int) -> int:
        tokens = board_to_tokens_perspective(board, mark).to(self.device).unsqueeze(0)
        out = self.model(tokens)
        logits = out[0] if isinstance(out, tuple) else out
        return int(logits.reshape(-1, 9)[0].argmax().item())
