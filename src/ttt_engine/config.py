"""
Engine and arena configuration.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .game import O


class Difficulty(Enum):
    """Ordered difficulty tiers."""
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @classmethod
    def parse(cls, value) -> "Difficulty":
        """Accept a Difficulty or a case-insensitive name ("neural" means HARD)."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name == "neural":
            return cls.HARD
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown difficulty: {value!r}") from None


@dataclass
class EngineConfig:
    """Decision engine configuration."""

    # Seconds to wait for an external suggestion before falling back
    oracle_timeout: float = 2.0

    # Random seed (None: nondeterministic)
    seed: Optional[int] = None

    # Strategy tier used when none is given
    default_difficulty: Difficulty = Difficulty.NORMAL

    # Mark played by the engine in PvE games
    ai_mark: int = O

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


@dataclass
class ArenaConfig:
    """Self-play evaluation configuration."""

    # Games per matchup
    games: int = 200

    # Random seed
    seed: int = 0

    # Seconds to wait for an external suggestion on HARD
    oracle_timeout: float = 2.0

    # Show tqdm progress bars
    progress: bool = True
