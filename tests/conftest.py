import random

import pytest

from ttt_engine import minimax

@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture(autouse=True)
def _fresh_minimax_cache():
    minimax.clear_cache()
    yield
