import random

import pytest

from arcade_pong.pong.simulation import new_game_state


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def state(rng):
    return new_game_state(rng=rng)


@pytest.fixture
def hard_state(rng):
    return new_game_state(hard=True, rng=rng)
