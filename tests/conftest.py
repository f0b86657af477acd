import logging
import random

import pytest

from holdem.config import GameConfig
from tests.test_helpers import make_players


@pytest.fixture(autouse=True)
def setup_logging():
    """Automatically disable logging for all tests."""
    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def rng():
    """Seeded random source so games and shuffles are reproducible."""
    return random.Random(1234)


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def three_players():
    """Three plain players with the default 50 chips."""
    return make_players(50, 50, 50)
