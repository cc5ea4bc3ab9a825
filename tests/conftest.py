"""
- Seeded random source so secret generation is repeatable
- A game with a known secret
- Keep MASTERMIND_* settings from the developer's shell or .env out of tests
"""
import random

import pytest

from mastermind.game import Game
from mastermind.types import Color

BLUE, GREEN, YELLOW, RED, PINK = Color.BLUE, Color.GREEN, Color.YELLOW, Color.RED, Color.PINK


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def secret():
    return [BLUE, GREEN, PINK, RED, YELLOW]


@pytest.fixture
def game(secret) -> Game:
    return Game(secret=secret)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Every test starts from default settings."""
    for name in ("MASTERMIND_LOG_LEVEL", "MASTERMIND_RANDOM_SOURCE", "MASTERMIND_DELIMITER"):
        monkeypatch.delenv(name, raising=False)
    # a stray .env in the working directory must not leak in
    monkeypatch.setattr("mastermind.config.load_dotenv", lambda *args, **kwargs: False)
    yield
