"""Shared fixtures for the simulation core tests."""
import pytest

from flappy_ball.data_models import GameState
from flappy_ball.game_engine import GameEngine


@pytest.fixture
def engine():
    """Engine with a fixed random source so pipe heights are predictable."""
    return GameEngine(rand=lambda: 0.5)


@pytest.fixture
def playing_engine(engine):
    engine.world.state = GameState.PLAYING
    return engine
