"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import BALL_X, RESPAWN_Y


class GameState(Enum):
    START = "start"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class InputEvent(Enum):
    """Discrete inputs delivered by the front end between ticks."""
    JUMP = "jump"
    PAUSE = "pause"
    RESET = "reset"


@dataclass
class Ball:
    """The player-controlled ball. Only the vertical axis is simulated."""
    x: float = BALL_X
    y: float = RESPAWN_Y
    velocity: float = 0.0


@dataclass
class Pipe:
    """A pipe pair; `height` is where the gap starts, measured from the top."""
    x: float
    height: float
    passed: bool = False

    def right_edge(self, pipe_width: float) -> float:
        return self.x + pipe_width


@dataclass
class World:
    """Everything the simulation owns and the renderer reads."""
    ball: Ball = field(default_factory=Ball)
    pipes: List[Pipe] = field(default_factory=list)
    score: int = 0
    high_score: int = 0
    state: GameState = GameState.START
