"""
Flappy Ball: steer a ball through an endless stream of pipes.
"""

from .data_models import Ball, GameState, InputEvent, Pipe, World
from .game_engine import GameEngine, next_state
from .physics_core import PhysicsCore
from .pipe_stream import advance_and_spawn, spawn_pipe
