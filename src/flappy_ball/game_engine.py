"""
game_engine.py: The game state machine and the per-tick world simulation.
"""

import random
from dataclasses import dataclass, field
from typing import Callable, Optional

from .constants import (
    PIPE_SPEED, PIPE_SPAWN_SPACING, PIPE_SPAWN_MARGIN, SCREEN_WIDTH
)
from .data_models import GameState, InputEvent, World
from .physics_core import PhysicsCore
from .pipe_stream import advance_and_spawn


def next_state(state: GameState, event: InputEvent) -> GameState:
    """Pure transition function for (current state, input) pairs."""
    if event is InputEvent.RESET:
        return GameState.START
    if event is InputEvent.JUMP and state is GameState.START:
        return GameState.PLAYING
    if event is InputEvent.PAUSE:
        if state is GameState.PLAYING:
            return GameState.PAUSED
        if state is GameState.PAUSED:
            return GameState.PLAYING
    return state


@dataclass
class GameEngine(PhysicsCore):
    """
    The engine owning the whole world.
    Inherits ball physics and collision from PhysicsCore.
    """
    world: World = field(default_factory=World)
    screen_width: float = SCREEN_WIDTH
    pipe_speed: float = PIPE_SPEED
    spawn_spacing: float = PIPE_SPAWN_SPACING
    spawn_margin: float = PIPE_SPAWN_MARGIN
    respawn_y: Optional[float] = None      # defaults to mid-screen
    rand: Callable[[], float] = random.random
    tick_count: int = 0

    def __post_init__(self):
        if self.respawn_y is None:
            self.respawn_y = self.screen_height / 2
        self.world.ball.x = self.screen_width / 4
        self.respawn(self.world.ball, self.respawn_y)

    def handle_input(self, event: InputEvent) -> GameState:
        """Applies one input event and returns the resulting state."""
        world = self.world
        previous = world.state

        if event is InputEvent.RESET:
            self.reset()
            return world.state

        world.state = next_state(previous, event)

        # The jump that starts the game is consumed by the transition.
        if event is InputEvent.JUMP and previous is GameState.PLAYING:
            self.flap(world.ball)

        return world.state

    def step(self):
        """
        The main simulation step. Does nothing unless the game is being played.
        """
        world = self.world
        if world.state is not GameState.PLAYING:
            return

        self.tick_count += 1

        # 1. Ball physics
        self.apply_gravity_and_movement(world.ball)

        # 2. Move, retire, spawn and score pipes
        world.score += advance_and_spawn(
            world.pipes, world.ball,
            speed=self.pipe_speed,
            screen_width=self.screen_width,
            pipe_width=self.pipe_width,
            gap_height=self.pipe_gap,
            screen_height=self.screen_height,
            spawn_spacing=self.spawn_spacing,
            margin=self.spawn_margin,
            rand=self.rand,
        )

        # 3. Collisions
        self.check_world_collision()

    def check_world_collision(self) -> bool:
        """Moves the world to GAME_OVER when the ball hits anything."""
        world = self.world
        if self.check_collision(world.ball, world.pipes):
            world.state = GameState.GAME_OVER
            return True
        return False

    def reset(self):
        """Back to START; the high score survives, everything else is cleared."""
        world = self.world
        world.high_score = max(world.high_score, world.score)
        world.score = 0
        world.pipes.clear()
        self.respawn(world.ball, self.respawn_y)
        world.state = GameState.START
        self.tick_count = 0
