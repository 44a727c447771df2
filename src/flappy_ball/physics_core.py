"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from dataclasses import dataclass
from typing import List

from .constants import (
    GRAVITY, JUMP_IMPULSE, SCREEN_HEIGHT, PIPE_WIDTH, PIPE_GAP,
    BALL_RADIUS, RESPAWN_Y
)
from .data_models import Ball, Pipe


@dataclass
class PhysicsCore:
    """
    Ball physics and collision checks, shared by the engine and the tests.
    Velocity and position are never clamped here; leaving the screen is
    reported by check_collision instead.
    """
    gravity: float = GRAVITY
    jump_impulse: float = JUMP_IMPULSE
    screen_height: float = SCREEN_HEIGHT
    pipe_width: float = PIPE_WIDTH
    pipe_gap: float = PIPE_GAP
    ball_radius: float = BALL_RADIUS

    def apply_gravity_and_movement(self, ball: Ball):
        """Advances the ball by one tick under constant gravity."""
        ball.velocity += self.gravity
        ball.y += ball.velocity

    def flap(self, ball: Ball):
        """Sets (not adds) the upward jump velocity."""
        ball.velocity = self.jump_impulse

    def out_of_bounds(self, ball: Ball) -> bool:
        return ball.y < 0 or ball.y > self.screen_height

    def hits_pipe(self, ball: Ball, pipe: Pipe) -> bool:
        r = self.ball_radius
        horizontal_overlap = (ball.x + r > pipe.x
                              and ball.x - r < pipe.x + self.pipe_width)
        # Clipping either the top or the bottom pipe is enough.
        vertical_overlap = (ball.y - r < pipe.height
                            or ball.y + r > pipe.height + self.pipe_gap)
        return horizontal_overlap and vertical_overlap

    def check_collision(self, ball: Ball, pipes: List[Pipe]) -> bool:
        """Checks for collisions with floor, ceiling, or pipes."""

        # 1. Floor/Ceiling Collision
        if self.out_of_bounds(ball):
            return True

        # 2. Pipe Collision, first hit wins
        for pipe in pipes:
            if self.hits_pipe(ball, pipe):
                return True

        return False

    def respawn(self, ball: Ball, y: float = RESPAWN_Y):
        ball.y = y
        ball.velocity = 0.0
