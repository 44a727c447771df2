"""
pipe_stream.py: Scrolling, retiring, spawning and scoring of pipes.
"""

import random
from typing import Callable, List

from .constants import (
    PIPE_SPEED, PIPE_WIDTH, PIPE_GAP, PIPE_SPAWN_SPACING, PIPE_SPAWN_MARGIN,
    SCREEN_WIDTH, SCREEN_HEIGHT
)
from .data_models import Ball, Pipe


def spawn_pipe(pipes: List[Pipe],
               screen_width: float = SCREEN_WIDTH,
               screen_height: float = SCREEN_HEIGHT,
               gap_height: float = PIPE_GAP,
               margin: float = PIPE_SPAWN_MARGIN,
               rand: Callable[[], float] = random.random) -> Pipe:
    """
    Appends a new pipe at the right edge of the screen.

    The gap top is drawn uniformly from [margin, screen_height - gap_height - margin].
    A gap too tall for the screen gives an empty or inverted range; the pipe
    is still created.
    """
    min_height = margin
    max_height = screen_height - gap_height - margin
    height = min_height + rand() * (max_height - min_height)

    pipe = Pipe(x=float(screen_width), height=height)
    pipes.append(pipe)
    return pipe


def advance_and_spawn(pipes: List[Pipe], ball: Ball,
                      speed: float = PIPE_SPEED,
                      screen_width: float = SCREEN_WIDTH,
                      pipe_width: float = PIPE_WIDTH,
                      gap_height: float = PIPE_GAP,
                      screen_height: float = SCREEN_HEIGHT,
                      spawn_spacing: float = PIPE_SPAWN_SPACING,
                      margin: float = PIPE_SPAWN_MARGIN,
                      rand: Callable[[], float] = random.random) -> int:
    """
    One tick of the pipe stream. Mutates `pipes` in place and returns the
    number of pipes the ball cleared this tick.
    """
    # 1. Slide everything left
    for pipe in pipes:
        pipe.x -= speed

    # 2. Drop pipes that are fully off the left edge
    pipes[:] = [p for p in pipes if p.right_edge(pipe_width) > 0]

    # 3. At most one spawn per tick; spacing is measured from the newest pipe
    if not pipes or pipes[-1].x < screen_width - spawn_spacing:
        spawn_pipe(pipes, screen_width, screen_height, gap_height, margin, rand)

    # 4. Score every pipe the ball has fully passed
    scored = 0
    for pipe in pipes:
        if not pipe.passed and pipe.right_edge(pipe_width) < ball.x:
            pipe.passed = True
            scored += 1

    return scored
