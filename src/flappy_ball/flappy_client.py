#!/usr/bin/env python3
"""
flappy_client.py

pygame window, keyboard input and rendering around the GameEngine.
"""

import argparse
import random
from typing import Optional

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, PIPE_WIDTH, PIPE_GAP, BALL_RADIUS,
    RENDER_FPS, WINDOW_TITLE
)
from .data_models import GameState, InputEvent
from .game_engine import GameEngine

SKY_BLUE = (135, 206, 235)
BALL_YELLOW = (255, 255, 0)
PIPE_GREEN = (0, 255, 0)
WHITE = (255, 255, 255)

STATE_MESSAGES = {
    GameState.START: "Press Space to Start!",
    GameState.PAUSED: "Paused. Press P to Resume.",
    GameState.GAME_OVER: "Game Over! Press R to Reset.",
}

KEY_EVENTS = {
    pygame.K_SPACE: InputEvent.JUMP,
    pygame.K_p: InputEvent.PAUSE,
    pygame.K_r: InputEvent.RESET,
}


class FlappyClient:
    def __init__(self, fps: int = RENDER_FPS, seed: Optional[int] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((int(SCREEN_WIDTH), int(SCREEN_HEIGHT)))
        pygame.display.set_caption(WINDOW_TITLE)

        # --- Game Logic ---
        rng = random.Random(seed)
        self.engine = GameEngine(rand=rng.random)
        self.fps = fps

        # Time Management
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 28)

    def run(self):
        """The main client execution loop: input, one tick, draw."""
        print(f"{WINDOW_TITLE} started at {self.fps} FPS.")
        running = True
        while running:
            self.clock.tick(self.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in KEY_EVENTS:
                    self._send_input(KEY_EVENTS[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self._send_input(InputEvent.JUMP)

            was_playing = self.engine.world.state is GameState.PLAYING
            self.engine.step()
            if was_playing and self.engine.world.state is GameState.GAME_OVER:
                print(f"Game over. Score: {self.engine.world.score} after {self.engine.tick_count} ticks")

            self._draw_game()

        world = self.engine.world
        print(f"Quitting. High score: {max(world.high_score, world.score)}")
        pygame.quit()

    def _send_input(self, event: InputEvent):
        world = self.engine.world
        before = world.state
        after = self.engine.handle_input(event)

        if event is InputEvent.RESET:
            print(f"Game reset. High score: {world.high_score}")
        elif before is GameState.START and after is GameState.PLAYING:
            print("Game started!")
        elif after is GameState.PAUSED:
            print("Game paused.")
        elif before is GameState.PAUSED and after is GameState.PLAYING:
            print("Game resumed.")

    def _draw_game(self):
        """Renders the world using pygame."""
        screen = self.screen
        world = self.engine.world
        screen.fill(SKY_BLUE)

        # Ball
        pygame.draw.circle(screen, BALL_YELLOW,
                           (int(world.ball.x), int(world.ball.y)), int(BALL_RADIUS))

        # Pipes: solid above and below the gap
        for pipe in world.pipes:
            pygame.draw.rect(screen, PIPE_GREEN, (pipe.x, 0, PIPE_WIDTH, pipe.height))
            bottom_y = pipe.height + PIPE_GAP
            pygame.draw.rect(screen, PIPE_GREEN,
                             (pipe.x, bottom_y, PIPE_WIDTH, SCREEN_HEIGHT - bottom_y))

        # HUD
        screen.blit(self.font.render(f"Score: {world.score}", True, WHITE), (10, 10))
        screen.blit(self.font.render(f"High Score: {world.high_score}", True, WHITE), (10, 40))

        message = STATE_MESSAGES.get(world.state)
        if message:
            text = self.font.render(message, True, WHITE)
            screen.blit(text, (SCREEN_WIDTH // 2 - text.get_width() // 2, SCREEN_HEIGHT // 2))

        pygame.display.flip()


def positive_int(value: str) -> int:
    fps = int(value)
    if fps <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return fps


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Flappy Ball. SPACE: jump, P: pause/resume, R: restart, ESC: quit.")
    parser.add_argument("--fps", type=positive_int, default=RENDER_FPS,
                        help="Frames (and simulation ticks) per second")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for pipe placement")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    client = FlappyClient(fps=args.fps, seed=args.seed)
    try:
        client.run()
    except KeyboardInterrupt:
        print("Interrupted.")
        pygame.quit()


if __name__ == "__main__":
    main()
