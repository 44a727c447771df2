"""
constants.py: Centralized configuration for the game world and the front end.
"""

# -------- Game World Config --------
SCREEN_WIDTH = 800.0
SCREEN_HEIGHT = 600.0
BALL_X = SCREEN_WIDTH / 4       # Fixed ball X position
RESPAWN_Y = SCREEN_HEIGHT / 2
BALL_RADIUS = 10.0              # Drawn radius and collision half-width

# -------- Pipe Config --------
PIPE_WIDTH = 50.0
PIPE_GAP = 150.0
PIPE_SPEED = 2.0                # Horizontal speed (pixels/tick)
PIPE_SPAWN_SPACING = 300.0      # New pipe once the last one is this far in
PIPE_SPAWN_MARGIN = 50.0        # Minimum pipe height above and below the gap

# -------- Physics Config (Pixels / Tick / Tick) --------
GRAVITY = 0.5                   # Vertical acceleration (pixels/tick^2)
JUMP_IMPULSE = -10.0            # Velocity after a jump (pixels/tick)

# -------- Front End Config --------
RENDER_FPS = 60                 # One simulation tick per rendered frame
WINDOW_TITLE = "Flappy Ball"
