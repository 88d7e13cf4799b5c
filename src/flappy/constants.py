"""
constants.py: Centralized configuration for world, physics and persistence settings.
"""

import math

# -------- Timing Config --------
RENDER_FPS = 60                 # Target display refresh rate
FRAME_DURATION = 16.67          # Reference frame length (ms); dt == 1.0 at 60 Hz
HIT_TO_DIE_DELAY = 100          # Impact pause before game over (ms)

# -------- Game World Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
GROUND_HEIGHT = 80
GROUND_Y = SCREEN_HEIGHT - GROUND_HEIGHT
BIRD_X = 80                     # Fixed bird X position
BIRD_RADIUS = 15                # For collision detection
RESPAWN_Y = SCREEN_HEIGHT / 2

# -------- Pipe Config --------
PIPE_WIDTH = 60
PIPE_GAP = 150                  # Vertical gap between top and bottom pipes
PIPE_SPEED = 3                  # Horizontal speed (units/frame)
PIPE_SPAWN_INTERVAL = 1600      # Real time between spawns (ms)
MIN_PIPE_HEIGHT = 80            # Minimum pipe segment height from top/ground

# -------- Physics Config (units / frame) --------
GRAVITY = 0.5
FLAP_IMPULSE = -8               # Velocity override on flap
TERMINAL_VELOCITY = 12          # Clamping for falling speed only

# -------- Rotation Config (radians) --------
ROTATION_FACTOR = 0.05
MAX_UP_ROTATION = 0.5
MAX_DOWN_ROTATION = math.pi / 2
ROTATION_SMOOTHING = 0.1

# -------- Persistence Config --------
DB_FILE = "flappy.db"
BEST_SCORE_KEY = "flappybird_best"
MUTED_KEY = "flappybird_muted"

# -------- Sound events --------
SOUND_FLAP = "flap"
SOUND_SCORE = "score"
SOUND_HIT = "hit"
SOUND_DIE = "die"
