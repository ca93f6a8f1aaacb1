"""
constants.py: Centralized configuration for the game and the display driver.
"""

# -------- Screen Config (character cells) --------
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50

# Time synchronization
FRAME_DURATION = 75.0           # Milliseconds per physics step

# -------- Physics Config (cells / step) --------
GRAVITY_STEP = 0.2              # Velocity gained per physics step
TERMINAL_VELOCITY = 2.0         # Clamping for stability
FLAP_VELOCITY = -2.0            # Instantaneous velocity after a flap
PLAYER_START_X = 5
PLAYER_START_Y = 25

# -------- Obstacle Config --------
GAP_Y_MIN = 10                  # Gap center range, upper bound exclusive
GAP_Y_MAX = 40
BASE_GAP_SIZE = 20
MIN_GAP_SIZE = 2                # Floor so the gap never closes

# -------- Glyphs & Colors --------
PLAYER_GLYPH = "@"
WALL_GLYPH = "|"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
NAVY = (0, 0, 128)

# -------- Driver Config --------
WINDOW_TITLE = "Flappy Game"
CELL_SIZE = 12                  # Pixels per character cell
RENDER_FPS = 60
