"""Gameplay dimensions, physics, timing and colours."""

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
BIRD_SIZE = 30
PIPE_WIDTH = 80
PIPE_GAP_MIN = 160
PIPE_GAP_MAX = 220
COIN_SIZE = 30
GRAVITY = 0.5
JUMP_FORCE = -8.0
PIPE_SPEED = 3

# Difficulty tuning
MAX_DIFFICULTY_REDUCTION = 40
MIN_GAP = 120
MIN_PIPE_HEIGHT = 80
MAX_LEVEL = 15

# Timing
PIPE_INTERVAL = 120  # frames between new pipes, about two seconds
FRAME_RATE = 60

# Audio volumes, 0-100
DEFAULT_VOLUME = 50
BACKGROUND_VOLUME = 30

# Colours
SKY_COLOR = (135, 206, 235)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
YELLOW = (255, 255, 85)
GREEN = (0, 170, 0)
RED = (170, 0, 0)
PIPE_BORDER_COLOR = (0, 100, 0)
COIN_GOLD = (255, 215, 0)
COIN_SHINE = (255, 255, 200)
COIN_BORDER = (184, 134, 11)
COIN_DETAIL = (255, 223, 0)