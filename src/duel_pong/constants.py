"""
Game-wide constants for Duel Pong.
"""

from __future__ import annotations

from pathlib import Path

ASSETS_ROOT = Path(__file__).resolve().parent / "assets"

WINDOW_SIZE = (800, 600)
FPS = 60

# Colors (RGB)
BACKGROUND = (30, 30, 30)
WHITE = (255, 255, 255)
DIM = (150, 150, 150)
HIGHLIGHT = (255, 210, 80)
BUTTON_FILL = (45, 45, 45)
BUTTON_BORDER = (90, 90, 90)
LINE = (200, 200, 200)

WALL_COLOR = (120, 120, 120)
PLAYER1_COLOR = (90, 170, 255)
PLAYER2_COLOR = (255, 110, 110)
BALL_COLOR = WHITE

WALL_THICKNESS = 10.0
PADDLE_SIZE = (12, 90)
PADDLE_MARGIN = 30.0
PADDLE_SPEED = 320.0  # px/sec

BALL_SIZE = (12, 12)
# Unit speed keeps the direction values at +/-1 after every bounce;
# ball pace comes from BALL_TIME_SCALE (px/sec).
BALL_SPEED = 1.0
BALL_TIME_SCALE = 360.0

SLOW_MO_SCALE = 0.35
POINTS_TO_WIN = 5
