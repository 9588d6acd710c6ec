"""Configuration for the pong view.

Screen dimensions, sprite sizes, velocities and colors. Numeric values can
be overridden from the environment or a `.env` file beside this module.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from models import Color

# Load .env from package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Window size for the desktop host (a phone-shaped portrait window)
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 480)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 800)
FPS = _get_int('PONG_FPS', 60)

# Sprites (pixels, velocities in pixels per frame)
BALL_SIZE = _get_float('BALL_SIZE', 100.0)
BALL_MAX_VELOCITY = _get_float('BALL_MAX_VELOCITY', 20.0)
BALL_START_X = 10.0
BALL_START_Y = 100.0
PADDLE_WIDTH = _get_float('PADDLE_WIDTH', 40.0)
PADDLE_HEIGHT = _get_float('PADDLE_HEIGHT', 300.0)
PADDLE_SPEED = _get_float('PADDLE_SPEED', 20.0)

# Score text
TEXT_SIZE = 40
SCORE_OFFSET_X = 100.0  # left of the horizontal center
SCORE_Y = 30.0

# Colors
BACKGROUND_COLOR = Color(r=200, g=200, b=0)   # yellow
BALL_COLOR = Color(r=138, g=43, b=226)        # blue violet
PADDLE_COLOR = Color(r=73, g=49, b=28)        # brown
TEXT_COLOR = Color(r=0, g=0, b=0)             # black


@dataclass
class PongSettings:
    """Tunables for one pong view.

    Defaults come from the module constants, so environment overrides
    apply unless a field is passed explicitly.
    """

    ball_size: float = BALL_SIZE
    ball_max_velocity: float = BALL_MAX_VELOCITY
    ball_start: tuple = (BALL_START_X, BALL_START_Y)
    paddle_width: float = PADDLE_WIDTH
    paddle_height: float = PADDLE_HEIGHT
    paddle_speed: float = PADDLE_SPEED
    fps: int = FPS
    text_size: int = TEXT_SIZE
    score_offset_x: float = SCORE_OFFSET_X
    score_y: float = SCORE_Y
    background_color: Color = field(default=BACKGROUND_COLOR)
    ball_color: Color = field(default=BALL_COLOR)
    paddle_color: Color = field(default=PADDLE_COLOR)
    text_color: Color = field(default=TEXT_COLOR)

    def __post_init__(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.ball_size <= 0 or self.paddle_width <= 0 or self.paddle_height <= 0:
            raise ValueError("sprite dimensions must be positive")
