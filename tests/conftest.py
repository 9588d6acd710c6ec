"""Shared pytest fixtures."""
import os
import random
from typing import Any, List, Tuple

# Headless pygame for every test module
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from models import Color, Rectangle
from pongview import logging as pong_logging
from pongview.config import PongSettings
from pongview.surface import DrawingSurface
from pongview.view import PongState, new_state


class RecordingSurface(DrawingSurface):
    """DrawingSurface that records every call instead of drawing."""

    def __init__(self, width: int = 480, height: int = 800):
        self._width = width
        self._height = height
        self.calls: List[Tuple[Any, ...]] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self, color: Color) -> None:
        self.calls.append(('clear', color))

    def draw_ellipse(self, rect: Rectangle, color: Color) -> None:
        self.calls.append(('ellipse', rect, color))

    def draw_rect(self, rect: Rectangle, color: Color) -> None:
        self.calls.append(('rect', rect, color))

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color) -> None:
        self.calls.append(('text', text, x, y, size, color))

    def kinds(self) -> List[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def surface():
    """480x800 recording surface."""
    return RecordingSurface(480, 800)


@pytest.fixture
def make_surface():
    """Factory for recording surfaces of any size."""
    return RecordingSurface


@pytest.fixture
def settings():
    """Settings with the stock sprite sizes, independent of the environment."""
    return PongSettings(
        ball_size=100.0,
        ball_max_velocity=20.0,
        paddle_width=40.0,
        paddle_height=300.0,
        paddle_speed=20.0,
        fps=60,
    )


@pytest.fixture
def state(settings) -> PongState:
    """480x800 state, already placed: paddle at (440, 250), ball parked at rest.

    Tests set the ball and paddle velocities they need.
    """
    s = new_state(settings, random.Random(1234))
    s.screen_width = 480
    s.screen_height = 800
    s.initialized = True
    s.paddle.set_location(440, 250)
    s.ball.set_location(100, 300)
    s.ball.set_velocity(0, 0)
    return s


@pytest.fixture(autouse=True)
def restore_logging_config():
    """Keep logging configuration changes local to a test."""
    saved_default = pong_logging._config['default_level']
    saved_modules = dict(pong_logging._config['module_levels'])
    yield
    pong_logging._config['default_level'] = saved_default
    pong_logging._config['module_levels'].clear()
    pong_logging._config['module_levels'].update(saved_modules)
