"""
Pong View.

Provides:
- sprite: Sprite, the moving box behind the ball and the paddle
- scheduler: FrameScheduler, the fixed-rate frame driver
- surface: DrawingSurface interface and the pygame backend
- view: PongState, the render/update cycle, and PongView
- input: InputEvent, pygame event translation, paddle steering
"""

from pongview.sprite import Sprite
from pongview.scheduler import FrameScheduler
from pongview.surface import DrawingSurface, PygameSurface
from pongview.config import PongSettings
from pongview.input import InputEvent, event_from_pygame, handle_touch
from pongview.view import (
    PongState,
    PongView,
    new_state,
    place_initial,
    paint,
    update_sprites,
    render_frame,
)

__all__ = [
    'Sprite',
    'FrameScheduler',
    'DrawingSurface',
    'PygameSurface',
    'PongSettings',
    'InputEvent',
    'event_from_pygame',
    'handle_touch',
    'PongState',
    'PongView',
    'new_state',
    'place_initial',
    'paint',
    'update_sprites',
    'render_frame',
]
