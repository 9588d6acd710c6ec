"""
Pointer input: event model, pygame translation, and paddle control.

Mouse clicks and finger touches are both reduced to an InputEvent in the
view's pixel coordinates, then to a paddle velocity command.
"""
import time
from typing import Optional, Tuple, TYPE_CHECKING

import pygame
from pydantic import BaseModel, field_validator, ConfigDict

from models import Point2D, EventType
from pongview.logging import get_logger

if TYPE_CHECKING:
    from pongview.view import PongState

log = get_logger('input')


class InputEvent(BaseModel):
    """Immutable pointer press.

    Attributes:
        position: Where the press happened (view pixel coordinates)
        timestamp: Time of the press (seconds, from monotonic clock)
        event_type: Kind of event (always PRESS for now)
    """
    position: Point2D
    timestamp: float
    event_type: EventType = EventType.PRESS

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative."""
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return (f"InputEvent(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"t={self.timestamp:.3f}, type={self.event_type.value})")


def event_from_pygame(event: pygame.event.Event,
                      screen_size: Tuple[int, int]) -> Optional[InputEvent]:
    """Translate a pygame event into an InputEvent.

    Left mouse button presses use pixel coordinates as-is. Finger presses
    carry normalized coordinates and are scaled by the screen size.

    Args:
        event: Any pygame event
        screen_size: (width, height) of the view

    Returns:
        InputEvent for presses, None for everything else
    """
    if event.type == pygame.MOUSEBUTTONDOWN:
        if event.button != 1:  # Left mouse button only
            return None
        x, y = event.pos
    elif event.type == pygame.FINGERDOWN:
        width, height = screen_size
        x, y = event.x * width, event.y * height
    else:
        return None

    return InputEvent(
        position=Point2D(x=float(x), y=float(y)),
        timestamp=time.monotonic(),
    )


def handle_touch(state: 'PongState', x: float, y: float) -> None:
    """Turn a press at (x, y) into a paddle velocity command.

    A press on the paddle stops it. A press below its top edge sends it
    down, a press above sends it up. Each press overwrites the previous
    command.
    """
    paddle = state.paddle
    if paddle.contains(x, y):
        paddle.dy = 0.0
    elif paddle.rect.top < y:
        paddle.dy = state.settings.paddle_speed
    elif paddle.rect.top > y:
        paddle.dy = -state.settings.paddle_speed
    log.trace("Touch at (%.1f, %.1f) -> paddle dy=%.1f", x, y, paddle.dy)
