"""Pong view: game state plus the per-frame render/update cycle.

The ball bounces off the edges of the screen. The right edge is where the
player moves the paddle up or down to hit the ball. Reaching the left wall
scores a point, letting the ball past the paddle loses one.

Frame order:
    1. first frame only: place the paddle once the surface size is known
    2. paint the current state
    3. advance sprites, clamp the paddle, reflect the ball
"""

import random
from dataclasses import dataclass, field
from typing import Callable, Optional

from models import Color
from pongview.config import PongSettings
from pongview.input import InputEvent, handle_touch
from pongview.logging import get_logger
from pongview.scheduler import FrameScheduler
from pongview.sprite import Sprite
from pongview.surface import DrawingSurface

log = get_logger('view')


@dataclass
class TextStyle:
    """Score text styling, set up on the first frame."""

    size: int
    color: Color


@dataclass
class PongState:
    """Everything one frame reads and writes."""

    ball: Sprite
    paddle: Sprite
    settings: PongSettings = field(default_factory=PongSettings)
    score: int = 0
    screen_width: float = 0.0
    screen_height: float = 0.0
    initialized: bool = False
    text_style: Optional[TextStyle] = None

    @property
    def fps(self) -> int:
        return self.settings.fps


def new_state(settings: Optional[PongSettings] = None,
              rng: Optional[random.Random] = None) -> PongState:
    """Create the starting state: ball launched, paddle at rest.

    The ball gets a random velocity in (-max, max) on both axes. The paddle
    is sized but not placed; its location depends on the screen size.

    Args:
        settings: Tunables (defaults from pongview.config)
        rng: Random source for the ball's launch velocity
    """
    settings = settings or PongSettings()
    rng = rng or random.Random()

    ball = Sprite(color=settings.ball_color)
    ball.set_size(settings.ball_size, settings.ball_size)
    ball.set_location(*settings.ball_start)
    ball.set_velocity(
        (rng.random() - .5) * 2 * settings.ball_max_velocity,  # dx
        (rng.random() - .5) * 2 * settings.ball_max_velocity,  # dy
    )

    paddle = Sprite(color=settings.paddle_color)
    paddle.set_size(settings.paddle_width, settings.paddle_height)
    paddle.set_velocity(0, 0)

    return PongState(ball=ball, paddle=paddle, settings=settings)


def place_initial(state: PongState) -> None:
    """Put the paddle at the middle of the right edge and set up text.

    Runs once; later calls do nothing.
    """
    if state.initialized:
        return
    settings = state.settings
    state.paddle.set_location(
        state.screen_width - settings.paddle_width,                  # x
        state.screen_height / 2 - settings.paddle_height / 2,        # y
    )
    state.text_style = TextStyle(size=settings.text_size, color=settings.text_color)
    state.initialized = True
    log.debug("Paddle placed at (%.1f, %.1f) on %dx%d surface",
              state.paddle.x, state.paddle.y,
              state.screen_width, state.screen_height)


def paint(state: PongState, surface: DrawingSurface) -> None:
    """Draw background, score, ball and paddle."""
    settings = state.settings
    style = state.text_style or TextStyle(size=settings.text_size, color=settings.text_color)

    surface.clear(settings.background_color)
    surface.draw_text(
        f"Score: {state.score}",
        state.screen_width / 2 - settings.score_offset_x,
        settings.score_y,
        style.size,
        style.color,
    )
    surface.draw_ellipse(state.ball.rect, state.ball.color)
    surface.draw_rect(state.paddle.rect, state.paddle.color)


def _clamp_paddle(state: PongState) -> None:
    paddle = state.paddle
    right_edge_x = state.screen_width - state.settings.paddle_width

    if paddle.rect.bottom > state.screen_height:
        paddle.set_location(right_edge_x, state.screen_height - state.settings.paddle_height)
    elif paddle.rect.top < 0:
        paddle.set_location(right_edge_x, 0)


def _bounce_ball(state: PongState) -> None:
    ball, paddle = state.ball, state.paddle
    rect = ball.rect

    # Branch order matters: a ball touching the paddle past the right
    # edge is a hit, not a miss.
    if rect.left < 0:
        # left wall
        ball.dx = -ball.dx
        state.score += 1
    elif not ball.intersects(paddle) and rect.right >= state.screen_width:
        # right wall, paddle missed
        ball.dx = -ball.dx
        state.score -= 1
    elif ball.intersects(paddle):
        ball.dx = -ball.dx
        log.debug("Collision between ball and paddle")

    if rect.top < 0 or rect.bottom >= state.screen_height:
        ball.dy = -ball.dy


def update_sprites(state: PongState) -> None:
    """Advance both sprites one frame and resolve collisions.

    The paddle is snapped back inside the screen with its velocity kept, so
    it stays pinned to the edge until a touch changes direction. The ball
    only has its velocity reflected; its position is never corrected.
    """
    state.ball.move()
    state.paddle.move()
    _clamp_paddle(state)
    _bounce_ball(state)


def render_frame(state: PongState, surface: DrawingSurface) -> None:
    """Run one full frame against a surface."""
    state.screen_width = surface.width
    state.screen_height = surface.height
    place_initial(state)
    paint(state, surface)
    update_sprites(state)


class PongView:
    """Owns a PongState, the surface it is drawn on, and the frame scheduler.

    Frames and touches must be delivered from the same thread; the
    scheduler callback should only request a frame (e.g. post an event),
    never call on_draw() itself.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        settings: Optional[PongSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        self.surface = surface
        self.state = new_state(settings, rng)
        self._scheduler: Optional[FrameScheduler] = None

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def scheduler(self) -> Optional[FrameScheduler]:
        return self._scheduler

    def start(self, request_frame: Callable[[], None]) -> FrameScheduler:
        """Start requesting frames at the configured rate.

        Args:
            request_frame: Called from the scheduler thread once per frame
        """
        if self._scheduler is not None:
            raise RuntimeError("PongView already started")
        self._scheduler = FrameScheduler(request_frame, fps=self.state.fps)
        self._scheduler.start()
        log.info("Animating at %d fps", self.state.fps)
        return self._scheduler

    def stop(self) -> None:
        """Stop the scheduler. Safe to call more than once."""
        if self._scheduler is not None:
            self._scheduler.stop()

    def on_draw(self) -> None:
        """Paint the current state and advance it one frame."""
        render_frame(self.state, self.surface)

    def on_touch(self, x: float, y: float) -> None:
        """Steer the paddle from a press at (x, y)."""
        handle_touch(self.state, x, y)

    def on_input(self, event: InputEvent) -> None:
        self.on_touch(event.position.x, event.position.y)
