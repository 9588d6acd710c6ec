"""Drawing surface capability interface and its pygame backend.

The view never keeps drawing state between frames: every frame clears the
surface and paints everything again through these four calls.
"""

from abc import ABC, abstractmethod
from typing import Dict

import pygame

from models import Color, Rectangle


class DrawingSurface(ABC):
    """Immediate-mode canvas the view paints on.

    Any backend implementing these methods can render the view.
    """

    @property
    @abstractmethod
    def width(self) -> int:
        """Current surface width in pixels."""
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        """Current surface height in pixels."""
        pass

    @abstractmethod
    def clear(self, color: Color) -> None:
        """Fill the whole surface with a color."""
        pass

    @abstractmethod
    def draw_ellipse(self, rect: Rectangle, color: Color) -> None:
        """Draw a filled ellipse inscribed in a rectangle."""
        pass

    @abstractmethod
    def draw_rect(self, rect: Rectangle, color: Color) -> None:
        """Draw a filled rectangle."""
        pass

    @abstractmethod
    def draw_text(self, text: str, x: float, y: float, size: int, color: Color) -> None:
        """Draw text with its top-left corner at (x, y)."""
        pass


class PygameSurface(DrawingSurface):
    """DrawingSurface backed by a pygame.Surface (usually the display)."""

    def __init__(self, surface: pygame.Surface):
        self._surface = surface
        self._fonts: Dict[int, pygame.font.Font] = {}

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def width(self) -> int:
        return self._surface.get_width()

    @property
    def height(self) -> int:
        return self._surface.get_height()

    def _font(self, size: int) -> pygame.font.Font:
        """Get the default font at a size, loading it once."""
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def clear(self, color: Color) -> None:
        self._surface.fill(color.as_rgb_tuple)

    def draw_ellipse(self, rect: Rectangle, color: Color) -> None:
        pygame.draw.ellipse(self._surface, color.as_rgb_tuple, pygame.Rect(rect.as_tuple()))

    def draw_rect(self, rect: Rectangle, color: Color) -> None:
        pygame.draw.rect(self._surface, color.as_rgb_tuple, pygame.Rect(rect.as_tuple()))

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color) -> None:
        rendered = self._font(size).render(text, True, color.as_rgb_tuple)
        self._surface.blit(rendered, (int(x), int(y)))
