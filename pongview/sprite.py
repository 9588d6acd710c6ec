"""Sprite entity: a sized, colored box moving by a fixed step per frame.

Both the ball and the paddle are sprites. Only position and velocity
change once a sprite is sized; the bounding box is always derived from
them.
"""

from typing import Optional

from models import Color, Point2D, Rectangle


class Sprite:
    """Moving rectangular region with a velocity and a fill color."""

    def __init__(self, color: Optional[Color] = None):
        """Initialize an unsized sprite at the origin, at rest.

        Args:
            color: Fill color (defaults to opaque black)
        """
        self._x = 0.0
        self._y = 0.0
        self._width: Optional[float] = None
        self._height: Optional[float] = None
        self.dx = 0.0
        self.dy = 0.0
        self.color = color or Color(r=0, g=0, b=0)

    @property
    def x(self) -> float:
        """Get left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Get top edge Y."""
        return self._y

    @property
    def width(self) -> Optional[float]:
        return self._width

    @property
    def height(self) -> Optional[float]:
        return self._height

    @property
    def rect(self) -> Rectangle:
        """Get bounding box derived from position and size.

        Raises:
            ValueError: If the sprite has not been sized yet
        """
        if self._width is None or self._height is None:
            raise ValueError("Sprite has no size; call set_size() first")
        return Rectangle(x=self._x, y=self._y, width=self._width, height=self._height)

    def set_size(self, width: float, height: float) -> None:
        """Set the sprite's fixed dimensions.

        Args:
            width: Width in pixels
            height: Height in pixels

        Raises:
            ValueError: If a dimension is not positive or the sprite is
                already sized
        """
        if self._width is not None:
            raise ValueError("Sprite size is fixed once set")
        if width <= 0 or height <= 0:
            raise ValueError(f"Sprite dimensions must be positive, got {width}x{height}")
        self._width = float(width)
        self._height = float(height)

    def set_location(self, x: float, y: float) -> None:
        """Move the top-left corner to (x, y)."""
        self._x = float(x)
        self._y = float(y)

    def set_velocity(self, dx: float, dy: float) -> None:
        """Set displacement applied by each move()."""
        self.dx = float(dx)
        self.dy = float(dy)

    def move(self) -> None:
        """Advance one frame. No bounds checking happens here."""
        self._x += self.dx
        self._y += self.dy

    def intersects(self, other: 'Sprite') -> bool:
        """Check if the bounding boxes of two sprites overlap."""
        return self.rect.intersects(other.rect)

    def contains(self, x: float, y: float) -> bool:
        """Check if a point lies inside this sprite's bounding box."""
        return self.rect.contains_point(Point2D(x=x, y=y))

    def __repr__(self) -> str:
        return (f"Sprite(x={self._x:.2f}, y={self._y:.2f}, "
                f"w={self._width}, h={self._height}, "
                f"dx={self.dx:.2f}, dy={self.dy:.2f})")
