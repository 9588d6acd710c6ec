"""
Shared primitive data types for the pong view.

This module provides the basic geometric and color types used by sprites,
the drawing surface and input handling.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions, velocities, and coordinates.

    Coordinates can be positive, negative, or zero, so the same type serves
    for screen positions and per-frame displacements.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> vel = Point2D(x=-3.0, y=20.0)  # Moving left and down
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Resolution(BaseModel):
    """Window or surface size in pixels.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Resolution({self.width}x{self.height})"


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
        a: Alpha/opacity component (0-255), where 255 is fully opaque

    Examples:
        >>> blue_violet = Color(r=138, g=43, b=226)
        >>> blue_violet.as_rgb_tuple
        (138, 43, 226)
    """
    r: int
    g: int
    b: int
    a: int = 255

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple (without alpha)."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle defined by position and dimensions.

    Used as the bounding box of every sprite. Position is the top-left
    corner (pygame convention), and y grows downward.

    Edge semantics follow the usual screen-rectangle rules: the right and
    bottom edges are exclusive for point containment, and rectangles that
    only share an edge do not intersect.

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=100.0, y=100.0, width=50.0, height=50.0)
        >>> rect.right
        150.0
        >>> rect.contains_point(Point2D(x=125.0, y=125.0))
        True
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def left(self) -> float:
        """Get left edge x coordinate."""
        return self.x

    @computed_field
    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @computed_field
    @property
    def top(self) -> float:
        """Get top edge y coordinate."""
        return self.y

    @computed_field
    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point is inside the rectangle.

        Left and top edges are inclusive, right and bottom edges exclusive.

        Examples:
            >>> rect = Rectangle(x=0.0, y=0.0, width=100.0, height=100.0)
            >>> rect.contains_point(Point2D(x=0.0, y=50.0))
            True
            >>> rect.contains_point(Point2D(x=100.0, y=50.0))
            False
        """
        return (self.left <= point.x < self.right and
                self.top <= point.y < self.bottom)

    def intersects(self, other: 'Rectangle') -> bool:
        """Check if this rectangle overlaps another one.

        Rectangles that merely touch along an edge do not intersect.

        Examples:
            >>> rect1 = Rectangle(x=0.0, y=0.0, width=100.0, height=100.0)
            >>> rect2 = Rectangle(x=50.0, y=50.0, width=100.0, height=100.0)
            >>> rect1.intersects(rect2)
            True
            >>> rect1.intersects(Rectangle(x=100.0, y=0.0, width=10.0, height=10.0))
            False
        """
        return (self.left < other.right and other.left < self.right and
                self.top < other.bottom and other.top < self.bottom)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Return (x, y, width, height) for pygame drawing calls."""
        return (self.x, self.y, self.width, self.height)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
