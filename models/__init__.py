"""
Unified models library for the pong view.

This package provides the Pydantic data models shared across the project:
- Primitives: Basic geometric and color types (Point2D, Color, Rectangle, Resolution)
- Enums: Input event types

Usage:
    >>> from models import Point2D, Rectangle
    >>> from models.primitives import Color
"""

from .primitives import (
    Point2D,
    Resolution,
    Color,
    Rectangle,
)
from .enums import EventType

__all__ = [
    'Point2D',
    'Resolution',
    'Color',
    'Rectangle',
    'EventType',
]
