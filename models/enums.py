"""
Input enumerations.
"""

from enum import Enum


class EventType(str, Enum):
    """Types of pointer input events.

    Attributes:
        PRESS: A mouse button or finger went down at a position
    """
    PRESS = "press"
