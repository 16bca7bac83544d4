"""2D vector math."""

from .transforms import lerp, perp, rotate_point, rotate_vec2
from .vector2d import Vector2d

__all__ = [
    "Vector2d",
    "rotate_vec2",
    "rotate_point",
    "perp",
    "lerp",
]
