"""Geometry helpers built on Vector2d."""

from __future__ import annotations

from .vector2d import Vector2d


def rotate_vec2(vec: Vector2d, angle_rad: float) -> Vector2d:
    """Rotate a vector about the origin by angle_rad (radians)."""
    return vec.rotate(angle_rad)


def rotate_point(point: Vector2d, origin: Vector2d, angle_rad: float) -> Vector2d:
    """Rotate a point around an origin by angle_rad (radians)."""
    return origin + rotate_vec2(point - origin, angle_rad)


def perp(vec: Vector2d) -> Vector2d:
    """Counter-clockwise perpendicular, i.e. a quarter turn without trig error."""
    return Vector2d(-vec.y, vec.x)


def lerp(start: Vector2d, end: Vector2d, t: float) -> Vector2d:
    """Linear interpolation; t outside [0, 1] extrapolates along the same line."""
    return start + (end - start) * t
