"""Immutable 2D vector value type.

Every operation is total over IEEE-754 doubles: degenerate inputs such as a
zero divisor, a zero-length vector or an infinite angle produce inf/NaN
components instead of raising.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from collections.abc import Sequence

import numpy as np

from planar import config


def _ieee_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics (x/0 -> +-inf, 0/0 -> nan, overflow -> +-inf)."""
    with np.errstate(all="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _cos_sin(angle_rad: float) -> tuple[float, float]:
    # math.cos/math.sin raise on infinite input; numpy returns nan.
    with np.errstate(invalid="ignore"):
        return float(np.cos(angle_rad)), float(np.sin(angle_rad))


@dataclass(frozen=True, repr=False)
class Vector2d:
    """2D vector with an x and a y component."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector2d":
        return cls(0.0, 0.0)

    @classmethod
    def from_tuple(cls, values: Sequence[float]) -> "Vector2d":
        return cls(values[0], values[1])

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    # Vector with vector

    def add(self, other: "Vector2d") -> "Vector2d":
        return Vector2d(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector2d") -> "Vector2d":
        return Vector2d(self.x - other.x, self.y - other.y)

    def dot(self, other: "Vector2d") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2d") -> float:
        """2D cross product returning a scalar (z-component)."""
        return self.x * other.y - self.y * other.x

    def project(self, onto: "Vector2d") -> "Vector2d":
        """Project this vector onto ``onto``.

        Projecting onto the zero vector divides zero by zero, so every
        component of the result is NaN.
        """
        return onto.scale(_ieee_div(self.dot(onto), onto.dot(onto)))

    def distance_to(self, other: "Vector2d") -> float:
        return self.sub(other).magnitude()

    # Vector with scalar

    def scale(self, scalar: float) -> "Vector2d":
        return Vector2d(self.x * scalar, self.y * scalar)

    def add_scalar(self, scalar: float) -> "Vector2d":
        return Vector2d(self.x + scalar, self.y + scalar)

    def sub_scalar(self, scalar: float) -> "Vector2d":
        """Return ``(x - scalar, y - scalar)``."""
        return Vector2d(self.x - scalar, self.y - scalar)

    def sub_scalar_reversed(self, scalar: float) -> "Vector2d":
        """Return ``(scalar - x, scalar - y)``, the operand-swapped ``sub_scalar``."""
        return Vector2d(scalar - self.x, scalar - self.y)

    def divide(self, scalar: float) -> "Vector2d":
        """Divide each component by ``scalar``.

        A zero divisor is not an error: components become +-inf, or NaN
        where the component itself is zero or NaN.
        """
        return Vector2d(_ieee_div(self.x, scalar), _ieee_div(self.y, scalar))

    def rotate(self, angle_rad: float) -> "Vector2d":
        """Rotate counter-clockwise about the origin by ``angle_rad`` radians."""
        cos_a, sin_a = _cos_sin(angle_rad)
        return Vector2d(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    # Unary

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def unit(self) -> "Vector2d":
        """Direction of the vector; the zero vector maps to (nan, nan)."""
        return self.divide(self.magnitude())

    def angle(self) -> float:
        """Angle from the positive x axis in radians, within (-pi, pi].

        Follows IEEE atan2 signed-zero rules, so a negative x with y == -0.0
        gives -pi rather than pi.
        """
        return math.atan2(self.y, self.x)

    def max_component(self) -> float:
        if self.x > self.y:
            return self.x
        return self.y

    def min_component(self) -> float:
        if self.x < self.y:
            return self.x
        return self.y

    def abs(self) -> "Vector2d":
        return Vector2d(abs(self.x), abs(self.y))

    def negate(self) -> "Vector2d":
        return Vector2d(-self.x, -self.y)

    def is_close(
        self,
        other: "Vector2d",
        rel_tol: float = config.DEFAULT_REL_TOL,
        abs_tol: float = config.DEFAULT_ABS_TOL,
    ) -> bool:
        return math.isclose(self.x, other.x, rel_tol=rel_tol, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, rel_tol=rel_tol, abs_tol=abs_tol
        )

    # Operators

    def __add__(self, other: "Vector2d") -> "Vector2d":
        return self.add(other)

    def __sub__(self, other: "Vector2d") -> "Vector2d":
        return self.sub(other)

    def __mul__(self, scalar: float) -> "Vector2d":
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> "Vector2d":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2d":
        return self.divide(scalar)

    def __neg__(self) -> "Vector2d":
        return self.negate()

    def __abs__(self) -> "Vector2d":
        return self.abs()

    def __repr__(self) -> str:
        """Components render as Python float text: 3.0, inf, nan (never 3, +Inf, NaN)."""
        return "Vector2d{X: %s, Y: %s}" % (self.x, self.y)
