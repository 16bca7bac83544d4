"""Default configuration values for planar."""

from __future__ import annotations

import math

# Tolerances used by Vector2d.is_close.
DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 1e-12

DEFAULT_DEMO_A = (3.0, 4.0)
DEFAULT_DEMO_B = (1.0, 2.0)
DEFAULT_DEMO_ANGLE = math.pi / 2.0
