"""Angle normalization and clamping helpers, all in degrees."""

from __future__ import annotations

import math


def clamp(value: float, low: float, high: float) -> float:
    """Clamp *value* to the closed interval ``[low, high]``."""
    return max(low, min(high, value))


def normalized_degrees(angle: float) -> float:
    """Wrap an angle to the range ``(-180, 180]``.

    Unlike :func:`clamp`, values outside the range wrap around, so
    370 becomes 10 and -270 becomes 90.

    Args:
        angle: Angle in degrees.

    Returns:
        The wrapped angle.
    """
    wrapped = math.fmod(angle, 360.0)
    if wrapped > 180.0:
        wrapped -= 360.0
    elif wrapped <= -180.0:
        wrapped += 360.0
    return wrapped


def normalized_degrees_longitude(longitude: float) -> float:
    """Wrap a longitude to the range ``(-180, 180]``."""
    return normalized_degrees(longitude)
