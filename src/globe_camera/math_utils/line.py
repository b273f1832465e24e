"""Rays in globe Cartesian coordinates."""

from __future__ import annotations

import numpy as np


class Line:
    """A ray defined by an origin point and a direction vector.

    Args:
        origin: Ray origin as a 3-element array.
        direction: Ray direction as a 3-element array. It need not be
            unit length; :meth:`point_at` scales it as given.
    """

    def __init__(self, origin: np.ndarray, direction: np.ndarray) -> None:
        self.origin = np.asarray(origin, dtype=np.float64)
        self.direction = np.asarray(direction, dtype=np.float64)

    def point_at(
        self,
        distance: float,
        out: np.ndarray | None = None,
    ) -> np.ndarray:
        """Compute ``origin + direction * distance``.

        Args:
            distance: Distance along the ray, in units of the direction
                vector's length.
            out: Optional 3-element array to write the result into.

        Returns:
            The point on the ray, *out* when one is given.
        """
        if out is None:
            out = np.empty(3, dtype=np.float64)
        out[:] = self.origin + self.direction * distance
        return out
