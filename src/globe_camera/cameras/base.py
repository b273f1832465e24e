"""Structural camera interface shared by the look-at and free models.

The two camera models are independent classes related only by their
conversion methods. ``Camera`` describes the surface they have in
common so callers such as the navigator can be type checked without a
shared base class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from globe_camera.math_utils.position import Position

if TYPE_CHECKING:
    from globe_camera.globe.globe import Globe

# Free camera tilt is measured from the horizon, look-at tilt from the
# zenith of the pivot: free_tilt = look_at_tilt - FREE_CAMERA_TILT_OFFSET.
FREE_CAMERA_TILT_OFFSET = 90.0


@runtime_checkable
class Camera(Protocol):
    """Protocol for globe cameras."""

    globe: Globe
    position: Position
    heading: float
    tilt: float
    roll: float
    range: float

    def apply_limits(self) -> None:
        """Normalize and clamp the camera's fields in place."""
        ...

    def create_view_matrix(self, matrix: np.ndarray) -> np.ndarray:
        """Write this camera's view matrix into *matrix* and return it."""
        ...
