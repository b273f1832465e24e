"""Arc-ball camera orbiting a look-at position."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from globe_camera.cameras.base import FREE_CAMERA_TILT_OFFSET
from globe_camera.errors import missing_argument
from globe_camera.math_utils.angles import (
    clamp,
    normalized_degrees,
    normalized_degrees_longitude,
)
from globe_camera.math_utils.matrix import (
    extract_eye_point,
    extract_viewing_parameters,
    identity,
    multiply_by_look_at_modelview,
    set_to_identity,
)
from globe_camera.math_utils.position import Position

if TYPE_CHECKING:
    from globe_camera.cameras.free import FreeCamera
    from globe_camera.globe.globe import Globe

logger = logging.getLogger(__name__)


class LookAtCamera:
    """Camera orbiting a position on the globe at a given range.

    Fields may be assigned freely; out-of-range values are corrected by
    :meth:`apply_limits`, which runs automatically before every view
    matrix is built.

    Each instance owns a scratch matrix and vector reused by
    :meth:`to_free_camera`. Do not share one instance across threads.

    Args:
        globe: The globe this camera looks at. Not owned by the camera.

    Attributes:
        position: The position to look at.
        heading: Rotation around the look-at position, degrees in
            ``(-180, 180]``.
        tilt: Angle away from looking straight down, degrees in
            ``[0, 90]``.
        range: Distance from the eye to the look-at position in meters.
        roll: Rotation about the viewing axis, degrees in
            ``(-180, 180]``.

    Raises:
        ArgumentError: If *globe* is ``None``.
    """

    def __init__(self, globe: Globe) -> None:
        if globe is None:
            raise missing_argument("LookAtCamera", "__init__", "missing globe")

        self.position = Position(30.0, -110.0, 0.0)
        self.heading = 0.0
        self.tilt = 0.0
        self.range = 10e6
        self.roll = 0.0
        self.globe = globe

        self._scratch_matrix = identity()
        self._scratch_vector = np.zeros(3, dtype=np.float64)

    def __repr__(self) -> str:
        return (
            f"LookAtCamera(position={self.position!r}, "
            f"heading={self.heading}, tilt={self.tilt}, "
            f"range={self.range}, roll={self.roll})"
        )

    def create_view_matrix(self, matrix: np.ndarray) -> np.ndarray:
        """Build this camera's view matrix.

        Applies the navigation limits first, so the camera's own fields
        may change as a side effect.

        Args:
            matrix: 4x4 array to write the view matrix into.

        Returns:
            *matrix*, holding the view matrix.

        Raises:
            ArgumentError: If *matrix* is ``None``.
        """
        if matrix is None:
            raise missing_argument(
                "LookAtCamera", "create_view_matrix", "missing matrix",
            )

        self.apply_limits()
        set_to_identity(matrix)
        return multiply_by_look_at_modelview(
            matrix,
            self.position,
            self.range,
            self.heading,
            self.tilt,
            self.roll,
            self.globe,
        )

    def clone(self, camera: LookAtCamera | None = None) -> LookAtCamera:
        """Copy this camera into *camera*, or into a new one on the same globe."""
        if camera is None:
            camera = LookAtCamera(self.globe)
        return camera.copy(self)

    def copy(self, camera: LookAtCamera) -> LookAtCamera:
        """Set this camera to the values of *camera*.

        Raises:
            ArgumentError: If *camera* is ``None``.
        """
        if camera is None:
            raise missing_argument("LookAtCamera", "copy", "missing camera")

        self.position.copy(camera.position)
        self.tilt = camera.tilt
        self.heading = camera.heading
        self.range = camera.range
        self.roll = camera.roll
        return self

    def apply_limits(self) -> None:
        """Enforce the navigation limits of this camera.

        - latitude in ``[-90, 90]``, longitude wrapped to ``(-180, 180]``
        - altitude at least 0 and range at least 1
        - heading and roll wrapped to ``(-180, 180]``
        - tilt in ``[0, 90]``
        - on a flat globe, range at most one circumference and tilt 0
        """
        self.position.latitude = clamp(self.position.latitude, -90.0, 90.0)
        self.position.longitude = normalized_degrees_longitude(
            self.position.longitude,
        )

        # No looking from underground.
        self.position.altitude = clamp(self.position.altitude, 0.0, math.inf)

        # A zero range would degenerate into a first-person camera.
        self.range = clamp(self.range, 1.0, math.inf)

        self.heading = normalized_degrees(self.heading)

        # No turning upside down.
        self.tilt = clamp(self.tilt, 0.0, 90.0)

        self.roll = normalized_degrees(self.roll)

        if self.globe.is_2d():
            # At most 360 degrees of visible longitude.
            max_range = 2.0 * math.pi * self.globe.equatorial_radius
            self.range = clamp(self.range, 1.0, max_range)

            # Keep looking straight down.
            self.tilt = 0.0

    def to_free_camera(self, camera: FreeCamera) -> FreeCamera:
        """Convert this camera into a free camera with the same view.

        Args:
            camera: The free camera to write the result into.

        Returns:
            *camera*.

        Raises:
            ArgumentError: If *camera* is ``None``.
        """
        if camera is None:
            raise missing_argument(
                "LookAtCamera", "to_free_camera", "missing camera",
            )

        view_matrix = self.create_view_matrix(self._scratch_matrix)
        eye_point = extract_eye_point(view_matrix, self._scratch_vector)

        params = extract_viewing_parameters(
            view_matrix, eye_point, self.roll, self.globe,
        )

        camera.position.copy(params.origin)
        camera.heading = params.heading
        camera.tilt = params.tilt - FREE_CAMERA_TILT_OFFSET
        camera.roll = params.roll

        camera.apply_limits()

        logger.debug("Converted %r to %r", self, camera)
        return camera
