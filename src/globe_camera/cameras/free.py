"""First-person camera positioned at its own eye point."""

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
from globe_camera.math_utils.line import Line
from globe_camera.math_utils.matrix import (
    extract_eye_point,
    extract_forward_vector,
    extract_viewing_parameters,
    identity,
    multiply_by_look_at_modelview,
    set_to_identity,
)
from globe_camera.math_utils.position import Position

if TYPE_CHECKING:
    from globe_camera.cameras.look_at import LookAtCamera
    from globe_camera.globe.globe import Globe

logger = logging.getLogger(__name__)


class FreeCamera:
    """First-person camera, intended for use close to the ground.

    Tilt is measured from the horizon: 0 looks straight ahead, -90
    straight down and 90 straight up.

    Args:
        globe: The globe this camera moves over. Not owned by the camera.

    Attributes:
        position: The eye position.
        heading: Looking left or right, degrees in ``(-180, 180]``.
        tilt: Looking up or down, degrees in ``[-90, 90]``.
        roll: Rotation about the viewing axis, degrees in
            ``(-180, 180]``.

    Raises:
        ArgumentError: If *globe* is ``None``.
    """

    def __init__(self, globe: Globe) -> None:
        if globe is None:
            raise missing_argument("FreeCamera", "__init__", "missing globe")

        self.position = Position(30.0, -110.0, 1000.0)
        self.heading = 0.0
        self.tilt = 0.0
        self.roll = 0.0
        self.globe = globe

        self._scratch_matrix = identity()
        self._scratch_vector = np.zeros(3, dtype=np.float64)
        self._ray = Line(np.zeros(3), np.zeros(3))

    def __repr__(self) -> str:
        return (
            f"FreeCamera(position={self.position!r}, "
            f"heading={self.heading}, tilt={self.tilt}, roll={self.roll})"
        )

    @property
    def range(self) -> float:
        """The altitude of the camera in meters."""
        return self.position.altitude

    @range.setter
    def range(self, value: float) -> None:
        self.position.altitude = value

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
                "FreeCamera", "create_view_matrix", "missing matrix",
            )

        self.apply_limits()
        set_to_identity(matrix)
        return multiply_by_look_at_modelview(
            matrix,
            self.position,
            0.0,
            self.heading,
            self.tilt + FREE_CAMERA_TILT_OFFSET,
            self.roll,
            self.globe,
        )

    def clone(self, camera: FreeCamera | None = None) -> FreeCamera:
        """Copy this camera into *camera*, or into a new one on the same globe."""
        if camera is None:
            camera = FreeCamera(self.globe)
        return camera.copy(self)

    def copy(self, camera: FreeCamera) -> FreeCamera:
        """Set this camera to the values of *camera*.

        Raises:
            ArgumentError: If *camera* is ``None``.
        """
        if camera is None:
            raise missing_argument("FreeCamera", "copy", "missing camera")

        self.position.copy(camera.position)
        self.heading = camera.heading
        self.tilt = camera.tilt
        self.roll = camera.roll
        return self

    def apply_limits(self) -> None:
        """Enforce the navigation limits of this camera.

        - latitude in ``[-90, 90]``, longitude wrapped to ``(-180, 180]``
        - altitude at least 0
        - tilt in ``[-90, 90]``
        - heading and roll wrapped to ``(-180, 180]``

        Flat globes get no extra limits here.
        """
        self.position.latitude = clamp(self.position.latitude, -90.0, 90.0)
        self.position.longitude = normalized_degrees_longitude(
            self.position.longitude,
        )

        # No going underground.
        self.position.altitude = clamp(self.position.altitude, 0.0, math.inf)

        # No turning upside down.
        self.tilt = clamp(self.tilt, -90.0, 90.0)

        self.heading = normalized_degrees(self.heading)
        self.roll = normalized_degrees(self.roll)

    def to_look_at_camera(self, camera: LookAtCamera) -> LookAtCamera:
        """Convert this camera into a look-at camera with the same view.

        The look-at position is placed ``camera.range`` meters along the
        viewing direction, so *camera* must already hold the wanted range.

        Args:
            camera: The look-at camera to write the result into.

        Returns:
            *camera*.

        Raises:
            ArgumentError: If *camera* is ``None``.
        """
        if camera is None:
            raise missing_argument(
                "FreeCamera", "to_look_at_camera", "missing camera",
            )

        view_matrix = self.create_view_matrix(self._scratch_matrix)
        extract_eye_point(view_matrix, self._ray.origin)
        extract_forward_vector(view_matrix, self._ray.direction)

        look_at_point = self._ray.point_at(camera.range, self._scratch_vector)

        params = extract_viewing_parameters(
            view_matrix, look_at_point, self.roll, self.globe,
        )

        camera.position.copy(params.origin)
        camera.heading = params.heading
        camera.tilt = params.tilt
        camera.roll = params.roll

        camera.apply_limits()

        logger.debug("Converted %r to %r", self, camera)
        return camera
