"""Navigator facade over a single active camera."""

from __future__ import annotations

import logging

from globe_camera.cameras.base import Camera
from globe_camera.cameras.factory import create_camera
from globe_camera.cameras.free import FreeCamera
from globe_camera.cameras.look_at import LookAtCamera
from globe_camera.config.schema import GlobeCameraConfig
from globe_camera.errors import missing_argument
from globe_camera.globe.factory import create_globe
from globe_camera.globe.globe import Globe
from globe_camera.math_utils.position import Position

logger = logging.getLogger(__name__)


class Navigator:
    """Pan, zoom and tilt access to whichever camera is active.

    The navigator holds one camera, either a :class:`LookAtCamera` or a
    :class:`FreeCamera`, and forwards its properties to it. The other
    model is available on demand through :meth:`as_free_camera` and
    :meth:`as_look_at_camera`.

    Args:
        camera: The active camera.

    Raises:
        ArgumentError: If *camera* is ``None``.
    """

    def __init__(self, camera: Camera) -> None:
        if camera is None:
            raise missing_argument("Navigator", "__init__", "missing camera")

        self._camera = camera

    @property
    def camera(self) -> Camera:
        """The active camera."""
        return self._camera

    @camera.setter
    def camera(self, camera: Camera) -> None:
        if camera is None:
            raise missing_argument("Navigator", "camera", "missing camera")
        logger.debug("Navigator camera set to %s", type(camera).__name__)
        self._camera = camera

    @property
    def look_at_location(self) -> Position:
        """The position of the active camera.

        For a look-at camera this is the position at the center of the
        viewport; for a free camera it is the eye position. Assigning
        copies the values, the camera keeps its own instance.
        """
        return self._camera.position

    @look_at_location.setter
    def look_at_location(self, position: Position) -> None:
        self._camera.position.copy(position)

    @property
    def range(self) -> float:
        """Eye to look-at distance, or altitude for a free camera."""
        return self._camera.range

    @range.setter
    def range(self, value: float) -> None:
        self._camera.range = value

    @property
    def heading(self) -> float:
        """Heading in degrees clockwise from north."""
        return self._camera.heading

    @heading.setter
    def heading(self, value: float) -> None:
        self._camera.heading = value

    @property
    def tilt(self) -> float:
        """Tilt in degrees, in the active camera's convention."""
        return self._camera.tilt

    @tilt.setter
    def tilt(self, value: float) -> None:
        self._camera.tilt = value

    @property
    def roll(self) -> float:
        """Roll in degrees."""
        return self._camera.roll

    @roll.setter
    def roll(self, value: float) -> None:
        self._camera.roll = value

    def as_free_camera(self, camera: FreeCamera | None = None) -> FreeCamera:
        """Return the active camera as a :class:`FreeCamera`.

        A free camera is copied, a look-at camera converted.

        Args:
            camera: Camera to write the result into. A new one on the
                active camera's globe is created when omitted.

        Returns:
            The free camera.
        """
        if camera is None:
            camera = FreeCamera(self._camera.globe)

        if isinstance(self._camera, FreeCamera):
            camera.copy(self._camera)
        else:
            self._camera.to_free_camera(camera)

        return camera

    def as_look_at_camera(
        self,
        camera: LookAtCamera | None = None,
    ) -> LookAtCamera:
        """Return the active camera as a :class:`LookAtCamera`.

        A look-at camera is copied, a free camera converted using the
        range already held by *camera*.

        Args:
            camera: Camera to write the result into. A new one on the
                active camera's globe, with its default range, is
                created when omitted.

        Returns:
            The look-at camera.
        """
        if camera is None:
            camera = LookAtCamera(self._camera.globe)

        if isinstance(self._camera, FreeCamera):
            self._camera.to_look_at_camera(camera)
        else:
            camera.copy(self._camera)

        return camera


def create_navigator(
    config: GlobeCameraConfig | None = None,
    globe: Globe | None = None,
) -> Navigator:
    """Create a navigator and its initial camera from *config*.

    Args:
        config: Configuration. ``None`` uses the defaults.
        globe: Globe to navigate. Built from ``config.globe`` when
            omitted.

    Returns:
        A navigator holding the configured camera.
    """
    if config is None:
        config = GlobeCameraConfig()
    if globe is None:
        globe = create_globe(config.globe)

    camera = create_camera(config.navigator.camera_type, globe, config)
    logger.debug(
        "Created navigator with %s camera", config.navigator.camera_type,
    )
    return Navigator(camera)
