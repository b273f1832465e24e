"""Camera factory for creating camera instances by name."""

from __future__ import annotations

from globe_camera.cameras.base import Camera
from globe_camera.cameras.free import FreeCamera
from globe_camera.cameras.look_at import LookAtCamera
from globe_camera.config.schema import GlobeCameraConfig
from globe_camera.globe.globe import Globe


def create_camera(
    camera_type: str,
    globe: Globe,
    config: GlobeCameraConfig | None = None,
) -> Camera:
    """Create a camera by type name, posed from *config*.

    Args:
        camera_type: Camera model, one of ``"look_at"`` or ``"free"``.
        globe: The globe the camera refers to.
        config: Configuration supplying the initial pose. ``None``
            keeps the camera's built-in defaults.

    Returns:
        A new camera.

    Raises:
        ValueError: If *camera_type* is not recognized.
        ArgumentError: If *globe* is ``None``.
    """
    camera_type = camera_type.lower().strip().replace("-", "_")

    if camera_type in ("look_at", "lookat", "arc_ball", "arcball"):
        look_at = LookAtCamera(globe)
        if config is not None:
            pose = config.look_at
            look_at.position.latitude = pose.latitude
            look_at.position.longitude = pose.longitude
            look_at.position.altitude = pose.altitude_m
            look_at.range = pose.range_m
            look_at.heading = pose.heading_deg
            look_at.tilt = pose.tilt_deg
            look_at.roll = pose.roll_deg
        return look_at

    if camera_type in ("free", "first_person", "firstperson"):
        free = FreeCamera(globe)
        if config is not None:
            pose = config.free
            free.position.latitude = pose.latitude
            free.position.longitude = pose.longitude
            free.position.altitude = pose.altitude_m
            free.heading = pose.heading_deg
            free.tilt = pose.tilt_deg
            free.roll = pose.roll_deg
        return free

    raise ValueError(
        f"Unknown camera type: {camera_type!r}. "
        f"Supported: 'look_at', 'free'."
    )
