"""Globe and projection factories for creating instances by name."""

from __future__ import annotations

from globe_camera.config.schema import GlobeConfig
from globe_camera.globe.globe import Globe
from globe_camera.globe.projections import (
    Projection,
    ProjectionEquirectangular,
    ProjectionWgs84,
)


def create_projection(name: str) -> Projection:
    """Create a projection by name.

    Args:
        name: Projection name, one of ``"wgs84"`` or
            ``"equirectangular"``.

    Returns:
        A new projection instance.

    Raises:
        ValueError: If *name* is not recognized.
    """
    name = name.lower().strip()

    if name in ("wgs84", "ellipsoid", "3d"):
        return ProjectionWgs84()

    if name in ("equirectangular", "flat", "2d"):
        return ProjectionEquirectangular()

    raise ValueError(
        f"Unknown projection: {name!r}. "
        f"Supported: 'wgs84', 'equirectangular'."
    )


def create_globe(config: GlobeConfig | None = None) -> Globe:
    """Create a globe from a :class:`GlobeConfig`.

    Args:
        config: Globe settings. ``None`` gives a WGS84 globe.

    Returns:
        A new globe.
    """
    if config is None:
        config = GlobeConfig()
    return Globe(
        projection=create_projection(config.projection),
        equatorial_radius=config.equatorial_radius_m,
        polar_radius=config.polar_radius_m,
    )
