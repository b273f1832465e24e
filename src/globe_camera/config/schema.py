"""Dataclass configuration schemas for the globe camera package.

Each component has its own configuration dataclass. The top-level
``GlobeCameraConfig`` composes them into a single tree that can be
serialized to / deserialized from YAML.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GlobeConfig:
    """Globe shape and projection.

    Attributes:
        projection: Projection name: ``wgs84`` or ``equirectangular``.
        equatorial_radius_m: Equatorial radius in meters.
        polar_radius_m: Polar radius in meters. Set equal to the
            equatorial radius for a sphere.
    """

    projection: str = "wgs84"
    equatorial_radius_m: float = 6378137.0
    polar_radius_m: float = 6356752.314245


@dataclass
class LookAtCameraConfig:
    """Initial pose of a look-at camera.

    Attributes:
        latitude: Look-at latitude in degrees.
        longitude: Look-at longitude in degrees.
        altitude_m: Look-at altitude in meters.
        range_m: Eye to look-at distance in meters.
        heading_deg: Heading in degrees.
        tilt_deg: Tilt from straight down in degrees.
        roll_deg: Roll in degrees.
    """

    latitude: float = 30.0
    longitude: float = -110.0
    altitude_m: float = 0.0
    range_m: float = 10e6
    heading_deg: float = 0.0
    tilt_deg: float = 0.0
    roll_deg: float = 0.0


@dataclass
class FreeCameraConfig:
    """Initial pose of a free camera.

    Attributes:
        latitude: Eye latitude in degrees.
        longitude: Eye longitude in degrees.
        altitude_m: Eye altitude in meters.
        heading_deg: Heading in degrees.
        tilt_deg: Tilt from the horizon in degrees.
        roll_deg: Roll in degrees.
    """

    latitude: float = 30.0
    longitude: float = -110.0
    altitude_m: float = 1000.0
    heading_deg: float = 0.0
    tilt_deg: float = 0.0
    roll_deg: float = 0.0


@dataclass
class NavigatorConfig:
    """Navigator settings.

    Attributes:
        camera_type: Camera model the navigator starts with:
            ``look_at`` or ``free``.
    """

    camera_type: str = "look_at"


@dataclass
class GlobeCameraConfig:
    """Top-level configuration composing all component configs.

    Attributes:
        globe: Globe shape and projection.
        look_at: Initial look-at camera pose.
        free: Initial free camera pose.
        navigator: Navigator settings.
    """

    globe: GlobeConfig = field(default_factory=GlobeConfig)
    look_at: LookAtCameraConfig = field(default_factory=LookAtCameraConfig)
    free: FreeCameraConfig = field(default_factory=FreeCameraConfig)
    navigator: NavigatorConfig = field(default_factory=NavigatorConfig)
