"""Globe model consumed by the cameras.

The globe only answers the questions cameras ask: its equatorial
radius, whether it is currently flat, and how to move between
geodetic positions, Cartesian points and local surface frames.
"""

from __future__ import annotations

import numpy as np

from globe_camera.globe.projections import Projection, ProjectionWgs84
from globe_camera.math_utils.position import Position

WGS84_SEMI_MAJOR_AXIS = 6378137.0
WGS84_SEMI_MINOR_AXIS = 6356752.314245


class Globe:
    """An ellipsoidal globe with a switchable projection.

    Args:
        projection: Projection to use. Defaults to
            :class:`~globe_camera.globe.projections.ProjectionWgs84`.
        equatorial_radius: Equatorial radius in meters.
        polar_radius: Polar radius in meters. Equal radii give a sphere.
    """

    def __init__(
        self,
        projection: Projection | None = None,
        equatorial_radius: float = WGS84_SEMI_MAJOR_AXIS,
        polar_radius: float = WGS84_SEMI_MINOR_AXIS,
    ) -> None:
        self.projection = projection if projection is not None else ProjectionWgs84()
        self.equatorial_radius = equatorial_radius
        self.polar_radius = polar_radius

    @property
    def eccentricity_squared(self) -> float:
        """First eccentricity squared, derived from the two radii."""
        ratio = self.polar_radius / self.equatorial_radius
        return 1.0 - ratio * ratio

    def is_2d(self) -> bool:
        """Return True when the current projection is flat."""
        return self.projection.is_2d

    def compute_point_from_position(
        self,
        latitude: float,
        longitude: float,
        altitude: float,
        out: np.ndarray | None = None,
    ) -> np.ndarray:
        """Convert a geodetic position to a Cartesian point."""
        return self.projection.geographic_to_cartesian(
            self, latitude, longitude, altitude, out,
        )

    def compute_position_from_point(
        self,
        point: np.ndarray,
        out: Position | None = None,
    ) -> Position:
        """Convert a Cartesian point to a geodetic position."""
        return self.projection.cartesian_to_geographic(self, point, out)

    def surface_normal_at_point(self, point: np.ndarray) -> np.ndarray:
        """Return the unit surface normal at *point*."""
        return self.projection.surface_normal_at_point(self, point)

    def north_tangent_at_point(self, point: np.ndarray) -> np.ndarray:
        """Return the unit north-pointing tangent at *point*."""
        return self.projection.north_tangent_at_point(self, point)
