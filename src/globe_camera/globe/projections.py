"""Geographic projections used by :class:`~globe_camera.globe.globe.Globe`.

Both projections share one Cartesian frame: +Y points toward the north
pole, +Z toward latitude 0 / longitude 0, and +X toward latitude 0 /
longitude 90. In the flat projection the globe is unrolled onto the
XY plane and altitude runs along +Z.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from globe_camera.math_utils.position import Position

if TYPE_CHECKING:
    from globe_camera.globe.globe import Globe


def _normalize(v: np.ndarray) -> np.ndarray:
    """Normalize *v* in place, leaving a zero vector unchanged."""
    length = np.linalg.norm(v)
    if length > 0.0:
        v /= length
    return v


@runtime_checkable
class Projection(Protocol):
    """Protocol for globe projections.

    Attributes:
        name: Registry name used by :func:`create_projection`.
        is_2d: True for flat projections.
    """

    name: str
    is_2d: bool

    def geographic_to_cartesian(
        self,
        globe: Globe,
        latitude: float,
        longitude: float,
        altitude: float,
        out: np.ndarray | None = None,
    ) -> np.ndarray:
        """Convert a geodetic position to a Cartesian point."""
        ...

    def cartesian_to_geographic(
        self,
        globe: Globe,
        point: np.ndarray,
        out: Position | None = None,
    ) -> Position:
        """Convert a Cartesian point to a geodetic position."""
        ...

    def surface_normal_at_point(
        self,
        globe: Globe,
        point: np.ndarray,
    ) -> np.ndarray:
        """Return the unit surface normal at *point*."""
        ...

    def north_tangent_at_point(
        self,
        globe: Globe,
        point: np.ndarray,
    ) -> np.ndarray:
        """Return the unit north-pointing tangent at *point*."""
        ...


class ProjectionWgs84:
    """Ellipsoidal (3D) projection of a WGS84-like globe."""

    name = "wgs84"
    is_2d = False

    def geographic_to_cartesian(
        self,
        globe: Globe,
        latitude: float,
        longitude: float,
        altitude: float,
        out: np.ndarray | None = None,
    ) -> np.ndarray:
        """Convert a geodetic position to a point on or above the ellipsoid.

        Args:
            globe: The globe supplying radius and eccentricity.
            latitude: Latitude in degrees.
            longitude: Longitude in degrees.
            altitude: Height above the ellipsoid in meters.
            out: Optional 3-element array to write the result into.

        Returns:
            The Cartesian point.
        """
        if out is None:
            out = np.empty(3, dtype=np.float64)
        lat = math.radians(latitude)
        lon = math.radians(longitude)
        cos_lat = math.cos(lat)
        sin_lat = math.sin(lat)
        e2 = globe.eccentricity_squared

        # Radius of curvature in the prime vertical.
        rpm = globe.equatorial_radius / math.sqrt(1.0 - e2 * sin_lat * sin_lat)

        out[0] = (rpm + altitude) * cos_lat * math.sin(lon)
        out[1] = (rpm * (1.0 - e2) + altitude) * sin_lat
        out[2] = (rpm + altitude) * cos_lat * math.cos(lon)
        return out

    def cartesian_to_geographic(
        self,
        globe: Globe,
        point: np.ndarray,
        out: Position | None = None,
    ) -> Position:
        """Convert a Cartesian point to a geodetic position.

        Uses the closed-form solution of H. Vermeille, "Direct
        transformation from geocentric coordinates to geodetic
        coordinates", Journal of Geodesy (2002), which stays exact for
        points far above the surface and near the poles.

        Args:
            globe: The globe supplying radius and eccentricity.
            point: The Cartesian point.
            out: Optional position to write the result into.

        Returns:
            The geodetic position.
        """
        if out is None:
            out = Position()

        # Vermeille works in the conventional ECEF axis order.
        x_ecef = float(point[2])
        y_ecef = float(point[0])
        z_ecef = float(point[1])

        xx_yy = x_ecef * x_ecef + y_ecef * y_ecef
        sqrt_xx_yy = math.sqrt(xx_yy)

        a = globe.equatorial_radius
        ra2 = 1.0 / (a * a)
        e2 = globe.eccentricity_squared
        e4 = e2 * e2

        p = xx_yy * ra2
        q = z_ecef * z_ecef * (1.0 - e2) * ra2
        r = (p + q - e4) / 6.0

        evolute_border_test = 8.0 * r * r * r + e4 * p * q

        if evolute_border_test > 0.0 or q != 0.0:
            if evolute_border_test > 0.0:
                # Outside the evolute.
                rad1 = math.sqrt(evolute_border_test)
                rad2 = math.sqrt(e4 * p * q)
                if evolute_border_test > 10.0 * e2:
                    rad3 = float(np.cbrt((rad1 + rad2) * (rad1 + rad2)))
                    u = r + 0.5 * rad3 + 2.0 * r * r / rad3
                else:
                    u = (
                        r
                        + 0.5 * float(np.cbrt((rad1 + rad2) * (rad1 + rad2)))
                        + 0.5 * float(np.cbrt((rad1 - rad2) * (rad1 - rad2)))
                    )
            else:
                # Inside the evolute and not on the singular disc.
                rad1 = math.sqrt(-evolute_border_test)
                rad2 = math.sqrt(-8.0 * r * r * r)
                rad3 = math.sqrt(e4 * p * q)
                atan = 2.0 * math.atan2(rad3, rad1 + rad2) / 3.0
                u = -4.0 * r * math.sin(atan) * math.cos(math.pi / 6.0 + atan)

            v = math.sqrt(u * u + e4 * q)
            w = e2 * (u + v - q) / (2.0 * v)
            k = (u + v) / (math.sqrt(w * w + u + v) + w)
            d = k * sqrt_xx_yy / (k + e2)
            sqrt_dd_zz = math.sqrt(d * d + z_ecef * z_ecef)

            h = (k + e2 - 1.0) * sqrt_dd_zz / k
            phi = 2.0 * math.atan2(z_ecef, sqrt_dd_zz + d)
        else:
            # On the singular disc in the equatorial plane.
            if e2 == 0.0:
                # Center of a sphere.
                h = -a
                phi = 0.0
            else:
                rad1 = math.sqrt(1.0 - e2)
                rad2 = math.sqrt(e2 - p)
                e = math.sqrt(e2)

                h = -a * rad1 * rad2 / e
                phi = 2.0 * math.atan2(
                    math.sqrt(e4 - p), e * rad2 + rad1 * math.sqrt(p),
                )

        s2 = math.sqrt(2.0)
        if (s2 - 1.0) * y_ecef < sqrt_xx_yy + x_ecef:
            lam = 2.0 * math.atan2(y_ecef, sqrt_xx_yy + x_ecef)
        elif sqrt_xx_yy + y_ecef < (s2 + 1.0) * x_ecef:
            lam = -math.pi * 0.5 + 2.0 * math.atan2(x_ecef, sqrt_xx_yy - y_ecef)
        else:
            lam = math.pi * 0.5 - 2.0 * math.atan2(x_ecef, sqrt_xx_yy + y_ecef)

        out.latitude = math.degrees(phi)
        out.longitude = math.degrees(lam)
        out.altitude = h
        return out

    def surface_normal_at_point(
        self,
        globe: Globe,
        point: np.ndarray,
    ) -> np.ndarray:
        """Return the normalized ellipsoid gradient at *point*."""
        a2 = globe.equatorial_radius * globe.equatorial_radius
        b2 = globe.polar_radius * globe.polar_radius
        normal = np.array(
            [point[0] / a2, point[1] / b2, point[2] / a2],
            dtype=np.float64,
        )
        return _normalize(normal)

    def north_tangent_at_location(
        self,
        latitude: float,
        longitude: float,
    ) -> np.ndarray:
        """Return the unit north-pointing tangent at a geodetic location."""
        lat = math.radians(latitude)
        lon = math.radians(longitude)
        sin_lat = math.sin(lat)
        return _normalize(np.array(
            [
                -sin_lat * math.sin(lon),
                math.cos(lat),
                -sin_lat * math.cos(lon),
            ],
            dtype=np.float64,
        ))

    def north_tangent_at_point(
        self,
        globe: Globe,
        point: np.ndarray,
    ) -> np.ndarray:
        """Return the north tangent at the geodetic location of *point*."""
        position = self.cartesian_to_geographic(globe, point)
        return self.north_tangent_at_location(
            position.latitude, position.longitude,
        )


class ProjectionEquirectangular:
    """Flat (2D) plate carree projection."""

    name = "equirectangular"
    is_2d = True

    def geographic_to_cartesian(
        self,
        globe: Globe,
        latitude: float,
        longitude: float,
        altitude: float,
        out: np.ndarray | None = None,
    ) -> np.ndarray:
        """Map a geodetic position onto the XY plane, altitude along Z."""
        if out is None:
            out = np.empty(3, dtype=np.float64)
        radius = globe.equatorial_radius
        out[0] = radius * math.radians(longitude)
        out[1] = radius * math.radians(latitude)
        out[2] = altitude
        return out

    def cartesian_to_geographic(
        self,
        globe: Globe,
        point: np.ndarray,
        out: Position | None = None,
    ) -> Position:
        """Invert :meth:`geographic_to_cartesian`."""
        if out is None:
            out = Position()
        radius = globe.equatorial_radius
        out.latitude = math.degrees(float(point[1]) / radius)
        out.longitude = math.degrees(float(point[0]) / radius)
        out.altitude = float(point[2])
        return out

    def surface_normal_at_point(
        self,
        globe: Globe,
        point: np.ndarray,
    ) -> np.ndarray:
        return np.array([0.0, 0.0, 1.0], dtype=np.float64)

    def north_tangent_at_point(
        self,
        globe: Globe,
        point: np.ndarray,
    ) -> np.ndarray:
        return np.array([0.0, 1.0, 0.0], dtype=np.float64)
