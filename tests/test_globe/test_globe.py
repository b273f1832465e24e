"""Tests for globe_camera.globe.globe and projections."""

from __future__ import annotations

import math

import numpy as np
import pytest

from globe_camera.globe.globe import (
    WGS84_SEMI_MAJOR_AXIS,
    WGS84_SEMI_MINOR_AXIS,
    Globe,
)
from globe_camera.globe.projections import (
    Projection,
    ProjectionEquirectangular,
    ProjectionWgs84,
)


class TestGlobe:
    """Tests for Globe."""

    def test_defaults_to_wgs84(self, wgs84_globe: Globe) -> None:
        assert isinstance(wgs84_globe.projection, ProjectionWgs84)
        assert wgs84_globe.equatorial_radius == WGS84_SEMI_MAJOR_AXIS
        assert wgs84_globe.polar_radius == WGS84_SEMI_MINOR_AXIS
        assert not wgs84_globe.is_2d()

    def test_eccentricity_squared(self, wgs84_globe: Globe) -> None:
        assert wgs84_globe.eccentricity_squared == pytest.approx(
            0.00669437999013, rel=1e-9,
        )

    def test_sphere_has_no_eccentricity(self, sphere_globe: Globe) -> None:
        assert sphere_globe.eccentricity_squared == 0.0

    def test_projection_switch(self, wgs84_globe: Globe) -> None:
        wgs84_globe.projection = ProjectionEquirectangular()
        assert wgs84_globe.is_2d()
        wgs84_globe.projection = ProjectionWgs84()
        assert not wgs84_globe.is_2d()

    def test_projections_satisfy_protocol(self) -> None:
        assert isinstance(ProjectionWgs84(), Projection)
        assert isinstance(ProjectionEquirectangular(), Projection)


class TestProjectionWgs84:
    """Tests for ProjectionWgs84 through Globe."""

    def test_origin_on_plus_z(self, wgs84_globe: Globe) -> None:
        point = wgs84_globe.compute_point_from_position(0.0, 0.0, 0.0)
        np.testing.assert_array_almost_equal(
            point, [0.0, 0.0, WGS84_SEMI_MAJOR_AXIS],
        )

    def test_east_on_plus_x(self, wgs84_globe: Globe) -> None:
        point = wgs84_globe.compute_point_from_position(0.0, 90.0, 100.0)
        np.testing.assert_allclose(
            point, [WGS84_SEMI_MAJOR_AXIS + 100.0, 0.0, 0.0], atol=1e-6,
        )

    def test_north_pole_on_plus_y(self, wgs84_globe: Globe) -> None:
        point = wgs84_globe.compute_point_from_position(90.0, 0.0, 0.0)
        np.testing.assert_allclose(
            point, [0.0, WGS84_SEMI_MINOR_AXIS, 0.0], atol=1e-3,
        )

    def test_writes_out(self, wgs84_globe: Globe) -> None:
        out = np.zeros(3)
        assert wgs84_globe.compute_point_from_position(1, 2, 3, out) is out

    @pytest.mark.parametrize(
        ("latitude", "longitude", "altitude"),
        [
            (0.0, 0.0, 0.0),
            (45.0, -100.0, 1e6),
            (21.9, -125.05, 4611040.83),
            (-60.0, 170.0, 12.5),
            (30.0, -110.0, 75000.0),
            (-89.0, 45.0, 1e7),
        ],
    )
    def test_round_trip(
        self,
        wgs84_globe: Globe,
        latitude: float,
        longitude: float,
        altitude: float,
    ) -> None:
        point = wgs84_globe.compute_point_from_position(
            latitude, longitude, altitude,
        )
        position = wgs84_globe.compute_position_from_point(point)
        assert position.latitude == pytest.approx(latitude, abs=1e-9)
        assert position.longitude == pytest.approx(longitude, abs=1e-9)
        assert position.altitude == pytest.approx(altitude, abs=1e-6)

    def test_pole_latitude(self, wgs84_globe: Globe) -> None:
        point = wgs84_globe.compute_point_from_position(90.0, 0.0, 500.0)
        position = wgs84_globe.compute_position_from_point(point)
        assert position.latitude == pytest.approx(90.0)
        assert position.altitude == pytest.approx(500.0, abs=1e-6)

    def test_sphere_round_trip(self, sphere_globe: Globe) -> None:
        point = sphere_globe.compute_point_from_position(12.0, 34.0, 5600.0)
        assert np.linalg.norm(point) == pytest.approx(6371000.0 + 5600.0)
        position = sphere_globe.compute_position_from_point(point)
        assert position.latitude == pytest.approx(12.0)
        assert position.longitude == pytest.approx(34.0)
        assert position.altitude == pytest.approx(5600.0, abs=1e-6)

    def test_sphere_center(self, sphere_globe: Globe) -> None:
        position = sphere_globe.compute_position_from_point(np.zeros(3))
        assert position.latitude == 0.0
        assert position.altitude == -6371000.0

    def test_ellipsoid_center(self, wgs84_globe: Globe) -> None:
        position = wgs84_globe.compute_position_from_point(np.zeros(3))
        assert position.latitude == pytest.approx(90.0)
        assert position.altitude == pytest.approx(-WGS84_SEMI_MINOR_AXIS)

    @pytest.mark.parametrize("offset", [1000.0, 20000.0, 40000.0])
    def test_equatorial_disc_near_center(
        self,
        wgs84_globe: Globe,
        offset: float,
    ) -> None:
        # Points this close to the center lie on the normals of both
        # hemispheres; the northern foot point is reported.
        point = np.array([offset, 0.0, 0.0])
        position = wgs84_globe.compute_position_from_point(point)

        assert 0.0 < position.latitude < 90.0
        assert position.longitude == pytest.approx(90.0)
        np.testing.assert_allclose(
            wgs84_globe.compute_point_from_position(
                position.latitude, position.longitude, position.altitude,
            ),
            point,
            atol=1e-3,
        )

    def test_normal_is_gradient(self, wgs84_globe: Globe) -> None:
        point = wgs84_globe.compute_point_from_position(45.0, 0.0, 0.0)
        normal = wgs84_globe.surface_normal_at_point(point)
        assert np.linalg.norm(normal) == pytest.approx(1.0)
        # On the surface the gradient is the geodetic normal.
        lat = math.radians(45.0)
        np.testing.assert_allclose(
            normal, [0.0, math.sin(lat), math.cos(lat)], atol=1e-12,
        )

    def test_north_tangent(self, wgs84_globe: Globe) -> None:
        point = wgs84_globe.compute_point_from_position(0.0, 0.0, 1000.0)
        np.testing.assert_allclose(
            wgs84_globe.north_tangent_at_point(point), [0, 1, 0], atol=1e-12,
        )


class TestProjectionEquirectangular:
    """Tests for ProjectionEquirectangular through Globe."""

    def test_point_from_position(self, flat_globe: Globe) -> None:
        point = flat_globe.compute_point_from_position(10.0, 20.0, 5.0)
        radius = flat_globe.equatorial_radius
        np.testing.assert_allclose(
            point,
            [radius * math.radians(20.0), radius * math.radians(10.0), 5.0],
        )

    def test_round_trip(self, flat_globe: Globe) -> None:
        point = flat_globe.compute_point_from_position(-45.0, 170.0, 300.0)
        position = flat_globe.compute_position_from_point(point)
        assert position.latitude == pytest.approx(-45.0)
        assert position.longitude == pytest.approx(170.0)
        assert position.altitude == pytest.approx(300.0)

    def test_constant_frame(self, flat_globe: Globe) -> None:
        point = np.array([1e6, -2e6, 10.0])
        np.testing.assert_array_equal(
            flat_globe.surface_normal_at_point(point), [0, 0, 1],
        )
        np.testing.assert_array_equal(
            flat_globe.north_tangent_at_point(point), [0, 1, 0],
        )
