"""Tests for globe_camera.math_utils.matrix."""

from __future__ import annotations

import numpy as np
import pytest

from globe_camera.globe.globe import Globe
from globe_camera.math_utils.matrix import (
    extract_eye_point,
    extract_forward_vector,
    extract_viewing_parameters,
    identity,
    local_coordinate_axes_at_point,
    multiply_by_look_at_modelview,
    multiply_by_translation,
    set_to_identity,
)
from globe_camera.math_utils.position import Position


class TestIdentity:
    """Tests for identity and set_to_identity."""

    def test_identity(self) -> None:
        m = identity()
        np.testing.assert_array_equal(m, np.eye(4))
        assert m.dtype == np.float64

    def test_set_to_identity_in_place(self) -> None:
        m = np.full((4, 4), 7.0)
        result = set_to_identity(m)
        assert result is m
        np.testing.assert_array_equal(m, np.eye(4))


class TestMultiplyByTranslation:
    """Tests for multiply_by_translation."""

    def test_translates_point(self) -> None:
        m = multiply_by_translation(identity(), 10.0, 20.0, 30.0)
        result = m @ np.array([1.0, 2.0, 3.0, 1.0])
        np.testing.assert_array_almost_equal(result, [11, 22, 33, 1])


class TestExtractEyePoint:
    """Tests for extract_eye_point and extract_forward_vector."""

    def test_translation_only(self) -> None:
        m = multiply_by_translation(identity(), 0.0, 0.0, -100.0)
        np.testing.assert_array_almost_equal(extract_eye_point(m), [0, 0, 100])

    def test_writes_out(self) -> None:
        out = np.zeros(3)
        assert extract_eye_point(identity(), out) is out

    def test_forward_of_identity(self) -> None:
        np.testing.assert_array_equal(
            extract_forward_vector(identity()), [0, 0, -1],
        )


class TestLocalCoordinateAxes:
    """Tests for local_coordinate_axes_at_point."""

    def test_orthonormal(self, wgs84_globe: Globe) -> None:
        point = wgs84_globe.compute_point_from_position(40.0, 25.0, 5000.0)
        x, y, z = local_coordinate_axes_at_point(point, wgs84_globe)
        basis = np.stack([x, y, z])
        np.testing.assert_array_almost_equal(basis @ basis.T, np.eye(3))

    def test_east_north_up_at_origin(self, wgs84_globe: Globe) -> None:
        point = wgs84_globe.compute_point_from_position(0.0, 0.0, 0.0)
        x, y, z = local_coordinate_axes_at_point(point, wgs84_globe)
        np.testing.assert_array_almost_equal(x, [1, 0, 0])
        np.testing.assert_array_almost_equal(y, [0, 1, 0])
        np.testing.assert_array_almost_equal(z, [0, 0, 1])


class TestExtractViewingParameters:
    """Tests for extract_viewing_parameters."""

    @pytest.mark.parametrize(
        ("heading", "tilt", "roll"),
        [(50.0, 70.0, 45.0), (-120.0, 30.0, 0.0), (10.0, 0.0, -30.0)],
    )
    def test_recovers_look_at_parameters(
        self,
        wgs84_globe: Globe,
        heading: float,
        tilt: float,
        roll: float,
    ) -> None:
        position = Position(45.0, -100.0, 1000.0)
        m = multiply_by_look_at_modelview(
            identity(), position, 5e5, heading, tilt, roll, wgs84_globe,
        )
        target = wgs84_globe.compute_point_from_position(
            position.latitude, position.longitude, position.altitude,
        )
        params = extract_viewing_parameters(m, target, roll, wgs84_globe)

        assert params.origin.latitude == pytest.approx(45.0)
        assert params.origin.longitude == pytest.approx(-100.0)
        assert params.origin.altitude == pytest.approx(1000.0, abs=1e-5)
        assert params.range == pytest.approx(5e5)
        assert params.heading == pytest.approx(heading)
        assert params.tilt == pytest.approx(tilt, abs=1e-9)
        assert params.roll == roll

    def test_recomposition_reproduces_matrix(self, wgs84_globe: Globe) -> None:
        position = Position(-33.0, 151.0, 0.0)
        m = multiply_by_look_at_modelview(
            identity(), position, 2e4, 75.0, 55.0, 12.0, wgs84_globe,
        )
        target = wgs84_globe.compute_point_from_position(-33.0, 151.0, 0.0)
        p = extract_viewing_parameters(m, target, 12.0, wgs84_globe)
        rebuilt = multiply_by_look_at_modelview(
            identity(), p.origin, p.range, p.heading, p.tilt, p.roll,
            wgs84_globe,
        )
        np.testing.assert_allclose(rebuilt, m, atol=1e-6)

    def test_straight_down_does_not_raise(self, wgs84_globe: Globe) -> None:
        position = Position(0.0, 0.0, 0.0)
        m = multiply_by_look_at_modelview(
            identity(), position, 1e6, 0.0, 0.0, 0.0, wgs84_globe,
        )
        eye = extract_eye_point(m)
        params = extract_viewing_parameters(m, eye, 0.0, wgs84_globe)
        assert params.tilt == pytest.approx(0.0)
        assert params.heading == pytest.approx(0.0)
        assert params.range == pytest.approx(0.0, abs=1e-6)
