"""Shared test fixtures for the globe_camera test suite."""

from __future__ import annotations

import pytest

from globe_camera.config.schema import GlobeCameraConfig
from globe_camera.globe.globe import Globe
from globe_camera.globe.projections import ProjectionEquirectangular

SPHERE_RADIUS = 6371000.0


@pytest.fixture
def wgs84_globe() -> Globe:
    """Return a WGS84 ellipsoidal globe."""
    return Globe()


@pytest.fixture
def sphere_globe() -> Globe:
    """Return a spherical globe with the mean Earth radius."""
    return Globe(equatorial_radius=SPHERE_RADIUS, polar_radius=SPHERE_RADIUS)


@pytest.fixture
def flat_globe() -> Globe:
    """Return a WGS84 globe in the flat equirectangular projection."""
    return Globe(projection=ProjectionEquirectangular())


@pytest.fixture
def default_config() -> GlobeCameraConfig:
    """Return a GlobeCameraConfig with default values."""
    return GlobeCameraConfig()
