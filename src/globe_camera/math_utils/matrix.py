"""4x4 view-matrix utilities for globe cameras.

Matrices are row-major ``numpy.float64`` arrays of shape ``(4, 4)``
that map globe Cartesian coordinates into eye coordinates, with the
viewer looking down the eye-space -Z axis. Functions that accept a
*matrix* argument modify it in place and also return it, so callers
can reuse one buffer across frames.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from globe_camera.math_utils.position import Position

if TYPE_CHECKING:
    from globe_camera.globe.globe import Globe


@dataclass
class ViewingParameters:
    """Pose recovered from a view matrix relative to an origin point.

    Attributes:
        origin: Geodetic position of the origin point.
        range: Distance from the eye to the origin point in meters.
        heading: Heading in degrees, clockwise from north.
        tilt: Tilt in degrees, measured from the origin's zenith.
        roll: Roll in degrees.
    """

    origin: Position = field(default_factory=Position)
    range: float = 0.0
    heading: float = 0.0
    tilt: float = 0.0
    roll: float = 0.0


def identity() -> np.ndarray:
    """Return a new 4x4 float64 identity matrix."""
    return np.eye(4, dtype=np.float64)


def set_to_identity(matrix: np.ndarray) -> np.ndarray:
    """Overwrite *matrix* with the identity."""
    matrix[...] = 0.0
    np.fill_diagonal(matrix, 1.0)
    return matrix


def _multiply(matrix: np.ndarray, other: np.ndarray) -> np.ndarray:
    matrix[...] = matrix @ other
    return matrix


def multiply_by_translation(
    matrix: np.ndarray,
    x: float,
    y: float,
    z: float,
) -> np.ndarray:
    """Post-multiply *matrix* by a translation."""
    translation = identity()
    translation[0, 3] = x
    translation[1, 3] = y
    translation[2, 3] = z
    return _multiply(matrix, translation)


def local_coordinate_axes_at_point(
    point: np.ndarray,
    globe: Globe,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Compute the east, north and up axes of the local frame at *point*.

    The up axis is the globe's surface normal at the point. The north
    tangent is only used to derive east, and north is then recomputed
    so the three axes are exactly orthonormal.

    Args:
        point: Cartesian point on or above the globe.
        globe: The globe defining the surface.

    Returns:
        ``(x_axis, y_axis, z_axis)`` unit vectors pointing east, north
        and up.
    """
    z_axis = globe.surface_normal_at_point(point)
    y_axis = globe.north_tangent_at_point(point)

    x_axis = np.cross(y_axis, z_axis)
    x_axis /= max(np.linalg.norm(x_axis), 1e-12)

    y_axis = np.cross(z_axis, x_axis)
    y_axis /= max(np.linalg.norm(y_axis), 1e-12)
    return x_axis, y_axis, z_axis


def multiply_by_local_coordinate_transform(
    matrix: np.ndarray,
    origin: np.ndarray,
    globe: Globe,
) -> np.ndarray:
    """Post-multiply *matrix* by the local frame at *origin*.

    The local frame maps local east/north/up coordinates to globe
    Cartesian coordinates, with its origin at *origin*.
    """
    x_axis, y_axis, z_axis = local_coordinate_axes_at_point(origin, globe)
    local = identity()
    local[:3, 0] = x_axis
    local[:3, 1] = y_axis
    local[:3, 2] = z_axis
    local[:3, 3] = origin
    return _multiply(matrix, local)


def multiply_by_first_person_modelview(
    matrix: np.ndarray,
    eye_position: Position,
    heading: float,
    tilt: float,
    roll: float,
    globe: Globe,
) -> np.ndarray:
    """Post-multiply *matrix* by a model-view anchored at *eye_position*.

    With all angles zero the viewer sits at the eye position looking
    straight down with north up.

    Args:
        matrix: Matrix to modify in place.
        eye_position: Geodetic eye position.
        heading: Clockwise rotation from north, in degrees.
        tilt: Rotation away from straight down, in degrees.
        roll: Rotation about the viewing axis, in degrees.
        globe: The globe the eye position refers to.

    Returns:
        The modified matrix.
    """
    # Roll: counter-clockwise about the eye-space Z axis.
    c = math.cos(math.radians(roll))
    s = math.sin(math.radians(roll))
    _multiply(matrix, np.array([
        [c, s, 0.0, 0.0],
        [-s, c, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]))

    # Tilt: counter-clockwise about the X axis.
    c = math.cos(math.radians(tilt))
    s = math.sin(math.radians(tilt))
    _multiply(matrix, np.array([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, c, s, 0.0],
        [0.0, -s, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]))

    # Heading: clockwise about the Z axis. This differs from roll once
    # tilt is non-zero.
    c = math.cos(math.radians(heading))
    s = math.sin(math.radians(heading))
    _multiply(matrix, np.array([
        [c, -s, 0.0, 0.0],
        [s, c, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]))

    # Inverse of the local frame at the eye point, mapping the eye
    # point to the origin.
    eye_point = globe.compute_point_from_position(
        eye_position.latitude,
        eye_position.longitude,
        eye_position.altitude,
    )
    x_axis, y_axis, z_axis = local_coordinate_axes_at_point(eye_point, globe)
    inverse_local = identity()
    inverse_local[0, :3] = x_axis
    inverse_local[1, :3] = y_axis
    inverse_local[2, :3] = z_axis
    inverse_local[0, 3] = -np.dot(x_axis, eye_point)
    inverse_local[1, 3] = -np.dot(y_axis, eye_point)
    inverse_local[2, 3] = -np.dot(z_axis, eye_point)
    return _multiply(matrix, inverse_local)


def multiply_by_look_at_modelview(
    matrix: np.ndarray,
    look_at_position: Position,
    distance: float,
    heading: float,
    tilt: float,
    roll: float,
    globe: Globe,
) -> np.ndarray:
    """Post-multiply *matrix* by an arc-ball model-view.

    The eye is pulled back *distance* meters along the viewing axis
    while *look_at_position* stays in the center of the viewport.

    Args:
        matrix: Matrix to modify in place.
        look_at_position: Geodetic position to look at.
        distance: Eye to look-at distance in meters.
        heading: Clockwise rotation from north, in degrees.
        tilt: Rotation away from the look-at zenith, in degrees.
        roll: Rotation about the viewing axis, in degrees.
        globe: The globe the look-at position refers to.

    Returns:
        The modified matrix.
    """
    multiply_by_translation(matrix, 0.0, 0.0, -distance)
    return multiply_by_first_person_modelview(
        matrix, look_at_position, heading, tilt, roll, globe,
    )


def extract_eye_point(
    matrix: np.ndarray,
    out: np.ndarray | None = None,
) -> np.ndarray:
    """Return the eye point of a view matrix in world coordinates.

    The eye point is the image of the eye-space origin under the
    inverse matrix: ``-R^T t`` for rotation ``R`` and translation ``t``.
    """
    if out is None:
        out = np.empty(3, dtype=np.float64)
    out[:] = -(matrix[:3, :3].T @ matrix[:3, 3])
    return out


def extract_forward_vector(
    matrix: np.ndarray,
    out: np.ndarray | None = None,
) -> np.ndarray:
    """Return the world-space viewing direction (eye-space -Z)."""
    if out is None:
        out = np.empty(3, dtype=np.float64)
    out[:] = -matrix[2, :3]
    return out


def extract_viewing_parameters(
    matrix: np.ndarray,
    origin: np.ndarray,
    roll: float,
    globe: Globe,
) -> ViewingParameters:
    """Decompose a view matrix relative to an origin point.

    Recovers the position, range, heading and tilt which, passed to
    :func:`multiply_by_look_at_modelview` together with *roll*,
    rebuild *matrix*. When the viewer looks straight along the origin's
    normal the heading is resolved through *roll* alone, and an
    all-zero rotation reads as heading 0.

    Args:
        matrix: The view matrix to decompose.
        origin: Cartesian point the parameters are relative to.
        roll: The known roll of the view, in degrees.
        globe: The globe the matrix was built on.

    Returns:
        The recovered viewing parameters.
    """
    origin_position = globe.compute_position_from_point(origin)

    # Remove the geographic part of the matrix, keeping rotation and
    # translation relative to the origin.
    local = matrix.copy()
    multiply_by_local_coordinate_transform(local, origin, globe)

    distance = -local[2, 3]
    ct = local[2, 2]
    st = math.hypot(local[0, 2], local[1, 2])
    tilt = math.degrees(math.atan2(st, ct))

    cr = math.cos(math.radians(roll))
    sr = math.sin(math.radians(roll))
    ch = cr * local[0, 0] - sr * local[1, 0]
    sh = sr * local[1, 1] - cr * local[0, 1]
    heading = math.degrees(math.atan2(sh, ch))

    return ViewingParameters(
        origin=origin_position,
        range=float(distance),
        heading=heading,
        tilt=tilt,
        roll=roll,
    )
