"""Geodetic positions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Position:
    """A geodetic position.

    Positions are mutable value holders. Cameras own their positions and
    exchange them with :meth:`copy`, never by sharing the instance.

    Attributes:
        latitude: Latitude in degrees, nominally ``[-90, 90]``.
        longitude: Longitude in degrees, nominally ``(-180, 180]``.
        altitude: Altitude above the globe surface in meters.
    """

    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float = 0.0

    def copy(self, other: Position) -> Position:
        """Set this position to the values of *other* and return self."""
        self.latitude = other.latitude
        self.longitude = other.longitude
        self.altitude = other.altitude
        return self

    def clone(self) -> Position:
        """Return a new position with the same values."""
        return Position(self.latitude, self.longitude, self.altitude)
