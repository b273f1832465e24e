"""Globe camera: look-at and free camera models for a geodetic globe.

A small Python package that keeps a viewer's pose relative to a
WGS84 (or flat) globe, derives view matrices from it, enforces
navigation limits, and converts between the arc-ball and
first-person camera representations.
"""

__version__ = "0.1.0"
