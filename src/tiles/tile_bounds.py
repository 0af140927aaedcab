"""Web Mercator tile index -> geographic bounds."""

from __future__ import annotations

import math

from geo.bounds import LatLngBounds
from shared.constants import LONGITUDE_SPAN, MAX_LONGITUDE


def tile_latitude(zoom: int, y: int) -> float:
    """Latitude of the top edge of tile row y (inverse spherical Mercator)."""
    n = math.pi - 2.0 * math.pi * y / 2.0**zoom
    return math.degrees(math.atan(math.sinh(n)))


def tile_longitude(zoom: int, x: int) -> float:
    """Longitude of the left edge of tile column x."""
    return x / 2.0**zoom * LONGITUDE_SPAN - MAX_LONGITUDE


def bounds_from_tile(zoom: int, x: int, y: int) -> LatLngBounds:
    """
    Bounds of tile (zoom, x, y).

    Latitudes stay within the Mercator range; indices are not range-checked.
    """
    return LatLngBounds(
        north=tile_latitude(zoom, y),
        east=tile_longitude(zoom, x + 1),
        south=tile_latitude(zoom, y + 1),
        west=tile_longitude(zoom, x),
    )
