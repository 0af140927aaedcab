"""Web Mercator tiles covering a LatLngBounds."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass

from geo.bounds import LatLngBounds
from shared.constants import (
    LONGITUDE_SPAN,
    MAX_LONGITUDE,
    MERCATOR_MAX_SIN,
    XY_EPSILON,
)

logger = logging.getLogger(__name__)


def lat_lng_to_tile_xy(lat_deg: float, lng_deg: float, zoom: int) -> tuple[float, float]:
    """WGS84 (lat, lng) -> fractional tile coordinates at zoom."""
    siny = math.sin(math.radians(lat_deg))
    siny = min(max(siny, -MERCATOR_MAX_SIN), MERCATOR_MAX_SIN)
    n = 2**zoom
    x = (lng_deg + MAX_LONGITUDE) / LONGITUDE_SPAN * n
    y = (0.5 - math.log((1 + siny) / (1 - siny)) / (4 * math.pi)) * n
    return x, y


@dataclass(frozen=True)
class TileRange:
    """
    Block of tiles at one zoom.

    Columns start at x_min and run count_x tiles eastwards, wrapping
    modulo 2**zoom past the antimeridian. Rows run y_min..y_max inclusive.
    """

    zoom: int
    x_min: int
    count_x: int
    y_min: int
    y_max: int

    @property
    def count_y(self) -> int:
        return self.y_max - self.y_min + 1

    def __len__(self) -> int:
        return self.count_x * self.count_y

    def __iter__(self) -> Iterator[tuple[int, int]]:
        t = 2**self.zoom
        for y in range(self.y_min, self.y_max + 1):
            for i in range(self.count_x):
                yield (self.x_min + i) % t, y


def tile_range(bounds: LatLngBounds, zoom: int) -> TileRange:
    """Tiles at zoom whose area meets bounds."""
    t = 2**zoom

    x_west, y_top = lat_lng_to_tile_xy(bounds.north, bounds.west, zoom)
    _, y_bottom = lat_lng_to_tile_xy(bounds.south, bounds.west, zoom)

    # Rows are clamped, columns follow the arc and wrap
    y_min = max(0, min(t - 1, math.floor(y_top + XY_EPSILON)))
    y_max = max(0, min(t - 1, math.floor(y_bottom - XY_EPSILON)))
    y_max = max(y_min, y_max)

    x_span = bounds.longitude_span / LONGITUDE_SPAN * t
    x_min = math.floor(x_west + XY_EPSILON)
    x_max = max(x_min, math.floor(x_west + x_span - XY_EPSILON))
    count_x = min(t, x_max - x_min + 1)

    return TileRange(zoom=zoom, x_min=x_min % t, count_x=count_x, y_min=y_min, y_max=y_max)


def iter_tiles(bounds: LatLngBounds, zoom: int) -> Iterator[tuple[int, int]]:
    """Yield (x, y) of every tile at zoom covering bounds, row by row."""
    yield from tile_range(bounds, zoom)


def count_tiles(bounds: LatLngBounds, min_zoom: int, max_zoom: int) -> int:
    """Number of tiles covering bounds over zooms min_zoom..max_zoom inclusive."""
    total = 0
    for zoom in range(min_zoom, max_zoom + 1):
        total += len(tile_range(bounds, zoom))
    logger.debug(
        'Bounds %s need %d tiles for zooms %d..%d', bounds, total, min_zoom, max_zoom
    )
    return total
