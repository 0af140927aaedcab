"""Building bounds from a set of points."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from geo.bounds import LatLngBounds, contains_longitude, longitude_span
from geo.errors import InsufficientPointsError
from geo.lat_lng import ILatLng
from shared.constants import (
    LONGITUDE_SPAN,
    MAX_LATITUDE,
    MIN_LATITUDE,
    MIN_POINTS_FOR_BOUNDS,
)

logger = logging.getLogger(__name__)


def bounds_from_lat_lngs(points: Iterable[ILatLng]) -> LatLngBounds:
    """Bounds over the distinct points; needs at least two of them."""
    return LatLngBoundsBuilder().includes(points).build()


def _fold(points: Sequence[ILatLng]) -> LatLngBounds:
    """
    Fold distinct points into a bounds.

    Longitudes are seeded from the first two points, oriented along their
    shorter arc. Every point outside the current arc then moves whichever
    edge gives the smaller resulting span. The fold is greedy, so some
    point orders give a wider arc than the optimum.
    """
    min_lat = MAX_LATITUDE
    max_lat = MIN_LATITUDE

    lon_east = points[0].longitude
    lon_west = points[1].longitude
    if abs(lon_east - lon_west) < LONGITUDE_SPAN / 2:
        if lon_east < lon_west:
            lon_east, lon_west = lon_west, lon_east
    elif lon_west < lon_east:
        lon_east, lon_west = lon_west, lon_east

    for point in points:
        latitude = point.latitude
        min_lat = min(min_lat, latitude)
        max_lat = max(max_lat, latitude)

        longitude = point.longitude
        if not contains_longitude(lon_east, lon_west, longitude):
            east_span = longitude_span(longitude, lon_west)
            west_span = longitude_span(lon_east, longitude)
            if east_span <= west_span:
                lon_east = longitude
            else:
                lon_west = longitude

    bounds = LatLngBounds(max_lat, lon_east, min_lat, lon_west)
    logger.debug('Folded %d points into %s', len(points), bounds)
    return bounds


class LatLngBoundsBuilder:
    """
    Collects distinct points and builds the bounds covering them.

    Not thread-safe; build once the points are in.

    Usage:
        bounds = (
            LatLngBoundsBuilder()
            .include(LatLng(10, 170))
            .include(LatLng(-10, -170))
            .build()
        )
    """

    def __init__(self) -> None:
        self._points: list[ILatLng] = []

    def include(self, point: ILatLng) -> LatLngBoundsBuilder:
        """Add a point unless an equal one is already present."""
        if point not in self._points:
            self._points.append(point)
        return self

    def includes(self, points: Iterable[ILatLng]) -> LatLngBoundsBuilder:
        for point in points:
            self.include(point)
        return self

    def __len__(self) -> int:
        return len(self._points)

    def build(self) -> LatLngBounds:
        """Bounds over the collected points; needs at least two of them."""
        if len(self._points) < MIN_POINTS_FOR_BOUNDS:
            raise InsufficientPointsError(len(self._points))
        return _fold(self._points)
