"""
Latitude/longitude aligned rectangle with antimeridian support.

Longitudes are kept in [-180, 180]. When east < west the rectangle wraps
through the antimeridian and covers [west, 180] plus [-180, east].
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geo.errors import InvalidBoundsError
from geo.lat_lng import ILatLng, LatLng, wrap_longitude
from shared.constants import (
    LONGITUDE_SPAN,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


def longitude_span(east: float, west: float) -> float:
    """Width of the [west, east] arc; the seam-crossing arc when east < west."""
    span = abs(east - west)
    if east >= west:
        return span
    # shortest span contains antimeridian
    return LONGITUDE_SPAN - span


def contains_longitude(east: float, west: float, value: float) -> bool:
    """Whether value lies on the [west, east] arc."""
    if east >= west:
        return west <= value <= east
    return value <= east or value >= west


def check_corners(north: float, east: float, south: float, west: float) -> None:
    """Raise InvalidBoundsError unless the corners can form a bounds."""
    if math.isnan(north) or math.isnan(south):
        msg = 'latitude must not be NaN'
        raise InvalidBoundsError(msg)
    if math.isnan(east) or math.isnan(west):
        msg = 'longitude must not be NaN'
        raise InvalidBoundsError(msg)
    if math.isinf(east) or math.isinf(west):
        msg = 'longitude must not be infinite'
        raise InvalidBoundsError(msg)
    if not (
        MIN_LATITUDE <= north <= MAX_LATITUDE and MIN_LATITUDE <= south <= MAX_LATITUDE
    ):
        msg = 'latitude must be between -90 and 90'
        raise InvalidBoundsError(msg)
    if north < south:
        msg = f'north latitude ({north}) cannot be less than south latitude ({south})'
        raise InvalidBoundsError(msg)


@dataclass(frozen=True)
class LatLngSpan:
    """Extent of a bounds in degrees along each axis."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class LatLngBounds:
    """
    Geographic rectangle given by its north/south latitudes and east/west longitudes.

    The constructor does not validate or wrap; use ``from_corners`` for
    untrusted values. Field order matches the persisted binary order.
    """

    north: float
    east: float
    south: float
    west: float

    # --- construction ---

    @classmethod
    def from_corners(
        cls,
        north: float,
        east: float,
        south: float,
        west: float,
    ) -> LatLngBounds:
        """
        Validate corners and wrap longitudes into [-180, 180].

        East may end up smaller than west; such bounds cross the antimeridian.
        """
        check_corners(north, east, south, west)
        return cls(
            float(north),
            wrap_longitude(east),
            float(south),
            wrap_longitude(west),
        )

    @classmethod
    def world(cls) -> LatLngBounds:
        return cls.from_corners(MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE)

    @classmethod
    def from_tile(cls, zoom: int, x: int, y: int) -> LatLngBounds:
        """Bounds of a Web Mercator tile."""
        from tiles.tile_bounds import bounds_from_tile

        return bounds_from_tile(zoom, x, y)

    @classmethod
    def from_lat_lngs(cls, points: Iterable[ILatLng]) -> LatLngBounds:
        """Smallest bounds the greedy fold finds for the points."""
        from geo.builder import bounds_from_lat_lngs

        return bounds_from_lat_lngs(list(points))

    # --- spans and center ---

    @property
    def latitude_span(self) -> float:
        return abs(self.north - self.south)

    @property
    def longitude_span(self) -> float:
        return longitude_span(self.east, self.west)

    @property
    def span(self) -> LatLngSpan:
        return LatLngSpan(self.latitude_span, self.longitude_span)

    @property
    def is_empty_span(self) -> bool:
        return self.longitude_span == 0.0 or self.latitude_span == 0.0

    @property
    def center(self) -> LatLng:
        """
        Center by planar interpolation of the corners.

        This is not the geodesic center of the rectangle.
        """
        lat_center = (self.north + self.south) / 2.0
        if self.east >= self.west:
            lng_center = (self.east + self.west) / 2.0
        else:
            half_span = (LONGITUDE_SPAN + self.east - self.west) / 2.0
            lng_center = self.west + half_span
            if lng_center >= MAX_LONGITUDE:
                lng_center = self.east - half_span
        return LatLng(lat_center, lng_center)

    # --- corners ---

    @property
    def north_east(self) -> LatLng:
        return LatLng(self.north, self.east)

    @property
    def south_west(self) -> LatLng:
        return LatLng(self.south, self.west)

    @property
    def south_east(self) -> LatLng:
        return LatLng(self.south, self.east)

    @property
    def north_west(self) -> LatLng:
        return LatLng(self.north, self.west)

    def corners(self) -> tuple[LatLng, LatLng]:
        """North-east and south-west corners."""
        return self.north_east, self.south_west

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self.north, self.east, self.south, self.west

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    # --- containment ---

    def contains_latitude(self, latitude: float) -> bool:
        return self.south <= latitude <= self.north

    def contains_longitude(self, longitude: float) -> bool:
        return contains_longitude(self.east, self.west, longitude)

    def contains(self, item: ILatLng | LatLngBounds) -> bool:
        """
        Whether a point or another bounds lies inside this one.

        A bounds counts as contained when both its north-east and south-west
        corners are; this is not exact for every seam-crossing rectangle.
        """
        if isinstance(item, LatLngBounds):
            return self.contains(item.north_east) and self.contains(item.south_west)
        return self.contains_latitude(item.latitude) and self.contains_longitude(
            item.longitude
        )

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    # --- union ---

    def union(self, other: LatLngBounds) -> LatLngBounds:
        """Smallest bounds stretching over this and other."""
        return self._union_no_check(other.north, other.east, other.south, other.west)

    def union_corners(
        self,
        north: float,
        east: float,
        south: float,
        west: float,
    ) -> LatLngBounds:
        """Union with a rectangle given by corners; the corners are validated."""
        check_corners(north, east, south, west)
        return self._union_no_check(north, east, south, west)

    __or__ = union

    def _union_no_check(
        self,
        north: float,
        east: float,
        south: float,
        west: float,
    ) -> LatLngBounds:
        north = max(self.north, north)
        south = min(self.south, south)

        east = wrap_longitude(east)
        west = wrap_longitude(west)

        if self.east == east and self.west == west:
            return LatLngBounds(north, east, south, west)

        east_in_this = contains_longitude(self.east, self.west, east)
        west_in_this = contains_longitude(self.east, self.west, west)
        this_east_inside = contains_longitude(east, west, self.east)
        this_west_inside = contains_longitude(east, west, self.west)

        # both ends overlap, together the arcs go all the way round
        if east_in_this and west_in_this and this_east_inside and this_west_inside:
            return LatLngBounds(north, MAX_LONGITUDE, south, MIN_LONGITUDE)

        if east_in_this:
            if west_in_this:
                return LatLngBounds(north, self.east, south, self.west)
            return LatLngBounds(north, self.east, south, west)

        if this_east_inside:
            if this_west_inside:
                return LatLngBounds(north, east, south, west)
            return LatLngBounds(north, east, south, self.west)

        # disjoint: join through the shorter gap
        if longitude_span(east, self.west) < longitude_span(self.east, west):
            return LatLngBounds(north, east, south, self.west)
        return LatLngBounds(north, self.east, south, west)

    # --- intersection ---

    def intersect(self, other: LatLngBounds) -> LatLngBounds | None:
        """Overlap of this and other, or None when they do not meet."""
        return self._intersect_no_check(
            other.north, other.east, other.south, other.west
        )

    def intersect_corners(
        self,
        north: float,
        east: float,
        south: float,
        west: float,
    ) -> LatLngBounds | None:
        """Intersection with a rectangle given by corners; the corners are validated."""
        check_corners(north, east, south, west)
        return self._intersect_no_check(north, east, south, west)

    __and__ = intersect

    def _intersect_no_check(
        self,
        north: float,
        east: float,
        south: float,
        west: float,
    ) -> LatLngBounds | None:
        max_south = max(self.south, min(MAX_LATITUDE, south))
        min_north = min(self.north, max(MIN_LATITUDE, north))
        if min_north < max_south:
            return None

        east = wrap_longitude(east)
        west = wrap_longitude(west)

        if self.east == east and self.west == west:
            return LatLngBounds(min_north, east, max_south, west)

        east_in_this = contains_longitude(self.east, self.west, east)
        west_in_this = contains_longitude(self.east, self.west, west)
        this_east_inside = contains_longitude(east, west, self.east)
        this_west_inside = contains_longitude(east, west, self.west)

        # two overlapping lenses: keep the wider one
        if east_in_this and west_in_this and this_east_inside and this_west_inside:
            logger.debug(
                'Bounds %s and (%s, %s) overlap twice, keeping the wider lens',
                self,
                east,
                west,
            )
            if longitude_span(east, self.west) > longitude_span(self.east, west):
                return LatLngBounds(min_north, east, max_south, self.west)
            return LatLngBounds(min_north, self.east, max_south, west)

        if east_in_this:
            if west_in_this:
                return LatLngBounds(min_north, east, max_south, west)
            return LatLngBounds(min_north, east, max_south, self.west)

        if this_east_inside:
            if this_west_inside:
                return LatLngBounds(min_north, self.east, max_south, self.west)
            return LatLngBounds(min_north, self.east, max_south, west)

        return None

    # --- growing by a point ---

    def include(self, point: ILatLng) -> LatLngBounds:
        """New bounds covering this one and point."""
        from geo.builder import LatLngBoundsBuilder

        return (
            LatLngBoundsBuilder()
            .include(self.north_east)
            .include(self.south_west)
            .include(point)
            .build()
        )

    def __str__(self) -> str:
        return f'N:{self.north}; E:{self.east}; S:{self.south}; W:{self.west}'
