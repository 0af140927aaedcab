from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from geo.errors import InvalidLatLngError
from shared.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)


class ILatLng(Protocol):
    """Anything exposing latitude/longitude in degrees."""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...


def wrap_longitude(
    value: float,
    min_value: float = MIN_LONGITUDE,
    max_value: float = MAX_LONGITUDE,
) -> float:
    """
    Wrap value into [min_value, max_value].

    The interval is half-open except that a value landing exactly on a
    multiple of max_value from above keeps max_value (180 -> 180, 540 -> 180).
    """
    delta = max_value - min_value
    first_mod = math.fmod(value - min_value, delta)
    second_mod = math.fmod(first_mod + delta, delta)
    if value >= max_value and second_mod == 0:
        return max_value
    return second_mod + min_value


@dataclass(frozen=True)
class LatLng:
    """Geographic point in WGS84 degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        lat = float(self.latitude)
        lng = float(self.longitude)
        if math.isnan(lat):
            msg = 'latitude must not be NaN'
            raise InvalidLatLngError(msg)
        if not (MIN_LATITUDE <= lat <= MAX_LATITUDE):
            msg = f'latitude must be between -90 and 90, got {lat}'
            raise InvalidLatLngError(msg)
        if math.isnan(lng):
            msg = 'longitude must not be NaN'
            raise InvalidLatLngError(msg)
        if math.isinf(lng):
            msg = 'longitude must not be infinite'
            raise InvalidLatLngError(msg)
        object.__setattr__(self, 'latitude', lat)
        object.__setattr__(self, 'longitude', lng)

    def wrap(self) -> LatLng:
        """Return a copy with longitude wrapped into [-180, 180]."""
        return LatLng(self.latitude, wrap_longitude(self.longitude))

    @classmethod
    def parse(cls, text: str) -> LatLng:
        """Parse 'lat,lng'."""
        parts = [p.strip() for p in text.split(',')]
        if len(parts) != 2:
            msg = f"expected 'lat,lng', got {text!r}"
            raise InvalidLatLngError(msg)
        try:
            lat, lng = float(parts[0]), float(parts[1])
        except ValueError as e:
            msg = f"expected 'lat,lng', got {text!r}"
            raise InvalidLatLngError(msg) from e
        return cls(lat, lng)

    def __str__(self) -> str:
        return f'LatLng [latitude={self.latitude}, longitude={self.longitude}]'
