"""Geo module - points, bounds and their binary form."""

from .bounds import (
    LatLngBounds,
    LatLngSpan,
    check_corners,
    contains_longitude,
    longitude_span,
)
from .builder import LatLngBoundsBuilder, bounds_from_lat_lngs
from .errors import (
    BoundsCodecError,
    BoundsError,
    InsufficientPointsError,
    InvalidBoundsError,
    InvalidLatLngError,
)
from .lat_lng import LatLng, wrap_longitude

__all__ = [
    'BoundsCodecError',
    'BoundsError',
    'InsufficientPointsError',
    'InvalidBoundsError',
    'InvalidLatLngError',
    'LatLng',
    'LatLngBounds',
    'LatLngBoundsBuilder',
    'LatLngSpan',
    'bounds_from_lat_lngs',
    'check_corners',
    'contains_longitude',
    'longitude_span',
    'wrap_longitude',
]
