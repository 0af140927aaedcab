"""
Binary form of LatLngBounds.

A record is four little-endian float64 values in the order
north, east, south, west (32 bytes). Catalogs are records laid back to back.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from geo.bounds import LatLngBounds
from geo.errors import BoundsCodecError
from shared.constants import (
    BOUNDS_BINARY_DTYPE,
    BOUNDS_BINARY_SIZE,
    BOUNDS_FIELD_COUNT,
)

logger = logging.getLogger(__name__)


def pack_bounds(bounds: LatLngBounds) -> bytes:
    arr = np.array(bounds.as_tuple(), dtype=BOUNDS_BINARY_DTYPE)
    return arr.tobytes()


def unpack_bounds(data: bytes) -> LatLngBounds:
    """Restore a bounds written by pack_bounds."""
    if len(data) != BOUNDS_BINARY_SIZE:
        msg = f'expected {BOUNDS_BINARY_SIZE} bytes for a bounds record, got {len(data)}'
        raise BoundsCodecError(msg)
    north, east, south, west = np.frombuffer(data, dtype=BOUNDS_BINARY_DTYPE).tolist()
    return LatLngBounds(north, east, south, west)


def pack_many(bounds: Iterable[LatLngBounds]) -> bytes:
    rows = [b.as_tuple() for b in bounds]
    arr = np.array(rows, dtype=BOUNDS_BINARY_DTYPE).reshape(-1, BOUNDS_FIELD_COUNT)
    return arr.tobytes()


def unpack_many(data: bytes) -> list[LatLngBounds]:
    """Restore every record of a catalog written by pack_many."""
    if len(data) % BOUNDS_BINARY_SIZE:
        msg = (
            f'catalog length {len(data)} is not a multiple of '
            f'{BOUNDS_BINARY_SIZE} bytes'
        )
        raise BoundsCodecError(msg)
    arr = np.frombuffer(data, dtype=BOUNDS_BINARY_DTYPE).reshape(-1, BOUNDS_FIELD_COUNT)
    logger.debug('Decoded %d bounds records', arr.shape[0])
    return [LatLngBounds(*row) for row in arr.tolist()]
