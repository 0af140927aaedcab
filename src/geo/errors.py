"""Exceptions raised by the bounds core."""

from __future__ import annotations


class BoundsError(ValueError):
    """Base class for bounds failures."""


class InvalidBoundsError(BoundsError):
    """Corner values cannot form a bounds (NaN, out of range, north < south)."""


class InsufficientPointsError(BoundsError):
    """A bounds was requested from fewer than two distinct points."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f'Cannot create a LatLngBounds from {count} distinct point(s), '
            'at least 2 are required'
        )


class BoundsCodecError(BoundsError):
    """Binary payload does not hold exactly one bounds record."""


class InvalidLatLngError(ValueError):
    """Latitude/longitude pair is not a valid point."""
