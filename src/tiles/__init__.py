"""Web Mercator tile helpers.

This module provides:
- bounds_from_tile: geographic bounds of a (zoom, x, y) tile
- tile_range / iter_tiles: tiles covering a LatLngBounds, antimeridian aware
- count_tiles: tile count of a bounds over a zoom range
"""

from tiles.coverage import TileRange, count_tiles, iter_tiles, tile_range
from tiles.tile_bounds import bounds_from_tile, tile_latitude, tile_longitude

__all__ = [
    'TileRange',
    'bounds_from_tile',
    'count_tiles',
    'iter_tiles',
    'tile_latitude',
    'tile_longitude',
    'tile_range',
]
