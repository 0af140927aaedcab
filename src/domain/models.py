import logging
import math

from pydantic import BaseModel, field_validator, model_validator

from geo.bounds import LatLngBounds, check_corners
from geo.errors import InvalidBoundsError
from shared.constants import DEFAULT_TILE_COUNT_MAX_ZOOM
from tiles.coverage import count_tiles

logger = logging.getLogger(__name__)


class OfflineRegionDefinition(BaseModel):
    """
    Region to keep offline: a style, a bounds, a zoom range and a pixel ratio.

    Both zooms must be >= 0 and max_zoom >= min_zoom. min_zoom is finite;
    max_zoom may be infinite, meaning every zoom the tile source provides.
    """

    model_config = {
        'extra': 'ignore',  # tolerate unknown keys in stored regions
        'frozen': True,
    }

    name: str = ''
    style_url: str

    # Corners in the persisted order
    north: float
    east: float
    south: float
    west: float

    min_zoom: float = 0.0
    max_zoom: float = math.inf
    # Device pixel ratio, usually 1.0 or 2.0
    pixel_ratio: float = 1.0

    @field_validator('min_zoom', 'pixel_ratio')
    @classmethod
    def validate_finite_non_negative(cls, v: float) -> float:
        if not math.isfinite(v) or v < 0:
            msg = 'Value must be finite and >= 0'
            raise ValueError(msg)
        return v

    @model_validator(mode='after')
    def validate_region(self) -> 'OfflineRegionDefinition':
        if math.isnan(self.max_zoom) or self.max_zoom < self.min_zoom:
            msg = f'max_zoom ({self.max_zoom}) must be >= min_zoom ({self.min_zoom})'
            raise ValueError(msg)
        try:
            check_corners(self.north, self.east, self.south, self.west)
        except InvalidBoundsError as e:
            raise ValueError(str(e)) from e
        return self

    @classmethod
    def from_bounds(
        cls,
        style_url: str,
        bounds: LatLngBounds,
        min_zoom: float = 0.0,
        max_zoom: float = math.inf,
        pixel_ratio: float = 1.0,
        name: str = '',
    ) -> 'OfflineRegionDefinition':
        return cls(
            name=name,
            style_url=style_url,
            north=bounds.north,
            east=bounds.east,
            south=bounds.south,
            west=bounds.west,
            min_zoom=min_zoom,
            max_zoom=max_zoom,
            pixel_ratio=pixel_ratio,
        )

    @property
    def bounds(self) -> LatLngBounds:
        return LatLngBounds.from_corners(self.north, self.east, self.south, self.west)

    def zoom_levels(self, max_zoom_cap: int = DEFAULT_TILE_COUNT_MAX_ZOOM) -> range:
        """Integer zooms floor(min_zoom)..min(max_zoom, max_zoom_cap)."""
        lo = math.floor(self.min_zoom)
        if math.isinf(self.max_zoom):
            hi = max_zoom_cap
        else:
            hi = min(math.floor(self.max_zoom), max_zoom_cap)
        return range(lo, hi + 1)

    def tile_count(self, max_zoom_cap: int = DEFAULT_TILE_COUNT_MAX_ZOOM) -> int:
        """Number of tiles per tile source needed for the region."""
        zooms = self.zoom_levels(max_zoom_cap)
        if not zooms:
            logger.warning(
                'Region %r starts at zoom %s, above the zoom cap %d; no tiles counted',
                self.name,
                self.min_zoom,
                max_zoom_cap,
            )
            return 0
        return count_tiles(self.bounds, zooms[0], zooms[-1])
