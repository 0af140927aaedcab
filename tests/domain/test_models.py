"""Tests for domain.models module."""

import logging
import math

import pytest
from pydantic import ValidationError

from domain.models import OfflineRegionDefinition
from geo.bounds import LatLngBounds


def create_region(**overrides):
    """Create OfflineRegionDefinition with default values and optional overrides."""
    defaults = {
        'name': 'fiji',
        'style_url': 'mapbox://styles/mapbox/streets-v11',
        'north': -12.0,
        'east': -178.0,
        'south': -21.0,
        'west': 176.0,
        'min_zoom': 0,
        'max_zoom': 10,
        'pixel_ratio': 2.0,
    }
    defaults.update(overrides)
    return OfflineRegionDefinition(**defaults)


class TestOfflineRegionValidators:
    """Tests for OfflineRegionDefinition validators."""

    def test_valid_region(self):
        region = create_region()
        assert region.min_zoom == 0.0
        assert region.max_zoom == 10.0

    def test_unbounded_max_zoom(self):
        region = create_region(max_zoom=math.inf)
        assert math.isinf(region.max_zoom)

    def test_default_max_zoom_is_unbounded(self):
        region = OfflineRegionDefinition(
            style_url='style', north=1, east=1, south=0, west=0
        )
        assert math.isinf(region.max_zoom)

    def test_negative_min_zoom_rejected(self):
        with pytest.raises(ValidationError):
            create_region(min_zoom=-1)

    def test_max_zoom_below_min_zoom_rejected(self):
        with pytest.raises(ValidationError):
            create_region(min_zoom=5, max_zoom=4)

    def test_negative_pixel_ratio_rejected(self):
        with pytest.raises(ValidationError):
            create_region(pixel_ratio=-1.0)

    def test_infinite_min_zoom_rejected(self):
        with pytest.raises(ValidationError):
            create_region(min_zoom=math.inf, max_zoom=math.inf)

    def test_infinite_pixel_ratio_rejected(self):
        with pytest.raises(ValidationError):
            create_region(pixel_ratio=math.inf)

    def test_north_below_south_rejected(self):
        with pytest.raises(ValidationError):
            create_region(north=-30.0)

    def test_latitude_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            create_region(north=95.0)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            create_region(min_zoom=-1)

    def test_extra_fields_ignored(self):
        region = create_region(legacy_field='x')
        assert not hasattr(region, 'legacy_field')

    def test_frozen(self):
        region = create_region()
        with pytest.raises(ValidationError):
            region.min_zoom = 3


class TestOfflineRegionBounds:
    """Tests for bounds derived from the region."""

    def test_bounds_cross_antimeridian(self):
        bounds = create_region().bounds
        assert bounds == LatLngBounds.from_corners(-12.0, -178.0, -21.0, 176.0)
        assert bounds.longitude_span == 6.0

    def test_bounds_wrap_longitudes(self):
        bounds = create_region(east=182.0).bounds
        assert bounds.east == -178.0

    def test_from_bounds(self):
        bounds = LatLngBounds.from_corners(10, -170, -10, 170)
        region = OfflineRegionDefinition.from_bounds(
            'style', bounds, min_zoom=1, max_zoom=3, name='seam'
        )
        assert region.bounds == bounds
        assert region.name == 'seam'
        assert region.pixel_ratio == 1.0


class TestOfflineRegionTiles:
    """Tests for zoom levels and tile counts."""

    def test_zoom_levels(self):
        assert list(create_region(min_zoom=2, max_zoom=4).zoom_levels()) == [2, 3, 4]

    def test_fractional_zooms_floor(self):
        assert list(create_region(min_zoom=1.5, max_zoom=3.7).zoom_levels()) == [1, 2, 3]

    def test_unbounded_zoom_levels_capped(self):
        region = create_region(max_zoom=math.inf)
        assert list(region.zoom_levels(max_zoom_cap=3)) == [0, 1, 2, 3]

    def test_world_tile_count(self):
        region = OfflineRegionDefinition.from_bounds(
            'style', LatLngBounds.world(), min_zoom=0, max_zoom=1
        )
        assert region.tile_count() == 5

    def test_finite_max_zoom_above_cap_is_capped(self):
        region = create_region(min_zoom=0, max_zoom=20)
        assert region.zoom_levels(max_zoom_cap=16)[-1] == 16

    def test_finite_max_zoom_cap_limits_tile_count(self):
        region = OfflineRegionDefinition.from_bounds(
            'style', LatLngBounds.world(), min_zoom=0, max_zoom=20
        )
        assert region.tile_count(max_zoom_cap=1) == 5

    def test_min_zoom_above_cap_counts_no_tiles(self, caplog):
        region = create_region(min_zoom=5, max_zoom=math.inf)
        with caplog.at_level(logging.WARNING, logger='domain.models'):
            assert region.tile_count(max_zoom_cap=3) == 0
        assert 'above the zoom cap' in caplog.text

    def test_finite_min_zoom_above_cap_counts_no_tiles(self):
        region = create_region(min_zoom=18, max_zoom=20)
        assert list(region.zoom_levels(max_zoom_cap=16)) == []
        assert region.tile_count(max_zoom_cap=16) == 0
