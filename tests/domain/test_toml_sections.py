"""Tests for TOML sectioned region mapping layer."""

import math

import tomlkit

from domain.models import OfflineRegionDefinition
from domain.toml_sections import (
    SECTION_MAP,
    flat_to_sectioned,
    sectioned_to_flat,
)


def _base_region(**overrides):
    defaults = {
        'name': 'alps',
        'style_url': 'mapbox://styles/mapbox/outdoors-v12',
        'north': 48.0,
        'east': 16.0,
        'south': 44.0,
        'west': 5.0,
        'min_zoom': 4.0,
        'max_zoom': 12.0,
        'pixel_ratio': 2.0,
    }
    defaults.update(overrides)
    return OfflineRegionDefinition(**defaults)


class TestFlatToSectioned:
    """Tests for flat_to_sectioned()."""

    def test_creates_expected_sections(self):
        result = flat_to_sectioned(_base_region().model_dump())
        assert set(result) == {'common', 'style', 'bounds', 'zoom'}

    def test_bounds_section(self):
        result = flat_to_sectioned(_base_region().model_dump())
        assert result['bounds'] == {
            'north': 48.0,
            'east': 16.0,
            'south': 44.0,
            'west': 5.0,
        }

    def test_short_names(self):
        result = flat_to_sectioned(_base_region().model_dump())
        assert result['zoom'] == {'min': 4.0, 'max': 12.0}
        assert result['style']['url'] == 'mapbox://styles/mapbox/outdoors-v12'
        assert 'style_url' not in result['style']

    def test_common_section_has_no_sectioned_fields(self):
        result = flat_to_sectioned(_base_region().model_dump())
        for section_fields in SECTION_MAP.values():
            for flat_name in section_fields:
                assert flat_name not in result['common']
        assert result['common'] == {'name': 'alps'}

    def test_empty_sections_not_written(self):
        result = flat_to_sectioned({'north': 1.0, 'south': 0.0})
        assert result == {'bounds': {'north': 1.0, 'south': 0.0}}


class TestSectionedToFlat:
    """Tests for sectioned_to_flat()."""

    def test_round_trip(self):
        flat = _base_region().model_dump()
        assert sectioned_to_flat(flat_to_sectioned(flat)) == flat

    def test_flat_toml_passes_through(self):
        flat = {'style_url': 's', 'north': 1.0}
        assert sectioned_to_flat(flat) == flat

    def test_unknown_section_passes_through(self):
        data = {'extra': {'owner': 'ops'}, 'zoom': {'min': 1.0}}
        assert sectioned_to_flat(data) == {'owner': 'ops', 'min_zoom': 1.0}

    def test_through_tomlkit_with_unbounded_zoom(self):
        region = _base_region(max_zoom=math.inf)
        text = tomlkit.dumps(flat_to_sectioned(region.model_dump()))
        assert '[bounds]' in text
        restored = OfflineRegionDefinition.model_validate(
            sectioned_to_flat(tomlkit.parse(text).unwrap())
        )
        assert restored == region
