"""Layout of a stored region file.

An offline region is kept as one TOML file per region. The corners live in
``[bounds]`` in the same north, east, south, west order as the binary
record, the zoom range in ``[zoom]`` (``max = inf`` for an open range) and
the style in ``[style]``. Everything else, such as the display name, goes
to ``[common]``:

    [common]
    name = "Fiji"

    [style]
    url = "mapbox://styles/mapbox/streets-v11"
    pixel_ratio = 2.0

    [bounds]
    north = -12.0
    east = -178.0
    south = -21.0
    west = 176.0

    [zoom]
    min = 0.0
    max = 10.0

Region files written before sections existed are flat key/value tables and
are read as they are.
"""

from __future__ import annotations

COMMON_SECTION = 'common'

# {section: {model field: key inside the section}}
SECTION_MAP: dict[str, dict[str, str]] = {
    'style': {
        'style_url': 'url',
        'pixel_ratio': 'pixel_ratio',
    },
    'bounds': {
        'north': 'north',
        'east': 'east',
        'south': 'south',
        'west': 'west',
    },
    'zoom': {
        'min_zoom': 'min',
        'max_zoom': 'max',
    },
}

_FIELD_SECTION: dict[str, str] = {
    field: section for section, fields in SECTION_MAP.items() for field in fields
}


def flat_to_sectioned(flat: dict) -> dict:
    """Split OfflineRegionDefinition.model_dump() output into region sections."""
    sections: dict = {COMMON_SECTION: {}}
    for section in SECTION_MAP:
        sections[section] = {}

    for field, value in flat.items():
        section = _FIELD_SECTION.get(field, COMMON_SECTION)
        key = SECTION_MAP[section][field] if section in SECTION_MAP else field
        sections[section][key] = value

    return {name: body for name, body in sections.items() if body}


def _section_fields(section: str, body: dict) -> dict:
    keys = {key: field for field, key in SECTION_MAP.get(section, {}).items()}
    return {keys.get(key, key): value for key, value in body.items()}


def sectioned_to_flat(data: dict) -> dict:
    """Merge a region file's sections back into model fields."""
    flat: dict = {}
    for name, value in data.items():
        if isinstance(value, dict):
            flat.update(_section_fields(name, value))
        else:
            flat[name] = value
    return flat
