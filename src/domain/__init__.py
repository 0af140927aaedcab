"""Domain layer - region definitions and their storage."""
from domain.models import OfflineRegionDefinition
from domain.profiles import (
    delete_region,
    ensure_regions_dir,
    list_regions,
    load_region,
    save_region,
)

__all__ = [
    'OfflineRegionDefinition',
    'delete_region',
    'ensure_regions_dir',
    'list_regions',
    'load_region',
    'save_region',
]
