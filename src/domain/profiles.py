import logging
import os
from pathlib import Path

import tomlkit

from domain.models import OfflineRegionDefinition
from domain.toml_sections import flat_to_sectioned, sectioned_to_flat
from shared.constants import REGIONS_DIR_ENV, REGIONS_DIR_NAME, USER_CONFIG_DIR_NAME

logger = logging.getLogger(__name__)


def _regions_dir() -> Path:
    """
    Determine the regions directory.

    1) $LATLNG_BOUNDS_REGIONS_DIR when set.
    2) <project_root>/configs/regions if it exists (run-from-repo setups).
    3) ~/.latlng_bounds/regions otherwise.
    """
    env_dir = os.getenv(REGIONS_DIR_ENV)
    if env_dir:
        return Path(env_dir)

    project_root = Path(__file__).resolve().parent.parent.parent
    local_regions = project_root / 'configs' / REGIONS_DIR_NAME
    if local_regions.exists():
        return local_regions

    return Path.home() / USER_CONFIG_DIR_NAME / REGIONS_DIR_NAME


def ensure_regions_dir() -> Path:
    regions_dir = _regions_dir()
    regions_dir.mkdir(parents=True, exist_ok=True)
    return regions_dir


def list_regions() -> list[str]:
    """Stored region names, without extension."""
    folder = ensure_regions_dir()
    return sorted(p.stem for p in folder.glob('*.toml') if p.is_file())


def region_path(name: str) -> Path:
    return ensure_regions_dir() / f'{name}.toml'


def load_region(name_or_path: str) -> OfflineRegionDefinition:
    """
    Load and validate a stored region.

    Accepts a region name from the regions directory or a path to a TOML file.
    """
    p = Path(name_or_path)
    path = p if p.suffix.lower() == '.toml' and p.exists() else region_path(name_or_path)
    if not path.exists():
        msg = f'Region not found: {path}'
        raise FileNotFoundError(msg)

    data = tomlkit.parse(path.read_text(encoding='utf-8')).unwrap()
    flat = sectioned_to_flat(data)
    flat.setdefault('name', path.stem)
    region = OfflineRegionDefinition.model_validate(flat)
    logger.info('Loaded region %r from %s: %s', region.name, path, region.bounds)
    return region


def save_region(name: str, region: OfflineRegionDefinition) -> Path:
    """Write region as sectioned TOML (no atomic replace, no backup)."""
    path = region_path(name)
    data = flat_to_sectioned(region.model_dump())
    path.write_text(tomlkit.dumps(data), encoding='utf-8')
    logger.info('Saved region %r to %s', name, path)
    return path


def delete_region(name: str) -> None:
    path = region_path(name)
    if path.exists():
        path.unlink()
        logger.info('Deleted region %r', name)
