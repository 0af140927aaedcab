"""Pytest configuration and fixtures for latlng-bounds tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))


@pytest.fixture
def regions_dir(tmp_path, monkeypatch):
    """Point region storage at a temporary directory."""
    from shared.constants import REGIONS_DIR_ENV

    path = tmp_path / 'regions'
    monkeypatch.setenv(REGIONS_DIR_ENV, str(path))
    return path
