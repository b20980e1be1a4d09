"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_music_theory.catalog import CatalogLoader


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for project catalogs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def catalog_loader(temp_dir: Path) -> CatalogLoader:
    """Loader over the built-in library with an empty project catalog."""
    return CatalogLoader(project_path=temp_dir)
