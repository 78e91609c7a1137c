"""Shared fixtures for the slugintl unit tests."""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def resources_folder() -> Path:
    """Returns the path to the test resources folder."""
    return Path(__file__).parents[1] / "resources"


@pytest.fixture(scope="session")
def slug_options_path(resources_folder: Path) -> Path:
    """Returns the path to the sample slug options file (bounds 5..12)."""
    return resources_folder / "slug_options.yml"
