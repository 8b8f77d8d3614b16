"""Fixtures for the tests."""

import pytest

from zonebench.builder import BuildingOptions, get_single_zone_test_building
from zonebench.model import SimpleModel
from zonebench.state import SimulationStateHeader


@pytest.fixture(scope="function")
def default_building() -> tuple[SimpleModel, SimulationStateHeader]:
    """Create a fresh baseline building."""
    return get_single_zone_test_building(BuildingOptions.default())


@pytest.fixture(scope="function")
def windowed_options() -> BuildingOptions:
    """Options of a 4x3 m wall holding a 1x1 m window."""
    return BuildingOptions(
        surface_width=4,
        surface_height=3,
        window_width=1,
        window_height=1,
    )
