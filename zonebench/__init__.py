"""Minimal, parameterized single-zone buildings for testing simulation engines."""

from zonebench.builder import BuildingOptions, get_single_zone_test_building
from zonebench.loads import add_heater, add_luminaire
from zonebench.materials import Air, Concrete, Glass, Polyurethane
from zonebench.settings import BuildingSettings, building_settings

__all__ = [
    "Air",
    "BuildingOptions",
    "BuildingSettings",
    "Concrete",
    "Glass",
    "Polyurethane",
    "add_heater",
    "add_luminaire",
    "building_settings",
    "get_single_zone_test_building",
]
