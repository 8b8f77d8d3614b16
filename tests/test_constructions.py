"""Tests for stacking layers into constructions."""

import pytest

from zonebench.constructions import build_construction
from zonebench.exceptions import EmptyConstruction
from zonebench.materials import Air, Concrete, Polyurethane, resolve_layer


def test_layer_order_is_preserved() -> None:
    """Layer 0 should be the outermost layer given."""
    layers = [
        resolve_layer(Concrete(thickness=0.1)),
        resolve_layer(Polyurethane(thickness=0.05)),
        resolve_layer(Air(thickness=0.02)),
        resolve_layer(Concrete(thickness=0.15)),
    ]
    construction = build_construction(layers, emissivity=0.84, solar_absorptance=0.7)
    assert [m.name for m in construction.materials] == [
        "Material 0",
        "Material 1",
        "Material 2",
        "Material 3",
    ]
    assert [m.thickness for m in construction.materials] == [0.1, 0.05, 0.02, 0.15]
    assert construction.materials[1].conductivity == pytest.approx(0.0252)
    assert construction.total_thickness == pytest.approx(0.32)


def test_optical_options_apply_to_every_layer() -> None:
    """Emissivity and solar absorptance are building-wide, not per material."""
    layers = [
        resolve_layer(Concrete(thickness=0.1)),
        resolve_layer(Polyurethane(thickness=0.05)),
    ]
    construction = build_construction(layers, emissivity=0.5, solar_absorptance=0.3)
    for material in construction.materials:
        assert material.thermal_absorptance == pytest.approx(0.5)
        assert material.solar_absorptance == pytest.approx(0.3)


def test_r_value_sums_layer_resistances() -> None:
    """The construction R-value is the sum of thickness over conductivity."""
    layers = [
        resolve_layer(Concrete(thickness=0.2)),
        resolve_layer(Polyurethane(thickness=0.1)),
    ]
    construction = build_construction(layers, emissivity=0.84, solar_absorptance=0.7)
    expected_r = 0.2 / 0.816 + 0.1 / 0.0252
    assert construction.r_value == pytest.approx(expected_r)
    assert construction.u_value == pytest.approx(1 / expected_r)


def test_empty_construction_is_rejected() -> None:
    """A construction needs at least one layer."""
    with pytest.raises(EmptyConstruction, match="at least one layer"):
        build_construction([], emissivity=0.84, solar_absorptance=0.7, name="bare")
