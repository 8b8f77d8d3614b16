"""Tests for the material catalog."""

import math

import pytest
from pydantic import TypeAdapter

from zonebench.exceptions import InvalidThickness
from zonebench.materials import (
    ALL_MATERIAL_KINDS,
    MATERIAL_PROPERTIES,
    Air,
    Concrete,
    Glass,
    MaterialSelector,
    Polyurethane,
    resolve_layer,
)


def test_concrete_resolves_to_fixed_properties() -> None:
    """Concrete should carry the fixed concrete substance properties."""
    layer = resolve_layer(Concrete(thickness=0.2))
    assert layer.kind == "Concrete"
    assert layer.thickness == pytest.approx(0.2)
    assert layer.conductivity == pytest.approx(0.816)
    assert layer.density == pytest.approx(1700)
    assert layer.specific_heat == pytest.approx(800)
    assert layer.solar_transmittance == 0


def test_polyurethane_resolves_to_fixed_properties() -> None:
    """Polyurethane should carry the fixed insulation properties."""
    layer = resolve_layer(Polyurethane(thickness=0.05))
    assert layer.conductivity == pytest.approx(0.0252)
    assert layer.density == pytest.approx(17.5)
    assert layer.specific_heat == pytest.approx(2400)
    assert layer.r == pytest.approx(0.05 / 0.0252)


def test_glass_keeps_its_solar_transmittance() -> None:
    """Glass is the only kind that lets solar radiation through."""
    assert resolve_layer(Glass(thickness=0.006)).solar_transmittance == pytest.approx(
        0.8
    )
    layer = resolve_layer(Glass(thickness=0.006, solar_transmittance=0.6))
    assert layer.solar_transmittance == pytest.approx(0.6)
    assert resolve_layer(Air(thickness=0.02)).solar_transmittance == 0


@pytest.mark.parametrize("kind", ALL_MATERIAL_KINDS)
def test_only_thickness_varies_per_kind(kind) -> None:
    """Resolving twice with different thickness changes nothing but the thickness."""
    selector_type = {
        "Air": Air,
        "Concrete": Concrete,
        "Glass": Glass,
        "Polyurethane": Polyurethane,
    }[kind]
    thin = resolve_layer(selector_type(thickness=0.01))
    thick = resolve_layer(selector_type(thickness=0.3))
    assert thin == resolve_layer(selector_type(thickness=0.01))
    assert thin.model_dump(exclude={"thickness"}) == thick.model_dump(
        exclude={"thickness"}
    )
    assert thin.conductivity == MATERIAL_PROPERTIES[kind].conductivity


@pytest.mark.parametrize(
    "selector",
    [
        Concrete(thickness=0),
        Concrete(thickness=-0.1),
        Polyurethane(thickness=-1),
        Air(thickness=0.0),
        Glass(thickness=-0.004),
        Concrete(thickness=math.nan),
    ],
)
def test_non_positive_thickness_is_rejected(selector) -> None:
    """Layers must have a positive, finite thickness."""
    with pytest.raises(InvalidThickness, match="positive thickness") as exc_info:
        resolve_layer(selector)
    assert exc_info.value.kind == selector.kind


def test_selectors_parse_from_plain_dicts() -> None:
    """The selector union should be discriminated on its kind."""
    adapter = TypeAdapter(MaterialSelector)
    selector = adapter.validate_python({"kind": "Polyurethane", "thickness": 0.1})
    assert isinstance(selector, Polyurethane)
    assert selector.thickness == pytest.approx(0.1)


def test_selectors_are_immutable() -> None:
    """Selectors cannot be changed once built."""
    selector = Concrete(thickness=0.2)
    with pytest.raises(ValueError):
        selector.thickness = 0.3  # pyright: ignore [reportAttributeAccessIssue]
