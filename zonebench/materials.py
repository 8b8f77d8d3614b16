"""Test materials and the physical properties they resolve to."""

import math
from dataclasses import dataclass
from typing import Annotated, Literal, get_args

from pydantic import BaseModel, Field

from zonebench.exceptions import InvalidThickness

MaterialKind = Literal["Air", "Concrete", "Glass", "Polyurethane"]
ALL_MATERIAL_KINDS: tuple[MaterialKind, ...] = get_args(MaterialKind)

# Nominal optical properties; the construction builder replaces the
# emissivity and solar absorptance with the building-wide options.
_DEFAULT_EMISSIVITY = 0.9
_DEFAULT_SOLAR_ABSORPTANCE = 0.7


class Air(BaseModel, frozen=True):
    """An air cavity of a certain thickness."""

    kind: Literal["Air"] = "Air"
    thickness: float = Field(..., title="Thickness [m]")


class Concrete(BaseModel, frozen=True):
    """A concrete layer of a certain thickness."""

    kind: Literal["Concrete"] = "Concrete"
    thickness: float = Field(..., title="Thickness [m]")


class Glass(BaseModel, frozen=True):
    """A glass pane defined by its thickness and solar transmittance."""

    kind: Literal["Glass"] = "Glass"
    thickness: float = Field(..., title="Thickness [m]")
    solar_transmittance: float = Field(
        default=0.8, title="Solar transmittance", ge=0, le=1
    )


class Polyurethane(BaseModel, frozen=True):
    """A polyurethane insulation layer of a certain thickness."""

    kind: Literal["Polyurethane"] = "Polyurethane"
    thickness: float = Field(..., title="Thickness [m]")


MaterialSelector = Annotated[
    Air | Concrete | Glass | Polyurethane, Field(discriminator="kind")
]


@dataclass(frozen=True)
class MaterialProperties:
    """Fixed substance properties of a material kind."""

    conductivity: float
    density: float
    specific_heat: float


MATERIAL_PROPERTIES: dict[MaterialKind, MaterialProperties] = {
    "Air": MaterialProperties(conductivity=0.0257, density=1.204, specific_heat=1005),
    "Concrete": MaterialProperties(conductivity=0.816, density=1700, specific_heat=800),
    "Glass": MaterialProperties(conductivity=1.0, density=2500, specific_heat=840),
    "Polyurethane": MaterialProperties(
        conductivity=0.0252, density=17.5, specific_heat=2400
    ),
}

if set(MATERIAL_PROPERTIES) != set(ALL_MATERIAL_KINDS):
    msg = "Material kind definitions are out of sync with MATERIAL_PROPERTIES."
    raise ValueError(msg)


class ResolvedLayer(BaseModel, frozen=True):
    """Physical properties of a single construction layer."""

    kind: MaterialKind
    thickness: float = Field(..., title="Thickness [m]", gt=0)
    conductivity: float = Field(..., title="Conductivity [W/mK]", gt=0)
    density: float = Field(..., title="Density [kg/m3]", gt=0)
    specific_heat: float = Field(..., title="Specific heat [J/kgK]", gt=0)
    emissivity: float = Field(default=_DEFAULT_EMISSIVITY, ge=0, le=1)
    solar_absorptance: float = Field(default=_DEFAULT_SOLAR_ABSORPTANCE, ge=0, le=1)
    solar_transmittance: float = Field(default=0.0, ge=0, le=1)

    @property
    def r(self) -> float:
        """Return the R of the layer."""
        return self.thickness / self.conductivity


def resolve_layer(selector: Air | Concrete | Glass | Polyurethane) -> ResolvedLayer:
    """Resolve a material selector into the properties of a layer.

    Args:
        selector (MaterialSelector): The material kind and its thickness.

    Returns:
        layer (ResolvedLayer): The physical properties of the layer.
    """
    thickness = selector.thickness
    if not math.isfinite(thickness) or thickness <= 0:
        raise InvalidThickness(selector.kind, thickness)
    props = MATERIAL_PROPERTIES[selector.kind]
    return ResolvedLayer(
        kind=selector.kind,
        thickness=thickness,
        conductivity=props.conductivity,
        density=props.density,
        specific_heat=props.specific_heat,
        solar_transmittance=(
            selector.solar_transmittance if isinstance(selector, Glass) else 0.0
        ),
    )
