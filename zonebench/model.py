"""In-memory simulation model for single-zone test buildings.

The model is a container of named entities (constructions, zones, surfaces,
fenestrations and loads) that the simulation engine consumes.  It checks
names and references as entities are added, but does not simulate anything.
"""

from collections.abc import Sequence
from logging import getLogger
from typing import Literal

from pydantic import BaseModel, Field, computed_field

from zonebench.exceptions import CollaboratorError

logger = getLogger(__name__)

Vertex = tuple[float, float, float]
FenestrationPositions = Literal["FixedClosed", "FixedOpen", "Binary", "Continuous"]


class Material(BaseModel, frozen=True):
    """A layer of a construction, with its own substance properties."""

    name: str
    thickness: float = Field(..., title="Thickness [m]", gt=0)
    conductivity: float = Field(..., title="Conductivity [W/mK]", gt=0)
    density: float = Field(..., title="Density [kg/m3]", gt=0)
    specific_heat: float = Field(..., title="Specific heat [J/kgK]", gt=0)
    thermal_absorptance: float = Field(..., title="Emissivity", ge=0, le=1)
    solar_absorptance: float = Field(..., title="Solar absorptance", ge=0, le=1)
    solar_transmittance: float = Field(
        default=0.0, title="Solar transmittance", ge=0, le=1
    )

    @property
    def r(self) -> float:
        """Return the R of the material."""
        return self.thickness / self.conductivity


class Construction(BaseModel, frozen=True):
    """An ordered stack of materials; layer 0 faces the outside."""

    name: str
    materials: tuple[Material, ...] = Field(..., min_length=1)

    @property
    def r_value(self) -> float:
        """Return the R-value of the construction.

        Computed using the formula: R = sum(thickness_i / conductivity_i)

        Returns:
            r (float): The R-value of the construction (units: m^2.K/W).
        """
        return sum(material.r for material in self.materials)

    @property
    def u_value(self) -> float:
        """Return the U-value of the construction (units: W/m^2.K)."""
        return 1 / self.r_value

    @property
    def total_thickness(self) -> float:
        """Return the thickness of the whole stack [m]."""
        return sum(material.thickness for material in self.materials)


class Infiltration(BaseModel, frozen=True):
    """Outdoor air flow into a zone, driven through a state variable."""

    kind: Literal["Constant"] = "Constant"
    flow_rate: float = Field(..., title="Infiltration rate [m3/s]", ge=0)
    state_variable: str = Field(..., title="Name of the registered flow variable")


class Zone(BaseModel):
    """A single thermally-lumped air volume."""

    name: str
    volume: float = Field(..., title="Volume [m3]", gt=0)
    infiltration: Infiltration | None = None


class Surface(BaseModel, frozen=True):
    """An opaque exterior surface (wall)."""

    name: str
    zone: str = Field(..., title="Zone behind the surface")
    construction: str
    area: float = Field(..., title="Net opaque area [m2]", ge=0)
    orientation: float = Field(
        ..., title="Orientation [deg]", description="0 faces south, clockwise."
    )
    vertices: tuple[Vertex, ...] = Field(default=(), title="Outer loop")
    holes: tuple[tuple[Vertex, ...], ...] = Field(default=(), title="Cut-out loops")


class Fenestration(BaseModel, frozen=True):
    """A window inset into a surface."""

    name: str
    surface: str = Field(..., title="Host surface")
    construction: str
    area: float = Field(..., title="Area [m2]", gt=0)
    fenestration_type: Literal["Window", "Door"] = "Window"
    positions: FenestrationPositions = Field(
        default="Binary",
        title="Positions the fenestration can take",
        description="Binary windows are either open or closed.",
    )
    vertices: tuple[Vertex, ...] = Field(default=(), title="Outer loop")

    @property
    def operable(self) -> bool:
        """Whether the fenestration can be opened and closed during a run."""
        return self.positions in ("Binary", "Continuous")


class ElectricHeater(BaseModel, frozen=True):
    """An ideal electric heater delivering its power to a zone."""

    name: str
    zone: str
    power_state: str = Field(..., title="Name of the registered power variable")


class Luminaire(BaseModel, frozen=True):
    """A luminaire releasing its power into a zone."""

    name: str
    zone: str
    max_power: float = Field(..., title="Maximum power [W]", ge=0)
    power_state: str = Field(..., title="Name of the registered power variable")


class SimpleModel(BaseModel):
    """Container for all the entities of a building model."""

    name: str = "The SimpleModel"
    constructions: list[Construction] = Field(default_factory=list)
    zones: list[Zone] = Field(default_factory=list)
    surfaces: list[Surface] = Field(default_factory=list)
    fenestrations: list[Fenestration] = Field(default_factory=list)
    hvacs: list[ElectricHeater] = Field(default_factory=list)
    luminaires: list[Luminaire] = Field(default_factory=list)

    @computed_field
    @property
    def materials(self) -> list[Material]:
        """Every material used by the model's constructions."""
        return [m for c in self.constructions for m in c.materials]

    @staticmethod
    def _get(items: Sequence, name: str, kind: str):
        for item in items:
            if item.name == name:
                return item
        msg = f"{kind} {name} not found in model"
        raise CollaboratorError(msg)

    @staticmethod
    def _check_unique(items: Sequence, name: str, kind: str) -> None:
        if any(item.name == name for item in items):
            msg = f"{kind} {name} already exists in model"
            raise CollaboratorError(msg)

    def get_zone(self, name: str) -> Zone:
        """Return the zone with the given name."""
        return self._get(self.zones, name, "Zone")

    def get_construction(self, name: str) -> Construction:
        """Return the construction with the given name."""
        return self._get(self.constructions, name, "Construction")

    def get_surface(self, name: str) -> Surface:
        """Return the surface with the given name."""
        return self._get(self.surfaces, name, "Surface")

    def add_construction(self, construction: Construction) -> Construction:
        """Add a construction (and, implicitly, its materials) to the model."""
        self._check_unique(self.constructions, construction.name, "Construction")
        self.constructions.append(construction)
        logger.debug(
            f"Added construction {construction.name} with {len(construction.materials)} layers"
        )
        return construction

    def add_zone(self, zone: Zone) -> Zone:
        """Add a zone to the model."""
        self._check_unique(self.zones, zone.name, "Zone")
        self.zones.append(zone)
        logger.debug(f"Added zone {zone.name} of {zone.volume} m3")
        return zone

    def add_surface(self, surface: Surface) -> Surface:
        """Add a surface to the model.

        Both the zone and the construction it references must already exist.
        """
        self._check_unique(self.surfaces, surface.name, "Surface")
        self.get_zone(surface.zone)
        self.get_construction(surface.construction)
        self.surfaces.append(surface)
        logger.debug(f"Added surface {surface.name} of {surface.area} m2")
        return surface

    def add_fenestration(self, fenestration: Fenestration) -> Fenestration:
        """Add a fenestration to the model, on an existing surface."""
        self._check_unique(self.fenestrations, fenestration.name, "Fenestration")
        self.get_surface(fenestration.surface)
        self.get_construction(fenestration.construction)
        self.fenestrations.append(fenestration)
        logger.debug(f"Added fenestration {fenestration.name} of {fenestration.area} m2")
        return fenestration

    def add_hvac(self, hvac: ElectricHeater) -> ElectricHeater:
        """Add a heater to the model, serving an existing zone."""
        self._check_unique(self.hvacs, hvac.name, "HVAC")
        self.get_zone(hvac.zone)
        self.hvacs.append(hvac)
        return hvac

    def add_luminaire(self, luminaire: Luminaire) -> Luminaire:
        """Add a luminaire to the model, lighting an existing zone."""
        self._check_unique(self.luminaires, luminaire.name, "Luminaire")
        self.get_zone(luminaire.zone)
        self.luminaires.append(luminaire)
        return luminaire
