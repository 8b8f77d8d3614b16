"""Assemble single-zone test buildings for exercising the simulation engine."""

import logging

from pydantic import BaseModel, Field

from zonebench.constructions import build_construction
from zonebench.geometry import FacadeGeometry
from zonebench.loads import add_heater, add_luminaire
from zonebench.materials import Concrete, MaterialSelector, resolve_layer
from zonebench.model import Fenestration, Infiltration, SimpleModel, Surface, Zone
from zonebench.settings import building_settings
from zonebench.state import SimulationStateHeader

logger = logging.getLogger(__name__)


def _default_construction() -> tuple[Concrete, ...]:
    return (Concrete(thickness=building_settings.concrete_thickness),)


class BuildingOptions(BaseModel, frozen=True, allow_inf_nan=False):
    """Characteristics of the single-zone test building.

    A bare `BuildingOptions()` is the baseline reference building; its
    values come from `zonebench.settings.building_settings`.
    """

    construction: tuple[MaterialSelector, ...] = Field(
        default_factory=_default_construction,
        title="Construction layers",
        description="The layers of the construction, from the outside in.",
    )
    emissivity: float = Field(
        default_factory=lambda: building_settings.emissivity,
        title="Emissivity",
        description="The emissivity of the substances, assigned to all.",
        ge=0,
        le=1,
    )
    solar_absorptance: float = Field(
        default_factory=lambda: building_settings.solar_absorptance,
        title="Solar absorptance",
        description="The solar absorptance of the substances, assigned to all.",
        ge=0,
        le=1,
    )
    surface_width: float = Field(
        default_factory=lambda: building_settings.surface_width,
        title="Surface width [m]",
        gt=0,
    )
    surface_height: float = Field(
        default_factory=lambda: building_settings.surface_height,
        title="Surface height [m]",
        gt=0,
    )
    window_width: float = Field(default=0.0, title="Window width [m]", ge=0)
    window_height: float = Field(default=0.0, title="Window height [m]", ge=0)
    orientation: float = Field(
        default=0.0,
        title="Orientation [deg]",
        description="When 0, the exterior faces south; increases clockwise.",
    )
    infiltration_rate: float = Field(
        default_factory=lambda: building_settings.infiltration_rate,
        title="Infiltration rate [m3/s]",
        ge=0,
    )
    heating_power: float = Field(default=0.0, title="Heating power [W]", ge=0)
    lighting_power: float = Field(default=0.0, title="Lighting power [W]", ge=0)
    zone_volume: float = Field(
        default_factory=lambda: building_settings.zone_volume,
        title="Zone volume [m3]",
        gt=0,
    )

    @classmethod
    def default(cls) -> "BuildingOptions":
        """Return the options of the baseline reference building."""
        return cls()

    @property
    def geometry(self) -> FacadeGeometry:
        """The facade geometry described by these options."""
        return FacadeGeometry(
            surface_width=self.surface_width,
            surface_height=self.surface_height,
            window_width=self.window_width,
            window_height=self.window_height,
            orientation=self.orientation,
        )


def assemble(options: BuildingOptions) -> tuple[SimpleModel, SimulationStateHeader]:
    """Assemble a single-zone building with one exterior surface.

    The surface faces the direction given by `options.orientation` and
    optionally holds one window, centred, with the same construction as the
    wall.  The surface dimensions include the window; the window area is cut
    from the opaque area.

    Everything that can fail on bad options (materials, construction and
    geometry) is checked before the first entity is created.

    Args:
        options (BuildingOptions): The characteristics of the building.

    Returns:
        model (SimpleModel): The populated model.
        header (SimulationStateHeader): The state registry of the model.
    """
    layers = [resolve_layer(selector) for selector in options.construction]
    construction = build_construction(
        layers,
        emissivity=options.emissivity,
        solar_absorptance=options.solar_absorptance,
    )
    geometry = options.geometry
    opaque_area, window_area = geometry.areas()

    model = SimpleModel()
    header = SimulationStateHeader()

    construction = model.add_construction(construction)
    zone = model.add_zone(Zone(name="Some space", volume=options.zone_volume))
    surface = model.add_surface(
        Surface(
            name="Surface",
            zone=zone.name,
            construction=construction.name,
            area=opaque_area,
            orientation=options.orientation,
            vertices=geometry.surface_vertices,
            holes=(geometry.window_vertices,) if window_area > 0 else (),
        )
    )
    if window_area > 0:
        model.add_fenestration(
            Fenestration(
                name="window one",
                surface=surface.name,
                construction=construction.name,
                area=window_area,
                vertices=geometry.window_vertices,
            )
        )

    infiltration = header.register(
        name=f"{zone.name} infiltration",
        kind="SpaceInfiltrationVolume",
        initial_value=options.infiltration_rate,
        zone=zone.name,
    )
    zone.infiltration = Infiltration(
        flow_rate=options.infiltration_rate, state_variable=infiltration.name
    )

    if options.heating_power > 0:
        add_heater(model, header, options.heating_power)
    if options.lighting_power > 0:
        add_luminaire(model, header, options.lighting_power)

    logger.info(
        f"Assembled {model.name}: {opaque_area} m2 opaque, {window_area} m2 window, "
        f"{len(header)} state variables"
    )
    return model, header


def get_single_zone_test_building(
    options: BuildingOptions | None = None,
) -> tuple[SimpleModel, SimulationStateHeader]:
    """Build a complete single-zone test building.

    Args:
        options (BuildingOptions | None): The characteristics of the building.
            Defaults to the baseline reference building.

    Returns:
        model (SimpleModel): The populated model.
        header (SimulationStateHeader): The state registry of the model.
    """
    return assemble(options if options is not None else BuildingOptions.default())
