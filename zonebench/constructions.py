"""Stack resolved layers into model constructions."""

from collections.abc import Sequence

from zonebench.exceptions import EmptyConstruction
from zonebench.materials import ResolvedLayer
from zonebench.model import Construction, Material


def build_construction(
    layers: Sequence[ResolvedLayer],
    emissivity: float,
    solar_absorptance: float,
    name: str = "the construction",
) -> Construction:
    """Build a construction out of resolved layers.

    The emissivity and solar absorptance are building-wide options and
    replace whatever the layers carry, for every layer of the stack.

    Args:
        layers (Sequence[ResolvedLayer]): The layers, from the outside in.
        emissivity (float): The thermal absorptance assigned to all layers.
        solar_absorptance (float): The solar absorptance assigned to all layers.
        name (str): The name of the construction.

    Returns:
        construction (Construction): The construction, not yet added to a model.
    """
    if len(layers) == 0:
        raise EmptyConstruction(name)
    materials = tuple(
        Material(
            name=f"Material {i}",
            thickness=layer.thickness,
            conductivity=layer.conductivity,
            density=layer.density,
            specific_heat=layer.specific_heat,
            thermal_absorptance=emissivity,
            solar_absorptance=solar_absorptance,
            solar_transmittance=layer.solar_transmittance,
        )
        for i, layer in enumerate(layers)
    )
    return Construction(name=name, materials=materials)
