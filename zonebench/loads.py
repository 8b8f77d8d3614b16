"""Controllable loads that can be added to an assembled test building."""

import logging
import math

from zonebench.exceptions import CollaboratorError, NegativePower
from zonebench.model import ElectricHeater, Luminaire, SimpleModel, Zone
from zonebench.state import SimulationStateHeader, StateVariable

logger = logging.getLogger(__name__)


def _check_power(load: str, power: float) -> None:
    if not math.isfinite(power) or power < 0:
        raise NegativePower(load, power)


def _target_zone(model: SimpleModel) -> Zone:
    if not model.zones:
        msg = f"Model {model.name} has no zone to attach loads to"
        raise CollaboratorError(msg)
    return model.zones[0]


def _check_unregistered(header: SimulationStateHeader, name: str) -> None:
    # checked before the model entity is added
    if name in header:
        msg = f"State variable {name} is already registered"
        raise CollaboratorError(msg)


def add_heater(
    model: SimpleModel, header: SimulationStateHeader, power: float
) -> StateVariable:
    """Add an electric heater to the zone of a single-zone building.

    Every call adds a new heater with its own state variable; nothing is
    merged with heaters added before.  On failure neither the model nor the
    registry is changed.

    Args:
        model (SimpleModel): The assembled building.
        header (SimulationStateHeader): The state registry of the building.
        power (float): The initial heating power [W].

    Returns:
        variable (StateVariable): The handle to the heater's power.
    """
    _check_power("heater", power)
    zone = _target_zone(model)
    name = f"Heater {len(model.hvacs)}"
    state_name = f"{name} power"
    _check_unregistered(header, state_name)
    model.add_hvac(ElectricHeater(name=name, zone=zone.name, power_state=state_name))
    variable = header.register(
        name=state_name,
        kind="HeatingCoolingPowerConsumption",
        initial_value=power,
        zone=zone.name,
    )
    logger.debug(f"Added {name} of {power} W to {zone.name}")
    return variable


def add_luminaire(
    model: SimpleModel, header: SimulationStateHeader, power: float
) -> StateVariable:
    """Add a luminaire to the zone of a single-zone building.

    Args:
        model (SimpleModel): The assembled building.
        header (SimulationStateHeader): The state registry of the building.
        power (float): The lighting power [W].

    Returns:
        variable (StateVariable): The handle to the luminaire's power.
    """
    _check_power("luminaire", power)
    zone = _target_zone(model)
    name = f"Luminaire {len(model.luminaires)}"
    state_name = f"{name} power"
    _check_unregistered(header, state_name)
    model.add_luminaire(
        Luminaire(name=name, zone=zone.name, max_power=power, power_state=state_name)
    )
    variable = header.register(
        name=state_name,
        kind="LuminairePowerConsumption",
        initial_value=power,
        zone=zone.name,
    )
    logger.debug(f"Added {name} of {power} W to {zone.name}")
    return variable
