"""Simulation state registry shared between the model builder and the engine.

Every quantity that the simulation engine needs to read or drive during a
run (infiltration flows, heater and luminaire powers) is registered here
once and addressed afterwards through the returned `StateVariable`.
"""

from collections.abc import Iterator
from typing import Literal

import numpy as np
from pydantic import BaseModel, Field

from zonebench.exceptions import CollaboratorError

StateElementKind = Literal[
    "SpaceInfiltrationVolume",
    "HeatingCoolingPowerConsumption",
    "LuminairePowerConsumption",
]


class StateVariable(BaseModel, frozen=True):
    """A handle to a registered slot of the simulation state."""

    index: int = Field(..., title="Position of the variable in the state vector", ge=0)
    name: str = Field(..., title="Unique name of the variable")
    kind: StateElementKind = Field(..., title="What the variable represents")
    zone: str | None = Field(
        default=None, title="Name of the zone the variable is associated with"
    )
    initial_value: float = Field(..., title="Value at registration time")


class SimulationStateHeader:
    """Mapping from state variable names to their slot and current value.

    Registration is additive: variables are never replaced or removed, and
    their indices are stable for the lifetime of the header.
    """

    def __init__(self):
        """Create an empty registry."""
        self._elements: list[StateVariable] = []
        self._values: list[float] = []
        self._by_name: dict[str, StateVariable] = {}

    def register(
        self,
        name: str,
        kind: StateElementKind,
        initial_value: float,
        zone: str | None = None,
    ) -> StateVariable:
        """Register a new state variable.

        Args:
            name (str): The unique name of the variable.
            kind (StateElementKind): What the variable represents.
            initial_value (float): The value the variable starts with.
            zone (str | None): The zone the variable is associated with.

        Returns:
            variable (StateVariable): The handle to the new variable.
        """
        if name in self._by_name:
            msg = f"State variable {name} is already registered"
            raise CollaboratorError(msg)
        variable = StateVariable(
            index=len(self._elements),
            name=name,
            kind=kind,
            zone=zone,
            initial_value=initial_value,
        )
        self._elements.append(variable)
        self._values.append(float(initial_value))
        self._by_name[name] = variable
        return variable

    def _resolve(self, variable: StateVariable | str) -> StateVariable:
        name = variable if isinstance(variable, str) else variable.name
        try:
            registered = self._by_name[name]
        except KeyError as e:
            msg = f"State variable {name} is not registered"
            raise CollaboratorError(msg) from e
        if not isinstance(variable, str) and registered != variable:
            msg = f"State variable {name} does not belong to this registry"
            raise CollaboratorError(msg)
        return registered

    def get_value(self, variable: StateVariable | str) -> float:
        """Return the current value of a variable."""
        return self._values[self._resolve(variable).index]

    def set_value(self, variable: StateVariable | str, value: float) -> None:
        """Overwrite the current value of a variable (engine side)."""
        self._values[self._resolve(variable).index] = float(value)

    def find(self, kind: StateElementKind) -> list[StateVariable]:
        """Return all the variables of a given kind, in registration order."""
        return [el for el in self._elements if el.kind == kind]

    def values(self) -> np.ndarray:
        """Return a snapshot of the state vector, ordered by index."""
        return np.array(self._values, dtype=float)

    @property
    def elements(self) -> tuple[StateVariable, ...]:
        """The registered variables, ordered by index."""
        return tuple(self._elements)

    def __getitem__(self, name: str) -> StateVariable:
        return self._resolve(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[StateVariable]:
        return iter(self._elements)
