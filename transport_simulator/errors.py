"""
Exception types raised by the transport simulator.
"""


class SimulatorError(Exception):
    """Base class for every recoverable simulator error."""


class DuplicateIdError(SimulatorError):
    """A vehicle with the same id is already registered."""

    def __init__(self, vehicle_id: str):
        self.vehicle_id = vehicle_id
        super().__init__(f"The ID '{vehicle_id}' is already in use. Please choose another ID.")


class VehicleNotFoundError(SimulatorError):
    """No registered vehicle carries the requested id."""

    def __init__(self, vehicle_id: str):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle '{vehicle_id}' not found.")


class IncompatibleVehicleError(SimulatorError):
    """The vehicle lacks the capability the mission kind requires."""

    def __init__(self, vehicle_id: str, mission_kind: str, required: str):
        self.vehicle_id = vehicle_id
        self.mission_kind = mission_kind
        self.required = required
        super().__init__(
            f"Vehicle '{vehicle_id}' is not compatible with a {mission_kind} mission "
            f"(requires {required})."
        )


class CapacityExceededError(SimulatorError):
    """The cargo is heavier than the vehicle can carry."""

    def __init__(self, vehicle_id: str, cargo_weight: float, capacity: float):
        self.vehicle_id = vehicle_id
        self.cargo_weight = cargo_weight
        self.capacity = capacity
        super().__init__(
            f"Cargo of {cargo_weight} exceeds the capacity of vehicle '{vehicle_id}' ({capacity})."
        )


class InvalidSelectionError(SimulatorError):
    """A menu option or list index is out of range."""


class IllegalTransitionError(SimulatorError, ValueError):
    """A state machine was asked for a transition its graph does not allow."""


class InvalidCargoError(SimulatorError, ValueError):
    """The cargo weight is negative or not a finite number."""

    def __init__(self, cargo_weight: float):
        self.cargo_weight = cargo_weight
        super().__init__(f"Cargo weight must be a non-negative number, got {cargo_weight}.")
