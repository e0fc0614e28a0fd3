"""Vehicle hierarchy: the abstract Vehicle and its four concrete variants.

Every variant composes a subset of the capability contracts from
`transport_simulator.capabilities` and describes its own movement, loading and
unloading. Descriptions are emitted to the vehicle's event sink instead of
being printed directly, so a test can record them and a console can show them.

Variants:
    Car: Rolling, FuelPowered
    Drone: Flying, ElectricPowered
    Amphibious: Rolling, Swimming
    Submarine: Swimming

Example:
    >>> from transport_simulator.events import RecordingSink
    >>> sink = RecordingSink()
    >>> car = Car("A1", events=sink)
    >>> car.move()
    >>> sink.messages
    ['Car moving along the road.']
"""

from abc import ABC, abstractmethod
from enum import Enum
import math
from typing import Any, Dict, Optional

from . import config
from .capabilities import (
    Capability,
    ElectricPowered,
    Flying,
    FuelPowered,
    Rolling,
    Swimming,
    capabilities_of,
)
from .errors import InvalidSelectionError
from .events import DEFAULT_SINK, EventSink


class Vehicle(ABC):
    """Abstract autonomous transport vehicle.

    Attributes:
        id (str): Identifier chosen by the caller. Uniqueness is checked by the
            environment at registration time, not here.
        capacity (float): Maximum load, always positive.
        location (str): Current location name.
        events (EventSink): Where movement and cargo descriptions go. A vehicle
            built without one uses the sink of the environment it joins, or
            the default console sink while it belongs to none.
    """

    id: str
    capacity: float
    location: str

    def __init__(
        self,
        id: str,
        capacity: float,
        location: str,
        events: Optional[EventSink] = None,
    ):
        if not (math.isfinite(capacity) and capacity > 0):
            raise ValueError(f"Vehicle capacity must be a positive number, got {capacity}")
        self.id = id
        self.capacity = float(capacity)
        self.location = location
        self._events = events

    @property
    def events(self) -> EventSink:
        return self._events if self._events is not None else DEFAULT_SINK

    def bind_events(self, events: EventSink):
        """Adopt an owner's sink unless the vehicle was built with its own."""
        if self._events is None:
            self._events = events

    @abstractmethod
    def move(self) -> None:
        """Describe how the vehicle travels."""

    @abstractmethod
    def load(self) -> None:
        """Describe how the vehicle takes on cargo."""

    @abstractmethod
    def unload(self) -> None:
        """Describe how the vehicle delivers cargo."""

    @property
    def kind(self) -> "VehicleKind":
        return VehicleKind.of(self)

    @property
    def kind_name(self) -> str:
        return type(self).__name__

    @property
    def capabilities(self) -> Capability:
        """Capability flags contributed by the contracts this variant implements."""
        return capabilities_of(type(self))

    def has(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def describe(self) -> Dict[str, Any]:
        """Plain-data view of the vehicle, used by detail listings."""
        return {
            "id": self.id,
            "kind": self.kind_name,
            "capacity": self.capacity,
            "location": self.location,
            "capabilities": [cap.label for cap in self.capabilities.members()],
        }

    def _emit(self, message: str):
        self.events.emit(message)

    def __repr__(self) -> str:
        return f"{self.kind_name}(id={self.id!r}, capacity={self.capacity}, location={self.location!r})"


class Car(Vehicle, Rolling, FuelPowered):
    """Road vehicle running on petrol."""

    def __init__(self, id: str, events: Optional[EventSink] = None):
        super().__init__(id, config.CAR_CAPACITY, config.CAR_LOCATION, events)

    def move(self) -> None:
        self._emit("Car moving along the road.")

    def load(self) -> None:
        self._emit("Car loading cargo.")

    def unload(self) -> None:
        self._emit("Car unloading at the delivery point.")

    def drive(self) -> None:
        self._emit("Car in manual driving mode.")

    def refuel(self) -> None:
        self._emit("Car refuelling with petrol.")


class Drone(Vehicle, Flying, ElectricPowered):
    """Battery-powered aerial vehicle for light parcels."""

    def __init__(self, id: str, events: Optional[EventSink] = None):
        super().__init__(id, config.DRONE_CAPACITY, config.DRONE_LOCATION, events)

    def move(self) -> None:
        self._emit("Drone travelling through the air.")

    def load(self) -> None:
        self._emit("Drone loading a light package.")

    def unload(self) -> None:
        self._emit("Drone unloading with its cable winch.")

    def fly(self) -> None:
        self._emit("Drone climbing to 100 metres.")

    def recharge_battery(self) -> None:
        self._emit("Lithium-ion battery recharging.")


class Amphibious(Vehicle, Rolling, Swimming):
    """Vehicle that switches between road and water."""

    def __init__(self, id: str, events: Optional[EventSink] = None):
        super().__init__(id, config.AMPHIBIOUS_CAPACITY, config.AMPHIBIOUS_LOCATION, events)

    def move(self) -> None:
        self._emit("Amphibious switching between land and water.")

    def load(self) -> None:
        self._emit("Amphibious loading sealed cargo.")

    def unload(self) -> None:
        self._emit("Amphibious unloading over its hydraulic ramp.")

    def drive(self) -> None:
        self._emit("Amphibious in 4x4 mode.")

    def navigate(self) -> None:
        self._emit("Amphibious sailing at 5 knots.")


class Submarine(Vehicle, Swimming):
    """Underwater heavy carrier."""

    def __init__(self, id: str, events: Optional[EventSink] = None):
        super().__init__(id, config.SUBMARINE_CAPACITY, config.SUBMARINE_LOCATION, events)

    def move(self) -> None:
        self._emit("Submarine diving to 200 metres.")

    def load(self) -> None:
        self._emit("Submarine loading underwater equipment.")

    def unload(self) -> None:
        self._emit("Submarine releasing cargo with its crane.")

    def navigate(self) -> None:
        self._emit("Submarine navigating by sonar.")


class VehicleKind(Enum):
    """Closed set of vehicle variants. Values are the menu option numbers."""

    CAR = 1
    DRONE = 2
    AMPHIBIOUS = 3
    SUBMARINE = 4

    @property
    def cls(self) -> type:
        return _CLASSES[self]

    @property
    def label(self) -> str:
        return self.cls.__name__

    def create(self, vehicle_id: str, events: Optional[EventSink] = None) -> Vehicle:
        """Build a vehicle of this kind with its default capacity and location."""
        return self.cls(vehicle_id, events=events)

    @classmethod
    def from_option(cls, option: int) -> "VehicleKind":
        """Map a 1-based menu option to a vehicle kind.

        Raises:
            InvalidSelectionError: If the option is not between 1 and 4.
        """
        try:
            return cls(option)
        except ValueError:
            raise InvalidSelectionError(
                f"Invalid vehicle type option: {option}. No vehicle was registered."
            ) from None

    @classmethod
    def of(cls, vehicle: Vehicle) -> "VehicleKind":
        for kind, klass in _CLASSES.items():
            if isinstance(vehicle, klass):
                return kind
        raise TypeError(f"Unknown vehicle variant: {type(vehicle).__name__}")


_CLASSES = {
    VehicleKind.CAR: Car,
    VehicleKind.DRONE: Drone,
    VehicleKind.AMPHIBIOUS: Amphibious,
    VehicleKind.SUBMARINE: Submarine,
}
