"""
Mission model and its one-way PENDING -> COMPLETED lifecycle.
"""

from enum import Enum, auto
import math
from typing import Any, Dict, Optional

from .capabilities import MissionKind
from .errors import InvalidCargoError
from .events import EventSink
from .state import Action, StateMachine
from .vehicles import Vehicle


class MissionState(Enum):
    """Lifecycle states of a mission.

    States:
        PENDING: Created and waiting to be simulated
        COMPLETED: Delivered; never goes back to PENDING
    """

    PENDING = auto()
    COMPLETED = auto()


def _announce_arrival(mission: "Mission"):
    mission.events.emit(f"Mission completed at {mission.destination}")


# COMPLETED -> COMPLETED keeps a repeated complete() harmless
_allowed = {
    MissionState.PENDING: (Action(MissionState.COMPLETED, _announce_arrival),),
    MissionState.COMPLETED: (Action(MissionState.COMPLETED, _announce_arrival),),
}


class Mission:
    """A delivery from origin to destination carried out by one vehicle.

    The vehicle is borrowed from the environment's registry; several missions
    may share the same vehicle.

    Attributes:
        origin (str): Where the cargo is picked up.
        destination (str): Where the cargo is delivered.
        vehicle (Vehicle): Assigned vehicle (non-owning reference).
        kind (MissionKind | None): Land, air or water.
        cargo_weight (float): Weight carried, never above the vehicle capacity.
        id (int | None): Sequence number given by the environment.
    """

    state_machine: StateMachine

    def __init__(
        self,
        origin: str,
        destination: str,
        vehicle: Vehicle,
        kind: Optional[MissionKind] = None,
        cargo_weight: float = 0.0,
        id: Optional[int] = None,
        events: Optional[EventSink] = None,
    ):
        if not (math.isfinite(cargo_weight) and cargo_weight >= 0):
            raise InvalidCargoError(cargo_weight)
        self.origin = origin
        self.destination = destination
        self.vehicle = vehicle
        self.kind = kind
        self.cargo_weight = float(cargo_weight)
        self.id = id
        self._events = events
        self.state_machine = StateMachine(MissionState.PENDING, _allowed)

    @property
    def events(self) -> EventSink:
        return self._events if self._events is not None else self.vehicle.events

    @property
    def state(self) -> MissionState:
        return self.state_machine.current

    @property
    def completed(self) -> bool:
        return self.state is MissionState.COMPLETED

    @property
    def active(self) -> bool:
        return not self.completed

    def start(self):
        """Announce the departure and set the vehicle moving."""
        self.events.emit(f"Mission started from {self.origin} to {self.destination}")
        self.vehicle.move()

    def complete(self):
        """Announce the arrival and mark the mission completed.

        Calling it on an already completed mission re-announces the arrival
        and leaves the state at COMPLETED.
        """
        self.state_machine.request_transition(MissionState.COMPLETED, self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "origin": self.origin,
            "destination": self.destination,
            "vehicle_id": self.vehicle.id,
            "vehicle_kind": self.vehicle.kind_name,
            "mission_kind": self.kind.label if self.kind else None,
            "cargo_weight": self.cargo_weight,
            "completed": self.completed,
        }

    def __repr__(self) -> str:
        return (
            f"Mission(id={self.id}, {self.origin!r} -> {self.destination!r}, "
            f"vehicle={self.vehicle.id!r}, state={self.state.name})"
        )
