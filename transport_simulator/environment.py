"""
Simulation environment: vehicle and mission registries plus the simulation cycle.
"""

from dataclasses import dataclass
import math
from typing import Any, Dict, List, Optional, Union

from . import config
from .capabilities import MissionKind
from .errors import (
    CapacityExceededError,
    DuplicateIdError,
    IncompatibleVehicleError,
    InvalidCargoError,
    VehicleNotFoundError,
)
from .events import DEFAULT_SINK, EventSink
from .missions import Mission
from .obstacles import Obstacle, ObstacleGenerator
from .vehicles import Vehicle, VehicleKind


@dataclass
class MissionOutcome:
    """Record of one simulated mission."""

    mission: Mission
    obstacle: Optional[Obstacle]

    def __repr__(self) -> str:
        return f"MissionOutcome(mission={self.mission.id}, obstacle={self.obstacle})"


class Environment:
    """
    Owns the registered vehicles and missions of one simulation session.

    Both registries keep insertion order. Vehicle ids are unique; missions are
    never removed, only filtered by their completion flag.
    """

    def __init__(
        self,
        events: Optional[EventSink] = None,
        obstacles: Optional[ObstacleGenerator] = None,
    ):
        """
        Initialize an empty environment.

        Args:
            events: Sink receiving every narrative line of the simulation
            obstacles: Obstacle generator (seeded from config when omitted)
        """
        self.events = events if events is not None else DEFAULT_SINK
        self.obstacles = obstacles if obstacles is not None else ObstacleGenerator(config.OBSTACLE_SEED)
        self.vehicles: List[Vehicle] = []
        self.missions: List[Mission] = []
        self.history: List[MissionOutcome] = []

    # Vehicles

    def has_vehicle(self, vehicle_id: str) -> bool:
        return any(v.id == vehicle_id for v in self.vehicles)

    def add_vehicle(self, vehicle: Vehicle) -> Vehicle:
        """Register an already built vehicle.

        A vehicle built without a sink starts reporting to this environment's.
        """
        if self.has_vehicle(vehicle.id):
            raise DuplicateIdError(vehicle.id)
        vehicle.bind_events(self.events)
        self.vehicles.append(vehicle)
        return vehicle

    def register_vehicle(self, kind: Union[VehicleKind, int], vehicle_id: str) -> Vehicle:
        """
        Build a vehicle of the given kind and register it.

        Args:
            kind: Vehicle kind, or its 1-based menu option
            vehicle_id: Caller-chosen identifier

        Returns:
            The registered vehicle

        Raises:
            DuplicateIdError: If vehicle_id is already registered
            InvalidSelectionError: If kind is not a known option
        """
        if self.has_vehicle(vehicle_id):
            raise DuplicateIdError(vehicle_id)
        if not isinstance(kind, VehicleKind):
            kind = VehicleKind.from_option(kind)
        return self.add_vehicle(kind.create(vehicle_id, events=self.events))

    def find_vehicle(self, vehicle_id: str) -> Vehicle:
        for vehicle in self.vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        raise VehicleNotFoundError(vehicle_id)

    def vehicle_details(self, vehicle_id: str) -> Dict[str, Any]:
        return self.find_vehicle(vehicle_id).describe()

    # Missions

    def create_mission(
        self,
        origin: str,
        destination: str,
        kind: Union[MissionKind, int],
        vehicle_id: str,
        cargo_weight: float = 0.0,
    ) -> Mission:
        """
        Create a pending mission for a compatible registered vehicle.

        Args:
            origin: Pickup location
            destination: Delivery location
            kind: Mission kind, or its 1-based menu option
            vehicle_id: Id of the vehicle to assign
            cargo_weight: Weight to carry

        Returns:
            The new mission, appended to the registry

        Raises:
            VehicleNotFoundError: If no vehicle has this id
            InvalidSelectionError: If kind is not a known option
            IncompatibleVehicleError: If the vehicle lacks the required capability
            InvalidCargoError: If the cargo weight is negative or not a finite number
            CapacityExceededError: If the cargo is heavier than the vehicle capacity
        """
        vehicle = self.find_vehicle(vehicle_id)
        if not isinstance(kind, MissionKind):
            kind = MissionKind.from_option(kind)

        if not vehicle.has(kind.required):
            raise IncompatibleVehicleError(vehicle.id, kind.label.lower(), kind.required.label)
        if not (math.isfinite(cargo_weight) and cargo_weight >= 0):
            raise InvalidCargoError(cargo_weight)
        if cargo_weight > vehicle.capacity:
            raise CapacityExceededError(vehicle.id, cargo_weight, vehicle.capacity)

        mission = Mission(
            origin,
            destination,
            vehicle,
            kind=kind,
            cargo_weight=cargo_weight,
            id=len(self.missions) + 1,
            events=self.events,
        )
        self.missions.append(mission)
        return mission

    def active_missions(self) -> List[Mission]:
        return [m for m in self.missions if not m.completed]

    def completed_missions(self) -> List[Mission]:
        return [m for m in self.missions if m.completed]

    # Simulation

    def simulate_cycle(self, mission: Optional[Mission] = None) -> List[MissionOutcome]:
        """
        Run one mission, or every mission active at call time.

        Args:
            mission: Mission to run; None runs all active missions in order

        Returns:
            One outcome per mission simulated
        """
        if mission is not None:
            self.events.emit(config.MISSION_HEADER)
            outcomes = [self._run_mission(mission)]
            self.events.emit(config.MISSION_FOOTER)
        else:
            self.events.emit(config.CYCLE_HEADER)
            outcomes = [self._run_mission(m) for m in self.active_missions()]
            self.events.emit(config.CYCLE_FOOTER)

        self.history.extend(outcomes)
        return outcomes

    def simulate_obstacles(self, vehicle: Vehicle) -> Optional[Obstacle]:
        obstacle = self.obstacles.generate(vehicle)
        if obstacle is not None:
            self.events.emit(obstacle.domain.title)
            self.events.emit(f"- {obstacle.description}")
        return obstacle

    def _run_mission(self, mission: Mission) -> MissionOutcome:
        self.events.emit("Mission details:")
        self.events.emit(f"Origin: {mission.origin}, Destination: {mission.destination}")
        self.events.emit(f"Assigned vehicle: {mission.vehicle.kind_name}")
        self.events.emit(f"Load capacity: {mission.vehicle.capacity}")
        obstacle = self.simulate_obstacles(mission.vehicle)
        mission.start()
        mission.complete()
        return MissionOutcome(mission, obstacle)

    def __repr__(self) -> str:
        return f"Environment(vehicles={len(self.vehicles)}, missions={len(self.missions)})"
