"""
Transport Simulator
A console simulation of autonomous land, air and water vehicles running delivery missions.
"""

from .capabilities import (
    Capability,
    ElectricPowered,
    Flying,
    FuelPowered,
    MissionKind,
    Rolling,
    Swimming,
)
from .vehicles import Vehicle, VehicleKind, Car, Drone, Amphibious, Submarine
from .missions import Mission, MissionState
from .obstacles import Obstacle, ObstacleDomain, ObstacleGenerator
from .environment import Environment, MissionOutcome
from .errors import (
    SimulatorError,
    DuplicateIdError,
    VehicleNotFoundError,
    IncompatibleVehicleError,
    InvalidSelectionError,
    CapacityExceededError,
    InvalidCargoError,
    IllegalTransitionError,
)
from .events import EventSink, ConsoleSink, RecordingSink
from .commands import CommandResult, dispatch
from .analyzer import FleetAnalyzer

__version__ = "0.1.0"

__all__ = [
    "Capability",
    "Rolling",
    "Flying",
    "Swimming",
    "ElectricPowered",
    "FuelPowered",
    "MissionKind",
    "Vehicle",
    "VehicleKind",
    "Car",
    "Drone",
    "Amphibious",
    "Submarine",
    "Mission",
    "MissionState",
    "Obstacle",
    "ObstacleDomain",
    "ObstacleGenerator",
    "Environment",
    "MissionOutcome",
    "SimulatorError",
    "DuplicateIdError",
    "VehicleNotFoundError",
    "IncompatibleVehicleError",
    "InvalidSelectionError",
    "CapacityExceededError",
    "InvalidCargoError",
    "IllegalTransitionError",
    "EventSink",
    "ConsoleSink",
    "RecordingSink",
    "CommandResult",
    "dispatch",
    "FleetAnalyzer",
]
