"""
Structured commands and the dispatch function shared by the console and tests.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .capabilities import MissionKind
from .environment import Environment
from .errors import InvalidSelectionError, SimulatorError
from .vehicles import VehicleKind


@dataclass(frozen=True)
class RegisterVehicle:
    option: int
    vehicle_id: str


@dataclass(frozen=True)
class ListVehicles:
    pass


@dataclass(frozen=True)
class CreateMission:
    origin: str
    destination: str
    option: int
    vehicle_id: str
    cargo_weight: float = 0.0


@dataclass(frozen=True)
class ListActiveMissions:
    pass


@dataclass(frozen=True)
class SimulateAll:
    pass


@dataclass(frozen=True)
class SimulateMission:
    """Simulate the active mission at a 1-based position in the active list."""

    index: int


@dataclass(frozen=True)
class ShowVehicle:
    vehicle_id: str


@dataclass(frozen=True)
class Exit:
    pass


@dataclass
class CommandResult:
    """Outcome of one dispatched command."""

    ok: bool
    message: str = ""
    payload: Any = None
    error: Optional[SimulatorError] = None
    done: bool = False

    @classmethod
    def failure(cls, error: SimulatorError) -> "CommandResult":
        return cls(ok=False, message=str(error), error=error)


def _register_vehicle(env: Environment, cmd: RegisterVehicle) -> CommandResult:
    vehicle = env.register_vehicle(cmd.option, cmd.vehicle_id)
    return CommandResult(True, f"{vehicle.kind_name} registered successfully.", vehicle)


def _list_vehicles(env: Environment, cmd: ListVehicles) -> CommandResult:
    return CommandResult(True, "Registered vehicles:", list(env.vehicles))


def _create_mission(env: Environment, cmd: CreateMission) -> CommandResult:
    mission = env.create_mission(
        cmd.origin, cmd.destination, cmd.option, cmd.vehicle_id, cmd.cargo_weight
    )
    return CommandResult(True, "Mission registered successfully.", mission)


def _list_active(env: Environment, cmd: ListActiveMissions) -> CommandResult:
    return CommandResult(True, "Active missions:", env.active_missions())


def _simulate_all(env: Environment, cmd: SimulateAll) -> CommandResult:
    outcomes = env.simulate_cycle()
    return CommandResult(True, f"Simulated {len(outcomes)} mission(s).", outcomes)


def _simulate_mission(env: Environment, cmd: SimulateMission) -> CommandResult:
    active = env.active_missions()
    if not active:
        raise InvalidSelectionError("No active missions to simulate.")
    if cmd.index < 1 or cmd.index > len(active):
        raise InvalidSelectionError("Invalid selection. Returning to the main menu.")
    outcomes = env.simulate_cycle(active[cmd.index - 1])
    return CommandResult(True, "Simulated 1 mission(s).", outcomes)


def _show_vehicle(env: Environment, cmd: ShowVehicle) -> CommandResult:
    return CommandResult(True, "Vehicle details:", env.vehicle_details(cmd.vehicle_id))


def _exit(env: Environment, cmd: Exit) -> CommandResult:
    return CommandResult(True, "Exiting...", done=True)


_HANDLERS: Dict[type, Callable[[Environment, Any], CommandResult]] = {
    RegisterVehicle: _register_vehicle,
    ListVehicles: _list_vehicles,
    CreateMission: _create_mission,
    ListActiveMissions: _list_active,
    SimulateAll: _simulate_all,
    SimulateMission: _simulate_mission,
    ShowVehicle: _show_vehicle,
    Exit: _exit,
}


def dispatch(env: Environment, command: Any) -> CommandResult:
    """
    Run a command against the environment.

    Args:
        env: Session environment to act on
        command: One of the command dataclasses of this module

    Returns:
        CommandResult; simulator errors become a failed result instead of raising
    """
    try:
        handler = _HANDLERS[type(command)]
    except KeyError:
        raise TypeError(f"Unsupported command: {command!r}") from None

    try:
        return handler(env, command)
    except SimulatorError as e:
        return CommandResult.failure(e)


VEHICLE_OPTIONS = [(kind.value, kind.label) for kind in VehicleKind]
MISSION_OPTIONS = [(kind.value, kind.label) for kind in MissionKind]
