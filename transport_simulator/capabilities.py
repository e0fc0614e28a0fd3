"""Capability contracts and the mission kinds that depend on them.

A vehicle variant composes any number of the contract classes below. Each
contract contributes one `Capability` flag, so the capability set of a
variant is simply the union of the flags of the contracts it inherits.
"""

from abc import ABC, abstractmethod
from enum import Enum, Flag, auto

from .errors import InvalidSelectionError


class Capability(Flag):
    """Behavioural roles a vehicle can implement."""

    NONE = 0
    ROLLING = auto()
    FLYING = auto()
    SWIMMING = auto()
    ELECTRIC = auto()
    FUEL = auto()

    @property
    def label(self) -> str:
        return _LABELS.get(self, self.name or "")

    def members(self) -> list["Capability"]:
        """The single flags contained in this set, in declaration order."""
        return [cap for cap in _SINGLE_FLAGS if cap in self]


_SINGLE_FLAGS = (
    Capability.ROLLING,
    Capability.FLYING,
    Capability.SWIMMING,
    Capability.ELECTRIC,
    Capability.FUEL,
)

_LABELS = {
    Capability.ROLLING: "Rolling",
    Capability.FLYING: "Flying",
    Capability.SWIMMING: "Swimming",
    Capability.ELECTRIC: "Electric-powered",
    Capability.FUEL: "Fuel-powered",
}


class Rolling(ABC):
    """Can drive on land."""

    capability = Capability.ROLLING

    @abstractmethod
    def drive(self) -> None: ...


class Flying(ABC):
    """Can fly."""

    capability = Capability.FLYING

    @abstractmethod
    def fly(self) -> None: ...


class Swimming(ABC):
    """Can navigate on or under water."""

    capability = Capability.SWIMMING

    @abstractmethod
    def navigate(self) -> None: ...


class ElectricPowered(ABC):
    """Runs on a rechargeable battery."""

    capability = Capability.ELECTRIC

    @abstractmethod
    def recharge_battery(self) -> None: ...


class FuelPowered(ABC):
    """Runs on fuel."""

    capability = Capability.FUEL

    @abstractmethod
    def refuel(self) -> None: ...


CONTRACTS = (Rolling, Flying, Swimming, ElectricPowered, FuelPowered)


def capabilities_of(cls: type) -> Capability:
    """Union of the capability flags of every contract `cls` inherits."""
    caps = Capability.NONE
    for contract in CONTRACTS:
        if issubclass(cls, contract):
            caps |= contract.capability
    return caps


class MissionKind(Enum):
    """Classification of a mission by the capability domain it needs.

    Values double as the menu option numbers.
    """

    LAND = 1
    AIR = 2
    WATER = 3

    @property
    def required(self) -> Capability:
        """The capability an assigned vehicle must expose."""
        return _REQUIRED[self]

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_option(cls, option: int) -> "MissionKind":
        """Map a 1-based menu option to a mission kind.

        Raises:
            InvalidSelectionError: If the option is not 1, 2 or 3.
        """
        try:
            return cls(option)
        except ValueError:
            raise InvalidSelectionError(f"Invalid mission type option: {option}.") from None


_REQUIRED = {
    MissionKind.LAND: Capability.ROLLING,
    MissionKind.AIR: Capability.FLYING,
    MissionKind.WATER: Capability.SWIMMING,
}
