"""
Random obstacle generation per locomotion domain.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from . import config
from .capabilities import Capability
from .vehicles import Vehicle


class ObstacleDomain(Enum):
    """Locomotion class an obstacle belongs to."""

    LAND = "land"
    AIR = "air"
    WATER = "water"

    @property
    def obstacles(self) -> Tuple[str, ...]:
        return _TABLES[self]

    @property
    def title(self) -> str:
        return f"{self.value.capitalize()} obstacles:"


_TABLES = {
    ObstacleDomain.LAND: config.LAND_OBSTACLES,
    ObstacleDomain.AIR: config.AIR_OBSTACLES,
    ObstacleDomain.WATER: config.WATER_OBSTACLES,
}


@dataclass(frozen=True)
class Obstacle:
    """One obstacle drawn for a mission."""

    domain: ObstacleDomain
    description: str

    def __str__(self) -> str:
        return self.description


class ObstacleGenerator:
    """Draws one obstacle per mission, uniformly from the vehicle's domain table."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        """
        Args:
            seed: Random seed for reproducibility (ignored when rng is given)
            rng: Random source to draw from
        """
        self.seed = seed
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    @staticmethod
    def domain_for(vehicle: Vehicle) -> Optional[ObstacleDomain]:
        """Pick the obstacle domain from the vehicle's capabilities.

        Rolling is checked first, so a vehicle that both rolls and swims
        (Amphibious) always faces land obstacles.
        """
        if vehicle.has(Capability.ROLLING):
            return ObstacleDomain.LAND
        if vehicle.has(Capability.FLYING):
            return ObstacleDomain.AIR
        if vehicle.has(Capability.SWIMMING):
            return ObstacleDomain.WATER
        return None

    def generate(self, vehicle: Vehicle) -> Optional[Obstacle]:
        domain = self.domain_for(vehicle)
        if domain is None:
            return None
        options = domain.obstacles
        pick = int(self.rng.integers(len(options)))
        return Obstacle(domain, options[pick])
