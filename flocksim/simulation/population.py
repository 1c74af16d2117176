"""
Initial population of prey and predators.
"""

import math
import random
from typing import List, Optional, Tuple

from ..core.agents import Predator, Prey
from ..core.config import SimulationConfig
from ..core.world import World


def create_population(config: SimulationConfig, world: World,
                      rng: random.Random) -> Tuple[List[Prey], List[Predator]]:
    """
    Spawn the flock and the predator roster.

    Positions and headings are drawn from rng, so a seeded generator gives
    a reproducible start. Speed and turn limit are fixed from config at
    creation and never change afterwards.

    Args:
        config: Counts, speeds and turn limits (clamped before use)
        world: Torus to place creatures on
        rng: Random source

    Returns:
        Tuple of (flock, predators)
    """
    config = config.clamped()

    flock = []
    for prey_id in range(int(config.preyCount)):
        position = world.random_position(rng)
        heading = rng.uniform(-math.pi, math.pi)
        flock.append(Prey(prey_id, position.x, position.y, heading,
                          config.preySpeed, config.preyMaxTurnAngle))

    predators = []
    for predator_id in range(int(config.predatorCount)):
        position = world.random_position(rng)
        heading = rng.uniform(-math.pi, math.pi)
        predators.append(Predator(predator_id, position.x, position.y, heading,
                                  config.predatorSpeed, config.predatorMaxTurnAngle))

    if config.manualControl and flock:
        flock[0].manual_control = True

    return flock, predators


def assign_manual_control(flock: List[Prey], prey_id: Optional[int]) -> None:
    """
    Give manual control to one prey, taking it from any other.

    Args:
        flock: Current flock
        prey_id: Prey to control, or None to release control

    Raises:
        ValueError: If prey_id is not in the flock
    """
    if prey_id is not None and not any(prey.id == prey_id for prey in flock):
        raise ValueError(f"No prey with id {prey_id} in the flock")
    for prey in flock:
        prey.manual_control = prey.id == prey_id
