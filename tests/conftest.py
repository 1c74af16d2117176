import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from flocksim.core.agents import Predator, Prey  # noqa: E402
from flocksim.core.config import SimulationConfig  # noqa: E402
from flocksim.core.world import World  # noqa: E402


def make_prey(prey_id, x, y, heading=0.0, speed=2.0, max_turn=0.5, manual=False):
    return Prey(prey_id, x, y, heading, speed, max_turn, manual_control=manual)


def make_predator(predator_id, x, y, heading=0.0, speed=2.5, max_turn=0.2):
    return Predator(predator_id, x, y, heading, speed, max_turn)


def quiet_config(**overrides) -> SimulationConfig:
    """Config with every steering weight zeroed unless overridden."""
    values = dict(
        screenWidth=100,
        screenHeight=100,
        separationWeight=0.0,
        alignmentWeight=0.0,
        cohesionWeight=0.0,
        fleeWeight=0.0,
        minSeparation=15.0,
        flockRadius=40.0,
        predatorSightRadius=60.0,
        killDistance=6.0,
    )
    values.update(overrides)
    return SimulationConfig(**values)


@pytest.fixture
def world() -> World:
    return World(100, 100)
