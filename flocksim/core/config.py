"""
Configuration classes and defaults for the predator/prey simulation.
"""

import math
from dataclasses import dataclass, field, fields, replace
from typing import Dict, List, Optional, Tuple


# Documented range of every clamped tunable: name -> (min, max)
LIMITS: Dict[str, Tuple[float, float]] = {
    "separationWeight": (0.0, 10.0),
    "alignmentWeight": (0.0, 10.0),
    "cohesionWeight": (0.0, 10.0),
    "fleeWeight": (0.0, 10.0),
    "preySpeed": (0.0, 10.0),
    "predatorSpeed": (0.0, 10.0),
    "preyMaxTurnAngle": (0.0, math.pi),
    "predatorMaxTurnAngle": (0.0, math.pi),
    "manualTurnIncrement": (0.0, math.pi),
    "minSeparation": (0.0, math.inf),
    "flockRadius": (0.0, math.inf),
    "predatorSightRadius": (0.0, math.inf),
    "predatorTargetRadius": (0.0, math.inf),
    "killDistance": (0.0, math.inf),
    "screenWidth": (1, math.inf),
    "screenHeight": (1, math.inf),
    "preyCount": (0, math.inf),
    "predatorCount": (0, math.inf),
    "gridCellSize": (1.0, math.inf),
    "tickDelayMs": (1, math.inf),
}


@dataclass
class SimulationConfig:
    """Configuration for the predator/prey simulation."""

    # Screen settings (define the torus)
    screenWidth: int = 800
    screenHeight: int = 600

    # Agent counts, used only at initialization
    preyCount: int = 20
    predatorCount: int = 1
    seed: int = 42

    # Steering weights
    separationWeight: float = 2.0
    alignmentWeight: float = 1.0
    cohesionWeight: float = 1.0
    fleeWeight: float = 5.0

    # Prey movement
    preySpeed: float = 2.0
    preyMaxTurnAngle: float = 0.1

    # Neighbor thresholds
    minSeparation: float = 25.0
    flockRadius: float = 80.0
    predatorSightRadius: float = 200.0

    # Predator movement
    predatorSpeed: float = 2.5
    predatorMaxTurnAngle: float = 0.02
    killDistance: float = 6.0
    predatorTargetRadius: Optional[float] = None  # None = unbounded pursuit

    # Manual override
    manualControl: bool = False
    manualTurnIncrement: Optional[float] = None  # None = preyMaxTurnAngle

    # Neighbor search
    useSpatialGrid: bool = False
    gridCellSize: float = 80.0

    # Scheduling and visualization
    tickDelayMs: int = 50
    backgroundColor: List[int] = field(default_factory=lambda: [25, 25, 25])
    preyColor: List[int] = field(default_factory=lambda: [220, 220, 235])
    manualPreyColor: List[int] = field(default_factory=lambda: [255, 60, 60])
    predatorColor: List[int] = field(default_factory=lambda: [80, 140, 255])

    # Output
    scoreOutputFile: str = "flocksim_score.json"

    @property
    def turn_increment(self) -> float:
        """Heading offset requested by one manual turn command."""
        if self.manualTurnIncrement is None:
            return self.preyMaxTurnAngle
        return self.manualTurnIncrement

    @property
    def ticks_per_second(self) -> float:
        """Tick rate implied by tickDelayMs."""
        return 1000.0 / max(1, self.tickDelayMs)

    def clamped(self) -> "SimulationConfig":
        """
        Copy of this config with every tunable forced into its documented range.

        Out-of-range values are clamped rather than rejected so a running
        simulation survives bad input.

        Returns:
            New SimulationConfig; self is left untouched
        """
        changes = {}
        for name, (low, high) in LIMITS.items():
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, float) and math.isnan(value):
                changes[name] = low
                continue
            bounded = max(low, min(high, value))
            if isinstance(low, float):
                bounded = float(bounded)
            if bounded != value:
                changes[name] = bounded
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


# Default configuration for interactive simulation
DEFAULT_CONFIG = SimulationConfig()

# Larger flock with several predators for headless benchmarking
BENCHMARK_CONFIG = SimulationConfig(
    preyCount=150,
    predatorCount=3,
    predatorMaxTurnAngle=0.05,
    useSpatialGrid=True,
)
