"""
One deterministic simulation step, plus the read-only render hook.
"""

import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..core.config import SimulationConfig
from ..core.integrator import ManualCommand, manual_desired_heading
from ..core.neighbors import NeighborThresholds, build_neighbor_index
from ..core.predation import PursuitContext, collect_captures, remove_captured
from ..core.spatial_grid import SpatialGrid
from ..core.steering import SteeringContext, SteeringWeights
from ..core.world import World

log = logging.getLogger(__name__)


@dataclass
class TickResult:
    """Outcome of one tick."""

    captured_ids: Tuple[int, ...] = ()
    targets: Dict[int, Optional[int]] = field(default_factory=dict)

    @property
    def capture_count(self) -> int:
        return len(self.captured_ids)


@dataclass(frozen=True)
class CreatureView:
    """Read-only view of a creature for rendering."""

    id: int
    kind: str
    x: float
    y: float
    heading: float
    manual: bool = False


@dataclass(frozen=True)
class RenderState:
    prey: Tuple[CreatureView, ...]
    predators: Tuple[CreatureView, ...]


def advance_simulation(flock: List, predators: List, config: SimulationConfig,
                       world: World, command: ManualCommand = ManualCommand.NONE) -> TickResult:
    """
    Advance the simulation by one tick, mutating flock and predators in place.

    The tick runs in two phases. First every desired heading and predator
    target is computed from the pre-tick state only; then every creature
    turns and moves, and captured prey are removed once. The outcome does
    not depend on list order.

    Args:
        flock: Prey list, mutated in place
        predators: Predator list, mutated in place
        config: Tunables; a clamped copy is taken at tick start
        world: Torus the creatures live on
        command: Manual command for the controlled prey, if any

    Returns:
        TickResult with captured prey ids and each predator's target
    """
    config = config.clamped()
    weights = SteeringWeights.from_config(config)
    thresholds = NeighborThresholds.from_config(config)
    grid = SpatialGrid(world, config.gridCellSize) if config.useSpatialGrid else None

    # Snapshot phase: nothing below may mutate a creature's position or heading
    index = build_neighbor_index(flock, predators, world, thresholds, grid)
    controlled = controlled_prey(flock)

    for prey in flock:
        desired = None
        if prey is controlled:
            desired = manual_desired_heading(prey.heading, command, config.turn_increment)
        if desired is None:
            desired = prey.compute_desired_heading(SteeringContext(index[prey.id], weights))
        prey.stage(desired, world)

    pursuit = PursuitContext(tuple(flock), world, config.predatorTargetRadius)
    for predator in predators:
        predator.stage(predator.compute_desired_heading(pursuit), world)

    # Write phase
    for creature in itertools.chain(flock, predators):
        creature.commit()

    captured = collect_captures(predators, world, config.killDistance)
    remove_captured(flock, captured)
    if captured:
        log.debug("tick captured %d prey, %d remain", len(captured), len(flock))

    return TickResult(
        captured_ids=tuple(sorted(captured)),
        targets={p.id: p.target_id for p in predators},
    )


def controlled_prey(flock: List):
    """
    The prey carrying manual control, or None.

    If several prey carry the flag, the lowest id wins.
    """
    holders = [prey for prey in flock if prey.manual_control]
    if not holders:
        return None
    if len(holders) > 1:
        log.warning("%d prey carry manual control; using the lowest id", len(holders))
    return min(holders, key=lambda p: p.id)


def render_state(flock: List, predators: List) -> RenderState:
    """Snapshot of positions and headings for an external renderer."""
    return RenderState(
        prey=tuple(
            CreatureView(p.id, p.kind, p.position.x, p.position.y, p.heading, p.manual_control)
            for p in flock
        ),
        predators=tuple(
            CreatureView(p.id, p.kind, p.position.x, p.position.y, p.heading)
            for p in predators
        ),
    )
