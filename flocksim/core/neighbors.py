"""
Per-prey neighbor classification against a fixed snapshot of the world.
"""

from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

import pygame

from .world import World


class CloseNeighbor(NamedTuple):
    prey_id: int
    away: pygame.Vector2  # from the neighbor toward the prey


class FlockMember(NamedTuple):
    prey_id: int
    offset: pygame.Vector2  # from the prey toward the neighbor
    heading: float


class ThreatSighting(NamedTuple):
    predator_id: int
    away: pygame.Vector2  # from the predator toward the prey
    distance_sq: float


@dataclass(frozen=True)
class NeighborThresholds:
    """Radii that gate each neighbor class."""

    min_separation: float
    flock_radius: float
    predator_sight_radius: float

    @classmethod
    def from_config(cls, config) -> "NeighborThresholds":
        return cls(
            min_separation=config.minSeparation,
            flock_radius=config.flockRadius,
            predator_sight_radius=config.predatorSightRadius,
        )


@dataclass(frozen=True)
class NeighborRecord:
    """
    Everything one prey perceives this tick.

    Attributes:
        prey_id: Prey this record describes
        heading: The prey's pre-tick heading
        close: Prey nearer than min_separation, ascending id
        flock: Prey nearer than flock_radius, ascending id
        threat: Nearest predator within sight, or None
    """

    prey_id: int
    heading: float
    close: Tuple[CloseNeighbor, ...]
    flock: Tuple[FlockMember, ...]
    threat: Optional[ThreatSighting]


def build_neighbor_index(flock: Sequence, predators: Sequence, world: World,
                         thresholds: NeighborThresholds, grid=None) -> Dict[int, NeighborRecord]:
    """
    Classify the neighbors of every prey.

    Every distance uses the toroidal shortest path. Members of each set are
    ordered by prey id, so the result does not depend on flock order.

    Args:
        flock: Prey snapshot (must not change during the call)
        predators: Predator snapshot
        world: Torus the creatures live on
        thresholds: Radii gating each neighbor class
        grid: Optional SpatialGrid used as a candidate source; it yields
            the same sets as the full scan

    Returns:
        Mapping of prey id to its NeighborRecord
    """
    min_sep_sq = thresholds.min_separation ** 2
    flock_sq = thresholds.flock_radius ** 2
    search_radius = max(thresholds.min_separation, thresholds.flock_radius)

    ordered = sorted(flock, key=lambda p: p.id)
    if grid is not None:
        grid.rebuild(ordered)

    index = {}
    for prey in ordered:
        if grid is not None:
            candidates = grid.get_neighbors(prey.position, search_radius)
        else:
            candidates = ordered

        close: List[CloseNeighbor] = []
        members: List[FlockMember] = []
        for other in candidates:
            if other is prey:
                continue
            offset = world.shortest_delta(prey.position, other.position)
            dist_sq = offset.length_squared()
            if dist_sq < min_sep_sq:
                close.append(CloseNeighbor(other.id, -offset))
            if dist_sq < flock_sq:
                members.append(FlockMember(other.id, offset, other.heading))

        index[prey.id] = NeighborRecord(
            prey_id=prey.id,
            heading=prey.heading,
            close=tuple(close),
            flock=tuple(members),
            threat=nearest_threat(prey.position, predators, world,
                                  thresholds.predator_sight_radius),
        )
    return index


def nearest_threat(position: pygame.Vector2, predators: Sequence, world: World,
                   sight_radius: float) -> Optional[ThreatSighting]:
    """Closest predator strictly within sight_radius, lowest id on ties."""
    sight_sq = sight_radius * sight_radius
    best = None
    for predator in predators:
        away = world.shortest_delta(predator.position, position)
        dist_sq = away.length_squared()
        if dist_sq >= sight_sq:
            continue
        if best is None or (dist_sq, predator.id) < (best.distance_sq, best.predator_id):
            best = ThreatSighting(predator.id, away, dist_sq)
    return best
