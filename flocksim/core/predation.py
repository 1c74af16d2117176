"""
Predator target selection, pursuit and capture.
"""

import logging
from typing import List, NamedTuple, Optional, Sequence, Set

import pygame

from .geometry import EPSILON_SQ, angle_of
from .world import World

log = logging.getLogger(__name__)


class PursuitContext(NamedTuple):
    flock: Sequence
    world: World
    target_radius: Optional[float] = None


def select_target(position: pygame.Vector2, flock: Sequence, world: World,
                  target_radius: Optional[float] = None):
    """
    Nearest prey to a position, lowest prey id on ties.

    Args:
        position: Predator position
        flock: Prey snapshot
        world: Torus used for distances
        target_radius: Optional sight cap; None means unbounded

    Returns:
        The chosen prey, or None if the flock is empty or nothing is in range
    """
    limit_sq = None if target_radius is None else target_radius * target_radius
    best = None
    best_key = None
    for prey in flock:
        dist_sq = world.distance_squared(position, prey.position)
        if limit_sq is not None and dist_sq >= limit_sq:
            continue
        key = (dist_sq, prey.id)
        if best_key is None or key < best_key:
            best, best_key = prey, key
    return best


def pursuit_heading(heading: float, position: pygame.Vector2,
                    target_position: Optional[pygame.Vector2], world: World) -> float:
    """Heading toward the target, or the current heading if there is none."""
    if target_position is None:
        return heading
    delta = world.shortest_delta(position, target_position)
    if delta.length_squared() < EPSILON_SQ:
        return heading
    return angle_of(delta)


def is_capture(predator_position: pygame.Vector2, target_position: pygame.Vector2,
               world: World, kill_distance: float) -> bool:
    return world.distance_squared(predator_position, target_position) < kill_distance * kill_distance


def collect_captures(predators: Sequence, world: World, kill_distance: float) -> Set[int]:
    """
    Gather the ids of every prey caught this tick.

    Uses each predator's post-integration position against its target's
    pre-tick position. A prey caught by several predators appears once.

    Args:
        predators: Predators after integration, with targets from this tick
        world: Torus used for distances
        kill_distance: Capture radius

    Returns:
        Set of captured prey ids
    """
    captured = set()
    for predator in predators:
        if predator.target_id is None:
            continue
        if is_capture(predator.position, predator.target_position, world, kill_distance):
            captured.add(predator.target_id)
    return captured


def remove_captured(flock: List, captured_ids: Set[int]) -> List:
    """
    Remove captured prey from the flock in place.

    Args:
        flock: Flock list to filter
        captured_ids: Ids to remove

    Returns:
        The removed prey, in flock order
    """
    if not captured_ids:
        return []
    removed = [prey for prey in flock if prey.id in captured_ids]
    flock[:] = [prey for prey in flock if prey.id not in captured_ids]
    for prey in removed:
        log.debug("prey %d captured at (%.1f, %.1f)", prey.id, prey.position.x, prey.position.y)
    return removed
