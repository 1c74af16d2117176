"""
Prey steering: separation, alignment, cohesion and flee.

All functions are pure and read only a NeighborRecord, never another
prey's post-update state.
"""

from dataclasses import dataclass
from typing import NamedTuple

import pygame

from .geometry import EPSILON_SQ, angle_of, direction, safe_normalize
from .neighbors import NeighborRecord


@dataclass(frozen=True)
class SteeringWeights:
    """Relative strength of each steering rule."""

    separation: float = 2.0
    alignment: float = 1.0
    cohesion: float = 1.0
    flee: float = 5.0

    @classmethod
    def from_config(cls, config) -> "SteeringWeights":
        return cls(
            separation=config.separationWeight,
            alignment=config.alignmentWeight,
            cohesion=config.cohesionWeight,
            flee=config.fleeWeight,
        )


class SteeringContext(NamedTuple):
    record: NeighborRecord
    weights: SteeringWeights


def separation(record: NeighborRecord) -> pygame.Vector2:
    """
    Sum of unit vectors pointing away from each too-close neighbor.

    A neighbor sharing the prey's exact position has no "away" direction
    and contributes nothing.
    """
    steering = pygame.Vector2(0, 0)
    for neighbor in record.close:
        steering += safe_normalize(neighbor.away)
    return steering


def alignment(record: NeighborRecord) -> pygame.Vector2:
    """Mean heading direction of the flock neighbors."""
    if not record.flock:
        return pygame.Vector2(0, 0)
    steering = pygame.Vector2(0, 0)
    for member in record.flock:
        steering += direction(member.heading)
    return steering / len(record.flock)


def cohesion(record: NeighborRecord) -> pygame.Vector2:
    """
    Unit vector toward the local centroid of the flock neighbors.

    The centroid is the mean of wrapped offsets, not of raw positions, so a
    group straddling an edge pulls the right way.
    """
    if not record.flock:
        return pygame.Vector2(0, 0)
    center = pygame.Vector2(0, 0)
    for member in record.flock:
        center += member.offset
    return safe_normalize(center / len(record.flock))


def flee(record: NeighborRecord) -> pygame.Vector2:
    """Unit vector away from the nearest sighted predator."""
    if record.threat is None:
        return pygame.Vector2(0, 0)
    return safe_normalize(record.threat.away)


def desired_heading(record: NeighborRecord, weights: SteeringWeights) -> float:
    """
    Combine the weighted steering rules into a heading.

    Args:
        record: Neighbor snapshot for one prey
        weights: Weight of each rule

    Returns:
        Heading of the weighted sum, or the prey's current heading when the
        sum has no direction
    """
    desired = (
        separation(record) * weights.separation
        + alignment(record) * weights.alignment
        + cohesion(record) * weights.cohesion
        + flee(record) * weights.flee
    )
    if desired.length_squared() < EPSILON_SQ:
        return record.heading
    return angle_of(desired)
