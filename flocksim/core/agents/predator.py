"""
Predator agent class implementing pursuit behavior.
"""

from typing import Optional

import pygame

from .base import Creature
from ..predation import PursuitContext, pursuit_heading, select_target


class Predator(Creature):
    """
    A predator agent that chases the nearest prey.

    The target is chosen afresh every tick and never carried over; only
    its id and pre-tick position are kept, for the capture test.
    """

    kind = "predator"

    def __init__(self, creature_id: int, x: float, y: float, heading: float,
                 speed: float, max_turn_angle: float):
        super().__init__(creature_id, x, y, heading, speed, max_turn_angle)
        self.target_id: Optional[int] = None
        self.target_position: Optional[pygame.Vector2] = None

    def clear_target(self) -> None:
        self.target_id = None
        self.target_position = None

    def compute_desired_heading(self, context: PursuitContext) -> float:
        """
        Pick the nearest prey and head toward it.

        Args:
            context: Flock snapshot, world and optional target radius

        Returns:
            Heading toward the target, or the current heading if the flock
            offers no target
        """
        self.clear_target()
        target = select_target(self.position, context.flock, context.world,
                               context.target_radius)
        if target is not None:
            self.target_id = target.id
            self.target_position = pygame.Vector2(target.position)
        return pursuit_heading(self.heading, self.position, self.target_position, context.world)
