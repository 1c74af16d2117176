"""
Prey agent class implementing flocking behavior.
"""

from .base import Creature
from ..steering import SteeringContext, desired_heading


class Prey(Creature):
    """
    A prey agent that exhibits flocking behavior.

    Implements Reynolds' boid rules on a torus:
    - Separation: Avoid crowding neighbors
    - Alignment: Steer toward average heading of neighbors
    - Cohesion: Steer toward average position of neighbors

    Also flees the nearest predator in sight.
    """

    kind = "prey"

    def __init__(self, creature_id: int, x: float, y: float, heading: float,
                 speed: float, max_turn_angle: float, manual_control: bool = False):
        super().__init__(creature_id, x, y, heading, speed, max_turn_angle)
        self.manual_control = manual_control

    def compute_desired_heading(self, context: SteeringContext) -> float:
        """
        Weighted flocking heading from this prey's neighbor record.

        Args:
            context: Neighbor record and steering weights

        Returns:
            Desired heading in radians
        """
        return desired_heading(context.record, context.weights)
