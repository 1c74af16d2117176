"""
Base Creature class shared by prey and predators.
"""

import pygame

from ..geometry import direction, normalize_angle
from ..integrator import integrate
from ..world import World


class Creature:
    """
    Base class for all creatures in the simulation.

    A creature moves at a constant speed along its heading and may rotate
    at most max_turn_angle per tick. Subclasses provide the steering
    capability (compute_desired_heading); the integration capability
    (stage/commit, or apply_heading for both) is shared.
    """

    kind = "creature"

    def __init__(self, creature_id: int, x: float, y: float, heading: float,
                 speed: float, max_turn_angle: float):
        """
        Initialize a creature.

        Args:
            creature_id: Stable identifier, unique within its roster
            x: Initial x position
            y: Initial y position
            heading: Initial heading in radians
            speed: Constant distance travelled per tick
            max_turn_angle: Largest rotation per tick in radians
        """
        self.id = creature_id
        self.position = pygame.Vector2(x, y)
        self.heading = normalize_angle(heading)
        self._speed = float(speed)
        self._max_turn_angle = float(max_turn_angle)
        self._staged = None

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def max_turn_angle(self) -> float:
        return self._max_turn_angle

    @property
    def velocity(self) -> pygame.Vector2:
        """Velocity implied by heading and speed."""
        return direction(self.heading) * self._speed

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(id={self.id}, x={self.position.x:.2f}, "
                f"y={self.position.y:.2f}, heading={self.heading:.3f})")

    def compute_desired_heading(self, context) -> float:
        """
        Heading this creature wants to face, from a read-only snapshot.

        Args:
            context: Variant-specific snapshot of the world

        Returns:
            Desired heading in radians
        """
        raise NotImplementedError

    def stage(self, desired_heading: float, world: World) -> None:
        """
        Integrate toward desired_heading without touching visible state.

        The result is held until commit(), so other creatures planning in
        the same tick still see this creature's pre-tick position.

        Args:
            desired_heading: Heading from compute_desired_heading or a
                manual command
            world: Torus used to wrap the new position
        """
        self._staged = integrate(
            self.heading, desired_heading, self._max_turn_angle,
            self._speed, self.position, world,
        )

    def commit(self) -> bool:
        """Apply the staged heading and position. Returns False if nothing was staged."""
        if self._staged is None:
            return False
        self.heading, self.position = self._staged
        self._staged = None
        return True

    def apply_heading(self, desired_heading: float, world: World) -> None:
        """
        Turn toward desired_heading within the turn limit and move one step.

        Args:
            desired_heading: Heading from compute_desired_heading or a
                manual command
            world: Torus used to wrap the new position
        """
        self.stage(desired_heading, world)
        self.commit()
