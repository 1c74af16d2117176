"""
Bounded toroidal world: every edge connects to the opposite edge.
"""

import math
import random

import pygame

from .geometry import shortest_axis_delta, wrap_coordinate


class World:
    """
    Rectangular torus of a fixed width and height.

    Positions live in [0, width) x [0, height). Distances and directions
    between two points always take the shorter way around each axis.
    """

    def __init__(self, width: float, height: float):
        """
        Initialize the world.

        Args:
            width: Extent along x, must be positive
            height: Extent along y, must be positive

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"World bounds must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)

    @classmethod
    def from_config(cls, config) -> "World":
        """Build a world from a config's screenWidth/screenHeight."""
        return cls(config.screenWidth, config.screenHeight)

    def __repr__(self) -> str:
        return f"World({self.width:g}, {self.height:g})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, World):
            return NotImplemented
        return self.width == other.width and self.height == other.height

    def wrap(self, position: pygame.Vector2) -> pygame.Vector2:
        """
        Fold a position back onto the torus.

        Args:
            position: Any position, possibly outside the bounds or negative

        Returns:
            New position inside [0, width) x [0, height)
        """
        return pygame.Vector2(
            wrap_coordinate(position.x, self.width),
            wrap_coordinate(position.y, self.height),
        )

    def shortest_delta(self, a: pygame.Vector2, b: pygame.Vector2) -> pygame.Vector2:
        """
        Minimal displacement from a to b respecting wrap-around.

        Args:
            a: Start position
            b: End position

        Returns:
            Vector that, added to a and wrapped, lands on b. Antisymmetric:
            shortest_delta(a, b) == -shortest_delta(b, a).
        """
        return pygame.Vector2(
            shortest_axis_delta(a.x, b.x, self.width),
            shortest_axis_delta(a.y, b.y, self.height),
        )

    def distance_squared(self, a: pygame.Vector2, b: pygame.Vector2) -> float:
        return self.shortest_delta(a, b).length_squared()

    def distance(self, a: pygame.Vector2, b: pygame.Vector2) -> float:
        return math.sqrt(self.distance_squared(a, b))

    def contains(self, position: pygame.Vector2) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def random_position(self, rng: random.Random) -> pygame.Vector2:
        """Uniformly random position drawn from rng."""
        return self.wrap(pygame.Vector2(
            rng.uniform(0, self.width),
            rng.uniform(0, self.height),
        ))
