"""
Spatial hash grid for neighbor lookup on a torus.
"""

import math
from collections import defaultdict
from typing import Any, List, Tuple

import pygame

from .world import World


class SpatialGrid:
    """
    Spatial hash grid over a toroidal world.

    Divides the world into cells that wrap at the edges, so a query near
    one border also inspects cells on the opposite border. Queries return
    exactly the agents a full pairwise scan would, ordered by agent id.
    """

    def __init__(self, world: World, cell_size: float):
        """
        Initialize the spatial grid.

        Args:
            world: Toroidal world the grid covers
            cell_size: Size of each grid cell
        """
        self.world = world
        self.cell_size = float(cell_size)
        self.grid = defaultdict(list)
        self.cols = max(1, math.ceil(world.width / self.cell_size))
        self.rows = max(1, math.ceil(world.height / self.cell_size))

    def clear(self) -> None:
        """Clear all agents from the grid."""
        self.grid.clear()

    def _hash(self, x: float, y: float) -> Tuple[int, int]:
        """
        Convert world coordinates to grid cell coordinates.

        Args:
            x: X position in world coordinates
            y: Y position in world coordinates

        Returns:
            Tuple of (column, row) cell indices
        """
        col = int(x / self.cell_size)
        row = int(y / self.cell_size)
        return (max(0, min(col, self.cols - 1)), max(0, min(row, self.rows - 1)))

    def insert(self, agent: Any) -> None:
        """
        Insert an agent into the grid based on its position.

        Args:
            agent: Object with 'id' and 'position' (pygame.Vector2) attributes
        """
        cell = self._hash(agent.position.x, agent.position.y)
        self.grid[cell].append(agent)

    def rebuild(self, agents: List[Any]) -> None:
        self.clear()
        for agent in agents:
            self.insert(agent)

    def get_neighbors(self, position: pygame.Vector2, radius: float) -> List[Any]:
        """
        Get all agents strictly within a toroidal radius of a position.

        Args:
            position: Center position
            radius: Search radius

        Returns:
            Agents with shortest-path distance < radius, sorted by id
        """
        radius_sq = radius * radius
        neighbors = []
        for cell in self._cells_within(position, radius):
            for agent in self.grid.get(cell, []):
                if self.world.distance_squared(position, agent.position) < radius_sq:
                    neighbors.append(agent)
        neighbors.sort(key=lambda a: a.id)
        return neighbors

    def _cells_within(self, position: pygame.Vector2, radius: float) -> List[Tuple[int, int]]:
        """
        Cells that may hold an agent within radius, wrapping across edges.

        Args:
            position: Center position
            radius: Search radius

        Returns:
            Distinct (column, row) cells to check
        """
        col, row = self._hash(position.x, position.y)
        # One extra ring covers the narrower last cell when the world size
        # is not a multiple of cell_size.
        reach = math.ceil(radius / self.cell_size) + 1
        cols = self._axis_range(col, reach, self.cols)
        rows = self._axis_range(row, reach, self.rows)
        return [(c, r) for c in cols for r in rows]

    @staticmethod
    def _axis_range(center: int, reach: int, count: int) -> List[int]:
        if 2 * reach + 1 >= count:
            return list(range(count))
        return sorted({(center + offset) % count for offset in range(-reach, reach + 1)})
