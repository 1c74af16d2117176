"""
Core module containing configuration, toroidal geometry, neighbor search,
steering, integration, predation and creature classes.
"""

from .config import SimulationConfig, DEFAULT_CONFIG, BENCHMARK_CONFIG, LIMITS
from .world import World
from .spatial_grid import SpatialGrid
from .integrator import ManualCommand, integrate, manual_desired_heading
from .neighbors import NeighborRecord, NeighborThresholds, build_neighbor_index
from .steering import SteeringContext, SteeringWeights, desired_heading
from .predation import PursuitContext, collect_captures, remove_captured, select_target

__all__ = [
    'SimulationConfig', 'DEFAULT_CONFIG', 'BENCHMARK_CONFIG', 'LIMITS',
    'World', 'SpatialGrid',
    'ManualCommand', 'integrate', 'manual_desired_heading',
    'NeighborRecord', 'NeighborThresholds', 'build_neighbor_index',
    'SteeringContext', 'SteeringWeights', 'desired_heading',
    'PursuitContext', 'collect_captures', 'remove_captured', 'select_target',
]
