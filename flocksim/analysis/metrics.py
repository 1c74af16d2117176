"""
Flock-level metrics computed from simulation state.
"""

import math
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..core.world import World


def polarization(headings: Sequence[float]) -> float:
    """
    Order parameter of a set of headings.

    Args:
        headings: Headings in radians

    Returns:
        Length of the mean unit heading vector: 1.0 when everyone faces the
        same way, near 0.0 for random headings, 0.0 for an empty flock
    """
    if len(headings) == 0:
        return 0.0
    angles = np.asarray(headings, dtype=float)
    return float(np.hypot(np.cos(angles).mean(), np.sin(angles).mean()))


def mean_flock_size(index: Dict) -> float:
    """Mean number of flock-range neighbors per prey in a neighbor index."""
    if not index:
        return 0.0
    return float(np.mean([len(record.flock) for record in index.values()]))


def nearest_predator_distance(flock: Sequence, predators: Sequence, world: World) -> Optional[float]:
    """
    Smallest toroidal distance between any predator and any prey.

    Returns:
        Distance, or None when either roster is empty
    """
    if not flock or not predators:
        return None
    best = min(world.distance_squared(p.position, q.position) for p in predators for q in flock)
    return math.sqrt(best)


def aggregate_stats(trial_results: List[Dict], metrics: Optional[List[str]] = None) -> Dict[str, float]:
    """
    Calculate mean and standard deviation across trials.

    Args:
        trial_results: List of result dictionaries from multiple trials
        metrics: Keys to aggregate (defaults to the scalar headless results)

    Returns:
        Dictionary with <metric>_mean and <metric>_std for each metric
    """
    if not trial_results:
        return {}

    if metrics is None:
        metrics = [
            "total_captures", "first_capture_frame", "final_prey_count",
            "avg_polarization", "avg_flock_size", "elapsed_time_seconds",
        ]

    aggregates = {}
    for metric in metrics:
        values = np.array([r[metric] for r in trial_results
                           if metric in r and r[metric] is not None], dtype=float)
        if values.size == 0:
            continue
        aggregates[f"{metric}_mean"] = float(values.mean())
        aggregates[f"{metric}_std"] = float(values.std(ddof=1)) if values.size > 1 else 0.0
    return aggregates
