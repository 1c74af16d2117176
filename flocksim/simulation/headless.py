"""
Headless simulation for batch runs and data collection.
"""

import logging
import random
import time
from typing import Any, Dict, Optional

from ..analysis.metrics import mean_flock_size, polarization
from ..core.config import SimulationConfig, DEFAULT_CONFIG
from ..core.integrator import ManualCommand
from ..core.neighbors import NeighborThresholds, build_neighbor_index
from ..core.world import World
from .population import create_population
from .tick import advance_simulation, render_state

log = logging.getLogger(__name__)

# Frames between time-series samples
METRICS_INTERVAL = 10

# Frames between progress reports
PROGRESS_INTERVAL = 1000


class HeadlessSimulation:
    """
    Simulation without a display.

    Owns the world, the flock, the predators and a seeded random source,
    and collects capture and flocking statistics as it runs.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize headless simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
        """
        self.config = config if config else DEFAULT_CONFIG
        self.reset()

    def reset(self) -> None:
        """Re-create the population from the current config and clear statistics."""
        self.world = World.from_config(self.config.clamped())
        self.rng = random.Random(self.config.seed)
        self.flock, self.predators = create_population(self.config, self.world, self.rng)

        self.frame_count = 0
        self.start_time = time.time()

        self.stats = {
            "initial_prey_count": len(self.flock),
            "prey_eaten": 0,
            "first_capture_frame": None,
            "capture_frames": [],
            "population_over_time": [],
            "polarization_over_time": [],
            "flock_size_over_time": [],
        }
        self._record_sample()

    def update(self, command: ManualCommand = ManualCommand.NONE) -> None:
        """Advance one tick and record statistics."""
        result = advance_simulation(self.flock, self.predators, self.config, self.world, command)
        self.frame_count += 1

        if result.captured_ids:
            self.stats["prey_eaten"] += result.capture_count
            self.stats["capture_frames"].extend([self.frame_count] * result.capture_count)
            if self.stats["first_capture_frame"] is None:
                self.stats["first_capture_frame"] = self.frame_count

        if self.frame_count % METRICS_INTERVAL == 0:
            self._record_sample()

    def _record_sample(self) -> None:
        """Append one time-series sample for the current frame."""
        config = self.config.clamped()
        index = build_neighbor_index(self.flock, self.predators, self.world,
                                     NeighborThresholds.from_config(config))
        self.stats["population_over_time"].append({
            "frame": self.frame_count,
            "prey_count": len(self.flock),
            "captures": self.stats["prey_eaten"],
        })
        self.stats["polarization_over_time"].append({
            "frame": self.frame_count,
            "polarization": polarization([p.heading for p in self.flock]),
        })
        self.stats["flock_size_over_time"].append({
            "frame": self.frame_count,
            "flock_size": mean_flock_size(index),
        })

    def render_state(self):
        return render_state(self.flock, self.predators)

    def run(self, max_frames: int, verbose: bool = True) -> Dict[str, Any]:
        """
        Run for a number of frames.

        Args:
            max_frames: Frames to simulate
            verbose: Print progress every PROGRESS_INTERVAL frames

        Returns:
            Results dictionary with all statistics
        """
        if verbose:
            print(f"Running simulation for {max_frames} frames...")

        while self.frame_count < max_frames:
            self.update()

            if verbose and self.frame_count % PROGRESS_INTERVAL == 0:
                elapsed = time.time() - self.start_time
                progress = (self.frame_count / max_frames) * 100
                print(f"  Progress: {progress:.1f}% ({self.frame_count}/{max_frames} frames, "
                      f"{elapsed:.1f}s elapsed, {self.stats['prey_eaten']} captures)")

        log.info("finished %d frames: %d captures, %d prey left",
                 self.frame_count, self.stats["prey_eaten"], len(self.flock))
        return self.get_results()

    def get_results(self) -> Dict[str, Any]:
        """
        Get simulation results.

        Returns:
            Dictionary containing all statistics and derived metrics
        """
        elapsed = time.time() - self.start_time

        polar = [s["polarization"] for s in self.stats["polarization_over_time"]]
        sizes = [s["flock_size"] for s in self.stats["flock_size_over_time"]]

        captures_per_frame = 0
        if self.frame_count > 0:
            captures_per_frame = self.stats["prey_eaten"] / self.frame_count

        return {
            "seed": self.config.seed,
            "total_captures": self.stats["prey_eaten"],
            "frames": self.frame_count,
            "elapsed_time_seconds": elapsed,
            "first_capture_frame": self.stats["first_capture_frame"],
            "capture_frames": list(self.stats["capture_frames"]),
            "captures_per_frame": captures_per_frame,
            "initial_prey_count": self.stats["initial_prey_count"],
            "final_prey_count": len(self.flock),
            "avg_polarization": sum(polar) / len(polar) if polar else 0.0,
            "avg_flock_size": sum(sizes) / len(sizes) if sizes else 0.0,
            "population_over_time": self.stats["population_over_time"],
            "polarization_over_time": self.stats["polarization_over_time"],
            "flock_size_over_time": self.stats["flock_size_over_time"],
        }
