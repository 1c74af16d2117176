"""
Main entry point for the predator/prey flocking simulation.

Run with:
    python -m flocksim.main                          # Interactive simulation
    python -m flocksim.main --headless               # Single headless run
    python -m flocksim.main --headless --trials 10   # Repeated runs with aggregates
"""

import logging
import os
import sys
from dataclasses import replace


def set_headless():
    """Enable headless mode for batch runs."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"


def configure_logging(verbose: bool = False) -> None:
    """Send flocksim log records to stdout."""
    log = logging.getLogger("flocksim")
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(handler)
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)


def run_interactive(config):
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import Simulation

    print("=" * 60)
    print("Predator/Prey Flocking Simulation")
    print("=" * 60)
    print("\nControls:")
    print("  ESC        - Quit")
    print("  SPACE      - Pause / resume")
    print("  R          - Reset population")
    print("  M          - Toggle manual control of one prey (shown in red)")
    print("  LEFT/A     - Turn controlled prey left")
    print("  RIGHT/D    - Turn controlled prey right")
    print("  S          - Save score to JSON")
    print("\nStarting simulation...")

    sim = Simulation(config)
    sim.run()


def run_headless(config, frames: int = 5000, trials: int = 1,
                 export: bool = False, plot: bool = False):
    """
    Run one or more headless simulations and summarize them.

    Args:
        config: Base configuration; trial n uses seed config.seed + n
        frames: Frames per trial
        trials: Number of trials
        export: Write CSV and JSON results
        plot: Write PNG plots

    Returns:
        List of per-trial result dictionaries
    """
    set_headless()

    from .simulation.headless import HeadlessSimulation
    from .analysis.metrics import aggregate_stats
    from .analysis.export import export_results_to_csv, export_timeseries_to_csv, export_report
    from .analysis.plotting import plot_population, plot_polarization

    print("=" * 60)
    print("HEADLESS FLOCKING SIMULATION")
    print("=" * 60)
    print(f"Duration per trial: {frames} frames")
    print(f"Trials: {trials}")
    print(f"Prey: {config.preyCount}, Predators: {config.predatorCount}")
    print()

    results = []
    for trial in range(trials):
        print(f"\nTrial {trial + 1}/{trials}")
        trial_config = replace(config, seed=config.seed + trial)
        sim = HeadlessSimulation(trial_config)
        results.append(sim.run(frames))

    aggregates = aggregate_stats(results)

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    print(f"   Captures: {aggregates.get('total_captures_mean', 0):.2f} "
          f"+/- {aggregates.get('total_captures_std', 0):.2f}")
    print(f"   Prey remaining: {aggregates.get('final_prey_count_mean', 0):.1f}")
    print(f"   Polarization: {aggregates.get('avg_polarization_mean', 0):.3f}")
    print(f"   Flock neighbors: {aggregates.get('avg_flock_size_mean', 0):.2f}")
    if "first_capture_frame_mean" in aggregates:
        print(f"   First capture: {aggregates['first_capture_frame_mean']:.0f} frames")

    if export and results:
        export_results_to_csv(results)
        export_timeseries_to_csv(results[0])
        export_report({
            "config": config.to_dict(),
            "frames": frames,
            "trials": trials,
            "trial_results": results,
            "aggregates": aggregates,
        })

    if plot and results:
        print("\nGenerating plots...")
        plot_population(results)
        plot_polarization(results)

    return results


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="Predator/Prey Flocking Simulation")
    parser.add_argument("--headless", action="store_true", help="Run without a display")
    parser.add_argument("--frames", type=int, default=5000, help="Simulation duration in frames")
    parser.add_argument("--trials", type=int, default=1, help="Number of headless trials")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for initialization")
    parser.add_argument("--prey", type=int, default=None, help="Number of prey")
    parser.add_argument("--predators", type=int, default=None, help="Number of predators")
    parser.add_argument("--manual", action="store_true", help="Start with one manually controlled prey")
    parser.add_argument("--grid", action="store_true", help="Use the spatial grid for neighbor search")
    parser.add_argument("--export", action="store_true", help="Write CSV/JSON results")
    parser.add_argument("--plot", action="store_true", help="Write PNG plots")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def config_from_args(args):
    """Apply command-line overrides to the default configuration."""
    from .core.config import SimulationConfig

    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.prey is not None:
        overrides["preyCount"] = args.prey
    if args.predators is not None:
        overrides["predatorCount"] = args.predators
    if args.manual:
        overrides["manualControl"] = True
    if args.grid:
        overrides["useSpatialGrid"] = True
    return SimulationConfig(**overrides)


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    config = config_from_args(args)

    if args.headless:
        run_headless(config, frames=args.frames, trials=args.trials,
                     export=args.export, plot=args.plot)
    else:
        run_interactive(config)


if __name__ == "__main__":
    main()
