"""
Export functions for saving simulation results to CSV and JSON.
"""

import csv
import json
from typing import Any, Dict, List


def export_results_to_csv(results: List[Dict], filename: str = "simulation_results.csv") -> str:
    """
    Export one row per trial to CSV.

    Args:
        results: Result dictionaries from HeadlessSimulation.get_results()
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    fieldnames = ['simulation_id', 'seed', 'frames', 'prey_caught', 'first_capture_frame',
                  'avg_polarization', 'avg_flock_size', 'final_prey_count']

    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames)
        writer.writeheader()

        for trial, result in enumerate(results, start=1):
            writer.writerow({
                'simulation_id': f"trial{trial}",
                'seed': result['seed'],
                'frames': result['frames'],
                'prey_caught': result['total_captures'],
                'first_capture_frame': result['first_capture_frame'] if result['first_capture_frame'] is not None else '',
                'avg_polarization': f"{result['avg_polarization']:.4f}",
                'avg_flock_size': f"{result['avg_flock_size']:.2f}",
                'final_prey_count': result['final_prey_count'],
            })

    print(f"\nCSV results saved to: {filename}")
    return filename


def export_timeseries_to_csv(result: Dict, filename: str = "simulation_timeseries.csv") -> str:
    """
    Export the sampled time series of a single run to CSV.

    Args:
        result: Result dictionary from HeadlessSimulation.get_results()
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    population = {e["frame"]: e for e in result["population_over_time"]}
    polar = {e["frame"]: e["polarization"] for e in result["polarization_over_time"]}
    sizes = {e["frame"]: e["flock_size"] for e in result["flock_size_over_time"]}

    with open(filename, 'w', newline='') as csvfile:
        fieldnames = ['frame', 'prey_count', 'captures', 'polarization', 'flock_size']
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames)
        writer.writeheader()

        for frame in sorted(population):
            writer.writerow({
                'frame': frame,
                'prey_count': population[frame]['prey_count'],
                'captures': population[frame]['captures'],
                'polarization': f"{polar[frame]:.4f}" if frame in polar else '',
                'flock_size': f"{sizes[frame]:.2f}" if frame in sizes else '',
            })

    print(f"  Time series saved to: {filename}")
    return filename


def export_report(results: Dict[str, Any], filename: str = "simulation_report.json") -> str:
    """
    Export a full report to JSON.

    Args:
        results: Report dictionary
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(results, f, indent=2)

    print(f"\nReport saved to: {filename}")
    return filename
