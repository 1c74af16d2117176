"""
Analysis module for metrics, plotting and exporting simulation results.
"""

from .metrics import polarization, mean_flock_size, nearest_predator_distance, aggregate_stats
from .plotting import plot_population, plot_polarization
from .export import export_results_to_csv, export_timeseries_to_csv, export_report

__all__ = [
    'polarization',
    'mean_flock_size',
    'nearest_predator_distance',
    'aggregate_stats',
    'plot_population',
    'plot_polarization',
    'export_results_to_csv',
    'export_timeseries_to_csv',
    'export_report',
]
