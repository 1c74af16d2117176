"""
Plotting functions for visualizing simulation results.
"""

from typing import Dict, List

try:
    import matplotlib.pyplot as plt
    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False


COLORS = ['#FF6B6B', '#4ECDC4', '#FFB347', '#95E1D3', '#A29BFE']


def plot_population(results: List[Dict], output_file: str = "prey_population.png") -> str:
    """
    Plot remaining prey over time, one line per trial.

    Args:
        results: Result dictionaries from HeadlessSimulation.get_results()
        output_file: Output filename for the plot

    Returns:
        Path to saved plot file, or "" when matplotlib is unavailable
    """
    if not MATPLOTLIB_AVAILABLE:
        print("Warning: matplotlib not available. Skipping plot.")
        return ""

    fig, ax = plt.subplots(figsize=(12, 7))

    for idx, result in enumerate(results):
        series = result["population_over_time"]
        frames = [d["frame"] for d in series]
        counts = [d["prey_count"] for d in series]
        color = COLORS[idx % len(COLORS)]
        ax.plot(frames, counts, label=f"Seed {result['seed']}", linewidth=2, color=color)
        if counts:
            ax.text(frames[-1], counts[-1], f' {counts[-1]}',
                    verticalalignment='center', fontsize=9, color=color)

    ax.set_xlabel('Frame Number', fontsize=12, fontweight='bold')
    ax.set_ylabel('Prey Remaining', fontsize=12, fontweight='bold')
    ax.set_title('Prey Population Under Predation', fontsize=14, fontweight='bold', pad=20)
    ax.legend(fontsize=11, loc='upper right', framealpha=0.9)
    ax.grid(True, alpha=0.3, linestyle='--')

    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"\nPlot saved to: {output_file}")
    return output_file


def plot_polarization(results: List[Dict], output_file: str = "flock_polarization.png") -> str:
    """
    Plot flock polarization and mean flock size over time.

    Args:
        results: Result dictionaries from HeadlessSimulation.get_results()
        output_file: Output filename for the plot

    Returns:
        Path to saved plot file, or "" when matplotlib is unavailable
    """
    if not MATPLOTLIB_AVAILABLE:
        print("Warning: matplotlib not available. Skipping plot.")
        return ""

    fig, (ax_polar, ax_size) = plt.subplots(2, 1, figsize=(12, 9), sharex=True)

    for idx, result in enumerate(results):
        color = COLORS[idx % len(COLORS)]
        polar = result["polarization_over_time"]
        sizes = result["flock_size_over_time"]
        ax_polar.plot([d["frame"] for d in polar], [d["polarization"] for d in polar],
                      label=f"Seed {result['seed']}", linewidth=2, color=color, alpha=0.8)
        ax_size.plot([d["frame"] for d in sizes], [d["flock_size"] for d in sizes],
                     linewidth=2, color=color, alpha=0.8)

    ax_polar.set_ylabel('Polarization', fontsize=10)
    ax_polar.set_ylim(0, 1.05)
    ax_polar.legend(fontsize=8, loc='lower right')
    ax_polar.grid(True, alpha=0.3, linestyle='--')

    ax_size.set_xlabel('Frame Number', fontsize=10)
    ax_size.set_ylabel('Mean flock neighbors', fontsize=10)
    ax_size.grid(True, alpha=0.3, linestyle='--')

    fig.suptitle('Flocking Over Time\n(1.0 = every prey heading the same way)',
                 fontsize=14, fontweight='bold')
    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"\nPolarization plot saved to: {output_file}")
    return output_file
