"""
Simulation module containing the tick orchestrator and the interactive and
headless runners.
"""

from .tick import TickResult, CreatureView, RenderState, advance_simulation, render_state
from .population import create_population, assign_manual_control
from .headless import HeadlessSimulation
from .interactive import Simulation

__all__ = [
    'TickResult', 'CreatureView', 'RenderState', 'advance_simulation', 'render_state',
    'create_population', 'assign_manual_control',
    'HeadlessSimulation', 'Simulation',
]
