"""
Creature classes for the predator/prey simulation.
"""

from .base import Creature
from .prey import Prey
from .predator import Predator

__all__ = ['Creature', 'Prey', 'Predator']
