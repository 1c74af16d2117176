"""
Predator/prey flocking simulation on a toroidal plane.
"""

__version__ = "0.1.0"
