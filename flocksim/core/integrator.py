"""
Turn-rate-limited heading integration shared by every creature.
"""

from enum import Enum
from typing import Optional, Tuple

import pygame

from .geometry import clamp, direction, normalize_angle, signed_angle_diff
from .world import World


class ManualCommand(Enum):
    """Discrete per-tick steering command for the manually controlled prey."""

    NONE = "none"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"


def integrate(heading: float, desired_heading: float, max_turn_angle: float,
              speed: float, position: pygame.Vector2, world: World) -> Tuple[float, pygame.Vector2]:
    """
    Rotate toward a desired heading, then advance one step.

    The rotation applied is the smallest signed angle to the desired
    heading, clamped to +/- max_turn_angle. The creature then moves
    speed units along its new heading and wraps onto the torus.

    Args:
        heading: Current heading in radians
        desired_heading: Heading the creature wants to face
        max_turn_angle: Largest rotation allowed this tick
        speed: Distance travelled per tick
        position: Current position
        world: Torus used to wrap the new position

    Returns:
        Tuple of (new heading in (-pi, pi], new wrapped position)
    """
    delta = signed_angle_diff(heading, desired_heading)
    applied = clamp(delta, -max_turn_angle, max_turn_angle)
    new_heading = normalize_angle(heading + applied)
    new_velocity = direction(new_heading) * speed
    new_position = world.wrap(position + new_velocity)
    return new_heading, new_position


def manual_desired_heading(heading: float, command: ManualCommand,
                           increment: float) -> Optional[float]:
    """
    Translate a manual command into a desired heading.

    Screen coordinates have y pointing down, so turning left decreases
    the angle.

    Returns:
        Desired heading, or None when no command is active and automatic
        steering should apply
    """
    if command is ManualCommand.TURN_LEFT:
        return heading - increment
    if command is ManualCommand.TURN_RIGHT:
        return heading + increment
    return None
