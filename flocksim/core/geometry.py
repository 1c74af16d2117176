"""
Vector and angle primitives for toroidal 2D space.

Vectors are pygame.Vector2 values. None of the helpers here mutate their
arguments; every operation hands back a new vector.
"""

import math

import pygame


TWO_PI = 2 * math.pi

# Squared length below which a vector is treated as having no direction
EPSILON_SQ = 1e-12


def direction(angle: float) -> pygame.Vector2:
    """
    Unit vector pointing along an angle.

    Args:
        angle: Angle in radians

    Returns:
        Unit-length Vector2
    """
    return pygame.Vector2(math.cos(angle), math.sin(angle))


def angle_of(vector: pygame.Vector2) -> float:
    """Angle of a vector in radians, in (-pi, pi]."""
    return normalize_angle(math.atan2(vector.y, vector.x))


def normalize_angle(angle: float) -> float:
    """
    Reduce an angle into (-pi, pi].

    Args:
        angle: Any finite angle in radians

    Returns:
        Equivalent angle in the half-open range (-pi, pi]
    """
    reduced = math.fmod(angle + math.pi, TWO_PI)
    if reduced <= 0:
        reduced += TWO_PI
    return reduced - math.pi


def signed_angle_diff(from_angle: float, to_angle: float) -> float:
    """Smallest signed rotation taking from_angle onto to_angle."""
    return normalize_angle(to_angle - from_angle)


def safe_normalize(vector: pygame.Vector2) -> pygame.Vector2:
    """
    Scale a vector to unit length.

    Args:
        vector: Vector to normalize

    Returns:
        Unit vector, or the zero vector when the input has no direction
    """
    length_sq = vector.length_squared()
    if length_sq < EPSILON_SQ:
        return pygame.Vector2(0, 0)
    return vector / math.sqrt(length_sq)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def wrap_coordinate(value: float, bound: float) -> float:
    """
    True modulo of a coordinate into [0, bound).

    Python's float modulo can round a tiny negative value up to exactly
    bound, which is folded back to 0.
    """
    wrapped = value % bound
    if wrapped >= bound:
        wrapped = 0.0
    return wrapped


def shortest_axis_delta(a: float, b: float, bound: float) -> float:
    """Minimal signed displacement from a to b on a circle of length bound."""
    diff = b - a
    if abs(diff) > bound / 2:
        diff -= math.copysign(bound, diff)
    return diff
