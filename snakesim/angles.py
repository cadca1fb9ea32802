"""Angle normalisation and constraint helpers."""

import math

TWO_PI = 2 * math.pi


def simplify_angle(angle: float) -> float:
    """Bring an angle into the range [0, 2*pi)."""
    return angle % TWO_PI


def relative_angle_diff(angle: float, anchor: float) -> float:
    """Radians needed to turn the angle to match the anchor."""
    return math.pi - simplify_angle(angle + math.pi - anchor)


def constrain_angle(angle: float, anchor: float, constraint: float) -> float:
    """Keep an angle within constraint radians of the anchor."""
    diff = relative_angle_diff(angle, anchor)
    if abs(diff) <= constraint:
        return simplify_angle(angle)
    if diff > constraint:
        return simplify_angle(anchor - constraint)
    return simplify_angle(anchor + constraint)