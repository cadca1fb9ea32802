"""Two-dimensional vector arithmetic and distance constraints."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector:
        """Scale by 1/scalar; dividing by zero leaves the vector unchanged."""
        if scalar == 0:
            return self
        return Vector(self.x / scalar, self.y / scalar)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def set_mag(self, new_mag: float) -> Vector:
        """Return a vector in the same direction with the given length."""
        return self.normalize() * new_mag

    def distance(self, other: Vector) -> float:
        return (self - other).magnitude()

    def distance_squared(self, other: Vector) -> float:
        return (self - other).magnitude_squared()

    def normalize(self) -> Vector:
        """Return the unit vector in this direction, or zero for a zero vector."""
        mag = self.magnitude()
        if mag == 0:
            return Vector(0.0, 0.0)
        return self / mag

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        return self.x * other.y - self.y * other.x

    def angle(self) -> float:
        """Heading of the vector in radians."""
        return math.atan2(self.y, self.x)

    def rotate(self, angle: float) -> Vector:
        cos = math.cos(angle)
        sin = math.sin(angle)
        return Vector(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def lerp(self, other: Vector, t: float) -> Vector:
        """Linear interpolation towards other by fraction t."""
        return Vector(self.x + t * (other.x - self.x), self.y + t * (other.y - self.y))

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f})"


def from_angle(angle: float) -> Vector:
    """Unit vector pointing at the given angle in radians."""
    return Vector(math.cos(angle), math.sin(angle))


def constrain_distance(p1: Vector, p2: Vector, min_dist: float, max_dist: float) -> Vector:
    """Move p2 so that its distance from p1 lies within [min_dist, max_dist]."""
    diff = p2 - p1
    dist = diff.magnitude()

    if dist == 0:
        return p1 + Vector(min_dist, 0.0)
    if dist > max_dist:
        return p1 + diff.normalize() * max_dist
    if dist < min_dist:
        return p1 + diff.normalize() * min_dist
    return p2


def constrain_distance_symmetric(
    p1: Vector, p2: Vector, min_dist: float, max_dist: float
) -> tuple[Vector, Vector]:
    """Adjust the distance between two points while keeping their midpoint fixed."""
    center = (p1 + p2) / 2
    diff = p2 - p1
    dist = diff.magnitude()

    if dist == 0:
        half = min_dist / 2
        return center + Vector(-half, 0.0), center + Vector(half, 0.0)

    normalized = diff.normalize()
    if dist > max_dist:
        half = max_dist / 2
    elif dist < min_dist:
        half = min_dist / 2
    else:
        return p1, p2
    return center - normalized * half, center + normalized * half


def vector_demo() -> None:
    """Print a short demonstration of the vector utilities."""
    print("Vector Animation Utilities Demo")
    print("=================================")

    v1 = Vector(3, 4)
    v2 = Vector(1, 2)

    print(f"v1: {v1}")
    print(f"v2: {v2}")
    print(f"v1 + v2: {v1 + v2}")
    print(f"v1 - v2: {v1 - v2}")
    print(f"v1 magnitude: {v1.magnitude():.2f}")
    print(f"Distance between v1 and v2: {v1.distance(v2):.2f}")
    print(f"v1 normalized: {v1.normalize()}")

    print("\nDistance Constraint Demo:")
    print("========================")

    p1 = Vector(0, 0)
    p2 = Vector(10, 0)
    print(f"Original points: p1={p1}, p2={p2}, distance={p1.distance(p2):.2f}")

    constrained = constrain_distance(p1, p2, 3, 6)
    print(f"Constrained p2: {constrained}, new distance={p1.distance(constrained):.2f}")

    p3 = Vector(-2, 0)
    p4 = Vector(2, 0)
    print(f"\nSymmetric constraint: p3={p3}, p4={p4}, distance={p3.distance(p4):.2f}")

    new_p3, new_p4 = constrain_distance_symmetric(p3, p4, 6, 10)
    print(
        f"After symmetric constraint: p3={new_p3}, p4={new_p4}, "
        f"distance={new_p3.distance(new_p4):.2f}"
    )