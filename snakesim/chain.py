"""A chain of joints that follows a target with limited bending."""

from __future__ import annotations

from .angles import constrain_angle
from .vector import Vector, from_angle

_SMOOTHING = 0.1


class Chain:
    """Joints spaced link_size apart; adjacent angles differ by at most angle_constraint."""

    def __init__(
        self, origin: Vector, joint_count: int, link_size: int, angle_constraint: float
    ) -> None:
        self.link_size = link_size
        self.angle_constraint = angle_constraint
        self.joints: list[Vector] = [origin]
        self.angles: list[float] = [0.0]
        step = Vector(0.0, float(link_size))
        for _ in range(1, joint_count):
            self.joints.append(self.joints[-1] + step)
            self.angles.append(0.0)

    def resolve(self, pos: Vector) -> None:
        """Ease the head towards pos and drag the rest of the chain after it."""
        self.joints[0] = self.joints[0].lerp(pos, _SMOOTHING)
        self.angles[0] = (pos - self.joints[0]).angle()

        for i in range(1, len(self.joints)):
            previous = self.joints[i - 1]
            current_angle = (previous - self.joints[i]).angle()
            self.angles[i] = constrain_angle(
                current_angle, self.angles[i - 1], self.angle_constraint
            )
            self.joints[i] = previous - from_angle(self.angles[i]).set_mag(float(self.link_size))

    def delete_joint(self) -> None:
        """Drop the tail joint, keeping at least three joints."""
        if len(self.joints) > 3:
            self.joints.pop()
            self.angles.pop()
            self.resolve(self.joints[0])

    def add_joint(self) -> None:
        """Extend the tail by one link in the direction the chain points."""
        last = self.joints[-1]
        if len(self.joints) == 1:
            new_joint = last + Vector(0.0, float(self.link_size))
        else:
            direction = (last - self.joints[-2]).normalize()
            new_joint = last + direction.set_mag(float(self.link_size))

        self.joints.append(new_joint)
        self.angles.append(self.angles[-1])
        self.resolve(self.joints[0])