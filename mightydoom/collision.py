"""World-space vectors and overlap tests on the floor plane."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector; y is up, the floor is the x/z plane."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


def check_overlap(a: Vec3, b: Vec3, min_distance: float) -> bool:
    """True if ``a`` and ``b`` are closer than ``min_distance`` on the floor."""
    dx = a.x - b.x
    dz = a.z - b.z
    return dx * dx + dz * dz < min_distance * min_distance