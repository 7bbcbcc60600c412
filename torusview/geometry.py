"""Small 3D vector helpers used by the torus renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point3D:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point3D) -> Point3D:
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Point3D:
        return Point3D(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def dot(self, other: Point3D) -> float:
        """Scalar product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Point3D) -> Point3D:
        """Vector product with another vector."""
        return Point3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.dot(self))


VIEW_DIRECTION = Point3D(0.0, 0.0, -1.0)


def calculate_normal(p1: Point3D, p2: Point3D, p3: Point3D) -> Point3D:
    """Return the (unnormalised) normal of the triangle p1, p2, p3."""
    return (p2 - p1).cross(p3 - p1)


def normalize(vector: Point3D) -> Point3D:
    """Return the vector scaled to unit length; a zero vector is returned as is."""
    length = vector.length()
    if length > 0:
        return Point3D(vector.x / length, vector.y / length, vector.z / length)
    return vector


def is_face_visible(p1: Point3D, p2: Point3D, p3: Point3D) -> bool:
    """Tell whether the face spanned by the three points faces the viewer."""
    normal = normalize(calculate_normal(p1, p2, p3))
    return normal.dot(VIEW_DIRECTION) < 0