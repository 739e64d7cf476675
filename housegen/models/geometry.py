"""Geometric primitives used throughout the generator."""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point3D(BaseModel):
    """Point in model space (internal units, Z up)."""
    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def midpoint(self, other: Point3D) -> Point3D:
        return (self + other) / 2

    def translated(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> Point3D:
        return Point3D(x=self.x + dx, y=self.y + dy, z=self.z + dz)

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __truediv__(self, scalar: float) -> Point3D:
        return Point3D(x=self.x / scalar, y=self.y / scalar, z=self.z / scalar)


class Vector3D(BaseModel):
    """Direction vector in model space."""
    x: float
    y: float
    z: float

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3D:
        ln = self.length()
        if ln < 1e-10:
            return Vector3D(x=0.0, y=0.0, z=0.0)
        return Vector3D(x=self.x / ln, y=self.y / ln, z=self.z / ln)

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            x=self.y * other.z - self.z * other.y,
            y=self.z * other.x - self.x * other.z,
            z=self.x * other.y - self.y * other.x,
        )


WORLD_UP = Vector3D(x=0.0, y=0.0, z=1.0)
WORLD_Y = Vector3D(x=0.0, y=1.0, z=0.0)


class Segment(BaseModel):
    """Bound line from `start` to `end`."""
    start: Point3D
    end: Point3D

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def midpoint(self) -> Point3D:
        return self.start.midpoint(self.end)

    def direction(self) -> Vector3D:
        """Unit vector from start to end."""
        return direction_from_points(self.start, self.end).normalized()


def direction_from_points(start: Point3D, end: Point3D) -> Vector3D:
    """Get direction vector from start to end."""
    return Vector3D(x=end.x - start.x, y=end.y - start.y, z=end.z - start.z)
