"""Plan and elevation geometry.

Plan coordinates are (x, y) on the level; z is elevation. Inches throughout.
"""

from __future__ import annotations
import math
from pydantic import BaseModel


class Vector2D(BaseModel):
    x: float
    y: float

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def unit(self) -> Vector2D:
        """Same heading, length 1. A zero vector stays zero."""
        ln = self.length()
        if ln == 0.0:
            return Vector2D(x=0.0, y=0.0)
        return Vector2D(x=self.x / ln, y=self.y / ln)

    def heading(self) -> float:
        """Radians counterclockwise from +x."""
        return math.atan2(self.y, self.x)


class Point2D(BaseModel):
    """Point on the level plan."""
    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def offset(self, direction: Vector2D, distance: float) -> Point2D:
        return Point2D(
            x=self.x + direction.x * distance,
            y=self.y + direction.y * distance,
        )

    def at_elevation(self, z: float) -> Point3D:
        return Point3D(x=self.x, y=self.y, z=z)


class Point3D(BaseModel):
    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> Point3D:
        return cls(x=0.0, y=0.0, z=0.0)


def direction_from_points(start: Point2D, end: Point2D) -> Vector2D:
    """Unit vector pointing from start to end."""
    return Vector2D(x=end.x - start.x, y=end.y - start.y).unit()
