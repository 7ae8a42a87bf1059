"""Where a point lies relative to a circle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0


class Placement(Enum):
    """Position of a point relative to a circle, valued by its report suffix."""

    INSIDE = "在圆内!"
    OUTSIDE = "在圆外!"
    ON = "在圆上!"


@dataclass
class Circle:
    center: Point
    radius: int

    def locate(self, point: Point) -> Placement:
        dx = point.x - self.center.x
        dy = point.y - self.center.y
        distance = dx * dx + dy * dy
        limit = self.radius * self.radius
        if distance < limit:
            return Placement.INSIDE
        if distance > limit:
            return Placement.OUTSIDE
        return Placement.ON

    def describe(self, point: Point) -> str:
        """Return the report line for the point."""
        return f"Point({point.x},{point.y}){self.locate(point).value}"


def main(argv: list[str] | None = None) -> int:
    """Report where (25, 20) lies relative to the circle at (20, 20), radius 5."""
    circle = Circle(Point(20, 20), 5)
    print(circle.describe(Point(25, 20)))
    return 0