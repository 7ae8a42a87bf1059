"""Rectangular boxes: surface area, volume and comparison."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Cuboid:
    """A box with integer length, width and height."""

    length: int = 0
    width: int = 0
    height: int = 0

    def surface_area(self) -> int:
        return (
            self.length * self.width
            + self.length * self.height
            + self.width * self.height
        ) * 2

    def volume(self) -> int:
        return self.length * self.width * self.height

    def same_as(self, other: Cuboid) -> bool:
        """True when every dimension matches the other box's."""
        return (
            self.length == other.length
            and self.width == other.width
            and self.height == other.height
        )


def cuboids_equal(first: Cuboid, second: Cuboid) -> bool:
    """True when the two boxes have the same dimensions."""
    return first.same_as(second)


def main(argv: list[str] | None = None) -> int:
    """Print area and volume of two boxes and compare them both ways."""
    c1 = Cuboid(10, 20, 30)
    c2 = Cuboid(20, 20, 30)
    print(f"c1面积:{c1.surface_area()} 体积:{c1.volume()}")
    print(f"c2面积:{c2.surface_area()} 体积:{c2.volume()}")
    for equal in (cuboids_equal(c1, c2), c1.same_as(c2)):
        print("c1和c2相等!" if equal else "c1和c2不相等!")
    return 0