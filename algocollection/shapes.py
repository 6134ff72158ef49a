"""Rectangles and cuboids with integer dimensions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle; both sides default to 1."""

    length: int = 1
    breadth: int = 1

    def area(self) -> int:
        """Return length times breadth."""
        return self.length * self.breadth

    def perimeter(self) -> int:
        """Return the length of the boundary."""
        return 2 * (self.length + self.breadth)

    def is_square(self) -> bool:
        """Return True when both sides are equal."""
        return self.length == self.breadth


@dataclass(init=False)
class Cuboid(Rectangle):
    """A rectangle given a height; the base defaults to 1 by 1."""

    height: int = 1

    def __init__(self, height: int, length: int = 1, breadth: int = 1) -> None:
        super().__init__(length, breadth)
        self.height = height

    def volume(self) -> int:
        """Return length times breadth times height."""
        return self.length * self.breadth * self.height