"""
Geometric Primitives for the design surface.
All coordinates are surface-local pixels; the origin is the top-left corner
and the y axis points down.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union
import numpy as np

Number = Union[int, float]


def as_number(value: object) -> Number:
    """Convert a numpy scalar (or any real) back into a plain int/float."""
    if hasattr(value, "item"):
        value = value.item()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a number, got {value!r}")
    return value


@dataclass(frozen=True)
class Vector:
    """
    A displacement in surface space (e.g. a pointer delta).
    """
    x: Number
    y: Number

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)


@dataclass(frozen=True)
class Point:
    """A location on the design surface."""
    x: Number
    y: Number

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector or Point from a Point.")


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""
    x: Number
    y: Number
    width: Number
    height: Number

    @classmethod
    def from_corners(cls, start: Point, end: Point) -> Rect:
        """
        Normalize two drag corners into a rectangle.

        The result does not depend on the drag direction: the origin is the
        min corner and the size is the absolute difference on each axis.
        """
        corners = np.array([[start.x, start.y], [end.x, end.y]])
        origin = corners.min(axis=0)
        size = np.abs(corners[1] - corners[0])
        return cls(
            x=as_number(origin[0]),
            y=as_number(origin[1]),
            width=as_number(size[0]),
            height=as_number(size[1]),
        )

    def exceeds(self, threshold: Number) -> bool:
        """True when both sides are strictly larger than `threshold`."""
        return self.width > threshold and self.height > threshold

    def contains(self, point: Point) -> bool:
        return (self.x <= point.x <= self.x + self.width
                and self.y <= point.y <= self.y + self.height)
