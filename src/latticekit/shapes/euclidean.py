"""Euclidean shapes answering point membership.

Shapes are defined in continuous space but queried at lattice points; any
object with an is_inside(point) method can take part in the boolean adapters.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from latticekit.domain import Point, Shape


class EuclideanShape:
    """Base class giving shapes the |, & and - operators."""

    def is_inside(self, point: Point) -> bool:
        raise NotImplementedError

    def __or__(self, other: Shape) -> "ShapeUnion":
        return ShapeUnion(self, other)

    def __and__(self, other: Shape) -> "ShapeIntersection":
        return ShapeIntersection(self, other)

    def __sub__(self, other: Shape) -> "ShapeMinus":
        return ShapeMinus(self, other)

    def is_valid(self) -> bool:
        return True

    def self_display(self) -> str:
        return f"[{type(self).__name__}]"

    def __str__(self) -> str:
        return self.self_display()


@dataclass(frozen=True, eq=False)
class Ball(EuclideanShape):
    """Open ball: points at distance strictly less than radius from center.

    Attributes:
        center: Real coordinates of the center
        radius: Radius, expected positive
    """

    center: Sequence[float]
    radius: float

    def is_inside(self, point: Point) -> bool:
        return math.dist(point.coords, self.center) < self.radius

    def is_valid(self) -> bool:
        return self.radius > 0

    def self_display(self) -> str:
        return f"[Ball] center={tuple(self.center)} radius={self.radius}"


@dataclass(frozen=True, eq=False)
class Box(EuclideanShape):
    """Closed axis-aligned box [lower, upper] in real coordinates."""

    lower: Sequence[float]
    upper: Sequence[float]

    def is_inside(self, point: Point) -> bool:
        return all(lo <= c <= hi for lo, c, hi in zip(self.lower, point.coords, self.upper))

    def is_valid(self) -> bool:
        return len(self.lower) == len(self.upper) and all(
            lo <= hi for lo, hi in zip(self.lower, self.upper)
        )

    def self_display(self) -> str:
        return f"[Box] {tuple(self.lower)} .. {tuple(self.upper)}"


class _ShapePair(EuclideanShape):
    """Boolean combination of two shapes, referenced not copied."""

    symbol = "?"

    def __init__(self, shape_a: Shape, shape_b: Shape) -> None:
        self.shape_a = shape_a
        self.shape_b = shape_b

    def is_valid(self) -> bool:
        return all(
            getattr(shape, "is_valid", lambda: True)()
            for shape in (self.shape_a, self.shape_b)
        )

    def self_display(self) -> str:
        return f"[{type(self).__name__}] ({self.shape_a}) {self.symbol} ({self.shape_b})"


class ShapeUnion(_ShapePair):
    """Points inside either shape."""

    symbol = "|"

    def is_inside(self, point: Point) -> bool:
        return self.shape_a.is_inside(point) or self.shape_b.is_inside(point)


class ShapeIntersection(_ShapePair):
    """Points inside both shapes."""

    symbol = "&"

    def is_inside(self, point: Point) -> bool:
        return self.shape_a.is_inside(point) and self.shape_b.is_inside(point)


class ShapeMinus(_ShapePair):
    """Points inside the first shape and outside the second."""

    symbol = "-"

    def is_inside(self, point: Point) -> bool:
        return self.shape_a.is_inside(point) and not self.shape_b.is_inside(point)
