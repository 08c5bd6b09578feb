"""Lattice point type.

This module defines the N-dimensional integer point used throughout LatticeKit.
Points compare lexicographically with the first axis most significant, which is
also the order in which hyper-rectangular domains enumerate their points.
"""

import math
import operator
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from latticekit.exceptions import DimensionMismatchError


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """A point of the integer lattice Z^n.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        coords: Integer coordinates, one per axis
    """

    coords: tuple[int, ...]

    def __post_init__(self) -> None:
        # operator.index rejects floats instead of truncating them
        coords = tuple(operator.index(c) for c in self.coords)
        object.__setattr__(self, "coords", coords)

    @classmethod
    def of(cls, *coords: int) -> "Point":
        """Build a point from its coordinates.

        Example:
            >>> Point.of(1, 2, 3)
            Point(coords=(1, 2, 3))
        """
        return cls(coords)

    @classmethod
    def zero(cls, dimension: int) -> "Point":
        """Origin of Z^dimension."""
        return cls._wrap((0,) * dimension)

    @classmethod
    def diagonal(cls, value: int, dimension: int) -> "Point":
        """Point with every coordinate equal to value."""
        return cls._wrap((int(value),) * dimension)

    @classmethod
    def _wrap(cls, coords: tuple[int, ...]) -> "Point":
        # Fast path for tuples already known to hold ints (domain iteration).
        point = object.__new__(cls)
        object.__setattr__(point, "coords", coords)
        return point

    @property
    def dimension(self) -> int:
        """Number of axes."""
        return len(self.coords)

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[int]:
        return iter(self.coords)

    def __getitem__(self, axis: int) -> int:
        return self.coords[axis]

    def __add__(self, other: "Point") -> "Point":
        self._check_dimension(other)
        return Point._wrap(tuple(a + b for a, b in zip(self.coords, other.coords)))

    def __sub__(self, other: "Point") -> "Point":
        self._check_dimension(other)
        return Point._wrap(tuple(a - b for a, b in zip(self.coords, other.coords)))

    def __neg__(self) -> "Point":
        return Point._wrap(tuple(-c for c in self.coords))

    def __str__(self) -> str:
        return "(" + ", ".join(str(c) for c in self.coords) + ")"

    def norm(self) -> float:
        """Euclidean norm of the point seen as a vector."""
        return math.hypot(*self.coords)

    def inf(self, other: "Point") -> "Point":
        """Componentwise minimum."""
        self._check_dimension(other)
        return Point._wrap(tuple(map(min, self.coords, other.coords)))

    def sup(self, other: "Point") -> "Point":
        """Componentwise maximum."""
        self._check_dimension(other)
        return Point._wrap(tuple(map(max, self.coords, other.coords)))

    def is_lower_or_equal(self, other: "Point") -> bool:
        """True if every coordinate is <= the matching coordinate of other."""
        self._check_dimension(other)
        return all(a <= b for a, b in zip(self.coords, other.coords))

    def to_tuple(self) -> tuple[int, ...]:
        """Convert to a plain coordinate tuple."""
        return self.coords

    def _check_dimension(self, other: "Point") -> None:
        if len(other.coords) != len(self.coords):
            raise DimensionMismatchError(len(self.coords), len(other.coords))


def as_point(value: "Point | Iterable[int]") -> Point:
    """Coerce a point or a coordinate iterable to a Point."""
    if isinstance(value, Point):
        return value
    return Point(tuple(value))
