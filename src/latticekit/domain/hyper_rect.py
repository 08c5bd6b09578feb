"""Axis-aligned hyper-rectangular domains.

A HyperRectDomain is the inclusive lattice box between two corner points. It
enumerates its points lexicographically with the first axis most significant
(the last axis varies fastest). Every consumer in LatticeKit relies on this
order: the linear offsets used by bitmap sets follow it, and it coincides with
the ordering of Point, so sorted containers iterate in domain order.
"""

import itertools
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from latticekit.domain.point import Point, as_point
from latticekit.exceptions import DimensionMismatchError, InvalidBoundsError


@dataclass(frozen=True, slots=True)
class HyperRectDomain:
    """Inclusive lattice box [lower, upper].

    Bounds are expected to satisfy lower <= upper on every axis. Malformed
    bounds are not checked here: such a domain enumerates no point and
    reports is_valid() == False. Use HyperRectDomain.checked() to reject them.

    Attributes:
        lower: Lower corner, included
        upper: Upper corner, included
    """

    lower: Point
    upper: Point
    _shape: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lower = as_point(self.lower)
        upper = as_point(self.upper)
        if lower.dimension != upper.dimension:
            raise DimensionMismatchError(lower.dimension, upper.dimension)
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)
        object.__setattr__(
            self,
            "_shape",
            tuple(max(hi - lo + 1, 0) for lo, hi in zip(lower.coords, upper.coords)),
        )

    @classmethod
    def checked(
        cls, lower: Point | Iterable[int], upper: Point | Iterable[int]
    ) -> "HyperRectDomain":
        """Build a domain, raising InvalidBoundsError on malformed bounds."""
        domain = cls(as_point(lower), as_point(upper))
        if not domain.is_valid():
            raise InvalidBoundsError(domain.lower, domain.upper)
        return domain

    @property
    def lower_bound(self) -> Point:
        return self.lower

    @property
    def upper_bound(self) -> Point:
        return self.upper

    @property
    def dimension(self) -> int:
        return self.lower.dimension

    def extent(self) -> Point:
        """Number of lattice points along each axis (upper - lower + 1)."""
        return Point._wrap(
            tuple(hi - lo + 1 for lo, hi in zip(self.lower.coords, self.upper.coords))
        )

    def shape(self) -> tuple[int, ...]:
        """Extent as a plain tuple, clamped at zero for malformed bounds."""
        return self._shape

    def size(self) -> int:
        """Number of lattice points in the domain."""
        return math.prod(self.shape())

    def __len__(self) -> int:
        return self.size()

    def is_valid(self) -> bool:
        """True if lower <= upper on every axis."""
        return self.lower.is_lower_or_equal(self.upper)

    def is_inside(self, point: Point) -> bool:
        """True if the point lies in the box (bounds included)."""
        if point.dimension != self.dimension:
            return False
        return all(
            lo <= c <= hi
            for lo, c, hi in zip(self.lower.coords, point.coords, self.upper.coords)
        )

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point) and self.is_inside(point)

    def __iter__(self) -> Iterator[Point]:
        ranges = [
            range(lo, hi + 1) for lo, hi in zip(self.lower.coords, self.upper.coords)
        ]
        wrap = Point._wrap
        for coords in itertools.product(*ranges):
            yield wrap(coords)

    def offset(self, point: Point) -> int:
        """Linear index of an in-domain point, in iteration order.

        The point is assumed to be inside the domain; callers that cannot
        guarantee it must test is_inside() first.
        """
        index = 0
        for lo, c, e in zip(self.lower.coords, point.coords, self._shape):
            index = index * e + (c - lo)
        return index

    def point_at(self, offset: int) -> Point:
        """Inverse of offset()."""
        coords = []
        for lo, e in zip(reversed(self.lower.coords), reversed(self._shape)):
            offset, r = divmod(offset, e)
            coords.append(lo + r)
        return Point._wrap(tuple(reversed(coords)))

    def self_display(self) -> str:
        """Human-readable description for diagnostics."""
        return f"[HyperRectDomain] {self.lower} .. {self.upper} (extent {self.extent()})"

    def __str__(self) -> str:
        return self.self_display()
