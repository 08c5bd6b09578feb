"""Common contract of digital set containers.

A digital set is a mutable collection of unique lattice points bound to a
governing domain. Every variant offers the same set semantics; they differ in
the cost of insert, insert_new, erase and membership tests, and in their native
iteration order (only the order differs, never the reported points).

The governing domain is referenced, not owned: it must outlive the set.
Mutating a set while iterating over it, or over a view of it, is not supported.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from itertools import islice
from typing import TypeVar

from latticekit.domain import Domain, Point

DigitalSetT = TypeVar("DigitalSetT", bound="DigitalSet")

# Number of points shown by self_display()
DISPLAY_LIMIT = 8


class DigitalSet(ABC):
    """Abstract digital set over a governing domain.

    Subclasses implement storage; this class provides the operations that can
    be expressed through the storage primitives.
    """

    def __init__(self, domain: Domain) -> None:
        self._domain = domain

    @property
    def domain(self) -> Domain:
        """Governing domain the set was created over."""
        return self._domain

    # ----------------------------------------------------------------- storage

    @abstractmethod
    def insert(self, point: Point) -> None:
        """Add point if absent; no-op otherwise."""

    @abstractmethod
    def insert_new(self, point: Point) -> None:
        """Add a point the caller guarantees is not already present.

        Skips the duplicate check where the variant has one to skip. Breaking
        the precondition is a caller error whose outcome depends on the variant.
        """

    @abstractmethod
    def erase(self, point: Point) -> None:
        """Remove point if present; no-op otherwise."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every point."""

    @abstractmethod
    def __contains__(self, point: object) -> bool: ...

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __iter__(self) -> Iterator[Point]: ...

    # ----------------------------------------------------------------- derived

    def contains(self, point: Point) -> bool:
        """Membership test."""
        return point in self

    is_inside = contains

    def size(self) -> int:
        """Current cardinality."""
        return len(self)

    def is_empty(self) -> bool:
        return len(self) == 0

    def insert_all(self, points: Iterable[Point]) -> None:
        for point in points:
            self.insert(point)

    def insert_new_all(self, points: Iterable[Point]) -> None:
        """insert_new() for each point; points must be distinct and absent."""
        for point in points:
            self.insert_new(point)

    def erase_all(self, points: Iterable[Point]) -> None:
        for point in points:
            self.erase(point)

    def update(self, other: Iterable[Point]) -> None:
        """In-place union with another set or point iterable."""
        self.insert_all(other)

    def __ior__(self: DigitalSetT, other: Iterable[Point]) -> DigitalSetT:
        self.update(other)
        return self

    def same_points(self, other: "DigitalSet") -> bool:
        """True if both sets report the same points, whatever their order."""
        return len(self) == len(other) and all(p in other for p in self)

    def compute_bounding_box(self) -> tuple[Point, Point] | None:
        """Tight bounding box of the contents, or None for an empty set."""
        it = iter(self)
        first = next(it, None)
        if first is None:
            return None
        lower = upper = first
        for point in it:
            lower = lower.inf(point)
            upper = upper.sup(point)
        return lower, upper

    def copy(self: DigitalSetT) -> DigitalSetT:
        """New set of the same variant over the same domain."""
        other = type(self)(self._domain)
        other.insert_new_all(self)
        return other

    def complement(self: DigitalSetT) -> DigitalSetT:
        """New set holding the domain points absent from this set."""
        other = type(self)(self._domain)
        other.assign_from_complement(self)
        return other

    def assign_from_complement(self, other: "DigitalSet") -> None:
        """Replace the contents by the domain points absent from other."""
        if other is self:
            other = self.copy()
        self.clear()
        for point in self._domain:
            if point not in other:
                self.insert_new(point)

    def is_valid(self) -> bool:
        """Structural check: no duplicates, all points inside the domain.

        Returns False rather than raising, for diagnostic use.
        """
        seen: set[Point] = set()
        count = 0
        for point in self:
            if point in seen or not self._domain.is_inside(point):
                return False
            seen.add(point)
            count += 1
        return count == len(self)

    def self_display(self) -> str:
        """Human-readable summary with the size and the first points."""
        shown = [str(p) for p in islice(self, DISPLAY_LIMIT)]
        if len(self) > DISPLAY_LIMIT:
            shown.append("...")
        return f"[{type(self).__name__}] size={len(self)} {{{' '.join(shown)}}}"

    def __str__(self) -> str:
        return self.self_display()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(domain={self._domain!r}, size={len(self)})"
