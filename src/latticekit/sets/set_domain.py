"""Domain view restricted to the points of a digital set."""

from collections.abc import Iterator

from latticekit.domain import Point
from latticekit.sets.base import DigitalSet


class DigitalSetDomain:
    """Domain whose points are exactly those of a digital set.

    The view references the set without copying it: iteration reports the
    set's current points in the set's native order, and the set must outlive
    the view. Mutating the set during an iteration is not supported.

    lower_bound and upper_bound are those of the set's governing domain, not
    the tight box of the current contents (see bounding_box() for that).
    Stable bounds keep views composable: a set built over a DigitalSetDomain
    has the same bounds as the set underneath.
    """

    def __init__(self, digital_set: DigitalSet) -> None:
        self._set = digital_set

    @property
    def digital_set(self) -> DigitalSet:
        return self._set

    @property
    def lower_bound(self) -> Point:
        return self._set.domain.lower_bound

    @property
    def upper_bound(self) -> Point:
        return self._set.domain.upper_bound

    @property
    def dimension(self) -> int:
        return self._set.domain.dimension

    def extent(self) -> Point:
        """Per-axis span of the bounds."""
        lower, upper = self.lower_bound, self.upper_bound
        return upper - lower + Point.diagonal(1, lower.dimension)

    def bounding_box(self) -> tuple[Point, Point] | None:
        """Tight bounding box of the current points, None when empty."""
        return self._set.compute_bounding_box()

    def size(self) -> int:
        return len(self._set)

    def __len__(self) -> int:
        return len(self._set)

    def is_inside(self, point: Point) -> bool:
        return point in self._set

    def __contains__(self, point: object) -> bool:
        return point in self._set

    def __iter__(self) -> Iterator[Point]:
        return iter(self._set)

    def is_valid(self) -> bool:
        return self._set.is_valid()

    def self_display(self) -> str:
        return (
            f"[DigitalSetDomain] {self.lower_bound} .. {self.upper_bound} "
            f"over {type(self._set).__name__} (size {len(self._set)})"
        )

    def __str__(self) -> str:
        return self.self_display()
