"""Digital set backed by a Python list."""

from collections.abc import Iterator
from contextlib import suppress

from latticekit.domain import Domain, Point
from latticekit.sets.base import DigitalSet


class DigitalSetBySequence(DigitalSet):
    """Digital set stored as a list, in insertion order.

    Minimal overhead for small sets. insert, erase and membership are O(n);
    insert_new is O(1) because it appends without looking for a duplicate.

    Calling insert_new with a point already present stores it twice: size()
    then over-counts and erase() removes a single copy. This is left unchecked
    so that bulk filling stays linear; use insert() when uniqueness is unknown.
    """

    def __init__(self, domain: Domain) -> None:
        super().__init__(domain)
        self._points: list[Point] = []

    def insert(self, point: Point) -> None:
        if point not in self._points:
            self._points.append(point)

    def insert_new(self, point: Point) -> None:
        self._points.append(point)

    def erase(self, point: Point) -> None:
        with suppress(ValueError):
            self._points.remove(point)

    def clear(self) -> None:
        self._points.clear()

    def __contains__(self, point: object) -> bool:
        return point in self._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)
