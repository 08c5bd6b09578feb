"""Digital set kept in sorted point order."""

from bisect import bisect_left, insort
from collections.abc import Iterator

from latticekit.domain import Domain, Point
from latticekit.sets.base import DigitalSet


class DigitalSetBySortedSet(DigitalSet):
    """Ordered digital set.

    A hash set answers membership in O(1) and a sorted list, maintained with
    bisect, provides iteration in Point order (which is also domain order).
    Insertions arriving in increasing order, as when filling from a domain
    scan, append in O(1).

    insert_new performs the same duplicate check as insert, so the set stays
    consistent even when its precondition is broken.
    """

    def __init__(self, domain: Domain) -> None:
        super().__init__(domain)
        self._members: set[Point] = set()
        self._ordered: list[Point] = []

    def insert(self, point: Point) -> None:
        if point in self._members:
            return
        self._members.add(point)
        if not self._ordered or self._ordered[-1] < point:
            self._ordered.append(point)
        else:
            insort(self._ordered, point)

    insert_new = insert

    def erase(self, point: Point) -> None:
        if point not in self._members:
            return
        self._members.remove(point)
        del self._ordered[bisect_left(self._ordered, point)]

    def clear(self) -> None:
        self._members.clear()
        self._ordered.clear()

    def __contains__(self, point: object) -> bool:
        return point in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._ordered)
