"""Digital set backed by a boolean array covering the whole domain."""

from collections.abc import Iterator

import numpy as np

from latticekit.domain import Domain, Point
from latticekit.exceptions import PointOutOfDomainError, UnsupportedDomainError
from latticekit.sets.base import DigitalSet

# Methods a domain must offer so that points can be mapped to array cells
INDEXING_METHODS = ("offset", "point_at", "shape", "size")

# Cells scanned per step while iterating
SCAN_CHUNK = 4096


def supports_offset_indexing(domain_type: type) -> bool:
    """True if instances of domain_type map points to linear offsets."""
    return all(callable(getattr(domain_type, name, None)) for name in INDEXING_METHODS)


class DigitalSetByBitmap(DigitalSet):
    """Digital set stored as one boolean cell per domain point.

    Membership, insert and erase are O(1); storage is pre-sized to the
    domain, so this variant suits bounded domains of moderate size. Iteration
    follows domain order.

    Inserting a point outside the domain raises PointOutOfDomainError instead
    of writing to an unrelated cell. Out-of-domain points are never members,
    so erase() ignores them.
    """

    def __init__(self, domain: Domain) -> None:
        if not supports_offset_indexing(type(domain)):
            raise UnsupportedDomainError(type(self).__name__, type(domain).__name__)
        super().__init__(domain)
        self._cells = np.zeros(domain.size(), dtype=bool)
        self._count = 0

    def _offset(self, point: Point) -> int:
        if not self._domain.is_inside(point):
            raise PointOutOfDomainError(point, self._domain)
        return self._domain.offset(point)

    def insert(self, point: Point) -> None:
        index = self._offset(point)
        if not self._cells[index]:
            self._cells[index] = True
            self._count += 1

    # Checking the cell costs nothing here, so the count stays exact.
    insert_new = insert

    def erase(self, point: Point) -> None:
        if not self._domain.is_inside(point):
            return
        index = self._domain.offset(point)
        if self._cells[index]:
            self._cells[index] = False
            self._count -= 1

    def clear(self) -> None:
        self._cells[:] = False
        self._count = 0

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, Point) or not self._domain.is_inside(point):
            return False
        return bool(self._cells[self._domain.offset(point)])

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Point]:
        point_at = self._domain.point_at
        for start in range(0, self._cells.size, SCAN_CHUNK):
            chunk = self._cells[start : start + SCAN_CHUNK]
            for index in np.flatnonzero(chunk).tolist():
                yield point_at(start + index)

    def mask(self) -> np.ndarray:
        """Read-only view of membership shaped like the domain extent."""
        view = self._cells.reshape(self._domain.shape())
        view.flags.writeable = False
        return view

    def copy(self) -> "DigitalSetByBitmap":
        other = DigitalSetByBitmap(self._domain)
        other._cells[:] = self._cells
        other._count = self._count
        return other

    def assign_from_complement(self, other: DigitalSet) -> None:
        if isinstance(other, DigitalSetByBitmap) and other._domain == self._domain:
            np.logical_not(other._cells, out=self._cells)
            self._count = int(self._cells.size - other._count)
            return
        super().assign_from_complement(other)

    def is_valid(self) -> bool:
        return int(np.count_nonzero(self._cells)) == self._count
