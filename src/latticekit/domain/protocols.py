"""Structural types for the capabilities shared by domains and shapes."""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from latticekit.domain.point import Point


@runtime_checkable
class Domain(Protocol):
    """Anything with lattice bounds that can enumerate its points."""

    @property
    def lower_bound(self) -> Point: ...

    @property
    def upper_bound(self) -> Point: ...

    @property
    def dimension(self) -> int: ...

    def is_inside(self, point: Point) -> bool: ...

    def __iter__(self) -> Iterator[Point]: ...


@runtime_checkable
class Shape(Protocol):
    """Anything answering point membership."""

    def is_inside(self, point: Point) -> bool: ...
