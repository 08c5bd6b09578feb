"""Lattice points and domains.

Key classes:
- Point: An immutable N-dimensional integer point
- HyperRectDomain: An inclusive axis-aligned lattice box
- Domain, Shape: Structural protocols for bounds/iteration and membership
"""

from latticekit.domain.hyper_rect import HyperRectDomain
from latticekit.domain.point import Point, as_point
from latticekit.domain.protocols import Domain, Shape

__all__: list[str] = [
    "Domain",
    "HyperRectDomain",
    "Point",
    "Shape",
    "as_point",
]
