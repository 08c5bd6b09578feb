"""LatticeKit - Digital sets and domains over integer lattices.

LatticeKit provides N-dimensional lattice points, hyper-rectangular domains,
interchangeable digital set containers, a selector that picks a container from
usage hints, and Euclidean shapes that can be digitized into digital sets.

Example:
    >>> from latticekit import HyperRectDomain, Point, make_digital_set
    >>> from latticekit import MEDIUM_DS, HIGH_BEL_DS
    >>> domain = HyperRectDomain(Point.of(0, 0), Point.of(9, 9))
    >>> s = make_digital_set(domain, MEDIUM_DS + HIGH_BEL_DS)
    >>> s.insert(Point.of(3, 4))
    >>> len(s)
    1
"""

from latticekit.domain import HyperRectDomain, Point
from latticekit.sets import (
    BIG_DS,
    HIGH_BEL_DS,
    HIGH_ITER_DS,
    HIGH_VAR_DS,
    LOW_BEL_DS,
    LOW_ITER_DS,
    LOW_VAR_DS,
    MEDIUM_DS,
    SMALL_DS,
    DigitalSet,
    DigitalSetByBitmap,
    DigitalSetBySequence,
    DigitalSetBySortedSet,
    DigitalSetDomain,
    SetHints,
    make_digital_set,
    select_digital_set,
)

__version__ = "0.1.0"

__all__ = [
    "BIG_DS",
    "HIGH_BEL_DS",
    "HIGH_ITER_DS",
    "HIGH_VAR_DS",
    "LOW_BEL_DS",
    "LOW_ITER_DS",
    "LOW_VAR_DS",
    "MEDIUM_DS",
    "SMALL_DS",
    "DigitalSet",
    "DigitalSetByBitmap",
    "DigitalSetBySequence",
    "DigitalSetBySortedSet",
    "DigitalSetDomain",
    "HyperRectDomain",
    "Point",
    "SetHints",
    "__version__",
    "make_digital_set",
    "select_digital_set",
]
