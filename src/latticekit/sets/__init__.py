"""Digital sets over lattice domains.

Key classes:
- DigitalSet: Abstract contract shared by all variants
- DigitalSetBySequence: List-backed, insertion order, for small sets
- DigitalSetBySortedSet: Ordered set, sorted iteration, general purpose
- DigitalSetByBitmap: Domain-sized boolean array, O(1) membership
- DigitalSetDomain: Domain view restricted to a set's points

Key functions:
- select_digital_set: Resolve a variant from a domain type and usage hints
- make_digital_set: Instantiate the selected variant over a domain
"""

from latticekit.config.hints import (
    BIG_DS,
    HIGH_BEL_DS,
    HIGH_ITER_DS,
    HIGH_VAR_DS,
    LOW_BEL_DS,
    LOW_ITER_DS,
    LOW_VAR_DS,
    MEDIUM_DS,
    SMALL_DS,
    SetHints,
)
from latticekit.sets.base import DigitalSet
from latticekit.sets.by_bitmap import DigitalSetByBitmap, supports_offset_indexing
from latticekit.sets.by_sequence import DigitalSetBySequence
from latticekit.sets.by_sorted_set import DigitalSetBySortedSet
from latticekit.sets.selector import make_digital_set, select_digital_set
from latticekit.sets.set_domain import DigitalSetDomain

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
    "SetHints",
    "make_digital_set",
    "select_digital_set",
    "supports_offset_indexing",
]
