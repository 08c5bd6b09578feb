"""Selection of a digital set variant from usage hints.

The choice depends only on the domain type and the hints, never on runtime
state, so it is cached and always returns the same variant for the same
inputs. Rules, first match wins:

1. Frequent membership tests, a set that is not big, and a domain type that
   maps points to offsets: DigitalSetByBitmap (O(1) membership).
2. Small set with low variability: DigitalSetBySequence (least overhead).
3. Anything else: DigitalSetBySortedSet (balanced costs, no pre-sizing).

Every hint combination reaches a rule, so selection never fails once the
hints themselves are valid.
"""

from functools import lru_cache

from latticekit.config import (
    LatticeKitSettings,
    MembershipFrequency,
    SetHints,
    SetSize,
    Variability,
    as_hints,
    get_default_settings,
)
from latticekit.domain import Domain
from latticekit.sets.base import DigitalSet
from latticekit.sets.by_bitmap import DigitalSetByBitmap, supports_offset_indexing
from latticekit.sets.by_sequence import DigitalSetBySequence
from latticekit.sets.by_sorted_set import DigitalSetBySortedSet
from latticekit.utils.logging import get_logger

logger = get_logger(__name__)


def select_digital_set(domain_type: type, hints: SetHints | int) -> type[DigitalSet]:
    """Resolve the digital set variant suited to a domain type and workload.

    Args:
        domain_type: Class of the governing domain
        hints: SetHints model or flag word of *_DS constants

    Returns:
        The DigitalSet subclass to instantiate

    Raises:
        InvalidHintError: If a flag word is malformed
    """
    return _resolve(domain_type, as_hints(hints))


@lru_cache(maxsize=None)
def _resolve(domain_type: type, hints: SetHints) -> type[DigitalSet]:
    if (
        hints.membership is MembershipFrequency.HIGH
        and hints.size is not SetSize.BIG
        and supports_offset_indexing(domain_type)
    ):
        return DigitalSetByBitmap
    if hints.size is SetSize.SMALL and hints.variability is Variability.LOW:
        return DigitalSetBySequence
    return DigitalSetBySortedSet


def make_digital_set(
    domain: Domain,
    hints: SetHints | int | None = None,
    settings: LatticeKitSettings | None = None,
) -> DigitalSet:
    """Create an empty digital set of the variant selected for domain.

    A bitmap selection falls back to the sorted set when the domain holds more
    points than settings.selector.bitmap_max_cells.

    Args:
        domain: Governing domain of the new set
        hints: Workload hints (settings default when None)
        settings: Library settings (defaults when None)

    Returns:
        Empty digital set bound to domain
    """
    settings = settings or get_default_settings()
    resolved = settings.selector.default_hints if hints is None else as_hints(hints)
    set_type = select_digital_set(type(domain), resolved)

    if set_type is DigitalSetByBitmap:
        cells = domain.size()  # type: ignore[attr-defined]
        if cells > settings.selector.bitmap_max_cells:
            logger.info(
                "Bitmap set too large, using sorted set",
                cells=cells,
                max_cells=settings.selector.bitmap_max_cells,
            )
            set_type = DigitalSetBySortedSet

    logger.debug(
        "Digital set selected",
        variant=set_type.__name__,
        domain=type(domain).__name__,
        hints=resolved.to_flags(),
    )
    return set_type(domain)
