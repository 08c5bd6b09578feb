"""Digitization of shapes into digital sets."""

from latticekit.config import LatticeKitSettings, SetHints
from latticekit.domain import Domain, Shape
from latticekit.sets import DigitalSet, make_digital_set
from latticekit.utils.logging import get_logger

logger = get_logger(__name__)


def digitize(
    shape: Shape,
    domain: Domain,
    hints: SetHints | int | None = None,
    set_type: type[DigitalSet] | None = None,
    settings: LatticeKitSettings | None = None,
) -> DigitalSet:
    """Collect the domain points inside a shape.

    Points are visited once in domain order, so insert_new() is safe and
    keeps list-backed sets linear to fill.

    Args:
        shape: Any object with is_inside(point)
        domain: Domain to scan
        hints: Usage hints for selecting the set variant
        set_type: Explicit variant, overrides hints
        settings: Library settings forwarded to the selector

    Returns:
        New digital set over domain
    """
    if set_type is not None:
        result = set_type(domain)
    else:
        result = make_digital_set(domain, hints, settings)

    is_inside = shape.is_inside
    insert_new = result.insert_new
    for point in domain:
        if is_inside(point):
            insert_new(point)

    logger.debug(
        "Shape digitized",
        shape=type(shape).__name__,
        variant=type(result).__name__,
        size=len(result),
    )
    return result
