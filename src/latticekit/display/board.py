"""Text rendering of two-dimensional lattice content."""

from latticekit.domain import Domain, Point, Shape
from latticekit.exceptions import DimensionMismatchError

FILLED = "#"
EMPTY = "."


def render_board(
    content: Shape,
    domain: Domain,
    filled: str = FILLED,
    empty: str = EMPTY,
) -> str:
    """Render membership over a 2D domain as text rows.

    The first axis runs left to right and the second axis bottom to top, so
    the top row holds the largest second coordinate.

    Args:
        content: Digital set, set domain or shape (anything with is_inside)
        domain: 2D domain giving the rendered window
        filled: Character for member points
        empty: Character for other points

    Returns:
        Multi-line string, one line per row

    Raises:
        DimensionMismatchError: If domain is not two-dimensional
    """
    if domain.dimension != 2:
        raise DimensionMismatchError(2, domain.dimension)

    (x0, y0), (x1, y1) = domain.lower_bound.coords, domain.upper_bound.coords
    rows = []
    for y in range(y1, y0 - 1, -1):
        rows.append(
            "".join(
                filled if content.is_inside(Point._wrap((x, y))) else empty
                for x in range(x0, x1 + 1)
            )
        )
    return "\n".join(rows)
