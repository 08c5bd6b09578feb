"""Exception hierarchy for LatticeKit."""

from typing import Any


class LatticeKitError(Exception):
    """Base exception for all LatticeKit errors."""

    pass


class DomainError(LatticeKitError):
    """Errors related to points and domains."""

    pass


class DimensionMismatchError(DomainError):
    """Two lattice objects of different dimensions were combined."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Dimension mismatch: expected {expected}, got {actual}")


class InvalidBoundsError(DomainError):
    """Domain bounds are not ordered componentwise."""

    def __init__(self, lower: Any, upper: Any) -> None:
        self.lower = lower
        self.upper = upper
        super().__init__(f"Invalid domain bounds: lower {lower} is not <= upper {upper}")


class DigitalSetError(LatticeKitError):
    """Errors related to digital set containers."""

    pass


class PointOutOfDomainError(DigitalSetError):
    """A point outside the governing domain reached an offset-indexed set."""

    def __init__(self, point: Any, domain: Any) -> None:
        self.point = point
        self.domain = domain
        super().__init__(f"Point {point} lies outside domain {domain}")


class UnsupportedDomainError(DigitalSetError):
    """A set variant cannot be built over the given domain type."""

    def __init__(self, set_type: str, domain_type: str) -> None:
        self.set_type = set_type
        self.domain_type = domain_type
        super().__init__(f"{set_type} cannot be built over {domain_type}")


class SelectorError(LatticeKitError):
    """Errors related to digital set selection."""

    pass


class InvalidHintError(SelectorError):
    """A usage-hint bundle does not describe a valid combination."""

    def __init__(self, flags: Any, reason: str) -> None:
        self.flags = flags
        self.reason = reason
        super().__init__(f"Invalid digital set hints {flags!r}: {reason}")
