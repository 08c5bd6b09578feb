"""Usage hints driving digital set selection.

Hints describe the expected workload along four independent axes. They can be
written as a SetHints model or as a flag word combining the *_DS constants
(with + or |); a zero word means small, low variability, rare iteration and
rare membership tests.

Example:
    >>> SetHints.from_flags(BIG_DS + HIGH_ITER_DS + HIGH_BEL_DS).size
    <SetSize.BIG: 'big'>
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from latticekit.exceptions import InvalidHintError


class SetSize(str, Enum):
    """Expected number of points in the set."""

    SMALL = "small"
    MEDIUM = "medium"
    BIG = "big"


class Variability(str, Enum):
    """Expected rate of insertions and erasures."""

    LOW = "low"
    HIGH = "high"


class IterationFrequency(str, Enum):
    """Expected frequency of full scans of the set."""

    LOW = "low"
    HIGH = "high"


class MembershipFrequency(str, Enum):
    """Expected frequency of membership tests."""

    LOW = "low"
    HIGH = "high"


SMALL_DS = 0
MEDIUM_DS = 1
BIG_DS = 2
LOW_VAR_DS = 0
HIGH_VAR_DS = 4
LOW_ITER_DS = 0
HIGH_ITER_DS = 8
LOW_BEL_DS = 0
HIGH_BEL_DS = 16

_SIZE_MASK = 3
_ALL_BITS = _SIZE_MASK | HIGH_VAR_DS | HIGH_ITER_DS | HIGH_BEL_DS

_SIZE_BY_BITS = {SMALL_DS: SetSize.SMALL, MEDIUM_DS: SetSize.MEDIUM, BIG_DS: SetSize.BIG}
_BITS_BY_SIZE = {size: bits for bits, size in _SIZE_BY_BITS.items()}


class SetHints(BaseModel):
    """Expected workload of a digital set."""

    model_config = ConfigDict(frozen=True)

    size: SetSize = Field(default=SetSize.SMALL, description="Expected set size")
    variability: Variability = Field(
        default=Variability.LOW,
        description="Expected rate of insert/erase",
    )
    iteration: IterationFrequency = Field(
        default=IterationFrequency.LOW,
        description="Expected frequency of iteration",
    )
    membership: MembershipFrequency = Field(
        default=MembershipFrequency.LOW,
        description="Expected frequency of membership tests",
    )

    @classmethod
    def from_flags(cls, flags: int) -> "SetHints":
        """Decode a flag word built from the *_DS constants.

        Raises:
            InvalidHintError: If the word has unknown bits or no size class
        """
        if isinstance(flags, bool) or not isinstance(flags, int):
            raise InvalidHintError(flags, "expected an integer flag word")
        if flags < 0 or flags & ~_ALL_BITS:
            raise InvalidHintError(flags, "unknown flag bits")
        size = _SIZE_BY_BITS.get(flags & _SIZE_MASK)
        if size is None:
            raise InvalidHintError(flags, "size bits match no size class")
        return cls(
            size=size,
            variability=Variability.HIGH if flags & HIGH_VAR_DS else Variability.LOW,
            iteration=(
                IterationFrequency.HIGH if flags & HIGH_ITER_DS else IterationFrequency.LOW
            ),
            membership=(
                MembershipFrequency.HIGH if flags & HIGH_BEL_DS else MembershipFrequency.LOW
            ),
        )

    def to_flags(self) -> int:
        """Encode as a flag word; inverse of from_flags()."""
        flags = _BITS_BY_SIZE[self.size]
        if self.variability is Variability.HIGH:
            flags |= HIGH_VAR_DS
        if self.iteration is IterationFrequency.HIGH:
            flags |= HIGH_ITER_DS
        if self.membership is MembershipFrequency.HIGH:
            flags |= HIGH_BEL_DS
        return flags


def as_hints(hints: "SetHints | int") -> SetHints:
    """Accept either a SetHints model or a flag word."""
    if isinstance(hints, SetHints):
        return hints
    return SetHints.from_flags(hints)
