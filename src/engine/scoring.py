"""
Pass the Pigs - Scoring Table

Fixed point values for every combination two pigs can land in. The table
is built once at import, checked for completeness, and exposed read-only.

Scoring rules (either pig order):
- Sider + Sider = 1
- Hoofer or Razorback with a Sider = 5, Snouter with a Sider = 10
- Leaning Jowler with anything but another Jowler = 15
- Double Hoofer or Double Razorback = 20, Double Snouter = 40
- Double Leaning Jowler = 60
- Mixed combos of Hoofer/Razorback/Snouter score their single values summed
"""

from itertools import product
from types import MappingProxyType
from typing import ClassVar, Mapping

from src.engine.base import DieFace, ScorePair, ScoringResult
from src.engine.exceptions import ScoringTableError


_UNORDERED_SCORES: tuple[tuple[DieFace, DieFace, int], ...] = (
    (DieFace.HOOFER, DieFace.HOOFER, 20),
    (DieFace.HOOFER, DieFace.JOWLER, 15),
    (DieFace.HOOFER, DieFace.RAZORBACK, 5),
    (DieFace.HOOFER, DieFace.SIDER, 5),
    (DieFace.HOOFER, DieFace.SNOUTER, 10),
    (DieFace.JOWLER, DieFace.JOWLER, 60),
    (DieFace.JOWLER, DieFace.RAZORBACK, 15),
    (DieFace.JOWLER, DieFace.SIDER, 15),
    (DieFace.JOWLER, DieFace.SNOUTER, 15),
    (DieFace.RAZORBACK, DieFace.RAZORBACK, 20),
    (DieFace.RAZORBACK, DieFace.SIDER, 5),
    (DieFace.RAZORBACK, DieFace.SNOUTER, 10),
    (DieFace.SIDER, DieFace.SIDER, 1),
    (DieFace.SIDER, DieFace.SNOUTER, 10),
    (DieFace.SNOUTER, DieFace.SNOUTER, 40),
)


def _build_table(
    entries: tuple[tuple[DieFace, DieFace, int], ...],
) -> Mapping[ScorePair, int]:
    """Expand unordered entries into a read-only map keyed by both orders."""
    table: dict[ScorePair, int] = {}
    for first, second, points in entries:
        pair = ScorePair(first, second)
        table[pair] = points
        table[pair.reversed()] = points
    return MappingProxyType(table)


def verify_table(table: Mapping[ScorePair, int]) -> None:
    """
    Check that a table covers every ordered pair of faces symmetrically.

    Args:
        table: Mapping from ordered pair to points

    Raises:
        ScoringTableError: On a missing, negative, or asymmetric entry
    """
    for first, second in product(DieFace, repeat=2):
        pair = ScorePair(first, second)
        if pair not in table:
            raise ScoringTableError(f"No score defined for {pair}.")
        points = table[pair]
        if not isinstance(points, int) or points < 0:
            raise ScoringTableError(f"Score for {pair} must be a non-negative integer, got {points!r}.")
        if table.get(pair.reversed()) != points:
            raise ScoringTableError(f"Score for {pair} differs between pig orders.")


class ScoringTable:
    """
    Process-wide lookup from a pair of pig faces to points.

    All methods are class methods over a table that is never mutated.
    """

    SCORES: ClassVar[Mapping[ScorePair, int]] = _build_table(_UNORDERED_SCORES)

    @classmethod
    def lookup(cls, first: DieFace, second: DieFace) -> int:
        """Points for a pair of faces, in either order."""
        return cls.SCORES[ScorePair(first, second)]

    @classmethod
    def score(cls, first: DieFace, second: DieFace) -> ScoringResult:
        """Score a pair of faces with a description for display.

        Args:
            first: Face of the first pig
            second: Face of the second pig

        Returns:
            ScoringResult with the pair, its points and a label
        """
        pair = ScorePair(first, second)
        # Two siders is the plain "Sider" throw, not a double
        description = "Sider" if pair.is_double and first is DieFace.SIDER else str(pair)
        return ScoringResult(pair=pair, points=cls.SCORES[pair], description=description)

    @classmethod
    def verify(cls) -> None:
        """Startup self-check over the shared table."""
        verify_table(cls.SCORES)


ScoringTable.verify()
