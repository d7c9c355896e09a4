"""
Pass the Pigs - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Value types are immutable (frozen dataclasses) so they can be
shared freely between the engine and the presentation layer.
"""

from dataclasses import dataclass
from enum import Enum

from src.engine.validators import validate_target_score


class DieFace(Enum):
    """The five resting positions a thrown pig can land on."""
    SIDER = "sider"
    HOOFER = "hoofer"
    RAZORBACK = "razorback"
    SNOUTER = "snouter"
    JOWLER = "jowler"

    @property
    def label(self) -> str:
        """Display name, e.g. 'Razorback'."""
        return self.value.capitalize()


# Faces that can be chosen for either pig of a mixed combo
COMBO_FACES: tuple[DieFace, ...] = (
    DieFace.HOOFER,
    DieFace.RAZORBACK,
    DieFace.SNOUTER,
    DieFace.JOWLER,
)


class GamePhase(Enum):
    """Phases of a game.

    LAST_TURN is never stored; it is reported while the game is playing
    and the trailing round after someone reached the target is running.
    """
    PREGAME = "pregame"
    PLAYING = "playing"
    LAST_TURN = "last_turn"
    OVER = "over"


@dataclass(frozen=True)
class ScorePair:
    """
    Two reported die faces, used as a lookup key into the scoring table.

    Attributes:
        first: Face of the first pig
        second: Face of the second pig
    """
    first: DieFace
    second: DieFace

    def reversed(self) -> "ScorePair":
        """The same combination with the pigs swapped."""
        return ScorePair(self.second, self.first)

    @property
    def is_double(self) -> bool:
        return self.first is self.second

    def __str__(self) -> str:
        if self.is_double:
            return f"Double {self.first.label}"
        return f"{self.first.label} + {self.second.label}"


@dataclass(frozen=True)
class ScoringResult:
    """
    Points awarded for one reported throw.

    Attributes:
        pair: The combination that was scored
        points: Points added to the turn
        description: Human-readable description
    """
    pair: ScorePair
    points: int
    description: str

    def __str__(self) -> str:
        return f"{self.description}: {self.points}"


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        target_score: Score that triggers the last-turn round
        min_players: Players required before the game can start
    """
    target_score: int = 100
    min_players: int = 2

    def __post_init__(self) -> None:
        """Validate configuration."""
        validate_target_score(self.target_score)
        if not isinstance(self.min_players, int) or self.min_players < 2:
            raise ValueError(
                f"Minimum player count must be at least 2, got {self.min_players!r}."
            )
