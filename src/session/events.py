"""
Pass the Pigs - Input Event Definitions

Event types and payloads sent by the presentation layer to a GameSession.
"""

from dataclasses import dataclass
from enum import Enum, auto

from src.engine.base import DieFace


class GameEvent(Enum):
    """Events the presentation layer can send."""

    # Pregame
    ADD_PLAYER = auto()
    UPDATE_PLAYER_NAME_DRAFT = auto()
    START_GAME = auto()
    NEW_GAME = auto()

    # Commits
    PIG_OUT = auto()
    MAKIN_BACON = auto()

    # Mixed combo
    MIXED_COMBO = auto()
    MC_HOOFER = auto()
    MC_RAZORBACK = auto()
    MC_SNOUTER = auto()
    MC_JOWLER = auto()

    # One pig scoring, the other on its side
    SIDER = auto()
    HOOFER = auto()
    RAZORBACK = auto()
    SNOUTER = auto()
    JOWLER = auto()

    # Both pigs alike
    DOUBLE_HOOFER = auto()
    DOUBLE_RAZORBACK = auto()
    DOUBLE_SNOUTER = auto()
    DOUBLE_LEANING_JOWLER = auto()


@dataclass(frozen=True)
class EventPayload:
    """Wrapper for an input event; `text` carries player names."""

    event: GameEvent
    text: str | None = None


LEANING_EVENTS: dict[GameEvent, DieFace] = {
    GameEvent.SIDER: DieFace.SIDER,
    GameEvent.HOOFER: DieFace.HOOFER,
    GameEvent.RAZORBACK: DieFace.RAZORBACK,
    GameEvent.SNOUTER: DieFace.SNOUTER,
    GameEvent.JOWLER: DieFace.JOWLER,
}

DOUBLE_EVENTS: dict[GameEvent, DieFace] = {
    GameEvent.DOUBLE_HOOFER: DieFace.HOOFER,
    GameEvent.DOUBLE_RAZORBACK: DieFace.RAZORBACK,
    GameEvent.DOUBLE_SNOUTER: DieFace.SNOUTER,
    GameEvent.DOUBLE_LEANING_JOWLER: DieFace.JOWLER,
}

COMBO_FACE_EVENTS: dict[GameEvent, DieFace] = {
    GameEvent.MC_HOOFER: DieFace.HOOFER,
    GameEvent.MC_RAZORBACK: DieFace.RAZORBACK,
    GameEvent.MC_SNOUTER: DieFace.SNOUTER,
    GameEvent.MC_JOWLER: DieFace.JOWLER,
}

SCORING_EVENTS: frozenset[GameEvent] = frozenset(
    {*LEANING_EVENTS, *DOUBLE_EVENTS, *COMBO_FACE_EVENTS, GameEvent.MIXED_COMBO}
)

COMMIT_EVENTS: frozenset[GameEvent] = frozenset({GameEvent.PIG_OUT, GameEvent.MAKIN_BACON})


def parse_event(name: str) -> GameEvent:
    """Look up an event by name, case-insensitively ('pig_out', 'PigOut')."""
    normalized = "".join(ch for ch in name if ch.isalnum()).upper()
    for event in GameEvent:
        if event.name.replace("_", "") == normalized:
            return event
    raise ValueError(f"Unknown game event {name!r}.")
