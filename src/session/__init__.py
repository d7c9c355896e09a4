"""
Pass the Pigs Session Layer.

Event dispatch and state snapshots for the presentation layer.
"""

from src.session.events import EventPayload, GameEvent, parse_event
from src.session.manager import GameSession
from src.session.models import EventResult, GameSnapshot, PlayerScore

__all__ = [
    "EventPayload",
    "EventResult",
    "GameEvent",
    "GameSession",
    "GameSnapshot",
    "PlayerScore",
    "parse_event",
]
