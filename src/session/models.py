"""
Pass the Pigs - Session Models

Pydantic models handed to the presentation layer for rendering.
"""

from pydantic import BaseModel, Field

from src.engine.base import DieFace, GamePhase
from src.session.events import GameEvent


class PlayerScore(BaseModel):
    """One scoreboard line."""

    name: str = Field(max_length=30)
    score: int = Field(default=0, ge=0)


class GameSnapshot(BaseModel):
    """Everything a view needs to draw the current game."""

    phase: GamePhase
    players: list[str] = Field(default_factory=list)
    current_player: str | None = None
    scoreboard: list[PlayerScore] = Field(default_factory=list)
    turn_points: int = Field(default=0, ge=0)
    combo_pending: bool = False
    pending_combo_face: DieFace | None = None
    is_last_turn: bool = False
    name_draft: str = ""
    target_score: int = 100
    min_players: int = 2
    rankings: list[PlayerScore] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def can_start(self) -> bool:
        return self.phase is GamePhase.PREGAME and len(self.players) >= self.min_players

    @property
    def winner(self) -> str | None:
        """Top-ranked player once the game is over."""
        return self.rankings[0].name if self.rankings else None


class EventResult(BaseModel):
    """
    Outcome of dispatching one event.

    Attributes:
        event: The event that was dispatched
        accepted: False if the event was rejected and nothing changed
        reason: Why the event was rejected
        points: Points scored or committed by the event, if any
        description: Human-readable summary of a scored throw
    """

    event: GameEvent
    accepted: bool
    reason: str | None = None
    points: int | None = None
    description: str | None = None

    model_config = {"frozen": True}
