"""
Pass the Pigs - Game Session

High-level wrapper the presentation layer talks to. Translates input
events into engine calls, turns protocol violations into rejected
results, and builds read-only snapshots for rendering.
"""

from __future__ import annotations

import logging
from typing import Callable

from src.config.settings import Settings
from src.engine.base import GameConfig, GamePhase, ScoringResult
from src.engine.exceptions import ProtocolViolation
from src.engine.pass_the_pigs import PassThePigsGame
from src.session.events import (
    COMBO_FACE_EVENTS,
    DOUBLE_EVENTS,
    LEANING_EVENTS,
    EventPayload,
    GameEvent,
)
from src.session.models import EventResult, GameSnapshot, PlayerScore

logger = logging.getLogger(__name__)


class GameSession:
    """Single-writer event boundary around one PassThePigsGame.

    Events are applied one at a time, to completion. Hosts that receive
    events concurrently must serialize them before calling dispatch().
    """

    def __init__(self, game: PassThePigsGame | None = None) -> None:
        self.game = game or PassThePigsGame()
        self._handlers: dict[GameEvent, Callable[[EventPayload], EventResult]] = {
            GameEvent.ADD_PLAYER: self._on_add_player,
            GameEvent.UPDATE_PLAYER_NAME_DRAFT: self._on_update_name_draft,
            GameEvent.START_GAME: self._on_start_game,
            GameEvent.NEW_GAME: self._on_new_game,
            GameEvent.PIG_OUT: self._on_pig_out,
            GameEvent.MAKIN_BACON: self._on_makin_bacon,
            GameEvent.MIXED_COMBO: self._on_mixed_combo,
        }
        for event in LEANING_EVENTS:
            self._handlers[event] = self._on_leaning
        for event in DOUBLE_EVENTS:
            self._handlers[event] = self._on_double
        for event in COMBO_FACE_EVENTS:
            self._handlers[event] = self._on_combo_face

    @classmethod
    def from_settings(cls, settings: Settings) -> GameSession:
        """Build a session using configured target score and player minimum."""
        config = GameConfig(
            target_score=settings.target_score,
            min_players=settings.min_players,
        )
        return cls(PassThePigsGame(config))

    def dispatch(self, payload: EventPayload | GameEvent) -> EventResult:
        """Apply one event to the game.

        Args:
            payload: The event, bare or wrapped with its text argument.

        Returns:
            EventResult; a rejected result means the game is unchanged.
        """
        if isinstance(payload, GameEvent):
            payload = EventPayload(event=payload)

        handler = self._handlers[payload.event]
        try:
            result = handler(payload)
        except ProtocolViolation as exc:
            logger.warning("Rejected %s: %s", payload.event.name, exc)
            return EventResult(event=payload.event, accepted=False, reason=str(exc))

        logger.debug("Applied %s -> %s", payload.event.name, result)
        return result

    def snapshot(self) -> GameSnapshot:
        """Capture the current state for rendering. Never mutates the game."""
        game = self.game
        phase = game.phase
        rankings = (
            [PlayerScore(name=name, score=score) for name, score in game.rankings()]
            if phase is GamePhase.OVER
            else []
        )
        return GameSnapshot(
            phase=phase,
            players=list(game.players),
            current_player=game.current_player,
            scoreboard=[
                PlayerScore(name=name, score=score)
                for name, score in game.scoreboard.items()
            ],
            turn_points=game.turn_points,
            combo_pending=game.combo_pending,
            pending_combo_face=game.pending_combo_face,
            is_last_turn=game.is_last_turn,
            name_draft=game.name_draft,
            target_score=game.config.target_score,
            min_players=game.config.min_players,
            rankings=rankings,
        )

    # -- Handlers --------------------------------------------------------

    def _on_add_player(self, payload: EventPayload) -> EventResult:
        name = self.game.add_player(payload.text)
        logger.info("Player %s joined (%d registered)", name, len(self.game.players))
        return EventResult(event=payload.event, accepted=True, description=name)

    def _on_update_name_draft(self, payload: EventPayload) -> EventResult:
        self.game.update_name_draft(payload.text or "")
        return EventResult(event=payload.event, accepted=True)

    def _on_start_game(self, payload: EventPayload) -> EventResult:
        self.game.start_game()
        logger.info("Game started with players %s", ", ".join(self.game.players))
        return EventResult(event=payload.event, accepted=True)

    def _on_new_game(self, payload: EventPayload) -> EventResult:
        self.game.new_game()
        logger.info("Game reset to pregame")
        return EventResult(event=payload.event, accepted=True)

    def _on_pig_out(self, payload: EventPayload) -> EventResult:
        player = self.game.current_player
        banked = self.game.pig_out()
        logger.info("%s pigged out, banking %d", player, banked)
        self._log_if_over()
        return EventResult(event=payload.event, accepted=True, points=banked)

    def _on_makin_bacon(self, payload: EventPayload) -> EventResult:
        player = self.game.current_player
        lost = self.game.makin_bacon()
        logger.info("%s made bacon, losing %d", player, lost)
        self._log_if_over()
        return EventResult(event=payload.event, accepted=True, points=lost)

    def _on_mixed_combo(self, payload: EventPayload) -> EventResult:
        self.game.start_combo()
        return EventResult(event=payload.event, accepted=True)

    def _on_leaning(self, payload: EventPayload) -> EventResult:
        result = self.game.report_leaning(LEANING_EVENTS[payload.event])
        return self._scored(payload, result)

    def _on_double(self, payload: EventPayload) -> EventResult:
        result = self.game.report_double(DOUBLE_EVENTS[payload.event])
        return self._scored(payload, result)

    def _on_combo_face(self, payload: EventPayload) -> EventResult:
        result = self.game.select_combo_face(COMBO_FACE_EVENTS[payload.event])
        if result is None:
            return EventResult(event=payload.event, accepted=True)
        return self._scored(payload, result)

    def _scored(self, payload: EventPayload, result: ScoringResult) -> EventResult:
        return EventResult(
            event=payload.event,
            accepted=True,
            points=result.points,
            description=result.description,
        )

    def _log_if_over(self) -> None:
        if self.game.phase is GamePhase.OVER:
            logger.info("Game over; winner(s): %s", ", ".join(self.game.winners()))
