"""
Pass the Pigs - Game State Machine

Players take turns throwing two pigs and reporting what they show. Points
pile up for the turn until it ends:

- Pig Out: the turn's points are banked
- Makin' Bacon: the turn's points are lost

Once any player reaches the target score, every remaining player gets one
final turn. When the trailing round completes the game is over and the
highest score wins.

Phases: PREGAME -> PLAYING -> OVER, with LAST_TURN reported while the
trailing round is running. Every rejected call raises ProtocolViolation
before any state changes.
"""

from src.engine.base import DieFace, GameConfig, GamePhase, ScoringResult
from src.engine.exceptions import ProtocolViolation
from src.engine.turn import ComboMode, TurnEngine
from src.engine.validators import validate_player_count, validate_player_name


class PassThePigsGame:
    """
    Stateful engine for one Pass the Pigs game.

    Owns the player rotation (index 0 is whose turn it is), the scoreboard,
    the turn accumulator and the last-turn counter. Not thread-safe; the
    host applies one call at a time.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self._turn = TurnEngine()
        self._reset()

    def _reset(self) -> None:
        self._phase = GamePhase.PREGAME
        self._players: list[str] = []
        self._scoreboard: dict[str, int] = {}
        self._last_turn_count = 0
        self._race_triggered = False
        self.name_draft = ""
        self._turn.reset()

    # -- Queries ---------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        """Current phase, reporting LAST_TURN during the trailing round."""
        if self._phase is GamePhase.PLAYING and self.is_last_turn:
            return GamePhase.LAST_TURN
        return self._phase

    @property
    def players(self) -> tuple[str, ...]:
        """Players in rotation order; the first one is up."""
        return tuple(self._players)

    @property
    def current_player(self) -> str | None:
        return self._players[0] if self._players else None

    @property
    def scoreboard(self) -> dict[str, int]:
        """Committed scores in registration order (a copy)."""
        return dict(self._scoreboard)

    @property
    def turn_points(self) -> int:
        return self._turn.turn_points

    @property
    def combo_mode(self) -> ComboMode:
        return self._turn.mode

    @property
    def combo_pending(self) -> bool:
        return self._turn.combo_pending

    @property
    def pending_combo_face(self) -> DieFace | None:
        return self._turn.pending_face

    @property
    def last_turn_count(self) -> int:
        """Turns completed since someone first reached the target."""
        return self._last_turn_count

    @property
    def is_last_turn(self) -> bool:
        """True while the active player is taking the final turn of the game."""
        if self._phase is not GamePhase.PLAYING:
            return False
        return self._last_turn_count >= len(self._players) - 1

    def rankings(self) -> list[tuple[str, int]]:
        """
        Final standings, highest score first.

        Ties keep registration order; they are not broken.

        Raises:
            ProtocolViolation: If the game is not over
        """
        if self._phase is not GamePhase.OVER:
            raise ProtocolViolation("Rankings are only available once the game is over.")
        return sorted(self._scoreboard.items(), key=lambda item: item[1], reverse=True)

    def winners(self) -> list[str]:
        """Every player tied at the top score."""
        ranked = self.rankings()
        if not ranked:
            return []
        best = ranked[0][1]
        return [name for name, score in ranked if score == best]

    # -- Pregame ---------------------------------------------------------

    def update_name_draft(self, text: str) -> None:
        """Stage the name being typed; the roster is unchanged."""
        self._require_phase(GamePhase.PREGAME, "edit player names")
        self.name_draft = text

    def add_player(self, name: str | None = None) -> str:
        """
        Register a player at the back of the rotation with a score of 0.

        Args:
            name: Display name; the staged draft is used when omitted

        Returns:
            The registered (stripped) name

        Raises:
            ProtocolViolation: Outside pregame, or for an empty or duplicate name
        """
        self._require_phase(GamePhase.PREGAME, "add players")
        raw = self.name_draft if name is None else name
        try:
            cleaned = validate_player_name(raw, self._scoreboard)
        except ValueError as exc:
            raise ProtocolViolation(str(exc)) from exc

        self._players.append(cleaned)
        self._scoreboard[cleaned] = 0
        self.name_draft = ""
        return cleaned

    def start_game(self) -> None:
        """
        Begin play with the registered players.

        Raises:
            ProtocolViolation: Outside pregame or with too few players
        """
        self._require_phase(GamePhase.PREGAME, "start the game")
        try:
            validate_player_count(len(self._players), self.config.min_players)
        except ValueError as exc:
            raise ProtocolViolation(str(exc)) from exc
        self._phase = GamePhase.PLAYING

    def new_game(self) -> None:
        """Discard everything and return to pregame."""
        self._reset()

    # -- Scoring ---------------------------------------------------------

    def report_leaning(self, face: DieFace) -> ScoringResult:
        """One pig shows `face`, the other lies on its side."""
        self._require_phase(GamePhase.PLAYING, "score a throw")
        return self._turn.report_leaning(face)

    def report_double(self, face: DieFace) -> ScoringResult:
        """Both pigs show `face`."""
        self._require_phase(GamePhase.PLAYING, "score a throw")
        return self._turn.report_double(face)

    def start_combo(self) -> None:
        self._require_phase(GamePhase.PLAYING, "report a mixed combo")
        self._turn.start_combo()

    def select_combo_face(self, face: DieFace) -> ScoringResult | None:
        """Report one pig of a mixed combo; the second one scores it."""
        self._require_phase(GamePhase.PLAYING, "report a mixed combo")
        return self._turn.select_combo_face(face)

    # -- Commits ---------------------------------------------------------

    def pig_out(self) -> int:
        """
        End the turn, banking its points for the active player.

        Returns:
            Points banked
        """
        self._require_commit("pig out")
        banked = self._turn.turn_points
        self._scoreboard[self._players[0]] += banked
        self._end_turn()
        return banked

    def makin_bacon(self) -> int:
        """
        End the turn, forfeiting its points.

        Returns:
            Points lost
        """
        self._require_commit("make bacon")
        lost = self._turn.turn_points
        self._end_turn()
        return lost

    def _end_turn(self) -> None:
        # Scores never drop, so once triggered the race stays triggered
        if not self._race_triggered:
            target = self.config.target_score
            self._race_triggered = any(score >= target for score in self._scoreboard.values())
        if self._race_triggered:
            self._last_turn_count += 1

        if self._last_turn_count >= len(self._players):
            self._phase = GamePhase.OVER

        self._turn.reset()
        self._players.append(self._players.pop(0))

    # -- Guards ----------------------------------------------------------

    def _require_phase(self, phase: GamePhase, action: str) -> None:
        if self._phase is not phase:
            raise ProtocolViolation(
                f"Cannot {action} while the game is {self.phase.value.replace('_', ' ')}."
            )

    def _require_commit(self, action: str) -> None:
        self._require_phase(GamePhase.PLAYING, action)
        if not self._players:
            raise ProtocolViolation(f"Cannot {action} with no players.")
        if self._turn.combo_pending:
            raise ProtocolViolation(f"Cannot {action} while a mixed combo is open.")
