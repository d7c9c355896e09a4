"""
Pass the Pigs - Turn Engine

Accumulates points for the turn in progress. A throw is reported in one
of three ways:

- Leaning: one pig shows a face, the other lies on its side -> (face, Sider)
- Double: both pigs show the same face -> (face, face)
- Mixed combo: both pigs show different scoring faces; reported as two
  face selections after the combo is opened

The turn engine never touches the scoreboard; committing is the game's job.
"""

from dataclasses import dataclass

from src.engine.base import COMBO_FACES, DieFace, ScoringResult
from src.engine.exceptions import ProtocolViolation
from src.engine.scoring import ScoringTable


@dataclass(frozen=True)
class Idle:
    """No combo is being reported."""


@dataclass(frozen=True)
class AwaitingFirstComboFace:
    """A mixed combo was opened; the first pig's face is next."""


@dataclass(frozen=True)
class AwaitingSecondComboFace:
    """The first pig of a mixed combo is known; the second completes it."""
    first: DieFace


ComboMode = Idle | AwaitingFirstComboFace | AwaitingSecondComboFace

# Faces that can be thrown as doubles (two siders is the plain Sider throw)
DOUBLE_FACES: tuple[DieFace, ...] = COMBO_FACES


class TurnEngine:
    """Turn accumulator with explicit combo reporting mode."""

    def __init__(self) -> None:
        self.turn_points = 0
        self.mode: ComboMode = Idle()

    @property
    def combo_pending(self) -> bool:
        """True while a mixed combo is open."""
        return not isinstance(self.mode, Idle)

    @property
    def pending_face(self) -> DieFace | None:
        """Face already chosen for the first pig of an open combo."""
        if isinstance(self.mode, AwaitingSecondComboFace):
            return self.mode.first
        return None

    def report_leaning(self, face: DieFace) -> ScoringResult:
        """Score a throw where the other pig lies on its side.

        Args:
            face: Face shown by the scoring pig (SIDER for two siders)

        Returns:
            ScoringResult that was added to the turn

        Raises:
            ProtocolViolation: If a mixed combo is open
        """
        self._require_idle("leaning report")
        return self._add(ScoringTable.score(face, DieFace.SIDER))

    def report_double(self, face: DieFace) -> ScoringResult:
        """Score a throw where both pigs show the same face.

        Raises:
            ProtocolViolation: If a combo is open or the face cannot double
        """
        self._require_idle("double report")
        if face not in DOUBLE_FACES:
            raise ProtocolViolation(f"{face.label} cannot be reported as a double.")
        return self._add(ScoringTable.score(face, face))

    def start_combo(self) -> None:
        """Open a mixed combo; two face selections must follow."""
        if self.combo_pending:
            raise ProtocolViolation("A mixed combo is already being reported.")
        self.mode = AwaitingFirstComboFace()

    def select_combo_face(self, face: DieFace) -> ScoringResult | None:
        """Record one pig of an open mixed combo.

        Args:
            face: Face shown by this pig

        Returns:
            None after the first pig, the ScoringResult after the second

        Raises:
            ProtocolViolation: If no combo is open or the face is not a combo face
        """
        if face not in COMBO_FACES:
            raise ProtocolViolation(f"{face.label} is not a mixed combo face.")

        if isinstance(self.mode, AwaitingFirstComboFace):
            self.mode = AwaitingSecondComboFace(face)
            return None

        if isinstance(self.mode, AwaitingSecondComboFace):
            result = self._add(ScoringTable.score(self.mode.first, face))
            self.mode = Idle()
            return result

        raise ProtocolViolation("No mixed combo is open.")

    def reset(self) -> None:
        """Clear the accumulator and any open combo."""
        self.turn_points = 0
        self.mode = Idle()

    def _require_idle(self, action: str) -> None:
        if self.combo_pending:
            raise ProtocolViolation(f"Cannot accept a {action} while a mixed combo is open.")

    def _add(self, result: ScoringResult) -> ScoringResult:
        self.turn_points += result.points
        return result
