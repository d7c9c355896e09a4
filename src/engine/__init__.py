"""
Pass the Pigs Game Engine.

Pure Python game logic with zero UI dependencies.
Handles throw scoring, turn accumulation, commits, and the last-turn race.
"""

from src.engine.base import (
    COMBO_FACES,
    DieFace,
    GameConfig,
    GamePhase,
    ScorePair,
    ScoringResult,
)
from src.engine.exceptions import ProtocolViolation, ScoringTableError
from src.engine.pass_the_pigs import PassThePigsGame
from src.engine.scoring import ScoringTable
from src.engine.turn import TurnEngine

__all__ = [
    # Data Classes
    "GameConfig",
    "ScorePair",
    "ScoringResult",
    # Enums
    "DieFace",
    "GamePhase",
    "COMBO_FACES",
    # Errors
    "ProtocolViolation",
    "ScoringTableError",
    # Engines
    "PassThePigsGame",
    "ScoringTable",
    "TurnEngine",
]
