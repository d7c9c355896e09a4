"""
Pass the Pigs - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import pytest

from src.engine.base import DieFace, GameConfig
from src.engine.pass_the_pigs import PassThePigsGame
from src.session.manager import GameSession


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def unordered_scores() -> dict[tuple[DieFace, DieFace], int]:
    """Every unordered combination with its published score."""
    return {
        (DieFace.HOOFER, DieFace.HOOFER): 20,
        (DieFace.HOOFER, DieFace.JOWLER): 15,
        (DieFace.HOOFER, DieFace.RAZORBACK): 5,
        (DieFace.HOOFER, DieFace.SIDER): 5,
        (DieFace.HOOFER, DieFace.SNOUTER): 10,
        (DieFace.JOWLER, DieFace.JOWLER): 60,
        (DieFace.JOWLER, DieFace.RAZORBACK): 15,
        (DieFace.JOWLER, DieFace.SIDER): 15,
        (DieFace.JOWLER, DieFace.SNOUTER): 15,
        (DieFace.RAZORBACK, DieFace.RAZORBACK): 20,
        (DieFace.RAZORBACK, DieFace.SIDER): 5,
        (DieFace.RAZORBACK, DieFace.SNOUTER): 10,
        (DieFace.SIDER, DieFace.SIDER): 1,
        (DieFace.SIDER, DieFace.SNOUTER): 10,
        (DieFace.SNOUTER, DieFace.SNOUTER): 40,
    }


# =============================================================================
# GAME FIXTURES
# =============================================================================

@pytest.fixture
def pregame() -> PassThePigsGame:
    """Fresh game with no players."""
    return PassThePigsGame()


@pytest.fixture
def three_player_game() -> PassThePigsGame:
    """Game in play with Alice, Bob and Carol (Alice up first)."""
    game = PassThePigsGame(GameConfig(target_score=100))
    for name in ("Alice", "Bob", "Carol"):
        game.add_player(name)
    game.start_game()
    return game


@pytest.fixture
def session() -> GameSession:
    return GameSession()

