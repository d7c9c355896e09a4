"""
Pass the Pigs - Game State Machine Tests

Covers roster building, scoring while playing, both commit paths,
the last-turn race, and the full reset.
"""

import pytest

from src.engine.base import DieFace, GameConfig, GamePhase
from src.engine.exceptions import ProtocolViolation
from src.engine.pass_the_pigs import PassThePigsGame
from src.engine.turn import Idle


def bank_jowlers(game: PassThePigsGame, count: int) -> int:
    """Report `count` Double Leaning Jowlers (60 each) and pig out."""
    for _ in range(count):
        game.report_double(DieFace.JOWLER)
    return game.pig_out()


# === Pregame ===


class TestPregame:
    """Tests for roster building before play."""

    def test_initial_state(self, pregame):
        assert pregame.phase is GamePhase.PREGAME
        assert pregame.players == ()
        assert pregame.scoreboard == {}
        assert pregame.turn_points == 0
        assert pregame.current_player is None

    def test_add_player_appends_with_zero_score(self, pregame):
        pregame.add_player("Alice")
        pregame.add_player("Bob")
        assert pregame.players == ("Alice", "Bob")
        assert pregame.scoreboard == {"Alice": 0, "Bob": 0}
        assert pregame.current_player == "Alice"

    def test_add_player_uses_draft(self, pregame):
        pregame.update_name_draft("  Carol ")
        assert pregame.players == ()
        assert pregame.add_player() == "Carol"
        assert pregame.players == ("Carol",)
        assert pregame.name_draft == ""

    def test_empty_name_rejected(self, pregame):
        with pytest.raises(ProtocolViolation, match="empty"):
            pregame.add_player("   ")
        assert pregame.players == ()

    def test_duplicate_name_rejected(self, pregame):
        pregame.add_player("Alice")
        with pytest.raises(ProtocolViolation, match="already taken"):
            pregame.add_player("Alice")
        assert pregame.players == ("Alice",)

    def test_start_with_one_player_is_rejected(self, pregame):
        pregame.add_player("Alice")
        with pytest.raises(ProtocolViolation, match="At least 2"):
            pregame.start_game()
        assert pregame.phase is GamePhase.PREGAME

    def test_start_with_no_players_is_rejected(self, pregame):
        with pytest.raises(ProtocolViolation):
            pregame.start_game()
        assert pregame.phase is GamePhase.PREGAME

    def test_start_with_two_players(self, pregame):
        pregame.add_player("Alice")
        pregame.add_player("Bob")
        pregame.start_game()
        assert pregame.phase is GamePhase.PLAYING

    def test_configured_minimum(self):
        game = PassThePigsGame(GameConfig(min_players=3))
        game.add_player("Alice")
        game.add_player("Bob")
        with pytest.raises(ProtocolViolation):
            game.start_game()

    def test_scoring_before_start_rejected(self, pregame):
        pregame.add_player("Alice")
        with pytest.raises(ProtocolViolation, match="pregame"):
            pregame.report_leaning(DieFace.SNOUTER)
        with pytest.raises(ProtocolViolation):
            pregame.pig_out()
        with pytest.raises(ProtocolViolation):
            pregame.start_combo()
        assert pregame.turn_points == 0

    def test_rankings_unavailable_before_over(self, pregame):
        with pytest.raises(ProtocolViolation, match="game is over"):
            pregame.rankings()


# === Playing ===


class TestScoring:
    """Scoring events only touch the turn accumulator."""

    def test_leaning_and_double_accumulate(self, three_player_game):
        game = three_player_game
        game.report_leaning(DieFace.HOOFER)
        game.report_double(DieFace.SNOUTER)
        assert game.turn_points == 45
        assert game.scoreboard == {"Alice": 0, "Bob": 0, "Carol": 0}

    def test_mixed_combo_adds_once(self, three_player_game):
        game = three_player_game
        game.start_combo()
        game.select_combo_face(DieFace.HOOFER)
        assert game.combo_pending is True
        assert game.pending_combo_face is DieFace.HOOFER
        game.select_combo_face(DieFace.SNOUTER)
        assert game.turn_points == 10
        assert game.combo_pending is False
        assert game.combo_mode == Idle()

    def test_roster_frozen_once_playing(self, three_player_game):
        with pytest.raises(ProtocolViolation):
            three_player_game.add_player("Dave")
        with pytest.raises(ProtocolViolation):
            three_player_game.update_name_draft("Dave")
        with pytest.raises(ProtocolViolation):
            three_player_game.start_game()
        assert len(three_player_game.players) == 3


class TestPigOut:
    """Tests for PassThePigsGame.pig_out()."""

    def test_banks_and_rotates(self, three_player_game):
        game = three_player_game
        game.report_double(DieFace.SNOUTER)
        game.report_leaning(DieFace.JOWLER)

        assert game.pig_out() == 55
        assert game.scoreboard == {"Alice": 55, "Bob": 0, "Carol": 0}
        assert game.turn_points == 0
        assert game.players == ("Bob", "Carol", "Alice")

    def test_zero_point_turn(self, three_player_game):
        assert three_player_game.pig_out() == 0
        assert three_player_game.current_player == "Bob"

    def test_rejected_while_combo_open(self, three_player_game):
        game = three_player_game
        game.report_leaning(DieFace.SNOUTER)
        game.start_combo()
        with pytest.raises(ProtocolViolation, match="mixed combo"):
            game.pig_out()
        assert game.current_player == "Alice"
        assert game.turn_points == 10
        assert game.scoreboard["Alice"] == 0


class TestMakinBacon:
    """Tests for PassThePigsGame.makin_bacon()."""

    def test_discards_points_and_rotates(self, three_player_game):
        game = three_player_game
        bank_jowlers(game, 1)
        before = sum(game.scoreboard.values())

        game.report_double(DieFace.HOOFER)
        assert game.makin_bacon() == 20

        assert sum(game.scoreboard.values()) == before
        assert game.scoreboard["Bob"] == 0
        assert game.turn_points == 0
        assert game.players == ("Carol", "Alice", "Bob")


# === Last turn race ===


class TestLastTurn:
    """Tests for the trailing round after the target is reached."""

    def test_three_player_race_ends_game(self, three_player_game):
        game = three_player_game
        bank_jowlers(game, 2)  # Alice reaches 120
        assert game.last_turn_count == 1
        assert game.phase is GamePhase.PLAYING
        assert game.is_last_turn is False

        game.makin_bacon()  # Bob
        assert game.last_turn_count == 2
        assert game.phase is GamePhase.LAST_TURN
        assert game.is_last_turn is True
        assert game.current_player == "Carol"

        game.pig_out()  # Carol
        assert game.phase is GamePhase.OVER
        assert game.is_last_turn is False
        assert game.rankings()[0] == ("Alice", 120)

    def test_two_player_last_turn_starts_immediately(self):
        game = PassThePigsGame()
        game.add_player("Alice")
        game.add_player("Bob")
        game.start_game()

        bank_jowlers(game, 2)
        assert game.phase is GamePhase.LAST_TURN
        assert game.current_player == "Bob"

        bank_jowlers(game, 3)
        assert game.phase is GamePhase.OVER
        assert game.rankings() == [("Bob", 180), ("Alice", 120)]
        assert game.winners() == ["Bob"]

    def test_counter_idle_below_target(self, three_player_game):
        game = three_player_game
        for _ in range(6):
            game.report_leaning(DieFace.SNOUTER)
            game.pig_out()
        assert game.last_turn_count == 0
        assert game.phase is GamePhase.PLAYING

    def test_counter_keeps_counting_once_triggered(self, three_player_game):
        game = three_player_game
        bank_jowlers(game, 2)
        game.pig_out()
        assert game.last_turn_count == 2

    def test_custom_target_score(self):
        game = PassThePigsGame(GameConfig(target_score=20))
        game.add_player("Alice")
        game.add_player("Bob")
        game.start_game()
        game.report_double(DieFace.HOOFER)
        game.pig_out()
        assert game.is_last_turn is True

    def test_ties_are_all_winners(self):
        game = PassThePigsGame()
        game.add_player("Alice")
        game.add_player("Bob")
        game.start_game()
        bank_jowlers(game, 2)
        bank_jowlers(game, 2)
        assert game.phase is GamePhase.OVER
        assert game.winners() == ["Alice", "Bob"]


class TestOver:
    """Terminal state behaviour."""

    @pytest.fixture
    def finished(self, three_player_game):
        bank_jowlers(three_player_game, 2)
        three_player_game.pig_out()
        three_player_game.pig_out()
        assert three_player_game.phase is GamePhase.OVER
        return three_player_game

    def test_events_rejected(self, finished):
        scores = finished.scoreboard
        with pytest.raises(ProtocolViolation, match="over"):
            finished.report_double(DieFace.JOWLER)
        with pytest.raises(ProtocolViolation):
            finished.pig_out()
        with pytest.raises(ProtocolViolation):
            finished.makin_bacon()
        assert finished.scoreboard == scores
        assert finished.turn_points == 0

    def test_rankings_sorted_descending(self, finished):
        ranked = finished.rankings()
        assert [score for _, score in ranked] == sorted(
            (score for _, score in ranked), reverse=True
        )
        assert ranked[0][1] == max(finished.scoreboard.values())

    def test_new_game_resets_everything(self, finished):
        finished.new_game()
        assert finished.phase is GamePhase.PREGAME
        assert finished.players == ()
        assert finished.scoreboard == {}
        assert finished.last_turn_count == 0
        assert finished.turn_points == 0
        assert finished.combo_pending is False

    def test_new_game_race_starts_over(self, finished):
        finished.new_game()
        finished.add_player("Dan")
        finished.add_player("Eve")
        finished.start_game()
        finished.pig_out()
        assert finished.last_turn_count == 0
        assert finished.phase is GamePhase.PLAYING


class TestQueries:
    def test_repeated_queries_do_not_change_state(self, three_player_game):
        game = three_player_game
        game.report_leaning(DieFace.SNOUTER)
        game.start_combo()
        game.select_combo_face(DieFace.JOWLER)

        def observe():
            return (
                game.phase,
                game.players,
                game.scoreboard,
                game.turn_points,
                game.pending_combo_face,
                game.is_last_turn,
            )

        first = observe()
        for _ in range(5):
            assert observe() == first

    def test_scoreboard_is_a_copy(self, three_player_game):
        three_player_game.scoreboard["Alice"] = 999
        assert three_player_game.scoreboard["Alice"] == 0
