"""Tests for the game session over the bundled beginner content."""

import pytest
from datetime import timedelta

from config import GameConfig
from errors import NotFoundError, ResourceExhaustedError
from game import LanguageLearningGame

GREETING_ANSWERS = ["Hello", "goodbye", "Hello"]


def play_greetings(game, now):
    return [
        game.answer_question("greetings-1", index, answer, now=now)
        for index, answer in enumerate(GREETING_ANSWERS)
    ]


def exhaust_energy(game, now):
    for _ in range(game.energy_system.max_energy):
        game.answer_question("greetings-1", 0, "Sorry", now=now)


class TestInitialState:
    def test_fresh_game_state(self, game):
        state = game.get_game_state()
        assert state.user.xp == 0
        assert state.user.level == 1
        assert state.user.streak == 0
        assert state.user.completed_lessons == 0
        assert state.current.combo == 0
        assert state.current.energy == 5
        assert state.current.max_energy == 5
        assert state.next_lesson == "greetings-1"

    def test_user_id(self, game):
        assert game.user_id == "user-123"

    def test_configured_max_energy(self, lesson_manager, start_time):
        game = LanguageLearningGame(
            "user-1",
            lesson_manager=lesson_manager,
            config=GameConfig(max_energy=3),
            now=start_time,
        )
        assert game.get_game_state().current.max_energy == 3

    def test_loads_content_from_config(self, start_time):
        game = LanguageLearningGame("user-1", now=start_time)
        assert game.get_game_state().next_lesson == "greetings-1"


class TestAnswerQuestion:
    """Tests for a single learner's journey through the first lesson."""

    def test_combo_grows_with_correct_answers(self, game, start_time):
        outcomes = play_greetings(game, start_time)
        assert [o.combo for o in outcomes] == [1, 2, 3]
        assert all(o.result.is_correct for o in outcomes)

    def test_third_answer_gets_combo_bonus(self, game, start_time):
        outcomes = play_greetings(game, start_time)
        assert outcomes[0].result.points == 10
        assert outcomes[2].result.points == 15
        assert outcomes[2].result.points > outcomes[0].result.points

    def test_xp_accumulates_combo_points(self, game, start_time):
        play_greetings(game, start_time)
        assert game.user_progress.xp == 35

    def test_completing_lesson_unlocks_first_steps(self, game, start_time):
        outcomes = play_greetings(game, start_time)
        assert outcomes[0].new_achievements == []
        assert outcomes[2].new_achievements == ["First Steps"]
        assert [a.name for a in game.get_unlocked_achievements()] == ["First Steps"]
        assert game.get_unlocked_achievements()[0].unlocked_at == start_time

    def test_completing_lesson_advances_next_lesson(self, game, start_time):
        play_greetings(game, start_time)
        state = game.get_game_state()
        assert state.user.completed_lessons == 1
        assert state.user.streak == 1
        assert state.next_lesson == "phrases-1"
        assert game.lesson_manager.get_lesson("greetings-1").completed

    def test_wrong_answer_breaks_combo_and_costs_energy(self, game, start_time):
        game.answer_question("greetings-1", 0, "Hello", now=start_time)
        outcome = game.answer_question("greetings-1", 1, "hola", now=start_time)
        assert not outcome.result.is_correct
        assert outcome.result.points == 0
        assert outcome.result.correct_answer == "goodbye"
        assert outcome.combo == 0
        assert outcome.energy == 4
        assert game.combo_system.highest_combo == 1

    def test_retry_is_not_a_first_try(self, game, start_time):
        game.answer_question("greetings-1", 0, "Sorry", now=start_time)
        outcome = game.answer_question("greetings-1", 0, "Hello", now=start_time)
        assert outcome.result.is_correct
        assert outcome.result.points == 5

    def test_typo_still_scores(self, game, start_time):
        outcome = game.answer_question("greetings-1", 1, "goodbe", now=start_time)
        assert outcome.result.is_correct
        assert "typo" in outcome.result.feedback

    def test_level_up_is_reported(self, game, start_time):
        game.user_progress.add_xp(95)
        outcome = game.answer_question("greetings-1", 0, "Hello", now=start_time)
        assert outcome.leveled_up
        assert game.get_game_state().user.level == 2

    def test_streak_continues_next_day(self, game, start_time):
        play_greetings(game, start_time)
        game.answer_question("phrases-1", 0, "Thank you", now=start_time + timedelta(days=1))
        state = game.get_game_state()
        assert state.user.streak == 2
        assert state.user.completed_lessons == 2
        assert state.next_lesson is None


class TestAnswerErrors:
    """Tests for rejected submissions."""

    def test_out_of_energy(self, game, start_time):
        exhaust_energy(game, start_time)
        assert game.get_game_state().current.energy == 0
        with pytest.raises(ResourceExhaustedError):
            game.answer_question("greetings-1", 0, "Hello", now=start_time)

    def test_out_of_energy_changes_nothing(self, game, start_time):
        exhaust_energy(game, start_time)
        before = game.get_game_state()
        with pytest.raises(ResourceExhaustedError):
            game.answer_question("greetings-1", 0, "Hello", now=start_time)
        assert game.get_game_state() == before

    def test_unknown_lesson(self, game, start_time):
        with pytest.raises(NotFoundError):
            game.answer_question("missing", 0, "Hello", now=start_time)
        assert game.get_game_state().current.energy == 5

    def test_unknown_question(self, game, start_time):
        before = game.get_game_state()
        with pytest.raises(NotFoundError):
            game.answer_question("greetings-1", 99, "Hello", now=start_time)
        assert game.get_game_state() == before


class TestEnergyManagement:
    def test_regenerate_energy(self, game, start_time):
        exhaust_energy(game, start_time)
        restored = game.regenerate_energy(start_time + timedelta(hours=2))
        assert restored == 2
        assert game.get_game_state().current.energy == 2

    def test_refill_energy(self, game, start_time):
        exhaust_energy(game, start_time)
        game.refill_energy(start_time)
        assert game.get_game_state().current.energy == 5
        game.answer_question("greetings-1", 0, "Hello", now=start_time)


class TestCompleteLesson:
    def test_complete_lesson_directly(self, game, start_time):
        game.complete_lesson("greetings-1", now=start_time)
        assert game.user_progress.is_lesson_completed("greetings-1")
        assert game.user_progress.streak == 1
        assert [a.id for a in game.get_unlocked_achievements()] == ["first-lesson"]

    def test_complete_unknown_lesson(self, game):
        with pytest.raises(NotFoundError):
            game.complete_lesson("missing")
