"""Unit tests for XP, levels, streaks and lesson completion."""

import pytest
from datetime import date, datetime, timedelta

from config import XP_THRESHOLDS
from errors import InvalidArgumentError
from progress import UserProgress, level_for_xp


@pytest.fixture
def progress() -> UserProgress:
    return UserProgress(user_id="user-123")


class TestInitialState:
    def test_new_user_defaults(self, progress):
        assert progress.user_id == "user-123"
        assert progress.xp == 0
        assert progress.level == 1
        assert progress.streak == 0
        assert progress.last_activity_date is None
        assert progress.completed_lessons == []

    def test_level_derived_from_initial_xp(self):
        assert UserProgress(user_id="u", xp=300).level == 3

    def test_explicit_level_is_overridden_by_xp(self):
        assert UserProgress(user_id="u", xp=0, level=8).level == 1

    def test_restored_progress_keeps_leveling(self):
        progress = UserProgress(user_id="u", xp=450)
        assert progress.xp_for_next_level() == 50
        assert progress.add_xp(50) is True
        assert progress.level == 4


class TestAddXP:
    """Tests for XP awards and level derivation."""

    def test_reaching_100_gives_level_2(self, progress):
        progress.add_xp(100)
        assert progress.level == 2

    def test_reaching_250_gives_level_3(self, progress):
        progress.add_xp(250)
        assert progress.level == 3

    def test_returns_true_only_when_crossing_threshold(self, progress):
        assert progress.add_xp(50) is False
        assert progress.add_xp(50) is True
        assert progress.xp == 100

    def test_negative_amount_rejected(self, progress):
        with pytest.raises(InvalidArgumentError):
            progress.add_xp(-1)
        assert progress.xp == 0

    def test_invalid_argument_is_a_value_error(self, progress):
        with pytest.raises(ValueError):
            progress.add_xp(-10)

    def test_zero_amount_is_allowed(self, progress):
        assert progress.add_xp(0) is False
        assert progress.xp == 0

    def test_level_capped_at_last_threshold(self, progress):
        progress.add_xp(100_000)
        assert progress.level == len(XP_THRESHOLDS) == 8

    def test_multi_level_jump(self, progress):
        assert progress.add_xp(1000) is True
        assert progress.level == 5

    @pytest.mark.parametrize(
        "xp,level",
        [(0, 1), (99, 1), (100, 2), (249, 2), (250, 3), (499, 3), (500, 4), (7999, 7), (8000, 8)],
    )
    def test_level_for_xp(self, xp, level):
        assert level_for_xp(xp) == level

    def test_xp_for_next_level(self, progress):
        progress.add_xp(30)
        assert progress.xp_for_next_level() == 70

    def test_xp_for_next_level_at_max(self, progress):
        progress.add_xp(9000)
        assert progress.xp_for_next_level() is None


class TestRecordActivity:
    """Tests for calendar-day streak tracking."""

    def test_first_activity_starts_streak(self, progress, start_time):
        progress.record_activity(start_time)
        assert progress.streak == 1
        assert progress.last_activity_date == start_time.date()

    def test_same_day_keeps_streak(self, progress, start_time):
        progress.record_activity(start_time)
        progress.record_activity(start_time + timedelta(hours=8))
        assert progress.streak == 1

    def test_next_day_extends_streak(self, progress, start_time):
        progress.record_activity(start_time)
        progress.record_activity(start_time + timedelta(days=1))
        assert progress.streak == 2
        assert progress.last_activity_date == (start_time + timedelta(days=1)).date()

    def test_next_calendar_day_counts_even_if_under_24_hours(self, progress):
        progress.record_activity(datetime(2024, 3, 10, 23, 50))
        progress.record_activity(datetime(2024, 3, 11, 0, 10))
        assert progress.streak == 2

    def test_gap_resets_streak(self, progress, start_time):
        progress.record_activity(start_time)
        progress.record_activity(start_time + timedelta(days=1))
        progress.record_activity(start_time + timedelta(days=4))
        assert progress.streak == 1

    def test_three_day_gap_resets_to_one(self, progress, start_time):
        progress.record_activity(start_time)
        progress.record_activity(start_time + timedelta(days=3))
        assert progress.streak == 1

    def test_backward_date_resets_streak(self, progress, start_time):
        progress.record_activity(start_time)
        progress.record_activity(start_time + timedelta(days=1))
        progress.record_activity(start_time - timedelta(days=2))
        assert progress.streak == 1
        assert progress.last_activity_date == (start_time - timedelta(days=2)).date()

    def test_accepts_plain_dates(self, progress):
        progress.record_activity(date(2024, 1, 31))
        progress.record_activity(date(2024, 2, 1))
        assert progress.streak == 2

    def test_week_of_daily_activity(self, progress, start_time):
        for day in range(7):
            progress.record_activity(start_time + timedelta(days=day))
        assert progress.streak == 7

    def test_defaults_to_today(self, progress):
        progress.record_activity()
        assert progress.last_activity_date == date.today()
        assert progress.streak == 1


class TestCompletedLessons:
    """Tests for the completed lesson set."""

    def test_complete_lesson_is_idempotent(self, progress):
        progress.complete_lesson("l1")
        progress.complete_lesson("l1")
        assert progress.completed_lessons == ["l1"]

    def test_preserves_first_insertion_order(self, progress):
        for lesson_id in ["l2", "l1", "l3", "l2"]:
            progress.complete_lesson(lesson_id)
        assert progress.completed_lessons == ["l2", "l1", "l3"]

    def test_is_lesson_completed(self, progress):
        progress.complete_lesson("l1")
        assert progress.is_lesson_completed("l1")
        assert not progress.is_lesson_completed("l2")
