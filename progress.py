"""Learner progression: XP, levels, calendar-day streaks and completed lessons."""

import logging
from datetime import date, datetime

from pydantic import BaseModel, Field, model_validator

from config import XP_THRESHOLDS
from errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def level_for_xp(xp: int) -> int:
    """Return the level for a total XP amount.

    The level is one more than the index of the highest threshold not
    exceeding xp; XP past the last threshold stays at the max level.
    """
    for index in range(len(XP_THRESHOLDS) - 1, -1, -1):
        if xp >= XP_THRESHOLDS[index]:
            return index + 1
    return 1


def to_calendar_date(when: date | datetime) -> date:
    """Strip the time of day, if any."""
    if isinstance(when, datetime):
        return when.date()
    return when


class UserProgress(BaseModel):
    """Progress state for a single learner."""

    user_id: str
    xp: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=1)
    streak: int = Field(default=0, ge=0)
    last_activity_date: date | None = None
    completed_lessons: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _derive_level(self) -> "UserProgress":
        # level always follows xp
        self.level = level_for_xp(self.xp)
        return self

    @property
    def max_level(self) -> int:
        return len(XP_THRESHOLDS)

    def add_xp(self, amount: int) -> bool:
        """Award XP and recompute the level.

        Returns:
            True if the award moved the learner to a higher level.

        Raises:
            InvalidArgumentError: If amount is negative.
        """
        if amount < 0:
            raise InvalidArgumentError(f"XP must be positive, got {amount}")

        old_level = self.level
        self.xp += amount
        self.level = level_for_xp(self.xp)

        leveled_up = self.level > old_level
        if leveled_up:
            logger.info(f"User {self.user_id} reached level {self.level} ({self.xp} XP)")
        return leveled_up

    def xp_for_next_level(self) -> int | None:
        """XP still needed to reach the next level, or None at max level."""
        if self.level >= self.max_level:
            return None
        return XP_THRESHOLDS[self.level] - self.xp

    def record_activity(self, when: date | datetime | None = None) -> None:
        """Record learning activity on a calendar day and update the streak.

        - First activity ever starts the streak at 1.
        - Another activity on the same day leaves the streak unchanged.
        - Activity on the day after the last one extends the streak.
        - Any other gap (including a date before the last one) restarts at 1.
        """
        today = to_calendar_date(when if when is not None else datetime.now())

        if self.last_activity_date is None:
            self.streak = 1
            self.last_activity_date = today
            return

        days_diff = (today - self.last_activity_date).days

        if days_diff == 0:
            return
        elif days_diff == 1:
            self.streak += 1
        else:
            logger.debug(
                f"Streak for {self.user_id} reset after {days_diff} day gap"
            )
            self.streak = 1
        self.last_activity_date = today

    def complete_lesson(self, lesson_id: str) -> None:
        if lesson_id not in self.completed_lessons:
            self.completed_lessons.append(lesson_id)

    def is_lesson_completed(self, lesson_id: str) -> bool:
        return lesson_id in self.completed_lessons
