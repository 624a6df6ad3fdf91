"""Gamification mechanics: achievements, answer combos and energy.

All time-dependent operations accept an explicit ``now`` so that callers (and
tests) can control the clock; when omitted, the current wall-clock time is used.
"""

import logging
import math
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from config import COMBO_TIERS, DEFAULT_MAX_ENERGY, ENERGY_REGEN_INTERVAL
from errors import InvalidArgumentError, NotFoundError

logger = logging.getLogger(__name__)


# ============================================================================
# Achievements
# ============================================================================


class AchievementTier(str, Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"


class CriteriaKind(str, Enum):
    LESSONS = "lessons"
    STREAK = "streak"


class AchievementCriteria(BaseModel):
    """Unlock threshold: reach ``count`` of the given progress signal."""

    model_config = ConfigDict(frozen=True)

    kind: CriteriaKind
    count: int = Field(ge=1)


class AchievementDefinition(BaseModel):
    """Immutable catalog entry describing an achievement."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    tier: AchievementTier
    criteria: AchievementCriteria


DEFAULT_ACHIEVEMENTS: tuple[AchievementDefinition, ...] = (
    AchievementDefinition(
        id="first-lesson",
        name="First Steps",
        description="Complete your first lesson",
        tier=AchievementTier.BRONZE,
        criteria=AchievementCriteria(kind=CriteriaKind.LESSONS, count=1),
    ),
    AchievementDefinition(
        id="ten-lessons",
        name="Getting Started",
        description="Complete 10 lessons",
        tier=AchievementTier.SILVER,
        criteria=AchievementCriteria(kind=CriteriaKind.LESSONS, count=10),
    ),
    AchievementDefinition(
        id="week-streak",
        name="Week Warrior",
        description="Maintain a 7-day streak",
        tier=AchievementTier.GOLD,
        criteria=AchievementCriteria(kind=CriteriaKind.STREAK, count=7),
    ),
    AchievementDefinition(
        id="month-streak",
        name="Dedication Master",
        description="Maintain a 30-day streak",
        tier=AchievementTier.PLATINUM,
        criteria=AchievementCriteria(kind=CriteriaKind.STREAK, count=30),
    ),
)


class Achievement(BaseModel):
    """A catalog entry plus its unlock state for one learner."""

    definition: AchievementDefinition
    unlocked: bool = False
    unlocked_at: datetime | None = None

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def description(self) -> str:
        return self.definition.description

    @property
    def tier(self) -> AchievementTier:
        return self.definition.tier

    def unlock(self, now: datetime | None = None) -> bool:
        """Unlock the achievement once. Returns True only on the first unlock."""
        if self.unlocked:
            return False
        self.unlocked = True
        self.unlocked_at = now or datetime.now()
        return True


class AchievementTracker:
    """Evaluates unlock criteria for a learner against a fixed catalog."""

    def __init__(
        self,
        user_id: str,
        catalog: tuple[AchievementDefinition, ...] | list[AchievementDefinition] = DEFAULT_ACHIEVEMENTS,
    ):
        self.user_id = user_id
        self._achievements: dict[str, Achievement] = {}
        for definition in catalog:
            if definition.id in self._achievements:
                raise InvalidArgumentError(f"Duplicate achievement id: {definition.id}")
            self._achievements[definition.id] = Achievement(definition=definition)

    def _check(self, kind: CriteriaKind, value: int, now: datetime | None) -> None:
        for achievement in self._achievements.values():
            criteria = achievement.definition.criteria
            if criteria.kind == kind and value >= criteria.count:
                if achievement.unlock(now):
                    logger.info(
                        f"User {self.user_id} unlocked achievement '{achievement.name}'"
                    )

    def check_lesson_completion(self, lesson_count: int, now: datetime | None = None) -> None:
        self._check(CriteriaKind.LESSONS, lesson_count, now)

    def check_streak(self, streak_days: int, now: datetime | None = None) -> None:
        self._check(CriteriaKind.STREAK, streak_days, now)

    def get_achievement(self, achievement_id: str) -> Achievement:
        if achievement_id not in self._achievements:
            raise NotFoundError(f"Achievement not found: {achievement_id}")
        return self._achievements[achievement_id].model_copy(deep=True)

    def get_all_achievements(self) -> list[Achievement]:
        return [a.model_copy(deep=True) for a in self._achievements.values()]

    def get_unlocked_achievements(self) -> list[Achievement]:
        """Unlocked achievements in catalog order."""
        return [
            a.model_copy(deep=True)
            for a in self._achievements.values()
            if a.unlocked
        ]


# ============================================================================
# Combo
# ============================================================================


class ComboSystem:
    """Tracks consecutive correct answers and the resulting score multiplier."""

    def __init__(self):
        self.current_combo = 0
        self.highest_combo = 0

    def record_answer(self, is_correct: bool) -> None:
        if is_correct:
            self.current_combo += 1
            self.highest_combo = max(self.highest_combo, self.current_combo)
        else:
            self.current_combo = 0

    def get_multiplier(self) -> float:
        for min_combo, multiplier in COMBO_TIERS:
            if self.current_combo >= min_combo:
                return multiplier
        return 1.0

    def calculate_points(self, base_points: int) -> int:
        return math.floor(base_points * self.get_multiplier())


# ============================================================================
# Energy
# ============================================================================


class EnergySystem:
    """Bounded energy that wrong answers consume and time restores.

    One point is restored per whole ENERGY_REGEN_INTERVAL since the last
    update. Applying regeneration moves ``last_update`` to the time it was
    applied, so any partial interval is dropped.
    """

    def __init__(self, max_energy: int = DEFAULT_MAX_ENERGY, now: datetime | None = None):
        if max_energy < 1:
            raise InvalidArgumentError(f"max_energy must be at least 1, got {max_energy}")
        self.max_energy = max_energy
        self.current_energy = max_energy
        self.last_update = now or datetime.now()

    def has_energy(self) -> bool:
        return self.current_energy > 0

    def record_answer(self, is_correct: bool, now: datetime | None = None) -> None:
        if not is_correct and self.current_energy > 0:
            self.current_energy -= 1
            self.last_update = now or datetime.now()
            logger.debug(f"Energy decreased to {self.current_energy}/{self.max_energy}")

    def regenerate(self, now: datetime | None = None) -> int:
        """Restore energy for elapsed time.

        Returns:
            Number of energy points restored.
        """
        if self.current_energy >= self.max_energy:
            return 0

        now = now or datetime.now()
        intervals = math.floor((now - self.last_update) / ENERGY_REGEN_INTERVAL)
        if intervals < 1:
            return 0

        before = self.current_energy
        self.current_energy = min(self.max_energy, self.current_energy + intervals)
        self.last_update = now

        restored = self.current_energy - before
        logger.debug(
            f"Regenerated {restored} energy ({self.current_energy}/{self.max_energy})"
        )
        return restored

    def refill(self, now: datetime | None = None) -> None:
        self.current_energy = self.max_energy
        self.last_update = now or datetime.now()
