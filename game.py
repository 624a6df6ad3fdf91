"""Game session that wires progression, validation and gamification together.

One LanguageLearningGame belongs to one learner. Each answer submission is
checked against energy and content first, then scored, and only then does it
update combo, XP, lesson progress, energy and achievements.
"""

import logging
from datetime import datetime

from pydantic import BaseModel

from config import GameConfig
from content import LessonManager, load_lesson_manager
from errors import ResourceExhaustedError
from exercises import QuestionResult
from gamification import (
    Achievement,
    AchievementTracker,
    ComboSystem,
    EnergySystem,
)
from progress import UserProgress

logger = logging.getLogger(__name__)


class AnswerOutcome(BaseModel):
    """Result of one answer submission; points include the combo multiplier."""

    result: QuestionResult
    leveled_up: bool = False
    new_achievements: list[str]
    combo: int
    energy: int


class UserSummary(BaseModel):
    xp: int
    level: int
    streak: int
    completed_lessons: int


class SessionSummary(BaseModel):
    combo: int
    highest_combo: int
    energy: int
    max_energy: int


class GameState(BaseModel):
    user: UserSummary
    current: SessionSummary
    next_lesson: str | None = None


class LanguageLearningGame:
    """Orchestrates a learner's session over the loaded lesson content."""

    def __init__(
        self,
        user_id: str,
        lesson_manager: LessonManager | None = None,
        config: GameConfig | None = None,
        now: datetime | None = None,
    ):
        self.config = config or GameConfig()
        self.user_progress = UserProgress(user_id=user_id)
        self.achievement_tracker = AchievementTracker(user_id)
        self.combo_system = ComboSystem()
        self.energy_system = EnergySystem(self.config.max_energy, now=now)
        self.lesson_manager = lesson_manager or load_lesson_manager(self.config.data_dir)
        # (lesson_id, question_index) pairs already attempted
        self._attempted: set[tuple[str, int]] = set()

    @property
    def user_id(self) -> str:
        return self.user_progress.user_id

    def answer_question(
        self,
        lesson_id: str,
        question_index: int,
        answer: str,
        now: datetime | None = None,
    ) -> AnswerOutcome:
        """Submit an answer to one question of a lesson.

        Raises:
            ResourceExhaustedError: If no energy remains.
            NotFoundError: If the lesson or question does not exist.
        """
        if not self.energy_system.has_energy():
            raise ResourceExhaustedError(
                "No energy remaining. Wait for regeneration or refill."
            )

        lesson = self.lesson_manager.get_lesson(lesson_id)
        question = lesson.get_question(question_index)

        attempt_key = (lesson_id, question_index)
        is_first_try = attempt_key not in self._attempted
        self._attempted.add(attempt_key)

        result = question.check_answer(answer, is_first_try=is_first_try)

        previous = {a.id for a in self.achievement_tracker.get_unlocked_achievements()}

        self.combo_system.record_answer(result.is_correct)
        points = self.combo_system.calculate_points(result.points)

        leveled_up = False
        if result.is_correct:
            leveled_up = self.user_progress.add_xp(points)
            lesson.record_question_answer(question_index, True)
            if lesson.progress == 100:
                self.complete_lesson(lesson_id, now=now)
        else:
            self.energy_system.record_answer(False, now=now)

        self.achievement_tracker.check_lesson_completion(
            len(self.user_progress.completed_lessons), now=now
        )
        self.achievement_tracker.check_streak(self.user_progress.streak, now=now)

        new_achievements = [
            a.name
            for a in self.achievement_tracker.get_unlocked_achievements()
            if a.id not in previous
        ]

        logger.debug(
            f"{self.user_id} answered {lesson_id}[{question_index}]: "
            f"correct={result.is_correct} points={points} "
            f"combo={self.combo_system.current_combo}"
        )

        return AnswerOutcome(
            result=result.model_copy(update={"points": points}),
            leveled_up=leveled_up,
            new_achievements=new_achievements,
            combo=self.combo_system.current_combo,
            energy=self.energy_system.current_energy,
        )

    def complete_lesson(self, lesson_id: str, now: datetime | None = None) -> None:
        """Mark a lesson complete for the learner and record the day's activity."""
        lesson = self.lesson_manager.get_lesson(lesson_id)

        self.user_progress.complete_lesson(lesson_id)
        self.user_progress.record_activity(now)
        lesson.mark_completed()

        self.achievement_tracker.check_lesson_completion(
            len(self.user_progress.completed_lessons), now=now
        )
        logger.info(f"{self.user_id} completed lesson {lesson_id}")

    def regenerate_energy(self, now: datetime | None = None) -> int:
        return self.energy_system.regenerate(now)

    def refill_energy(self, now: datetime | None = None) -> None:
        self.energy_system.refill(now)

    def get_unlocked_achievements(self) -> list[Achievement]:
        return self.achievement_tracker.get_unlocked_achievements()

    def get_game_state(self) -> GameState:
        next_lesson = self.lesson_manager.get_next_lesson(
            self.user_progress.completed_lessons
        )
        return GameState(
            user=UserSummary(
                xp=self.user_progress.xp,
                level=self.user_progress.level,
                streak=self.user_progress.streak,
                completed_lessons=len(self.user_progress.completed_lessons),
            ),
            current=SessionSummary(
                combo=self.combo_system.current_combo,
                highest_combo=self.combo_system.highest_combo,
                energy=self.energy_system.current_energy,
                max_energy=self.energy_system.max_energy,
            ),
            next_lesson=next_lesson.id if next_lesson else None,
        )
