"""Lesson content and skill-path sequencing.

Lessons, vocabulary and skill paths are static data loaded from JSON files
under ``data/``. Each JSON file holds a list of skill paths; questions are
tagged with a ``type`` field selecting the question variant.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from errors import NotFoundError
from exercises import Difficulty, Question

logger = logging.getLogger(__name__)


class Vocabulary(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    category: str
    translations: list[str]
    description: str = ""
    example: str | None = None
    difficulty: Difficulty = Difficulty.MEDIUM


class Lesson(BaseModel):
    """A lesson: ordered questions, vocabulary and per-question correctness."""

    id: str
    title: str
    description: str = ""
    difficulty: Difficulty = Difficulty.MEDIUM
    questions: list[Question] = Field(default_factory=list)
    vocabulary: list[Vocabulary] = Field(default_factory=list)
    completed: bool = False
    question_results: list[bool] = Field(default_factory=list)

    @model_validator(mode="after")
    def _align_results(self) -> "Lesson":
        # One correctness flag per question
        missing = len(self.questions) - len(self.question_results)
        if missing > 0:
            self.question_results.extend([False] * missing)
        elif missing < 0:
            del self.question_results[len(self.questions):]
        return self

    def add_question(self, question: Question) -> None:
        self.questions.append(question)
        self.question_results.append(False)

    def add_vocabulary(self, vocab: Vocabulary) -> None:
        self.vocabulary.append(vocab)

    def get_question(self, index: int) -> Question:
        if index < 0 or index >= len(self.questions):
            raise NotFoundError(f"Question {index} not found in lesson {self.id}")
        return self.questions[index]

    def record_question_answer(self, index: int, is_correct: bool) -> None:
        """Record correctness for a question; out-of-range indexes are ignored."""
        if 0 <= index < len(self.question_results):
            self.question_results[index] = is_correct

    def mark_completed(self) -> None:
        self.completed = True

    @property
    def progress(self) -> int:
        """Percentage of questions answered correctly, rounded down."""
        if not self.questions:
            return 0
        correct = sum(1 for result in self.question_results if result)
        return correct * 100 // len(self.questions)


class SkillPath(BaseModel):
    """An ordered sequence of lessons unlocked one after another."""

    id: str
    name: str
    description: str = ""
    lessons: list[Lesson] = Field(default_factory=list)

    def add_lesson(self, lesson: Lesson) -> None:
        self.lessons.append(lesson)

    def _index_of(self, lesson_id: str) -> int | None:
        for i, lesson in enumerate(self.lessons):
            if lesson.id == lesson_id:
                return i
        return None

    def is_lesson_unlocked(self, lesson_id: str, completed_lessons: list[str]) -> bool:
        """The first lesson is always unlocked; others need the previous one done."""
        index = self._index_of(lesson_id)
        if index is None:
            return False
        if index == 0:
            return True
        return self.lessons[index - 1].id in completed_lessons

    def get_progress(self, completed_lessons: list[str]) -> int:
        if not self.lessons:
            return 0
        completed = sum(1 for lesson in self.lessons if lesson.id in completed_lessons)
        return completed * 100 // len(self.lessons)


class LessonManager:
    """Registry of lessons and skill paths, in insertion order."""

    def __init__(self):
        self.lessons: dict[str, Lesson] = {}
        self.skill_paths: dict[str, SkillPath] = {}

    def add_lesson(self, lesson: Lesson) -> None:
        self.lessons[lesson.id] = lesson

    def get_all_lessons(self) -> list[Lesson]:
        return list(self.lessons.values())

    def get_lesson_by_id(self, lesson_id: str) -> Lesson | None:
        return self.lessons.get(lesson_id)

    def get_lesson(self, lesson_id: str) -> Lesson:
        """Like get_lesson_by_id, but raises NotFoundError for unknown ids."""
        lesson = self.lessons.get(lesson_id)
        if lesson is None:
            raise NotFoundError(f"Lesson not found: {lesson_id}")
        return lesson

    def get_lessons_by_difficulty(self, difficulty: Difficulty) -> list[Lesson]:
        return [
            lesson for lesson in self.lessons.values() if lesson.difficulty == difficulty
        ]

    def add_skill_path(self, path: SkillPath) -> None:
        self.skill_paths[path.id] = path
        for lesson in path.lessons:
            self.add_lesson(lesson)

    def get_all_skill_paths(self) -> list[SkillPath]:
        return list(self.skill_paths.values())

    def get_skill_path_by_id(self, path_id: str) -> SkillPath | None:
        return self.skill_paths.get(path_id)

    def get_next_lesson(self, completed_lessons: list[str]) -> Lesson | None:
        """First uncompleted lesson that is unlocked, scanning paths in order."""
        for path in self.skill_paths.values():
            for lesson in path.lessons:
                if lesson.id in completed_lessons:
                    continue
                if path.is_lesson_unlocked(lesson.id, completed_lessons):
                    return lesson
        return None


_skill_paths_adapter = TypeAdapter(list[SkillPath])


def load_skill_paths(path: Path) -> list[SkillPath]:
    """Load and validate skill paths from a JSON file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return _skill_paths_adapter.validate_python(data)


def load_lesson_manager(data_dir: Path) -> LessonManager:
    """Build a LessonManager from every JSON file in data_dir (sorted by name)."""
    manager = LessonManager()
    data_dir = Path(data_dir)
    if not data_dir.exists():
        logger.warning(f"Content directory {data_dir} does not exist")
        return manager

    for content_file in sorted(data_dir.glob("*.json")):
        for skill_path in load_skill_paths(content_file):
            manager.add_skill_path(skill_path)
        logger.debug(f"Loaded content from {content_file.name}")

    logger.info(
        f"Loaded {len(manager.skill_paths)} skill paths, {len(manager.lessons)} lessons"
    )
    return manager
