"""Shared pytest fixtures for the Language Tutor test suite."""

import pytest
from datetime import datetime

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import DATA_DIR, GameConfig
from content import Lesson, LessonManager, SkillPath, load_lesson_manager
from exercises import (
    Difficulty,
    FillBlankQuestion,
    MultipleChoiceQuestion,
    TranslationQuestion,
)
from game import LanguageLearningGame


@pytest.fixture
def start_time() -> datetime:
    """A fixed reference time for time-dependent tests."""
    return datetime(2024, 3, 10, 9, 30)


@pytest.fixture
def multiple_choice_question() -> MultipleChoiceQuestion:
    return MultipleChoiceQuestion(
        text="What is a common way to greet someone in English?",
        choices=["Hello", "Goodbye", "Thank you", "Sorry"],
        correct_index=0,
        difficulty=Difficulty.EASY,
    )


@pytest.fixture
def translation_question() -> TranslationQuestion:
    return TranslationQuestion(
        text="Translate to Spanish: The cat is sleeping",
        source_text="The cat is sleeping",
        accepted_translations=["El gato está durmiendo", "El gato duerme"],
        difficulty=Difficulty.MEDIUM,
    )


@pytest.fixture
def fill_blank_question() -> FillBlankQuestion:
    return FillBlankQuestion(
        text="_____, how are you today?",
        correct_answer="Hello",
        accepted_answers=["Hello", "Hi"],
        difficulty=Difficulty.EASY,
    )


@pytest.fixture
def past_tense_question() -> FillBlankQuestion:
    return FillBlankQuestion(
        text="I _____ (go) to the store yesterday.",
        correct_answer="went",
        accepted_answers=["went"],
        difficulty=Difficulty.HARD,
    )


@pytest.fixture
def two_lesson_path() -> SkillPath:
    """A small skill path with two single-question lessons."""
    path = SkillPath(id="path-1", name="Basics", description="Basics")
    for n in (1, 2):
        lesson = Lesson(id=f"l{n}", title=f"Lesson {n}", difficulty=Difficulty.EASY)
        lesson.add_question(
            MultipleChoiceQuestion(text=f"Q{n}", choices=["A", "B"], correct_index=0)
        )
        path.add_lesson(lesson)
    return path


@pytest.fixture
def lesson_manager() -> LessonManager:
    """Lesson manager loaded from the bundled content files."""
    return load_lesson_manager(DATA_DIR)


@pytest.fixture
def game(lesson_manager, start_time) -> LanguageLearningGame:
    """A fresh game over the bundled content with a fixed start time."""
    return LanguageLearningGame(
        "user-123",
        lesson_manager=lesson_manager,
        config=GameConfig(max_energy=5),
        now=start_time,
    )
