"""Shared question model, scoring helpers and input parsing.

Each question variant is a frozen pydantic model that knows how to check a
raw answer and produce a QuestionResult. Scoring is shared: a correct answer
earns the base points for its difficulty plus a bonus on the first try.
"""

from abc import ABC, abstractmethod
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from config import BASE_POINTS, FIRST_TRY_BONUS


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuestionResult(BaseModel):
    """Outcome of checking one answer."""

    is_correct: bool
    feedback: str
    points: int = Field(default=0, ge=0)
    correct_answer: str | None = None


def normalize_answer(text: str) -> str:
    """Trim surrounding whitespace and lower-case for comparison."""
    return text.strip().lower()


def base_points(difficulty: Difficulty) -> int:
    """Points for a correct answer at the given difficulty, before bonuses."""
    return BASE_POINTS[Difficulty(difficulty).value]


def calculate_points(
    difficulty: Difficulty, is_correct: bool, is_first_try: bool
) -> int:
    if not is_correct:
        return 0
    bonus = FIRST_TRY_BONUS if is_first_try else 0
    return base_points(difficulty) + bonus


class BaseQuestion(BaseModel, ABC):
    """Common fields and behaviour for every question variant."""

    model_config = ConfigDict(frozen=True)

    text: str
    difficulty: Difficulty = Difficulty.MEDIUM

    @abstractmethod
    def check_answer(self, answer: str, is_first_try: bool = False) -> QuestionResult:
        """Check a raw answer.

        Args:
            answer: Raw user input; compared case- and whitespace-insensitively.
            is_first_try: Whether this is the learner's first attempt.

        Returns:
            QuestionResult with points already computed.
        """
        ...

    def get_prompt_text(self) -> str:
        """Return the prompt shown to the learner."""
        return self.text

    def get_options(self) -> list[str]:
        """Return selectable options, or an empty list for free-text input."""
        return []

    def _correct(self, is_first_try: bool, feedback: str = "Correct!") -> QuestionResult:
        return QuestionResult(
            is_correct=True,
            feedback=feedback,
            points=calculate_points(self.difficulty, True, is_first_try),
        )


def parse_choice_input(user_input: str, max_options: int = 4) -> int | None:
    """Parse letter (A-F) or number (1-6) input to 0-based index.

    Args:
        user_input: Raw user input string.
        max_options: Maximum number of valid options.

    Returns:
        0-based index or None if input is invalid or out of bounds.
    """
    user_input = user_input.strip().upper()
    letter_map = {"A": 0, "B": 1, "C": 2, "D": 3, "E": 4, "F": 5}

    if user_input in letter_map:
        index = letter_map[user_input]
    elif user_input.isdigit():
        index = int(user_input) - 1
    else:
        return None

    if index < 0 or index >= max_options:
        return None

    return index
