"""Question types for the language tutor.

Question variants:
- MultipleChoiceQuestion: pick the correct option from a list
- TranslationQuestion: free-text translation with typo-tolerant matching
- FillBlankQuestion: free-text completion against a list of accepted answers

All variants share difficulty-based scoring and return a QuestionResult from
check_answer(). Question is a discriminated union over the ``type`` field so
that lessons can be loaded from JSON content files.
"""

from typing import Annotated, Union

from pydantic import Field

from exercises.base import (
    BaseQuestion,
    Difficulty,
    QuestionResult,
    base_points,
    calculate_points,
    normalize_answer,
    parse_choice_input,
)
from exercises.fill_blank import FillBlankQuestion
from exercises.multiple_choice import MultipleChoiceQuestion
from exercises.translation import TranslationQuestion, is_fuzzy_match

Question = Annotated[
    Union[MultipleChoiceQuestion, TranslationQuestion, FillBlankQuestion],
    Field(discriminator="type"),
]

__all__ = [
    # Shared
    "BaseQuestion",
    "Difficulty",
    "QuestionResult",
    "Question",
    "base_points",
    "calculate_points",
    "normalize_answer",
    "parse_choice_input",
    "is_fuzzy_match",
    # Variants
    "MultipleChoiceQuestion",
    "TranslationQuestion",
    "FillBlankQuestion",
]
