"""Fill-in-the-blank question with free-text input.

Only exact (case-insensitive) matches against the accepted answers pass.
"""

from typing import Literal

from pydantic import Field

from exercises.base import BaseQuestion, QuestionResult, normalize_answer

PAST_TENSE_MARKERS = ("yesterday", "ago")
PAST_TENSE_HINT = "Hint: Check the past tense form."


class FillBlankQuestion(BaseQuestion):
    type: Literal["fill_blank"] = "fill_blank"
    correct_answer: str
    accepted_answers: list[str] = Field(min_length=1)

    def check_answer(self, answer: str, is_first_try: bool = False) -> QuestionResult:
        normalized = normalize_answer(answer)

        for accepted in self.accepted_answers:
            if normalized == accepted.lower():
                return self._correct(is_first_try)

        return QuestionResult(
            is_correct=False,
            feedback=self.generate_hint(),
            points=0,
            correct_answer=self.correct_answer,
        )

    def generate_hint(self) -> str:
        """Return feedback for a wrong answer.

        Prompts mentioning a past time get a tense hint instead of the answer.
        """
        if any(marker in self.text for marker in PAST_TENSE_MARKERS):
            return PAST_TENSE_HINT
        return f"Incorrect. The correct answer is: {self.correct_answer}"
