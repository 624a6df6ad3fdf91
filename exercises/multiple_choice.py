"""Multiple choice question: pick the one correct option from a list."""

from typing import Literal

from pydantic import Field, model_validator

from exercises.base import BaseQuestion, QuestionResult, normalize_answer


class MultipleChoiceQuestion(BaseQuestion):
    type: Literal["multiple_choice"] = "multiple_choice"
    # Options are labelled A-F
    choices: list[str] = Field(min_length=2, max_length=6)
    correct_index: int

    @model_validator(mode="after")
    def _check_correct_index(self) -> "MultipleChoiceQuestion":
        if not 0 <= self.correct_index < len(self.choices):
            raise ValueError(
                f"correct_index {self.correct_index} out of range "
                f"for {len(self.choices)} choices"
            )
        return self

    @property
    def correct_choice(self) -> str:
        return self.choices[self.correct_index]

    def get_options(self) -> list[str]:
        return list(self.choices)

    def check_answer(self, answer: str, is_first_try: bool = False) -> QuestionResult:
        correct_answer = self.correct_choice
        if normalize_answer(answer) == normalize_answer(correct_answer):
            return self._correct(is_first_try)

        return QuestionResult(
            is_correct=False,
            feedback=f"Incorrect. The correct answer is: {correct_answer}",
            points=0,
            correct_answer=correct_answer,
        )
