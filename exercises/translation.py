"""Translation question with typo-tolerant matching.

An answer passes if it matches an accepted translation exactly after
normalization, or is close enough by edit distance to count as a typo.
"""

from typing import Literal

from pydantic import Field

from config import FUZZY_MATCH_THRESHOLD
from exercises.base import BaseQuestion, QuestionResult, normalize_answer
from similarity import similarity

TYPO_FEEDBACK = "Correct! (Note: minor typo detected)"


def is_fuzzy_match(answer: str, accepted: str) -> bool:
    return similarity(answer, accepted) >= FUZZY_MATCH_THRESHOLD


class TranslationQuestion(BaseQuestion):
    type: Literal["translation"] = "translation"
    source_text: str
    accepted_translations: list[str] = Field(min_length=1)

    def check_answer(self, answer: str, is_first_try: bool = False) -> QuestionResult:
        normalized = normalize_answer(answer)

        # First accepted entry that matches wins; entries are not aggregated.
        for accepted in self.accepted_translations:
            normalized_accepted = normalize_answer(accepted)

            if normalized == normalized_accepted:
                return self._correct(is_first_try)

            if is_fuzzy_match(normalized, normalized_accepted):
                return self._correct(is_first_try, feedback=TYPO_FEEDBACK)

        expected = self.accepted_translations[0]
        return QuestionResult(
            is_correct=False,
            feedback=f"Not quite. Expected: {expected}",
            points=0,
            correct_answer=expected,
        )
