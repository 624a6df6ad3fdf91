"""Language Tutor UI Module - Terminal interface built on rich."""

from ui.app import TutorUI
from ui.components import (
    AchievementTable,
    FeedbackPanel,
    QuestionPanel,
    SessionTracker,
    StatusPanel,
    WelcomeScreen,
)
from ui.styles import (
    BRAND_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
    STREAK_ORANGE,
    SUCCESS_GREEN,
    XP_GOLD,
)

__all__ = [
    "TutorUI",
    "AchievementTable",
    "FeedbackPanel",
    "QuestionPanel",
    "SessionTracker",
    "StatusPanel",
    "WelcomeScreen",
    "BRAND_GREEN",
    "ERROR_RED",
    "INFO_BLUE",
    "MUTED_GRAY",
    "STREAK_ORANGE",
    "SUCCESS_GREEN",
    "XP_GOLD",
]
