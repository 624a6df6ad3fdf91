from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from typing import List, Optional

from exercises import parse_choice_input
from game import AnswerOutcome, GameState
from gamification import Achievement
from ui.components import (
    AchievementTable,
    FeedbackPanel,
    QuestionPanel,
    SessionTracker,
    StatusPanel,
    WelcomeScreen,
)
from ui.styles import (
    DEFAULT_THEME,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
    SUCCESS_GREEN,
)


class TutorUI:
    """Main UI orchestrator for the language tutor."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(theme=DEFAULT_THEME)
        self._session_tracker: Optional[SessionTracker] = None

    def show_welcome(self, user_id: str, state: GameState) -> None:
        """Display the welcome screen and wait for user to press Enter."""
        self.console.print(WelcomeScreen(user_id=user_id, state=state))
        self.console.print()
        self.console.input(Text("Press Enter to start...", style=f"bold {MUTED_GRAY}"))

    def show_question(
        self,
        prompt_text: str,
        options: List[str],
        question_number: int,
        total_questions: int,
        lesson_title: str = "",
    ) -> str:
        """Display a question and get user input.

        Questions with options take a letter or number; others take free text.

        Returns:
            "quit" if user quits, otherwise the user's answer.
        """
        input_mode = "choice" if options else "text"
        panel = QuestionPanel(
            prompt_text=prompt_text,
            options=options,
            question_number=question_number,
            total_questions=total_questions,
            lesson_title=lesson_title,
            input_mode=input_mode,
        )

        self.console.print(panel)
        self.console.print()

        if input_mode == "choice":
            return self._get_choice_input(len(options))
        return self._get_text_input()

    def _get_choice_input(self, num_options: int) -> str:
        """Get a letter or number choice from the user."""
        while True:
            user_input = self.console.input(
                Text("Your answer: ", style=f"bold {MUTED_GRAY}")
            ).strip()

            if user_input.lower() == "q":
                return "quit"

            if parse_choice_input(user_input, num_options) is not None:
                return user_input.upper()

            letters = ", ".join(chr(65 + i) for i in range(num_options))
            self.console.print(
                Text(f"Please enter {letters} (or 'q' to quit)\n", style=ERROR_RED)
            )

    def _get_text_input(self) -> str:
        """Get a non-empty free-text answer from the user."""
        while True:
            user_input = self.console.input(
                Text("Your answer: ", style=f"bold {MUTED_GRAY}")
            ).strip()

            if user_input.lower() == "q":
                return "quit"

            if user_input:
                return user_input

            self.console.print(
                Text("Please type an answer (or 'q' to quit)\n", style=ERROR_RED)
            )

    def show_feedback(self, outcome: AnswerOutcome, user_answer: str = "") -> None:
        """Display feedback for the user's answer."""
        self.console.print(FeedbackPanel(outcome, user_answer))
        self.console.print()

    def show_status(self, state: GameState) -> None:
        self.console.print(StatusPanel(state))
        self.console.print()

    def show_achievements(self, achievements: List[Achievement]) -> None:
        """Display unlocked achievements, if any."""
        if not achievements:
            return
        self.console.print(AchievementTable(achievements))
        self.console.print()

    def show_out_of_energy(self) -> None:
        self.console.print(
            Panel(
                Text(
                    "💔 You're out of energy!\n\nEnergy comes back one point per hour. "
                    "Come back later to keep learning.",
                    style=ERROR_RED,
                ),
                title="No Energy",
                border_style=ERROR_RED,
            )
        )

    def show_all_lessons_complete(self) -> None:
        self.console.print(
            Panel(
                Text(
                    "🎉 You've completed every available lesson!",
                    style=SUCCESS_GREEN,
                ),
                title="All Done",
                border_style=SUCCESS_GREEN,
            )
        )

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(
            Panel(
                Text(f"Error: {message}", style=ERROR_RED),
                title="Error",
                border_style=ERROR_RED,
            )
        )

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.console.print(Text(message, style=INFO_BLUE))

    def show_success(self, message: str) -> None:
        """Display a success message."""
        self.console.print(Text(message, style=SUCCESS_GREEN))

    def show_quit_message(self) -> None:
        self.console.print()
        self.console.print(Text("👋 Goodbye! Keep up the streak.", style=MUTED_GRAY))

    def create_session_tracker(self) -> SessionTracker:
        self._session_tracker = SessionTracker()
        return self._session_tracker

    def update_session(self, outcome: AnswerOutcome) -> None:
        if self._session_tracker:
            self._session_tracker.update(outcome)

    def show_session_complete(self, state: Optional[GameState] = None) -> None:
        if self._session_tracker:
            self.console.print(self._session_tracker.render_session_summary(state))

    def clear_screen(self) -> None:
        """Clear the terminal screen."""
        self.console.clear()

    def wait_for_continue(self) -> None:
        """Wait for user to press Enter to continue."""
        self.console.input(
            Text("Press Enter to continue...", style=f"bold {MUTED_GRAY}")
        )
