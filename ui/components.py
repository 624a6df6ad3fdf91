from rich import box
from rich.align import Align
from rich.columns import Columns
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text
from typing import List, Literal, Optional

from game import AnswerOutcome, GameState
from gamification import Achievement
from ui.styles import (
    BRAND_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
    STREAK_ORANGE,
    SUCCESS_GREEN,
    TEXT_WHITE,
    XP_GOLD,
    create_energy_hearts,
    get_energy_style,
    get_tier_style,
)


class QuestionPanel:
    """A styled panel for displaying a question."""

    def __init__(
        self,
        prompt_text: str,
        options: List[str],
        question_number: int = 0,
        total_questions: int = 0,
        lesson_title: str = "",
        input_mode: Literal["choice", "text"] = "choice",
    ):
        self.prompt_text = prompt_text
        self.options = options
        self.question_number = question_number
        self.total_questions = total_questions
        self.lesson_title = lesson_title
        self.input_mode = input_mode

    def render(self) -> Panel:
        content = Text()

        if self.total_questions > 0:
            content.append(
                f"Question {self.question_number}/{self.total_questions}\n",
                Style(color=MUTED_GRAY),
            )

        content.append(self.prompt_text, Style(color=BRAND_GREEN, bold=True))
        content.append("\n\n")

        for i, option in enumerate(self.options):
            content.append(f"{chr(65 + i)}. ", Style(color=XP_GOLD, bold=True))
            content.append(option, Style(color=TEXT_WHITE))
            content.append("\n")

        if self.input_mode == "text":
            subtitle = "Type your answer (or 'q' to quit)"
        else:
            letters = "/".join(chr(65 + i) for i in range(len(self.options)))
            subtitle = f"Type {letters} (or 'q' to quit)"

        return Panel(
            Align.left(content),
            title=self.lesson_title or "Language Tutor",
            subtitle=subtitle,
            border_style=BRAND_GREEN,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class FeedbackPanel:
    """A styled panel for displaying the outcome of an answer."""

    def __init__(self, outcome: AnswerOutcome, user_answer: str = ""):
        self.outcome = outcome
        self.user_answer = user_answer

    def render(self) -> Panel:
        result = self.outcome.result
        content = Text()

        if result.is_correct:
            content.append("✓ ", Style(color=SUCCESS_GREEN, bold=True))
            content.append(f"{result.feedback}\n", Style(color=SUCCESS_GREEN, bold=True))
            content.append(f"+{result.points} XP", Style(color=XP_GOLD, bold=True))
            if self.outcome.combo > 1:
                content.append(
                    f"   🔥 Combo x{self.outcome.combo}", Style(color=STREAK_ORANGE, bold=True)
                )
            content.append("\n")
        else:
            content.append("✗ ", Style(color=ERROR_RED, bold=True))
            content.append(f"{result.feedback}\n", Style(color=ERROR_RED, bold=True))
            if self.user_answer:
                content.append(
                    f"You answered: {self.user_answer}\n", Style(color=MUTED_GRAY)
                )
            if result.correct_answer:
                content.append("Correct answer: ", Style(color=MUTED_GRAY))
                content.append(
                    f"{result.correct_answer}\n", Style(color=SUCCESS_GREEN, bold=True)
                )

        if self.outcome.leveled_up:
            content.append("\n⬆ Level up!\n", Style(color=XP_GOLD, bold=True))

        for name in self.outcome.new_achievements:
            content.append(f"\n🏆 Achievement unlocked: {name}", Style(color=XP_GOLD, bold=True))

        return Panel(
            Align.left(content),
            title="Result",
            border_style=SUCCESS_GREEN if result.is_correct else ERROR_RED,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class StatusPanel:
    """Compact table of the learner's progress and session resources."""

    def __init__(self, state: GameState):
        self.state = state

    def render(self) -> Panel:
        stats = Table(show_header=False, border_style=MUTED_GRAY, box=box.ROUNDED)
        stats.add_column("Label", style=Style(color=MUTED_GRAY))
        stats.add_column("Value", justify="right")

        user = self.state.user
        current = self.state.current

        stats.add_row("Level", Text(str(user.level), style=Style(color=XP_GOLD, bold=True)))
        stats.add_row("XP", Text(str(user.xp), style=Style(color=XP_GOLD)))
        stats.add_row(
            "Streak", Text(f"{user.streak} day(s)", style=Style(color=STREAK_ORANGE))
        )
        stats.add_row("Lessons", str(user.completed_lessons))
        stats.add_row("Combo", f"{current.combo} (best {current.highest_combo})")
        stats.add_row(
            "Energy",
            create_energy_hearts(current.energy, current.max_energy),
        )
        stats.add_row(
            "Next lesson",
            Text(self.state.next_lesson or "-", style=Style(color=INFO_BLUE)),
        )

        return Panel(
            Align.center(stats),
            title="Progress",
            border_style=get_energy_style(current.energy, current.max_energy),
            box=box.HEAVY,
            padding=(1, 1),
        )

    def __rich__(self) -> Panel:
        return self.render()


class AchievementTable:
    """A styled table of unlocked achievements."""

    def __init__(self, achievements: List[Achievement]):
        self.achievements = achievements

    def render(self) -> Panel:
        table = Table(
            show_header=True,
            header_style=Style(color=BRAND_GREEN, bold=True),
            border_style=MUTED_GRAY,
            row_styles=[Style(), Style(dim=True)],
            box=box.HEAVY,
        )

        table.add_column("Achievement", style=Style(color=TEXT_WHITE, bold=True))
        table.add_column("Tier", justify="center")
        table.add_column("Description", style=Style(color=MUTED_GRAY))
        table.add_column("Unlocked", style=Style(color=INFO_BLUE))

        for achievement in self.achievements:
            unlocked_at = (
                achievement.unlocked_at.strftime("%Y-%m-%d %H:%M")
                if achievement.unlocked_at
                else "N/A"
            )
            table.add_row(
                achievement.name,
                Text(achievement.tier.value, style=get_tier_style(achievement.tier.value)),
                achievement.description,
                unlocked_at,
            )

        return Panel(
            Align.center(table),
            title="Achievements",
            border_style=XP_GOLD,
            box=box.HEAVY,
            padding=(1, 1),
        )

    def __rich__(self) -> Panel:
        return self.render()


class WelcomeScreen:
    """Welcome screen with banner and the learner's current state."""

    def __init__(self, user_id: str, state: GameState):
        self.user_id = user_id
        self.state = state

    def render(self) -> Panel:
        banner = Text()
        banner.append("╔═══════════════════════════════════╗\n", Style(color=BRAND_GREEN))
        banner.append("║          ", Style(color=BRAND_GREEN))
        banner.append("Language Tutor", Style(color=XP_GOLD, bold=True))
        banner.append("           ║\n", Style(color=BRAND_GREEN))
        banner.append("╚═══════════════════════════════════╝\n", Style(color=BRAND_GREEN))
        banner.append("\n")
        banner.append(f"Welcome, {self.user_id}!\n\n", Style(color=TEXT_WHITE))
        banner.append("Type 'q' at any time to quit.\n", Style(color=MUTED_GRAY))

        return Panel(
            Columns(
                [Align.center(banner), StatusPanel(self.state)],
                align="center",
                padding=(3, 3),
            ),
            border_style=BRAND_GREEN,
            box=box.HEAVY,
            padding=(2, 3),
        )

    def __rich__(self) -> Panel:
        return self.render()


class SessionTracker:
    """Track answers and points over one play session."""

    def __init__(self):
        self.answered = 0
        self.correct_count = 0
        self.incorrect_count = 0
        self.points = 0

    def update(self, outcome: AnswerOutcome) -> None:
        self.answered += 1
        self.points += outcome.result.points
        if outcome.result.is_correct:
            self.correct_count += 1
        else:
            self.incorrect_count += 1

    @property
    def accuracy(self) -> float:
        if self.answered == 0:
            return 0.0
        return self.correct_count / self.answered * 100

    def render_session_summary(self, state: Optional[GameState] = None) -> Panel:
        stats = Table(show_header=False, border_style=MUTED_GRAY, box=box.SIMPLE)
        stats.add_column("Label", style=Style(color=MUTED_GRAY))
        stats.add_column("Value", justify="right")

        stats.add_row("Answered", str(self.answered))
        stats.add_row(
            "Correct", Text(f"{self.correct_count}", style=Style(color=SUCCESS_GREEN))
        )
        stats.add_row(
            "Incorrect", Text(f"{self.incorrect_count}", style=Style(color=ERROR_RED))
        )
        stats.add_row(
            "Accuracy", Text(f"{self.accuracy:.0f}%", style=Style(color=XP_GOLD, bold=True))
        )
        stats.add_row("XP earned", Text(str(self.points), style=Style(color=XP_GOLD)))

        content = Text()
        content.append("Session Complete!\n\n", Style(color=BRAND_GREEN, bold=True))
        if state is not None:
            content.append(
                f"Level {state.user.level} · {state.user.xp} XP · "
                f"{state.user.streak} day streak\n",
                Style(color=MUTED_GRAY),
            )
        content.append("\nSee you next time! 👋\n", Style(color=MUTED_GRAY))

        return Panel(
            Columns(
                [Align.center(content), Align.center(stats)],
                align="center",
                padding=(0, 1),
            ),
            title="Session Summary",
            border_style=XP_GOLD,
            box=box.HEAVY,
            padding=(2, 3),
        )

    def __rich__(self) -> Panel:
        return self.render_session_summary()
