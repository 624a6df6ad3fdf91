import argparse
import logging
import signal
import sys
from pathlib import Path

from rich.console import Console

from config import DATA_DIR, DEFAULT_MAX_ENERGY, GameConfig
from content import Lesson
from errors import TutorError
from exercises import (
    FillBlankQuestion,
    MultipleChoiceQuestion,
    Question,
    TranslationQuestion,
    parse_choice_input,
)
from game import LanguageLearningGame
from ui import TutorUI
from ui.styles import DEFAULT_THEME

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(description="Language Tutor")
    parser.add_argument(
        "--user",
        "-u",
        type=str,
        default="learner",
        help="Learner id for this session (default: learner)",
    )
    parser.add_argument(
        "--max-energy",
        type=positive_int,
        default=DEFAULT_MAX_ENERGY,
        help=f"Maximum energy (default: {DEFAULT_MAX_ENERGY})",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DATA_DIR,
        help="Directory of lesson content JSON files",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser("play", help="Play lessons interactively (default)")
    subparsers.add_parser(
        "demo", help="Run a scripted session that answers the first lesson"
    )

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_game(args) -> LanguageLearningGame:
    config = GameConfig(max_energy=args.max_energy, data_dir=args.data_dir)
    return LanguageLearningGame(args.user, config=config)


def resolve_answer(question: Question, user_input: str) -> str:
    """Map a letter or number choice to the option text for multiple choice."""
    options = question.get_options()
    if options:
        index = parse_choice_input(user_input, len(options))
        if index is not None:
            return options[index]
    return user_input


def sample_correct_answer(question: Question) -> str:
    """Return an answer that the question accepts."""
    if isinstance(question, MultipleChoiceQuestion):
        return question.correct_choice
    if isinstance(question, TranslationQuestion):
        return question.accepted_translations[0]
    if isinstance(question, FillBlankQuestion):
        return question.correct_answer
    raise TypeError(f"Unsupported question type: {type(question).__name__}")


def pending_questions(lesson: Lesson) -> list[int]:
    """Indexes of questions not yet answered correctly."""
    return [i for i, done in enumerate(lesson.question_results) if not done]


def handle_quit(ui: TutorUI) -> None:
    ui.show_quit_message()
    sys.exit(0)


def create_sigint_handler(ui: TutorUI):
    """Create a SIGINT handler that exits with a goodbye message."""

    def sigint_handler(signum, frame):
        handle_quit(ui)

    return sigint_handler


def play_lesson(ui: TutorUI, game: LanguageLearningGame, lesson: Lesson) -> bool:
    """Ask every pending question of a lesson once.

    Returns:
        False if the session should stop (quit or out of energy).
    """
    total = len(lesson.questions)

    for index in pending_questions(lesson):
        if not game.energy_system.has_energy():
            ui.show_out_of_energy()
            return False

        ui.clear_screen()
        question = lesson.get_question(index)
        user_input = ui.show_question(
            prompt_text=question.get_prompt_text(),
            options=question.get_options(),
            question_number=index + 1,
            total_questions=total,
            lesson_title=lesson.title,
        )

        if user_input == "quit":
            return False

        outcome = game.answer_question(lesson.id, index, resolve_answer(question, user_input))
        ui.update_session(outcome)
        ui.show_feedback(outcome, user_input)
        ui.wait_for_continue()

    if lesson.completed:
        ui.show_success(f"Lesson complete: {lesson.title}")
    return True


def run_interactive(args) -> None:
    """Run the interactive play session."""
    console = Console(theme=DEFAULT_THEME)
    ui = TutorUI(console)

    ui.clear_screen()

    game = create_game(args)
    if not game.lesson_manager.lessons:
        ui.show_error("No lessons found. Check data/ directory.")
        return

    signal.signal(signal.SIGINT, create_sigint_handler(ui))

    ui.show_welcome(game.user_id, game.get_game_state())
    ui.create_session_tracker()

    while True:
        game.regenerate_energy()
        lesson = game.lesson_manager.get_next_lesson(game.user_progress.completed_lessons)
        if lesson is None:
            ui.show_all_lessons_complete()
            break

        if not play_lesson(ui, game, lesson):
            break

    ui.show_quit_message()
    ui.show_session_complete(game.get_game_state())
    ui.show_achievements(game.get_unlocked_achievements())


def run_demo(args) -> None:
    """Answer the first recommended lesson correctly and report each step."""
    console = Console(theme=DEFAULT_THEME)
    ui = TutorUI(console)

    game = create_game(args)
    lesson = game.lesson_manager.get_next_lesson(game.user_progress.completed_lessons)
    if lesson is None:
        ui.show_error("No lessons found. Check data/ directory.")
        return

    ui.show_info(f"Demo: {lesson.title} ({len(lesson.questions)} questions)")
    ui.create_session_tracker()

    for index, question in enumerate(lesson.questions):
        answer = sample_correct_answer(question)
        ui.show_info(f"Q{index + 1}: {question.get_prompt_text()}  →  {answer}")
        outcome = game.answer_question(lesson.id, index, answer)
        ui.update_session(outcome)
        ui.show_feedback(outcome, answer)

    if lesson.completed:
        ui.show_success(f"Lesson complete: {lesson.title}")

    state = game.get_game_state()
    ui.show_status(state)
    ui.show_achievements(game.get_unlocked_achievements())
    ui.show_session_complete(state)


def main(argv: list[str] | None = None) -> int:
    """Main entry point with CLI routing."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "demo":
            run_demo(args)
        else:
            # Default to interactive mode
            run_interactive(args)
    except TutorError as e:
        logger.debug("Session aborted", exc_info=True)
        TutorUI(Console(theme=DEFAULT_THEME)).show_error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
