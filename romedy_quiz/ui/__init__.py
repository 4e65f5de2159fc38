"""Qt UI components for the quiz application."""

from .dialog_helpers import confirm_quit_quiz, show_error, show_info
from .quiz_main_window import QuizMainWindow, QuizView

__all__ = [
    "QuizMainWindow",
    "QuizView",
    "confirm_quit_quiz",
    "show_error",
    "show_info",
]
