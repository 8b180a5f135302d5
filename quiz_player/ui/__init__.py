"""Qt UI components for the quiz player."""

from .dialog_helpers import (
    confirm_abandon_quiz,
    confirm_skip_to_results,
    show_error,
    show_info,
    show_warning,
)
from .player_window import PlayerMainWindow
from .question_renderer import render_question_document

__all__ = [
    "PlayerMainWindow",
    "confirm_abandon_quiz",
    "confirm_skip_to_results",
    "show_error",
    "show_info",
    "show_warning",
    "render_question_document",
]
