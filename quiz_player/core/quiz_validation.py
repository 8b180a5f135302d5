"""Shape checks applied to a quiz before a session may start."""

from __future__ import annotations

from quiz_player.constants.quiz_constants import (
    MAX_TIME_LIMIT_SECONDS,
    MIN_OPTION_COUNT,
    MIN_TIME_LIMIT_SECONDS,
)
from quiz_player.core.models import Question, Quiz


class QuizValidationError(ValueError):
    """Raised when a quiz does not satisfy the engine's input assumptions."""


def validate_quiz(quiz: Quiz) -> None:
    """Reject malformed quizzes up front instead of mid-session."""
    if not quiz.questions:
        raise QuizValidationError("Quiz must contain at least one question.")
    for position, question in enumerate(quiz.questions):
        try:
            _validate_question(question)
        except QuizValidationError as exc:
            raise QuizValidationError(f"Question {position + 1}: {exc}") from exc


def _validate_question(question: Question) -> None:
    if not question.text or not question.text.strip():
        raise QuizValidationError("Question text must not be empty.")
    _validate_options(question.options)
    _validate_correct_answer(question.correct_answer, len(question.options))
    _validate_time_limit(question.time_limit)


def _validate_options(options: tuple[str, ...]) -> None:
    if len(options) < MIN_OPTION_COUNT:
        raise QuizValidationError(
            f"Each question must have at least {MIN_OPTION_COUNT} options."
        )


def _validate_correct_answer(correct_answer: int, option_count: int) -> None:
    if isinstance(correct_answer, bool) or not isinstance(correct_answer, int):
        raise QuizValidationError("Correct answer must be an integer option index.")
    if not 0 <= correct_answer < option_count:
        raise QuizValidationError(
            f"Correct answer index {correct_answer} is out of range for {option_count} options."
        )


def _validate_time_limit(time_limit: int) -> None:
    if isinstance(time_limit, bool) or not isinstance(time_limit, int):
        raise QuizValidationError("Time limit must be provided as an integer number of seconds.")
    if not MIN_TIME_LIMIT_SECONDS <= time_limit <= MAX_TIME_LIMIT_SECONDS:
        raise QuizValidationError(
            f"Time limit must be between {MIN_TIME_LIMIT_SECONDS} and {MAX_TIME_LIMIT_SECONDS} seconds."
        )
