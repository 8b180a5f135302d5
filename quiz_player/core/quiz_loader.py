"""Utilities for loading finished quizzes from JSON documents.

Document format (camelCase keys, as produced by the quiz authoring tool):

    {
      "title": "Capitals",
      "description": "Optional cover text",
      "randomizeQuestions": false,
      "performanceMessages": {"0": "Keep practising", "80": "Great job!"},
      "questions": [
        {
          "text": "Capital of France?",
          "options": ["Berlin", "Paris", "Rome"],
          "correctAnswer": 1,
          "explanation": "Paris has been the capital since 508.",
          "timeLimit": 30,
          "imageUrl": null
        }
      ]
    }

``timeLimit`` defaults to 30 seconds and must stay within 5-300.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from quiz_player.core.models import Quiz
from quiz_player.core.quiz_schema import QuizPayload
from quiz_player.core.quiz_validation import QuizValidationError, validate_quiz

_LOGGER = logging.getLogger(__name__)


class QuizLoadError(Exception):
    """Raised when a quiz document cannot be read or parsed."""


@dataclass(slots=True)
class LoadedQuiz:
    """Container for a parsed quiz and where it came from."""

    source_path: Path
    quiz: Quiz


def load_quiz_from_file(file_path: Path) -> LoadedQuiz:
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise QuizLoadError(f"Unable to read quiz file {file_path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise QuizLoadError(f"Quiz file is not valid JSON: {exc}") from exc

    quiz = parse_quiz_document(data)
    _LOGGER.info("Loaded quiz '%s' (%d questions) from %s", quiz.title, len(quiz.questions), file_path)
    return LoadedQuiz(source_path=file_path, quiz=quiz)


def parse_quiz_document(data: Any) -> Quiz:
    """Validate a decoded JSON document and convert it into a ``Quiz``."""
    if not isinstance(data, dict):
        raise QuizLoadError("Quiz document must be a JSON object.")
    try:
        payload = QuizPayload.model_validate(data)
    except ValidationError as exc:
        raise QuizLoadError(_format_validation_error(exc)) from exc

    quiz = payload.to_quiz()
    try:
        validate_quiz(quiz)
    except QuizValidationError as exc:
        raise QuizLoadError(str(exc)) from exc
    return quiz


def _format_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "document"
        problems.append(f"{location}: {error['msg']}")
    return "Invalid quiz document - " + "; ".join(problems)
