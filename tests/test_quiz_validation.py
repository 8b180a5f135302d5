from dataclasses import replace

import pytest

from quiz_player.core.models import Question, Quiz
from quiz_player.core.quiz_validation import QuizValidationError, validate_quiz


def _with_question(quiz: Quiz, question: Question) -> Quiz:
    return replace(quiz, questions=(quiz.questions[0], question))


def test_valid_quiz_passes(make_quiz):
    validate_quiz(make_quiz(3))


def test_empty_quiz_rejected():
    with pytest.raises(QuizValidationError, match="at least one question"):
        validate_quiz(Quiz(title="Empty", questions=()))


def test_validation_error_is_value_error():
    assert issubclass(QuizValidationError, ValueError)


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"text": "   "}, "text must not be empty"),
        ({"options": ("Only one",)}, "at least 2 options"),
        ({"correct_answer": 4}, "out of range"),
        ({"correct_answer": -1}, "out of range"),
        ({"correct_answer": True}, "integer option index"),
        ({"time_limit": 4}, "between 5 and 300"),
        ({"time_limit": 301}, "between 5 and 300"),
    ],
)
def test_malformed_question_reports_its_position(make_quiz, changes, message):
    quiz = make_quiz(2)
    broken = replace(quiz.questions[1], **changes)
    with pytest.raises(QuizValidationError, match=message) as excinfo:
        validate_quiz(_with_question(quiz, broken))
    assert str(excinfo.value).startswith("Question 2: ")


def test_time_limit_bounds_are_inclusive(make_quiz):
    quiz = make_quiz(2)
    validate_quiz(_with_question(quiz, replace(quiz.questions[1], time_limit=5)))
    validate_quiz(_with_question(quiz, replace(quiz.questions[1], time_limit=300)))
