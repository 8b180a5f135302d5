"""Turns a completed list of answers into a score report."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from quiz_player.constants.quiz_constants import DEFAULT_PERFORMANCE_MESSAGE
from quiz_player.core.models import Answer, AnswerStatus, Quiz, Report


def normalize_answers(quiz: Quiz, answers: Iterable[Answer]) -> list[Answer]:
    """Return exactly one answer per question, in original question order.

    Later records for the same original index replace earlier ones. Questions
    without any record count as skipped with no time spent. Records whose index
    does not belong to the quiz are ignored.
    """
    latest: dict[int, Answer] = {}
    for answer in answers:
        latest[answer.question_index] = answer

    normalized: list[Answer] = []
    for index in range(len(quiz.questions)):
        answer = latest.get(index)
        if answer is None:
            answer = Answer(
                question_index=index,
                selected_option=None,
                time_spent=0,
                status=AnswerStatus.SKIPPED,
            )
        normalized.append(answer)
    return normalized


def calculate_score(correct_count: int, total_questions: int) -> int:
    """Percentage of correct answers, rounded half up."""
    if total_questions <= 0:
        return 0
    # floor(100 * correct / total + 1/2) in integer arithmetic
    return (200 * correct_count + total_questions) // (2 * total_questions)


def performance_thresholds(messages: Mapping[int | str, str]) -> dict[int, str]:
    """Threshold table keyed by integer score, highest threshold first.

    Keys that cannot be read as integers are ignored.
    """
    thresholds: dict[int, str] = {}
    for key, message in messages.items():
        try:
            thresholds[int(key)] = message
        except (TypeError, ValueError):
            continue
    return dict(sorted(thresholds.items(), reverse=True))


def select_performance_message(messages: Mapping[int | str, str], score: int) -> str:
    """Pick the message of the highest threshold that does not exceed ``score``.

    When no threshold qualifies the threshold ``0`` message is used, then the
    default message.
    """
    thresholds = performance_thresholds(messages)
    for threshold, message in thresholds.items():
        if threshold <= score:
            return message
    if 0 in thresholds:
        return thresholds[0]
    return DEFAULT_PERFORMANCE_MESSAGE


def score_answers(quiz: Quiz, answers: Iterable[Answer]) -> Report:
    normalized = normalize_answers(quiz, answers)
    counts = {status: 0 for status in AnswerStatus}
    for answer in normalized:
        counts[answer.status] += 1

    score = calculate_score(counts[AnswerStatus.CORRECT], len(quiz.questions))
    return Report(
        score=score,
        correct_count=counts[AnswerStatus.CORRECT],
        incorrect_count=counts[AnswerStatus.INCORRECT],
        skipped_count=counts[AnswerStatus.SKIPPED],
        time_expired_count=counts[AnswerStatus.TIME_EXPIRED],
        performance_message=select_performance_message(quiz.performance_messages, score),
    )
