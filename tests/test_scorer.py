from dataclasses import replace
import random

import pytest

from quiz_player.constants.quiz_constants import DEFAULT_PERFORMANCE_MESSAGE
from quiz_player.core.models import Answer, AnswerStatus
from quiz_player.core.services.scorer import (
    calculate_score,
    normalize_answers,
    performance_thresholds,
    score_answers,
    select_performance_message,
)


def _answer(index, status, selected=None, time_spent=1):
    return Answer(question_index=index, selected_option=selected, time_spent=time_spent, status=status)


@pytest.mark.parametrize(
    "correct, total, expected",
    [
        (0, 3, 0),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),
        (1, 2, 50),
        (3, 3, 100),
        (0, 0, 0),
    ],
)
def test_calculate_score_rounds_half_up(correct, total, expected):
    assert calculate_score(correct, total) == expected


def test_performance_message_exact_threshold():
    messages = {0: "low", 50: "mid", 80: "high"}
    assert select_performance_message(messages, 50) == "mid"
    assert select_performance_message(messages, 79) == "mid"
    assert select_performance_message(messages, 100) == "high"
    assert select_performance_message(messages, 10) == "low"


def test_performance_message_default_without_zero_key():
    assert select_performance_message({50: "mid"}, 20) == DEFAULT_PERFORMANCE_MESSAGE
    assert select_performance_message({}, 100) == DEFAULT_PERFORMANCE_MESSAGE


def test_performance_message_accepts_string_keys():
    messages = {"0": "low", "80": "high", "bogus": "ignored"}
    assert select_performance_message(messages, 85) == "high"
    assert select_performance_message(messages, 40) == "low"


def test_normalize_fills_missing_and_keeps_last_write(make_quiz):
    quiz = make_quiz(3)
    answers = [
        _answer(2, AnswerStatus.INCORRECT, selected=0),
        _answer(0, AnswerStatus.TIME_EXPIRED, selected=-1),
        _answer(2, AnswerStatus.CORRECT, selected=2),
        _answer(9, AnswerStatus.CORRECT, selected=0),
    ]
    normalized = normalize_answers(quiz, answers)

    assert [a.question_index for a in normalized] == [0, 1, 2]
    assert normalized[0].status is AnswerStatus.TIME_EXPIRED
    assert normalized[1].status is AnswerStatus.SKIPPED
    assert normalized[1].time_spent == 0
    assert normalized[2].status is AnswerStatus.CORRECT


def test_score_answers_two_question_example(make_quiz):
    quiz = make_quiz(2)
    report = score_answers(
        quiz,
        [_answer(0, AnswerStatus.CORRECT, selected=0, time_spent=3), _answer(1, AnswerStatus.SKIPPED)],
    )
    assert report.score == 50
    assert (report.correct_count, report.incorrect_count, report.skipped_count, report.time_expired_count) == (
        1,
        0,
        1,
        0,
    )
    assert report.total_questions == 2


def test_score_is_independent_of_answer_order(make_quiz):
    quiz = make_quiz(3, performance_messages={0: "low", 60: "ok"})
    answers = [
        _answer(0, AnswerStatus.CORRECT, selected=0),
        _answer(1, AnswerStatus.INCORRECT, selected=0),
        _answer(2, AnswerStatus.CORRECT, selected=2),
    ]
    assert score_answers(quiz, answers) == score_answers(quiz, list(reversed(answers)))
    assert score_answers(quiz, answers).performance_message == "ok"


def test_report_percentages(make_quiz):
    quiz = make_quiz(4)
    report = score_answers(
        quiz,
        [
            _answer(0, AnswerStatus.CORRECT, selected=0),
            _answer(1, AnswerStatus.INCORRECT, selected=0),
            _answer(2, AnswerStatus.TIME_EXPIRED, selected=-1),
        ],
    )
    assert report.percentage_for(AnswerStatus.CORRECT) == pytest.approx(25.0)
    assert report.percentage_for(AnswerStatus.SKIPPED) == pytest.approx(25.0)
    assert report.count_for(AnswerStatus.TIME_EXPIRED) == 1


def test_thresholds_sorted_highest_first():
    table = performance_thresholds({"50": "mid", 0: "low", "x": "ignored", 80: "high"})
    assert list(table.items()) == [(80, "high"), (50, "mid"), (0, "low")]


@pytest.mark.parametrize("seed", range(10))
def test_permuting_questions_and_answers_keeps_report(make_quiz, seed):
    rng = random.Random(seed)
    quiz = make_quiz(6, performance_messages={0: "low", 50: "mid", 80: "high"})
    statuses = list(AnswerStatus)
    answers = [
        _answer(index, rng.choice(statuses), selected=rng.randint(0, 3), time_spent=rng.randint(0, 10))
        for index in range(6)
        if rng.random() < 0.8
    ]

    permutation = list(range(6))
    rng.shuffle(permutation)
    # Position k of the permuted quiz holds original question permutation[k].
    permuted_quiz = replace(quiz, questions=tuple(quiz.questions[i] for i in permutation))
    permuted_answers = [replace(a, question_index=permutation.index(a.question_index)) for a in answers]
    rng.shuffle(permuted_answers)

    assert score_answers(permuted_quiz, permuted_answers) == score_answers(quiz, answers)
