import random

import pytest

from quiz_player.core.models import AnswerStatus, SessionPhase
from quiz_player.core.presentation_order import build_presentation_order
from quiz_player.core.services.quiz_session import QuizSession
from quiz_player.core.services.scorer import score_answers


@pytest.fixture
def session(make_quiz):
    return QuizSession(build_presentation_order(make_quiz(3, time_limit=10)))


def test_empty_order_rejected():
    with pytest.raises(ValueError):
        QuizSession([])


def test_initial_snapshot(session):
    snapshot = session.snapshot()
    assert snapshot.phase is SessionPhase.ANSWERING
    assert snapshot.display_index == 0
    assert snapshot.total_questions == 3
    assert snapshot.selected_option is None
    assert snapshot.remaining_seconds == 10
    assert not snapshot.explanation_visible
    assert not snapshot.is_last_question


def test_select_out_of_range_is_refused_without_state_change(session):
    session.select_option(1)
    assert session.select_option(4) is False
    assert session.select_option(-1) is False
    assert session.snapshot().selected_option == 1
    assert session.phase is SessionPhase.ANSWERING


def test_select_can_change_before_submit(session):
    session.select_option(2)
    session.select_option(0)
    assert session.snapshot().selected_option == 0


def test_submit_without_selection_is_refused(session):
    assert session.submit_answer() is False
    assert session.phase is SessionPhase.ANSWERING
    assert session.get_answers() == []


def test_submit_reviews_without_recording(session):
    session.record_tick(7)
    session.select_option(0)
    assert session.submit_answer() is True

    snapshot = session.snapshot()
    assert snapshot.phase is SessionPhase.REVIEWING
    assert snapshot.explanation_visible
    assert snapshot.pending_status is AnswerStatus.CORRECT
    assert session.get_answers() == []
    pending = session.get_pending_answer()
    assert pending.time_spent == 3
    assert pending.selected_option == 0


def test_advance_records_and_moves_on(session):
    session.select_option(1)
    session.submit_answer()
    assert session.advance() is True

    answers = session.get_answers()
    assert len(answers) == 1
    assert answers[0].status is AnswerStatus.INCORRECT
    assert answers[0].selected_option == 1
    snapshot = session.snapshot()
    assert snapshot.phase is SessionPhase.ANSWERING
    assert snapshot.display_index == 1
    assert snapshot.selected_option is None
    assert snapshot.remaining_seconds == 10


def test_inputs_refused_in_wrong_phase(session):
    assert session.advance() is False
    session.select_option(0)
    session.submit_answer()
    assert session.select_option(1) is False
    assert session.submit_answer() is False
    assert session.skip_question() is False
    assert session.expire() is False
    assert session.record_tick(3) is False
    assert session.snapshot().selected_option == 0


def test_expire_without_selection(session):
    session.record_tick(0)
    assert session.expire() is True

    answers = session.get_answers()
    assert len(answers) == 1
    answer = answers[0]
    assert answer.status is AnswerStatus.TIME_EXPIRED
    assert answer.selected_option == -1
    assert answer.time_spent == 10
    assert session.phase is SessionPhase.REVIEWING
    assert session.snapshot().remaining_seconds == 0


def test_expire_with_tentative_pick_is_still_time_expired(session):
    session.select_option(0)
    session.expire()
    answer = session.get_answers()[0]
    assert answer.status is AnswerStatus.TIME_EXPIRED
    assert answer.selected_option == 0


def test_second_expire_is_ignored(session):
    assert session.expire() is True
    assert session.expire() is False
    assert len(session.get_answers()) == 1


def test_advance_after_expiry_keeps_single_record(session):
    session.expire()
    session.advance()
    answers = session.get_answers()
    assert len(answers) == 1
    assert answers[0].status is AnswerStatus.TIME_EXPIRED


def test_skip_question_records_elapsed_time(session):
    session.record_tick(6)
    assert session.skip_question() is True
    answer = session.get_answers()[0]
    assert answer.status is AnswerStatus.SKIPPED
    assert answer.selected_option is None
    assert answer.time_spent == 4
    assert session.snapshot().display_index == 1


def test_tick_is_clamped(session):
    session.record_tick(50)
    assert session.snapshot().remaining_seconds == 10
    session.record_tick(-3)
    assert session.snapshot().remaining_seconds == 0


def test_last_question_completes_session(session):
    for _ in range(2):
        session.skip_question()
    assert session.snapshot().is_last_question
    session.select_option(2)
    session.submit_answer()
    session.advance()

    assert session.is_complete()
    assert session.get_current_entry() is None
    assert [a.question_index for a in session.get_answers()] == [0, 1, 2]
    assert session.get_answers()[2].status is AnswerStatus.CORRECT


def test_inputs_after_complete_are_refused(session):
    session.skip_to_results()
    assert session.select_option(0) is False
    assert session.skip_question() is False
    assert session.advance() is False
    assert session.expire() is False
    assert session.skip_to_results() is False
    assert len(session.get_answers()) == 3


def test_skip_to_results_marks_remaining_questions(session):
    session.select_option(0)
    session.submit_answer()
    session.advance()
    assert session.skip_to_results() is True

    answers = session.get_answers()
    assert [a.status for a in answers] == [
        AnswerStatus.CORRECT,
        AnswerStatus.SKIPPED,
        AnswerStatus.SKIPPED,
    ]
    assert all(a.time_spent == 0 for a in answers[1:])
    assert session.is_complete()


def test_skip_to_results_keeps_expired_answer(session):
    session.expire()
    session.skip_to_results()
    answers = session.get_answers()
    assert answers[0].status is AnswerStatus.TIME_EXPIRED
    assert len(answers) == 3


def test_skip_to_results_during_review_skips_unrecorded_submission(session):
    session.select_option(0)
    session.submit_answer()
    session.skip_to_results()
    assert session.get_answers()[0].status is AnswerStatus.SKIPPED


def test_answers_use_original_indexes(make_quiz):
    quiz = make_quiz(4, randomize=True)
    order = build_presentation_order(quiz, random.Random(5))
    session = QuizSession(order)
    first = order[0]
    session.select_option(first.question.correct_answer)
    session.submit_answer()
    session.advance()

    answer = session.get_answers()[0]
    assert answer.question_index == first.original_index
    assert answer.status is AnswerStatus.CORRECT


@pytest.mark.parametrize("seed", range(200))
def test_random_input_sequences_account_for_every_question(make_quiz, seed):
    rng = random.Random(seed)
    quiz = make_quiz(rng.randint(1, 6), time_limit=rng.randint(5, 30), randomize=rng.random() < 0.5)
    session = QuizSession(build_presentation_order(quiz, rng))

    for _ in range(60):
        if session.is_complete():
            break
        action = rng.choice(["select", "submit", "expire", "skip", "advance", "tick", "tick", "finish"])
        if action == "select":
            session.select_option(rng.randint(-1, 4))
        elif action == "submit":
            session.submit_answer()
        elif action == "expire":
            session.expire()
        elif action == "skip":
            session.skip_question()
        elif action == "advance":
            session.advance()
        elif action == "tick":
            session.record_tick(rng.randint(-2, 35))
        elif rng.random() < 0.2:
            session.skip_to_results()
    if not session.is_complete():
        session.skip_to_results()

    answers = session.get_answers()
    assert sorted(a.question_index for a in answers) == list(range(len(quiz.questions)))
    for answer in answers:
        assert 0 <= answer.time_spent <= quiz.questions[answer.question_index].time_limit

    report = score_answers(quiz, answers)
    assert report.total_questions == len(quiz.questions)
