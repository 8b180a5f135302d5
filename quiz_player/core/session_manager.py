"""Thread-safe facade that runs one quiz attempt for the UI and exporters."""

from __future__ import annotations

import logging
import random
from threading import Lock

from quiz_player.constants.quiz_constants import TIMER_JOIN_TIMEOUT_SECONDS
from quiz_player.core.models import Answer, PresentationEntry, Quiz, Report
from quiz_player.core.presentation_order import build_presentation_order
from quiz_player.core.quiz_validation import validate_quiz
from quiz_player.core.services.countdown_timer import CountdownTimer
from quiz_player.core.services.quiz_session import QuizSession, SessionSnapshot
from quiz_player.core.services.scorer import score_answers

_LOGGER = logging.getLogger(__name__)


class SessionManager:
    """Facade over QuizSession and the countdown of the active question.

    Every input, including timer callbacks arriving on the countdown thread, is
    applied under a single lock so transitions never interleave. Exactly one
    countdown runs at a time and it is cancelled whenever the session leaves the
    answering phase or the attempt is aborted.
    """

    def __init__(
        self,
        quiz: Quiz,
        rng: random.Random | None = None,
        timer: CountdownTimer | None = None,
    ) -> None:
        validate_quiz(quiz)
        self._lock = Lock()
        self._quiz = quiz
        self._session = QuizSession(build_presentation_order(quiz, rng))
        self._timer = timer if timer is not None else CountdownTimer()
        self._countdown_token: int = 0
        self._started: bool = False
        self._aborted: bool = False

    # --- Lifecycle ---

    def start(self) -> bool:
        with self._lock:
            if self._started or self._aborted:
                return False
            self._started = True
            _LOGGER.info(
                "Starting quiz '%s' with %d questions (randomized=%s)",
                self._quiz.title,
                len(self._quiz.questions),
                self._quiz.randomize_questions,
            )
            self._start_countdown_locked()
            return True

    def abort(self) -> None:
        """Tear the attempt down; no timer callback reaches it afterwards."""
        with self._lock:
            if self._aborted:
                return
            self._aborted = True
            self._stop_countdown_locked()
            _LOGGER.info("Quiz session for '%s' aborted", self._quiz.title)
        # Outside the lock: a callback in flight may be waiting for it.
        if not self._timer.join(TIMER_JOIN_TIMEOUT_SECONDS):
            _LOGGER.warning("Countdown thread still running after abort of '%s'", self._quiz.title)

    def has_started(self) -> bool:
        with self._lock:
            return self._started

    def is_aborted(self) -> bool:
        with self._lock:
            return self._aborted

    def is_complete(self) -> bool:
        with self._lock:
            return self._session.is_complete()

    # --- Participant inputs ---

    def select_option(self, option_index: int) -> bool:
        with self._lock:
            if not self._accepts_input_locked():
                return False
            return self._session.select_option(option_index)

    def submit_answer(self) -> bool:
        with self._lock:
            if not self._accepts_input_locked() or not self._session.submit_answer():
                _LOGGER.debug("Submit refused")
                return False
            self._stop_countdown_locked()
            return True

    def skip_question(self) -> bool:
        with self._lock:
            if not self._accepts_input_locked() or not self._session.skip_question():
                _LOGGER.debug("Skip refused")
                return False
            self._after_question_left_locked()
            return True

    def next_question(self) -> bool:
        with self._lock:
            if not self._accepts_input_locked() or not self._session.advance():
                _LOGGER.debug("Advance refused")
                return False
            self._after_question_left_locked()
            return True

    def skip_to_results(self) -> bool:
        with self._lock:
            if not self._accepts_input_locked() or not self._session.skip_to_results():
                return False
            self._stop_countdown_locked()
            _LOGGER.info("Skipped to results for '%s'", self._quiz.title)
            return True

    # --- Queries ---

    def get_quiz(self) -> Quiz:
        return self._quiz

    def get_presentation_order(self) -> list[PresentationEntry]:
        with self._lock:
            return self._session.get_order()

    def get_snapshot(self) -> SessionSnapshot:
        with self._lock:
            return self._session.snapshot()

    def get_answers(self) -> list[Answer]:
        with self._lock:
            return self._session.get_answers()

    def build_report(self) -> Report:
        with self._lock:
            if not self._session.is_complete():
                raise RuntimeError("Quiz session is not complete yet.")
            answers = self._session.get_answers()
        return score_answers(self._quiz, answers)

    # --- Countdown wiring ---

    def _accepts_input_locked(self) -> bool:
        return self._started and not self._aborted

    def _after_question_left_locked(self) -> None:
        if self._session.is_complete():
            self._stop_countdown_locked()
            _LOGGER.info("Quiz '%s' complete", self._quiz.title)
        else:
            self._start_countdown_locked()

    def _start_countdown_locked(self) -> None:
        entry = self._session.get_current_entry()
        if entry is None:
            return
        self._countdown_token += 1
        token = self._countdown_token
        self._timer.start(
            entry.question.time_limit,
            lambda remaining: self._handle_tick(token, remaining),
            lambda: self._handle_expire(token),
        )

    def _stop_countdown_locked(self) -> None:
        self._countdown_token += 1
        self._timer.cancel()

    def _handle_tick(self, token: int, remaining_seconds: int) -> None:
        with self._lock:
            if token != self._countdown_token:
                return
            self._session.record_tick(remaining_seconds)

    def _handle_expire(self, token: int) -> None:
        with self._lock:
            if token != self._countdown_token or not self._session.expire():
                _LOGGER.debug("Ignoring stale countdown expiry (token %d)", token)
                return
            self._countdown_token += 1
            answer = self._session.get_pending_answer()
            if answer is not None:
                _LOGGER.info("Time expired on question %d", answer.question_index + 1)
