"""State machine that walks a participant through one quiz attempt."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging

from quiz_player.constants.quiz_constants import NO_SELECTION
from quiz_player.core.models import (
    Answer,
    AnswerStatus,
    PresentationEntry,
    SessionPhase,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only view of the session handed to renderers."""

    phase: SessionPhase
    display_index: int
    total_questions: int
    entry: PresentationEntry | None
    selected_option: int | None
    remaining_seconds: int
    pending_status: AnswerStatus | None

    @property
    def explanation_visible(self) -> bool:
        return self.phase is SessionPhase.REVIEWING

    @property
    def is_last_question(self) -> bool:
        return self.display_index >= self.total_questions - 1


class QuizSession:
    """Tracks progress through a fixed presentation order.

    The session knows nothing about clocks or threads: elapsed time arrives via
    ``record_tick`` and expiry via ``expire``. Each public method is one input
    of the state machine; inputs that are not valid in the current phase are
    refused by returning ``False`` and leave the state untouched.
    """

    def __init__(self, order: Sequence[PresentationEntry]) -> None:
        if not order:
            raise ValueError("Presentation order must contain at least one question.")
        self._order: tuple[PresentationEntry, ...] = tuple(order)
        self._display_index: int = 0
        self._answers: dict[int, Answer] = {}
        self._phase: SessionPhase = SessionPhase.ANSWERING
        self._selected_option: int | None = None
        self._remaining_seconds: int = self._order[0].question.time_limit
        self._pending_answer: Answer | None = None

    # --- Queries ---

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    def is_complete(self) -> bool:
        return self._phase is SessionPhase.COMPLETE

    def get_current_entry(self) -> PresentationEntry | None:
        if self._phase is SessionPhase.COMPLETE:
            return None
        return self._order[self._display_index]

    def get_order(self) -> list[PresentationEntry]:
        return list(self._order)

    def get_answers(self) -> list[Answer]:
        """Return recorded answers in the order the questions were completed."""
        return list(self._answers.values())

    def get_pending_answer(self) -> Answer | None:
        return self._pending_answer

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            phase=self._phase,
            display_index=self._display_index,
            total_questions=len(self._order),
            entry=self.get_current_entry(),
            selected_option=self._selected_option,
            remaining_seconds=self._remaining_seconds,
            pending_status=self._pending_answer.status if self._pending_answer else None,
        )

    # --- Inputs ---

    def select_option(self, option_index: int) -> bool:
        """Record a tentative choice; the countdown keeps running.

        An index outside the current question's options is refused like any
        other invalid input.
        """
        if self._phase is not SessionPhase.ANSWERING:
            return False
        question = self._order[self._display_index].question
        if not 0 <= option_index < len(question.options):
            _LOGGER.debug(
                "Option index %d out of range for %d options", option_index, len(question.options)
            )
            return False
        self._selected_option = option_index
        return True

    def record_tick(self, remaining_seconds: int) -> bool:
        if self._phase is not SessionPhase.ANSWERING:
            return False
        time_limit = self._order[self._display_index].question.time_limit
        self._remaining_seconds = max(0, min(time_limit, remaining_seconds))
        return True

    def submit_answer(self) -> bool:
        """Lock in the tentative choice and reveal the explanation.

        The answer is classified now but only recorded when the participant
        moves on with ``advance``.
        """
        if self._phase is not SessionPhase.ANSWERING or self._selected_option is None:
            return False
        entry = self._order[self._display_index]
        is_correct = self._selected_option == entry.question.correct_answer
        self._pending_answer = Answer(
            question_index=entry.original_index,
            selected_option=self._selected_option,
            time_spent=self._elapsed_seconds(),
            status=AnswerStatus.CORRECT if is_correct else AnswerStatus.INCORRECT,
        )
        self._phase = SessionPhase.REVIEWING
        return True

    def expire(self) -> bool:
        """Handle the countdown running out.

        Expiry is always ``TIME_EXPIRED``, even when an option had been picked
        but not submitted. The answer is recorded immediately.
        """
        if self._phase is not SessionPhase.ANSWERING:
            return False
        entry = self._order[self._display_index]
        if self._selected_option is None:
            self._selected_option = NO_SELECTION
        self._remaining_seconds = 0
        self._pending_answer = Answer(
            question_index=entry.original_index,
            selected_option=self._selected_option,
            time_spent=entry.question.time_limit,
            status=AnswerStatus.TIME_EXPIRED,
        )
        self._record(self._pending_answer)
        self._phase = SessionPhase.REVIEWING
        return True

    def skip_question(self) -> bool:
        if self._phase is not SessionPhase.ANSWERING:
            return False
        entry = self._order[self._display_index]
        self._record(
            Answer(
                question_index=entry.original_index,
                selected_option=None,
                time_spent=self._elapsed_seconds(),
                status=AnswerStatus.SKIPPED,
            )
        )
        self._move_forward()
        return True

    def advance(self) -> bool:
        """Leave the review screen, recording the classified answer."""
        if self._phase is not SessionPhase.REVIEWING or self._pending_answer is None:
            return False
        self._record(self._pending_answer)
        self._move_forward()
        return True

    def skip_to_results(self) -> bool:
        """Mark the current and all remaining unanswered questions as skipped."""
        if self._phase is SessionPhase.COMPLETE:
            return False
        for entry in self._order[self._display_index:]:
            if entry.original_index in self._answers:
                continue
            self._record(
                Answer(
                    question_index=entry.original_index,
                    selected_option=None,
                    time_spent=0,
                    status=AnswerStatus.SKIPPED,
                )
            )
        self._finish()
        return True

    # --- Internals ---

    def _record(self, answer: Answer) -> None:
        # Last write wins for a given original index.
        self._answers.pop(answer.question_index, None)
        self._answers[answer.question_index] = answer

    def _elapsed_seconds(self) -> int:
        time_limit = self._order[self._display_index].question.time_limit
        return max(0, min(time_limit, time_limit - self._remaining_seconds))

    def _move_forward(self) -> None:
        self._pending_answer = None
        self._selected_option = None
        if self._display_index + 1 >= len(self._order):
            self._finish()
            return
        self._display_index += 1
        self._remaining_seconds = self._order[self._display_index].question.time_limit
        self._phase = SessionPhase.ANSWERING

    def _finish(self) -> None:
        self._pending_answer = None
        self._selected_option = None
        self._remaining_seconds = 0
        self._phase = SessionPhase.COMPLETE
