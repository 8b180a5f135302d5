"""Domain models for the quiz player."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType

from quiz_player.constants.quiz_constants import DEFAULT_TIME_LIMIT_SECONDS


class AnswerStatus(str, Enum):
    """Final outcome of a single question."""

    CORRECT = "correct"
    INCORRECT = "incorrect"
    SKIPPED = "skipped"
    TIME_EXPIRED = "timeExpired"


class SessionPhase(Enum):
    """Phase of the session engine for the question currently on screen."""

    ANSWERING = auto()
    REVIEWING = auto()
    COMPLETE = auto()


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with a single correct option."""

    text: str
    options: tuple[str, ...]
    correct_answer: int
    explanation: str | None = None
    time_limit: int = DEFAULT_TIME_LIMIT_SECONDS
    image_url: str | None = None


@dataclass(frozen=True, slots=True)
class Quiz:
    """Finished quiz as handed over by the authoring side.

    ``performance_messages`` is copied into a read-only mapping and left out of
    the hash, so quizzes stay hashable.
    """

    title: str
    questions: tuple[Question, ...]
    description: str | None = None
    performance_messages: Mapping[int | str, str] = field(default_factory=dict, hash=False)
    randomize_questions: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "performance_messages", MappingProxyType(dict(self.performance_messages))
        )


@dataclass(frozen=True, slots=True)
class PresentationEntry:
    """A question paired with its position in ``Quiz.questions``."""

    question: Question
    original_index: int


@dataclass(frozen=True, slots=True)
class Answer:
    """Outcome recorded once per question.

    ``question_index`` is always the original index, never the display index.
    ``selected_option`` is ``-1`` when time ran out with nothing chosen and
    ``None`` for skipped questions.
    """

    question_index: int
    selected_option: int | None
    time_spent: int
    status: AnswerStatus

    def to_dict(self) -> dict[str, object]:
        return {
            "questionIndex": self.question_index,
            "selectedOption": self.selected_option,
            "timeSpent": self.time_spent,
            "status": self.status.value,
        }


@dataclass(frozen=True, slots=True)
class Report:
    """Aggregated result of a completed session."""

    score: int
    correct_count: int
    incorrect_count: int
    skipped_count: int
    time_expired_count: int
    performance_message: str

    @property
    def total_questions(self) -> int:
        return (
            self.correct_count
            + self.incorrect_count
            + self.skipped_count
            + self.time_expired_count
        )

    def count_for(self, status: AnswerStatus) -> int:
        counts = {
            AnswerStatus.CORRECT: self.correct_count,
            AnswerStatus.INCORRECT: self.incorrect_count,
            AnswerStatus.SKIPPED: self.skipped_count,
            AnswerStatus.TIME_EXPIRED: self.time_expired_count,
        }
        return counts[status]

    def percentage_for(self, status: AnswerStatus) -> float:
        """Share of all questions that ended with ``status``, in percent."""
        total = self.total_questions
        if total == 0:
            return 0.0
        return self.count_for(status) / total * 100
