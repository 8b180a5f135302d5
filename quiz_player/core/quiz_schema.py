"""Pydantic schema for quiz documents exchanged as JSON."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from quiz_player.constants.quiz_constants import (
    DEFAULT_TIME_LIMIT_SECONDS,
    MAX_TIME_LIMIT_SECONDS,
    MIN_OPTION_COUNT,
    MIN_TIME_LIMIT_SECONDS,
)
from quiz_player.core.models import Question, Quiz


class QuestionPayload(BaseModel):
    """Payload schema for a single question."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(min_length=1)
    options: list[str] = Field(min_length=MIN_OPTION_COUNT)
    correct_answer: int = Field(alias="correctAnswer")
    explanation: str | None = None
    time_limit: int = Field(
        default=DEFAULT_TIME_LIMIT_SECONDS,
        ge=MIN_TIME_LIMIT_SECONDS,
        le=MAX_TIME_LIMIT_SECONDS,
        alias="timeLimit",
    )
    image_url: str | None = Field(default=None, alias="imageUrl")

    @model_validator(mode="after")
    def _check_correct_answer(self) -> "QuestionPayload":
        if not 0 <= self.correct_answer < len(self.options):
            raise ValueError(
                f"correctAnswer {self.correct_answer} is out of range for {len(self.options)} options"
            )
        return self

    def to_question(self) -> Question:
        return Question(
            text=self.text,
            options=tuple(self.options),
            correct_answer=self.correct_answer,
            explanation=self.explanation or None,
            time_limit=self.time_limit,
            image_url=self.image_url or None,
        )

    @classmethod
    def from_question(cls, question: Question) -> "QuestionPayload":
        return cls(
            text=question.text,
            options=list(question.options),
            correct_answer=question.correct_answer,
            explanation=question.explanation,
            time_limit=question.time_limit,
            image_url=question.image_url,
        )


class QuizPayload(BaseModel):
    """Payload schema for a whole quiz document."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    description: str | None = None
    questions: list[QuestionPayload] = Field(min_length=1)
    performance_messages: dict[int | str, str] = Field(
        default_factory=dict, alias="performanceMessages"
    )
    randomize_questions: bool = Field(default=False, alias="randomizeQuestions")

    def to_quiz(self) -> Quiz:
        return Quiz(
            title=self.title,
            description=self.description or None,
            questions=tuple(question.to_question() for question in self.questions),
            performance_messages=dict(self.performance_messages),
            randomize_questions=self.randomize_questions,
        )

    @classmethod
    def from_quiz(cls, quiz: Quiz) -> "QuizPayload":
        return cls(
            title=quiz.title,
            description=quiz.description,
            questions=[QuestionPayload.from_question(q) for q in quiz.questions],
            performance_messages=dict(quiz.performance_messages),
            randomize_questions=quiz.randomize_questions,
        )
