"""Shared fixtures for the quiz player test suite."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from quiz_player.core.models import Question, Quiz


def build_quiz(
    question_count: int = 3,
    *,
    time_limit: int = 10,
    option_count: int = 4,
    randomize: bool = False,
    performance_messages: dict | None = None,
    title: str = "Sample Quiz",
) -> Quiz:
    """Quiz whose question ``i`` has correct option ``i % option_count``."""
    questions = tuple(
        Question(
            text=f"Question {index + 1}?",
            options=tuple(f"Option {chr(ord('A') + opt)}" for opt in range(option_count)),
            correct_answer=index % option_count,
            explanation=f"Because of reason {index + 1}." if index % 2 == 0 else None,
            time_limit=time_limit,
        )
        for index in range(question_count)
    )
    return Quiz(
        title=title,
        questions=questions,
        performance_messages=performance_messages or {},
        randomize_questions=randomize,
    )


@pytest.fixture
def make_quiz() -> Callable[..., Quiz]:
    return build_quiz


@dataclass
class ManualTimer:
    """Countdown stand-in whose ticks and expiry are fired by the test."""

    starts: list[int] = field(default_factory=list)
    cancel_count: int = 0
    join_count: int = 0
    _on_tick: Callable[[int], None] | None = None
    _on_expire: Callable[[], None] | None = None
    _stale_expiries: list[Callable[[], None]] = field(default_factory=list)

    def start(self, duration_seconds, on_tick, on_expire) -> None:
        if self._on_expire is not None:
            self._stale_expiries.append(self._on_expire)
        self.starts.append(duration_seconds)
        self._on_tick = on_tick
        self._on_expire = on_expire

    def cancel(self) -> None:
        self.cancel_count += 1
        if self._on_expire is not None:
            self._stale_expiries.append(self._on_expire)
        self._on_tick = None
        self._on_expire = None

    def join(self, timeout=None) -> bool:
        self.join_count += 1
        return True

    def is_active(self) -> bool:
        return self._on_expire is not None

    def fire_tick(self, remaining: int) -> None:
        assert self._on_tick is not None, "no countdown running"
        self._on_tick(remaining)

    def fire_expire(self) -> None:
        assert self._on_expire is not None, "no countdown running"
        callback = self._on_expire
        self._on_tick = None
        self._on_expire = None
        callback()

    def fire_stale_expiries(self) -> None:
        """Deliver expiries of countdowns that were cancelled or replaced."""
        for callback in self._stale_expiries:
            callback()


@pytest.fixture
def manual_timer() -> ManualTimer:
    return ManualTimer()
