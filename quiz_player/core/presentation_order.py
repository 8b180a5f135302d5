"""Display order of a quiz's questions, optionally shuffled."""

from __future__ import annotations

import random

from quiz_player.core.models import PresentationEntry, Quiz


def build_presentation_order(
    quiz: Quiz,
    rng: random.Random | None = None,
) -> list[PresentationEntry]:
    """Return the questions in the order they will be shown.

    Every entry keeps its original index so answers can be scored against the
    authored question regardless of display position. When the quiz asks for
    randomization the entries are shuffled with ``rng`` (Fisher-Yates via
    ``random.Random.shuffle``); pass a seeded generator for reproducible order.
    """
    entries = [
        PresentationEntry(question=question, original_index=index)
        for index, question in enumerate(quiz.questions)
    ]
    if quiz.randomize_questions:
        (rng or random.Random()).shuffle(entries)
    return entries
