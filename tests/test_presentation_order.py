import random

from quiz_player.core.presentation_order import build_presentation_order


def test_identity_order_without_randomization(make_quiz):
    quiz = make_quiz(5)
    order = build_presentation_order(quiz, random.Random(1))
    assert [entry.original_index for entry in order] == [0, 1, 2, 3, 4]
    assert [entry.question for entry in order] == list(quiz.questions)


def test_randomized_order_is_a_permutation(make_quiz):
    quiz = make_quiz(12, randomize=True)
    order = build_presentation_order(quiz, random.Random(7))
    assert sorted(entry.original_index for entry in order) == list(range(12))
    for entry in order:
        assert entry.question is quiz.questions[entry.original_index]


def test_seeded_generator_gives_reproducible_order(make_quiz):
    quiz = make_quiz(10, randomize=True)
    first = build_presentation_order(quiz, random.Random(42))
    second = build_presentation_order(quiz, random.Random(42))
    assert [e.original_index for e in first] == [e.original_index for e in second]


def test_shuffle_uses_injected_generator(make_quiz):
    quiz = make_quiz(10, randomize=True)
    expected = list(range(10))
    random.Random(3).shuffle(expected)
    order = build_presentation_order(quiz, random.Random(3))
    assert [e.original_index for e in order] == expected


def test_single_question_randomized(make_quiz):
    order = build_presentation_order(make_quiz(1, randomize=True))
    assert [e.original_index for e in order] == [0]
