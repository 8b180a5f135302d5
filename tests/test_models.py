import pytest

from quiz_player.core.models import Quiz


def test_performance_messages_are_read_only(make_quiz):
    quiz = make_quiz(2, performance_messages={0: "low"})
    with pytest.raises(TypeError):
        quiz.performance_messages[50] = "mid"


def test_quiz_copies_performance_messages(make_quiz):
    messages = {0: "low"}
    quiz = make_quiz(2, performance_messages=messages)
    messages[90] = "high"
    assert dict(quiz.performance_messages) == {0: "low"}


def test_quiz_is_hashable_and_compares_messages(make_quiz):
    first = make_quiz(2, performance_messages={0: "low"})
    second = make_quiz(2, performance_messages={0: "low"})
    other = make_quiz(2, performance_messages={0: "different"})

    assert hash(first) == hash(second)
    assert first == second
    assert first != other
    assert len({first, second}) == 1


def test_default_messages_are_empty():
    assert dict(Quiz(title="Empty", questions=()).performance_messages) == {}
