from dataclasses import replace
import json
import random

import pytest

from quiz_player.constants.quiz_constants import DEFAULT_PERFORMANCE_MESSAGE
from quiz_player.core.models import Answer, AnswerStatus, Quiz
from quiz_player.core.quiz_exporter import (
    build_playable_quiz_data,
    build_results_export,
    default_quiz_filename,
    default_results_filename,
    render_quiz_document,
    save_playable_quiz_to_file,
    save_quiz_to_file,
    save_results_to_file,
)
from quiz_player.core.services.scorer import performance_thresholds
from quiz_player.core.session_manager import SessionManager


def _play_mixed_attempt(quiz, manual_timer):
    manager = SessionManager(quiz, timer=manual_timer)
    manager.start()
    manager.select_option(0)  # correct for question 1
    manager.submit_answer()
    manager.next_question()
    manager.select_option(0)  # wrong for question 2
    manager.submit_answer()
    manager.next_question()
    manual_timer.fire_expire()
    manager.next_question()
    manager.skip_question()
    return manager


def test_export_score_matches_session_report(make_quiz, manual_timer):
    quiz = make_quiz(4, performance_messages={0: "low", 25: "quarter"})
    manager = _play_mixed_attempt(quiz, manual_timer)
    report = manager.build_report()

    export = build_results_export(quiz, manager.get_answers(), score=report.score)

    assert export.report == report
    assert export.report.score == 25
    assert [a.status for a in export.answers] == [
        AnswerStatus.CORRECT,
        AnswerStatus.INCORRECT,
        AnswerStatus.TIME_EXPIRED,
        AnswerStatus.SKIPPED,
    ]


def test_mismatched_score_is_rejected(make_quiz, manual_timer):
    quiz = make_quiz(4)
    manager = _play_mixed_attempt(quiz, manual_timer)
    with pytest.raises(ValueError, match="does not match"):
        build_results_export(quiz, manager.get_answers(), score=90)


def test_document_contents(make_quiz, manual_timer):
    quiz = make_quiz(4, performance_messages={0: "Keep going"}, title="Rivers & Lakes")
    manager = _play_mixed_attempt(quiz, manual_timer)
    html = build_results_export(quiz, manager.get_answers()).html

    assert html.startswith("<!doctype html>")
    assert "<title>Rivers &amp; Lakes - Results</title>" in html
    assert "1 of 4 correct" in html
    assert "1 question skipped" in html
    assert "1 question timed out" in html
    assert "Keep going" in html
    assert "25.0% of total" in html
    for label in ("Correct", "Incorrect", "Skipped", "Time Expired"):
        assert label in html
    assert "The correct answer was option B" in html
    assert "Because of reason 1." in html
    assert "A: Option A" in html
    assert "http://" not in html and "https://" not in html


def test_questions_reviewed_in_original_order(make_quiz, manual_timer):
    quiz = make_quiz(4, randomize=True)
    manager = SessionManager(quiz, rng=random.Random(2), timer=manual_timer)
    manager.start()
    manager.skip_to_results()
    html = build_results_export(quiz, manager.get_answers()).html

    positions = [html.index(f"<h3>Question {n}</h3>") for n in range(1, 5)]
    assert positions == sorted(positions)


def test_markdown_is_rendered_and_raw_html_escaped(make_quiz):
    quiz = make_quiz(1)
    question = replace(quiz.questions[0], text="**Bold** <script>alert(1)</script>")
    quiz = replace(quiz, questions=(question,))
    answers = [Answer(question_index=0, selected_option=0, time_spent=2, status=AnswerStatus.CORRECT)]

    html = build_results_export(quiz, answers).html
    assert "<strong>Bold</strong>" in html
    assert "<script>alert(1)</script>" not in html


def test_save_results_to_file(tmp_path, make_quiz):
    quiz = make_quiz(2)
    target = tmp_path / "out" / default_results_filename(quiz)
    saved = save_results_to_file(target, quiz, [])

    assert saved.name == "Result - Sample Quiz.html"
    content = saved.read_text(encoding="utf-8")
    assert "0 of 2 correct" in content
    assert "2 questions skipped" in content


def test_default_filename_strips_path_separators(make_quiz):
    quiz = make_quiz(1, title="Math/Physics: Part 1")
    assert default_results_filename(quiz) == "Result - Math_Physics_ Part 1.html"


def test_save_empty_quiz_rejected(tmp_path):
    with pytest.raises(ValueError):
        save_quiz_to_file(tmp_path / "empty.json", Quiz(title="Empty", questions=()))


def test_embedded_data_block_lists_normalized_answers(make_quiz, manual_timer):
    quiz = make_quiz(4)
    manager = _play_mixed_attempt(quiz, manual_timer)
    html = build_results_export(quiz, manager.get_answers()).html

    marker = '<script type="application/json" id="quiz-results-data">'
    start = html.index(marker) + len(marker)
    data = json.loads(html[start:html.index("</script>", start)])
    assert data["score"] == 25
    assert [a["status"] for a in data["answers"]] == ["correct", "incorrect", "timeExpired", "skipped"]
    assert data["answers"][2] == {
        "questionIndex": 2,
        "selectedOption": -1,
        "timeSpent": 10,
        "status": "timeExpired",
    }


def _embedded_json(html, element_id):
    marker = f'<script type="application/json" id="{element_id}">'
    start = html.index(marker) + len(marker)
    return json.loads(html[start:html.index("</script>", start)])


def test_playable_quiz_embeds_questions_and_thresholds(make_quiz):
    messages = {"0": "low", 50: "mid", "80": "high"}
    quiz = make_quiz(3, time_limit=12, randomize=True, performance_messages=messages)
    html = render_quiz_document(quiz)

    assert html.startswith("<!doctype html>")
    assert "<title>Sample Quiz</title>" in html
    assert "http://" not in html and "https://" not in html
    data = _embedded_json(html, "quiz-data")
    assert data == build_playable_quiz_data(quiz)
    assert data["randomizeQuestions"] is True
    assert data["thresholds"] == [[80, "high"], [50, "mid"], [0, "low"]]
    assert data["thresholds"] == [list(item) for item in performance_thresholds(messages).items()]
    assert data["defaultMessage"] == "low"
    assert [q["correctAnswer"] for q in data["questions"]] == [0, 1, 2]
    assert all(q["timeLimit"] == 12 for q in data["questions"])
    assert data["questions"][0]["optionsHtml"][1] == "Option B"
    assert data["questions"][1]["explanationHtml"] is None


def test_playable_quiz_without_zero_threshold_uses_default_message(make_quiz):
    data = build_playable_quiz_data(make_quiz(2, performance_messages={50: "mid"}))
    assert data["thresholds"] == [[50, "mid"]]
    assert data["defaultMessage"] == DEFAULT_PERFORMANCE_MESSAGE


def test_playable_quiz_script_follows_session_rules(make_quiz):
    html = render_quiz_document(make_quiz(2))
    assert "Math.floor((200 * counts.correct + total) / (2 * total))" in html
    assert "status: 'timeExpired'" in html
    for element_id in ("start-button", "submit-button", "skip-button", "skip-to-results-button", "timer"):
        assert f'id="{element_id}"' in html


def test_playable_quiz_escapes_markup_in_question_text(make_quiz):
    quiz = make_quiz(1)
    question = replace(quiz.questions[0], text="**Bold** </script><script>alert(1)</script>")
    html = render_quiz_document(replace(quiz, questions=(question,)))

    assert "<script>alert(1)</script>" not in html
    data = _embedded_json(html, "quiz-data")
    assert "<strong>Bold</strong>" in data["questions"][0]["textHtml"]


def test_save_playable_quiz_to_file(tmp_path, make_quiz):
    quiz = make_quiz(2, title="Math/Physics")
    saved = save_playable_quiz_to_file(tmp_path / "out" / default_quiz_filename(quiz), quiz)

    assert saved.name == "Math_Physics.html"
    assert 'id="quiz-data"' in saved.read_text(encoding="utf-8")


def test_save_playable_empty_quiz_rejected(tmp_path):
    with pytest.raises(ValueError):
        save_playable_quiz_to_file(tmp_path / "empty.html", Quiz(title="Empty", questions=()))
