"""Exports quizzes as JSON or playable HTML, and completed attempts as HTML reports."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from html import escape
import json
import logging
from pathlib import Path
import re

from quiz_player.constants.quiz_constants import (
    DEFAULT_PERFORMANCE_MESSAGE,
    NO_EXPLANATION_TEXT,
    NO_SELECTION,
    QUIZ_FILENAME_TEMPLATE,
    RESULTS_FILENAME_TEMPLATE,
    STATUS_LABELS,
    TIME_LIMIT_WARNING_WINDOW_SECONDS,
)
from quiz_player.constants.ui_constants import (
    COVER_START_BUTTON,
    NEXT_QUESTION_BUTTON,
    RESULTS_RESTART_BUTTON,
    SKIP_QUESTION_BUTTON,
    SKIP_TO_RESULTS_BUTTON,
    SUBMIT_BUTTON,
    TIME_UP_TEXT,
    VIEW_RESULTS_BUTTON,
)
from quiz_player.core.markdown_renderer import renderer
from quiz_player.core.models import Answer, AnswerStatus, Question, Quiz, Report
from quiz_player.core.quiz_schema import QuizPayload
from quiz_player.core.quiz_validation import validate_quiz
from quiz_player.core.services.scorer import (
    normalize_answers,
    performance_thresholds,
    score_answers,
)

_LOGGER = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]+')

_REPORT_STYLESHEET = """
      body { font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; min-height: 100vh; }
      body.light { background: #f3f4f6; color: #1f2937; }
      body.dark { background: #111827; color: #f3f4f6; }
      .container { max-width: 48rem; margin: 0 auto; display: flex; flex-direction: column; gap: 1.5rem; }
      .card { border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 1px 3px rgba(0, 0, 0, 0.1); }
      body.light .card { background: #ffffff; }
      body.dark .card { background: #1f2937; }
      .summary { text-align: center; }
      .score { font-size: 3.75rem; font-weight: 700; margin: 0.5rem 0; }
      .message { font-size: 1.5rem; }
      .note-skipped { color: #3b82f6; }
      .note-time-expired { color: #f97316; }
      .tiles { display: grid; grid-template-columns: repeat(2, 1fr); gap: 1rem; text-align: center; }
      .tile { border-radius: 0.5rem; padding: 1rem; border: 1px solid; }
      .tile .count { font-size: 1.5rem; font-weight: 700; }
      .status-correct { color: #16a34a; border-color: #16a34a; }
      .status-incorrect { color: #dc2626; border-color: #dc2626; }
      .status-skipped { color: #2563eb; border-color: #2563eb; }
      .status-timeExpired { color: #ea580c; border-color: #ea580c; }
      .question-header { display: flex; justify-content: space-between; gap: 1rem; align-items: baseline; }
      .options { list-style: none; padding: 0; display: flex; flex-direction: column; gap: 0.5rem; }
      .option { padding: 0.75rem 1rem; border-radius: 0.5rem; border: 1px solid #d1d5db; }
      .option.correct { border-color: #22c55e; background: rgba(34, 197, 94, 0.15); }
      .option.wrong { border-color: #ef4444; background: rgba(239, 68, 68, 0.15); }
      .status-box { margin-top: 1rem; padding: 1rem; border-radius: 0.5rem; border: 1px solid; }
      .explanation { margin-top: 1rem; padding: 1rem; border-radius: 0.5rem; background: rgba(107, 114, 128, 0.12); }
      .question-image { display: block; max-width: 100%; max-height: 16rem; margin: 1rem auto; border-radius: 0.5rem; }
      .theme-toggle { position: fixed; top: 1rem; right: 1rem; border-radius: 9999px; padding: 0.5rem 0.75rem; cursor: pointer; }
"""

_THEME_SCRIPT = """
      (function () {
        var body = document.body;
        var theme = 'light';
        try { theme = localStorage.getItem('quiz-theme') || 'light'; } catch (e) {}
        body.classList.add(theme);
        document.getElementById('theme-toggle').addEventListener('click', function () {
          var next = body.classList.contains('dark') ? 'light' : 'dark';
          body.classList.remove('dark', 'light');
          body.classList.add(next);
          try { localStorage.setItem('quiz-theme', next); } catch (e) {}
        });
      })();
"""


_PLAYER_STYLESHEET = """
      .hidden { display: none !important; }
      .quiz-bar { display: flex; justify-content: space-between; font-size: 0.875rem; }
      .timer-warning { color: #dc2626; font-weight: 700; }
      button.option { display: block; width: 100%; text-align: left; cursor: pointer; background: transparent; color: inherit; font: inherit; }
      button.option.selected { border-color: #3b82f6; background: rgba(59, 130, 246, 0.15); }
      .actions { display: flex; flex-wrap: wrap; gap: 0.5rem; }
      .actions button, .start-button { flex: 1; padding: 0.5rem 1rem; border-radius: 0.5rem; border: 1px solid #3b82f6; cursor: pointer; font: inherit; }
      .actions button:disabled { opacity: 0.5; cursor: not-allowed; }
"""

_PLAYER_SCRIPT = """
      (function () {
        var data = JSON.parse(document.getElementById('quiz-data').textContent);
        var questions = data.questions;
        var order = [];
        var answers = {};
        var state = null;
        var countdown = null;
        var countdownToken = 0;

        function byId(id) { return document.getElementById(id); }
        function setHidden(id, hidden) { byId(id).classList.toggle('hidden', hidden); }
        function letter(index) { return String.fromCharCode(65 + index); }
        function originalIndex() { return order[state.displayIndex]; }
        function current() { return questions[originalIndex()]; }
        function record(answer) { answers[answer.questionIndex] = answer; }

        function buildOrder() {
          var entries = questions.map(function (question, index) { return index; });
          if (data.randomizeQuestions) {
            for (var i = entries.length - 1; i > 0; i--) {
              var j = Math.floor(Math.random() * (i + 1));
              var swap = entries[i];
              entries[i] = entries[j];
              entries[j] = swap;
            }
          }
          return entries;
        }

        function stopCountdown() {
          countdownToken += 1;
          if (countdown !== null) {
            clearInterval(countdown);
            countdown = null;
          }
        }

        function startCountdown() {
          stopCountdown();
          var token = countdownToken;
          countdown = setInterval(function () {
            if (token !== countdownToken || state.phase !== 'answering') { return; }
            state.remaining = Math.max(0, state.remaining - 1);
            renderTimer();
            if (state.remaining === 0) { expire(); }
          }, 1000);
        }

        function elapsed() {
          var limit = current().timeLimit;
          return Math.max(0, Math.min(limit, limit - state.remaining));
        }

        function startQuiz() {
          stopCountdown();
          order = buildOrder();
          answers = {};
          state = {
            phase: 'answering',
            displayIndex: 0,
            selected: null,
            remaining: questions[order[0]].timeLimit,
            pending: null
          };
          setHidden('cover', true);
          setHidden('results', true);
          setHidden('quiz', false);
          renderQuestion();
          startCountdown();
        }

        function selectOption(index) {
          if (state.phase !== 'answering') { return; }
          if (index < 0 || index >= current().optionsHtml.length) { return; }
          state.selected = index;
          renderQuestion();
        }

        function submitAnswer() {
          if (state.phase !== 'answering' || state.selected === null) { return; }
          stopCountdown();
          var question = current();
          state.pending = {
            questionIndex: originalIndex(),
            selectedOption: state.selected,
            timeSpent: elapsed(),
            status: state.selected === question.correctAnswer ? 'correct' : 'incorrect'
          };
          state.phase = 'reviewing';
          renderQuestion();
        }

        function expire() {
          if (state.phase !== 'answering') { return; }
          stopCountdown();
          if (state.selected === null) { state.selected = data.noSelection; }
          state.remaining = 0;
          state.pending = {
            questionIndex: originalIndex(),
            selectedOption: state.selected,
            timeSpent: current().timeLimit,
            status: 'timeExpired'
          };
          record(state.pending);
          state.phase = 'reviewing';
          renderQuestion();
        }

        function skipQuestion() {
          if (state.phase !== 'answering') { return; }
          stopCountdown();
          record({questionIndex: originalIndex(), selectedOption: null, timeSpent: elapsed(), status: 'skipped'});
          moveForward();
        }

        function nextQuestion() {
          if (state.phase !== 'reviewing' || state.pending === null) { return; }
          record(state.pending);
          moveForward();
        }

        function skipToResults() {
          if (state === null || state.phase === 'complete') { return; }
          stopCountdown();
          for (var i = state.displayIndex; i < order.length; i++) {
            if (!Object.prototype.hasOwnProperty.call(answers, order[i])) {
              record({questionIndex: order[i], selectedOption: null, timeSpent: 0, status: 'skipped'});
            }
          }
          finish();
        }

        function moveForward() {
          state.pending = null;
          state.selected = null;
          if (state.displayIndex + 1 >= order.length) {
            finish();
            return;
          }
          state.displayIndex += 1;
          state.remaining = current().timeLimit;
          state.phase = 'answering';
          renderQuestion();
          startCountdown();
        }

        function finish() {
          stopCountdown();
          state.pending = null;
          state.selected = null;
          state.remaining = 0;
          state.phase = 'complete';
          renderResults(scoreAnswers());
        }

        function performanceMessage(score) {
          for (var i = 0; i < data.thresholds.length; i++) {
            if (data.thresholds[i][0] <= score) { return data.thresholds[i][1]; }
          }
          return data.defaultMessage;
        }

        function scoreAnswers() {
          var counts = {correct: 0, incorrect: 0, skipped: 0, timeExpired: 0};
          var normalized = questions.map(function (question, index) {
            if (Object.prototype.hasOwnProperty.call(answers, index)) { return answers[index]; }
            return {questionIndex: index, selectedOption: null, timeSpent: 0, status: 'skipped'};
          });
          normalized.forEach(function (answer) { counts[answer.status] += 1; });
          var total = questions.length;
          var score = total > 0 ? Math.floor((200 * counts.correct + total) / (2 * total)) : 0;
          return {score: score, counts: counts, answers: normalized, message: performanceMessage(score)};
        }

        function renderTimer() {
          var timer = byId('timer');
          timer.textContent = state.remaining > 0 ? state.remaining + 's' : data.labels.timeUp;
          timer.classList.toggle('timer-warning', state.remaining <= data.warningSeconds);
        }

        function renderQuestion() {
          var question = current();
          var reviewing = state.phase === 'reviewing';
          byId('current-question').textContent = state.displayIndex + 1;
          byId('question-text').innerHTML = question.textHtml;

          var image = byId('question-image');
          if (question.imageUrl) {
            image.src = question.imageUrl;
            image.classList.remove('hidden');
          } else {
            image.removeAttribute('src');
            image.classList.add('hidden');
          }

          var options = byId('options');
          options.innerHTML = '';
          question.optionsHtml.forEach(function (optionHtml, index) {
            var button = document.createElement('button');
            button.type = 'button';
            button.className = 'option';
            button.innerHTML = letter(index) + ': ' + optionHtml;
            if (reviewing && index === question.correctAnswer) {
              button.classList.add('correct');
            } else if (reviewing && index === state.selected) {
              button.classList.add('wrong');
            } else if (index === state.selected) {
              button.classList.add('selected');
            }
            button.disabled = reviewing;
            button.addEventListener('click', function () { selectOption(index); });
            options.appendChild(button);
          });

          var explanation = byId('explanation');
          explanation.innerHTML = question.explanationHtml || ('<p>' + data.labels.noExplanation + '</p>');
          explanation.classList.toggle('hidden', !reviewing);

          var submit = byId('submit-button');
          if (reviewing) {
            var last = state.displayIndex >= order.length - 1;
            submit.textContent = last ? data.labels.viewResults : data.labels.next;
            submit.disabled = false;
          } else {
            submit.textContent = data.labels.submit;
            submit.disabled = state.selected === null;
          }
          byId('skip-button').disabled = reviewing;
          renderTimer();
        }

        function renderResults(report) {
          setHidden('quiz', true);
          setHidden('results', false);
          byId('score').textContent = report.score;
          byId('correct-summary').textContent =
            report.counts.correct + ' of ' + questions.length + ' correct';
          byId('performance-message').textContent = report.message;

          var tiles = byId('result-tiles');
          tiles.innerHTML = '';
          Object.keys(report.counts).forEach(function (status) {
            var tile = document.createElement('div');
            tile.className = 'tile status-' + status;
            var share = questions.length > 0 ? (report.counts[status] / questions.length * 100) : 0;
            tile.innerHTML = '<p>' + data.statusLabels[status] + '</p>' +
              '<p class="count">' + report.counts[status] + '</p>' +
              '<p>' + share.toFixed(1) + '% of total</p>';
            tiles.appendChild(tile);
          });

          var review = byId('review');
          review.innerHTML = '';
          report.answers.forEach(function (answer) {
            var question = questions[answer.questionIndex];
            var card = document.createElement('article');
            card.className = 'card question';
            var note = answer.status === 'correct' ? '' :
              '<p>The correct answer was option ' + letter(question.correctAnswer) + '</p>';
            card.innerHTML =
              '<div class="question-header"><h3>Question ' + (answer.questionIndex + 1) + '</h3>' +
              '<span>Time: ' + answer.timeSpent + 's</span>' +
              '<span class="status-' + answer.status + '">' + data.statusLabels[answer.status] + '</span></div>' +
              question.textHtml +
              '<div class="status-box status-' + answer.status + '"><p>Status: ' +
              data.statusLabels[answer.status] + '</p>' + note + '</div>' +
              (question.explanationHtml ? '<div class="explanation">' + question.explanationHtml + '</div>' : '');
            review.appendChild(card);
          });
        }

        byId('start-button').addEventListener('click', startQuiz);
        byId('restart-button').addEventListener('click', startQuiz);
        byId('skip-button').addEventListener('click', skipQuestion);
        byId('skip-to-results-button').addEventListener('click', skipToResults);
        byId('submit-button').addEventListener('click', function () {
          if (state.phase === 'reviewing') {
            nextQuestion();
          } else {
            submitAnswer();
          }
        });
      })();
"""


@dataclass(slots=True)
class ResultsExport:
    """A rendered results document together with the data behind it."""

    quiz: Quiz
    answers: list[Answer]
    report: Report
    html: str


def save_quiz_to_file(file_path: Path, quiz: Quiz) -> None:
    """Persist the quiz as a JSON document that ``load_quiz_from_file`` accepts."""

    if not quiz.questions:
        raise ValueError("Cannot export an empty quiz.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    document = QuizPayload.from_quiz(quiz).model_dump(mode="json", by_alias=True)
    file_path.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    _LOGGER.info("Saved quiz '%s' to %s", quiz.title, file_path)


def save_playable_quiz_to_file(file_path: Path, quiz: Quiz) -> Path:
    """Write a self-contained HTML page that plays ``quiz`` offline."""

    validate_quiz(quiz)
    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(render_quiz_document(quiz), encoding="utf-8")
    _LOGGER.info("Saved playable quiz '%s' to %s", quiz.title, file_path)
    return file_path


def default_quiz_filename(quiz: Quiz) -> str:
    return QUIZ_FILENAME_TEMPLATE.format(title=_safe_title(quiz))


def render_quiz_document(quiz: Quiz) -> str:
    """Render a playable quiz page.

    The embedded script walks the same answering, reviewing and complete
    phases as ``QuizSession`` and scores with the threshold table produced by
    ``performance_thresholds``, so an offline attempt ends with the report the
    desktop player would show.
    """

    description = renderer.render_fragment(quiz.description) if quiz.description else ""
    count = len(quiz.questions)
    data_block = _json_script("quiz-data", build_playable_quiz_data(quiz))
    body = f"""<div class="container">
<button id="theme-toggle" class="theme-toggle" type="button">Toggle theme</button>
<section id="cover" class="card summary">
  <h1>{escape(quiz.title)}</h1>
  {description}
  <p>{count} question{_plural(count)}</p>
  <button id="start-button" class="start-button" type="button">{COVER_START_BUTTON}</button>
</section>
<section id="quiz" class="hidden">
  <div class="quiz-bar">
    <span>Question <span id="current-question">1</span> of {count}</span>
    <span id="timer"></span>
  </div>
  <article class="card question">
    <div id="question-text"></div>
    <img id="question-image" class="question-image hidden" alt="Question image" />
    <div id="options" class="options"></div>
    <div id="explanation" class="explanation hidden"></div>
  </article>
  <div class="actions">
    <button id="skip-button" type="button">{SKIP_QUESTION_BUTTON}</button>
    <button id="submit-button" type="button" disabled>{SUBMIT_BUTTON}</button>
    <button id="skip-to-results-button" type="button">{SKIP_TO_RESULTS_BUTTON}</button>
  </div>
</section>
<section id="results" class="hidden">
  <header class="card summary">
    <h1>{escape(quiz.title)} - Results</h1>
    <div class="score"><span id="score">0</span>%</div>
    <p id="correct-summary"></p>
    <p id="performance-message" class="message"></p>
  </header>
  <section id="result-tiles" class="tiles"></section>
  <section id="review"></section>
  <div class="actions">
    <button id="restart-button" type="button">{RESULTS_RESTART_BUTTON}</button>
  </div>
</section>
</div>
{data_block}"""
    return renderer.wrap_document(
        body,
        title=quiz.title,
        stylesheet=_REPORT_STYLESHEET + _PLAYER_STYLESHEET,
        script=_THEME_SCRIPT + _PLAYER_SCRIPT,
    )


def build_playable_quiz_data(quiz: Quiz) -> dict[str, object]:
    """Data the playable page runs on, with question text pre-rendered to HTML."""

    questions = []
    for question in quiz.questions:
        questions.append(
            {
                "textHtml": renderer.render_fragment(question.text),
                "optionsHtml": [renderer.render_inline(option) for option in question.options],
                "correctAnswer": question.correct_answer,
                "explanationHtml": (
                    renderer.render_fragment(question.explanation) if question.explanation else None
                ),
                "timeLimit": question.time_limit,
                "imageUrl": question.image_url,
            }
        )
    return {
        "title": quiz.title,
        "randomizeQuestions": quiz.randomize_questions,
        "thresholds": [
            [threshold, message]
            for threshold, message in performance_thresholds(quiz.performance_messages).items()
        ],
        "defaultMessage": _fallback_message(quiz),
        "noSelection": NO_SELECTION,
        "warningSeconds": TIME_LIMIT_WARNING_WINDOW_SECONDS,
        "statusLabels": dict(STATUS_LABELS),
        "labels": {
            "submit": SUBMIT_BUTTON,
            "next": NEXT_QUESTION_BUTTON,
            "viewResults": VIEW_RESULTS_BUTTON,
            "timeUp": TIME_UP_TEXT,
            "noExplanation": NO_EXPLANATION_TEXT,
        },
        "questions": questions,
    }


def _fallback_message(quiz: Quiz) -> str:
    # Threshold 0 outranks the default when nothing else qualifies.
    return performance_thresholds(quiz.performance_messages).get(0, DEFAULT_PERFORMANCE_MESSAGE)


def _safe_title(quiz: Quiz) -> str:
    return _UNSAFE_FILENAME_CHARS.sub("_", quiz.title).strip() or "Quiz"


def _json_script(element_id: str, data: dict[str, object]) -> str:
    payload = json.dumps(data, ensure_ascii=False).replace("</", "<\\/")
    return f'<script type="application/json" id="{element_id}">{payload}</script>'


def build_results_export(
    quiz: Quiz,
    answers: Iterable[Answer],
    score: int | None = None,
) -> ResultsExport:
    """Score an attempt with the shared scorer and render its report.

    ``score`` is the value the interactive session displayed, if known. A
    mismatch with the recomputed score means the two paths diverged and is
    rejected rather than written to disk.
    """

    answer_list = list(answers)
    report = score_answers(quiz, answer_list)
    if score is not None and score != report.score:
        _LOGGER.error(
            "Export score mismatch for '%s': session %d, recomputed %d",
            quiz.title,
            score,
            report.score,
        )
        raise ValueError(
            f"Score {score} does not match the recomputed score {report.score}."
        )
    normalized = normalize_answers(quiz, answer_list)
    html = render_results_document(quiz, normalized, report)
    return ResultsExport(quiz=quiz, answers=normalized, report=report, html=html)


def save_results_to_file(
    file_path: Path,
    quiz: Quiz,
    answers: Iterable[Answer],
    score: int | None = None,
) -> Path:
    export = build_results_export(quiz, answers, score)
    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(export.html, encoding="utf-8")
    _LOGGER.info("Saved results for '%s' (score %d%%) to %s", quiz.title, export.report.score, file_path)
    return file_path


def default_results_filename(quiz: Quiz) -> str:
    return RESULTS_FILENAME_TEMPLATE.format(title=_safe_title(quiz))


def render_results_document(quiz: Quiz, answers: list[Answer], report: Report) -> str:
    """Render a self-contained HTML report for normalized ``answers``."""

    sections = [
        '<div class="container">',
        '<button id="theme-toggle" class="theme-toggle" type="button">Toggle theme</button>',
        _render_summary(quiz, report),
        _render_tiles(report),
        _render_summary_list(report),
        '<section class="review">',
    ]
    for answer in answers:
        sections.append(_render_question(quiz.questions[answer.question_index], answer))
    sections.append("</section>")
    sections.append(_render_data_block(answers, report))
    sections.append("</div>")
    return renderer.wrap_document(
        "\n".join(sections),
        title=f"{quiz.title} - Results",
        stylesheet=_REPORT_STYLESHEET,
        script=_THEME_SCRIPT,
    )


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def _render_summary(quiz: Quiz, report: Report) -> str:
    notes = []
    if report.skipped_count > 0:
        notes.append(
            f'<p class="note-skipped">{report.skipped_count} question{_plural(report.skipped_count)} skipped</p>'
        )
    if report.time_expired_count > 0:
        notes.append(
            f'<p class="note-time-expired">{report.time_expired_count} '
            f"question{_plural(report.time_expired_count)} timed out</p>"
        )
    return f"""<header class="card summary">
  <h1>{escape(quiz.title)} - Results</h1>
  <div class="score">{report.score}%</div>
  <p>{report.correct_count} of {report.total_questions} correct</p>
  {''.join(notes)}
  <p class="message">{escape(report.performance_message)}</p>
</header>"""


def _render_tiles(report: Report) -> str:
    tiles = []
    for status in AnswerStatus:
        tiles.append(
            f'<div class="tile status-{status.value}">'
            f"<p>{STATUS_LABELS[status.value]}</p>"
            f'<p class="count">{report.count_for(status)}</p>'
            f"<p>{report.percentage_for(status):.1f}% of total</p>"
            "</div>"
        )
    return f'<section class="tiles">{"".join(tiles)}</section>'


def _render_summary_list(report: Report) -> str:
    rows = [
        f"<li>Total questions: {report.total_questions}</li>",
        f"<li>Correctly answered: {report.correct_count} ({report.percentage_for(AnswerStatus.CORRECT):.1f}%)</li>",
        f"<li>Incorrectly answered: {report.incorrect_count} ({report.percentage_for(AnswerStatus.INCORRECT):.1f}%)</li>",
        f"<li>Skipped questions: {report.skipped_count} ({report.percentage_for(AnswerStatus.SKIPPED):.1f}%)</li>",
        f"<li>Time expired questions: {report.time_expired_count} ({report.percentage_for(AnswerStatus.TIME_EXPIRED):.1f}%)</li>",
    ]
    return f'<section class="card review-summary"><h2>Quiz Summary</h2><ul>{"".join(rows)}</ul></section>'


def _render_question(question: Question, answer: Answer) -> str:
    status = answer.status
    label = STATUS_LABELS[status.value]
    options = []
    for idx, option in enumerate(question.options):
        css = "option"
        if idx == question.correct_answer:
            css += " correct"
        elif answer.selected_option not in (None, NO_SELECTION) and idx == answer.selected_option:
            css += " wrong"
        options.append(f'<li class="{css}">{chr(ord("A") + idx)}: {renderer.render_inline(option)}</li>')

    correct_note = ""
    if status is not AnswerStatus.CORRECT:
        correct_letter = chr(ord("A") + question.correct_answer)
        correct_note = f"<p>The correct answer was option {correct_letter}</p>"

    image = ""
    if question.image_url:
        image = f'<img class="question-image" src="{escape(question.image_url, quote=True)}" alt="Question image" />'

    explanation = ""
    if question.explanation:
        explanation = (
            '<div class="explanation"><p><strong>Explanation:</strong></p>'
            f"{renderer.render_fragment(question.explanation)}</div>"
        )

    return f"""<article class="card question">
  <div class="question-header">
    <h3>Question {answer.question_index + 1}</h3>
    <span>Time: {answer.time_spent}s</span>
    <span class="status-{status.value}">{label}</span>
  </div>
  {renderer.render_fragment(question.text)}
  {image}
  <ul class="options">{''.join(options)}</ul>
  <div class="status-box status-{status.value}"><p>Status: {label}</p>{correct_note}</div>
  {explanation}
</article>"""


def _render_data_block(answers: list[Answer], report: Report) -> str:
    """Machine-readable copy of the attempt embedded in the report."""
    data = {
        "score": report.score,
        "performanceMessage": report.performance_message,
        "answers": [answer.to_dict() for answer in answers],
    }
    return _json_script("quiz-results-data", data)
