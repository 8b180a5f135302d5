"""Component that presents the active question of a quiz attempt."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_player.constants.quiz_constants import (
    NO_EXPLANATION_TEXT,
    STATUS_LABELS,
    TIME_LIMIT_WARNING_WINDOW_SECONDS,
)
from quiz_player.constants.ui_constants import (
    DISPLAY_REFRESH_INTERVAL_MS,
    EXPLANATION_HEADING,
    NEXT_QUESTION_BUTTON,
    QUESTION_PROGRESS_TEMPLATE,
    SKIP_QUESTION_BUTTON,
    SKIP_TO_RESULTS_BUTTON,
    SUBMIT_BUTTON,
    TIME_REMAINING_TEMPLATE,
    TIME_UP_TEXT,
    VIEW_RESULTS_BUTTON,
)
from quiz_player.core.models import AnswerStatus, SessionPhase
from quiz_player.core.services.quiz_session import SessionSnapshot
from quiz_player.core.session_manager import SessionManager
from quiz_player.styling.color_palette import ColorPalette, Theme
from quiz_player.styling.styles import Styles
from quiz_player.ui.dialog_helpers import confirm_skip_to_results
from quiz_player.ui.question_renderer import (
    render_explanation_fragment,
    render_option_label,
    render_question_document,
)


class QuestionPanel(QWidget):
    """Renders session snapshots and forwards participant input.

    The panel never changes session state on its own. A QTimer polls the
    manager for a fresh snapshot; the countdown itself runs inside the
    manager, so the displayed seconds always come from the engine.
    """

    def __init__(self, on_finished: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_finished = on_finished

        self._manager: SessionManager | None = None
        self._game_font_size: int = 14
        self._theme: Theme = Theme.LIGHT
        self._rendered_key: tuple[int, int] | None = None
        self._option_state_key: tuple | None = None
        self._finished_notified: bool = False
        self.option_buttons: list[QPushButton] = []

        self._build_ui()
        self._configure_refresh_timer()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Progress and countdown
        header_row = QHBoxLayout()
        self.progress_label = QLabel("", self)
        header_row.addWidget(self.progress_label)
        header_row.addStretch()
        self.countdown_label = QLabel("", self)
        self.countdown_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        header_row.addWidget(self.countdown_label)
        layout.addLayout(header_row)

        self.countdown_progress = QProgressBar(self)
        self.countdown_progress.setRange(0, 1000)
        self.countdown_progress.setValue(1000)
        self.countdown_progress.setTextVisible(False)
        layout.addWidget(self.countdown_progress)

        self.question_view = QWebEngineView(self)
        layout.addWidget(self.question_view, stretch=1)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

        # Review feedback
        self.status_label = QLabel("", self)
        self.status_label.setWordWrap(True)
        self.status_label.setVisible(False)
        layout.addWidget(self.status_label)

        self.explanation_label = QLabel("", self)
        self.explanation_label.setWordWrap(True)
        self.explanation_label.setTextFormat(Qt.RichText)
        self.explanation_label.setVisible(False)
        layout.addWidget(self.explanation_label)

        # Controls
        button_row = QHBoxLayout()
        self.skip_to_results_button = QPushButton(SKIP_TO_RESULTS_BUTTON, self)
        self.skip_to_results_button.clicked.connect(self._handle_skip_to_results)
        button_row.addWidget(self.skip_to_results_button)
        button_row.addStretch()

        self.skip_button = QPushButton(SKIP_QUESTION_BUTTON, self)
        self.skip_button.clicked.connect(self._handle_skip_question)
        button_row.addWidget(self.skip_button)

        self.primary_button = QPushButton(SUBMIT_BUTTON, self)
        self.primary_button.clicked.connect(self._handle_primary)
        button_row.addWidget(self.primary_button)
        layout.addLayout(button_row)

    def _configure_refresh_timer(self) -> None:
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(DISPLAY_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self.refresh)

    # --- Session binding ---

    def bind_session(self, manager: SessionManager) -> None:
        self._manager = manager
        self._rendered_key = None
        self._option_state_key = None
        self._finished_notified = False
        self.refresh_timer.start()
        self.refresh()

    def unbind_session(self) -> None:
        self.refresh_timer.stop()
        self._manager = None
        self._rendered_key = None
        self._option_state_key = None

    def refresh(self) -> None:
        if self._manager is None:
            return
        snapshot = self._manager.get_snapshot()
        if snapshot.phase is SessionPhase.COMPLETE or snapshot.entry is None:
            self.refresh_timer.stop()
            if not self._finished_notified:
                self._finished_notified = True
                self.on_finished()
            return

        key = (snapshot.display_index, snapshot.entry.original_index)
        if key != self._rendered_key:
            self._render_question(snapshot)
            self._rendered_key = key
        self._update_countdown(snapshot)
        self._update_options(snapshot)
        self._update_review(snapshot)
        self._update_controls(snapshot)

    # --- Rendering ---

    def _render_question(self, snapshot: SessionSnapshot) -> None:
        question = snapshot.entry.question
        self.progress_label.setText(
            QUESTION_PROGRESS_TEMPLATE.format(
                current=snapshot.display_index + 1, total=snapshot.total_questions
            )
        )
        self.question_view.setHtml(
            render_question_document(question, self._game_font_size, self._theme)
        )
        self._rebuild_option_buttons([render_option_label(i, text) for i, text in enumerate(question.options)])
        self._option_state_key = None

    def _rebuild_option_buttons(self, labels: list[str]) -> None:
        while self.options_layout.count():
            item = self.options_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self.option_buttons = []
        for idx, label in enumerate(labels):
            button = QPushButton(label, self)
            button.clicked.connect(lambda _checked=False, option=idx: self._handle_option_clicked(option))
            self.options_layout.addWidget(button)
            self.option_buttons.append(button)

    def _update_countdown(self, snapshot: SessionSnapshot) -> None:
        time_limit = snapshot.entry.question.time_limit
        remaining = snapshot.remaining_seconds
        fraction = 0.0 if time_limit <= 0 else max(0.0, min(1.0, remaining / time_limit))
        self.countdown_progress.setValue(int(fraction * 1000))

        expired = snapshot.pending_status is AnswerStatus.TIME_EXPIRED
        if expired or (remaining <= 0 and snapshot.phase is SessionPhase.ANSWERING):
            self.countdown_label.setText(TIME_UP_TEXT)
        else:
            self.countdown_label.setText(TIME_REMAINING_TEMPLATE.format(seconds=remaining))

        in_window = (
            snapshot.phase is SessionPhase.ANSWERING
            and 0 < remaining <= min(TIME_LIMIT_WARNING_WINDOW_SECONDS, time_limit)
        )
        if in_window:
            palette_entry = ColorPalette.TIMER_WARNING_BLINK if remaining % 2 == 0 else ColorPalette.TIMER_WARNING
            warning = palette_entry.get(self._theme)
            self.countdown_label.setStyleSheet(Styles.get_countdown_style(self._game_font_size, warning))
        else:
            self.countdown_label.setStyleSheet(Styles.get_countdown_style(self._game_font_size))

    def _update_options(self, snapshot: SessionSnapshot) -> None:
        state_key = (snapshot.phase, snapshot.selected_option, self._theme, self._game_font_size)
        if state_key == self._option_state_key:
            return
        self._option_state_key = state_key

        question = snapshot.entry.question
        reviewing = snapshot.phase is SessionPhase.REVIEWING
        for idx, button in enumerate(self.option_buttons):
            button.setEnabled(not reviewing)
            border_color = None
            if reviewing and idx == question.correct_answer:
                border_color = ColorPalette.STATUS_CORRECT.get(self._theme)
            elif reviewing and idx == snapshot.selected_option:
                border_color = ColorPalette.STATUS_INCORRECT.get(self._theme)
            button.setStyleSheet(
                Styles.get_option_button_style(
                    self._theme,
                    self._game_font_size,
                    selected=idx == snapshot.selected_option,
                    border_color=border_color,
                )
            )

    def _update_review(self, snapshot: SessionSnapshot) -> None:
        if not snapshot.explanation_visible or snapshot.pending_status is None:
            self.status_label.setVisible(False)
            self.explanation_label.setVisible(False)
            return

        question = snapshot.entry.question
        status = snapshot.pending_status
        text = STATUS_LABELS[status.value]
        if status is not AnswerStatus.CORRECT:
            text += f" - the correct answer was option {chr(ord('A') + question.correct_answer)}"
        self.status_label.setText(text)
        self.status_label.setStyleSheet(
            Styles.get_status_label_style(ColorPalette.for_status(status).get(self._theme), self._game_font_size)
        )
        self.status_label.setVisible(True)

        explanation = render_explanation_fragment(question) or f"<p><em>{NO_EXPLANATION_TEXT}</em></p>"
        self.explanation_label.setText(f"<p><strong>{EXPLANATION_HEADING}</strong></p>{explanation}")
        self.explanation_label.setVisible(True)

    def _update_controls(self, snapshot: SessionSnapshot) -> None:
        answering = snapshot.phase is SessionPhase.ANSWERING
        if answering:
            self.primary_button.setText(SUBMIT_BUTTON)
            self.primary_button.setEnabled(snapshot.selected_option is not None)
        else:
            self.primary_button.setText(
                VIEW_RESULTS_BUTTON if snapshot.is_last_question else NEXT_QUESTION_BUTTON
            )
            self.primary_button.setEnabled(True)
        self.skip_button.setEnabled(answering)
        self.skip_to_results_button.setEnabled(True)

    # --- Input handlers ---

    def _handle_option_clicked(self, option_index: int) -> None:
        if self._manager is None:
            return
        self._manager.select_option(option_index)
        self.refresh()

    def _handle_primary(self) -> None:
        if self._manager is None:
            return
        snapshot = self._manager.get_snapshot()
        if snapshot.phase is SessionPhase.ANSWERING:
            self._manager.submit_answer()
        else:
            self._manager.next_question()
        self.refresh()

    def _handle_skip_question(self) -> None:
        if self._manager is None:
            return
        self._manager.skip_question()
        self.refresh()

    def _handle_skip_to_results(self) -> None:
        if self._manager is None:
            return
        snapshot = self._manager.get_snapshot()
        remaining = snapshot.total_questions - snapshot.display_index
        if not confirm_skip_to_results(self, remaining):
            return
        self._manager.skip_to_results()
        self.refresh()

    # --- Settings ---

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self._rendered_key = None
        self.refresh()

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        game_label_style = f"font-size: {font_size}pt;"
        self.progress_label.setStyleSheet(game_label_style)
        self.explanation_label.setStyleSheet(game_label_style)
        for button in (self.primary_button, self.skip_button, self.skip_to_results_button):
            button.setStyleSheet(game_label_style)
        self._rendered_key = None
        self.refresh()
