"""Results page shown once an attempt is complete."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_player.constants.quiz_constants import STATUS_LABELS
from quiz_player.constants.ui_constants import (
    RESULTS_CORRECT_TEMPLATE,
    RESULTS_DOWNLOAD_BUTTON,
    RESULTS_RESTART_BUTTON,
)
from quiz_player.core.models import AnswerStatus
from quiz_player.core.quiz_exporter import ResultsExport
from quiz_player.styling.color_palette import ColorPalette, Theme
from quiz_player.styling.styles import Styles


class ResultsPanel(QWidget):
    """Summarizes a report and embeds the same review the HTML export contains."""

    def __init__(
        self,
        on_download: Callable[[], None],
        on_restart: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_download = on_download
        self.on_restart = on_restart
        self._game_font_size: int = 14
        self._theme: Theme = Theme.LIGHT
        self._export: ResultsExport | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.correct_label = QLabel("", self)
        self.correct_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.correct_label)

        self.message_label = QLabel("", self)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        counts_row = QHBoxLayout()
        self.status_count_labels: dict[AnswerStatus, QLabel] = {}
        for status in AnswerStatus:
            label = QLabel("", self)
            label.setAlignment(Qt.AlignCenter)
            counts_row.addWidget(label)
            self.status_count_labels[status] = label
        layout.addLayout(counts_row)

        self.review_view = QWebEngineView(self)
        layout.addWidget(self.review_view, stretch=1)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.restart_button = QPushButton(RESULTS_RESTART_BUTTON, self)
        self.restart_button.clicked.connect(self.on_restart)
        button_row.addWidget(self.restart_button)

        self.download_button = QPushButton(RESULTS_DOWNLOAD_BUTTON, self)
        self.download_button.clicked.connect(self.on_download)
        button_row.addWidget(self.download_button)
        layout.addLayout(button_row)

    def show_results(self, export: ResultsExport) -> None:
        self._export = export
        report = export.report
        self.score_label.setText(f"{report.score}%")
        self.correct_label.setText(
            RESULTS_CORRECT_TEMPLATE.format(correct=report.correct_count, total=report.total_questions)
        )
        self.message_label.setText(report.performance_message)
        for status, label in self.status_count_labels.items():
            label.setText(
                f"{STATUS_LABELS[status.value]}\n{report.count_for(status)}"
                f" ({report.percentage_for(status):.1f}%)"
            )
        self.review_view.setHtml(export.html)
        self._apply_label_styles()

    def clear(self) -> None:
        self._export = None
        self.review_view.setHtml("")

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self._apply_label_styles()

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        self._apply_label_styles()

    def _apply_label_styles(self) -> None:
        font_size = self._game_font_size
        self.score_label.setStyleSheet(Styles.get_large_label_style(font_size * 2))
        self.correct_label.setStyleSheet(f"font-size: {font_size}pt;")
        self.message_label.setStyleSheet(Styles.get_large_label_style(font_size + 2))
        for status, label in self.status_count_labels.items():
            label.setStyleSheet(
                Styles.get_status_label_style(ColorPalette.for_status(status).get(self._theme), font_size)
            )
        button_style = f"font-size: {font_size}pt;"
        self.restart_button.setStyleSheet(button_style)
        self.download_button.setStyleSheet(button_style)
