"""Cover page shown before an attempt starts."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_player.constants.ui_constants import (
    COVER_DOWNLOAD_BUTTON,
    COVER_EMPTY_STATE,
    COVER_QUESTION_COUNT_TEMPLATE,
    COVER_START_BUTTON,
)
from quiz_player.core.markdown_renderer import renderer
from quiz_player.core.models import Quiz
from quiz_player.styling.styles import Styles


class CoverPanel(QWidget):
    """Shows the quiz title, description and question count."""

    def __init__(
        self,
        on_start: Callable[[], None],
        on_download: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self.on_download = on_download
        self._game_font_size: int = 14
        self._build_ui()
        self.show_quiz(None)

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.title_label = QLabel("", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setWordWrap(True)
        layout.addWidget(self.title_label)

        self.description_label = QLabel("", self)
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setWordWrap(True)
        self.description_label.setTextFormat(Qt.RichText)
        layout.addWidget(self.description_label)

        self.count_label = QLabel("", self)
        self.count_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.count_label)

        self.start_button = QPushButton(COVER_START_BUTTON, self)
        self.start_button.clicked.connect(self.on_start)
        layout.addWidget(self.start_button, alignment=Qt.AlignCenter)

        self.download_button = QPushButton(COVER_DOWNLOAD_BUTTON, self)
        self.download_button.clicked.connect(self.on_download)
        layout.addWidget(self.download_button, alignment=Qt.AlignCenter)

        layout.addStretch()

    def show_quiz(self, quiz: Quiz | None) -> None:
        if quiz is None:
            self.title_label.setText(COVER_EMPTY_STATE)
            self.description_label.setText("")
            self.count_label.setText("")
            self.start_button.setEnabled(False)
            self.download_button.setEnabled(False)
            return
        self.title_label.setText(quiz.title)
        self.description_label.setText(
            renderer.render_fragment(quiz.description) if quiz.description else ""
        )
        self.count_label.setText(COVER_QUESTION_COUNT_TEMPLATE.format(count=len(quiz.questions)))
        self.start_button.setEnabled(True)
        self.download_button.setEnabled(True)

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        self.title_label.setStyleSheet(Styles.get_large_label_style(font_size + 8))
        game_label_style = f"font-size: {font_size}pt;"
        self.description_label.setStyleSheet(game_label_style)
        self.count_label.setStyleSheet(game_label_style)
        self.start_button.setStyleSheet(game_label_style + " padding: 8px 24px;")
        self.download_button.setStyleSheet(game_label_style + " padding: 6px 18px;")
