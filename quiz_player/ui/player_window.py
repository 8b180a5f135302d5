"""Qt main window running a single-participant quiz attempt."""

from __future__ import annotations

from enum import Enum, auto
import logging
from pathlib import Path
import random

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_player.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from quiz_player.constants.ui_constants import (
    DEFAULT_GAME_FONT_SIZE,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    QUIZ_EXPORT_DIALOG_TITLE,
    QUIZ_EXPORT_FILE_FILTER,
    RESULTS_DIALOG_TITLE,
    RESULTS_FILE_FILTER,
    TOOLBAR_BUTTON_ABOUT,
    TOOLBAR_BUTTON_HELP,
    TOOLBAR_BUTTON_OPEN,
    TOOLBAR_BUTTON_SETTINGS,
    WINDOW_TITLE,
)
from quiz_player.core.models import Quiz
from quiz_player.core.quiz_exporter import (
    ResultsExport,
    build_results_export,
    default_quiz_filename,
    default_results_filename,
    save_playable_quiz_to_file,
    save_quiz_to_file,
    save_results_to_file,
)
from quiz_player.core.quiz_loader import QuizLoadError, load_quiz_from_file
from quiz_player.core.quiz_validation import QuizValidationError
from quiz_player.core.session_manager import SessionManager
from quiz_player.styling.color_palette import Theme
from quiz_player.styling.styles import Styles
from quiz_player.ui.components.cover_panel import CoverPanel
from quiz_player.ui.components.question_panel import QuestionPanel
from quiz_player.ui.components.results_panel import ResultsPanel
from quiz_player.ui.dialog_helpers import (
    confirm_abandon_quiz,
    show_error,
    show_info,
    show_warning,
)
from quiz_player.ui.settings_dialog import SettingsDialog

_LOGGER = logging.getLogger(__name__)


class PlayerMode(Enum):
    """Page of the player window currently on screen."""

    COVER = auto()
    QUESTION = auto()
    RESULTS = auto()


class PlayerMainWindow(QMainWindow):
    """Main Qt window switching between cover, question and results pages."""

    def __init__(self, quiz_path: Path | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(960, 720)

        self._mode = PlayerMode.COVER
        self._quiz: Quiz | None = None
        self._session_manager: SessionManager | None = None
        self._results_export: ResultsExport | None = None
        self._last_results_dir: Path | None = None
        self._last_export_dir: Path | None = None

        self._game_font_size: int = DEFAULT_GAME_FONT_SIZE
        self._theme: Theme = Theme.LIGHT
        self._shuffle_seed: int | None = None

        self._build_ui()
        self._apply_styles()
        if quiz_path is not None:
            self.load_quiz(quiz_path)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_toolbar_buttons(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.cover_panel = CoverPanel(
            on_start=self._start_attempt,
            on_download=self._handle_download_quiz,
            parent=self,
        )
        self.question_panel = QuestionPanel(on_finished=self._show_results, parent=self)
        self.results_panel = ResultsPanel(
            on_download=self._handle_download_results,
            on_restart=self._return_to_cover,
            parent=self,
        )
        self.mode_stack.addWidget(self.cover_panel)
        self.mode_stack.addWidget(self.question_panel)
        self.mode_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(PlayerMode.COVER)

    def _build_toolbar_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.open_button = QPushButton(TOOLBAR_BUTTON_OPEN, self)
        self.open_button.clicked.connect(self._handle_open_quiz)
        button_row.addWidget(self.open_button)
        button_row.addStretch()

        self.about_button = QPushButton(TOOLBAR_BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(TOOLBAR_BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton(TOOLBAR_BUTTON_SETTINGS, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _set_mode(self, mode: PlayerMode) -> None:
        self._mode = mode
        index_map = {
            PlayerMode.COVER: 0,
            PlayerMode.QUESTION: 1,
            PlayerMode.RESULTS: 2,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    # --- Quiz loading ---

    def load_quiz(self, file_path: Path) -> bool:
        try:
            loaded = load_quiz_from_file(file_path)
        except QuizLoadError as exc:
            _LOGGER.warning("Rejected quiz file %s: %s", file_path, exc)
            show_error(self, "Open failed", str(exc))
            return False

        self._end_attempt()
        self._quiz = loaded.quiz
        self.cover_panel.show_quiz(self._quiz)
        self.setWindowTitle(f"{WINDOW_TITLE} - {self._quiz.title}")
        self._set_mode(PlayerMode.COVER)
        return True

    def _handle_open_quiz(self) -> None:
        if self._attempt_in_progress() and not confirm_abandon_quiz(self):
            return

        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(Path.home()),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return
        self.load_quiz(Path(file_path))

    def _handle_download_quiz(self) -> None:
        if self._quiz is None:
            show_warning(self, "No quiz", "Open a quiz file first.")
            return

        default_dir = self._last_export_dir or Path.cwd()
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            QUIZ_EXPORT_DIALOG_TITLE,
            str(default_dir / default_quiz_filename(self._quiz)),
            QUIZ_EXPORT_FILE_FILTER,
        )
        if not file_path:
            return

        target = Path(file_path)
        try:
            if target.suffix.lower() == ".json":
                save_quiz_to_file(target, self._quiz)
            else:
                target = save_playable_quiz_to_file(target, self._quiz)
        except (OSError, ValueError) as exc:
            show_error(self, "Export failed", str(exc))
            return

        self._last_export_dir = target.parent
        show_info(self, "Quiz saved", f"Quiz exported to {target}.")

    # --- Attempt lifecycle ---

    def _start_attempt(self) -> None:
        if self._quiz is None:
            show_warning(self, "No quiz", "Open a quiz file first.")
            return

        self._end_attempt()
        rng = random.Random(self._shuffle_seed) if self._shuffle_seed is not None else None
        try:
            manager = SessionManager(self._quiz, rng=rng)
        except QuizValidationError as exc:
            show_error(self, "Quiz rejected", str(exc))
            return

        self._session_manager = manager
        manager.start()
        self.question_panel.bind_session(manager)
        self._set_mode(PlayerMode.QUESTION)

    def _show_results(self) -> None:
        manager = self._session_manager
        if manager is None or self._quiz is None:
            return
        self.question_panel.unbind_session()
        report = manager.build_report()
        try:
            self._results_export = build_results_export(self._quiz, manager.get_answers(), score=report.score)
        except ValueError as exc:
            show_error(self, "Results unavailable", str(exc))
            self._return_to_cover()
            return
        self.results_panel.show_results(self._results_export)
        self._set_mode(PlayerMode.RESULTS)

    def _handle_download_results(self) -> None:
        manager = self._session_manager
        if manager is None or self._quiz is None or self._results_export is None:
            return

        default_dir = self._last_results_dir or Path.cwd()
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            RESULTS_DIALOG_TITLE,
            str(default_dir / default_results_filename(self._quiz)),
            RESULTS_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            saved_path = save_results_to_file(
                Path(file_path),
                self._quiz,
                manager.get_answers(),
                score=self._results_export.report.score,
            )
        except (OSError, ValueError) as exc:
            show_error(self, "Export failed", str(exc))
            return

        self._last_results_dir = saved_path.parent
        show_info(self, "Results saved", f"Results saved to {saved_path}.")

    def _return_to_cover(self) -> None:
        self._end_attempt()
        self.cover_panel.show_quiz(self._quiz)
        self._set_mode(PlayerMode.COVER)

    def _attempt_in_progress(self) -> bool:
        manager = self._session_manager
        return manager is not None and manager.has_started() and not manager.is_complete()

    def _end_attempt(self) -> None:
        self.question_panel.unbind_session()
        self.results_panel.clear()
        if self._session_manager is not None:
            self._session_manager.abort()
            self._session_manager = None
        self._results_export = None

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        self._end_attempt()
        super().closeEvent(event)

    # --- Menus and settings ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._game_font_size,
            self._theme,
            self._shuffle_seed,
        )
        if dialog.exec():
            self._game_font_size = dialog.get_game_font_size()
            self._theme = dialog.get_theme()
            self._shuffle_seed = dialog.get_shuffle_seed()
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))

        self.cover_panel.apply_font_size(self._game_font_size)
        self.question_panel.set_theme(self._theme)
        self.question_panel.apply_font_size(self._game_font_size)
        self.results_panel.set_theme(self._theme)
        self.results_panel.apply_font_size(self._game_font_size)
