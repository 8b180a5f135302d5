"""Settings dialog for configuring player preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from quiz_player.styling.color_palette import Theme

_MAX_SHUFFLE_SEED = 2_147_483_647


class SettingsDialog(QDialog):
    """Dialog for configuring display and shuffle settings."""

    def __init__(
        self,
        parent=None,
        game_font_size: int = 14,
        theme: Theme = Theme.LIGHT,
        shuffle_seed: int | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._game_font_size = game_font_size
        self._theme = theme
        self._shuffle_seed = shuffle_seed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Display settings group
        display_group = QGroupBox("Display Settings")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        game_font_row = QHBoxLayout()
        game_font_label = QLabel("Quiz Font Size (questions, options):")
        game_font_label.setToolTip("Font size for questions, options, explanations and results")
        self.game_font_spinbox = QSpinBox()
        self.game_font_spinbox.setRange(10, 32)
        self.game_font_spinbox.setValue(self._game_font_size)
        self.game_font_spinbox.setSuffix(" pt")
        game_font_row.addWidget(game_font_label)
        game_font_row.addStretch()
        game_font_row.addWidget(self.game_font_spinbox)
        display_layout.addLayout(game_font_row)

        theme_row = QHBoxLayout()
        theme_label = QLabel("Color theme:")
        self.theme_combo = QComboBox()
        self.theme_combo.addItem("Light", Theme.LIGHT)
        self.theme_combo.addItem("Dark", Theme.DARK)
        self.theme_combo.setCurrentIndex(0 if self._theme == Theme.LIGHT else 1)
        theme_row.addWidget(theme_label)
        theme_row.addStretch()
        theme_row.addWidget(self.theme_combo)
        display_layout.addLayout(theme_row)

        layout.addWidget(display_group)

        # Question order group
        order_group = QGroupBox("Question Order")
        order_layout = QVBoxLayout()
        order_group.setLayout(order_layout)

        self.fixed_seed_checkbox = QCheckBox("Use a fixed shuffle seed")
        self.fixed_seed_checkbox.setToolTip(
            "When the quiz randomizes its questions, a fixed seed makes every attempt use the same order."
        )
        self.fixed_seed_checkbox.setChecked(self._shuffle_seed is not None)
        order_layout.addWidget(self.fixed_seed_checkbox)

        seed_row = QHBoxLayout()
        seed_label = QLabel("Shuffle seed:")
        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(0, _MAX_SHUFFLE_SEED)
        self.seed_spinbox.setValue(self._shuffle_seed or 0)
        self.seed_spinbox.setEnabled(self._shuffle_seed is not None)
        self.fixed_seed_checkbox.toggled.connect(self.seed_spinbox.setEnabled)
        seed_row.addWidget(seed_label)
        seed_row.addStretch()
        seed_row.addWidget(self.seed_spinbox)
        order_layout.addLayout(seed_row)

        layout.addWidget(order_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_game_font_size(self) -> int:
        """Get the selected quiz font size."""
        return self.game_font_spinbox.value()

    def get_theme(self) -> Theme:
        return self.theme_combo.currentData()

    def get_shuffle_seed(self) -> int | None:
        """Get the fixed shuffle seed, or None for a fresh order every attempt."""
        if not self.fixed_seed_checkbox.isChecked():
            return None
        return self.seed_spinbox.value()
