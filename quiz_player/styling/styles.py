"""Centralized Qt stylesheets for the player window and panels."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QLabel {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QSpinBox, QComboBox, QLineEdit {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_large_label_style(font_size: int = 16) -> str:
        return f"font-size: {font_size}pt; font-weight: bold;"

    @staticmethod
    def get_option_button_style(
        theme: Theme,
        font_size: int,
        *,
        selected: bool = False,
        border_color: str | None = None,
    ) -> str:
        """Stylesheet for an option button in its current review state."""
        if border_color is None:
            border_color = (
                ColorPalette.BUTTON_PRIMARY_BG.get(theme)
                if selected
                else ColorPalette.BORDER_PRIMARY.get(theme)
            )
        width = 3 if selected or border_color != ColorPalette.BORDER_PRIMARY.get(theme) else 1
        return (
            f"QPushButton {{ text-align: left; padding: 10px 14px; font-size: {font_size}pt;"
            f" border: {width}px solid {border_color}; border-radius: 8px; }}"
        )

    @staticmethod
    def get_status_label_style(color: str, font_size: int) -> str:
        return f"color: {color}; font-size: {font_size}pt; font-weight: bold;"

    @staticmethod
    def get_countdown_style(font_size: int, warning_color: str | None = None) -> str:
        base_style = f"padding: 2px 6px; border-radius: 4px; font-size: {font_size}pt;"
        if warning_color is None:
            return base_style
        return base_style + f" color: #fff; background-color: {warning_color};"
