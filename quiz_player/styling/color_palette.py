"""Color palette for the quiz player supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from quiz_player.core.models import AnswerStatus


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = ThemeColors(
        light="#1F2937",      # Slate
        dark="#F3F4F6"        # Near white
    )

    TEXT_SECONDARY = ThemeColors(
        light="#6B7280",      # Gray
        dark="#9CA3AF"        # Light Gray
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#F3F4F6",
        dark="#111827"
    )

    BACKGROUND_CARD = ThemeColors(
        light="#FFFFFF",
        dark="#1F2937"
    )

    # Border colors
    BORDER_PRIMARY = ThemeColors(
        light="#D1D5DB",
        dark="#4B5563"
    )

    # Button colors
    BUTTON_PRIMARY_BG = ThemeColors(
        light="#2563EB",      # Blue
        dark="#3B82F6"
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#FFFFFF"
    )

    BUTTON_SECONDARY_BG = ThemeColors(
        light="#F9FAFB",
        dark="#374151"
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#E5E7EB",
        dark="#4B5563"
    )

    # Answer status colors
    STATUS_CORRECT = ThemeColors(
        light="#16A34A",      # Green
        dark="#4ADE80"
    )

    STATUS_INCORRECT = ThemeColors(
        light="#DC2626",      # Red
        dark="#F87171"
    )

    STATUS_SKIPPED = ThemeColors(
        light="#2563EB",      # Blue
        dark="#60A5FA"
    )

    STATUS_TIME_EXPIRED = ThemeColors(
        light="#EA580C",      # Orange
        dark="#FB923C"
    )

    # Countdown warning, alternating each second
    TIMER_WARNING = ThemeColors(
        light="#EF4444",
        dark="#DC2626"
    )

    TIMER_WARNING_BLINK = ThemeColors(
        light="#B91C1C",
        dark="#991B1B"
    )

    @classmethod
    def for_status(cls, status: AnswerStatus) -> ThemeColors:
        return {
            AnswerStatus.CORRECT: cls.STATUS_CORRECT,
            AnswerStatus.INCORRECT: cls.STATUS_INCORRECT,
            AnswerStatus.SKIPPED: cls.STATUS_SKIPPED,
            AnswerStatus.TIME_EXPIRED: cls.STATUS_TIME_EXPIRED,
        }[status]
