"""Styling module for the quiz player."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
