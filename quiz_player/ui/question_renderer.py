"""Question rendering utilities for the embedded web view."""

from __future__ import annotations

from html import escape

from quiz_player.core.markdown_renderer import renderer
from quiz_player.core.models import Question
from quiz_player.styling.color_palette import ColorPalette, Theme


def _document_stylesheet(font_size: int, theme: Theme) -> str:
    return (
        f"body {{ font-family: 'Segoe UI', sans-serif; font-size: {font_size}pt; margin: 0.75rem;"
        f" background: {ColorPalette.BACKGROUND_CARD.get(theme)};"
        f" color: {ColorPalette.TEXT_PRIMARY.get(theme)}; }}"
        " img { display: block; max-width: 100%; max-height: 18rem; margin: 1rem auto; border-radius: 8px; }"
        " pre, code { font-size: 0.9em; }"
    )


def render_question_document(question: Question, font_size: int = 14, theme: Theme = Theme.LIGHT) -> str:
    """Render question text and its optional image as a standalone document.

    Args:
        question: The question on screen
        font_size: Font size in points for the question text
        theme: Colour theme of the surrounding window

    Returns:
        HTML string ready for display in QWebEngineView
    """
    body = renderer.render_fragment(question.text)
    if question.image_url:
        body += f'<img src="{escape(question.image_url, quote=True)}" alt="Question image" />'
    return renderer.wrap_document(body, title="Question", stylesheet=_document_stylesheet(font_size, theme))


def render_explanation_fragment(question: Question) -> str:
    """Render the explanation as rich text for a QLabel, or an empty string."""
    if not question.explanation:
        return ""
    return renderer.render_fragment(question.explanation)


def render_option_label(option_index: int, option_text: str) -> str:
    return f"{chr(ord('A') + option_index)}: {option_text}"
