"""Question rendering utilities for displaying quiz questions."""

from __future__ import annotations

from quiz_taker.core.markdown_math_renderer import renderer
from quiz_taker.styling.color_palette import ColorPalette, Theme


def render_question(
    question_text: str,
    options: list[str] | None = None,
    font_size: int = 14,
    theme: Theme = Theme.LIGHT,
) -> str:
    """Render a quiz question as HTML.

    Args:
        question_text: The question text (supports Markdown and LaTeX)
        options: Optional option strings listed below the question, as used
            by the authoring preview. The taking view shows options as buttons.
        font_size: Font size in points for the question text
        theme: Colour theme of the surrounding window

    Returns:
        HTML string ready for display in QWebEngineView
    """
    markdown_lines = [question_text.strip() or "(No question text)"]
    for idx, option in enumerate(options or []):
        letter = chr(ord("A") + idx)
        markdown_lines.append(f"**{letter}.** {option or '(empty)'}")
    markdown = "\n\n".join(markdown_lines)
    return renderer.render_full_document(
        markdown,
        font_size=font_size,
        text_color=ColorPalette.TEXT_PRIMARY.get(theme),
        background=ColorPalette.PREVIEW_BG.get(theme),
    )
