"""Colors, themes and Qt stylesheets for QuizTaker."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
