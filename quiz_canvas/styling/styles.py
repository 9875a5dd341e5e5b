"""Centralized styles and font definitions for the application."""

from PySide6.QtGui import QFont

from .color_palette import ColorPalette, Theme

DEFAULT_THEME = Theme.DARK


class Styles:
    """Helper class to generate Qt stylesheets and fonts based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = DEFAULT_THEME) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
        """

    @staticmethod
    def canvas_font(pixel_size: float, bold: bool = False) -> QFont:
        font = QFont("Segoe UI")
        font.setStyleHint(QFont.StyleHint.SansSerif)
        font.setPixelSize(max(1, round(pixel_size)))
        font.setBold(bold)
        return font
