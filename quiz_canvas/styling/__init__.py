"""Styling module for the quiz canvas."""

from .color_palette import ColorPalette, Theme
from .styles import DEFAULT_THEME, Styles

__all__ = ["ColorPalette", "DEFAULT_THEME", "Styles", "Theme"]
