"""Color palette for the quiz canvas supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Canvas theme options."""
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
    """Centralized color definitions for the canvas."""

    # Canvas
    BACKGROUND = ThemeColors(
        light="#F5F5F5",      # WhiteSmoke
        dark="#141414"        # Near black
    )

    TEXT_PRIMARY = ThemeColors(
        light="#1E1E1E",
        dark="#FFFFFF"
    )

    START_HINT = ThemeColors(
        light="#107C10",      # Green
        dark="#33FF33"
    )

    CONTINUE_HINT = ThemeColors(
        light="#0078D4",      # Blue
        dark="#80C8FF"
    )

    # Option buttons
    OPTION_BG = ThemeColors(
        light="#E8E8E8",
        dark="#1A1A1A"
    )

    OPTION_HOVER_BG = ThemeColors(
        light="#B3D7F2",
        dark="#264D66"
    )

    # Feedback
    SUCCESS = ThemeColors(
        light="#107C10",
        dark="#17E617"
    )

    ERROR = ThemeColors(
        light="#D13438",
        dark="#E61717"
    )

    HEART = ThemeColors(
        light="#E8407A",
        dark="#CC2966"
    )

    # Result tiers
    RESULT_TOP = ThemeColors(
        light="#C8A000",      # Gold
        dark="#FFFF00"
    )

    RESULT_MID = ThemeColors(
        light="#0078D4",
        dark="#33AAFF"
    )

    RESULT_LOW = ThemeColors(
        light="#E07000",      # Orange
        dark="#FF9933"
    )

    BUBBLE = ThemeColors(
        light="#66B3E6",
        dark="#80D4FF"
    )
