"""Color palette for Romedy Quiz supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


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

    TEXT_PRIMARY = ThemeColors(
        light="#2B1B24",      # Deep plum
        dark="#F8EEF2"        # Blush white
    )

    TEXT_SECONDARY = ThemeColors(
        light="#6B5660",
        dark="#C9B3BD"
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFF7FA",      # Soft pink
        dark="#1F161A"
    )

    BORDER_PRIMARY = ThemeColors(
        light="#E4C6D2",
        dark="#5A4650"
    )

    BUTTON_SECONDARY_BG = ThemeColors(
        light="#FFE3EC",
        dark="#3A2A31"
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#FCC2D7",
        dark="#4F3A44"
    )

    # Answer feedback
    SUCCESS = ThemeColors(
        light="#2F9E44",      # Green
        dark="#69DB7C"
    )

    ERROR = ThemeColors(
        light="#E03131",      # Red
        dark="#FF6B6B"
    )
