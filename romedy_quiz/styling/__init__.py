"""Styling module for Romedy Quiz."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
