"""Styling module for the quiz widgets."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
