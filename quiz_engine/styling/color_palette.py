"""Color palette for the quiz widgets supporting light and dark themes."""

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
    """Centralized color definitions for the quiz widgets."""

    TEXT_PRIMARY = ThemeColors(light="#000000", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#666666", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F5F5F5", dark="#2D2D2D")

    BORDER_PRIMARY = ThemeColors(light="#D1D1D1", dark="#555555")

    BUTTON_PRIMARY_BG = ThemeColors(light="#0078D4", dark="#4A9EFF")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")

    # Seed cells are read-only
    SEED_CELL_BG = ThemeColors(light="#E8E8E8", dark="#3A3A3A")
    INCORRECT_CELL_BORDER = ThemeColors(light="#D13438", dark="#FF6B6B")

    # Lock badges
    BADGE_COMPLETE = ThemeColors(light="#107C10", dark="#6FCF6F")
    BADGE_TIMEOUT = ThemeColors(light="#FFB900", dark="#FFC83D")
    BADGE_LOCKED = ThemeColors(light="#666666", dark="#AAAAAA")
