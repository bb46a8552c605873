"""Centralized Qt stylesheets for the quiz widgets."""

from quiz_engine.core.models import LockReason

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_quiz_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QFrame#question {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QLineEdit {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QLabel#secondary {{
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
        """

    @staticmethod
    def get_cell_style(is_seed: bool, incorrect: bool, theme: Theme = Theme.LIGHT) -> str:
        if is_seed:
            return f"background-color: {ColorPalette.SEED_CELL_BG.get(theme)};"
        if incorrect:
            return f"border: 2px solid {ColorPalette.INCORRECT_CELL_BORDER.get(theme)};"
        return ""

    @staticmethod
    def get_badge_style(reason: LockReason, theme: Theme = Theme.LIGHT) -> str:
        if reason is LockReason.COMPLETE:
            color = ColorPalette.BADGE_COMPLETE.get(theme)
        elif reason is LockReason.TIMEOUT:
            color = ColorPalette.BADGE_TIMEOUT.get(theme)
        else:
            color = ColorPalette.BADGE_LOCKED.get(theme)
        return f"color: {color}; font-weight: bold; padding: 6px 12px;"
