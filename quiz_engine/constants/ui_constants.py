"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Quiz Engine"
WINDOW_MIN_WIDTH: int = 520

PYRAMID_CELL_WIDTH: int = 56
PYRAMID_CELL_SPACING: int = 4

TIMER_PLACEHOLDER: str = "00:00"
