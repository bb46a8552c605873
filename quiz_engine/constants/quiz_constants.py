"""Quiz-related constants shared across UI and core layers."""

TICK_INTERVAL_MS: int = 500

DEFAULT_POINTS: int = 1
DEFAULT_MAX_ATTEMPTS: int = 0  # 0 means unlimited

DEFAULT_PYRAMID_SIZE: int = 3
DEFAULT_MIN_NUM: int = 1
DEFAULT_MAX_NUM: int = 10
DEFAULT_OPERATOR: str = "+"

DEFAULT_LANGUAGES: tuple[str, ...] = ("en",)
