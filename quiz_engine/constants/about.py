"""Static metadata describing the quiz engine."""

APP_NAME = "Quiz Engine"
APP_VERSION = "0.1"
