"""Application entry point for the quiz engine demo."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from quiz_engine.constants.about import APP_NAME, APP_VERSION
from quiz_engine.constants.ui_constants import WINDOW_TITLE
from quiz_engine.core.models import Operator
from quiz_engine.core.options import QuizOptions
from quiz_engine.core.questions import NumberPyramidQuestion
from quiz_engine.ui.quiz_widget import QuizWidget
from quiz_engine.utils.logging_config import configure_logging

DEMO_TIME_LIMIT_SECONDS = 300
DEMO_MAX_ATTEMPTS = 3


def build_demo_quiz(window: QuizWidget) -> None:
    """Populate the window with one pyramid per operator plus a bonus question."""
    window.add_question(NumberPyramidQuestion, size=3, operation=Operator.ADD)
    window.add_question(NumberPyramidQuestion, size=4, operation=Operator.SUBTRACT, min_num=10, max_num=30)
    window.add_question(NumberPyramidQuestion, size=3, operation=Operator.MULTIPLY, max_num=6, points=2)
    window.add_question(NumberPyramidQuestion, size=3, operation=Operator.DIVIDE, min_num=20, max_num=99)
    window.add_question(NumberPyramidQuestion, size=3, operation=Operator.MODULO, min_num=2, max_num=20)
    window.add_question(NumberPyramidQuestion, size=5, operation=Operator.ADD, optional=True, max_attempts=0)


def main() -> None:
    """Initialize logging and launch the demo quiz window."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv)
    window = QuizWidget(options=QuizOptions(time_limit=DEMO_TIME_LIMIT_SECONDS, max_attempts=DEMO_MAX_ATTEMPTS))
    window.setWindowTitle(WINDOW_TITLE)
    build_demo_quiz(window)
    window.show()
    window.start()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
