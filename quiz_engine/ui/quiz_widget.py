"""Quiz container widget: question list, countdown and score."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from quiz_engine.constants.quiz_constants import TICK_INTERVAL_MS
from quiz_engine.constants.ui_constants import TIMER_PLACEHOLDER, WINDOW_MIN_WIDTH
from quiz_engine.core.events import ResultsChange, TimerUpdate
from quiz_engine.core.labels import format_score, format_timer
from quiz_engine.core.options import QuizOptions
from quiz_engine.core.questions import NumberPyramidQuestion, Question
from quiz_engine.core.quiz_manager import QuizManager
from quiz_engine.styling.color_palette import Theme
from quiz_engine.styling.styles import Styles
from quiz_engine.ui.number_pyramid_widget import NumberPyramidWidget
from quiz_engine.ui.question_widget import QuestionWidget, preferred_languages

Q = TypeVar("Q", bound=Question)

_WIDGET_TYPES: dict[type[Question], type[QuestionWidget]] = {
    NumberPyramidQuestion: NumberPyramidWidget,
    Question: QuestionWidget,
}


def create_question_widget(
    question: Question,
    languages: Sequence[str] | None = None,
    theme: Theme = Theme.LIGHT,
    parent: QWidget | None = None,
) -> QuestionWidget:
    """Pick the most specific widget registered for the question's type."""
    for question_type in type(question).__mro__:
        widget_type = _WIDGET_TYPES.get(question_type)
        if widget_type is not None:
            return widget_type(question, languages=languages, theme=theme, parent=parent)
    raise TypeError(f"No widget registered for {type(question).__name__}")


class QuizWidget(QWidget):
    """Hosts the question widgets and drives the quiz timer."""

    def __init__(
        self,
        quiz_manager: QuizManager | None = None,
        options: QuizOptions | None = None,
        languages: Sequence[str] | None = None,
        theme: Theme = Theme.LIGHT,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager if quiz_manager is not None else QuizManager(options)
        self._languages = list(languages) if languages else preferred_languages()
        self._theme = theme
        self.question_widgets: list[QuestionWidget] = []

        self._build_ui()
        self._configure_tick_timer()
        self.setStyleSheet(Styles.get_quiz_style(theme))

        self.quiz_manager.on(TimerUpdate, self._handle_timer_update)
        self.quiz_manager.on(ResultsChange, self._handle_results_change)
        self.score_label.setText(format_score(self.quiz_manager.results))

    def _build_ui(self) -> None:
        self.setMinimumWidth(WINDOW_MIN_WIDTH)
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        content = QWidget(self.scroll_area)
        self.content_layout = QVBoxLayout()
        self.content_layout.addStretch()
        content.setLayout(self.content_layout)
        self.scroll_area.setWidget(content)
        layout.addWidget(self.scroll_area, stretch=1)

        stats_row = QHBoxLayout()
        self.time_label = QLabel(TIMER_PLACEHOLDER, self)
        stats_row.addWidget(self.time_label)
        stats_row.addStretch()
        self.score_label = QLabel(self)
        stats_row.addWidget(self.score_label)
        layout.addLayout(stats_row)

    def _configure_tick_timer(self) -> None:
        self.tick_timer = QTimer(self)
        self.tick_timer.setInterval(TICK_INTERVAL_MS)
        self.tick_timer.timeout.connect(self.quiz_manager.tick)

    def start(self) -> None:
        if not self.tick_timer.isActive():
            self.tick_timer.start()
        self.quiz_manager.tick()

    def stop(self) -> None:
        self.tick_timer.stop()

    def add_question(self, question_type: type[Q], **options: Any) -> Q:
        question = self.quiz_manager.add_question(question_type, **options)
        widget = create_question_widget(question, self._languages, self._theme, self)
        # Keep the trailing stretch last.
        self.content_layout.insertWidget(self.content_layout.count() - 1, widget)
        self.question_widgets.append(widget)
        return question

    def _handle_timer_update(self, event: TimerUpdate) -> None:
        self.time_label.setText(format_timer(event.elapsed, event.remaining))

    def _handle_results_change(self, event: ResultsChange) -> None:
        self.score_label.setText(format_score(event.results))
