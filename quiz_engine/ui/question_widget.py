"""Widget rendering a single question and forwarding its check action."""

from __future__ import annotations

from collections.abc import Sequence

from PySide6.QtCore import QLocale, Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_engine.core.events import QuestionRendered
from quiz_engine.core.labels import (
    attempt_counter,
    attempts_label,
    check_label,
    index_label,
    lock_badge,
    points_label,
)
from quiz_engine.core.prompt_renderer import renderer
from quiz_engine.core.questions import Question
from quiz_engine.styling.color_palette import Theme
from quiz_engine.styling.styles import Styles


def preferred_languages() -> list[str]:
    """Language tags of the desktop session, most preferred first."""
    return list(QLocale.system().uiLanguages())


class QuestionWidget(QFrame):
    """Header, body and footer shared by all question widgets.

    The widget only reads question state; it re-renders whenever the question
    publishes :class:`QuestionRendered`.
    """

    def __init__(
        self,
        question: Question,
        languages: Sequence[str] | None = None,
        theme: Theme = Theme.LIGHT,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("question")
        self.question = question
        self._languages = list(languages) if languages else preferred_languages()
        self._theme = theme

        self._build_ui()
        self.question.events.on(QuestionRendered, self._handle_rendered)
        self.refresh()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.index_label = QLabel(self)
        header_row.addWidget(self.index_label)

        self.prompt_label = QLabel(self)
        self.prompt_label.setTextFormat(Qt.RichText)
        self.prompt_label.setWordWrap(True)
        self.prompt_label.setText(renderer.render_fragment(self.question.prompt(self._languages)))
        header_row.addWidget(self.prompt_label, stretch=1)

        self.points_label = QLabel(points_label(self.question.max_points, self._languages), self)
        self.points_label.setObjectName("secondary")
        header_row.addWidget(self.points_label)
        layout.addLayout(header_row)

        attempts_row = QHBoxLayout()
        self.attempts_label = QLabel(attempts_label(self.question.max_attempts, self._languages), self)
        self.attempts_label.setObjectName("secondary")
        attempts_row.addWidget(self.attempts_label)
        self.attempt_counter_label = QLabel(self)
        attempts_row.addWidget(self.attempt_counter_label)
        attempts_row.addStretch()
        layout.addLayout(attempts_row)

        self.body_layout = QVBoxLayout()
        layout.addLayout(self.body_layout)
        self._build_body(self.body_layout)

        footer_row = QHBoxLayout()
        footer_row.addStretch()
        self.check_button = QPushButton(check_label(self._languages), self)
        self.check_button.clicked.connect(self._handle_check)
        footer_row.addWidget(self.check_button)

        self.lock_label = QLabel(self)
        self.lock_label.setVisible(False)
        footer_row.addWidget(self.lock_label)
        layout.addLayout(footer_row)

    def _build_body(self, layout: QVBoxLayout) -> None:
        """Hook for subclasses to add their input surface."""

    def _refresh_body(self) -> None:
        """Hook for subclasses to re-render their input surface."""

    def _handle_check(self) -> None:
        self.question.check()

    def _handle_rendered(self, event: QuestionRendered) -> None:
        self.refresh()

    def refresh(self) -> None:
        index_text = index_label(self.question.index)
        self.index_label.setText(index_text)
        self.index_label.setVisible(bool(index_text))

        counter = attempt_counter(self.question.attempts_used, self.question.max_attempts)
        self.attempts_label.setVisible(counter is not None)
        self.attempt_counter_label.setVisible(counter is not None)
        self.attempt_counter_label.setText(counter or "")

        if self.question.locked:
            badge = lock_badge(self.question.lock_reason, self._languages)
            self.lock_label.setText(f"{badge.symbol} {badge.text}")
            self.lock_label.setStyleSheet(Styles.get_badge_style(badge.reason, self._theme))
            self.lock_label.setVisible(True)
            self.check_button.setVisible(False)
        else:
            self.lock_label.setVisible(False)
            self.check_button.setVisible(True)
            self.check_button.setEnabled(self.question.editable)

        self._refresh_body()
