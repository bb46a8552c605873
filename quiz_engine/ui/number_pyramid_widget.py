"""Input grid for number pyramid questions."""

from __future__ import annotations

from functools import partial

from PySide6.QtCore import QRegularExpression, Qt
from PySide6.QtGui import QRegularExpressionValidator
from PySide6.QtWidgets import QHBoxLayout, QLineEdit, QVBoxLayout

from quiz_engine.constants.ui_constants import PYRAMID_CELL_SPACING, PYRAMID_CELL_WIDTH
from quiz_engine.core.questions import NumberPyramidQuestion
from quiz_engine.styling.styles import Styles
from quiz_engine.ui.question_widget import QuestionWidget


class NumberPyramidWidget(QuestionWidget):
    """Renders one line edit per pyramid cell, seeds on top and read-only."""

    question: NumberPyramidQuestion

    def _build_body(self, layout: QVBoxLayout) -> None:
        self.cell_edits: dict[tuple[int, int], QLineEdit] = {}
        validator = QRegularExpressionValidator(QRegularExpression(r"-?\d*"), self)

        for row_cells in self.question.grid.rows:
            row_layout = QHBoxLayout()
            row_layout.setSpacing(PYRAMID_CELL_SPACING)
            row_layout.addStretch()
            for cell in row_cells:
                edit = QLineEdit(self)
                edit.setFixedWidth(PYRAMID_CELL_WIDTH)
                edit.setAlignment(Qt.AlignCenter)
                if cell.is_seed:
                    edit.setText(str(cell.value))
                    edit.setReadOnly(True)
                    edit.setFocusPolicy(Qt.NoFocus)
                else:
                    edit.setValidator(validator)
                    edit.textEdited.connect(partial(self._handle_cell_edited, cell.row, cell.column))
                self.cell_edits[(cell.row, cell.column)] = edit
                row_layout.addWidget(edit)
            row_layout.addStretch()
            layout.addLayout(row_layout)

    def _handle_cell_edited(self, row: int, column: int, text: str) -> None:
        self.question.enter_value(row, column, text)

    def _refresh_body(self) -> None:
        incorrect = set(self.question.incorrect_cells)
        locked = self.question.locked
        for (row, column), edit in self.cell_edits.items():
            is_seed = row == 0
            edit.setReadOnly(is_seed or locked)
            edit.setStyleSheet(Styles.get_cell_style(is_seed, (row, column) in incorrect, self._theme))
