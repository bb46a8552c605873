"""Qt widgets rendering quizzes and their questions."""

from .number_pyramid_widget import NumberPyramidWidget
from .question_widget import QuestionWidget, preferred_languages
from .quiz_widget import QuizWidget, create_question_widget

__all__ = [
    "NumberPyramidWidget",
    "QuestionWidget",
    "QuizWidget",
    "create_question_widget",
    "preferred_languages",
]
