"""Quiz Editor - View-models do editor de questoes."""

from .controller import (
    DELETE_CONFIRM_MESSAGE,
    DISCARD_NEW_CONFIRM_MESSAGE,
    SAVE_ERROR_MESSAGE,
    UNSAVED_ALERT_MESSAGE,
    QuestionEditor,
    QuestionGateway,
)
from .question_list import QuestionList

__all__ = [
    "QuestionEditor",
    "QuestionGateway",
    "QuestionList",
    "UNSAVED_ALERT_MESSAGE",
    "DELETE_CONFIRM_MESSAGE",
    "DISCARD_NEW_CONFIRM_MESSAGE",
    "SAVE_ERROR_MESSAGE",
]
