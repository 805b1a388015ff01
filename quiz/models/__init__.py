"""Quiz Models - Enums, Schemas e estado do editor."""

from .enums import DEFAULT_QUESTION_TYPE, AttemptOrder, QuestionType
from .schemas import (
    Course,
    Instructor,
    Option,
    OptionCreateInput,
    OptionUpdateData,
    OptionUpdateInput,
    OptionWhereUniqueInput,
    Question,
    QuestionAttempt,
    QuestionCreateInput,
    QuestionUpdateInput,
    Quiz,
    QuizAttempt,
    ShortAnswerSetInput,
    Student,
)
from .state import Collapsed, Deleted, Deleting, EditorState, Expanded, Failed, Loading

__all__ = [
    # Enums
    "QuestionType",
    "AttemptOrder",
    "DEFAULT_QUESTION_TYPE",
    # Records
    "Option",
    "Question",
    "Course",
    "Quiz",
    "Student",
    "Instructor",
    "QuestionAttempt",
    "QuizAttempt",
    # Payloads
    "OptionCreateInput",
    "QuestionCreateInput",
    "OptionWhereUniqueInput",
    "OptionUpdateData",
    "OptionUpdateInput",
    "ShortAnswerSetInput",
    "QuestionUpdateInput",
    # Editor state
    "EditorState",
    "Collapsed",
    "Loading",
    "Expanded",
    "Deleting",
    "Deleted",
    "Failed",
]
