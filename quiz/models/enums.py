"""Quiz Enums - Tipos de questao e ordenacao."""

from enum import Enum


class QuestionType(str, Enum):
    """Closed set of question kinds."""

    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    SHORT_ANSWER = "SHORT_ANSWER"


DEFAULT_QUESTION_TYPE = QuestionType.MULTIPLE_CHOICE


class AttemptOrder(str, Enum):
    """Ordering for a student's quiz attempt listing."""

    CREATED_AT_ASC = "createdAt_ASC"
    CREATED_AT_DESC = "createdAt_DESC"
