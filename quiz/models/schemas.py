"""Quiz Schemas - Modelos Pydantic para registros e payloads de mutacao.

All models accept both snake_case names and the camelCase names used on the
GraphQL wire (``isCorrect``, ``correctShortAnswers``...).
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import DEFAULT_QUESTION_TYPE, QuestionType


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# RECORDS
# =============================================================================


class Option(_CamelModel):
    """Alternativa de multipla escolha."""

    id: str = Field(..., description="ID da alternativa")
    text: str = Field(default="", description="Rich text label")
    is_correct: bool = Field(default=False, description="Se e a alternativa correta")


class Question(_CamelModel):
    """Questao com alternativas ou respostas curtas aceitas."""

    id: str = Field(..., description="ID persistido ou placeholder _newN")
    concept: str = Field(default="", description="Free-text topic label")
    prompt: str = Field(default="", description="Rich text prompt")
    type: QuestionType = Field(default=DEFAULT_QUESTION_TYPE)
    options: list[Option] = Field(default_factory=list)
    correct_short_answers: list[str] = Field(default_factory=list)
    quiz_id: str | None = Field(default=None, description="Quiz dono da questao")


class Course(_CamelModel):
    id: str
    title: str = ""
    quiz_ids: list[str] = Field(default_factory=list)


class Quiz(_CamelModel):
    id: str
    title: str = ""
    course_id: str | None = None
    question_ids: list[str] = Field(default_factory=list)


class Student(_CamelModel):
    id: str
    name: str = ""
    email: str = ""


class Instructor(_CamelModel):
    id: str
    name: str = ""
    email: str = ""
    course_ids: list[str] = Field(default_factory=list)


class QuestionAttempt(_CamelModel):
    """Resposta de um aluno a uma questao."""

    id: str
    question_id: str
    option_id: str | None = None
    short_answer: str | None = None
    is_correct: bool = False


class QuizAttempt(_CamelModel):
    """Tentativa de um aluno em um quiz."""

    id: str
    quiz_id: str
    student_id: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    completed: bool = False
    question_attempts: list[QuestionAttempt] = Field(default_factory=list)


# =============================================================================
# MUTATION PAYLOADS
# =============================================================================


class OptionCreateInput(_CamelModel):
    text: str = ""
    is_correct: bool = False


class QuestionCreateInput(_CamelModel):
    """Payload de criacao: alternativas sem IDs."""

    type: QuestionType = DEFAULT_QUESTION_TYPE
    prompt: str = ""
    concept: str = ""
    options: list[OptionCreateInput] = Field(default_factory=list)
    correct_short_answers: list[str] = Field(default_factory=list)


class OptionWhereUniqueInput(_CamelModel):
    id: str


class OptionUpdateData(_CamelModel):
    text: str = ""
    is_correct: bool = False


class OptionUpdateInput(_CamelModel):
    where: OptionWhereUniqueInput
    data: OptionUpdateData


class ShortAnswerSetInput(_CamelModel):
    values: list[str] = Field(default_factory=list, alias="set")


class QuestionUpdateInput(_CamelModel):
    """Payload de atualizacao: alternativas identificadas pelos IDs existentes."""

    type: QuestionType = DEFAULT_QUESTION_TYPE
    prompt: str = ""
    concept: str = ""
    options: list[OptionUpdateInput] = Field(default_factory=list)
    correct_short_answers: ShortAnswerSetInput = Field(default_factory=ShortAnswerSetInput)
