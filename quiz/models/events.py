"""Editor Events - Entradas do reducer do editor de questao."""

from dataclasses import dataclass

from .enums import QuestionType
from .schemas import Question

# =============================================================================
# LOAD
# =============================================================================


@dataclass(frozen=True)
class ExpandRequested:
    pass


@dataclass(frozen=True)
class LoadSucceeded:
    question: Question


@dataclass(frozen=True)
class LoadFailed:
    reason: str


@dataclass(frozen=True)
class NewDraftOpened:
    """Placeholder question mounted with a blank local draft."""

    question: Question


# =============================================================================
# DRAFT EDITS
# =============================================================================


@dataclass(frozen=True)
class PromptChanged:
    prompt: str


@dataclass(frozen=True)
class ConceptChanged:
    concept: str


@dataclass(frozen=True)
class TypeChanged:
    type: QuestionType


@dataclass(frozen=True)
class OptionTextChanged:
    index: int
    text: str


@dataclass(frozen=True)
class CorrectOptionChosen:
    index: int


@dataclass(frozen=True)
class ShortAnswerChanged:
    index: int
    value: str


# =============================================================================
# SAVE / DISCARD / DELETE
# =============================================================================


@dataclass(frozen=True)
class SaveRejected:
    message: str


@dataclass(frozen=True)
class SaveStarted:
    pass


@dataclass(frozen=True)
class SaveSucceeded:
    question: Question


@dataclass(frozen=True)
class SaveFailed:
    message: str


@dataclass(frozen=True)
class Discarded:
    summary: str = ""


@dataclass(frozen=True)
class DeleteStarted:
    summary: str = ""


@dataclass(frozen=True)
class DeleteSucceeded:
    pass


@dataclass(frozen=True)
class DeleteFailed:
    message: str


@dataclass(frozen=True)
class RemovedLocally:
    """Never-persisted question dropped without a network call."""


DRAFT_EDITS = (
    PromptChanged,
    ConceptChanged,
    TypeChanged,
    OptionTextChanged,
    CorrectOptionChosen,
    ShortAnswerChanged,
)
