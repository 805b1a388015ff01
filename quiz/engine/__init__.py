"""Quiz Engines - Logica de negocios."""

from .concept_engine import CourseConceptEngine
from .draft_engine import (
    build_create_input,
    build_update_input,
    is_placeholder_id,
    new_question_draft,
    reduce,
)
from .validation_engine import QuestionValidationEngine

__all__ = [
    "CourseConceptEngine",
    "QuestionValidationEngine",
    "reduce",
    "is_placeholder_id",
    "new_question_draft",
    "build_create_input",
    "build_update_input",
]
