"""Quiz Resolvers - Camada de acesso a questoes.

Thin forwarding calls to ``QuizStore``. Policy lives in two places only:
the identity checks (through ``AuthContext``) and the course concept
aggregation.
"""

from __future__ import annotations

import logging

from .auth import AuthContext
from .engine.concept_engine import CourseConceptEngine
from .exceptions import AuthorizationError
from .models.enums import AttemptOrder
from .models.schemas import (
    Course,
    Instructor,
    Option,
    Question,
    QuestionCreateInput,
    QuestionUpdateInput,
    Quiz,
    QuizAttempt,
    Student,
)
from .storage.quiz_store import QuizStore

logger = logging.getLogger(__name__)

ATTEMPT_NOT_FOUND = "Quiz attempt not found"

_concepts = CourseConceptEngine()


# =============================================================================
# PASSTHROUGH READS
# =============================================================================


async def course(store: QuizStore, id: str) -> Course | None:
    return await store.get_course(id)


async def quiz(store: QuizStore, id: str) -> Quiz | None:
    return await store.get_quiz(id)


async def quizzes(store: QuizStore, course_id: str | None = None) -> list[Quiz]:
    return await store.list_quizzes(course_id)


async def question(store: QuizStore, id: str) -> Question | None:
    return await store.get_question(id)


async def option(store: QuizStore, id: str) -> Option | None:
    return await store.get_option(id)


async def course_concepts(store: QuizStore, id: str) -> list[str]:
    """Conceitos distintos de todas as questoes de todos os quizzes do curso.

    Walks course -> quizzes -> questions and aggregates in memory.
    """
    nested = []
    for course_quiz in await store.list_quizzes(id):
        questions = []
        for question_id in course_quiz.question_ids:
            found = await store.get_question(question_id)
            if found is not None:
                questions.append({"concept": found.concept})
        nested.append({"questions": questions})

    return _concepts.collect(nested)


# =============================================================================
# IDENTITY-SCOPED READS
# =============================================================================


async def current_instructor(store: QuizStore, auth: AuthContext) -> Instructor | None:
    return await store.get_instructor(auth.as_instructor())


async def current_student(store: QuizStore, auth: AuthContext) -> Student | None:
    return await store.get_student(auth.as_student())


async def current_student_quiz_attempts(
    store: QuizStore,
    auth: AuthContext,
    course_id: str | None = None,
    order_by: AttemptOrder | None = None,
) -> list[QuizAttempt]:
    """Tentativas do aluno autenticado, opcionalmente de um curso."""
    student_id = auth.as_student()
    return await store.list_quiz_attempts(
        student_id=student_id, course_id=course_id, order=order_by
    )


async def quiz_attempt(store: QuizStore, auth: AuthContext, id: str) -> QuizAttempt:
    """Busca uma tentativa do aluno dono ou de qualquer instrutor.

    Ownership is checked on a minimal read before the full record is
    fetched. A missing attempt and another student's attempt fail with the
    same message, so callers cannot probe which ids exist.

    Raises:
        AuthorizationError: Tentativa inexistente ou de outro aluno
    """
    owner_id = await store.get_attempt_owner(id)
    if owner_id is None or not (auth.is_instructor or owner_id == auth.user_id):
        logger.warning(f"Acesso negado a tentativa {id} por {auth.user_id}")
        raise AuthorizationError(ATTEMPT_NOT_FOUND, {"attempt_id": id})

    attempt = await store.get_quiz_attempt(id)
    if attempt is None:
        raise AuthorizationError(ATTEMPT_NOT_FOUND, {"attempt_id": id})
    return attempt


# =============================================================================
# MUTATIONS (instructor only)
# =============================================================================


async def add_question(
    store: QuizStore, auth: AuthContext, quiz_id: str, question: QuestionCreateInput
) -> Question:
    instructor_id = auth.as_instructor()
    created = await store.create_question(quiz_id, question)
    logger.info(f"Instrutor {instructor_id} adicionou questao {created.id}")
    return created


async def update_question(
    store: QuizStore, auth: AuthContext, id: str, data: QuestionUpdateInput
) -> Question:
    auth.as_instructor()
    return await store.update_question(id, data)


async def delete_question(store: QuizStore, auth: AuthContext, id: str) -> str:
    instructor_id = auth.as_instructor()
    deleted_id = await store.delete_question(id)
    logger.info(f"Instrutor {instructor_id} removeu questao {deleted_id}")
    return deleted_id
