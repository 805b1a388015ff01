"""Quiz API Client - Transporte GraphQL (httpx) usado pelo editor."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .exceptions import TransportError
from .models.schemas import (
    Question,
    QuestionCreateInput,
    QuestionUpdateInput,
    Quiz,
    QuizAttempt,
)

logger = logging.getLogger(__name__)

# =============================================================================
# OPERATIONS
# =============================================================================

FULL_QUESTION_FRAGMENT = """
fragment FullQuestion on Question {
    id
    quizId
    concept
    prompt
    type
    options { id text isCorrect }
    correctShortAnswers
}
"""

QUESTION_QUERY = (
    """
query questionQuery($id: ID!) {
    question(id: $id) { ...FullQuestion }
}
"""
    + FULL_QUESTION_FRAGMENT
)

ADD_QUESTION = (
    """
mutation addQuestionMutation($quizId: ID!, $question: QuestionCreateInput!) {
    addQuestion(quizId: $quizId, question: $question) { ...FullQuestion }
}
"""
    + FULL_QUESTION_FRAGMENT
)

UPDATE_QUESTION = (
    """
mutation updateQuestionMutation($id: ID!, $data: QuestionUpdateInput!) {
    updateQuestion(id: $id, data: $data) { ...FullQuestion }
}
"""
    + FULL_QUESTION_FRAGMENT
)

DELETE_QUESTION = """
mutation deleteQuestionMutation($id: ID!) {
    deleteQuestion(id: $id) { id }
}
"""

QUIZ_ATTEMPT_QUERY = """
query quizAttemptQuery($id: ID!) {
    quizAttempt(id: $id) {
        id quizId studentId createdAt completed
        questionAttempts { id questionId optionId shortAnswer isCorrect }
    }
}
"""

QUIZZES_QUERY = """
query quizzesQuery($courseId: ID) {
    quizzes(courseId: $courseId) { id title courseId questionIds }
}
"""

COURSE_CONCEPTS_QUERY = """
query courseConceptsQuery($id: ID!) {
    courseConcepts(id: $id)
}
"""


class QuizApiClient:
    """Cliente GraphQL para a camada de acesso a questoes.

    Any HTTP failure or non-empty ``errors`` list raises ``TransportError``
    carrying the server messages; nothing is retried.

    Example:
        >>> async with QuizApiClient("http://localhost:8001/graphql", token) as api:
        ...     question = await api.fetch_question("abc")
    """

    def __init__(
        self,
        url: str,
        token: str | None = None,
        http: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        """Inicializa o cliente.

        Args:
            url: Endpoint GraphQL
            token: Bearer token do usuario (opcional)
            http: Cliente httpx existente (ex.: ASGITransport em testes)
            timeout: Timeout das requisicoes quando o cliente e criado aqui
        """
        self.url = url
        self.token = token
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> QuizApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Executa uma operacao e retorna ``data``.

        Raises:
            TransportError: Falha HTTP, resposta invalida ou erros GraphQL
        """
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}

        try:
            response = await self.http.post(
                self.url, json={"query": query, "variables": variables or {}}, headers=headers
            )
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise TransportError(
                f"Invalid response ({response.status_code})",
                details={"status_code": response.status_code},
            ) from e

        if not isinstance(payload, dict):
            raise TransportError(
                f"Invalid response ({response.status_code})",
                details={"status_code": response.status_code},
            )

        errors = payload.get("errors") or []
        if errors:
            raise TransportError(errors[0].get("message", "Unknown error"), errors=errors)

        if response.status_code >= 400 or payload.get("data") is None:
            raise TransportError(
                f"Unexpected response ({response.status_code})",
                details={"status_code": response.status_code},
            )

        return payload["data"]

    # =========================================================================
    # QUESTIONS
    # =========================================================================

    async def fetch_question(self, question_id: str) -> Question | None:
        data = await self.execute(QUESTION_QUERY, {"id": question_id})
        found = data.get("question")
        return Question.model_validate(found) if found else None

    async def create_question(self, quiz_id: str, question: QuestionCreateInput) -> Question:
        data = await self.execute(
            ADD_QUESTION,
            {"quizId": quiz_id, "question": question.model_dump(mode="json", by_alias=True)},
        )
        return Question.model_validate(data["addQuestion"])

    async def update_question(self, question_id: str, data: QuestionUpdateInput) -> Question:
        result = await self.execute(
            UPDATE_QUESTION,
            {"id": question_id, "data": data.model_dump(mode="json", by_alias=True)},
        )
        return Question.model_validate(result["updateQuestion"])

    async def delete_question(self, question_id: str) -> str:
        data = await self.execute(DELETE_QUESTION, {"id": question_id})
        return data["deleteQuestion"]["id"]

    # =========================================================================
    # READS
    # =========================================================================

    async def fetch_quiz_attempt(self, attempt_id: str) -> QuizAttempt:
        data = await self.execute(QUIZ_ATTEMPT_QUERY, {"id": attempt_id})
        return QuizAttempt.model_validate(data["quizAttempt"])

    async def list_quizzes(self, course_id: str | None = None) -> list[Quiz]:
        data = await self.execute(QUIZZES_QUERY, {"courseId": course_id})
        return [Quiz.model_validate(q) for q in data["quizzes"]]

    async def course_concepts(self, course_id: str) -> list[str]:
        data = await self.execute(COURSE_CONCEPTS_QUERY, {"id": course_id})
        return list(data["courseConcepts"])
