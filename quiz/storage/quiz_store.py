"""Quiz Store - Abstracao sobre um KV assincrono para registros do quiz."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel

from ..exceptions import NotFoundError
from ..models.enums import AttemptOrder
from ..models.schemas import (
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

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class KeyValueBackend(Protocol):
    async def get(self, key: str) -> Any: ...

    async def set(self, key: str, value: Any) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def list(self, prefix: str = "") -> list[Any]: ...


def _new_id() -> str:
    return uuid.uuid4().hex


class QuizStore:
    """Persistencia de cursos, quizzes, questoes e tentativas.

    Records are stored as JSON-compatible dicts, one key per record. Updates
    are full-field overwrites keyed by id (last write wins).

    Estrutura de chaves:
        - course:{id}     -> Course
        - quiz:{id}       -> Quiz
        - question:{id}   -> Question (options embedded)
        - option:{id}     -> {"question_id": ...} (reverse index)
        - student:{id}    -> Student
        - instructor:{id} -> Instructor
        - attempt:{id}    -> QuizAttempt

    Example:
        >>> store = QuizStore(InMemoryKV())
        >>> await store.save_quiz(Quiz(id="q1", title="Sets"))
        >>> question = await store.create_question("q1", QuestionCreateInput(prompt="?"))
    """

    COURSE = "course"
    QUIZ = "quiz"
    QUESTION = "question"
    OPTION = "option"
    STUDENT = "student"
    INSTRUCTOR = "instructor"
    ATTEMPT = "attempt"

    def __init__(self, kv: KeyValueBackend):
        """Inicializa store com um backend KV.

        Args:
            kv: Backend com get/set/delete/list assincronos
        """
        self.kv = kv

    def _key(self, kind: str, record_id: str) -> str:
        return f"{kind}:{record_id}"

    async def _load(self, kind: str, record_id: str, model: type[ModelT]) -> ModelT | None:
        data = await self.kv.get(self._key(kind, record_id))
        if not data:
            logger.debug(f"{kind} nao encontrado: {record_id}")
            return None
        return model.model_validate(data)

    async def _save(self, kind: str, record: BaseModel) -> None:
        await self.kv.set(self._key(kind, record.id), record.model_dump(mode="json"))

    async def _ids(self, kind: str) -> list[str]:
        prefix = f"{kind}:"
        entries = await self.kv.list(prefix=prefix)
        ids = []
        for entry in entries:
            key = entry.get("key", "") if isinstance(entry, dict) else str(entry)
            if key.startswith(prefix):
                ids.append(key[len(prefix):])
        return ids

    # =========================================================================
    # COURSES & QUIZZES
    # =========================================================================

    async def get_course(self, course_id: str) -> Course | None:
        return await self._load(self.COURSE, course_id, Course)

    async def save_course(self, course: Course) -> None:
        await self._save(self.COURSE, course)

    async def get_quiz(self, quiz_id: str) -> Quiz | None:
        return await self._load(self.QUIZ, quiz_id, Quiz)

    async def save_quiz(self, quiz: Quiz) -> None:
        """Salva o quiz e o registra no curso dono, se houver."""
        await self._save(self.QUIZ, quiz)
        if quiz.course_id:
            course = await self.get_course(quiz.course_id)
            if course is not None and quiz.id not in course.quiz_ids:
                course.quiz_ids.append(quiz.id)
                await self.save_course(course)

    async def list_quizzes(self, course_id: str | None = None) -> list[Quiz]:
        """Lista quizzes, opcionalmente de um curso.

        Args:
            course_id: Filtra pelo curso (na ordem do curso) se fornecido

        Returns:
            Lista de quizzes
        """
        if course_id is not None:
            course = await self.get_course(course_id)
            quiz_ids = course.quiz_ids if course else []
        else:
            quiz_ids = await self._ids(self.QUIZ)

        quizzes = []
        for quiz_id in quiz_ids:
            quiz = await self.get_quiz(quiz_id)
            if quiz is not None:
                quizzes.append(quiz)
        return quizzes

    # =========================================================================
    # QUESTIONS & OPTIONS
    # =========================================================================

    async def get_question(self, question_id: str) -> Question | None:
        return await self._load(self.QUESTION, question_id, Question)

    async def save_question(self, question: Question) -> None:
        """Persiste a questao e o indice reverso das alternativas."""
        await self._save(self.QUESTION, question)
        for option in question.options:
            await self.kv.set(self._key(self.OPTION, option.id), {"question_id": question.id})

    async def get_option(self, option_id: str) -> Option | None:
        index = await self.kv.get(self._key(self.OPTION, option_id))
        if not index:
            return None
        question = await self.get_question(index["question_id"])
        if question is None:
            return None
        return next((o for o in question.options if o.id == option_id), None)

    async def create_question(self, quiz_id: str, data: QuestionCreateInput) -> Question:
        """Cria uma questao no quiz, atribuindo IDs a questao e alternativas.

        Args:
            quiz_id: Quiz que recebe a questao
            data: Payload de criacao

        Returns:
            Questao persistida com IDs do servidor

        Raises:
            NotFoundError: Quiz inexistente
        """
        quiz = await self.get_quiz(quiz_id)
        if quiz is None:
            raise NotFoundError(f"Quiz {quiz_id} not found", {"quiz_id": quiz_id})

        question = Question(
            id=_new_id(),
            quiz_id=quiz_id,
            type=data.type,
            prompt=data.prompt,
            concept=data.concept,
            options=[
                Option(id=_new_id(), text=o.text, is_correct=o.is_correct) for o in data.options
            ],
            correct_short_answers=list(data.correct_short_answers),
        )
        await self.save_question(question)

        quiz.question_ids.append(question.id)
        await self.save_quiz(quiz)

        logger.info(f"Questao criada: {question.id} (quiz {quiz_id})")
        return question

    async def update_question(self, question_id: str, data: QuestionUpdateInput) -> Question:
        """Sobrescreve os campos da questao e das alternativas informadas.

        Raises:
            NotFoundError: Questao inexistente ou alternativa de outra questao
        """
        question = await self.get_question(question_id)
        if question is None:
            raise NotFoundError(f"Question {question_id} not found", {"question_id": question_id})

        options = {option.id: option for option in question.options}
        for update in data.options:
            option = options.get(update.where.id)
            if option is None:
                raise NotFoundError(
                    f"Option {update.where.id} not found",
                    {"question_id": question_id, "option_id": update.where.id},
                )
            options[option.id] = option.model_copy(
                update={"text": update.data.text, "is_correct": update.data.is_correct}
            )

        updated = question.model_copy(
            update={
                "type": data.type,
                "prompt": data.prompt,
                "concept": data.concept,
                "options": [options[o.id] for o in question.options],
                "correct_short_answers": list(data.correct_short_answers.values),
            }
        )
        await self.save_question(updated)
        logger.info(f"Questao atualizada: {question_id}")
        return updated

    async def delete_question(self, question_id: str) -> str:
        """Remove a questao, suas alternativas e as respostas dos alunos a ela.

        Returns:
            ID da questao removida

        Raises:
            NotFoundError: Questao inexistente
        """
        question = await self.get_question(question_id)
        if question is None:
            raise NotFoundError(f"Question {question_id} not found", {"question_id": question_id})

        if question.quiz_id:
            quiz = await self.get_quiz(question.quiz_id)
            if quiz is not None and question_id in quiz.question_ids:
                quiz.question_ids.remove(question_id)
                await self._save(self.QUIZ, quiz)

        for option in question.options:
            await self.kv.delete(self._key(self.OPTION, option.id))

        removed = 0
        for attempt in await self.list_quiz_attempts():
            kept = [qa for qa in attempt.question_attempts if qa.question_id != question_id]
            if len(kept) != len(attempt.question_attempts):
                removed += len(attempt.question_attempts) - len(kept)
                attempt.question_attempts = kept
                await self.save_quiz_attempt(attempt)

        await self.kv.delete(self._key(self.QUESTION, question_id))
        logger.info(f"Questao removida: {question_id} ({removed} respostas de alunos removidas)")
        return question_id

    # =========================================================================
    # PEOPLE
    # =========================================================================

    async def get_student(self, student_id: str) -> Student | None:
        return await self._load(self.STUDENT, student_id, Student)

    async def save_student(self, student: Student) -> None:
        await self._save(self.STUDENT, student)

    async def get_instructor(self, instructor_id: str) -> Instructor | None:
        return await self._load(self.INSTRUCTOR, instructor_id, Instructor)

    async def save_instructor(self, instructor: Instructor) -> None:
        await self._save(self.INSTRUCTOR, instructor)

    # =========================================================================
    # QUIZ ATTEMPTS
    # =========================================================================

    async def get_quiz_attempt(self, attempt_id: str) -> QuizAttempt | None:
        return await self._load(self.ATTEMPT, attempt_id, QuizAttempt)

    async def save_quiz_attempt(self, attempt: QuizAttempt) -> None:
        await self._save(self.ATTEMPT, attempt)

    async def get_attempt_owner(self, attempt_id: str) -> str | None:
        """Minimal read: only the owning student's id, or None."""
        data = await self.kv.get(self._key(self.ATTEMPT, attempt_id))
        if not data:
            return None
        return data.get("student_id")

    async def list_quiz_attempts(
        self,
        student_id: str | None = None,
        course_id: str | None = None,
        order: AttemptOrder | None = None,
    ) -> list[QuizAttempt]:
        """Lista tentativas com filtros opcionais.

        Args:
            student_id: Apenas tentativas deste aluno
            course_id: Apenas tentativas de quizzes deste curso
            order: Ordenacao por data de criacao

        Returns:
            Lista de tentativas
        """
        course_quiz_ids: set[str] | None = None
        if course_id is not None:
            course = await self.get_course(course_id)
            course_quiz_ids = set(course.quiz_ids) if course else set()

        attempts = []
        for attempt_id in await self._ids(self.ATTEMPT):
            attempt = await self.get_quiz_attempt(attempt_id)
            if attempt is None:
                continue
            if student_id is not None and attempt.student_id != student_id:
                continue
            if course_quiz_ids is not None and attempt.quiz_id not in course_quiz_ids:
                continue
            attempts.append(attempt)

        if order is not None:
            attempts.sort(
                key=lambda a: a.created_at,
                reverse=AttemptOrder(order) == AttemptOrder.CREATED_AT_DESC,
            )
        return attempts
