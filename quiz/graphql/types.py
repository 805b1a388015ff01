"""GraphQL Types - Tipos e inputs strawberry espelhando os registros do quiz."""

import dataclasses
from datetime import datetime
from typing import Optional

import strawberry
from strawberry.types import Info

from ..models import enums, schemas

QuestionType = strawberry.enum(enums.QuestionType, name="QuestionType")
AttemptOrder = strawberry.enum(enums.AttemptOrder, name="QuizAttemptOrderByInput")


# =============================================================================
# OUTPUT TYPES
# =============================================================================


@strawberry.type
class Option:
    id: strawberry.ID
    text: str
    is_correct: bool

    @classmethod
    def from_model(cls, option: schemas.Option) -> "Option":
        return cls(id=strawberry.ID(option.id), text=option.text, is_correct=option.is_correct)


@strawberry.type
class Question:
    id: strawberry.ID
    concept: str
    prompt: str
    type: QuestionType
    options: list[Option]
    correct_short_answers: list[str]
    quiz_id: Optional[strawberry.ID]

    @classmethod
    def from_model(cls, question: schemas.Question) -> "Question":
        return cls(
            id=strawberry.ID(question.id),
            concept=question.concept,
            prompt=question.prompt,
            type=question.type,
            options=[Option.from_model(o) for o in question.options],
            correct_short_answers=list(question.correct_short_answers),
            quiz_id=strawberry.ID(question.quiz_id) if question.quiz_id else None,
        )


@strawberry.type
class Quiz:
    id: strawberry.ID
    title: str
    course_id: Optional[strawberry.ID]
    question_ids: list[strawberry.ID]

    @strawberry.field
    async def questions(self, info: Info) -> list[Question]:
        store = info.context.store
        found = []
        for question_id in self.question_ids:
            question = await store.get_question(question_id)
            if question is not None:
                found.append(Question.from_model(question))
        return found

    @classmethod
    def from_model(cls, quiz: schemas.Quiz) -> "Quiz":
        return cls(
            id=strawberry.ID(quiz.id),
            title=quiz.title,
            course_id=strawberry.ID(quiz.course_id) if quiz.course_id else None,
            question_ids=[strawberry.ID(q) for q in quiz.question_ids],
        )


@strawberry.type
class Course:
    id: strawberry.ID
    title: str
    quiz_ids: list[strawberry.ID]

    @strawberry.field
    async def quizzes(self, info: Info) -> list[Quiz]:
        return [Quiz.from_model(q) for q in await info.context.store.list_quizzes(self.id)]

    @classmethod
    def from_model(cls, course: schemas.Course) -> "Course":
        return cls(
            id=strawberry.ID(course.id),
            title=course.title,
            quiz_ids=[strawberry.ID(q) for q in course.quiz_ids],
        )


@strawberry.type
class Student:
    id: strawberry.ID
    name: str
    email: str

    @classmethod
    def from_model(cls, student: schemas.Student) -> "Student":
        return cls(id=strawberry.ID(student.id), name=student.name, email=student.email)


@strawberry.type
class Instructor:
    id: strawberry.ID
    name: str
    email: str
    course_ids: list[strawberry.ID]

    @classmethod
    def from_model(cls, instructor: schemas.Instructor) -> "Instructor":
        return cls(
            id=strawberry.ID(instructor.id),
            name=instructor.name,
            email=instructor.email,
            course_ids=[strawberry.ID(c) for c in instructor.course_ids],
        )


@strawberry.type
class QuestionAttempt:
    id: strawberry.ID
    question_id: strawberry.ID
    option_id: Optional[strawberry.ID]
    short_answer: Optional[str]
    is_correct: bool

    @classmethod
    def from_model(cls, attempt: schemas.QuestionAttempt) -> "QuestionAttempt":
        return cls(
            id=strawberry.ID(attempt.id),
            question_id=strawberry.ID(attempt.question_id),
            option_id=strawberry.ID(attempt.option_id) if attempt.option_id else None,
            short_answer=attempt.short_answer,
            is_correct=attempt.is_correct,
        )


@strawberry.type
class QuizAttempt:
    id: strawberry.ID
    quiz_id: strawberry.ID
    student_id: strawberry.ID
    created_at: datetime
    completed: bool
    question_attempts: list[QuestionAttempt]

    @classmethod
    def from_model(cls, attempt: schemas.QuizAttempt) -> "QuizAttempt":
        return cls(
            id=strawberry.ID(attempt.id),
            quiz_id=strawberry.ID(attempt.quiz_id),
            student_id=strawberry.ID(attempt.student_id),
            created_at=attempt.created_at,
            completed=attempt.completed,
            question_attempts=[QuestionAttempt.from_model(qa) for qa in attempt.question_attempts],
        )


@strawberry.type
class DeletedQuestion:
    id: strawberry.ID


# =============================================================================
# INPUTS
# =============================================================================


@strawberry.input
class OptionCreateInput:
    text: str = ""
    is_correct: bool = False


@strawberry.input
class QuestionCreateInput:
    type: QuestionType = enums.DEFAULT_QUESTION_TYPE
    prompt: str = ""
    concept: str = ""
    options: list[OptionCreateInput] = strawberry.field(default_factory=list)
    correct_short_answers: list[str] = strawberry.field(default_factory=list)

    def to_model(self) -> schemas.QuestionCreateInput:
        return schemas.QuestionCreateInput.model_validate(dataclasses.asdict(self))


@strawberry.input
class OptionWhereUniqueInput:
    id: strawberry.ID


@strawberry.input
class OptionUpdateDataInput:
    text: str = ""
    is_correct: bool = False


@strawberry.input
class OptionUpdateInput:
    where: OptionWhereUniqueInput
    data: OptionUpdateDataInput


@strawberry.input
class ShortAnswerSetInput:
    set: list[str] = strawberry.field(default_factory=list)


@strawberry.input
class QuestionUpdateInput:
    type: QuestionType = enums.DEFAULT_QUESTION_TYPE
    prompt: str = ""
    concept: str = ""
    options: list[OptionUpdateInput] = strawberry.field(default_factory=list)
    correct_short_answers: ShortAnswerSetInput = strawberry.field(
        default_factory=ShortAnswerSetInput
    )

    def to_model(self) -> schemas.QuestionUpdateInput:
        return schemas.QuestionUpdateInput.model_validate(dataclasses.asdict(self))
