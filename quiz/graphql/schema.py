"""GraphQL Schema - Query e Mutation sobre os resolvers do quiz."""

from typing import Optional

import strawberry
from strawberry.types import Info

from .. import resolvers
from . import types as gql


@strawberry.type
class Query:
    @strawberry.field
    async def course(self, info: Info, id: strawberry.ID) -> Optional[gql.Course]:
        found = await resolvers.course(info.context.store, id)
        return gql.Course.from_model(found) if found else None

    @strawberry.field(description="Distinct non-blank concepts used across a course")
    async def course_concepts(self, info: Info, id: strawberry.ID) -> list[str]:
        return await resolvers.course_concepts(info.context.store, id)

    @strawberry.field
    async def current_instructor(self, info: Info) -> Optional[gql.Instructor]:
        found = await resolvers.current_instructor(info.context.store, info.context.auth)
        return gql.Instructor.from_model(found) if found else None

    @strawberry.field
    async def current_student(self, info: Info) -> Optional[gql.Student]:
        found = await resolvers.current_student(info.context.store, info.context.auth)
        return gql.Student.from_model(found) if found else None

    @strawberry.field
    async def current_student_quiz_attempts(
        self,
        info: Info,
        course_id: Optional[strawberry.ID] = None,
        order_by: Optional[gql.AttemptOrder] = None,
    ) -> list[gql.QuizAttempt]:
        attempts = await resolvers.current_student_quiz_attempts(
            info.context.store, info.context.auth, course_id=course_id, order_by=order_by
        )
        return [gql.QuizAttempt.from_model(a) for a in attempts]

    @strawberry.field
    async def quiz(self, info: Info, id: strawberry.ID) -> Optional[gql.Quiz]:
        found = await resolvers.quiz(info.context.store, id)
        return gql.Quiz.from_model(found) if found else None

    @strawberry.field
    async def quizzes(
        self, info: Info, course_id: Optional[strawberry.ID] = None
    ) -> list[gql.Quiz]:
        return [
            gql.Quiz.from_model(q)
            for q in await resolvers.quizzes(info.context.store, course_id)
        ]

    @strawberry.field
    async def question(self, info: Info, id: strawberry.ID) -> Optional[gql.Question]:
        found = await resolvers.question(info.context.store, id)
        return gql.Question.from_model(found) if found else None

    @strawberry.field
    async def option(self, info: Info, id: strawberry.ID) -> Optional[gql.Option]:
        found = await resolvers.option(info.context.store, id)
        return gql.Option.from_model(found) if found else None

    @strawberry.field
    async def quiz_attempt(self, info: Info, id: strawberry.ID) -> gql.QuizAttempt:
        attempt = await resolvers.quiz_attempt(info.context.store, info.context.auth, id)
        return gql.QuizAttempt.from_model(attempt)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def add_question(
        self, info: Info, quiz_id: strawberry.ID, question: gql.QuestionCreateInput
    ) -> gql.Question:
        created = await resolvers.add_question(
            info.context.store, info.context.auth, quiz_id, question.to_model()
        )
        return gql.Question.from_model(created)

    @strawberry.mutation
    async def update_question(
        self, info: Info, id: strawberry.ID, data: gql.QuestionUpdateInput
    ) -> gql.Question:
        updated = await resolvers.update_question(
            info.context.store, info.context.auth, id, data.to_model()
        )
        return gql.Question.from_model(updated)

    @strawberry.mutation
    async def delete_question(self, info: Info, id: strawberry.ID) -> gql.DeletedQuestion:
        deleted_id = await resolvers.delete_question(info.context.store, info.context.auth, id)
        return gql.DeletedQuestion(id=strawberry.ID(deleted_id))


schema = strawberry.Schema(query=Query, mutation=Mutation)
