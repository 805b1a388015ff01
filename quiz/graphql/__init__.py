"""Quiz GraphQL - Schema strawberry da camada de acesso."""

from .context import QuizContext
from .schema import Mutation, Query, schema

__all__ = ["QuizContext", "Query", "Mutation", "schema"]
