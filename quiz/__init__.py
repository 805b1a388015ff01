"""Quiz Module - Autoria de questoes e camada de acesso GraphQL.

Arquitetura:
- models/: Enums, Schemas Pydantic, estado e eventos do editor
- engine/: reducer do rascunho, validacao, agregacao de conceitos
- storage/: QuizStore sobre KV assincrono
- auth.py: identidade do chamador (JWT)
- resolvers.py: camada de acesso
- graphql/: schema strawberry
- client.py: transporte GraphQL (httpx)
- editor/: view-models do editor de questoes
"""

from .auth import AuthContext, CallerIdentity
from .client import QuizApiClient
from .editor import QuestionEditor, QuestionList
from .engine import CourseConceptEngine, QuestionValidationEngine
from .exceptions import AuthorizationError, NotFoundError, QuizError, TransportError
from .models import Option, Question, QuestionType
from .storage import InMemoryKV, QuizStore

__all__ = [
    # Models
    "Question",
    "Option",
    "QuestionType",
    # Engines
    "QuestionValidationEngine",
    "CourseConceptEngine",
    # Storage
    "QuizStore",
    "InMemoryKV",
    # Auth
    "AuthContext",
    "CallerIdentity",
    # Client / editor
    "QuizApiClient",
    "QuestionEditor",
    "QuestionList",
    # Errors
    "QuizError",
    "AuthorizationError",
    "NotFoundError",
    "TransportError",
]
