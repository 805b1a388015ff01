"""GraphQL Context - Store e identidade do chamador por request."""

from strawberry.fastapi import BaseContext

from ..auth import AuthContext
from ..storage.quiz_store import QuizStore


class QuizContext(BaseContext):
    def __init__(self, store: QuizStore, auth: AuthContext):
        super().__init__()
        self.store = store
        self.auth = auth
