# =============================================================================
# CONFTEST - Fixtures compartilhadas para todos os testes
# =============================================================================
# Centraliza store em memoria, dados de exemplo, identidades e tokens
# =============================================================================

import os
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio

TEST_SECRET = "test-secret"


# =============================================================================
# FIXTURES DE AMBIENTE
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Configura ambiente de testes globalmente."""
    env_vars = {
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "ERROR",  # Reduzir logs em testes
        "JWT_SECRET_KEY": TEST_SECRET,
    }
    with patch.dict(os.environ, env_vars):
        yield


@pytest.fixture
def clean_env():
    """Limpa variaveis de ambiente para testes isolados."""
    with patch.dict(os.environ, {}, clear=True):
        yield


# =============================================================================
# FIXTURES DO STORE
# =============================================================================


@pytest.fixture
def kv():
    from quiz.storage import InMemoryKV

    return InMemoryKV()


@pytest.fixture
def store(kv):
    from quiz.storage import QuizStore

    return QuizStore(kv)


@pytest.fixture
def sample_question():
    """Questao de multipla escolha valida."""
    from quiz.models import Option, Question, QuestionType

    return Question(
        id="question-1",
        quiz_id="quiz-1",
        concept="Sets",
        prompt="<p>Which set is empty?</p>",
        type=QuestionType.MULTIPLE_CHOICE,
        options=[
            Option(id="option-1", text="{}", is_correct=True),
            Option(id="option-2", text="{0}", is_correct=False),
            Option(id="option-3", text="", is_correct=False),
        ],
        correct_short_answers=[],
    )


@pytest.fixture
def sample_short_answer_question():
    from quiz.models import Question, QuestionType

    return Question(
        id="question-2",
        quiz_id="quiz-1",
        concept="Logic",
        prompt="Name the operator that negates a proposition.",
        type=QuestionType.SHORT_ANSWER,
        options=[],
        correct_short_answers=["not", "negation"],
    )


@pytest_asyncio.fixture
async def seeded_store(store, sample_question, sample_short_answer_question):
    """Store com um curso, dois quizzes, questoes, pessoas e tentativas."""
    from quiz.models import Course, Instructor, Question, QuestionAttempt, Quiz, Student
    from quiz.models.schemas import QuizAttempt

    await store.save_course(Course(id="course-1", title="Discrete Math"))
    await store.save_course(Course(id="course-2", title="Biology"))
    await store.save_quiz(Quiz(id="quiz-1", title="Sets and Logic", course_id="course-1"))
    await store.save_quiz(Quiz(id="quiz-2", title="Proofs", course_id="course-1"))
    await store.save_quiz(Quiz(id="quiz-3", title="Cells", course_id="course-2"))

    for question in (sample_question, sample_short_answer_question):
        await store.save_question(question)
    await store.save_question(
        Question(id="question-3", quiz_id="quiz-2", concept=" Sets ", prompt="Induction?")
    )
    await store.save_question(
        Question(id="question-4", quiz_id="quiz-2", concept="", prompt="Blank concept")
    )
    await store.save_question(
        Question(id="question-5", quiz_id="quiz-3", concept="Mitosis", prompt="Phases?")
    )

    quiz_1 = await store.get_quiz("quiz-1")
    quiz_1.question_ids = ["question-1", "question-2"]
    await store.save_quiz(quiz_1)
    quiz_2 = await store.get_quiz("quiz-2")
    quiz_2.question_ids = ["question-3", "question-4"]
    await store.save_quiz(quiz_2)
    quiz_3 = await store.get_quiz("quiz-3")
    quiz_3.question_ids = ["question-5"]
    await store.save_quiz(quiz_3)

    await store.save_student(Student(id="student-1", name="Ada", email="ada@example.com"))
    await store.save_student(Student(id="student-2", name="Alan", email="alan@example.com"))
    await store.save_instructor(
        Instructor(id="instructor-1", name="Grace", email="grace@example.com", course_ids=["course-1"])
    )

    base = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
    await store.save_quiz_attempt(
        QuizAttempt(
            id="attempt-1",
            quiz_id="quiz-1",
            student_id="student-1",
            created_at=base,
            completed=True,
            question_attempts=[
                QuestionAttempt(
                    id="qa-1", question_id="question-1", option_id="option-1", is_correct=True
                ),
                QuestionAttempt(
                    id="qa-2", question_id="question-2", short_answer="not", is_correct=True
                ),
            ],
        )
    )
    await store.save_quiz_attempt(
        QuizAttempt(
            id="attempt-2",
            quiz_id="quiz-3",
            student_id="student-1",
            created_at=base + timedelta(days=1),
        )
    )
    await store.save_quiz_attempt(
        QuizAttempt(
            id="attempt-3",
            quiz_id="quiz-2",
            student_id="student-1",
            created_at=base - timedelta(days=1),
        )
    )
    await store.save_quiz_attempt(
        QuizAttempt(id="attempt-4", quiz_id="quiz-1", student_id="student-2", created_at=base)
    )
    return store


# =============================================================================
# FIXTURES DE IDENTIDADE
# =============================================================================


@pytest.fixture
def student_auth():
    from quiz.auth import AuthContext, CallerIdentity

    return AuthContext(CallerIdentity("student-1"))


@pytest.fixture
def other_student_auth():
    from quiz.auth import AuthContext, CallerIdentity

    return AuthContext(CallerIdentity("student-2"))


@pytest.fixture
def instructor_auth():
    from quiz.auth import AuthContext, CallerIdentity

    return AuthContext(CallerIdentity("instructor-1", is_instructor=True))


@pytest.fixture
def anonymous_auth():
    from quiz.auth import AuthContext

    return AuthContext.anonymous()


@pytest.fixture
def jwt_secret():
    return TEST_SECRET


@pytest.fixture
def make_token():
    """Factory de tokens assinados com o segredo de teste."""

    def _make_token(user_id: str, is_instructor: bool = False, **kwargs) -> str:
        from quiz.auth import CallerIdentity, create_access_token

        return create_access_token(
            CallerIdentity(user_id, is_instructor=is_instructor), TEST_SECRET, **kwargs
        )

    return _make_token


# =============================================================================
# FIXTURES DO EDITOR
# =============================================================================


@pytest.fixture
def mock_gateway(sample_question):
    """Gateway GraphQL mockado para o editor."""
    gateway = AsyncMock()
    gateway.fetch_question = AsyncMock(return_value=sample_question)
    gateway.create_question = AsyncMock()
    gateway.update_question = AsyncMock()
    gateway.delete_question = AsyncMock(return_value=sample_question.id)
    return gateway


# =============================================================================
# FIXTURES DO FASTAPI
# =============================================================================


@pytest.fixture
def client():
    """Cliente de teste FastAPI (store vazio)."""
    from fastapi.testclient import TestClient

    import app_state
    from server import app

    app_state.reset()
    yield TestClient(app)
    app_state.reset()


@pytest.fixture
def app_with_store(seeded_store):
    """App FastAPI usando o store semeado."""
    import app_state
    from server import app

    app_state.set_store(seeded_store)
    yield app
    app_state.reset()


@pytest.fixture
def async_client(app_with_store):
    """Cliente assincrono para testes async."""
    from httpx import ASGITransport, AsyncClient

    return AsyncClient(transport=ASGITransport(app=app_with_store), base_url="http://test")


# =============================================================================
# FIXTURES DE LOGGING
# =============================================================================


@pytest.fixture
def capture_logs(caplog):
    """Captura logs para verificacao em testes."""
    import logging

    caplog.set_level(logging.DEBUG)
    return caplog
