"""
Quiz Authoring Server

FastAPI server exposing the question access layer:
- GraphQL endpoint (strawberry) at /graphql
- Bearer JWT identity per request
- CORS from configuration
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

import app_state
from quiz.auth import auth_context_from_header
from quiz.graphql import QuizContext, schema

# =============================================================================
# CONFIGURATION
# =============================================================================

config = app_state.get_config()

logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# FASTAPI APP
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage app lifecycle."""
    logger.info(f"Starting Quiz Authoring ({config.environment})...")
    app_state.get_store()
    yield
    logger.info("Quiz Authoring stopped")


app = FastAPI(
    title="Quiz Authoring",
    description="Question editor backend with a GraphQL access layer",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# GRAPHQL
# =============================================================================


async def get_context(request: Request) -> QuizContext:
    """Monta o contexto GraphQL: store compartilhado + identidade do header."""
    settings = app_state.get_config()
    auth = auth_context_from_header(
        request.headers.get("authorization"),
        settings.jwt_secret,
        settings.jwt_algorithm,
    )
    return QuizContext(store=app_state.get_store(), auth=auth)


graphql_app = GraphQLRouter(schema, context_getter=get_context)
app.include_router(graphql_app, prefix="/graphql")


# =============================================================================
# HEALTH ENDPOINTS
# =============================================================================


@app.get("/")
async def root():
    """Health check."""
    return {
        "status": "ok",
        "message": "Quiz Authoring - GraphQL at /graphql",
    }


@app.get("/health")
async def health_check():
    """Detailed health check."""
    store = app_state.get_store()
    return {
        "status": "healthy",
        "environment": config.environment,
        "quizzes": len(await store.list_quizzes()),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.host, port=config.port)
