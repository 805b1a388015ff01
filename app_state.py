"""Core module - shared state and helper functions."""

from __future__ import annotations

from typing import Optional

from config import QuizConfig
from quiz.storage import InMemoryKV, QuizStore

# =============================================================================
# SHARED STATE
# =============================================================================

config: Optional[QuizConfig] = None
store: Optional[QuizStore] = None


def get_config() -> QuizConfig:
    """Get QuizConfig instance (read from the environment once)."""
    global config
    if config is None:
        config = QuizConfig.from_env()
    return config


def get_store() -> QuizStore:
    """Get QuizStore instance (in-memory KV unless one was installed)."""
    global store
    if store is None:
        store = QuizStore(InMemoryKV())
    return store


def set_store(new_store: QuizStore) -> None:
    """Install a store (tests, seeded deployments)."""
    global store
    store = new_store


def reset() -> None:
    """Drop cached config and store."""
    global config, store
    config = None
    store = None
