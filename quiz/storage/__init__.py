"""Quiz Storage - Persistencia sobre KV assincrono."""

from .memory_kv import InMemoryKV
from .quiz_store import KeyValueBackend, QuizStore

__all__ = ["InMemoryKV", "KeyValueBackend", "QuizStore"]
