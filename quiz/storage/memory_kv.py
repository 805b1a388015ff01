"""In-memory KV - Backend assincrono de chave/valor para o QuizStore."""

import copy
from typing import Any


class InMemoryKV:
    """Async key-value store kept in a process-local dict.

    Values are deep-copied on the way in and out, so callers never share
    mutable state with the store (same semantics as a serializing backend).

    Example:
        >>> kv = InMemoryKV()
        >>> await kv.set("quiz:abc", {"id": "abc"})
        >>> await kv.list(prefix="quiz:")
        [{'key': 'quiz:abc'}]
    """

    def __init__(self, initial: dict[str, Any] | None = None):
        self._storage: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    async def get(self, key: str) -> Any:
        value = self._storage.get(key)
        return copy.deepcopy(value)

    async def set(self, key: str, value: Any) -> None:
        self._storage[key] = copy.deepcopy(value)

    async def delete(self, key: str) -> None:
        self._storage.pop(key, None)

    async def list(self, prefix: str = "") -> list[dict[str, str]]:
        return [{"key": key} for key in sorted(self._storage) if key.startswith(prefix)]

    def __len__(self) -> int:
        return len(self._storage)
