"""Key-value port used for per-user client-side caches."""

from typing import Protocol

import structlog
from config.settings import settings

log = structlog.get_logger(__name__)


class KeyValueStore(Protocol):
    async def read(self, key: str) -> str | None: ...

    async def write(self, key: str, text: str) -> None: ...


class MemoryKeyValueStore:
    """In-process store. No eviction, no cross-process visibility."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})

    async def read(self, key: str) -> str | None:
        return self._store.get(key)

    async def write(self, key: str, text: str) -> None:
        self._store[key] = text


def _backend() -> str:
    return settings.kv_backend.lower()


async def get_kv_store() -> KeyValueStore:
    """Build the backend selected by ``settings.kv_backend``."""
    backend = _backend()
    if backend == "memory":
        return MemoryKeyValueStore()
    if backend == "postgres":
        from storage.database import ensure_schema, get_pool
        from storage.repositories.kv_repo import PostgresKeyValueStore

        pool = await get_pool()
        await ensure_schema(pool)
        return PostgresKeyValueStore(pool)
    raise ValueError(f"Unknown kv_backend: {settings.kv_backend}")


async def close_kv_store() -> None:
    """Release backend resources on shutdown."""
    if _backend() == "postgres":
        from storage.database import close_pool

        await close_pool()
