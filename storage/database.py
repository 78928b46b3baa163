"""Postgres pool and schema for the ``kv_store`` backend."""

import asyncpg
import structlog
from pathlib import Path
from config.settings import settings

log = structlog.get_logger(__name__)

SCHEMA_DIR = Path(__file__).parent / "migrations"

_pool: asyncpg.Pool | None = None


async def get_pool() -> asyncpg.Pool:
    """Get or create the connection pool."""
    global _pool
    if _pool is None:
        _pool = await asyncpg.create_pool(settings.database_url, min_size=1, max_size=5)
        log.info("database_pool_created")
    return _pool


async def close_pool() -> None:
    """Close the connection pool if one was opened."""
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None
        log.info("database_pool_closed")


async def ensure_schema(pool: asyncpg.Pool) -> list[str]:
    """Apply the schema files in filename order. Each file is idempotent."""
    applied: list[str] = []
    async with pool.acquire() as conn:
        for schema_file in sorted(SCHEMA_DIR.glob("*.sql")):
            async with conn.transaction():
                await conn.execute(schema_file.read_text())
            applied.append(schema_file.name)
    log.info("kv_schema_ready", files=applied)
    return applied
