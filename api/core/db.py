"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. The app builds one on startup, keeps it
on `app.state.db` and closes it on shutdown (see `api/main.py`); handlers get
it through `core.dependencies.get_db`.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager, contextmanager
from typing import Any, AsyncIterator, Iterator

import asyncpg

from .config import Settings
from .errors import ConflictError, InternalError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(subject: str) -> Iterator[None]:
    """
    Translate driver/IO failures into API errors.

    A unique violation becomes `ConflictError("duplicated: <subject>")`,
    anything else the store or filesystem raises becomes `InternalError`.
    """
    try:
        yield
    except asyncpg.UniqueViolationError as exc:
        raise ConflictError(f"duplicated: {subject}") from exc
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as exc:
        logger.error("store_error subject=%s error=%s", subject, exc)
        raise InternalError(f"store error: {subject}") from exc


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @classmethod
    async def connect(cls, settings: Settings) -> "Database":
        pool = await asyncpg.create_pool(
            dsn=settings.database_url,
            min_size=1,
            max_size=settings.db_max_connections,
            command_timeout=settings.db_command_timeout,
        )
        logger.info(
            "db_pool_ready host=%s port=%s db=%s max_size=%s",
            settings.db_host,
            settings.db_port,
            settings.db_name,
            settings.db_max_connections,
        )
        return cls(pool)

    async def close(self) -> None:
        await self._pool.close()

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self._pool.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self._pool.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> None:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
        """
        await self._pool.execute(sql, *args)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[asyncpg.Connection]:
        """
        Hold one pooled connection inside a transaction.

        Commits when the block exits normally, rolls back on any exception.
        """
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                yield conn
