"""Database Session Manager — async connection pool with rollback, health checks and store-error translation.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - One manager per app instance, passed into create_app() and kept on app.state
    - Driver errors recognised by the code table become StoreConstraintError;
      anything unrecognised propagates unchanged
    - SQLite connections run with PRAGMA foreign_keys=ON so FK violations
      surface the same way they do on PostgreSQL

Design Decisions:
    - expire_on_commit=False: ORM rows returned by repositories stay readable
      after commit in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from newsdesk.core.errors import (
    ErrorKind,
    SQLITE_ERROR_MESSAGES,
    SQLITE_ERROR_NAMES,
    STORE_ERROR_CODES,
    StoreConstraintError,
)

logger = logging.getLogger(__name__)


def _is_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def _is_memory_sqlite(database_url: str) -> bool:
    return _is_sqlite(database_url) and (
        ":memory:" in database_url or database_url.rstrip("/").endswith(":")
    )


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseSessionManager:
    """Owns one engine and hands out request-scoped AsyncSessions."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        self.database_url = database_url
        if _is_memory_sqlite(database_url):
            # one shared connection, otherwise every session sees an empty DB
            engine_options = {"poolclass": StaticPool}
        elif _is_sqlite(database_url):
            engine_options = {}
        else:
            engine_options = {
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_pre_ping": True,
                "pool_recycle": 3600,
            }
        self.engine = create_async_engine(
            database_url, echo=echo, **engine_options,
        )
        if _is_sqlite(database_url):
            event.listen(
                self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """SELECT 1 through a fresh session; False instead of raising."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Store health check failed: {e}", extra={"operation": "health_check"})
            return False

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")


# ─── Store error translation ────────────────────────────────────

def classify_store_error(exc: DBAPIError) -> tuple[ErrorKind | None, str | None]:
    """Map a driver error to an ErrorKind using the fixed code table.

    Returns (kind, store_code); kind is None when the error is not one the
    API knows how to render.
    """
    orig = getattr(exc, "orig", None)

    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code in STORE_ERROR_CODES:
        return STORE_ERROR_CODES[code], code

    name = getattr(orig, "sqlite_errorname", None)
    if name in SQLITE_ERROR_NAMES:
        return SQLITE_ERROR_NAMES[name], name

    message = str(orig) if orig is not None else str(exc)
    for fragment, kind in SQLITE_ERROR_MESSAGES:
        if fragment in message:
            return kind, name
    return None, code or name


@asynccontextmanager
async def translate_store_errors(
    session: AsyncSession, operation: str,
) -> AsyncGenerator[None, None]:
    """Wrap one repository statement; known constraint failures become StoreConstraintError."""
    try:
        yield
    except DBAPIError as e:
        await session.rollback()
        kind, store_code = classify_store_error(e)
        if kind is None:
            logger.error(
                f"Unclassified store error during {operation}: {e.orig!r}",
                extra={"operation": operation},
            )
            raise
        logger.warning(
            f"Store rejected {operation}: {kind.value}",
            extra={"operation": operation, "error_code": kind.value},
        )
        raise StoreConstraintError(kind, operation, store_code) from e


# ─── FastAPI dependency ─────────────────────────────────────────

async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions from the app's own manager."""
    db_manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
