"""Database store handle

Owns the async engine and session factory. One instance is created at
application startup and passed to whoever needs a session; there is no
module-level engine.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# Registers the invoice tables on SQLModel.metadata
import src.domain  # noqa: F401

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Async database handle

    Usage:
        database = Database(ApplicationConfig.DB_URI)
        await database.ensure_schema()
        async with database.session() as session:
            ...
        await database.dispose()
    """

    def __init__(self, db_uri: str, echo: bool = False):
        self.db_uri = db_uri
        self.engine = create_async_engine(db_uri, echo=echo, future=True)

        # SQLite ignores ON DELETE CASCADE unless asked per connection
        if make_url(db_uri).get_backend_name() == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            yield session

    async def ensure_schema(self) -> None:
        """
        Create the invoice tables if they do not exist

        Safe to call repeatedly. Errors are logged and re-raised: the service
        must not start serving against a missing or broken schema.
        """
        logger.info("Ensuring database schema")
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        except Exception:
            logger.exception("Failed to ensure database schema")
            raise
        logger.info("Database schema is up to date")

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")
