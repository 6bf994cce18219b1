# catalog/database.py
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from .config import settings
from .models import Base

logger = logging.getLogger(__name__)


def _casefold(value):
    return value.casefold() if value is not None else None


def _register_sqlite_functions(dbapi_conn, connection_record):
    # SQLite lower()/LIKE only fold ASCII
    dbapi_conn.create_function("casefold", 1, _casefold)


class Store:
    """Handle on the relational store: one async engine and its session factory.

    Built once when the process starts and disposed when it stops. Each
    query borrows a pooled connection through ``session()``.

    On SQLite a Unicode ``casefold()`` SQL function is installed on every
    connection and ``unicode_fold`` is set, so searches can use it.
    """

    def __init__(self, database_url: Optional[str] = None, echo: Optional[bool] = None):
        self.database_url = database_url or settings.database_url
        engine_kwargs = {"echo": settings.db_echo if echo is None else echo}
        if not self.database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=settings.db_pool_size,
                pool_timeout=5,
                pool_pre_ping=True,
            )
        self.engine = create_async_engine(self.database_url, **engine_kwargs)
        self.unicode_fold = self.engine.dialect.name == "sqlite"
        if self.unicode_fold:
            event.listen(self.engine.sync_engine, "connect", _register_sqlite_functions)
        self.sessionmaker = async_sessionmaker(self.engine, expire_on_commit=False)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.sessionmaker() as session:
            yield session

    async def connect(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Database connected")

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database disconnected")
