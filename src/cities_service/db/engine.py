from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from .settings import DBSettings


class DBEngine:
    """Owns the async engine (the connection pool) behind the relational store.

    Liveness is checked by the store itself before every operation, so the
    pool does not pre-ping on checkout.
    """

    def __init__(self, settings: DBSettings):
        url = settings.resolved_database_url
        engine_kwargs: dict[str, Any] = {"echo": settings.echo}
        if url.startswith("sqlite+aiosqlite://") and ":memory:" in url:
            engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_size"] = settings.pool_size
            engine_kwargs["max_overflow"] = settings.max_overflow
            engine_kwargs["pool_recycle"] = settings.pool_recycle or 1800

        self._engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self._sessions = async_sessionmaker(bind=self._engine, expire_on_commit=False)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def sanitized_url(self) -> str:
        return self._engine.url.render_as_string(hide_password=True)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        sess = self._sessions()
        try:
            yield sess
        finally:
            await sess.close()

    async def dispose(self) -> None:
        await self._engine.dispose()
