"""
Shared test doubles and SQLite helpers.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Iterable, Optional
from unittest.mock import Mock

from sqlalchemy import create_engine, text


class FakeCursor:
    """Async cursor over a list of documents.

    `error` is raised when iteration reaches index `error_at`;
    `delay` sleeps before every document to simulate a hung backend.
    """

    def __init__(
        self,
        docs: Iterable[dict[str, Any]],
        *,
        error: Optional[Exception] = None,
        error_at: int = 0,
        delay: float = 0.0,
    ):
        self._docs = list(docs)
        self._index = 0
        self._error = error
        self._error_at = error_at
        self._delay = delay
        self.closed = False

    def __aiter__(self) -> "FakeCursor":
        return self

    async def __anext__(self) -> dict[str, Any]:
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None and self._index == self._error_at:
            raise self._error
        if self._index >= len(self._docs):
            raise StopAsyncIteration
        doc = self._docs[self._index]
        self._index += 1
        return doc

    async def close(self) -> None:
        self.closed = True


def make_collection(
    docs: Iterable[dict[str, Any]] = (),
    *,
    find_error: Optional[Exception] = None,
    **cursor_kwargs: Any,
) -> Mock:
    """Mock Motor collection whose `find()` returns a FakeCursor over `docs`.

    The most recent cursor is kept on `collection.last_cursor`.
    """
    collection = Mock()
    docs = list(docs)
    if find_error is not None:
        collection.find = Mock(side_effect=find_error)
        return collection

    def _find(*_args: Any, **_kwargs: Any) -> FakeCursor:
        collection.last_cursor = FakeCursor(docs, **cursor_kwargs)
        return collection.last_cursor

    collection.find = Mock(side_effect=_find)
    return collection


def sqlite_async_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


def _sync_engine(url: str):
    return create_engine(url.replace("sqlite+aiosqlite", "sqlite", 1))


def run_sql(url: str, *statements: str) -> None:
    """Run raw statements against an aiosqlite URL through the sync sqlite driver."""
    engine = _sync_engine(url)
    try:
        with engine.begin() as conn:
            for stmt in statements:
                conn.execute(text(stmt))
    finally:
        engine.dispose()


def fetch_rows(url: str, sql: str) -> list[tuple]:
    engine = _sync_engine(url)
    try:
        with engine.connect() as conn:
            return [tuple(r) for r in conn.execute(text(sql))]
    finally:
        engine.dispose()
