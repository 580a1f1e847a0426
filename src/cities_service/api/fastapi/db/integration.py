from __future__ import annotations

import logging
from contextlib import AsyncExitStack, asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from cities_service.db.engine import DBEngine
from cities_service.db.nosql.client import MongoConnection
from cities_service.db.nosql.settings import MongoSettings, get_mongo_settings
from cities_service.db.nosql.store import DocumentCityStore
from cities_service.db.settings import DBSettings, get_db_settings
from cities_service.db.store import RelationalCityStore

logger = logging.getLogger(__name__)


def attach_stores(
        app: FastAPI,
        *,
        db_settings: Optional[DBSettings] = None,
        mongo_settings: Optional[MongoSettings] = None,
        document_store: Optional[DocumentCityStore] = None,
        relational_store: Optional[RelationalCityStore] = None,
) -> None:
    """
    Compose a lifespan that opens both stores and exposes them on `app.state`.

    Stores passed in explicitly are used as-is and are not closed on shutdown.
    The relational store is pinged before the app accepts traffic; a failed
    ping aborts startup.
    """
    existing = getattr(app.router, "lifespan_context", None)  # type: ignore[attr-defined]

    @asynccontextmanager
    async def composed_lifespan(_app: FastAPI):
        async with AsyncExitStack() as stack:
            docs = document_store
            if docs is None:
                mongo_cfg = mongo_settings or get_mongo_settings()
                mongo = MongoConnection(mongo_cfg)
                stack.callback(mongo.close)
                docs = DocumentCityStore(
                    mongo.collection(), query_timeout_seconds=mongo_cfg.query_timeout_seconds
                )
                logger.info(
                    "Mongo attached: url=%s database=%s collection=%s",
                    mongo_cfg.sanitized_url,
                    mongo_cfg.database,
                    mongo_cfg.collection,
                )

            rows = relational_store
            if rows is None:
                db_cfg = db_settings or get_db_settings()
                engine = DBEngine(db_cfg)
                stack.push_async_callback(engine.dispose)
                rows = RelationalCityStore(
                    engine, query_timeout_seconds=db_cfg.query_timeout_seconds
                )
                logger.info(
                    "DB attached: url=%s driver=%s pool_size=%s max_overflow=%s",
                    engine.sanitized_url,
                    engine.engine.url.get_backend_name(),
                    db_cfg.pool_size,
                    db_cfg.max_overflow,
                )

            await rows.ping()
            logger.info("Relational store connected")

            _app.state.document_store = docs  # type: ignore[attr-defined]
            _app.state.relational_store = rows  # type: ignore[attr-defined]
            try:
                if existing:
                    async with existing(_app):  # type: ignore[misc]
                        yield
                else:
                    yield
            finally:
                _app.state.document_store = None  # type: ignore[attr-defined]
                _app.state.relational_store = None  # type: ignore[attr-defined]

    app.router.lifespan_context = composed_lifespan  # type: ignore[attr-defined]
