import logging
from typing import Optional

from fastapi import FastAPI

from cities_service.api.fastapi.db import attach_stores
from cities_service.api.fastapi.middleware.errors import (
    CatchAllExceptionMiddleware,
    register_error_handlers,
)
from cities_service.api.fastapi.routers import register_all_routers
from cities_service.app import CURRENT_ENVIRONMENT
from cities_service.app.settings import AppSettings, get_app_settings
from cities_service.db.nosql.settings import MongoSettings
from cities_service.db.nosql.store import DocumentCityStore
from cities_service.db.settings import DBSettings
from cities_service.db.store import RelationalCityStore

logger = logging.getLogger(__name__)


def create_app(
        *,
        app_settings: Optional[AppSettings] = None,
        db_settings: Optional[DBSettings] = None,
        mongo_settings: Optional[MongoSettings] = None,
        document_store: Optional[DocumentCityStore] = None,
        relational_store: Optional[RelationalCityStore] = None,
) -> FastAPI:
    """
    Build the cities API.

    With no arguments everything comes from the environment; tests inject
    settings or ready-made stores.
    """
    app_settings = app_settings or get_app_settings()

    app = FastAPI(title=app_settings.name, version=app_settings.version)

    app.add_middleware(CatchAllExceptionMiddleware)
    register_error_handlers(app)
    register_all_routers(app)

    attach_stores(
        app,
        db_settings=db_settings,
        mongo_settings=mongo_settings,
        document_store=document_store,
        relational_store=relational_store,
    )

    logger.info(f"{app_settings.version} version of {app_settings.name} initialized [env: {CURRENT_ENVIRONMENT}]")
    return app


__all__ = ["create_app"]
