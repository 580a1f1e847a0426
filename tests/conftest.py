"""
Root conftest.py for cities-service tests.

This file provides:
1. Mongo collection doubles seeded with city documents
2. A file-backed SQLite database carrying the `Cities` table
3. The FastAPI app and a TestClient wired to both stores
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator
from unittest.mock import Mock

import pytest
from bson import ObjectId
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from cities_service.api.fastapi import create_app
from cities_service.db.base import Base
from cities_service.db.nosql.store import DocumentCityStore
from cities_service.db.settings import DBSettings
from tests.helpers import make_collection, sqlite_async_url


# =============================================================================
# MONGO FIXTURES
# =============================================================================


@pytest.fixture
def city_documents() -> list[dict[str, Any]]:
    return [
        {"_id": ObjectId("64b7f0c2a1b2c3d4e5f60718"), "city": "Krakow", "country": "Poland"},
        {"_id": ObjectId("64b7f0c2a1b2c3d4e5f60719"), "city": "Lisbon", "country": "Portugal"},
    ]


@pytest.fixture
def mongo_collection(city_documents) -> Mock:
    return make_collection(city_documents)


@pytest.fixture
def document_store(mongo_collection) -> DocumentCityStore:
    return DocumentCityStore(mongo_collection, query_timeout_seconds=1.0)


# =============================================================================
# SQL FIXTURES
# =============================================================================


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    """URL of a fresh SQLite file holding an empty `Cities` table."""
    url = sqlite_async_url(tmp_path / "cities.db")
    engine = create_engine(url.replace("sqlite+aiosqlite", "sqlite", 1))
    Base.metadata.create_all(engine)
    engine.dispose()
    return url


@pytest.fixture
def unreachable_url(tmp_path: Path) -> str:
    # sqlite cannot create a file inside a directory that does not exist
    return sqlite_async_url(tmp_path / "missing-dir" / "cities.db")


@pytest.fixture
def db_settings(sqlite_url: str) -> DBSettings:
    return DBSettings(database_url=sqlite_url, query_timeout_seconds=5.0)


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def app(db_settings: DBSettings, document_store: DocumentCityStore) -> FastAPI:
    return create_app(db_settings=db_settings, document_store=document_store)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c
