from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from cities_service.db.nosql.store import DocumentCityStore
from cities_service.db.store import RelationalCityStore
from cities_service.exceptions import StoreUnavailableError


def get_document_store(request: Request) -> DocumentCityStore:
    store = getattr(request.app.state, "document_store", None)
    if store is None:
        raise StoreUnavailableError("mongo", "document store is not initialized")
    return store


def get_relational_store(request: Request) -> RelationalCityStore:
    store = getattr(request.app.state, "relational_store", None)
    if store is None:
        raise StoreUnavailableError("mssql", "relational store is not initialized")
    return store


DocumentStoreDep = Annotated[DocumentCityStore, Depends(get_document_store)]
RelationalStoreDep = Annotated[RelationalCityStore, Depends(get_relational_store)]
