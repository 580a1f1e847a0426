from __future__ import annotations

import logging

from fastapi import APIRouter

from cities_service.api.fastapi.dependencies import DocumentStoreDep
from cities_service.schemas import DocumentCity

logger = logging.getLogger(__name__)

ROUTER_PREFIX = "/mongo"
ROUTER_TAG = "mongo"

router = APIRouter()


@router.get("/cities", response_model=list[DocumentCity], response_model_exclude_defaults=True)
async def list_mongo_cities(store: DocumentStoreDep) -> list[DocumentCity]:
    logger.info("Cities mongo request")
    return await store.list_all()
