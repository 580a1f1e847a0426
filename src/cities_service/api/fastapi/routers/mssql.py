from __future__ import annotations

import logging

from fastapi import APIRouter

from cities_service.api.fastapi.dependencies import RelationalStoreDep
from cities_service.schemas import RelationalCity

logger = logging.getLogger(__name__)

ROUTER_PREFIX = "/mssql"
ROUTER_TAG = "mssql"

# The create endpoint does not read a body; every insert is this city.
DEFAULT_CITY_NAME = "Warsaw"
DEFAULT_CITY_COUNTRY = "Poland"

router = APIRouter()


@router.get("/cities", response_model=list[RelationalCity])
async def list_mssql_cities(store: RelationalStoreDep) -> list[RelationalCity]:
    logger.info("Cities mssql request")
    return await store.list_all()


@router.post("/cities")
async def create_mssql_city(store: RelationalStoreDep) -> int:
    logger.info("Create city mssql request")
    return await store.insert_one(DEFAULT_CITY_NAME, DEFAULT_CITY_COUNTRY)
