from __future__ import annotations

import asyncio
import logging
from typing import Any

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from cities_service.exceptions import StoreError, StoreTimeoutError
from cities_service.schemas import DocumentCity

logger = logging.getLogger(__name__)


class DocumentCityStore:
    """
    Read-only view of the cities collection.

    `collection` is anything exposing Motor's `find()` returning an async cursor.
    """

    name = "mongo"

    def __init__(self, collection: Any, *, query_timeout_seconds: float = 30.0):
        self.collection = collection
        self.query_timeout_seconds = query_timeout_seconds

    async def list_all(self) -> list[DocumentCity]:
        try:
            return await asyncio.wait_for(self._find_all(), timeout=self.query_timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise StoreTimeoutError(
                self.name, f"list cities: no answer within {self.query_timeout_seconds:g}s"
            ) from exc
        except PyMongoError as exc:
            raise StoreError(self.name, str(exc)) from exc

    async def _find_all(self) -> list[DocumentCity]:
        cities: list[DocumentCity] = []
        cursor = self.collection.find({})
        try:
            async for doc in cursor:
                try:
                    cities.append(DocumentCity.model_validate(doc))
                except ValidationError as exc:
                    logger.warning(
                        "Skipping malformed city document _id=%s: %s",
                        doc.get("_id") if isinstance(doc, dict) else None,
                        exc,
                        extra={"store": self.name},
                    )
        finally:
            await cursor.close()
        return cities
