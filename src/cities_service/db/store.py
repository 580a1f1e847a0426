"""
Relational city store (SQL Server in production, any SQLAlchemy async dialect works).

Every public operation re-checks liveness, then runs one statement, and is
bounded by `query_timeout_seconds`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, TypeVar

from pydantic import ValidationError
from sqlalchemy import Insert, insert, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cities_service.exceptions import StoreError, StoreTimeoutError, StoreUnavailableError
from cities_service.schemas import RelationalCity

from .engine import DBEngine
from .models import City

logger = logging.getLogger(__name__)

T = TypeVar("T")


def insert_city_statement(name: str, country: str) -> Insert:
    """INSERT that hands back the new Id in the same statement (OUTPUT on SQL Server)."""
    return insert(City).values(name=name, country=country).returning(City.id)


class RelationalCityStore:
    name = "mssql"

    def __init__(self, engine: DBEngine, *, query_timeout_seconds: float = 30.0):
        self.engine = engine
        self.query_timeout_seconds = query_timeout_seconds

    async def _bounded(self, op: Awaitable[T], what: str) -> T:
        try:
            return await asyncio.wait_for(op, timeout=self.query_timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise StoreTimeoutError(
                self.name, f"{what}: no answer within {self.query_timeout_seconds:g}s"
            ) from exc

    async def _require_alive(self, session: AsyncSession) -> None:
        try:
            await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as exc:
            raise StoreUnavailableError(self.name, str(exc)) from exc

    async def ping(self) -> None:
        """Raise StoreUnavailableError unless the database answers `SELECT 1`."""

        async def _ping() -> None:
            async with self.engine.session() as session:
                await self._require_alive(session)

        await self._bounded(_ping(), "ping")

    async def list_all(self) -> list[RelationalCity]:
        return await self._bounded(self._list_all(), "list cities")

    async def _list_all(self) -> list[RelationalCity]:
        async with self.engine.session() as session:
            await self._require_alive(session)
            try:
                result = await session.execute(select(City.id, City.name, City.country))
                rows = result.all()
            except SQLAlchemyError as exc:
                raise StoreError(self.name, str(exc)) from exc

        cities: list[RelationalCity] = []
        for row in rows:
            id_, name, country = row
            try:
                cities.append(RelationalCity(id=id_, name=name, country=country))
            except ValidationError as exc:
                # one bad row fails the whole listing
                raise StoreError(self.name, f"cannot read row with Id={id_!r}: {exc}") from exc
        return cities

    async def insert_one(self, name: str, country: str) -> int:
        return await self._bounded(self._insert_one(name, country), "insert city")

    async def _insert_one(self, name: str, country: str) -> int:
        stmt = insert_city_statement(name, country)
        async with self.engine.session() as session:
            await self._require_alive(session)
            try:
                new_id = (await session.execute(stmt)).scalar_one()
                await session.commit()
            except SQLAlchemyError as exc:
                raise StoreError(self.name, str(exc)) from exc
        logger.debug("Inserted city %s/%s with Id=%s", name, country, new_id)
        return int(new_id)
