from __future__ import annotations

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from .settings import MongoSettings


class MongoConnection:
    """Long-lived Motor client; the driver pools and connects lazily."""

    def __init__(self, settings: MongoSettings):
        self.settings = settings
        timeout_ms = int(settings.connect_timeout_seconds * 1000)
        self._client: AsyncIOMotorClient = AsyncIOMotorClient(
            settings.resolved_url,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
        )

    def collection(self) -> AsyncIOMotorCollection:
        return self._client[self.settings.database][self.settings.collection]

    async def ping(self) -> None:
        await self._client.admin.command("ping")

    def close(self) -> None:
        self._client.close()
