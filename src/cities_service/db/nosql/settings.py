from __future__ import annotations

from functools import lru_cache
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MongoSettings(BaseSettings):
    """
    Document store settings.

    Env support:
      - MONGO_URL, MONGO_DATABASE, MONGO_COLLECTION,
        MONGO_CONNECT_TIMEOUT_SECONDS, MONGO_QUERY_TIMEOUT_SECONDS
    """

    url: Optional[str] = Field(default=None)
    database: str = Field(default="CitiesService")
    collection: str = Field(default="cities")
    connect_timeout_seconds: float = Field(default=10.0, gt=0)
    query_timeout_seconds: float = Field(default=30.0, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="MONGO_",
        env_file=".env",
        extra="ignore",
    )

    @property
    def resolved_url(self) -> str:
        return self.url or "mongodb://localhost:27017"

    @property
    def sanitized_url(self) -> str:
        parts = urlsplit(self.resolved_url)
        if "@" not in parts.netloc:
            return self.resolved_url
        netloc = "***@" + parts.netloc.rsplit("@", 1)[1]
        return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


@lru_cache
def get_mongo_settings(**kwargs) -> MongoSettings:
    filtered = {k: v for k, v in kwargs.items() if v is not None}
    return MongoSettings(**filtered)
