from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class DBSettings(BaseSettings):
    """
    Relational store settings.

    Env support:
      - DB_DATABASE_URL (or DATABASE_URL) wins when set, e.g. for SQLite in tests.
      - Otherwise the URL is assembled from DB_SERVER, DB_PORT, DB_USER,
        DB_PASSWORD, DB_DATABASE and DB_ODBC_DRIVER against SQL Server.
    """

    database_url: Optional[str] = Field(default=None)
    server: str = Field(default="localhost")
    port: int = Field(default=1433)
    user: str = Field(default="sa")
    password: str = Field(default="")
    database: str = Field(default="CitiesService")
    odbc_driver: str = Field(default="ODBC Driver 18 for SQL Server")
    trust_server_certificate: bool = Field(default=True)

    echo: bool = Field(default=False)
    pool_size: int = Field(default=10)
    max_overflow: int = Field(default=20)
    pool_recycle: Optional[int] = Field(default=None)  # seconds; None -> 1800
    query_timeout_seconds: float = Field(default=30.0, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="DB_",        # DB_SERVER, DB_PORT, ...
        env_file=".env",
        extra="ignore",
    )

    @property
    def resolved_database_url(self) -> str:
        url = self.database_url or os.getenv("DATABASE_URL")
        if url:
            return url
        query = {"driver": self.odbc_driver}
        if self.trust_server_certificate:
            query["TrustServerCertificate"] = "yes"
        return URL.create(
            "mssql+aioodbc",
            username=self.user,
            password=self.password or None,
            host=self.server,
            port=self.port,
            database=self.database,
            query=query,
        ).render_as_string(hide_password=False)


@lru_cache
def get_db_settings(**kwargs) -> DBSettings:
    # Only include kwargs that are not None, so defaults in DBSettings are used
    filtered = {k: v for k, v in kwargs.items() if v is not None}
    return DBSettings(**filtered)
