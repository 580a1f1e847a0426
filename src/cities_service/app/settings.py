from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    name: str = "Cities Service"
    version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 12345

    model_config = SettingsConfigDict(
        env_prefix="APP_",            # APP_NAME, APP_HOST, APP_PORT
        extra="ignore",
    )


@lru_cache
def get_app_settings(**kwargs) -> AppSettings:
    # Only include kwargs that are not None, so defaults in AppSettings are used
    filtered_kwargs = {k: v for k, v in kwargs.items() if v is not None}
    return AppSettings(**filtered_kwargs)
