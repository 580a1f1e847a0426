from .client import MongoConnection
from .settings import MongoSettings, get_mongo_settings
from .store import DocumentCityStore

__all__ = [
    "DocumentCityStore",
    "MongoConnection",
    "MongoSettings",
    "get_mongo_settings",
]
