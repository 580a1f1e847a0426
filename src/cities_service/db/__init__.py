from .base import Base
from .engine import DBEngine
from .models import City
from .settings import DBSettings, get_db_settings
from .store import RelationalCityStore

__all__ = [
    "Base",
    "City",
    "DBEngine",
    "DBSettings",
    "get_db_settings",
    "RelationalCityStore",
]
