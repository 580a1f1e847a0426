from . import api, app

from .exceptions import (
    CitiesServiceError,
    StoreError,
    StoreTimeoutError,
    StoreUnavailableError,
)

__all__ = [
    # Modules
    "app",
    "api",
    # Errors
    "CitiesServiceError",
    "StoreError",
    "StoreTimeoutError",
    "StoreUnavailableError",
]
